from __future__ import annotations

from typing import TYPE_CHECKING

from el_inspector.core.types import Phase

if TYPE_CHECKING:
    from el_inspector.core.round import RoundStateMachine

UNDO_COMMAND = "/undo"

# ---------------------------------------------------------------------------
# Static texts
# ---------------------------------------------------------------------------

TITLE = "El inspector"

SETUP_INSTRUCTIONS = """\
Pass the device around: each player secretly types one name.
Type a name and press Enter to add it. The list stays hidden.
  /undo        remove the last name
  (empty)      deal the cards
"""

REVEAL_INSTRUCTIONS = """\
Hand the device to the next player. Press Enter to see your card,
then press Enter again to hide it and pass the device on.
Do not show your card to anyone.
"""

END_TEXT = "All cards have been dealt!"


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def build_setup_status(game: RoundStateMachine) -> str:
    """Player count line shown under the name prompt."""
    view = game.view()
    line = f"Players: {view.player_count}    Impostors: {view.impostor_count}"
    if not view.can_start:
        line += (
            f"\nAt least {game.config.min_players} players are needed. "
            f'{view.impostor_count} cards say "IMPOSTOR" and the rest show '
            "one name picked at random from the list."
        )
    return line


def build_card_face(game: RoundStateMachine) -> str:
    """What the current holder sees, hidden or revealed."""
    view = game.view()
    if view.phase != Phase.REVEAL:
        return ""

    header = f"[{view.progress}]"
    if not view.revealed:
        return f"{header}\n\n    (card hidden)\n\nPress Enter to see your card."

    if view.card_kind == "impostor":
        body = "    IMPOSTOR"
    else:
        body = f"    Your word is\n    {view.card_label}"
    return f"{header}\n\n{body}\n\nPress Enter to hide it and pass the device."


def build_end_prompt(game: RoundStateMachine) -> str:
    return (
        f"{END_TEXT}\n"
        f"  replay   deal AGAIN (same group, {game.roster.size()} players)\n"
        "  new      new game (new names)\n"
        "  quit     leave"
    )
