from __future__ import annotations

from typing import Sequence

from el_inspector.core.deck import build_deck, can_deal, secret_word_of
from el_inspector.core.errors import InspectorError, NameTooLong, InsufficientPlayers
from el_inspector.core.roster import Roster
from el_inspector.core.shuffle import RandBelow, build_rng
from el_inspector.core.types import (
    GameConfig,
    ImpostorCard,
    Phase,
    RoleCard,
    RoundState,
    RoundView,
    WordCard,
)
from el_inspector.logging.transcript import RoundTranscript


class RoundStateMachine:
    """
    Single-device reveal protocol for one group of players.

    Phase cycle:
      SETUP -> REVEAL -> END -> (replay) REVEAL ...
      any phase -> (reset) SETUP

    Each card is handled by a two-step gesture on `toggle_or_advance`: the
    first call shows the card at the cursor, the second hides it and moves
    the cursor forward by one. The cursor never moves backwards, and a card
    cannot be passed without having been shown.

    Calls made in the wrong phase are ignored and return False. Operations
    that can fail (`add_player`, `start_round`, `replay_same_roster`) raise
    an InspectorError after recording it in `last_error`; the state is left
    exactly as it was.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        randbelow: RandBelow | None = None,
        roster: Roster | None = None,
        transcript: RoundTranscript | None = None,
    ):
        self.config = config if config is not None else GameConfig()
        self.randbelow = randbelow or build_rng(self.config.seed).randrange
        self.roster = (
            roster if roster is not None else Roster(max_name_length=self.config.max_name_length)
        )
        self.transcript = transcript if transcript is not None else RoundTranscript()
        self.state = RoundState()
        self.round_number: int = 0
        self.last_error: InspectorError | None = None
        # Names the current deck was dealt from; replays reuse them.
        self._dealt_roster: tuple[str, ...] = ()

    # ------------------------------------------------------------------
    # Observables
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def deck(self) -> tuple[RoleCard, ...]:
        return self.state.deck

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def revealed(self) -> bool:
        return self.state.revealed

    @property
    def current_card(self) -> ImpostorCard | WordCard | None:
        return self.state.current_card

    @property
    def secret_word(self) -> str | None:
        if self.phase == Phase.SETUP:
            return None
        return secret_word_of(self.state.deck)

    @property
    def can_start(self) -> bool:
        return can_deal(
            self.roster.size(),
            impostor_count=self.config.impostor_count,
            min_players=self.config.min_players,
        )

    def progress_label(self) -> str | None:
        if self.phase != Phase.REVEAL:
            return None
        return f"Card {self.cursor + 1} of {len(self.deck)}"

    def view(self) -> RoundView:
        card = self.current_card if self.revealed else None
        return RoundView(
            phase=self.phase,
            round_number=self.round_number,
            player_count=self.roster.size(),
            impostor_count=self.config.impostor_count,
            can_start=self.can_start,
            progress=self.progress_label(),
            revealed=self.revealed,
            card_kind=card.kind if card is not None else None,
            card_label=card.label if card is not None else None,
            error=str(self.last_error) if self.last_error is not None else None,
        )

    # ------------------------------------------------------------------
    # Roster edits (setup only)
    # ------------------------------------------------------------------

    def add_player(self, name: str) -> bool:
        if not self._in_phase(Phase.SETUP, "add_player"):
            return False
        try:
            added = self.roster.add(name)
        except NameTooLong as e:
            self._fail("add_player", e)
            raise
        if not added:
            self.transcript.log_ignored("add_player", self.phase.value)
            return False
        self.last_error = None
        self.transcript.log_player_added(self.roster.size())
        return True

    def remove_last_player(self) -> str | None:
        if not self._in_phase(Phase.SETUP, "remove_last_player"):
            return None
        removed = self.roster.remove_last()
        if removed is not None:
            self.last_error = None
            self.transcript.log_player_removed(self.roster.size())
        return removed

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start_round(self, roster: Sequence[str] | None = None) -> bool:
        if not self._in_phase(Phase.SETUP, "start_round"):
            return False
        names = tuple(roster) if roster is not None else self.roster.snapshot()
        self._deal("start_round", names)
        return True

    def replay_same_roster(self, roster: Sequence[str] | None = None) -> bool:
        """Deal a fresh deck, with a freshly drawn word, to the same group."""
        if not self._in_phase(Phase.END, "replay_same_roster"):
            return False
        names = tuple(roster) if roster is not None else self._dealt_roster
        self._deal("replay_same_roster", names)
        return True

    def toggle_or_advance(self) -> bool:
        if not self._in_phase(Phase.REVEAL, "toggle_or_advance"):
            return False

        state = self.state
        total = len(state.deck)
        if not state.revealed:
            self.state = state.model_copy(update={"revealed": True})
            self.transcript.log_card_shown(state.cursor, total)
        else:
            self.transcript.log_card_passed(state.cursor, total)
            next_cursor = state.cursor + 1
            if next_cursor >= total:
                self.state = state.model_copy(update={"revealed": False, "phase": Phase.END})
                self.transcript.log_round_end(self.round_number)
            else:
                self.state = state.model_copy(update={"cursor": next_cursor, "revealed": False})

        self.last_error = None
        return True

    def reset_all(self):
        """Forget the group and go back to setup. Valid from any phase."""
        self.roster.clear()
        self.state = RoundState()
        self.round_number = 0
        self._dealt_roster = ()
        self.last_error = None
        self.transcript.log_reset()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _deal(self, operation: str, names: tuple[str, ...]):
        try:
            deck = build_deck(
                names,
                self.randbelow,
                impostor_count=self.config.impostor_count,
                min_players=self.config.min_players,
            )
        except InsufficientPlayers as e:
            self._fail(operation, e)
            raise

        self.state = RoundState(phase=Phase.REVEAL, deck=deck, cursor=0, revealed=False)
        self._dealt_roster = names
        self.round_number += 1
        self.last_error = None
        self.transcript.log_round_start(
            self.round_number, len(deck), self.config.impostor_count
        )

    def _in_phase(self, phase: Phase, operation: str) -> bool:
        if self.phase == phase:
            return True
        self.transcript.log_ignored(operation, self.phase.value)
        return False

    def _fail(self, operation: str, error: InspectorError):
        self.last_error = error
        self.transcript.log_error(operation, str(error))
