from __future__ import annotations

from typing import Sequence

from el_inspector.core.errors import InsufficientPlayers
from el_inspector.core.shuffle import RandBelow, pick_one, shuffle
from el_inspector.core.types import IMPOSTOR_COUNT, MIN_PLAYERS, ImpostorCard, RoleCard, WordCard

IMPOSTOR_CARD = ImpostorCard()


# ---------------------------------------------------------------------------
# Preconditions
# ---------------------------------------------------------------------------

def can_deal(
    player_count: int,
    impostor_count: int = IMPOSTOR_COUNT,
    min_players: int = MIN_PLAYERS,
) -> bool:
    """Whether a roster of this size leaves at least one word card."""
    return player_count >= impostor_count + 1 and player_count >= min_players


# ---------------------------------------------------------------------------
# Deck construction
# ---------------------------------------------------------------------------

def build_deck(
    roster: Sequence[str],
    randbelow: RandBelow,
    impostor_count: int = IMPOSTOR_COUNT,
    min_players: int = MIN_PLAYERS,
) -> tuple[RoleCard, ...]:
    """
    Deal one card per roster entry.

    The secret word is drawn from the roster itself, then `impostor_count`
    impostor cards and `len(roster) - impostor_count` word cards are shuffled
    together. Every call re-draws both the word and the order.

    Raises InsufficientPlayers before drawing anything if the roster is too
    small.
    """
    n = len(roster)
    if not can_deal(n, impostor_count, min_players):
        raise InsufficientPlayers(n, min_players, impostor_count)

    secret = pick_one(roster, randbelow)
    word_card = WordCard(name=secret)

    cards: list[RoleCard] = [IMPOSTOR_CARD] * impostor_count
    cards.extend([word_card] * (n - impostor_count))
    return tuple(shuffle(cards, randbelow))


def secret_word_of(deck: Sequence[RoleCard]) -> str | None:
    """Return the shared word carried by a deck's word cards, if any."""
    for card in deck:
        if not card.is_impostor:
            return card.label
    return None
