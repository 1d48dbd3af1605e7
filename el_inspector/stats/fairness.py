from __future__ import annotations

from collections import Counter
from typing import Sequence

from pydantic import BaseModel

from el_inspector.core.deck import build_deck, secret_word_of
from el_inspector.core.shuffle import RandBelow, build_rng
from el_inspector.core.types import IMPOSTOR_COUNT, MIN_PLAYERS


class FairnessReport(BaseModel):
    """Observed vs. expected deal frequencies over repeated rounds."""

    trials: int
    player_count: int
    impostor_count: int
    impostor_rate_by_position: list[float]
    word_rate_by_name: dict[str, float]
    expected_impostor_rate: float
    expected_word_rate_by_name: dict[str, float]

    def max_deviation(self) -> float:
        gaps = [
            abs(rate - self.expected_impostor_rate)
            for rate in self.impostor_rate_by_position
        ]
        gaps.extend(
            abs(self.word_rate_by_name.get(name, 0.0) - expected)
            for name, expected in self.expected_word_rate_by_name.items()
        )
        return max(gaps) if gaps else 0.0


def run_fairness_trials(
    names: Sequence[str],
    trials: int,
    impostor_count: int = IMPOSTOR_COUNT,
    randbelow: RandBelow | None = None,
    min_players: int = MIN_PLAYERS,
) -> FairnessReport:
    """
    Deal `trials` rounds to the same roster and tally where impostor cards
    land and which name becomes the secret word.

    Rounds are dealt exactly as a replay would deal them, so the report
    measures the real deck builder rather than a model of it.
    """
    if trials < 1:
        raise ValueError(f"trials must be at least 1, got {trials}")

    randbelow = randbelow or build_rng().randrange
    roster = tuple(names)
    n = len(roster)

    impostor_hits = [0] * n
    word_hits: Counter[str] = Counter()

    for _ in range(trials):
        deck = build_deck(roster, randbelow, impostor_count=impostor_count, min_players=min_players)
        for position, card in enumerate(deck):
            if card.is_impostor:
                impostor_hits[position] += 1
        word_hits[secret_word_of(deck)] += 1

    entries = Counter(roster)
    return FairnessReport(
        trials=trials,
        player_count=n,
        impostor_count=impostor_count,
        impostor_rate_by_position=[hits / trials for hits in impostor_hits],
        word_rate_by_name={name: word_hits[name] / trials for name in entries},
        expected_impostor_rate=impostor_count / n,
        expected_word_rate_by_name={name: count / n for name, count in entries.items()},
    )
