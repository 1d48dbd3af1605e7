from __future__ import annotations

import unittest

from el_inspector.core.deck import build_deck, can_deal, secret_word_of
from el_inspector.core.errors import GameError, InsufficientPlayers
from el_inspector.core.shuffle import build_rng
from el_inspector.core.types import ImpostorCard, WordCard

ROSTER = ("Ana", "Beto", "Cora", "Deco")


class DeckTests(unittest.TestCase):
    def test_composition_for_many_sizes(self) -> None:
        rng = build_rng(11)
        for n in range(3, 12):
            roster = tuple(f"p{i}" for i in range(n))
            for _ in range(20):
                deck = build_deck(roster, rng.randrange)
                self.assertEqual(len(deck), n)
                impostors = [c for c in deck if isinstance(c, ImpostorCard)]
                words = [c for c in deck if isinstance(c, WordCard)]
                self.assertEqual(len(impostors), 2)
                self.assertEqual(len(words), n - 2)
                self.assertEqual(len({c.name for c in words}), 1)
                self.assertIn(words[0].name, roster)

    def test_card_variants(self) -> None:
        self.assertTrue(ImpostorCard().is_impostor)
        self.assertEqual(ImpostorCard().label, "IMPOSTOR")
        card = WordCard(name="Cora")
        self.assertFalse(card.is_impostor)
        self.assertEqual(card.label, "Cora")
        self.assertEqual(card.kind, "word")

    def test_custom_impostor_count(self) -> None:
        deck = build_deck(ROSTER, build_rng(3).randrange, impostor_count=3)
        self.assertEqual(sum(c.is_impostor for c in deck), 3)

    def test_too_few_players(self) -> None:
        with self.assertRaises(InsufficientPlayers) as ctx:
            build_deck(("Ana", "Beto"), build_rng(0).randrange)
        self.assertIsInstance(ctx.exception, GameError)
        self.assertEqual(ctx.exception.player_count, 2)

    def test_needs_at_least_one_word_card(self) -> None:
        with self.assertRaises(InsufficientPlayers):
            build_deck(ROSTER, build_rng(0).randrange, impostor_count=4)

    def test_failure_draws_nothing(self) -> None:
        calls: list[int] = []

        def randbelow(n: int) -> int:
            calls.append(n)
            return 0

        with self.assertRaises(InsufficientPlayers):
            build_deck(("Ana",), randbelow)
        self.assertEqual(calls, [])

    def test_can_deal(self) -> None:
        self.assertFalse(can_deal(2))
        self.assertTrue(can_deal(3))
        self.assertFalse(can_deal(3, impostor_count=3))
        self.assertTrue(can_deal(1, impostor_count=0, min_players=1))

    def test_repeated_builds_redraw(self) -> None:
        rng = build_rng(42)
        decks = {build_deck(ROSTER, rng.randrange) for _ in range(50)}
        self.assertGreater(len(decks), 1)
        words = {secret_word_of(d) for d in decks}
        self.assertGreater(len(words), 1)

    def test_secret_word_of(self) -> None:
        self.assertEqual(secret_word_of((ImpostorCard(), WordCard(name="Ana"))), "Ana")
        self.assertIsNone(secret_word_of(()))
