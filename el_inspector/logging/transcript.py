from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


class RoundTranscript:
    """
    In-memory log of a pass-and-play session, kept as event dicts plus a
    human-readable rendering.

    Never records the secret word or the card order: the log is meant to be
    readable by anyone at the table.
    """

    def __init__(self):
        self.events: list[dict[str, Any]] = []

    def _append(self, event: str, **payload: Any):
        self.events.append(
            {
                "event": event,
                **payload,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )

    def log_player_added(self, player_count: int):
        self._append("player_added", player_count=player_count)

    def log_player_removed(self, player_count: int):
        self._append("player_removed", player_count=player_count)

    def log_round_start(self, round_number: int, player_count: int, impostor_count: int):
        self._append(
            "round_start",
            round_number=round_number,
            player_count=player_count,
            impostor_count=impostor_count,
        )

    def log_card_shown(self, cursor: int, total: int):
        self._append("card_shown", card=cursor + 1, total=total)

    def log_card_passed(self, cursor: int, total: int):
        self._append("card_hidden_advance", card=cursor + 1, total=total)

    def log_round_end(self, round_number: int):
        self._append("round_end", round_number=round_number)

    def log_reset(self):
        self._append("reset")

    def log_error(self, operation: str, message: str):
        self._append("error", operation=operation, message=message)

    def log_ignored(self, operation: str, phase: str):
        self._append("ignored", operation=operation, phase=phase)

    def render_text(self) -> str:
        lines: list[str] = []
        for event in self.events:
            kind = event["event"]
            if kind == "player_added":
                lines.append(f"  + player ({event['player_count']} total)")
            elif kind == "player_removed":
                lines.append(f"  - last player removed ({event['player_count']} total)")
            elif kind == "round_start":
                lines.append(
                    f"\n=== ROUND {event['round_number']} === "
                    f"{event['player_count']} players, {event['impostor_count']} impostors"
                )
            elif kind == "card_shown":
                lines.append(f"  card {event['card']}/{event['total']} shown")
            elif kind == "card_hidden_advance":
                lines.append(f"  card {event['card']}/{event['total']} hidden, passed on")
            elif kind == "round_end":
                lines.append(f"=== ROUND {event['round_number']} DEALT ===")
            elif kind == "reset":
                lines.append("\n=== RESET ===")
            elif kind == "error":
                lines.append(f"  ! {event['operation']}: {event['message']}")
            elif kind == "ignored":
                lines.append(f"  ({event['operation']} ignored during {event['phase']})")
        return "\n".join(lines)