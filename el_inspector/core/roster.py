from __future__ import annotations

from el_inspector.core.errors import NameTooLong
from el_inspector.core.types import MAX_NAME_LENGTH


class Roster:
    """
    Ordered list of player-submitted names.

    Only the tail is ever touched: `add` appends, `remove_last` undoes the most
    recent addition. Duplicate names are allowed and count as separate players.
    """

    def __init__(self, max_name_length: int = MAX_NAME_LENGTH):
        self.max_name_length = max_name_length
        self._names: list[str] = []

    def add(self, name: str) -> bool:
        """
        Append a name after trimming surrounding whitespace.

        Returns False (and changes nothing) for blank input.
        Raises NameTooLong if the trimmed name exceeds the length limit.
        """
        cleaned = name.strip()
        if not cleaned:
            return False
        if len(cleaned) > self.max_name_length:
            raise NameTooLong(cleaned, self.max_name_length)
        self._names.append(cleaned)
        return True

    def remove_last(self) -> str | None:
        if not self._names:
            return None
        return self._names.pop()

    def clear(self):
        self._names = []

    def size(self) -> int:
        return len(self._names)

    def snapshot(self) -> tuple[str, ...]:
        return tuple(self._names)

    def __len__(self) -> int:
        return len(self._names)
