"""Text selection anchored at one index and extended to another."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Selection:
    """A possibly reversed span of text between ``start`` and ``end``."""

    start: int = 0
    end: int = 0
    active: bool = False

    def begin(self, position: int) -> None:
        self.start = position
        self.end = position
        self.active = True

    def extend(self, position: int) -> None:
        self.end = position

    def clear(self) -> None:
        self.start = 0
        self.end = 0
        self.active = False

    def select_all(self, text_length: int) -> None:
        self.start = 0
        self.end = text_length
        self.active = True

    def range(self) -> tuple[int, int]:
        """Return ``(low, high)`` with the bounds in ascending order."""
        if self.start < self.end:
            return self.start, self.end
        return self.end, self.start