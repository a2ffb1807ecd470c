"""Editable text with a clipboard and snapshot-based undo history."""

from __future__ import annotations


class TextBuffer:
    """A mutable string of text that keeps snapshots for undo."""

    def __init__(self, initial_text: str = "") -> None:
        self._text = initial_text
        self._copy = ""
        self._undo: list[str] = []
        self._redo: list[str] = []

    @property
    def text(self) -> str:
        """The current contents of the buffer."""
        return self._text

    @property
    def copied(self) -> str:
        """The text last stored by :meth:`copy_selection`."""
        return self._copy

    def __len__(self) -> int:
        return len(self._text)

    def __bool__(self) -> bool:
        return True

    @property
    def empty(self) -> bool:
        return not self._text

    def _clamp(self, index: int) -> int:
        return min(max(index, 0), len(self._text))

    def insert_char(self, index: int, char: str) -> None:
        """Insert one character at ``index``, clamped to the end of the text."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        index = self._clamp(index)
        self._undo.append(self._text)
        self._text = self._text[:index] + char + self._text[index:]

    def delete_char(self, index: int) -> None:
        """Delete the character at ``index``; out-of-range indexes are ignored."""
        if 0 <= index < len(self._text):
            self._undo.append(self._text)
            self._text = self._text[:index] + self._text[index + 1 :]

    def insert_text(self, index: int, text: str) -> None:
        """Insert ``text`` at ``index``, clamped to the end of the text."""
        index = self._clamp(index)
        self._undo.append(self._text)
        self._text = self._text[:index] + text + self._text[index:]

    def delete_range(self, start: int, end: int, copy: bool) -> None:
        """Delete ``[start, end)``, always recording an undo snapshot.

        ``copy`` marks the deletion as a cut; the clipboard is left unchanged.
        """
        self._undo.append(self._text)
        if start < end and 0 <= start < len(self._text):
            end = min(end, len(self._text))
            self._text = self._text[:start] + self._text[end:]

    def clear(self) -> None:
        """Empty the buffer without recording an undo snapshot."""
        self._text = ""

    def copy_selection(self, start: int, end: int) -> None:
        """Store ``[start, end)`` in the clipboard if the range is valid."""
        if start < end and 0 <= start < len(self._text):
            end = min(end, len(self._text))
            self._copy = self._text[start:end]

    def undo(self) -> None:
        """Restore the most recent snapshot, if any."""
        if self._undo:
            self._text = self._undo.pop()

    def redo(self) -> None:
        """Reapply the most recent redo snapshot, if any."""
        if self._redo:
            last = self._redo.pop()
            self._undo.append(last)
            self._text = last