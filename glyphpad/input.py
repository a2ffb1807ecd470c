"""Keyboard and text-entry handling that edits the editor state."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from glyphpad.cursor import Cursor
from glyphpad.selection import Selection
from glyphpad.textbuffer import TextBuffer

BACKSPACE = "\x08"
DELETE = "\x7f"
TAB_WIDTH = 4
ZOOM_STEP = 10.0
MIN_ZOOMABLE_HEIGHT = 20.0


class Key(enum.Enum):
    """Keys with an editing action of their own."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    TAB = enum.auto()
    Z = enum.auto()
    X = enum.auto()
    C = enum.auto()
    V = enum.auto()


@dataclass
class EditorState:
    """Everything that input events may change."""

    buffer: TextBuffer = field(default_factory=TextBuffer)
    cursor: Cursor = field(default_factory=Cursor)
    selection: Selection = field(default_factory=Selection)
    pixel_height: float = 100.0
    bezier_steps: int = 10


class InputHandler:
    """Applies key presses and typed characters to an :class:`EditorState`."""

    def _move(self, state: EditorState, key: Key) -> None:
        cursor, buffer = state.cursor, state.buffer
        if key is Key.UP:
            cursor.move_up(buffer)
        elif key is Key.DOWN:
            cursor.move_down(buffer)
        elif key is Key.LEFT:
            cursor.move_left()
        else:
            cursor.move_right(len(buffer))

    def handle_key_press(
        self, state: EditorState, key: Optional[Key], shift: bool, ctrl: bool
    ) -> None:
        buffer, cursor, selection = state.buffer, state.cursor, state.selection

        if key in (Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT):
            if shift:
                if not selection.active:
                    selection.begin(cursor.index)
                self._move(state, key)
                selection.extend(cursor.index)
            elif key is Key.RIGHT and selection.active:
                _, end = selection.range()
                cursor.index = end
                selection.clear()
            else:
                if selection.active:
                    selection.clear()
                self._move(state, key)
        elif key is Key.TAB:
            for _ in range(TAB_WIDTH):
                buffer.insert_char(cursor.index, " ")
                cursor.move_right(len(buffer))
        elif not ctrl:
            return
        elif key is Key.Z:
            buffer.undo()
            cursor.index = min(cursor.index, len(buffer))
        elif key is Key.X:
            start, end = selection.range()
            buffer.delete_range(start, end, True)
        elif key is Key.C:
            start, end = selection.range()
            buffer.copy_selection(start, end)
        elif key is Key.V:
            pasted = buffer.copied
            buffer.insert_text(cursor.index, pasted)
            cursor.index += len(pasted)

    def _delete_selection(self, state: EditorState) -> None:
        start, end = state.selection.range()
        state.selection.clear()
        state.buffer.delete_range(start, end, False)

    def handle_text_input(self, state: EditorState, char: str, ctrl: bool) -> None:
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        buffer, cursor, selection = state.buffer, state.cursor, state.selection

        if ctrl:
            if char in ("+", "="):
                state.pixel_height += ZOOM_STEP
            elif char == "-" and state.pixel_height > MIN_ZOOMABLE_HEIGHT:
                state.pixel_height -= ZOOM_STEP
            return

        if char == BACKSPACE:
            if cursor.index > 0:
                if selection.active:
                    self._delete_selection(state)
                else:
                    buffer.delete_char(cursor.index - 1)
                    cursor.move_left()
            return

        if char == DELETE:
            if cursor.index < len(buffer):
                if selection.active:
                    self._delete_selection(state)
                else:
                    buffer.delete_char(cursor.index - 1)
            return

        if ord(char) >= 32 or char in ("\n", "\r"):
            if selection.active:
                start, end = selection.range()
                buffer.delete_range(start, end, False)
                cursor.index = start
                selection.clear()
            buffer.insert_char(cursor.index, char)
            cursor.move_right(len(buffer))