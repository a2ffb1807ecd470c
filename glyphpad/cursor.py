"""Text cursor that moves across lines separated by carriage returns."""

from __future__ import annotations

from dataclasses import dataclass

from glyphpad.textbuffer import TextBuffer

LINE_BREAK = "\r"


@dataclass
class Cursor:
    """Caret position in the text plus its on-screen location and blink state."""

    index: int = 0
    screen_x: float = 0.0
    screen_y: float = 0.0
    visible: bool = True

    def set_screen_position(self, x: float, y: float) -> None:
        self.screen_x = x
        self.screen_y = y

    def toggle_visibility(self) -> None:
        self.visible = not self.visible

    def move_left(self) -> None:
        if self.index > 0:
            self.index -= 1

    def move_right(self, text_length: int) -> None:
        if self.index < text_length:
            self.index += 1

    def move_down(self, buffer: TextBuffer) -> None:
        """Move to the same column on the next line, clamped to its end."""
        text = buffer.text
        end_of_line = text.find(LINE_BREAK, self.index)
        if end_of_line == -1:
            return
        start_of_line = text.rfind(LINE_BREAK, 0, self.index + 1)
        start_of_line = 0 if start_of_line == -1 else start_of_line + 1
        column = self.index - start_of_line

        start_of_next = end_of_line + 1
        end_of_next = text.find(LINE_BREAK, start_of_next)
        if end_of_next == -1:
            end_of_next = len(text)

        self.index = min(start_of_next + column, end_of_next)

    def move_up(self, buffer: TextBuffer) -> None:
        """Move to the same column on the previous line, clamped to its end."""
        text = buffer.text
        line_break = text.rfind(LINE_BREAK, 0, self.index + 1)
        if line_break == -1:
            return

        end_of_prev = line_break
        start_of_line = end_of_prev + 1
        if self.index < start_of_line:
            start_of_line = 0
        column = self.index - start_of_line

        start_of_prev = 0
        if end_of_prev > 0:
            found = text.rfind(LINE_BREAK, 0, end_of_prev)
            if found != -1:
                start_of_prev = found + 1

        self.index = min(start_of_prev + column, end_of_prev)