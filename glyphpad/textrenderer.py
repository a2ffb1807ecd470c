"""Laying out text and drawing it, the caret and the selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

from glyphpad.cursor import Cursor
from glyphpad.fontdata import Font, GlyphData
from glyphpad.glyphrenderer import GlyphRenderer
from glyphpad.selection import Selection
from glyphpad.textbuffer import TextBuffer

SELECTION_COLOR = (100, 150, 255, 128)
CARET_COLOR = (255, 255, 255)
CARET_WIDTH = 2
RIGHT_MARGIN = 10.0
_TERMINATOR = "\0"


@dataclass(frozen=True)
class LetterPosition:
    """Pen position of one character; ``drawn`` is false for line breaks."""

    x: float
    y: float
    drawn: bool
    glyph: Optional[GlyphData] = None


class TextRenderer:
    """Places characters on wrapped lines and draws them with a font."""

    def __init__(self, font: Font) -> None:
        self.font = font
        self.glyph_renderer = GlyphRenderer()
        self.pixel_height = 100.0
        self.line_spacing = 1.0
        self.start_x = 0.0
        self.start_y = 300.0
        self.positions: list[LetterPosition] = []

    @property
    def bezier_steps(self) -> int:
        return self.glyph_renderer.bezier_steps

    @bezier_steps.setter
    def bezier_steps(self, steps: int) -> None:
        self.glyph_renderer.bezier_steps = steps

    @property
    def scale(self) -> float:
        """Pixels per font unit."""
        return self.pixel_height / self.font.units_per_em

    @property
    def line_height(self) -> float:
        return self.font.units_per_em * self.scale * self.line_spacing

    def set_start_position(self, x: float, y: float) -> None:
        self.start_x = x
        self.start_y = y

    def layout(self, text: str, max_width: float) -> list[LetterPosition]:
        """Position every character plus one slot past the end of the text."""
        positions: list[LetterPosition] = []
        pen_x, pen_y = self.start_x, self.start_y
        scale = self.scale
        for char in text + _TERMINATOR:
            if char in ("\n", "\r"):
                positions.append(LetterPosition(pen_x, pen_y, False))
                pen_x = self.start_x
                pen_y += self.line_height
                continue

            glyph = self.font.glyph(char)
            if glyph.advance_width == 0 and char == " ":
                glyph.advance_width = self.font.units_per_em // 4

            width = int(glyph.advance_width * scale)
            if pen_x + width > max_width:
                pen_x = self.start_x
                pen_y += self.line_height
            positions.append(LetterPosition(pen_x, pen_y, True, glyph))
            pen_x += width
        return positions

    def render_text(
        self, surface: pygame.Surface, buffer: TextBuffer
    ) -> list[LetterPosition]:
        """Draw the buffer's text and remember where each character went."""
        positions = self.layout(buffer.text, surface.get_width() - RIGHT_MARGIN)
        scale = self.scale
        for position in positions:
            if position.glyph is not None:
                self.glyph_renderer.render_glyph(
                    surface, position.glyph, scale, position.x, position.y
                )
        self.positions = positions
        return positions

    def _require_layout(self) -> None:
        if not self.positions:
            raise RuntimeError("text has not been laid out yet")

    def render_cursor(
        self, surface: pygame.Surface, cursor: Cursor
    ) -> Optional[pygame.Rect]:
        """Draw the caret before the cursor's character; returns its rectangle."""
        if not cursor.visible:
            return None
        self._require_layout()
        position = self.positions[min(cursor.index, len(self.positions) - 1)]
        caret = pygame.Rect(
            int(position.x),
            int(position.y - self.pixel_height),
            CARET_WIDTH,
            int(self.pixel_height),
        )
        pygame.draw.rect(surface, CARET_COLOR, caret)
        return caret

    def render_selection(
        self, surface: pygame.Surface, selection: Selection
    ) -> list[pygame.Rect]:
        """Shade the selected characters; returns the rectangles shaded."""
        if not selection.active:
            return []
        self._require_layout()
        start, end = selection.range()
        height = self.pixel_height
        full_width = surface.get_width() - RIGHT_MARGIN
        rects: list[pygame.Rect] = []
        for here, after in zip(
            self.positions[max(start, 0) : end], self.positions[max(start, 0) + 1 : end + 1]
        ):
            if not here.drawn:
                continue
            width = after.x - here.x
            if after.y > here.y:
                width = full_width
            if width <= 0:
                continue
            rect = pygame.Rect(int(here.x), int(here.y - height), int(width), int(height))
            overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
            overlay.fill(SELECTION_COLOR)
            surface.blit(overlay, rect.topleft)
            rects.append(rect)
        return rects