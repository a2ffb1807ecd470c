"""The editor window: event loop, caret blinking and drawing."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from glyphpad.fontdata import Font
from glyphpad.fontparser import parse
from glyphpad.input import BACKSPACE, DELETE, EditorState, InputHandler, Key
from glyphpad.textrenderer import TextRenderer

WINDOW_SIZE = (1080, 920)
TITLE = "Text Editor"
BLINK_INTERVAL_MS = 500
BACKGROUND = (0, 0, 0)
DEFAULT_FONT = "fonts/jetregular.ttf"

_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_TAB: Key.TAB,
    pygame.K_z: Key.Z,
    pygame.K_x: Key.X,
    pygame.K_c: Key.C,
    pygame.K_v: Key.V,
}

# Keys that produce a character of their own but no text-input event.
_KEY_TEXT = {
    pygame.K_BACKSPACE: BACKSPACE,
    pygame.K_DELETE: DELETE,
    pygame.K_RETURN: "\r",
    pygame.K_KP_ENTER: "\r",
}

# Characters that matter while Control is held (zooming).
_CTRL_TEXT = {
    pygame.K_EQUALS: "=",
    pygame.K_PLUS: "+",
    pygame.K_KP_PLUS: "+",
    pygame.K_MINUS: "-",
    pygame.K_KP_MINUS: "-",
}


def translate_key(key: int) -> Optional[Key]:
    """Map a pygame key code to an editing key, or ``None``."""
    return _KEYS.get(key)


class Editor:
    """Holds the editing state and drives it from pygame events."""

    def __init__(self, font: Font) -> None:
        self.state = EditorState()
        self.input_handler = InputHandler()
        self.text_renderer = TextRenderer(font)
        self.running = False
        self._blink_elapsed = 0
        self._sync_renderer()

    @property
    def pixel_height(self) -> float:
        return self.state.pixel_height

    @pixel_height.setter
    def pixel_height(self, height: float) -> None:
        self.state.pixel_height = height
        self._sync_renderer()

    @property
    def bezier_steps(self) -> int:
        return self.state.bezier_steps

    @bezier_steps.setter
    def bezier_steps(self, steps: int) -> None:
        self.state.bezier_steps = steps
        self._sync_renderer()

    def _sync_renderer(self) -> None:
        self.text_renderer.pixel_height = self.state.pixel_height
        self.text_renderer.bezier_steps = self.state.bezier_steps

    def handle_event(self, event: pygame.event.Event) -> None:
        """Apply one pygame event to the editor."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            mods = getattr(event, "mod", 0)
            shift = bool(mods & pygame.KMOD_SHIFT)
            ctrl = bool(mods & pygame.KMOD_CTRL)
            self.input_handler.handle_key_press(
                self.state, translate_key(event.key), shift, ctrl
            )
            char = _CTRL_TEXT.get(event.key) if ctrl else _KEY_TEXT.get(event.key)
            if char is not None:
                self.input_handler.handle_text_input(self.state, char, ctrl)
        elif event.type == pygame.TEXTINPUT:
            for char in event.text:
                self.input_handler.handle_text_input(self.state, char, False)
        self._sync_renderer()

    def update(self, elapsed_ms: int) -> None:
        """Advance the blink timer, toggling the caret every interval."""
        self._blink_elapsed += elapsed_ms
        if self._blink_elapsed >= BLINK_INTERVAL_MS:
            self._blink_elapsed = 0
            self.state.cursor.toggle_visibility()

    def render(self, surface: pygame.Surface) -> None:
        """Draw the text, caret and selection onto ``surface``."""
        surface.fill(BACKGROUND)
        self.text_renderer.render_text(surface, self.state.buffer)
        self.text_renderer.render_cursor(surface, self.state.cursor)
        self.text_renderer.render_selection(surface, self.state.selection)

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        pygame.init()
        try:
            window = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(TITLE)
            pygame.key.start_text_input()
            clock = pygame.time.Clock()
            self.running = True
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.update(clock.tick())
                self.render(window)
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Edit text rendered from a TrueType font.")
    parser.add_argument("font", nargs="?", default=DEFAULT_FONT, help="path to a .ttf file")
    args = parser.parse_args(argv)
    Editor(parse(args.font)).run()
    return 0