import pygame
import pytest

from glyphpad.editor import BLINK_INTERVAL_MS, Editor, main, translate_key
from glyphpad.fontdata import Font, GlyphData
from glyphpad.input import ZOOM_STEP, Key


def make_editor():
    glyphs = [GlyphData(unicode=ord(c), advance_width=500) for c in "abhi"]
    return Editor(Font(glyphs, 1000))


def keydown(key, mod=0):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=mod, unicode="")


def text(value):
    return pygame.event.Event(pygame.TEXTINPUT, text=value)


def test_translate_key():
    assert translate_key(pygame.K_LEFT) is Key.LEFT
    assert translate_key(pygame.K_v) is Key.V
    assert translate_key(pygame.K_a) is None


def test_text_input_inserts_characters():
    editor = make_editor()
    editor.handle_event(text("hi"))
    assert editor.state.buffer.text == "hi"
    assert editor.state.cursor.index == 2


def test_backspace_key_deletes():
    editor = make_editor()
    editor.handle_event(text("hi"))
    editor.handle_event(keydown(pygame.K_BACKSPACE))
    assert editor.state.buffer.text == "h"
    assert editor.state.cursor.index == 1


def test_return_inserts_carriage_return():
    editor = make_editor()
    editor.handle_event(text("a"))
    editor.handle_event(keydown(pygame.K_RETURN))
    assert editor.state.buffer.text == "a\r"


def test_ctrl_equals_zooms_and_syncs_renderer():
    editor = make_editor()
    before = editor.pixel_height
    editor.handle_event(keydown(pygame.K_EQUALS, pygame.KMOD_LCTRL))
    assert editor.pixel_height == before + ZOOM_STEP
    assert editor.text_renderer.pixel_height == editor.pixel_height


def test_ctrl_minus_zooms_out():
    editor = make_editor()
    before = editor.pixel_height
    editor.handle_event(keydown(pygame.K_MINUS, pygame.KMOD_LCTRL))
    assert editor.pixel_height == before - ZOOM_STEP


def test_shift_left_selects_and_copy_paste():
    editor = make_editor()
    editor.handle_event(text("ab"))
    editor.handle_event(keydown(pygame.K_LEFT, pygame.KMOD_LSHIFT))
    editor.handle_event(keydown(pygame.K_LEFT, pygame.KMOD_LSHIFT))
    assert editor.state.selection.range() == (0, 2)
    editor.handle_event(keydown(pygame.K_c, pygame.KMOD_LCTRL))
    editor.handle_event(keydown(pygame.K_RIGHT))
    editor.handle_event(keydown(pygame.K_v, pygame.KMOD_LCTRL))
    assert editor.state.buffer.text == "abab"
    assert editor.state.cursor.index == len("abab")


def test_quit_stops_running():
    editor = make_editor()
    editor.running = True
    editor.handle_event(pygame.event.Event(pygame.QUIT))
    assert editor.running is False


def test_bezier_steps_setter_syncs_renderer():
    editor = make_editor()
    editor.bezier_steps = 3
    assert editor.text_renderer.bezier_steps == 3


def test_blink_toggles_after_interval():
    editor = make_editor()
    editor.update(BLINK_INTERVAL_MS - 1)
    assert editor.state.cursor.visible is True
    editor.update(1)
    assert editor.state.cursor.visible is False
    editor.update(BLINK_INTERVAL_MS)
    assert editor.state.cursor.visible is True


def test_render_draws_caret_only_when_visible():
    editor = make_editor()
    surface = pygame.Surface((400, 400))
    editor.render(surface)
    position = editor.text_renderer.positions[0]
    point = (int(position.x), int(position.y - editor.pixel_height / 2))
    assert tuple(surface.get_at(point))[:3] == (255, 255, 255)
    editor.update(BLINK_INTERVAL_MS)
    editor.render(surface)
    assert tuple(surface.get_at(point))[:3] == (0, 0, 0)


def test_main_with_missing_font_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "missing.ttf")])