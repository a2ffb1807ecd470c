# glyphpad

glyphpad is a minimal text editor that draws its text without a font
library. It reads a TrueType font file itself (the `head`, `maxp`, `loca`,
`cmap`, `glyf`, `hhea` and `hmtx` tables), flattens each glyph's quadratic
outlines into polygons, triangulates them by ear clipping and fills the
triangles in a pygame window.

## Installing

```
pip install .
```

pygame is the only runtime dependency.

## Running

```
glyphpad [FONT]
```

`FONT` is the path of a `.ttf` file; it defaults to `fonts/jetregular.ttf`
relative to the working directory. The editor opens a 1080×920 window titled
"Text Editor", with a caret that blinks every 500 ms. Long lines wrap at the
right edge of the window.

### Keys

| Key | Action |
| --- | --- |
| Arrow keys | Move the cursor; Up and Down keep the column |
| Shift + arrows | Start or extend the selection |
| Right with a selection | Move the cursor to the end of the selection |
| Tab | Insert four spaces |
| Enter | Start a new line |
| Backspace | Delete the character before the cursor, or the selection |
| Delete | Delete the selection, or the character before the cursor |
| Ctrl+C | Copy the selection |
| Ctrl+X | Delete the selection (the clipboard is not changed) |
| Ctrl+V | Paste the last copied text |
| Ctrl+Z | Undo |
| Ctrl++ / Ctrl+= | Make the text 10 pixels taller |
| Ctrl+- | Make the text 10 pixels shorter, down to 20 pixels |

Typing any other printable character replaces the selection, if there is one.

## Using the pieces

The modules also work as a library:

```python
from glyphpad.fontparser import parse
from glyphpad.geometry import triangulate_glyph
from glyphpad.earcut import earcut

font = parse("fonts/jetregular.ttf")
glyph = font.glyph(ord("A"))
shape = triangulate_glyph(glyph, 0.1, 0.0, 100.0, 10)
for polygon in shape.polygons:
    indices = earcut(polygon)  # every three indices form one triangle
```

- `glyphpad.fontparser`: `parse(path)` and `parse_bytes(data)` return a
  `glyphpad.fontdata.Font`; `Font.glyph(code)` accepts a code point or a
  one-character string and gives an empty `GlyphData` for unmapped codes.
  Malformed data raises `FontFormatError`; truncated data raises `EOFError`.
- `glyphpad.fontreader.FontReader`: big-endian reads over font bytes.
- `glyphpad.geometry`: `compute_bezier`, `signed_area` and
  `triangulate_glyph`, which groups hole rings with the outer ring before them.
- `glyphpad.earcut.earcut(polygon)`: triangulates an outer ring followed by
  hole rings; `glyphpad.earcut_ring` holds the linked-ring helpers it uses.
- `glyphpad.glyphrenderer.GlyphRenderer`: `triangles(...)` returns the
  triangles of a glyph; `render_glyph(...)` also fills them on a surface.
- `glyphpad.textrenderer.TextRenderer`: `layout(text, max_width)` positions
  characters with wrapping; `render_text`, `render_cursor` and
  `render_selection` draw on a pygame surface.
- `glyphpad.textbuffer.TextBuffer`, `glyphpad.cursor.Cursor` and
  `glyphpad.selection.Selection` hold the editing state, and
  `glyphpad.input.InputHandler` applies key presses (`Key`) and typed
  characters to an `EditorState` without any window.
- `glyphpad.editor.Editor` ties these to pygame events; `main(argv=None)` is
  the `glyphpad` command.

## What it does not do

- Text is not loaded from or saved to files; it lives only in the window.
- There is no redo key, and `TextBuffer.redo` has no history to replay.
- Only format 4 `cmap` subtables are read, and compound glyphs are drawn only
  from simple components placed by offset.
- Lines are split by carriage returns; there is no scrolling.

## Tests

```
pip install .[test]
pytest
```