"""A text editor that parses TrueType fonts and draws triangulated glyph outlines with pygame."""

__version__ = "1.0.0"