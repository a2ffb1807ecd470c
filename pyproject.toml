[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glyphpad"
version = "1.0.0"
description = "A small text editor that parses TrueType fonts itself and draws glyph outlines as triangles"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["text editor", "truetype", "font", "glyph", "triangulation", "earcut", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
    "Topic :: Text Processing :: Fonts",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
glyphpad = "glyphpad.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["glyphpad"]

[tool.pytest.ini_options]
addopts = "-ra"
