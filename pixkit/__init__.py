"""Headless code-editor building blocks: a glyph buffer, C-style tokenizers, palettes, a float variable cache and a viewport."""

__version__ = "0.1.0"