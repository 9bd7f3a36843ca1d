"""Renderers for turning a grid into text."""

from griddy.render.text import RenderOptions, TextRenderer
from griddy.render.json_format import JsonRenderer
from griddy.render.sinks import console_sink, null_sink, resolve_sink

__all__ = [
    "RenderOptions",
    "TextRenderer",
    "JsonRenderer",
    "console_sink",
    "null_sink",
    "resolve_sink",
]
