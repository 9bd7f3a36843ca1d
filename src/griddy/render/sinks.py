"""Output sinks for ``Griddy.print``."""

from __future__ import annotations

import sys
from typing import Callable

Sink = Callable[[str], object]


def null_sink(text: str) -> None:
    """Discard the text."""


def console_sink(text: str) -> None:
    """Write the text to stdout as-is (rows already end with newlines)."""
    sys.stdout.write(text)
    sys.stdout.flush()


SINKS: dict[str, Sink] = {
    "null": null_sink,
    "console": console_sink,
}


def resolve_sink(sink: Sink | str | None) -> Sink:
    """Turn a sink argument into a callable.

    Args:
        sink: None for the no-op sink, a registered name ("console",
            "null"), or any callable taking one string

    Raises:
        TypeError: If sink is neither a known name nor callable
    """
    if sink is None:
        return null_sink
    if isinstance(sink, str):
        try:
            return SINKS[sink]
        except KeyError:
            raise TypeError(f"unknown sink name: {sink!r}") from None
    if callable(sink):
        return sink
    raise TypeError(f"sink must be callable or a sink name, got {type(sink).__name__}")
