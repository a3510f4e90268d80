"""Conversion between raw profile text and the list-of-lines model."""

from __future__ import annotations

from typing import Iterable, List

LINE_SEPARATOR = "\n"


def split_text(text: str) -> List[str]:
    """Split ``text`` into buffer lines.

    ``\\r\\n`` and lone ``\\r`` count as line breaks, a single trailing
    newline does not open an extra line, and empty text yields one empty
    line so the result is never empty.
    """

    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    if not normalized:
        return [""]
    lines = normalized.split("\n")
    if normalized.endswith("\n"):
        lines.pop()
    return lines


def join_lines(lines: Iterable[str]) -> str:
    return LINE_SEPARATOR.join(lines)


__all__ = ["LINE_SEPARATOR", "split_text", "join_lines"]
