"""
Label template compilation and rendering.

A label such as ``"__myCatName__ is an awesome cat !"`` is split once, at
registration time, into ordered :class:`Text` and :class:`Placeholder`
segments. Rendering walks the segments and substitutes bindings.
"""

from __future__ import annotations

import string
from typing import Any, Iterator, Mapping, Optional

from .segments import DELIMITER, CompiledLabel, Literal, Placeholder, Segment, Template, Text

KEY_CHARS = frozenset(string.ascii_letters + string.digits + ".")


def _find_token(raw: str, start: int) -> Optional[tuple[int, int, str]]:
    """Return ``(token_start, token_end, key)`` of the first ``__key__`` at or after ``start``."""
    pos = raw.find(DELIMITER, start)
    while pos != -1:
        key_start = pos + len(DELIMITER)
        key_end = key_start
        while key_end < len(raw) and raw[key_end] in KEY_CHARS:
            key_end += 1
        if raw.startswith(DELIMITER, key_end):
            return pos, key_end + len(DELIMITER), raw[key_start:key_end]
        pos = raw.find(DELIMITER, pos + 1)
    return None


def tokenize(raw: str) -> Iterator[Segment]:
    """Yield the segments of ``raw`` left to right, skipping empty text runs."""
    cursor = 0
    while cursor < len(raw):
        found = _find_token(raw, cursor)
        if found is None:
            break
        token_start, token_end, key = found
        if token_start > cursor:
            yield Text(raw[cursor:token_start])
        yield Placeholder(key)
        cursor = token_end
    if cursor < len(raw):
        yield Text(raw[cursor:])


def compile_label(raw: str) -> CompiledLabel:
    if DELIMITER not in raw:
        return Literal(raw)
    segments = tuple(tokenize(raw))
    # A stray "__" with no complete token stays a literal.
    if not any(isinstance(segment, Placeholder) for segment in segments):
        return Literal(raw)
    return Template(segments)


def render_label(compiled: CompiledLabel, bindings: Optional[Mapping[str, Any]] = None) -> str:
    """Render a compiled label, using placeholder keys for missing bindings."""
    if isinstance(compiled, Literal):
        return compiled.value

    parts: list[str] = []
    for segment in compiled.segments:
        if isinstance(segment, Text):
            parts.append(segment.value)
        else:
            value = bindings.get(segment.key) if bindings is not None else None
            parts.append(segment.key if value is None else str(value))
    return "".join(parts)


__all__ = ["KEY_CHARS", "tokenize", "compile_label", "render_label"]
