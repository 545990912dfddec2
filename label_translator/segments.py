from __future__ import annotations

from dataclasses import dataclass
from typing import Union

DELIMITER = "__"


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Placeholder:
    key: str

    @property
    def token(self) -> str:
        return f"{DELIMITER}{self.key}{DELIMITER}"


Segment = Union[Text, Placeholder]


@dataclass(frozen=True)
class Literal:
    """A label used verbatim."""

    value: str
    compiled = False

    def __bool__(self) -> bool:
        return bool(self.value)


@dataclass(frozen=True)
class Template:
    """A label split into ordered text and placeholder segments."""

    segments: tuple[Segment, ...]
    compiled = True

    def __bool__(self) -> bool:
        return bool(self.segments)

    @property
    def placeholders(self) -> tuple[str, ...]:
        return tuple(s.key for s in self.segments if isinstance(s, Placeholder))

    def source(self) -> str:
        """Rebuild the raw label string the template was compiled from."""
        return "".join(s.value if isinstance(s, Text) else s.token for s in self.segments)


CompiledLabel = Union[Literal, Template]


__all__ = [
    "DELIMITER",
    "Text",
    "Placeholder",
    "Segment",
    "Literal",
    "Template",
    "CompiledLabel",
]
