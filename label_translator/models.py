from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from pydantic import BaseModel, field_validator

from .compiler import compile_label
from .segments import CompiledLabel


class LanguageInput(BaseModel):
    """Raw registration entry: a language code, its display name and its labels."""

    code: str
    name: str
    labels: dict[str, str]

    @field_validator("code", "name")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v


@dataclass
class LanguagePack:
    code: str
    name: str
    labels: dict[str, CompiledLabel] = field(default_factory=dict)

    def merge(self, raw_labels: Mapping[str, str]) -> None:
        """Compile ``raw_labels`` into the pack, replacing existing keys."""
        for key, value in raw_labels.items():
            self.labels[key] = compile_label(value)

    def info(self) -> dict[str, str]:
        return {"code": self.code, "name": self.name}


__all__ = ["LanguageInput", "LanguagePack"]
