from __future__ import annotations

from pathlib import Path


class TranslatorError(Exception):
    pass


class LabelFileError(TranslatorError):
    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None
