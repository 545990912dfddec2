"""
Loading of per-language label files.

A label file is UTF-8 JSON, either a full entry::

    {"code": "fr", "name": "Français", "labels": {"animal.cat": "Chat"}}

or a flat ``{key: value}`` mapping whose language code is the file stem.
A flat file may use ``labels`` as a label key; only a file that has both
``code`` and ``labels`` keys is read as a full entry.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .errors import LabelFileError
from .models import LanguageInput

logger = logging.getLogger("label_translator")

PathLike = Union[str, Path]


def load_label_file(path: PathLike) -> LanguageInput:
    file_path = Path(path)
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise LabelFileError(f"Cannot read label file {file_path}: {e}", file_path) from e
    except json.JSONDecodeError as e:
        raise LabelFileError(f"Invalid JSON in label file {file_path}: {e}", file_path) from e

    if not isinstance(data, dict):
        raise LabelFileError(f"Label file {file_path} must contain a JSON object", file_path)

    if "code" in data and "labels" in data:
        payload = {
            "code": data.get("code"),
            "name": data.get("name") or data.get("code"),
            "labels": data.get("labels"),
        }
    else:
        payload = {"code": file_path.stem, "name": file_path.stem, "labels": data}

    try:
        return LanguageInput.model_validate(payload)
    except ValidationError as e:
        raise LabelFileError(f"Malformed label file {file_path}: {e}", file_path) from e


def load_label_dir(directory: PathLike) -> list[LanguageInput]:
    """Load every ``*.json`` file in ``directory``; unusable files are skipped."""
    dir_path = Path(directory)
    if not dir_path.is_dir():
        return []

    entries: list[LanguageInput] = []
    for file_path in sorted(dir_path.glob("*.json")):
        try:
            entries.append(load_label_file(file_path))
        except LabelFileError as e:
            logger.warning(f"Skipping label file: {e}")
    return entries


__all__ = ["load_label_file", "load_label_dir"]
