import os
from pathlib import Path
from typing import Optional


DEFAULT_LANGUAGE = "en"

LANGUAGE_ENV_VAR = "LABEL_TRANSLATOR_LANG"
POSIX_LOCALE_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


def _optional_path(env_var: str) -> Optional[Path]:
    value = os.environ.get(env_var, "").strip()
    return Path(value).expanduser() if value else None


LABELS_DIR = _optional_path("LABEL_TRANSLATOR_LABELS_DIR")
LOG_DIR = _optional_path("LABEL_TRANSLATOR_LOG_DIR")
LOG_LEVEL = os.environ.get("LABEL_TRANSLATOR_LOG_LEVEL", "WARNING").strip() or "WARNING"
