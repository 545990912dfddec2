from __future__ import annotations

import os
from typing import Optional

from . import config

_IGNORED_LOCALES = {"c", "posix"}


def normalize_locale(value: Optional[str]) -> Optional[str]:
    """Reduce ``fr_FR.UTF-8@euro`` or ``fr-FR`` to ``fr``."""
    if not value:
        return None
    first = value.split(":")[0].strip()
    first = first.split(".")[0].split("@")[0]
    primary = first.replace("-", "_").split("_")[0].strip().lower()
    if not primary or primary in _IGNORED_LOCALES:
        return None
    return primary


def detect_locale_hint(default: str = config.DEFAULT_LANGUAGE) -> str:
    """Best-guess language code from the environment, or ``default``."""
    for env_var in (config.LANGUAGE_ENV_VAR, *config.POSIX_LOCALE_ENV_VARS):
        code = normalize_locale(os.environ.get(env_var))
        if code:
            return code
    return default


__all__ = ["normalize_locale", "detect_locale_hint"]
