from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from . import config
from .compiler import render_label
from .label_files import PathLike, load_label_dir
from .locale_hint import detect_locale_hint
from .logging import configure_logging
from .models import LanguageInput, LanguagePack

logger = logging.getLogger("label_translator")

LanguageEntry = Union[LanguageInput, Mapping[str, Any]]


class Translator:
    """
    Registry of language packs resolving label keys to display strings.

    Lookups try the current language, then the default language, and finally
    return the label key itself, so :meth:`translate` never raises.
    """

    def __init__(self, current_language: Optional[str] = None):
        self._default_language = config.DEFAULT_LANGUAGE
        self._current_language = current_language or detect_locale_hint(self._default_language)
        self._languages: dict[str, LanguagePack] = {}

    @classmethod
    def from_environment(cls) -> "Translator":
        configure_logging()
        translator = cls()
        if config.LABELS_DIR is not None:
            translator.load_directory(config.LABELS_DIR)
        return translator

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def current_language(self) -> str:
        return self._current_language

    def add_languages(self, *entries: LanguageEntry) -> list[str]:
        """
        Register or extend language packs.

        Entries missing a code, name or labels are skipped without affecting
        the others. Re-registering a known code merges its labels and keeps
        the name given first. Returns the codes of the accepted entries.
        """
        accepted: list[str] = []
        for index, entry in enumerate(entries):
            language = self._coerce_entry(index, entry)
            if language is None:
                continue

            pack = self._languages.get(language.code)
            if pack is None:
                pack = LanguagePack(code=language.code, name=language.name)
                self._languages[language.code] = pack
                logger.debug(f"Registered language {language.code} ({language.name})")
            pack.merge(language.labels)
            accepted.append(language.code)
        return accepted

    def _coerce_entry(self, index: int, entry: LanguageEntry) -> Optional[LanguageInput]:
        if isinstance(entry, LanguageInput):
            return entry
        if not isinstance(entry, Mapping):
            logger.warning(f"Skipping language entry #{index}: expected a mapping, got {type(entry).__name__}")
            return None
        try:
            return LanguageInput.model_validate(dict(entry))
        except ValidationError as e:
            logger.warning(f"Skipping language entry #{index} ({entry.get('code')!r}): {e.error_count()} invalid field(s)")
            return None

    def load_directory(self, directory: PathLike) -> list[str]:
        return self.add_languages(*load_label_dir(directory))

    def set_current_language(self, code: str) -> None:
        self._current_language = code

    def get_current_language(self) -> str:
        return self._current_language

    def has_language(self, code: str) -> bool:
        return code in self._languages

    def get_languages(self) -> list[dict[str, str]]:
        """Registered languages as ``{"code", "name"}`` dicts, in registration order."""
        return [pack.info() for pack in self._languages.values()]

    def resolve(
        self,
        code: str,
        label: str,
        bindings: Optional[Mapping[str, Any]] = None,
    ) -> Optional[str]:
        """Translate ``label`` in one language; ``None`` when it is not defined there."""
        pack = self._languages.get(code)
        if pack is None or label not in pack.labels:
            return None
        compiled = pack.labels[label]
        if not compiled:
            return label
        return render_label(compiled, bindings)

    def translate(self, label: str, bindings: Optional[Mapping[str, Any]] = None) -> str:
        for code in (self._current_language, self._default_language):
            translated = self.resolve(code, label, bindings)
            if translated:
                return translated
        return label

    __call__ = translate


__all__ = ["Translator", "LanguageEntry"]
