"""
label_translator

Per-language label dictionaries with ``__placeholder__`` templates and
current -> default -> key fallback.
"""

from .compiler import compile_label, render_label, tokenize
from .errors import LabelFileError, TranslatorError
from .label_files import load_label_dir, load_label_file
from .locale_hint import detect_locale_hint, normalize_locale
from .logging import configure_logging
from .models import LanguageInput, LanguagePack
from .segments import CompiledLabel, Literal, Placeholder, Segment, Template, Text
from .translator import Translator

__version__ = "1.0.0"
__all__ = [
    # Registry
    "Translator",
    "LanguageInput",
    "LanguagePack",
    # Compilation
    "compile_label",
    "render_label",
    "tokenize",
    "CompiledLabel",
    "Literal",
    "Template",
    "Segment",
    "Text",
    "Placeholder",
    # Label files
    "load_label_file",
    "load_label_dir",
    # Environment
    "detect_locale_hint",
    "normalize_locale",
    "configure_logging",
    # Exceptions
    "TranslatorError",
    "LabelFileError",
]
