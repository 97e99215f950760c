"""
Plural Forms
============

Plural form counts and form selection for over 140 gettext locales.

    >>> from plural_forms import form_count, form_index
    >>> form_count("ar"), form_index("ar", 11)
    (6, 4)
"""

from .exceptions import PluralError, UnknownLocaleError
from .pluralization import (
    GettextPluralizer,
    Pluralizer,
    form_count,
    form_index,
    get_pluralizer,
    known_locales,
    plural_forms_header,
    supports_locale,
)
from .rules import PluralRule
from .table import PLURAL_RULES

__version__ = "0.1.0"

__all__ = [
    "PLURAL_RULES",
    "GettextPluralizer",
    "PluralError",
    "PluralRule",
    "Pluralizer",
    "UnknownLocaleError",
    "form_count",
    "form_index",
    "get_pluralizer",
    "known_locales",
    "plural_forms_header",
    "supports_locale",
]
