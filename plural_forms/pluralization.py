"""
Pluralization Resolver for plural-forms

Answers the two questions a translation layer asks about a locale: how many
plural forms it has, and which of them a given count selects. Unknown locale
codes always raise UnknownLocaleError; picking a fallback is up to the caller.

Example:
    >>> form_count("pl")
    3
    >>> [form_index("pl", n) for n in (1, 2, 5, 112, 122)]
    [0, 1, 2, 2, 1]
"""

import logging
from abc import ABC, abstractmethod

from plural_forms.exceptions import UnknownLocaleError
from plural_forms.rules import PluralRule
from plural_forms.table import PLURAL_RULES

logger = logging.getLogger(__name__)


def _rule_for(locale: str) -> PluralRule:
    try:
        return PLURAL_RULES[locale]
    except KeyError:
        logger.debug(f"No plural rule for locale: {locale!r}")
        raise UnknownLocaleError(locale) from None


def form_count(locale: str) -> int:
    """
    Get the number of plural forms used by a locale.

    Args:
        locale: Locale code, matched exactly (e.g. 'pl', 'pt_BR')

    Returns:
        Number of plural forms (1 to 6)

    Raises:
        UnknownLocaleError: If the locale is not in the table
    """
    return _rule_for(locale).nplurals


def form_index(locale: str, count: int) -> int:
    """
    Get the zero-based plural form index for a count.

    Args:
        locale: Locale code, matched exactly
        count: Non-negative quantity being pluralized

    Returns:
        Index in range(form_count(locale))

    Raises:
        UnknownLocaleError: If the locale is not in the table
    """
    return _rule_for(locale)(count)


def supports_locale(locale: str) -> bool:
    """Check if the table has a plural rule for locale."""
    return locale in PLURAL_RULES


def known_locales() -> list[str]:
    """Return all locale codes with a plural rule, sorted."""
    return sorted(PLURAL_RULES)


def plural_forms_header(locale: str) -> str:
    """
    Build the gettext Plural-Forms header value for a locale.

    Example:
        >>> plural_forms_header("ja")
        'nplurals=1; plural=0;'

    Raises:
        UnknownLocaleError: If the locale is not in the table
    """
    rule = _rule_for(locale)
    return f"nplurals={rule.nplurals}; plural={rule.expression};"


class Pluralizer(ABC):
    """
    Interface for objects that pick plural forms.

    Translation layers accept any Pluralizer so applications can swap in
    their own rules (for instance to fall back to English on unknown
    locales) without touching the built-in table.
    """

    @abstractmethod
    def nplurals(self, locale: str) -> int:
        """Return the number of plural forms for locale."""

    @abstractmethod
    def plural(self, locale: str, count: int) -> int:
        """Return the plural form index of count in locale."""


class GettextPluralizer(Pluralizer):
    """
    Default Pluralizer backed by the built-in plural rule table.

    Example:
        >>> pluralizer = GettextPluralizer()
        >>> pluralizer.nplurals("ar")
        6
        >>> pluralizer.plural("ar", 11)
        4
    """

    def nplurals(self, locale: str) -> int:
        return form_count(locale)

    def plural(self, locale: str, count: int) -> int:
        return form_index(locale, count)


# Shared instance for convenience
_default_pluralizer: GettextPluralizer | None = None


def get_pluralizer() -> GettextPluralizer:
    """Get or create the shared GettextPluralizer instance."""
    global _default_pluralizer
    if _default_pluralizer is None:
        _default_pluralizer = GettextPluralizer()
    return _default_pluralizer
