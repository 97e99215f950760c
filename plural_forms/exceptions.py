"""
Custom exceptions for plural-forms.
"""


class PluralError(Exception):
    """Base exception for pluralization errors."""
    pass


class UnknownLocaleError(PluralError, LookupError):
    """Raised when a locale code has no entry in the plural rule table."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(
            f"Unknown locale {locale!r}. If this is a locale you need to handle, "
            "pick a fallback rule in the calling code"
        )
