"""
Plural Rule Families for plural-forms

Each function maps a non-negative count to a zero-based plural form index.
Guards are evaluated top to bottom and the first match wins, so the order of
the branches is part of the rule.

Formulas follow the gettext plural forms collected by the Translate Toolkit
localization guide and Mozilla's "Localization and Plurals" notes.
"""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class PluralRule:
    """
    Pluralization behaviour shared by one or more locales.

    Attributes:
        name: Family name (e.g. 'slavic') or the locale code for one-off rules
        nplurals: Number of plural forms the language distinguishes
        formula: Function from count to plural form index
        expression: Equivalent gettext C expression for the Plural-Forms header
    """

    name: str
    nplurals: int
    formula: Callable[[int], int]
    expression: str

    def __post_init__(self) -> None:
        if not 1 <= self.nplurals <= 6:
            raise ValueError(f"Rule '{self.name}' declares {self.nplurals} plural forms")

    def __call__(self, count: int) -> int:
        return self.formula(count)


def _ends_in(n: int, digits: tuple[int, ...]) -> bool:
    """Tell if the last decimal digit of n is one of digits."""
    return n % 10 in digits


# Grouped families


def invariant_rule(n: int) -> int:
    return 0


def two_forms_rule(n: int) -> int:
    return 0 if n == 1 else 1


def two_forms_zero_one_rule(n: int) -> int:
    return 0 if n in (0, 1) else 1


def slavic_rule(n: int) -> int:
    # n != 11 is intentional: 111 takes the singular form here
    if _ends_in(n, (1,)) and n != 11:
        return 0
    if _ends_in(n, (2, 3, 4)) and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def slavic_alt_rule(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n <= 4:
        return 1
    return 2


# Irregular languages


def arabic_rule(n: int) -> int:
    """
    Arabic pluralization rule (6 plural forms).

    zero (0), one (1), two (2), few (3-10), many (11-99) and other, where
    few/many/other are decided on the last two digits.
    """
    if n == 0:
        return 0
    if n == 1:
        return 1
    if n == 2:
        return 2
    if 3 <= n % 100 <= 10:
        return 3
    if n % 100 >= 11:
        return 4
    return 5


def kashubian_rule(n: int) -> int:
    if n == 1:
        return 0
    if _ends_in(n, (2, 3, 4)) and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def welsh_rule(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    if n != 8 and n != 11:
        return 2
    return 3


def irish_rule(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    if 3 <= n <= 6:
        return 2
    if 7 <= n <= 10:
        return 3
    return 4


def scottish_gaelic_rule(n: int) -> int:
    if n == 1 or n == 11:
        return 0
    if n == 2 or n == 12:
        return 1
    if 2 < n < 20:
        return 2
    return 3


def icelandic_rule(n: int) -> int:
    return 0 if _ends_in(n, (1,)) and n % 100 != 11 else 1


def javanese_rule(n: int) -> int:
    return 0 if n == 0 else 1


def cornish_rule(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    if n == 3:
        return 2
    return 3


def lithuanian_rule(n: int) -> int:
    if _ends_in(n, (1,)) and n % 100 != 11:
        return 0
    if n % 10 >= 2 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def latvian_rule(n: int) -> int:
    if _ends_in(n, (1,)) and n % 100 != 11:
        return 0
    if n != 0:
        return 1
    return 2


def macedonian_rule(n: int) -> int:
    """
    Macedonian pluralization rule (3 plural forms).

    Known to disagree with CLDR (11 and 12 end up in forms 0 and 1). Kept
    unchanged so existing catalogs keep resolving to the same variants.
    """
    if _ends_in(n, (1,)):
        return 0
    if _ends_in(n, (2,)):
        return 1
    return 2


def mandinka_rule(n: int) -> int:
    if n == 0:
        return 0
    if n == 1:
        return 1
    return 2


def maltese_rule(n: int) -> int:
    if n == 1:
        return 0
    if n == 0 or 2 <= n % 100 <= 10:
        return 1
    if 11 <= n % 100 <= 19:
        return 2
    return 3


def polish_rule(n: int) -> int:
    if n == 1:
        return 0
    if _ends_in(n, (2, 3, 4)) and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def romanian_rule(n: int) -> int:
    if n == 1:
        return 0
    if n == 0 or 1 <= n % 100 <= 19:
        return 1
    return 2


def slovenian_rule(n: int) -> int:
    if n % 100 == 1:
        return 1
    if n % 100 == 2:
        return 2
    if n % 100 in (3, 4):
        return 3
    return 0


INVARIANT = PluralRule("invariant", 1, invariant_rule, "0")

TWO_FORMS = PluralRule("two_forms", 2, two_forms_rule, "(n != 1)")

TWO_FORMS_ZERO_ONE = PluralRule("two_forms_zero_one", 2, two_forms_zero_one_rule, "(n > 1)")

SLAVIC = PluralRule(
    "slavic",
    3,
    slavic_rule,
    "(n%10==1 && n!=11 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2)",
)

SLAVIC_ALT = PluralRule("slavic_alt", 3, slavic_alt_rule, "(n==1) ? 0 : (n>=2 && n<=4) ? 1 : 2")
