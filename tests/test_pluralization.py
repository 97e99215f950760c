"""Tests for the pluralization resolver."""

import gettext
import threading

import pytest

from plural_forms import (
    GettextPluralizer,
    Pluralizer,
    UnknownLocaleError,
    form_count,
    form_index,
    get_pluralizer,
    known_locales,
    plural_forms_header,
    supports_locale,
)
from plural_forms.exceptions import PluralError

COUNTS = range(0, 1001)


@pytest.mark.parametrize(
    "locale, count, expected",
    [
        ("pl", 1, 0),
        ("pl", 2, 1),
        ("pl", 5, 2),
        ("pl", 112, 2),
        ("pl", 122, 1),
        ("ar", 0, 0),
        ("ar", 1, 1),
        ("ar", 2, 2),
        ("ar", 6, 3),
        ("ar", 11, 4),
        ("ar", 100, 5),
        ("ja", 0, 0),
        ("ja", 1000000, 0),
        ("fr", 0, 0),
        ("fr", 1, 0),
        ("fr", 2, 1),
        ("is", 11, 1),
        ("is", 21, 0),
        ("is", 111, 1),
    ],
)
def test_form_index_scenarios(locale, count, expected):
    assert form_index(locale, count) == expected


@pytest.mark.parametrize("locale, expected", [("pl", 3), ("ar", 6), ("ja", 1), ("fr", 2), ("is", 2)])
def test_form_count_scenarios(locale, expected):
    assert form_count(locale) == expected


def test_unknown_locale_raises():
    with pytest.raises(UnknownLocaleError) as exc_info:
        form_index("xx-unknown", 5)
    assert exc_info.value.locale == "xx-unknown"

    with pytest.raises(UnknownLocaleError):
        form_count("xx-unknown")


def test_unknown_locale_error_hierarchy():
    with pytest.raises(PluralError):
        form_count("xx-unknown")
    with pytest.raises(LookupError):
        form_count("xx-unknown")


@pytest.mark.parametrize("locale", ["PL", "pt-BR", "pt_br", "en_US", "", " en"])
def test_locale_codes_are_matched_exactly(locale):
    assert not supports_locale(locale)
    with pytest.raises(UnknownLocaleError):
        form_count(locale)


def test_regional_codes_are_distinct_entries():
    assert form_index("pt", 0) == 1
    assert form_index("pt_BR", 0) == 0
    assert form_index("es_AR", 1) == 0


@pytest.mark.parametrize("locale", known_locales())
def test_every_index_in_range_and_every_form_reachable(locale):
    nplurals = form_count(locale)
    seen = {form_index(locale, n) for n in COUNTS}
    assert seen == set(range(nplurals))


@pytest.mark.parametrize("locale", known_locales())
def test_header_expression_matches_formula(locale):
    header = plural_forms_header(locale)
    assert header.startswith(f"nplurals={form_count(locale)}; plural=")
    assert header.endswith(";")

    expression = header.split("plural=", 1)[1][:-1]
    evaluate = gettext.c2py(expression)
    for n in COUNTS:
        assert evaluate(n) == form_index(locale, n), (locale, n)


def test_plural_forms_header_examples():
    assert plural_forms_header("ja") == "nplurals=1; plural=0;"
    assert plural_forms_header("en") == "nplurals=2; plural=(n != 1);"
    assert plural_forms_header("fr") == "nplurals=2; plural=(n > 1);"


def test_plural_forms_header_unknown_locale():
    with pytest.raises(UnknownLocaleError):
        plural_forms_header("xx")


def test_known_locales_sorted_and_complete():
    locales = known_locales()
    assert locales == sorted(locales)
    assert len(locales) == len(set(locales)) == 142
    assert {"ar", "pl", "pt_BR", "es_AR", "mnk", "csb"} <= set(locales)


def test_repeated_calls_are_identical():
    for locale in ("ar", "mt", "ru", "sl"):
        first = [form_index(locale, n) for n in range(200)]
        second = [form_index(locale, n) for n in range(200)]
        assert first == second
        assert form_count(locale) == form_count(locale)


def test_concurrent_lookups():
    expected = {locale: [form_index(locale, n) for n in range(120)] for locale in known_locales()}
    mismatches = []

    def worker():
        for locale, values in expected.items():
            if [form_index(locale, n) for n in range(120)] != values:
                mismatches.append(locale)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert mismatches == []


class TestGettextPluralizer:
    def test_is_a_pluralizer(self):
        assert isinstance(GettextPluralizer(), Pluralizer)

    def test_delegates_to_table(self):
        pluralizer = GettextPluralizer()
        assert pluralizer.nplurals("ar") == 6
        assert pluralizer.plural("ar", 11) == 4
        assert pluralizer.plural("pl", 22) == 1

    def test_unknown_locale(self):
        with pytest.raises(UnknownLocaleError):
            GettextPluralizer().plural("xx", 1)

    def test_shared_instance(self):
        assert get_pluralizer() is get_pluralizer()

    def test_custom_pluralizer_with_fallback(self):
        class EnglishFallback(Pluralizer):
            def nplurals(self, locale):
                return form_count(locale) if supports_locale(locale) else form_count("en")

            def plural(self, locale, count):
                return form_index(locale if supports_locale(locale) else "en", count)

        pluralizer = EnglishFallback()
        assert pluralizer.nplurals("xx") == 2
        assert pluralizer.plural("xx", 1) == 0
        assert pluralizer.plural("pl", 5) == 2

    def test_interface_is_abstract(self):
        with pytest.raises(TypeError):
            Pluralizer()
