"""
Plural Rule Table for plural-forms

Maps every supported locale code to its PluralRule. Locales sharing a
formula are listed in groups; languages with a formula of their own get a
dedicated entry. The grouping only keeps the table readable: lookups go
through the single flat mapping PLURAL_RULES.
"""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from plural_forms import rules
from plural_forms.rules import PluralRule

logger = logging.getLogger(__name__)


ONE_FORM = (
    "ay",  # Aymará
    "bo",  # Tibetan
    "cgg",  # Chiga
    "dz",  # Dzongkha
    "fa",  # Persian
    "id",  # Indonesian
    "ja",  # Japanese
    "jbo",  # Lojban
    "ka",  # Georgian
    "kk",  # Kazakh
    "km",  # Khmer
    "ko",  # Korean
    "ky",  # Kyrgyz
    "lo",  # Lao
    "ms",  # Malay
    "my",  # Burmese
    "sah",  # Yakut
    "su",  # Sundanese
    "th",  # Thai
    "tt",  # Tatar
    "ug",  # Uyghur
    "vi",  # Vietnamese
    "wo",  # Wolof
    "zh",  # Chinese
)

TWO_FORMS = (
    "af",  # Afrikaans
    "an",  # Aragonese
    "anp",  # Angika
    "as",  # Assamese
    "ast",  # Asturian
    "az",  # Azerbaijani
    "bg",  # Bulgarian
    "bn",  # Bengali
    "brx",  # Bodo
    "ca",  # Catalan
    "da",  # Danish
    "de",  # German
    "doi",  # Dogri
    "el",  # Greek
    "en",  # English
    "eo",  # Esperanto
    "es",  # Spanish
    "es_AR",  # Argentinean Spanish
    "et",  # Estonian
    "eu",  # Basque
    "ff",  # Fulah
    "fi",  # Finnish
    "fo",  # Faroese
    "fur",  # Friulian
    "fy",  # Frisian
    "gl",  # Galician
    "gu",  # Gujarati
    "ha",  # Hausa
    "he",  # Hebrew
    "hi",  # Hindi
    "hne",  # Chhattisgarhi
    "hy",  # Armenian
    "hu",  # Hungarian
    "ia",  # Interlingua
    "it",  # Italian
    "kl",  # Greenlandic
    "kn",  # Kannada
    "ku",  # Kurdish
    "lb",  # Letzeburgesch
    "mai",  # Maithili
    "ml",  # Malayalam
    "mn",  # Mongolian
    "mni",  # Manipuri
    "mr",  # Marathi
    "nah",  # Nahuatl
    "nap",  # Neapolitan
    "nb",  # Norwegian Bokmal
    "ne",  # Nepali
    "nl",  # Dutch
    "se",  # Northern Sami
    "nn",  # Norwegian Nynorsk
    "no",  # Norwegian (old code)
    "nso",  # Northern Sotho
    "or",  # Oriya
    "ps",  # Pashto
    "pa",  # Punjabi
    "pap",  # Papiamento
    "pms",  # Piemontese
    "pt",  # Portuguese
    "rm",  # Romansh
    "rw",  # Kinyarwanda
    "sat",  # Santali
    "sco",  # Scots
    "sd",  # Sindhi
    "si",  # Sinhala
    "so",  # Somali
    "son",  # Songhay
    "sq",  # Albanian
    "sw",  # Swahili
    "sv",  # Swedish
    "ta",  # Tamil
    "te",  # Telugu
    "tk",  # Turkmen
    "ur",  # Urdu
    "yo",  # Yoruba
)

TWO_FORMS_ZERO_ONE = (
    "ach",  # Acholi
    "ak",  # Akan
    "am",  # Amharic
    "arn",  # Mapudungun
    "br",  # Breton
    "fil",  # Filipino
    "fr",  # French
    "gun",  # Gun
    "ln",  # Lingala
    "mfe",  # Mauritian Creole
    "mg",  # Malagasy
    "mi",  # Maori
    "oc",  # Occitan
    "pt_BR",  # Brazilian Portuguese
    "tg",  # Tajik
    "ti",  # Tigrinya
    "tr",  # Turkish
    "uz",  # Uzbek
    "wa",  # Walloon
)

THREE_FORMS_SLAVIC = (
    "be",  # Belarusian
    "bs",  # Bosnian
    "hr",  # Croatian
    "sr",  # Serbian
    "ru",  # Russian
    "uk",  # Ukrainian
)

THREE_FORMS_SLAVIC_ALT = (
    "cs",  # Czech
    "sk",  # Slovak
)

LOCALE_GROUPS: tuple[tuple[PluralRule, tuple[str, ...]], ...] = (
    (rules.INVARIANT, ONE_FORM),
    (rules.TWO_FORMS, TWO_FORMS),
    (rules.TWO_FORMS_ZERO_ONE, TWO_FORMS_ZERO_ONE),
    (rules.SLAVIC, THREE_FORMS_SLAVIC),
    (rules.SLAVIC_ALT, THREE_FORMS_SLAVIC_ALT),
)

# Languages whose formula is not shared with any other locale
IRREGULAR_RULES: dict[str, PluralRule] = {
    # Arabic
    "ar": PluralRule(
        "ar",
        6,
        rules.arabic_rule,
        "(n==0 ? 0 : n==1 ? 1 : n==2 ? 2 : n%100>=3 && n%100<=10 ? 3 : n%100>=11 ? 4 : 5)",
    ),
    # Kashubian
    "csb": PluralRule(
        "csb",
        3,
        rules.kashubian_rule,
        "(n==1) ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2",
    ),
    # Welsh
    "cy": PluralRule("cy", 4, rules.welsh_rule, "(n==1) ? 0 : (n==2) ? 1 : (n != 8 && n != 11) ? 2 : 3"),
    # Irish
    "ga": PluralRule(
        "ga", 5, rules.irish_rule, "n==1 ? 0 : n==2 ? 1 : (n>2 && n<7) ? 2 : (n>6 && n<11) ? 3 : 4"
    ),
    # Scottish Gaelic
    "gd": PluralRule(
        "gd",
        4,
        rules.scottish_gaelic_rule,
        "(n==1 || n==11) ? 0 : (n==2 || n==12) ? 1 : (n > 2 && n < 20) ? 2 : 3",
    ),
    # Icelandic
    "is": PluralRule("is", 2, rules.icelandic_rule, "(n%10!=1 || n%100==11)"),
    # Javanese
    "jv": PluralRule("jv", 2, rules.javanese_rule, "(n != 0)"),
    # Cornish
    "kw": PluralRule("kw", 4, rules.cornish_rule, "(n==1) ? 0 : (n==2) ? 1 : (n == 3) ? 2 : 3"),
    # Lithuanian
    "lt": PluralRule(
        "lt",
        3,
        rules.lithuanian_rule,
        "(n%10==1 && n%100!=11 ? 0 : n%10>=2 && (n%100<10 || n%100>=20) ? 1 : 2)",
    ),
    # Latvian
    "lv": PluralRule("lv", 3, rules.latvian_rule, "(n%10==1 && n%100!=11 ? 0 : n != 0 ? 1 : 2)"),
    # Macedonian
    "mk": PluralRule("mk", 3, rules.macedonian_rule, "(n%10==1 ? 0 : n%10==2 ? 1 : 2)"),
    # Mandinka
    "mnk": PluralRule("mnk", 3, rules.mandinka_rule, "(n==0 ? 0 : n==1 ? 1 : 2)"),
    # Maltese
    "mt": PluralRule(
        "mt",
        4,
        rules.maltese_rule,
        "(n==1 ? 0 : n==0 || ( n%100>1 && n%100<11) ? 1 : (n%100>10 && n%100<20 ) ? 2 : 3)",
    ),
    # Polish
    "pl": PluralRule(
        "pl",
        3,
        rules.polish_rule,
        "(n==1 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2)",
    ),
    # Romanian
    "ro": PluralRule(
        "ro", 3, rules.romanian_rule, "(n==1 ? 0 : (n==0 || (n%100 > 0 && n%100 < 20)) ? 1 : 2)"
    ),
    # Slovenian
    "sl": PluralRule(
        "sl",
        4,
        rules.slovenian_rule,
        "(n%100==1 ? 1 : n%100==2 ? 2 : n%100==3 || n%100==4 ? 3 : 0)",
    ),
}


def build_table(
    groups: Iterable[tuple[PluralRule, Iterable[str]]],
    irregular: Mapping[str, PluralRule],
) -> Mapping[str, PluralRule]:
    """
    Flatten grouped and irregular rules into one read-only mapping.

    Args:
        groups: (rule, locales) pairs for shared formulas
        irregular: Locale to rule mapping for one-off formulas

    Returns:
        Read-only mapping from locale code to PluralRule

    Raises:
        ValueError: If a locale code is listed more than once
    """
    table: dict[str, PluralRule] = {}

    def _add(locale: str, rule: PluralRule) -> None:
        if locale in table:
            raise ValueError(
                f"Locale '{locale}' listed twice ({table[locale].name} and {rule.name})"
            )
        table[locale] = rule

    for rule, locales in groups:
        for locale in locales:
            _add(locale, rule)

    for locale, rule in irregular.items():
        _add(locale, rule)

    logger.debug(f"Built plural rule table with {len(table)} locales")
    return MappingProxyType(table)


PLURAL_RULES: Mapping[str, PluralRule] = build_table(LOCALE_GROUPS, IRREGULAR_RULES)
