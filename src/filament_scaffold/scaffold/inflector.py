"""English pluralization and singularization for class names.

Rules are checked in order: uncountable words, irregular words, then the
regex suffix rules (first match wins).  The case of the input word is
carried over to the result, so ``Person`` becomes ``People`` and ``BOX``
becomes ``BOXES``.
"""

from __future__ import annotations

import re

UNCOUNTABLE: frozenset[str] = frozenset({
    "audio", "bison", "cattle", "chassis", "compensation", "coreopsis",
    "data", "deer", "education", "emoji", "equipment", "evidence",
    "feedback", "firmware", "fish", "furniture", "gold", "hardware",
    "information", "jedi", "kin", "knowledge", "love", "metadata", "money",
    "moose", "news", "nutrition", "offspring", "plankton", "pokemon",
    "police", "rain", "recommended", "related", "rice", "series", "sheep",
    "software", "species", "swine", "traffic", "wheat",
})

# singular -> plural
IRREGULAR: dict[str, str] = {
    "atlas": "atlases",
    "axe": "axes",
    "beef": "beefs",
    "brother": "brothers",
    "cafe": "cafes",
    "chateau": "chateaux",
    "child": "children",
    "cookie": "cookies",
    "corpus": "corpuses",
    "criterion": "criteria",
    "curriculum": "curricula",
    "foot": "feet",
    "ganglion": "ganglions",
    "genie": "genies",
    "genus": "genera",
    "goose": "geese",
    "graffito": "graffiti",
    "hoof": "hoofs",
    "human": "humans",
    "man": "men",
    "medium": "media",
    "move": "moves",
    "mythos": "mythoi",
    "niche": "niches",
    "numen": "numina",
    "occiput": "occiputs",
    "octopus": "octopuses",
    "opus": "opuses",
    "ox": "oxen",
    "passerby": "passersby",
    "penis": "penises",
    "person": "people",
    "plateau": "plateaux",
    "runner-up": "runners-up",
    "sex": "sexes",
    "soliloquy": "soliloquies",
    "son-in-law": "sons-in-law",
    "syllabus": "syllabi",
    "testis": "testes",
    "thief": "thieves",
    "tooth": "teeth",
    "tornado": "tornadoes",
    "trilby": "trilbys",
    "turf": "turfs",
    "valve": "valves",
    "wave": "waves",
    "woman": "women",
    "zombie": "zombies",
}

IRREGULAR_PLURALS: dict[str, str] = {v: k for k, v in IRREGULAR.items()}

_PLURAL_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(p, re.IGNORECASE), r)
    for p, r in [
        (r"(quiz)$", r"\1zes"),
        (r"^(ox)$", r"\1en"),
        (r"^([ml])ouse$", r"\1ice"),
        (r"(matr|vert|ind)(ix|ex)$", r"\1ices"),
        (r"(x|ch|ss|sh)$", r"\1es"),
        (r"([^aeiouy]|qu)y$", r"\1ies"),
        (r"(hive|gulf)$", r"\1s"),
        (r"(?:([^f])fe|([lr])f)$", r"\1\2ves"),
        (r"sis$", "ses"),
        (r"([ti])um$", r"\1a"),
        (r"(p)erson$", r"\1eople"),
        (r"(m)an$", r"\1en"),
        (r"(c)hild$", r"\1hildren"),
        (r"(f)oot$", r"\1eet"),
        (r"(buffal|her|potat|tomat|volcan)o$", r"\1oes"),
        (r"(alumn|bacill|cact|foc|fung|nucle|radi|stimul|syllab|termin|vir)us$", r"\1i"),
        (r"us$", "uses"),
        (r"(alias)$", r"\1es"),
        (r"(analys|ax|cris|test|thes)is$", r"\1es"),
        (r"s$", "s"),
        (r"$", "s"),
    ]
]

_SINGULAR_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(p, re.IGNORECASE), r)
    for p, r in [
        (r"(s)tatuses$", r"\1tatus"),
        (r"(f)eet$", r"\1oot"),
        (r"(t)eeth$", r"\1ooth"),
        (r"^(.*)(menu)s$", r"\1\2"),
        (r"(quiz)zes$", r"\1"),
        (r"(matr)ices$", r"\1ix"),
        (r"(vert|ind)ices$", r"\1ex"),
        (r"^(ox)en", r"\1"),
        (r"(alias)(es)*$", r"\1"),
        (r"(buffal|her|potat|tomat|volcan)oes$", r"\1o"),
        (r"(alumn|bacill|cact|foc|fung|nucle|radi|stimul|syllab|termin|viri?)i$", r"\1us"),
        (r"([ftw]ax)es", r"\1"),
        (r"(analys|ax|cris|test|thes)es$", r"\1is"),
        (r"(shoe|slave)s$", r"\1"),
        (r"(o)es$", r"\1"),
        (r"ouses$", "ouse"),
        (r"([^a])uses$", r"\1us"),
        (r"^([ml])ice$", r"\1ouse"),
        (r"(x|ch|ss|sh)es$", r"\1"),
        (r"(m)ovies$", r"\1ovie"),
        (r"(s)eries$", r"\1eries"),
        (r"([^aeiouy]|qu)ies$", r"\1y"),
        (r"([lr])ves$", r"\1f"),
        (r"(tive)s$", r"\1"),
        (r"(hive)s$", r"\1"),
        (r"(drive)s$", r"\1"),
        (r"(dive)s$", r"\1"),
        (r"(olive)s$", r"\1"),
        (r"([^fo])ves$", r"\1fe"),
        (r"(^analy)ses$", r"\1sis"),
        (r"((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)ses$", r"\1sis"),
        (r"(tax)a$", r"\1on"),
        (r"(c)riteria$", r"\1riterion"),
        (r"([ti])a$", r"\1um"),
        (r"(p)eople$", r"\1erson"),
        (r"(m)en$", r"\1an"),
        (r"(c)hildren$", r"\1hild"),
        (r"(n)ews$", r"\1ews"),
        (r"eaus$", "eau"),
        (r"^tights$", "tights"),
        (r"^shorts$", "shorts"),
        (r"(sis)$", r"\1"),
        (r"(ss)$", r"\1"),
        (r"(us)$", r"\1"),
        (r"s$", ""),
    ]
]


def match_case(value: str, comparison: str) -> str:
    """Return *value* with the letter case of *comparison*."""
    if not comparison:
        return value
    if comparison.isupper() and len(comparison) > 1:
        return value.upper()
    if comparison.islower():
        return value.lower()
    if comparison[0].isupper():
        return value[:1].upper() + value[1:]
    return value


def _is_uncountable(word: str) -> bool:
    return word.lower() in UNCOUNTABLE


def _apply(word: str, rules: list[tuple[re.Pattern[str], str]]) -> str:
    for pattern, replacement in rules:
        if pattern.search(word):
            return pattern.sub(lambda m: _expand(m, replacement), word, count=1)
    return word


def _expand(match: re.Match[str], template: str) -> str:
    def group(m: re.Match[str]) -> str:
        return match.group(int(m.group(1))) or ""

    return re.sub(r"\\(\d)", group, template)


def pluralize(word: str) -> str:
    """Return the plural form of a single English word."""
    if not word or _is_uncountable(word):
        return word
    lower = word.lower()
    if lower in IRREGULAR:
        return match_case(IRREGULAR[lower], word)
    if lower in IRREGULAR_PLURALS:
        return word
    return match_case(_apply(word, _PLURAL_RULES), word)


def singularize(word: str) -> str:
    """Return the singular form of a single English word."""
    if not word or _is_uncountable(word):
        return word
    lower = word.lower()
    if lower in IRREGULAR_PLURALS:
        return match_case(IRREGULAR_PLURALS[lower], word)
    if lower in IRREGULAR:
        return word
    return match_case(_apply(word, _SINGULAR_RULES), word)
