"""Naming rules for association and type names.

Naming convention:
    one account         -> Account
    many addresses      -> Address
    many street_parties -> StreetParty
    Address (bucket)    -> addresses

Irregular and uncountable words are configurable per Inflector instance.
"""

from __future__ import annotations

import re

from doc_assoc.core.config import InflectionConfig

_PLURAL_RULES: list[tuple[str, str]] = [
    (r"(quiz)$", r"\1zes"),
    (r"^(ox)$", r"\1en"),
    (r"([ml])ouse$", r"\1ice"),
    (r"(matr|vert|ind)(?:ix|ex)$", r"\1ices"),
    (r"(x|ch|ss|sh)$", r"\1es"),
    (r"([^aeiouy]|qu)y$", r"\1ies"),
    (r"(hive)$", r"\1s"),
    (r"(?:([^f])fe|([lr])f)$", r"\1\2ves"),
    (r"sis$", "ses"),
    (r"([ti])um$", r"\1a"),
    (r"(buffal|tomat)o$", r"\1oes"),
    (r"(bu)s$", r"\1ses"),
    (r"(alias|status)$", r"\1es"),
    (r"(octop|vir)us$", r"\1i"),
    (r"(ax|test)is$", r"\1es"),
    (r"s$", "s"),
    (r"$", "s"),
]

_SINGULAR_RULES: list[tuple[str, str]] = [
    (r"(database)s$", r"\1"),
    (r"(quiz)zes$", r"\1"),
    (r"(matr)ices$", r"\1ix"),
    (r"(vert|ind)ices$", r"\1ex"),
    (r"^(ox)en", r"\1"),
    (r"(alias|status)(es)?$", r"\1"),
    (r"(octop|vir)(us|i)$", r"\1us"),
    (r"^(a)x[ie]s$", r"\1xis"),
    (r"(cris|test)(is|es)$", r"\1is"),
    (r"(shoe)s$", r"\1"),
    (r"(o)es$", r"\1"),
    (r"(bus)(es)?$", r"\1"),
    (r"([ml])ice$", r"\1ouse"),
    (r"(x|ch|ss|sh)es$", r"\1"),
    (r"(m)ovies$", r"\1ovie"),
    (r"(s)eries$", r"\1eries"),
    (r"([^aeiouy]|qu)ies$", r"\1y"),
    (r"([lr])ves$", r"\1f"),
    (r"(tive)s$", r"\1"),
    (r"(hive)s$", r"\1"),
    (r"([^f])ves$", r"\1fe"),
    (r"(^analy)(sis|ses)$", r"\1sis"),
    (r"([ti])a$", r"\1um"),
    (r"(n)ews$", r"\1ews"),
    (r"(ss)$", r"\1"),
    (r"s$", ""),
]

_IRREGULAR: dict[str, str] = {
    "person": "people",
    "man": "men",
    "child": "children",
    "sex": "sexes",
    "move": "moves",
    "zombie": "zombies",
}

_UNCOUNTABLE: list[str] = [
    "equipment",
    "information",
    "rice",
    "money",
    "species",
    "series",
    "fish",
    "sheep",
    "jeans",
    "police",
]


class Inflector:
    """Singular/plural and case conversions for identifiers.

    Args:
        config: Extra irregular and uncountable words, applied on top of the
            built-in rules.
    """

    def __init__(self, config: InflectionConfig | None = None) -> None:
        self._irregular: dict[str, str] = dict(_IRREGULAR)
        self._uncountable: set[str] = set(_UNCOUNTABLE)
        if config is not None:
            for singular, plural in config.irregular.items():
                self.add_irregular(singular, plural)
            for word in config.uncountable:
                self.add_uncountable(word)

    def add_irregular(self, singular: str, plural: str) -> None:
        """Register an irregular singular/plural pair."""
        self._uncountable.discard(singular.lower())
        self._uncountable.discard(plural.lower())
        self._irregular[singular.lower()] = plural.lower()

    def add_uncountable(self, word: str) -> None:
        """Register a word whose singular and plural forms are the same."""
        self._uncountable.add(word.lower())

    def pluralize(self, word: str) -> str:
        return self._inflect(word, self._irregular, _PLURAL_RULES)

    def singularize(self, word: str) -> str:
        reverse = {plural: singular for singular, plural in self._irregular.items()}
        return self._inflect(word, reverse, _SINGULAR_RULES)

    def camelize(self, word: str) -> str:
        """Convert ``street_address`` to ``StreetAddress``."""
        return "".join(part[:1].upper() + part[1:] for part in word.split("_") if part)

    def underscore(self, word: str) -> str:
        """Convert ``StreetAddress`` to ``street_address``."""
        word = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", word)
        word = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", word)
        return word.replace("-", "_").lower()

    def classify(self, name: str) -> str:
        """Type name for a plural association name: ``addresses`` -> ``Address``."""
        return self.camelize(self.singularize(name))

    def tableize(self, class_name: str) -> str:
        """Bucket name for a type name: ``Address`` -> ``addresses``."""
        return self.pluralize(self.underscore(class_name))

    def _inflect(
        self,
        word: str,
        irregular: dict[str, str],
        rules: list[tuple[str, str]],
    ) -> str:
        # Only the last underscore-separated segment is inflected
        head, sep, last = word.rpartition("_")
        lowered = last.lower()
        if not lowered or lowered in self._uncountable:
            return word
        if lowered in irregular:
            replacement = irregular[lowered]
            if last[:1].isupper():
                replacement = replacement[:1].upper() + replacement[1:]
            return head + sep + replacement
        for pattern, substitution in rules:
            if re.search(pattern, last, flags=re.IGNORECASE):
                return head + sep + re.sub(pattern, substitution, last, flags=re.IGNORECASE)
        return word


DEFAULT_INFLECTOR = Inflector()
