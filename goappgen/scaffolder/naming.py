"""Naming variants derived from the single domain word.

The templates need the domain in several spellings (``Task``, ``tasks``,
``task``).  These helpers are deliberately simple heuristics: irregular
plurals such as ``person`` become ``persons``.
"""

from __future__ import annotations

_ES_ENDINGS = ("s", "sh", "ch")


def title_case(word: str) -> str:
    """Upper-case the first character and lower-case the rest.

    Examples::

        title_case("product") -> "Product"
        title_case("PRODUCT") -> "Product"
        title_case("")        -> ""
    """
    if not word:
        return word
    return word[:1].upper() + word[1:].lower()


def pluralize(word: str) -> str:
    """Pluralize an English noun with a suffix heuristic.

    Examples::

        pluralize("category") -> "categories"
        pluralize("bus")      -> "buses"
        pluralize("order")    -> "orders"
    """
    if word.endswith("y"):
        return word[:-1] + "ies"
    if word.endswith(_ES_ENDINGS):
        return word + "es"
    return word + "s"


def lower(word: str) -> str:
    return word.lower()
