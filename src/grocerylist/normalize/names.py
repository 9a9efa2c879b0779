"""Canonicalize ingredient names into grocery-list identities."""

import re
from collections.abc import Sequence
from typing import NamedTuple

from grocerylist.logging_config import get_logger

logger = get_logger(__name__)


class SynonymGroup(NamedTuple):
    """A canonical ingredient name plus the spellings that mean the same item."""

    canonical: str
    variants: tuple[str, ...]


# Ordered: the first group with a matching variant wins
SYNONYM_GROUPS: tuple[SynonymGroup, ...] = (
    SynonymGroup("eggs", ("egg", "eggs", "boiled egg", "boiled eggs", "scrambled egg", "fried egg")),
    SynonymGroup("rice", ("rice", "cooked rice", "steamed rice", "white rice", "jasmine rice")),
    SynonymGroup(
        "chicken",
        ("chicken", "chicken breast", "chicken thigh", "chicken wing", "chicken meat"),
    ),
    SynonymGroup("milk", ("milk", "whole milk", "skim milk", "low-fat milk")),
    SynonymGroup("butter", ("butter", "unsalted butter", "salted butter")),
    SynonymGroup("flour", ("flour", "all-purpose flour", "plain flour", "wheat flour")),
    SynonymGroup("sugar", ("sugar", "white sugar", "granulated sugar", "caster sugar")),
    SynonymGroup("salt", ("salt", "sea salt", "table salt", "kosher salt")),
    SynonymGroup("pepper", ("pepper", "black pepper", "ground pepper", "peppercorn")),
    SynonymGroup("onion", ("onion", "onions", "yellow onion", "white onion", "red onion")),
    SynonymGroup("garlic", ("garlic", "garlic clove", "garlic cloves", "minced garlic")),
    SynonymGroup("tomato", ("tomato", "tomatoes", "fresh tomato", "ripe tomato")),
    SynonymGroup("oil", ("oil", "cooking oil", "vegetable oil", "olive oil", "canola oil")),
    SynonymGroup("soy sauce", ("soy sauce", "light soy sauce", "dark soy sauce", "shoyu")),
    SynonymGroup("potato", ("potato", "potatoes", "russet potato", "white potato")),
    SynonymGroup("carrot", ("carrot", "carrots", "fresh carrot")),
    SynonymGroup(
        "cheese",
        ("cheese", "cheddar cheese", "mozzarella cheese", "shredded cheese"),
    ),
    SynonymGroup("bread", ("bread", "white bread", "wheat bread", "loaf bread")),
)

# Descriptive words dropped when no synonym group matches
MODIFIERS: tuple[str, ...] = (
    "fresh",
    "organic",
    "raw",
    "cooked",
    "steamed",
    "boiled",
    "fried",
    "chopped",
    "diced",
    "minced",
    "sliced",
    "shredded",
    "grated",
    "large",
    "small",
    "medium",
    "whole",
)

_MODIFIER_RE = re.compile(rf"\b(?:{'|'.join(MODIFIERS)})\b")
_PARENTHETICAL_RE = re.compile(r"\([^)]*\)")
_PRICE_RE = re.compile(
    r"[$₱€£]\s*\d+(?:[.,]\d+)?|\b(?:php|usd|eur)\s*\d+(?:[.,]\d+)?\b|\b\d+(?:[.,]\d+)?\s*(?:php|usd|eur)\b"
)
_EDGE_PUNCTUATION = " \t\r\n.,;:!?*|-•·"


def _clean_fragment(fragment: str) -> str:
    """Lowercase, trim and drop notes the parser leaves in the name."""
    cleaned = fragment.lower().strip()
    cleaned = _PARENTHETICAL_RE.sub(" ", cleaned)
    cleaned = _PRICE_RE.sub(" ", cleaned)
    # "beef sirloin, thinly sliced" -> "beef sirloin"
    cleaned = cleaned.split(",", 1)[0]
    cleaned = " ".join(cleaned.split())
    return cleaned.strip(_EDGE_PUNCTUATION)


def match_synonym_group(
    cleaned: str,
    groups: Sequence[SynonymGroup] = SYNONYM_GROUPS,
) -> SynonymGroup | None:
    """
    Find the first group with a variant matching the cleaned fragment.

    A variant matches when either string is a substring of the other, so
    "buttermilk" matches "milk" and "chick" matches "chicken". Matches are
    not limited to whole words: "oil" is found inside "boiled egg", which
    makes group order significant.
    """
    if not cleaned:
        return None
    for group in groups:
        for variant in group.variants:
            if variant in cleaned or cleaned in variant:
                return group
    return None


def singularize(name: str) -> str:
    """Drop a trailing "s" from names longer than 3 characters, except "ss"."""
    if name.endswith("s") and len(name) > 3 and not name.endswith("ss"):
        return name[:-1]
    return name


def normalize_name(
    fragment: str,
    groups: Sequence[SynonymGroup] = SYNONYM_GROUPS,
) -> str:
    """
    Normalize an ingredient name to the key used for merging.

    - Lowercase and trim, dropping parenthetical notes, prices and anything
      after the first comma
    - Return the canonical name of the first matching synonym group
    - Otherwise strip descriptive modifiers and naively singularize

    Falls back to the lowercased, trimmed input if nothing is left.
    """
    lowered = (fragment or "").lower().strip()
    cleaned = _clean_fragment(fragment or "")

    group = match_synonym_group(cleaned, groups)
    if group is not None:
        return group.canonical

    normalized = _MODIFIER_RE.sub(" ", cleaned)
    normalized = " ".join(normalized.split())
    normalized = singularize(normalized)

    if not normalized:
        logger.debug(f"Name {fragment!r} normalized to nothing, keeping it as written")
        return lowered
    return normalized
