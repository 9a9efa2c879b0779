"""Split free-text ingredient lines into quantity, unit and name."""

import re
from dataclasses import dataclass

from grocerylist.logging_config import get_logger
from grocerylist.normalize.units import UNIT_TOKENS

logger = get_logger(__name__)


# Unicode vulgar fractions that show up in pasted or scanned recipes
VULGAR_FRACTIONS: dict[str, float] = {
    "½": 1 / 2,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 1 / 4,
    "¾": 3 / 4,
    "⅛": 1 / 8,
    "⅜": 3 / 8,
    "⅝": 5 / 8,
    "⅞": 7 / 8,
}

_VULGAR = "".join(VULGAR_FRACTIONS)
_UNIT_PATTERN = "|".join(token.replace(" ", r"\s+") for token in UNIT_TOKENS)

_LINE_RE = re.compile(
    rf"""
    ^\s*
    (?P<quantity>
        \d+\s+\d+/\d+               # mixed number: 1 1/2
      | \d+/\d+                     # fraction: 1/2
      | \d*\s?[{_VULGAR}]           # vulgar fraction: ½, 1½, 1 ½
      | \d+(?:\.\d+)? | \.\d+       # integer or decimal
    )
    \s*
    (?:(?P<unit>{_UNIT_PATTERN})\b\.?)?
    \s*
    (?P<name>.*?)
    \s*$
    """,
    re.IGNORECASE | re.VERBOSE | re.DOTALL,
)

_MIXED_RE = re.compile(r"^(\d+)\s+(\d+)/(\d+)$")
_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")
_VULGAR_RE = re.compile(rf"^(\d*)\s?([{_VULGAR}])$")
_NUMBER_RE = re.compile(r"^(\d+(?:\.\d+)?|\.\d+)$")


@dataclass(frozen=True)
class ParsedIngredient:
    """The (quantity, unit, name) triple extracted from one ingredient line."""

    quantity: float
    unit: str
    name: str
    raw: str = ""

    @property
    def is_bare_count(self) -> bool:
        """True when the line carried no leading quantity ("Salt")."""
        return bool(self.raw) and self.name == self.raw.strip()


def parse_quantity_string(quantity_str: str | None) -> float:
    """
    Parse a quantity string into a float.

    Handles formats like:
    - "2"
    - "1.5"
    - "1/2"
    - "1 1/2" (one and a half)
    - "½" and "1½"

    Empty or non-numeric text counts as a single item.
    """
    value = _quantity_value(quantity_str or "")
    return 1.0 if value is None else value


def _quantity_value(quantity_str: str) -> float | None:
    text = " ".join(quantity_str.split())
    if not text:
        return None

    if match := _MIXED_RE.match(text):
        whole, num, denom = (int(group) for group in match.groups())
        if denom == 0:
            return None
        return whole + num / denom

    if match := _FRACTION_RE.match(text):
        num, denom = (int(group) for group in match.groups())
        if denom == 0:
            return None
        return num / denom

    if match := _VULGAR_RE.match(text):
        whole = int(match.group(1)) if match.group(1) else 0
        return whole + VULGAR_FRACTIONS[match.group(2)]

    if _NUMBER_RE.match(text):
        return float(text)

    return None


def parse_ingredient(line: str) -> ParsedIngredient:
    """
    Parse one ingredient line.

    Never fails: a line without a leading quantity, or with nothing left over
    for the name, becomes a single unitless item named after the whole line.

    Examples:
        "2 cups flour" -> (2.0, "cups", "flour")
        "300g beef sirloin, thinly sliced" -> (300.0, "g", "beef sirloin, thinly sliced")
        "Salt" -> (1.0, "", "Salt")
    """
    raw = line or ""
    match = _LINE_RE.match(raw)

    if match and match.group("name"):
        quantity = _quantity_value(match.group("quantity"))
        if quantity is not None:
            unit = " ".join((match.group("unit") or "").lower().split())
            return ParsedIngredient(
                quantity=quantity,
                unit=unit,
                name=match.group("name"),
                raw=raw,
            )

    logger.debug(f"No leading quantity in {raw!r}, treating as a single item")
    return ParsedIngredient(quantity=1.0, unit="", name=raw.strip(), raw=raw)
