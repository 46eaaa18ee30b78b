"""Net contents unit table.

Maps each canonical unit token to the surface spellings accepted for it in
OCR text. Spellings are regex fragments written against normalized text
(lowercase, punctuation already stripped), so "FL. OZ." only needs to be
covered as "fl oz". Add a unit by adding a row; the matching code does not
change.
"""

import re

UNIT_SYNONYMS: dict[str, tuple[str, ...]] = {
    "ml": (r"m\s*l", "ml", "milliliters?", "millilitres?"),
    "floz": (r"fl\s*oz", "floz", r"fluid\s*ounces?"),
    "l": ("l", "liters?", "litres?", "ltrs?"),
    "cl": (r"c\s*l", "cl", "centiliters?", "centilitres?"),
    "oz": ("oz", "ounces?"),
    "gal": ("gal", "gallons?"),
    "pt": ("pt", "pints?"),
    "qt": ("qt", "quarts?"),
}

# Unit tokens that are not in the table may still be used literally, but only
# if they are plain letters.
_LITERAL_UNIT_PATTERN = re.compile(r"[a-z]+")


def resolve_unit(token: str) -> str | None:
    """Resolve a declared unit token to its canonical table key.

    The token is expected without spaces or punctuation ("ml", "floz",
    "milliliters"). A token matching any spelling of a table row resolves to
    that row; an unknown all-letter token resolves to itself. Anything else
    returns None.
    """
    if not token:
        return None

    if token in UNIT_SYNONYMS:
        return token

    for canonical, spellings in UNIT_SYNONYMS.items():
        if any(re.fullmatch(spelling, token) for spelling in spellings):
            return canonical

    if _LITERAL_UNIT_PATTERN.fullmatch(token):
        return token
    return None


def unit_spellings(unit: str) -> tuple[str, ...]:
    """Accepted regex spellings for a resolved unit (literal for unknown units)."""
    return UNIT_SYNONYMS.get(unit, (re.escape(unit),))
