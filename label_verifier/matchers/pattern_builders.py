"""Build regex matchers from declared label values.

Patterns are assembled from a small grammar rather than from raw user text:
only rendered digits and table-approved unit spellings are ever placed into
a pattern, so nothing the applicant types can change the pattern's meaning.
"""

import re
from dataclasses import dataclass

from label_verifier.utils.text_normalization import normalize
from label_verifier.utils.unit_synonyms import UNIT_SYNONYMS, resolve_unit, unit_spellings

# First "<number>[ ]<unit letters>" pair anywhere in the declaration, e.g.
# "750 mL", "750ML", "12 fl. oz.", "Net Contents: 750 mL (25.4 fl oz)"
DECLARED_VOLUME_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*([A-Za-z]+(?:[.\s]*[A-Za-z]+)*)")


@dataclass(frozen=True)
class DeclaredVolume:
    """A net contents declaration split into its number and canonical unit."""

    volume: str  # digits only, normalized like the OCR text ("1.75" -> "175")
    unit: str    # canonical unit token, e.g. "ml", "floz"


def render_abv(value: float) -> str:
    """Render a declared ABV the way it is printed on labels.

    Whole numbers drop the decimal part (45.0 -> "45"), anything else keeps
    its shortest representation (12.5 -> "12.5").
    """
    if value == int(value):
        return str(int(value))
    return repr(value)


def build_abv_pattern(rendered_abv: str) -> re.Pattern:
    """Build the ABV matcher for raw OCR text.

    Matches the number at a word boundary, an optional ".0", optional space,
    a mandatory "%", then optionally "alc.", "vol." or "by vol.":
      - "45%", "45 %", "45.0%"
      - "45% Alc./Vol.", "45 % vol.", "45% by vol."
    "45.5%" does not match 45; there is no numeric tolerance.

    A decimal point counts as a word boundary, so a declared 5 also matches
    the "5%" in "4.5% Alc./Vol.". This false positive is known and accepted.
    """
    number = re.escape(rendered_abv)
    return re.compile(
        rf"\b{number}(?:\.0)?\s*%(?:\s*(?:alc\.|vol\.|by\s*vol\.))?",
        re.IGNORECASE,
    )


def _unit_from_letters(unit_letters: str) -> str | None:
    """Pick the unit out of the letters that follow the volume number.

    The letters may run on into other words ("mL bottle", "fl oz each"), so
    the longest run of leading words that names a table unit wins. If no
    prefix is a known unit, the first word is used literally.
    """
    words = re.findall(r"[a-z]+", normalize(unit_letters))
    if not words:
        return None

    for end in range(len(words), 0, -1):
        unit = resolve_unit("".join(words[:end]))
        if unit in UNIT_SYNONYMS:
            return unit
    return resolve_unit(words[0])


def parse_declared_volume(declared: str) -> DeclaredVolume | None:
    """Split a raw net contents declaration into volume and unit.

    Handles:
      - "750 mL", "750mL", "750 ML"
      - "12 FL OZ", "12 fl. oz."
      - "1.75 L", "1 Gallon"
      - "Net Contents: 750 mL", "750 mL (25.4 fl oz)", "about 750ml"
    The first number followed by letters is used. Returns None only when the
    declaration has no such pair ("750", "mL", "750 / 25").
    """
    match = DECLARED_VOLUME_PATTERN.search(declared or "")
    if not match:
        return None

    number, unit_letters = match.groups()
    unit = _unit_from_letters(unit_letters)
    if unit is None:
        return None

    return DeclaredVolume(volume=normalize(number), unit=unit)


def build_net_contents_pattern(declared: DeclaredVolume) -> re.Pattern:
    """Build the net contents matcher for normalized OCR text.

    The volume must stand at a word boundary and be followed by one of the
    unit's accepted spellings, with or without a space in between
    ("750 ml", "750ml", "750 milliliters").
    """
    volume = re.escape(declared.volume)
    units = "|".join(unit_spellings(declared.unit))
    return re.compile(rf"\b{volume}\s*(?:{units})\b", re.IGNORECASE)
