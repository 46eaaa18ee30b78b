"""Alcohol content rule.

Unlike the other rules this one searches the raw OCR text: normalization
strips "%" and the periods in "Alc./Vol.", which are exactly what the ABV
pattern needs to see.
"""

import math

from label_verifier.matchers.pattern_builders import build_abv_pattern, render_abv
from label_verifier.models.schemas import FieldCheck, FieldName, MatchStatus, RuleOutcome


def abv_check(declared_abv: float | None, raw_text: str | None) -> MatchStatus:
    """Check that the declared ABV is printed as a percentage in the raw text.

    A declared value of 0 (the default when nothing was entered) is not a
    valid claim and never matches.
    """
    if declared_abv is None or not math.isfinite(declared_abv) or declared_abv <= 0:
        return MatchStatus.NOT_FOUND_OR_MISMATCH

    pattern = build_abv_pattern(render_abv(declared_abv))
    if pattern.search(raw_text or ""):
        return MatchStatus.MATCH
    return MatchStatus.NOT_FOUND_OR_MISMATCH


def alcohol_content_present(ctx) -> RuleOutcome:
    """ALCOHOL_CONTENT_PRESENT"""
    declared_abv = ctx.declared.alcohol_content
    expected = f"{render_abv(declared_abv)}%"
    status = abv_check(declared_abv, ctx.ocr_raw)
    return RuleOutcome(
        check=FieldCheck(field=FieldName.ALCOHOL_CONTENT, status=status, expected=expected),
    )
