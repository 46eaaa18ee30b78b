"""Substring rules: brand name, product class and government warning.

Each rule takes a VerificationContext and returns a RuleOutcome. The declared
value is normalized the same way as the OCR text and must then appear in it
as one contiguous run. There is no fuzzy matching: "Old Sam" does not match
"Old Tom".

An empty declaration never matches. These fields are mandatory on the label,
so leaving one blank fails the check instead of skipping it.
"""

from label_verifier.models.schemas import FieldCheck, FieldName, MatchStatus, RuleOutcome
from label_verifier.utils.gov_warning_text import GOVERNMENT_WARNING_PHRASE
from label_verifier.utils.text_normalization import normalize


def substring_check(declared_value: str | None, normalized_haystack: str) -> MatchStatus:
    """Check that the normalized declared value occurs in the normalized OCR text."""
    expected = normalize(declared_value)
    if not expected:
        return MatchStatus.NOT_FOUND_OR_MISMATCH

    if expected in normalized_haystack:
        return MatchStatus.MATCH
    return MatchStatus.NOT_FOUND_OR_MISMATCH


def brand_name_contains(ctx) -> RuleOutcome:
    """BRAND_NAME_CONTAINS"""
    brand_name = ctx.declared.brand_name
    status = substring_check(brand_name, ctx.ocr_normalized)
    return RuleOutcome(
        check=FieldCheck(field=FieldName.BRAND_NAME, status=status, expected=brand_name),
    )


def product_class_contains(ctx) -> RuleOutcome:
    """PRODUCT_CLASS_CONTAINS"""
    product_class = ctx.declared.product_class
    status = substring_check(product_class, ctx.ocr_normalized)
    return RuleOutcome(
        check=FieldCheck(field=FieldName.PRODUCT_CLASS, status=status, expected=product_class),
    )


def gov_warning_contains(ctx) -> RuleOutcome:
    """GOV_WARNING_CONTAINS — looks for the warning header, not the full statement."""
    status = substring_check(GOVERNMENT_WARNING_PHRASE, ctx.ocr_normalized)
    return RuleOutcome(
        check=FieldCheck(
            field=FieldName.GOVERNMENT_WARNING,
            status=status,
            expected=GOVERNMENT_WARNING_PHRASE,
        ),
    )
