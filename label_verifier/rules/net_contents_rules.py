"""Net contents rule — three-tier matching.

  1. The declaration contains "<number> <unit>" anywhere ("750 mL",
     "Net Contents: 750 mL (25.4 fl oz)"): look for the first such number
     followed by any accepted spelling of its unit ("750 ML", "750ml",
     "750 milliliters").
  2. No number in it is followed by a unit (usually a bare number): if the
     first number appears in the OCR text at all, report
     MISMATCH_UNIT_MISSING. The volume was found but the declaration is
     incomplete, so this is still a failure.
  3. Nothing was declared: the check is optional. The row is still reported,
     but it does not affect the overall result.
"""

from label_verifier.matchers.pattern_builders import build_net_contents_pattern, parse_declared_volume
from label_verifier.models.schemas import FieldCheck, FieldName, MatchStatus, RuleOutcome
from label_verifier.utils.text_normalization import first_number, normalize

OPTIONAL_EXPECTED = "N/A (optional)"


def net_contents_check(declared: str | None, normalized_haystack: str) -> tuple[MatchStatus, bool]:
    """Return (status, is_mandatory) for a net contents declaration."""
    declared_normalized = normalize(declared)
    is_mandatory = len(declared_normalized) > 0
    if not is_mandatory:
        return MatchStatus.NOT_FOUND_OR_MISMATCH, False

    volume = parse_declared_volume(declared)
    if volume is not None:
        if build_net_contents_pattern(volume).search(normalized_haystack):
            return MatchStatus.MATCH, True
        return MatchStatus.NOT_FOUND_OR_MISMATCH, True

    number = first_number(declared_normalized)
    if number and number in normalized_haystack:
        return MatchStatus.MISMATCH_UNIT_MISSING, True
    return MatchStatus.NOT_FOUND_OR_MISMATCH, True


def net_contents_present(ctx) -> RuleOutcome:
    """NET_CONTENTS_PRESENT"""
    declared = ctx.declared.net_contents
    status, mandatory = net_contents_check(declared, ctx.ocr_normalized)
    return RuleOutcome(
        check=FieldCheck(
            field=FieldName.NET_CONTENTS,
            status=status,
            expected=declared if mandatory else OPTIONAL_EXPECTED,
        ),
        mandatory=mandatory,
    )
