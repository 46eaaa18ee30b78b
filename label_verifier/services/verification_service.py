"""Verification service — the label verification engine.

For each submission, the pipeline:
  1. Normalizes OCR text once (cached in the context)
  2. Builds a VerificationContext
  3. Runs the label validator's rules in fixed field order
  4. Aggregates: the label passes only if every mandatory check matched

The engine is pure: no I/O, no shared state, and it never raises for any
combination of empty, missing or malformed declared fields.
"""

import logging
from collections.abc import Mapping
from typing import Any

from label_verifier.models.schemas import DeclaredLabel, MatchStatus, RuleOutcome, VerificationReport
from label_verifier.validators.base_validator import VerificationContext
from label_verifier.validators.label_validator import LabelValidator

logger = logging.getLogger(__name__)

_validator = LabelValidator()


def aggregate(outcomes: list[RuleOutcome]) -> VerificationReport:
    """Combine rule outcomes into a report.

    Optional checks are reported but never fail the label.
    """
    overall_match = all(
        outcome.check.status == MatchStatus.MATCH
        for outcome in outcomes
        if outcome.mandatory
    )
    return VerificationReport(
        overall_match=overall_match,
        discrepancies=[outcome.check for outcome in outcomes],
    )


def verify_label(
    ocr_text: str | None,
    declared: DeclaredLabel | Mapping[str, Any] | None,
) -> VerificationReport:
    """Verify declared label attributes against OCR text.

    Args:
        ocr_text: Full text recognized on the label image. None counts as "".
        declared: The applicant's declared fields, either as a DeclaredLabel
            or as a mapping of form fields (camelCase or snake_case keys).

    Returns:
        VerificationReport with one FieldCheck per field in report order.
    """
    if declared is None:
        declared = DeclaredLabel()
    elif not isinstance(declared, DeclaredLabel):
        declared = DeclaredLabel.model_validate(dict(declared))

    ctx = VerificationContext(declared=declared, ocr_raw=ocr_text or "")
    report = aggregate(_validator.validate(ctx))

    logger.debug("Verification finished: overall_match=%s", report.overall_match)
    return report
