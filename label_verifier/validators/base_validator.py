"""Base validator — defines the shared validation interface and pipeline.

Label validators inherit from this and provide their own rule list. The base
class runs the rules in order and collects one outcome per rule.
"""

import logging

from label_verifier.models.schemas import DeclaredLabel, RuleOutcome
from label_verifier.rules.rule_registry import RULE_REGISTRY
from label_verifier.utils.text_normalization import normalize

logger = logging.getLogger(__name__)


class VerificationContext:
    """Shared context passed to every rule while verifying a single label.

    Attributes:
        declared: The label attributes submitted by the applicant.
        ocr_raw: Raw OCR text as returned by the OCR provider.
        ocr_normalized: Normalized OCR text (lowercased, punctuation stripped).
    """

    def __init__(self, declared: DeclaredLabel, ocr_raw: str):
        self.declared = declared
        self.ocr_raw = ocr_raw
        self.ocr_normalized = normalize(ocr_raw)


class BaseValidator:
    """Base class for label validators.

    Subclasses override `rule_ids` to define which rules apply and in which
    order their rows appear in the report.
    """

    rule_ids: list[str] = []

    def validate(self, ctx: VerificationContext) -> list[RuleOutcome]:
        """Run all rules for this validator and return their outcomes in order."""
        outcomes = []

        for rule_id in self.rule_ids:
            rule_fn = RULE_REGISTRY.get(rule_id)
            if rule_fn is None:
                continue

            outcome = rule_fn(ctx)
            logger.debug(
                "%s: %s (%s)",
                rule_id,
                outcome.check.status.value,
                "mandatory" if outcome.mandatory else "optional",
            )
            outcomes.append(outcome)

        return outcomes
