"""Rule registry — central lookup of all available verification rules by ID.

Rules are registered here so validators can reference them by ID string
rather than importing functions directly. This makes it easy to add new
rules without modifying validator code.
"""

from collections.abc import Callable

from label_verifier.models.schemas import RuleOutcome
from label_verifier.rules.abv_rules import alcohol_content_present
from label_verifier.rules.field_rules import (
    brand_name_contains,
    gov_warning_contains,
    product_class_contains,
)
from label_verifier.rules.net_contents_rules import net_contents_present

# Maps rule ID strings to their implementation functions.
# Each function takes a VerificationContext and returns a RuleOutcome, pass or fail.
RULE_REGISTRY: dict[str, Callable[..., RuleOutcome]] = {
    "BRAND_NAME_CONTAINS": brand_name_contains,
    "PRODUCT_CLASS_CONTAINS": product_class_contains,
    "ALCOHOL_CONTENT_PRESENT": alcohol_content_present,
    "NET_CONTENTS_PRESENT": net_contents_present,
    "GOV_WARNING_CONTAINS": gov_warning_contains,
}
