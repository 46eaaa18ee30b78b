"""Alcohol beverage label validator.

Every check is mandatory except net contents when nothing was declared.
The order of rule_ids is the order of rows in the report.
"""

from label_verifier.validators.base_validator import BaseValidator


class LabelValidator(BaseValidator):
    rule_ids = [
        "BRAND_NAME_CONTAINS",
        "PRODUCT_CLASS_CONTAINS",
        "ALCOHOL_CONTENT_PRESENT",
        "NET_CONTENTS_PRESENT",
        "GOV_WARNING_CONTAINS",
    ]
