import math
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FieldName(str, Enum):
    """Label attributes checked by the verifier, in report order."""

    BRAND_NAME = "Brand Name"
    PRODUCT_CLASS = "Product Class"
    ALCOHOL_CONTENT = "Alcohol Content"
    NET_CONTENTS = "Net Contents"
    GOVERNMENT_WARNING = "Government Warning"


class MatchStatus(str, Enum):
    MATCH = "Match"
    NOT_FOUND_OR_MISMATCH = "Not Found/Mismatch"
    # The volume number was found but the declaration had no unit.
    MISMATCH_UNIT_MISSING = "Mismatch (Unit Missing)"


class DeclaredLabel(BaseModel):
    """What the applicant says is on the label.

    These values are untrusted user input. Any of them may be missing; the
    model never rejects input, it degrades it to an empty value so that the
    verification engine always gets something to check.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    brand_name: str = Field("", alias="brandName")
    product_class: str = Field("", alias="productClass")
    alcohol_content: float = Field(0.0, alias="alcoholContent")
    net_contents: str = Field("", alias="netContents")

    @field_validator("brand_name", "product_class", "net_contents", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @field_validator("alcohol_content", mode="before")
    @classmethod
    def _coerce_abv(cls, value: Any) -> float:
        """Parse the declared ABV leniently; anything unusable becomes 0."""
        if value is None or isinstance(value, bool):
            return 0.0
        if isinstance(value, str):
            value = value.strip().rstrip("%").strip()
        try:
            parsed = float(value)
        except (TypeError, ValueError):
            return 0.0
        return parsed if math.isfinite(parsed) else 0.0


class FieldCheck(BaseModel):
    """One row of the verification report."""

    model_config = ConfigDict(frozen=True)

    field: FieldName
    status: MatchStatus
    expected: str  # human-readable rendering of what was looked for


class VerificationReport(BaseModel):
    """Outcome of verifying one label.

    overall_match is True only when every mandatory check matched. Rows in
    `discrepancies` are always in FieldName order, pass or fail.
    """

    model_config = ConfigDict(frozen=True)

    overall_match: bool
    discrepancies: list[FieldCheck] = []


class VerifyResponse(BaseModel):
    """Body returned by POST /api/verify.

    Successful verifications carry `discrepancies`; when OCR finds no text,
    `error` is set instead and `discrepancies` is omitted.
    """

    success: bool = True
    overall_match: bool
    discrepancies: Optional[list[FieldCheck]] = None
    error: Optional[str] = None
    extracted_text: str = ""
    form_input: dict[str, str] = {}


class ErrorResponse(BaseModel):
    """Body returned for rejected uploads (400) and processing failures (500)."""

    success: bool = False
    message: str
    details: Optional[str] = None


class RuleOutcome(BaseModel):
    """A FieldCheck plus whether its failure counts against the label."""

    model_config = ConfigDict(frozen=True)

    check: FieldCheck
    mandatory: bool = True
