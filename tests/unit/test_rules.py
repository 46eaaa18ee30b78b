"""Unit tests for verification rules using crafted VerificationContext objects."""

import pytest

from label_verifier.models.schemas import DeclaredLabel, FieldName, MatchStatus
from label_verifier.rules.abv_rules import abv_check, alcohol_content_present
from label_verifier.rules.field_rules import (
    brand_name_contains,
    gov_warning_contains,
    product_class_contains,
    substring_check,
)
from label_verifier.rules.net_contents_rules import net_contents_check, net_contents_present
from label_verifier.utils.text_normalization import normalize
from label_verifier.validators.base_validator import VerificationContext

LABEL_TEXT = (
    "OLD TOM DISTILLERY\n"
    "Kentucky Straight Bourbon Whiskey\n"
    "45% Alc./Vol. (90 Proof)\n"
    "NET CONTENTS: 750 ML\n"
    "GOVERNMENT WARNING: (1) ACCORDING TO THE SURGEON GENERAL..."
)


def _make_ctx(ocr_text: str = LABEL_TEXT, **declared_overrides) -> VerificationContext:
    """Helper to build a VerificationContext from OCR text and optional declared overrides."""
    defaults = {
        "brand_name": "Old Tom Distillery",
        "product_class": "Kentucky Straight Bourbon Whiskey",
        "alcohol_content": 45,
        "net_contents": "750 mL",
    }
    defaults.update(declared_overrides)
    return VerificationContext(declared=DeclaredLabel(**defaults), ocr_raw=ocr_text)


class TestSubstringCheck:
    def test_case_insensitive_match(self):
        assert substring_check("Old Tom Distillery", "old tom distillery 45") == MatchStatus.MATCH

    def test_punctuation_ignored(self):
        assert substring_check("Old Tom, Distillery.", "old tom distillery") == MatchStatus.MATCH

    def test_not_found(self):
        assert substring_check("Old Sam Distillery", "old tom distillery") == MatchStatus.NOT_FOUND_OR_MISMATCH

    @pytest.mark.parametrize("declared", ["", None, "   ", "..."])
    def test_empty_never_matches(self, declared):
        assert substring_check(declared, "anything at all") == MatchStatus.NOT_FOUND_OR_MISMATCH


class TestBrandNameContains:
    def test_match(self):
        outcome = brand_name_contains(_make_ctx())
        assert outcome.check.field == FieldName.BRAND_NAME
        assert outcome.check.status == MatchStatus.MATCH
        assert outcome.check.expected == "Old Tom Distillery"
        assert outcome.mandatory is True

    def test_mismatch(self):
        outcome = brand_name_contains(_make_ctx(brand_name="Old SAM Distillery"))
        assert outcome.check.status == MatchStatus.NOT_FOUND_OR_MISMATCH

    def test_blank_is_mandatory_failure(self):
        outcome = brand_name_contains(_make_ctx(brand_name=""))
        assert outcome.check.status == MatchStatus.NOT_FOUND_OR_MISMATCH
        assert outcome.mandatory is True


class TestProductClassContains:
    def test_partial_class_matches(self):
        outcome = product_class_contains(_make_ctx(product_class="Bourbon Whiskey"))
        assert outcome.check.status == MatchStatus.MATCH

    def test_words_split_by_single_newline_do_not_match(self):
        ctx = _make_ctx("Kentucky Straight\nBourbon Whiskey", product_class="Straight Bourbon")
        assert product_class_contains(ctx).check.status == MatchStatus.NOT_FOUND_OR_MISMATCH


class TestGovWarningContains:
    def test_header_present(self):
        outcome = gov_warning_contains(_make_ctx())
        assert outcome.check.status == MatchStatus.MATCH
        assert outcome.check.expected == "government warning"

    def test_header_missing(self):
        outcome = gov_warning_contains(_make_ctx("OLD TOM DISTILLERY 45% ALC/VOL"))
        assert outcome.check.status == MatchStatus.NOT_FOUND_OR_MISMATCH


class TestABVCheck:
    def test_match_on_raw_text(self):
        assert abv_check(45, LABEL_TEXT) == MatchStatus.MATCH

    def test_decimal_declaration_matches_whole_number_on_label(self):
        assert abv_check(45.0, LABEL_TEXT) == MatchStatus.MATCH

    def test_label_with_trailing_zero(self):
        assert abv_check(40, "40.0% vol.") == MatchStatus.MATCH

    def test_wrong_value(self):
        assert abv_check(40, LABEL_TEXT) == MatchStatus.NOT_FOUND_OR_MISMATCH

    def test_normalized_text_would_not_match(self):
        # The percent sign is gone after normalization
        assert abv_check(45, normalize(LABEL_TEXT)) == MatchStatus.NOT_FOUND_OR_MISMATCH

    @pytest.mark.parametrize("declared", [0, 0.0, None, -5, float("nan"), float("inf")])
    def test_invalid_claims_never_match(self, declared):
        assert abv_check(declared, "0% 45% -5% nan% inf%") == MatchStatus.NOT_FOUND_OR_MISMATCH

    def test_empty_text(self):
        assert abv_check(45, None) == MatchStatus.NOT_FOUND_OR_MISMATCH


class TestAlcoholContentPresent:
    def test_expected_rendering(self):
        outcome = alcohol_content_present(_make_ctx(alcohol_content=45.0))
        assert outcome.check.field == FieldName.ALCOHOL_CONTENT
        assert outcome.check.expected == "45%"
        assert outcome.check.status == MatchStatus.MATCH

    def test_unset_is_mandatory_failure(self):
        outcome = alcohol_content_present(_make_ctx(alcohol_content=None))
        assert outcome.check.expected == "0%"
        assert outcome.check.status == MatchStatus.NOT_FOUND_OR_MISMATCH
        assert outcome.mandatory is True


class TestNetContentsCheck:
    haystack = normalize(LABEL_TEXT)

    def test_tier1_match(self):
        assert net_contents_check("750 mL", self.haystack) == (MatchStatus.MATCH, True)

    def test_tier1_no_space(self):
        assert net_contents_check("750ML", self.haystack) == (MatchStatus.MATCH, True)

    def test_tier1_wrong_volume(self):
        assert net_contents_check("375 mL", self.haystack) == (MatchStatus.NOT_FOUND_OR_MISMATCH, True)

    def test_tier1_wrong_unit(self):
        assert net_contents_check("750 L", self.haystack) == (MatchStatus.NOT_FOUND_OR_MISMATCH, True)

    def test_tier1_with_label_prefix(self):
        assert net_contents_check("Net Contents: 750 mL", self.haystack) == (MatchStatus.MATCH, True)

    @pytest.mark.parametrize("declared", ["750 mL (25.4 fl oz)", "750mL / 25.4 fl oz", "750 mL bottle"])
    def test_tier1_with_trailing_note(self, declared):
        haystack = normalize("NET CONTENTS: 750 ML (25.4 FL OZ)")
        assert net_contents_check(declared, haystack) == (MatchStatus.MATCH, True)

    def test_tier1_fl_oz(self):
        haystack = normalize("NET CONTENTS 12 FL. OZ.")
        assert net_contents_check("12 fl oz", haystack) == (MatchStatus.MATCH, True)

    def test_tier2_unit_missing(self):
        assert net_contents_check("750", self.haystack) == (MatchStatus.MISMATCH_UNIT_MISSING, True)

    def test_tier2_number_absent(self):
        assert net_contents_check("1000", self.haystack) == (MatchStatus.NOT_FOUND_OR_MISMATCH, True)

    def test_tier2_no_digits(self):
        assert net_contents_check("a bottle", self.haystack) == (MatchStatus.NOT_FOUND_OR_MISMATCH, True)

    @pytest.mark.parametrize("declared", ["", None, "  ", "()"])
    def test_tier3_blank_is_optional(self, declared):
        assert net_contents_check(declared, self.haystack) == (MatchStatus.NOT_FOUND_OR_MISMATCH, False)


class TestNetContentsPresent:
    def test_optional_row_is_labelled(self):
        outcome = net_contents_present(_make_ctx(net_contents=""))
        assert outcome.check.field == FieldName.NET_CONTENTS
        assert outcome.check.expected == "N/A (optional)"
        assert outcome.mandatory is False

    def test_declared_value_echoed(self):
        outcome = net_contents_present(_make_ctx(net_contents="750 mL"))
        assert outcome.check.expected == "750 mL"
        assert outcome.check.status == MatchStatus.MATCH
