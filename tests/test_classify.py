"""
Unit tests for the description classifier.
"""
import pytest

from core.classify import CLASSIFIER_RULES, classify_description
from core.schema import DescriptionParts


@pytest.mark.parametrize(
    "description, payee, memo",
    [
        ("Payment to Jean Dupont", "Jean Dupont", ""),
        ("Card transaction: PAYPAL *SPOTIFY", "SPOTIFY", ""),
        ("Card transaction:  BOULANGERIE PAUL ", "BOULANGERIE PAUL", ""),
        ("Payment received from MARIE CURIE", "MARIE CURIE", ""),
        ("Direct debit: FREE MOBILE", "FREE MOBILE", ""),
        ("Adjustment of the card transaction: AMAZON EU", "AMAZON EU", "Adjustment"),
        ("Payment source modification: VISA 1234 - expired", "VISA 1234", "Source modification"),
        ("SEPA direct debit emitted to EDF", "EDF", ""),
        ("Cancellation of the card transaction: UBER", "UBER", "Cancellation"),
        ("Internal bank transfer emitted", "Internal transfer", ""),
        ("Refund of the card transaction: FNAC", "FNAC", "Refund"),
    ],
)
def test_rule_shapes(description, payee, memo):
    """Test each rule extracts payee and memo."""
    assert classify_description(description) == DescriptionParts(payee=payee, memo=memo)


@pytest.mark.parametrize(
    "description",
    [
        "Payment to Jean Dupont",
        "Card transaction: PAYPAL *SPOTIFY",
        "Payment received from MARIE CURIE",
        "Direct debit: FREE MOBILE",
        "Adjustment of the card transaction: AMAZON EU",
        "Payment source modification: VISA 1234 - expired",
        "SEPA direct debit emitted to EDF",
        "Cancellation of the card transaction: UBER",
        "Internal bank transfer emitted",
        "Refund of the card transaction: FNAC",
    ],
)
def test_fixtures_match_exactly_one_rule(description):
    """Each fixture contains exactly one marker so rule order is unambiguous."""
    matching = [marker for marker, _ in CLASSIFIER_RULES if marker in description]
    assert len(matching) == 1


def test_absent_description():
    """Test None and empty descriptions."""
    assert classify_description(None) == DescriptionParts(payee="", memo="")
    assert classify_description("") == DescriptionParts(payee="", memo="")


def test_unmatched_description_kept_in_memo():
    """Test unknown descriptions are preserved for review."""
    assert classify_description("Foo bar baz") == DescriptionParts(payee="", memo="Foo bar baz", classified=False)


def test_first_matching_rule_wins():
    """Test an earlier marker shadows a later one."""
    parts = classify_description("Payment to Card transaction: SHOP")
    assert parts == DescriptionParts(payee="Card transaction: SHOP", memo="")


def test_text_after_first_marker_occurrence():
    """Test payee starts after the first marker only."""
    parts = classify_description("Payment to Payment to Bob")
    assert parts.payee == "Payment to Bob"


def test_markers_are_case_sensitive():
    """Test lowercase markers do not match."""
    parts = classify_description("payment to jean")
    assert parts == DescriptionParts(payee="", memo="payment to jean", classified=False)


def test_colon_rule_without_colon():
    """Test a colon-based rule with no colon gives an empty payee."""
    parts = classify_description("Refund of the card transaction FNAC")
    assert parts == DescriptionParts(payee="", memo="Refund")


def test_source_modification_without_dash():
    """Test payee is kept whole when there is no dash."""
    parts = classify_description("Payment source modification: MASTERCARD 9876")
    assert parts.payee == "MASTERCARD 9876"


def test_classified_flag():
    """Test only unmatched non-empty descriptions are flagged."""
    assert not classify_description("Foo bar baz").classified
    assert classify_description("Refund of the card transaction FNAC").classified
    assert classify_description("Payment to Bob").classified
    assert classify_description(None).classified


def test_description_equal_to_rule_label_is_unclassified():
    """Test bare label text is kept as an unmatched memo."""
    parts = classify_description("Refund")
    
    assert parts == DescriptionParts(payee="", memo="Refund", classified=False)
