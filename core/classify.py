"""
Lydia description classifier.

Lydia exports a single free-text description per transaction, such as
"Card transaction: PAYPAL *SPOTIFY" or "Payment received from JEAN DUPONT".
The rules below split that text into a YNAB payee and memo. Rules are scanned
in order and the first marker found in the description wins, so more generic
markers must stay below the specific ones they would shadow.
"""
from typing import Callable, List, Optional, Tuple

from core.schema import DescriptionParts

Extractor = Callable[[str, str], DescriptionParts]


def _after_marker(description: str, marker: str) -> DescriptionParts:
    """Payee is whatever follows the first occurrence of the marker."""
    return DescriptionParts(payee=description.split(marker, 1)[1].strip())


def _after_colon(description: str) -> str:
    _, colon, rest = description.partition(":")
    return rest.strip() if colon else ""


def _card_transaction(description: str, marker: str) -> DescriptionParts:
    payee = description.split(marker, 1)[1].strip()
    return DescriptionParts(payee=payee.replace("PAYPAL *", ""))


def _labelled(memo: str) -> Extractor:
    """Payee after the first colon, fixed memo label."""
    def extract(description: str, marker: str) -> DescriptionParts:
        return DescriptionParts(payee=_after_colon(description), memo=memo)
    return extract


def _source_modification(description: str, marker: str) -> DescriptionParts:
    payee = _after_colon(description).split("-", 1)[0].strip()
    return DescriptionParts(payee=payee, memo="Source modification")


def _internal_transfer(description: str, marker: str) -> DescriptionParts:
    return DescriptionParts(payee="Internal transfer")


# (marker, extractor) pairs in priority order
CLASSIFIER_RULES: List[Tuple[str, Extractor]] = [
    ("Payment to", _after_marker),
    ("Card transaction:", _card_transaction),
    ("received from", _after_marker),
    ("Direct debit:", _after_marker),
    ("Adjustment of the card transaction", _labelled("Adjustment")),
    ("Payment source modification", _source_modification),
    ("SEPA direct debit emitted to", _after_marker),
    ("Cancellation of the card transaction", _labelled("Cancellation")),
    ("Internal bank transfer emitted", _internal_transfer),
    ("Refund of the card transaction", _labelled("Refund")),
]

# Memo values produced by the rules themselves
RULE_MEMOS = frozenset({"Adjustment", "Source modification", "Cancellation", "Refund"})


def classify_description(description: Optional[str]) -> DescriptionParts:
    """
    Split a Lydia description into payee and memo.
    
    Never raises: descriptions no rule understands are kept whole in the
    memo with an empty payee so they can be reviewed in YNAB.
    
    Args:
        description: Raw description text, possibly None
    
    Returns:
        DescriptionParts with payee, memo and whether a rule matched
    """
    if not description:
        return DescriptionParts()
    
    for marker, extract in CLASSIFIER_RULES:
        if marker in description:
            return extract(description, marker)
    
    return DescriptionParts(memo=description, classified=False)
