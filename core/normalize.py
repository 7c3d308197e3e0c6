"""
Row normalization: one Lydia CSV row to one YNAB transaction.
"""
import re
from typing import Optional, Sequence

from core.classify import classify_description
from core.schema import OutputTransaction

RAW_FIELD_COUNT = 4

_TOKEN_RE = re.compile(r"\S+")


def title_case(text: str) -> str:
    """
    Upper-case the first character of each whitespace-delimited token and
    lower-case the rest. Whitespace between tokens is kept as-is.
    
    Unlike str.title(), "o'neil" stays "O'neil" and "3m" stays "3m".
    """
    return _TOKEN_RE.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(), text)


def strip_outflow_marker(outflow: Optional[str]) -> str:
    """
    Drop the currency/sign glyph Lydia prefixes debit amounts with.
    
    A single-character outflow becomes empty.
    """
    if not outflow:
        return ""
    return outflow[1:]


def normalize_row(row: Sequence[Optional[str]]) -> OutputTransaction:
    """
    Build a YNAB transaction from a [date, description, outflow, inflow] row.
    
    Extra fields are ignored and missing trailing fields count as empty.
    
    Args:
        row: Tokenized CSV row
    
    Returns:
        OutputTransaction
    """
    padded = list(row[:RAW_FIELD_COUNT]) + [None] * (RAW_FIELD_COUNT - len(row))
    date, description, outflow, inflow = padded
    
    parts = classify_description(description)
    
    return OutputTransaction(
        date=date,
        memo=parts.memo,
        payee=title_case(parts.payee),
        outflow=strip_outflow_marker(outflow),
        inflow=inflow,
        classified=parts.classified,
    )
