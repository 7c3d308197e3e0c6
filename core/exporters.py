"""
CSV export in the YNAB import layout.
"""
import csv
from typing import Sequence

import pandas as pd

from core.logger import setup_logger
from core.schema import OUTPUT_COLUMNS, OutputTransaction

logger = setup_logger(__name__)


def build_output_frame(transactions: Sequence[OutputTransaction]) -> pd.DataFrame:
    """
    Build a DataFrame with exactly the YNAB columns, one row per transaction.
    
    Args:
        transactions: Transactions in output order
    
    Returns:
        DataFrame of strings in OUTPUT_COLUMNS order
    """
    return pd.DataFrame(
        [txn.to_row() for txn in transactions],
        columns=OUTPUT_COLUMNS,
        dtype=str,
    )


def export_to_csv(transactions: Sequence[OutputTransaction]) -> str:
    """
    Render transactions as YNAB CSV text.
    
    Rows end in CRLF. Fields containing commas, quotes, CR or LF are quoted
    with doubled inner quotes. The same input always yields the same text.
    
    Args:
        transactions: Transactions in output order
    
    Returns:
        CSV text with a Date,Memo,Payee,Outflow,Inflow header
    """
    output_df = build_output_frame(transactions)
    
    logger.info(f"Exporting {len(output_df)} transactions to CSV")
    
    return output_df.to_csv(index=False, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")

