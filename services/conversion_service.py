"""
Conversion service.
Runs statement files through parsing and aggregates the results.
"""
import asyncio
from typing import Dict, List, Optional, Sequence

from core.classify import RULE_MEMOS
from core.config import get_settings
from core.exporters import export_to_csv
from core.logger import setup_logger
from core.parsing import parse_file
from core.schema import OutputTransaction, RawFile

logger = setup_logger(__name__)


class ConversionService:
    """Service for converting Lydia statements into one YNAB dataset."""
    
    def __init__(self, strict_rows: Optional[bool] = None):
        """
        Initialize conversion service.
        
        Args:
            strict_rows: Reject malformed rows (defaults to STRICT_ROWS)
        """
        self.settings = get_settings()
        self.strict_rows = self.settings.strict_rows if strict_rows is None else strict_rows
    
    async def convert(self, files: Sequence[RawFile]) -> List[OutputTransaction]:
        """
        Parse all files concurrently and concatenate their transactions.
        
        Every parse is started before any is awaited. Results are read back by
        submission position, so output order never depends on which file
        finishes first. If any file fails, the whole conversion fails with the
        first failure in submission order and nothing is returned.
        
        Args:
            files: Statement files in the order the user supplied them
        
        Returns:
            Transactions of file 1, then file 2, and so on
        
        Raises:
            ConverterException: Failure of the earliest failing file
        """
        total = len(files)
        logger.info(f"Converting {total} file(s)")
        
        tasks = [
            asyncio.ensure_future(parse_file(raw_file, self.strict_rows))
            for raw_file in files
        ]
        results = await asyncio.gather(*tasks, return_exceptions=True)
        
        for raw_file, result in zip(files, results):
            if isinstance(result, BaseException):
                logger.error(f"Conversion aborted, {raw_file.name} failed: {result}")
                raise result
        
        transactions = [txn for file_transactions in results for txn in file_transactions]
        
        stats = build_conversion_statistics(transactions)
        logger.info(f"Converted {total} file(s) into {stats['total']} transactions")
        if stats["unclassified"]:
            logger.warning(f"{stats['unclassified']} transaction(s) left unclassified in memo")
        
        return transactions
    
    async def convert_to_csv(self, files: Sequence[RawFile]) -> str:
        """Convert files and render the result as YNAB CSV text."""
        transactions = await self.convert(files)
        return export_to_csv(transactions)


def build_conversion_statistics(transactions: Sequence[OutputTransaction]) -> Dict[str, int]:
    """
    Count transactions per memo label.
    
    Args:
        transactions: Converted transactions
    
    Returns:
        Dictionary with total, unclassified and one count per rule memo label
    """
    stats = {"total": len(transactions), "unclassified": 0}
    for label in sorted(RULE_MEMOS):
        stats[label] = 0
    
    for txn in transactions:
        if not txn.classified:
            stats["unclassified"] += 1
        elif txn.memo in RULE_MEMOS:
            stats[txn.memo] += 1
    
    return stats
