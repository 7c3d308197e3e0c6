"""
Lydia statement parsing.

A Lydia export looks like:

    Firstname Lastname,...      <- account holder line, identifies the dialect
    ...                         <- lines 2-5: statement metadata
    Date,Label,Debit,Credit     <- column header
    12/03/2024,Card transaction: BAKERY,-4.50,
    ...

Only the data rows are turned into YNAB transactions.
"""
import asyncio
import csv
import io
from typing import List, Optional

from core.config import get_settings
from core.exceptions import FileReadError, InvalidFormatError, MalformedRowError
from core.logger import setup_logger
from core.normalize import RAW_FIELD_COUNT, normalize_row
from core.schema import OutputTransaction, RawFile

logger = setup_logger(__name__)

HEADER_MARKER = "Firstname Lastname"
PREAMBLE_LINES = 5


async def read_statement_text(raw_file: RawFile, encoding: Optional[str] = None) -> str:
    """
    Read and decode a statement file.
    
    Args:
        raw_file: File handle with in-memory content or a path
        encoding: Text encoding for byte content (defaults to FILE_ENCODING)
    
    Returns:
        Decoded file text
    
    Raises:
        FileReadError: If the file cannot be read or decoded
    """
    encoding = encoding or get_settings().file_encoding
    
    if raw_file.content is not None:
        data = raw_file.content
    elif raw_file.path is not None:
        try:
            data = await asyncio.to_thread(raw_file.path.read_bytes)
        except OSError as e:
            logger.error(f"Failed to read {raw_file.name}: {e}")
            raise FileReadError(
                f"Error reading file: {raw_file.name}",
                details={"file_name": raw_file.name, "error": str(e)}
            )
    else:
        raise FileReadError(
            f"Error reading file: {raw_file.name}",
            details={"file_name": raw_file.name, "error": "file has neither content nor path"}
        )
    
    if isinstance(data, bytes):
        try:
            data = data.decode(encoding)
        except UnicodeDecodeError as e:
            logger.error(f"Failed to decode {raw_file.name} as {encoding}: {e}")
            raise FileReadError(
                f"Error reading file: {raw_file.name}",
                details={"file_name": raw_file.name, "encoding": encoding, "error": str(e)}
            )
    
    return data.lstrip("\ufeff")


def strip_preamble(text: str) -> str:
    """Drop the metadata lines that precede the CSV header."""
    return "\n".join(text.split("\n")[PREAMBLE_LINES:])


def tokenize_rows(text: str) -> List[List[str]]:
    """Split CSV text into rows of fields, skipping blank lines."""
    return [row for row in csv.reader(io.StringIO(text)) if row]


def parse_statement_text(
    text: str,
    file_name: str = "<memory>",
    strict_rows: Optional[bool] = None
) -> List[OutputTransaction]:
    """
    Convert the text of one Lydia export into YNAB transactions.
    
    Args:
        text: Full decoded file content
        file_name: Name used in errors and logs
        strict_rows: Reject rows without exactly four fields
            (defaults to STRICT_ROWS)
    
    Returns:
        Transactions in file row order
    
    Raises:
        InvalidFormatError: If the file is not a Lydia export or its CSV
            data cannot be tokenized
        MalformedRowError: In strict mode, on a row with the wrong field count
    """
    if strict_rows is None:
        strict_rows = get_settings().strict_rows
    
    if not text.startswith(HEADER_MARKER):
        logger.warning(f"Rejected {file_name}: missing '{HEADER_MARKER}' header")
        raise InvalidFormatError(
            f"Invalid Lydia CSV file: {file_name}",
            details={"file_name": file_name}
        )
    
    try:
        # First tokenized row is the column header
        rows = tokenize_rows(strip_preamble(text))[1:]
    except csv.Error as e:
        logger.warning(f"Rejected {file_name}: unreadable CSV data: {e}")
        raise InvalidFormatError(
            f"Invalid Lydia CSV file: {file_name}",
            details={"file_name": file_name, "error": str(e)}
        )
    
    transactions = []
    for row_number, row in enumerate(rows, start=1):
        if len(row) != RAW_FIELD_COUNT:
            if strict_rows:
                raise MalformedRowError(
                    f"Malformed row {row_number} in {file_name}: "
                    f"expected {RAW_FIELD_COUNT} fields, got {len(row)}",
                    details={"file_name": file_name, "row": row_number, "field_count": len(row)}
                )
            logger.debug(f"Row {row_number} in {file_name} has {len(row)} fields")
        transactions.append(normalize_row(row))
    
    return transactions


async def parse_file(raw_file: RawFile, strict_rows: Optional[bool] = None) -> List[OutputTransaction]:
    """
    Read one statement file and convert it into YNAB transactions.
    
    Args:
        raw_file: File to convert
        strict_rows: Reject rows without exactly four fields
    
    Returns:
        Transactions in file row order
    
    Raises:
        FileReadError: If the file cannot be read
        InvalidFormatError: If the file is not a Lydia export
    """
    logger.info(f"Parsing {raw_file.name}")
    
    text = await read_statement_text(raw_file)
    transactions = parse_statement_text(text, raw_file.name, strict_rows)
    
    logger.info(f"Parsed {len(transactions)} transactions from {raw_file.name}")
    return transactions
