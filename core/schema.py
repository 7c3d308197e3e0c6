"""
Pydantic models for the conversion pipeline.
Defines the input file handle and the YNAB output record.
"""
from pathlib import Path
from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def none_to_empty(v):
    """Missing CSV cells arrive as None; YNAB columns are never absent."""
    if v is None:
        return ""
    return v


Text = Annotated[str, BeforeValidator(none_to_empty)]

# Column order of the YNAB import file
OUTPUT_COLUMNS: List[str] = ["Date", "Memo", "Payee", "Outflow", "Inflow"]


class DescriptionParts(BaseModel):
    """
    Payee and memo derived from a Lydia description.
    classified is False when no rule understood a non-empty description.
    """
    model_config = ConfigDict(frozen=True)
    
    payee: str = ""
    memo: str = ""
    classified: bool = True


class OutputTransaction(BaseModel):
    """
    One row of the YNAB import file.
    Field aliases are the YNAB column headers.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)
    
    date: Text = Field(default="", alias="Date")
    memo: Text = Field(default="", alias="Memo")
    payee: Text = Field(default="", alias="Payee")
    outflow: Text = Field(default="", alias="Outflow")
    inflow: Text = Field(default="", alias="Inflow")
    # Not a YNAB column
    classified: bool = Field(default=True, exclude=True)
    
    def to_row(self) -> List[str]:
        """Values in OUTPUT_COLUMNS order."""
        record = self.model_dump(by_alias=True)
        return [record[column] for column in OUTPUT_COLUMNS]


class RawFile(BaseModel):
    """
    A statement file handed over by the caller.
    Either in-memory content or a path on disk; read exactly once.
    """
    name: str
    content: Optional[Union[bytes, str]] = None
    path: Optional[Path] = None
