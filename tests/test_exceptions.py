"""
Unit tests for custom exceptions.
"""
from core.exceptions import (
    ConverterException,
    FileReadError,
    InvalidFormatError,
    MalformedRowError,
    ConfigurationError,
)


def test_base_exception():
    """Test base exception class."""
    exc = ConverterException("Test error", details={"key": "value"})
    assert str(exc) == "Test error"
    assert exc.message == "Test error"
    assert exc.details == {"key": "value"}


def test_exception_hierarchy():
    """Test exception inheritance."""
    assert issubclass(FileReadError, ConverterException)
    assert issubclass(InvalidFormatError, ConverterException)
    assert issubclass(MalformedRowError, ConverterException)
    assert issubclass(ConfigurationError, ConverterException)


def test_read_and_format_errors_are_distinct():
    """An unreadable file is not reported as a format problem."""
    assert not issubclass(FileReadError, InvalidFormatError)
    assert not issubclass(InvalidFormatError, FileReadError)


def test_exception_with_details():
    """Test exception with details dictionary."""
    details = {"file_name": "march.csv", "row": 4}
    exc = MalformedRowError("Malformed row", details=details)
    assert exc.message == "Malformed row"
    assert exc.details["file_name"] == "march.csv"
    assert exc.details["row"] == 4


def test_exception_without_details():
    """Test exception without details."""
    exc = InvalidFormatError("Invalid Lydia CSV file: x.csv")
    assert exc.message == "Invalid Lydia CSV file: x.csv"
    assert exc.details == {}
