"""
Core conversion modules for Lydia to YNAB statement conversion.

This package contains:
- classify: Description to payee/memo rules
- config: Application configuration and settings
- exceptions: Custom exception classes
- exporters: YNAB CSV export
- logger: Logging configuration
- normalize: Row normalization
- parsing: Lydia export parsing
- schema: Pydantic models for files and transactions
"""
