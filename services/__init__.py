"""
Service layer for business logic.

This package contains the service that drives statement conversion:
concurrent file parsing, ordered aggregation and CSV export.
"""
