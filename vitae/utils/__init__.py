"""
Shared utilities for VITAE.

Common functionality used across contexts:
- Entry identifiers
- Date formatting
- Logger configuration
"""

from vitae.utils.identifiers import new_id
from vitae.utils.timestamp import format_date, format_date_range

__all__ = ["new_id", "format_date", "format_date_range"]
