"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logger configuration
- Date and timestamp formatting
"""

from folio.utils.timestamp import format_month_year, now

__all__ = ["format_month_year", "now"]
