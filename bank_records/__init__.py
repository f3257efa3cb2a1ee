"""
Bank Records

A small banking data model: calendar dates, person names, bank clients and
their accounts, with validation rules and human-readable detail output.
"""

__version__ = "0.1.0"

from .validation import InvalidArgument, validate_string
from .models import Date, Name, BankClient, BankAccount, is_leap_year, days_in_month
from .cli import main


__all__ = [
    "InvalidArgument",
    "validate_string",
    "Date",
    "Name",
    "BankClient",
    "BankAccount",
    "is_leap_year",
    "days_in_month",
    "main"
]
