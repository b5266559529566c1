"""CSV parsing for bulk user records."""

from .user_csv_parser import UserCSVParser

__all__ = [
    'UserCSVParser',
]
