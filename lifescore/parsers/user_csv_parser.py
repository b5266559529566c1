"""
User CSV parser for bulk scoring.

Reads a CSV export of user records (one row per user) into UserRecord
objects so a whole cohort can be scored or ranked at once.

Columns:
    user_id (required), name, country, city, salary, savings, investments,
    wealth_total, currency, education, certificates, languages, assets

List columns are ";"-separated. Assets are "type:value" pairs, e.g.
"home:300000;car:25000".
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from io import StringIO
from pathlib import Path
from typing import Any, List, Union

import pandas as pd

from lifescore.models.user_record import Asset, KnowledgeProfile, UserRecord, WealthProfile
from lifescore.utils.constants import (
    CSV_ASSET_VALUE_SEPARATOR,
    CSV_COLUMN_USER_ID,
    CSV_LIST_SEPARATOR,
)
from lifescore.utils.csv_validator import CSVValidator


logger = logging.getLogger(__name__)


class UserCSVParser:
    """
    Parser for user record CSV exports.

    Malformed rows are skipped and reported in `warnings` rather than
    failing the whole file.

    Example usage:
        parser = UserCSVParser()
        users = parser.parse("users.csv")
    """

    def __init__(self) -> None:
        """Initialize parser with empty warning list."""
        self.warnings: List[str] = []
        self.validator = CSVValidator()

    def parse(self, source: Union[str, Path, StringIO]) -> List[UserRecord]:
        """
        Parse a CSV file into UserRecord objects.

        Args:
            source: File path or StringIO containing CSV data

        Returns:
            List of parsed UserRecords

        Raises:
            ValueError: If the user_id column is missing or the CSV is empty
            FileNotFoundError: If file path doesn't exist
        """
        self.warnings = []  # Reset warnings
        df = self._read_csv(source)
        self._validate_columns(df)
        return self._parse_rows(df)

    def parse_csv_string(self, csv_content: str) -> List[UserRecord]:
        """Parse CSV text after checking its size."""
        self.validator.validate_size(csv_content)
        return self.parse(StringIO(csv_content))

    def _read_csv(self, source: Union[str, Path, StringIO]) -> pd.DataFrame:
        """
        Read CSV into DataFrame with every cell as a string.

        Empty cells become "" rather than NaN.
        """
        if isinstance(source, StringIO):
            source.seek(0)
            return pd.read_csv(source, dtype=str, keep_default_na=False)

        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"CSV file not found: {path}")

        return pd.read_csv(path, dtype=str, keep_default_na=False, encoding='utf-8-sig')

    def _validate_columns(self, df: pd.DataFrame) -> None:
        """
        Validate that the user_id column is present.

        Raises:
            ValueError: If user_id is missing
        """
        if CSV_COLUMN_USER_ID not in df.columns:
            raise ValueError(
                f"Missing required column '{CSV_COLUMN_USER_ID}', got: {sorted(df.columns)}"
            )

    def _parse_rows(self, df: pd.DataFrame) -> List[UserRecord]:
        """
        Parse each row into a UserRecord, skipping malformed rows.

        Args:
            df: DataFrame with CSV data

        Returns:
            List of successfully parsed users
        """
        users = []

        for idx, row in df.iterrows():
            try:
                users.append(self._parse_single_row(row))
            except Exception as e:
                warning = f"Row {idx}: Skipping due to error - {e}"
                self.warnings.append(warning)
                logger.warning(warning)

        return users

    def _parse_single_row(self, row: pd.Series) -> UserRecord:
        """
        Parse a single row into a UserRecord.

        Raises:
            ValueError: If user_id is blank or an amount is not a number
        """
        user_id = self._cell(row, CSV_COLUMN_USER_ID)
        if not user_id:
            raise ValueError("user_id is blank")

        wealth = WealthProfile(
            salary=self._clean_amount(self._cell(row, 'salary')),
            savings=self._clean_amount(self._cell(row, 'savings')),
            investments=self._clean_amount(self._cell(row, 'investments')),
            total=self._clean_amount(self._cell(row, 'wealth_total')),
            currency=self._cell(row, 'currency') or "USD",
        )

        knowledge = KnowledgeProfile(
            education=self._cell(row, 'education'),
            certificates=self._split_list(self._cell(row, 'certificates')),
            languages=self._split_list(self._cell(row, 'languages')),
        )

        return UserRecord(
            id=user_id,
            name=self._cell(row, 'name'),
            country=self._cell(row, 'country'),
            city=self._cell(row, 'city'),
            wealth=wealth,
            knowledge=knowledge,
            assets=self._parse_assets(self._cell(row, 'assets'), user_id),
        )

    def _parse_assets(self, value: str, user_id: str) -> List[Asset]:
        """
        Parse "type:value;type:value" into Assets.

        Raises:
            ValueError: If a pair has no ":" separator or a bad value
        """
        assets = []
        for position, pair in enumerate(self._split_list(value)):
            if CSV_ASSET_VALUE_SEPARATOR not in pair:
                raise ValueError(f"Malformed asset '{pair}', expected type:value")

            asset_type, amount = pair.split(CSV_ASSET_VALUE_SEPARATOR, 1)
            asset_type = asset_type.strip().lower()
            assets.append(Asset(
                id=f"{user_id}-asset-{position}",
                type=asset_type,
                name=asset_type,
                value=self._clean_amount(amount),
            ))
        return assets

    @staticmethod
    def _cell(row: pd.Series, column: str) -> str:
        """Stripped cell text; absent columns read as ""."""
        return str(row.get(column, '')).strip()

    @staticmethod
    def _split_list(value: str) -> List[str]:
        """Split a ";"-separated cell, dropping blanks."""
        return [part.strip() for part in value.split(CSV_LIST_SEPARATOR) if part.strip()]

    @staticmethod
    def _clean_amount(value: Any) -> float:
        """
        Clean an amount string to float.

        Handles formats like:
        - "5000"
        - "$5,000.00"
        - "" or "-" (meaning zero)

        Raises:
            ValueError: If value cannot be converted
        """
        value_str = re.sub(r'[$,]', '', str(value).strip())

        if not value_str or value_str == '-':
            return 0.0

        try:
            return float(Decimal(value_str))
        except InvalidOperation:
            raise ValueError(f"Cannot convert '{value}' to an amount")
