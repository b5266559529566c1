"""
CSV Validator for user record uploads.

Validates file size and extension before parsing.
"""


class CSVValidator:
    """Validate uploaded user CSVs"""

    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB

    def validate_size(self, content: str) -> None:
        """Ensure file is under size limit"""
        size = len(content.encode('utf-8'))
        if size > self.MAX_FILE_SIZE:
            raise ValueError(f"CSV file exceeds 10MB limit ({size / 1024 / 1024:.1f}MB)")

    def validate_extension(self, filename: str) -> bool:
        """Only accept .csv files"""
        return bool(filename) and filename.lower().endswith('.csv')
