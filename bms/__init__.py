"""BMS ISBN - identifier validation for the book management service

This package contains:
- ISBN-10 / ISBN-13 checksum validation (validators.py)
- Book record screening run before create/update (book.py)
- Settings loaded from the environment (config.py)
- Command line interface (cli.py, ui_helpers.py)
"""

from bms.validators import ISBNValidator, IsbnVariant, validate

__all__ = ["ISBNValidator", "IsbnVariant", "validate"]
