"""
HIBC LIC check digit validation.
"""

from hibc.barcode.alphabet import HIBC_ALPHABET, HIBC_VALUES
from hibc.barcode.errors import (
    BarcodeFormatError,
    EmptyBarcodeError,
    HibcError,
    PrefixMismatchError,
    UnrecognizedCharacterError,
)
from hibc.barcode.validator import (
    HibcValidator,
    append_check_digit,
    calculate_character_sum,
    calculate_check_digit,
    calculate_mod43_checksum,
    character_value,
    is_valid_hibc,
    validate_hibc_checksum,
)

__all__ = [
    "HIBC_ALPHABET",
    "HIBC_VALUES",
    "HibcValidator",
    "HibcError",
    "EmptyBarcodeError",
    "BarcodeFormatError",
    "PrefixMismatchError",
    "UnrecognizedCharacterError",
    "append_check_digit",
    "calculate_character_sum",
    "calculate_check_digit",
    "calculate_mod43_checksum",
    "character_value",
    "is_valid_hibc",
    "validate_hibc_checksum",
]
