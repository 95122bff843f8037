"""
HIBC LIC barcode parsing with Modulo 43 check digit validation.
"""

from hibc.barcode import (
    HibcError,
    HibcValidator,
    is_valid_hibc,
    validate_hibc_checksum,
)
from hibc.models import HibcBarcode

__version__ = "1.0.0"
__all__ = [
    "HibcBarcode",
    "HibcError",
    "HibcValidator",
    "is_valid_hibc",
    "validate_hibc_checksum",
]
