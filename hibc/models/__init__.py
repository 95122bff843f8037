"""
Pydantic models for parsed barcode data.
"""

from hibc.models.barcode import HibcBarcode

__all__ = [
    "HibcBarcode",
]
