"""
Tests for parsed barcode models.
"""

import json

import pytest
from pydantic import ValidationError

from hibc.barcode.validator import HibcValidator
from hibc.models import HibcBarcode


def make_barcode(**overrides) -> HibcBarcode:
    fields = {
        "data": "A12345P",
        "total_characters": 7,
        "labeler_identification_code": "",
        "item_number": "A1234",
        "unit_of_measure": "5",
        "check_digit": "P",
        "sum": 25,
        "modulo": 25,
        "calculated_check_digit": "P",
        "is_valid": True,
    }
    fields.update(overrides)
    return HibcBarcode(**fields)


class TestHibcBarcode:
    """Tests for HibcBarcode model."""

    def test_create_barcode(self):
        """Test creating a HibcBarcode."""
        barcode = make_barcode()

        assert barcode.data == "A12345P"
        assert barcode.item_number == "A1234"
        assert barcode.is_valid is True

    def test_defaults(self):
        """Test optional fields default to no prefix and not valid."""
        barcode = HibcBarcode(
            data="00",
            total_characters=2,
            item_number="",
            unit_of_measure="0",
            check_digit="0",
            sum=0,
            modulo=0,
            calculated_check_digit="0",
        )

        assert barcode.labeler_identification_code == ""
        assert barcode.is_valid is False

    def test_frozen(self):
        """Test parsed barcodes cannot be modified."""
        barcode = make_barcode()

        with pytest.raises(ValidationError):
            barcode.is_valid = False

    def test_single_character_fields(self):
        """Test check digit and unit of measure hold exactly one character."""
        with pytest.raises(ValidationError):
            make_barcode(check_digit="PP")
        with pytest.raises(ValidationError):
            make_barcode(unit_of_measure="")

    def test_negative_sum_rejected(self):
        """Test computed values cannot be negative."""
        with pytest.raises(ValidationError):
            make_barcode(sum=-1)

    def test_to_row(self):
        """Test flattening to strings."""
        row = make_barcode().to_row()

        assert row["data"] == "A12345P"
        assert row["total_characters"] == "7"
        assert row["is_valid"] == "True"
        assert all(isinstance(value, str) for value in row.values())

    def test_json_serialization(self):
        """Test JSON round trip of a parsed barcode."""
        barcode = HibcValidator(prefix="+H123").parse("+H123ABC1C")

        doc = json.loads(barcode.model_dump_json())
        assert doc["labeler_identification_code"] == "+H123"
        assert doc["item_number"] == "ABC"
        assert doc["sum"] == 98
        assert HibcBarcode.model_validate(doc) == barcode
