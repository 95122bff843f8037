"""
Parsed HIBC barcode model.
"""

from pydantic import BaseModel, ConfigDict, Field


class HibcBarcode(BaseModel):
    """
    Result of parsing HIBC LIC barcode data.

    Produced by HibcValidator.parse(). A checksum mismatch is reported
    through is_valid rather than raised.
    """

    model_config = ConfigDict(frozen=True)

    # Barcode data
    data: str = Field(..., description="Trimmed barcode data")
    total_characters: int = Field(..., ge=0, description="Number of characters in data")

    # Extracted fields
    labeler_identification_code: str = Field(
        "", description="Labeler identification code (prefix)"
    )
    item_number: str = Field(..., description="Item information between prefix and tail")
    unit_of_measure: str = Field(..., min_length=1, max_length=1)
    check_digit: str = Field(..., min_length=1, max_length=1)

    # Computed values
    sum: int = Field(..., ge=0, description="Sum of character values, check digit excluded")
    modulo: int = Field(..., ge=0, description="Sum modulo the configured modulus")
    calculated_check_digit: str = Field(..., min_length=1, max_length=1)

    # Validation
    is_valid: bool = Field(False, description="Whether the check digit matches")

    def to_row(self) -> dict[str, str]:
        """Flatten into string values for tabular output."""
        return {key: str(value) for key, value in self.model_dump().items()}
