"""
HIBC LIC barcode parsing and Modulo 43 check digit validation.

References:
- https://en.wikipedia.org/wiki/Code_128
- http://www.hibcc.org/udi-labeling-standards/create-a-bar-code/
"""

from collections.abc import Iterable

from hibc.barcode.alphabet import (
    DEFAULT_MODULUS,
    HIBC_ALPHABET,
    HIBC_VALUES,
    MAX_LENGTH,
    MIN_LENGTH,
)
from hibc.barcode.errors import (
    BarcodeFormatError,
    EmptyBarcodeError,
    HibcError,
    PrefixMismatchError,
    UnrecognizedCharacterError,
)
from hibc.config.settings import Settings, get_settings
from hibc.models.barcode import HibcBarcode


def character_value(char: str) -> int:
    """Look up the HIBC value of a single character."""
    try:
        return HIBC_VALUES[char]
    except KeyError:
        raise UnrecognizedCharacterError(char) from None


def calculate_character_sum(characters: Iterable[str]) -> int:
    """
    Sum the HIBC values of a character span.

    Raises:
        UnrecognizedCharacterError: If a character is not in the HIBC table
    """
    total = 0
    for position, char in enumerate(characters):
        try:
            total += character_value(char)
        except UnrecognizedCharacterError:
            raise UnrecognizedCharacterError(char, position) from None
    return total


def calculate_mod43_checksum(characters: Iterable[str], modulus: int = DEFAULT_MODULUS) -> int:
    """
    Calculate the HIBC checksum of a character span.

    Algorithm:
    1. Look up the value of every character in the HIBC table
    2. Sum all values
    3. Checksum = sum mod modulus

    Args:
        characters: Characters to sum (check digit excluded)
        modulus: Checksum modulus

    Returns:
        Index of the check character in the HIBC table

    Raises:
        UnrecognizedCharacterError: If a character is not in the HIBC table
    """
    return calculate_character_sum(characters) % modulus


def calculate_check_digit(payload: str, modulus: int = DEFAULT_MODULUS) -> str:
    """
    Calculate the check character for barcode data without its check digit.

    Args:
        payload: Prefix, item information and unit of measure

    Returns:
        The HIBC check character
    """
    return HIBC_ALPHABET[calculate_mod43_checksum(payload, modulus)]


def append_check_digit(payload: str, modulus: int = DEFAULT_MODULUS) -> str:
    """Return payload followed by its check character."""
    return payload + calculate_check_digit(payload, modulus)


class HibcValidator:
    """
    Parses HIBC LIC barcode data and validates its check digit.

    Prefix and modulus are fixed at construction. Create another
    validator to use a different configuration.
    """

    def __init__(self, prefix: str = "", modulus: int = DEFAULT_MODULUS):
        """
        Initialize validator.

        Args:
            prefix: Expected labeler identification code (empty disables the check)
            modulus: Check digit modulus (default: 43)

        A modulus above 43 can yield a checksum past the end of the HIBC
        table, so the range is checked here instead of failing on lookup
        at parse time.

        Raises:
            TypeError: If modulus is not an integer
            ValueError: If modulus is outside 1..43
        """
        if isinstance(modulus, bool) or not isinstance(modulus, int):
            raise TypeError(f"Modulus must be an integer, got {type(modulus).__name__}")
        if not 1 <= modulus <= len(HIBC_ALPHABET):
            raise ValueError(
                f"Modulus must be between 1 and {len(HIBC_ALPHABET)}, got {modulus}"
            )

        self._prefix = (prefix or "").strip()
        self._modulus = modulus

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "HibcValidator":
        """Create a validator from application settings."""
        settings = settings or get_settings()
        return cls(prefix=settings.labeler_code, modulus=settings.modulus)

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def modulus(self) -> int:
        return self._modulus

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prefix={self._prefix!r}, modulus={self._modulus})"

    def parse(self, data: str | None) -> HibcBarcode:
        """
        Parse HIBC LIC barcode data.

        Args:
            data: Decoded barcode text

        Returns:
            Parsed barcode. A wrong check digit is reported through is_valid.

        Raises:
            EmptyBarcodeError: If data is empty or whitespace only
            BarcodeFormatError: If data is longer than 18 characters or too
                short to hold the prefix, unit of measure and check digit
            PrefixMismatchError: If data does not start with the prefix
            UnrecognizedCharacterError: If data contains a non-HIBC character
        """
        if data is None or not data.strip():
            raise EmptyBarcodeError(data)

        # Whitespace inside the data is kept, only the ends are stripped
        data = data.strip()
        length = len(data)

        if length > MAX_LENGTH:
            raise BarcodeFormatError(
                f"Invalid format. HIBC barcodes allow up to {MAX_LENGTH} "
                f"alphanumeric characters, got {length}",
                data,
                length,
            )

        if length < MIN_LENGTH:
            raise BarcodeFormatError(
                f"Invalid format. HIBC barcodes require at least {MIN_LENGTH} "
                f"characters (unit of measure and check digit), got {length}",
                data,
                length,
            )

        check_digit = data[-1]
        unit_of_measure = data[-2]
        characters = data[:-1]

        prefix = data[: len(self._prefix)] if self._prefix else ""
        if prefix != self._prefix:
            raise PrefixMismatchError(self._prefix, prefix, data)

        if length < len(prefix) + MIN_LENGTH:
            raise BarcodeFormatError(
                f"Invalid format. Barcode data {data!r} is too short to hold the "
                f"prefix {prefix!r}, unit of measure and check digit",
                data,
                length,
            )

        item_number = data[len(prefix) : length - 2]

        total = calculate_character_sum(characters)

        modulo = total % self._modulus
        calculated_check_digit = HIBC_ALPHABET[modulo]
        is_valid = calculated_check_digit == check_digit

        return HibcBarcode(
            data=data,
            total_characters=length,
            labeler_identification_code=prefix,
            item_number=item_number,
            unit_of_measure=unit_of_measure,
            check_digit=check_digit,
            sum=total,
            modulo=modulo,
            calculated_check_digit=calculated_check_digit,
            is_valid=is_valid,
        )


def validate_hibc_checksum(
    code: str,
    prefix: str = "",
    modulus: int = DEFAULT_MODULUS,
) -> bool:
    """
    Validate HIBC check digit.

    Args:
        code: Barcode data including check digit
        prefix: Expected labeler identification code
        modulus: Check digit modulus

    Returns:
        True if data is well formed and the check digit matches
    """
    try:
        return HibcValidator(prefix=prefix, modulus=modulus).parse(code).is_valid
    except HibcError:
        return False


def is_valid_hibc(code: str, validator: HibcValidator | None = None) -> tuple[bool, str]:
    """
    Validate HIBC barcode data completely.

    Args:
        code: Barcode data
        validator: Validator to use (default: no prefix, modulus 43)

    Returns:
        Tuple of (is_valid, error_message)
    """
    validator = validator or HibcValidator()

    try:
        barcode = validator.parse(code)
    except HibcError as e:
        return False, str(e)

    if not barcode.is_valid:
        return (
            False,
            f"Invalid HIBC checksum: expected {barcode.calculated_check_digit!r}, "
            f"got {barcode.check_digit!r}",
        )

    return True, ""
