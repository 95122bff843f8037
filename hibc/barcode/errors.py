"""
Exceptions raised while parsing HIBC barcode data.
"""


class HibcError(Exception):
    """Base class for structural HIBC parsing failures."""


class EmptyBarcodeError(HibcError, ValueError):
    """Raised when barcode data is missing, empty or whitespace only."""

    def __init__(self, data: str | None = None):
        self.data = data
        super().__init__("Barcode data cannot be empty")


class BarcodeFormatError(HibcError, ValueError):
    """Raised when barcode data has an invalid length."""

    def __init__(self, message: str, data: str, length: int):
        self.data = data
        self.length = length
        super().__init__(message)


class PrefixMismatchError(HibcError, ValueError):
    """Raised when the labeler code does not match the expected prefix."""

    def __init__(self, expected: str, observed: str, data: str):
        self.expected = expected
        self.observed = observed
        self.data = data
        super().__init__(
            f"Barcode prefix {observed!r} does not match the expected prefix {expected!r}"
        )


class UnrecognizedCharacterError(HibcError, LookupError):
    """Raised when a character is not part of the HIBC LIC character set."""

    def __init__(self, character: str, position: int | None = None):
        self.character = character
        self.position = position
        if position is None:
            message = f"Unrecognized HIBC character: {character!r}"
        else:
            message = f"Unrecognized HIBC character {character!r} at position {position}"
        super().__init__(message)
