"""
HIBC LIC table of numerical value assignments.

The value of each symbol is its position in HIBC_ALPHABET. The lookup
table is derived from the sequence so both always agree.
"""

from types import MappingProxyType

HIBC_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%"

HIBC_VALUES = MappingProxyType({char: value for value, char in enumerate(HIBC_ALPHABET)})

# HIBC LIC data must not exceed 18 characters
MAX_LENGTH = 18

# Unit of measure + check digit
MIN_LENGTH = 2

DEFAULT_MODULUS = 43
