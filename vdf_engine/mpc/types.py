"""Type definitions for multi-precision computing operations."""

from typing import TypeVar, NewType
from gmpy2 import mpz as _mpz

# Define base types from gmpy2
MPZ = NewType("MPZ", _mpz)

# Generic type variable for numeric operations
T = TypeVar("T", MPZ, int)

# Concrete types accepted wherever an integer is expected
INTEGER_TYPES = (int, _mpz)
