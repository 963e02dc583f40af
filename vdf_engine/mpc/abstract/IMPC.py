from abc import ABC, abstractmethod
from ..types import MPZ, T


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def mpz(value: T) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            mpz: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def powmod(base: T, exp: T, mod: T) -> MPZ:
        """Compute (base ** exp) % mod efficiently.

        Args:
            base (mpz): Base value
            exp (mpz): Exponent value
            mod (mpz): Modulus value

        Returns:
            mpz: Result of modular exponentiation
        """

    @staticmethod
    @abstractmethod
    def mod(value: T, modulus: T) -> MPZ:
        """Compute the floor remainder of value by modulus.

        The result always carries the sign of the modulus, so a negative
        value reduces into [0, modulus).

        Args:
            value (mpz): Value to reduce
            modulus (mpz): Modulus to reduce by

        Returns:
            mpz: Result of modular reduction
        """

    @staticmethod
    @abstractmethod
    def is_prime(value: T) -> bool:
        """Probabilistic primality test.

        Args:
            value (mpz): Candidate value

        Returns:
            bool: True if value is (probably) prime
        """

    @staticmethod
    @abstractmethod
    def is_odd(value: T) -> bool:
        """Check the lowest bit of value.

        Args:
            value (mpz): Value to test

        Returns:
            bool: True if value is odd
        """

    @staticmethod
    @abstractmethod
    def next_prime(value: T) -> MPZ:
        """Find the next prime number after the given value.

        Args:
            value (mpz): Starting value

        Returns:
            mpz: Next prime number
        """
