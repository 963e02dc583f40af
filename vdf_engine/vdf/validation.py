"""Up-front parameter checks shared by the VDF schemes."""

from ..errors import VdfConfigurationError
from ..mpc import MPC
from ..mpc.types import MPZ, INTEGER_TYPES
from .constants import FOUR, THREE


def is_integer(value) -> bool:
    """True for Python ints and mpz values, False for bools and everything else."""
    return isinstance(value, INTEGER_TYPES) and not isinstance(value, bool)


def validate_modulus(modulus) -> MPZ:
    """Check that modulus is an odd prime and return it as an mpz.

    Raises:
        VdfConfigurationError: If modulus is not an integer, is at most 2 or is composite
    """
    if not is_integer(modulus):
        raise VdfConfigurationError(
            f"Modulus must be an integer, got {type(modulus).__name__}"
        )
    modulus = MPC.mpz(modulus)
    if modulus <= 2:
        raise VdfConfigurationError(f"Modulus must be an odd prime, got {modulus}")
    if not MPC.is_prime(modulus):
        raise VdfConfigurationError(f"Modulus {hex(modulus)} is not prime")
    return modulus


def validate_sqrt_modulus(modulus) -> MPZ:
    """Check that modulus is a prime congruent to 3 mod 4.

    (p + 1) / 4 is a square-root exponent only for such primes.

    Raises:
        VdfConfigurationError: If the modulus is invalid
    """
    modulus = validate_modulus(modulus)
    if MPC.mod(modulus, FOUR) != THREE:
        raise VdfConfigurationError(
            f"Modulus {hex(modulus)} must be congruent to 3 mod 4 for square-root extraction"
        )
    return modulus


def validate_seed(seed) -> MPZ:
    """Return seed as an mpz, rejecting non-integers.

    Raises:
        VdfConfigurationError: If seed is not an integer
    """
    if not is_integer(seed):
        raise VdfConfigurationError(f"Seed must be an integer, got {type(seed).__name__}")
    return MPC.mpz(seed)


def validate_steps(steps) -> int:
    """Return steps as a non-negative int.

    Raises:
        VdfConfigurationError: If steps is not an integer or is negative
    """
    if not is_integer(steps):
        raise VdfConfigurationError(
            f"Step count must be an integer, got {type(steps).__name__}"
        )
    if steps < 0:
        raise VdfConfigurationError(f"Step count must be non-negative, got {steps}")
    return int(steps)
