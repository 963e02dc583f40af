import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ, T


class MPC(IMPC):
    """Implementation of multi-precision computing operations."""

    @staticmethod
    def mpz(value: T) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def powmod(base: T, exp: T, mod: T) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def mod(value: T, modulus: T) -> MPZ:
        return gmpy2.f_mod(value, modulus)

    @staticmethod
    def is_prime(value: T) -> bool:
        return bool(gmpy2.is_prime(value))

    @staticmethod
    def is_odd(value: T) -> bool:
        return bool(gmpy2.is_odd(value))

    @staticmethod
    def next_prime(value: T) -> MPZ:
        return gmpy2.next_prime(value)
