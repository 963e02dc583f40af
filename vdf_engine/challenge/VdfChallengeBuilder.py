import string
from typing import Self

from ..mpc import MPC
from ..mpc.types import T
from .VdfChallenge import VdfChallenge
from .abstract.IVdfChallengeBuilder import IVdfChallengeBuilder


class VdfChallengeBuilder(IVdfChallengeBuilder):
    """Implementation of VDF challenge builder."""

    def __init__(self) -> None:
        self._seed = None
        self._steps = None
        self._modulus = None

    def set_seed(self, seed: T) -> Self:
        self._seed = MPC.mpz(seed)
        return self

    def set_seed_from_hex(self, seed_hex: str) -> Self:
        digits = seed_hex.strip()
        if digits[:2].lower() == "0x":
            digits = digits[2:]
        if not digits or not all(c in string.hexdigits for c in digits):
            raise ValueError(f"Seed is not a hex string: {seed_hex!r}")
        self._seed = MPC.mpz(int(digits, 16))
        return self

    def set_steps(self, steps: int) -> Self:
        self._steps = steps
        return self

    def set_modulus(self, modulus: T) -> Self:
        self._modulus = MPC.mpz(modulus)
        return self

    def build(self) -> VdfChallenge:
        if self._seed is None or self._steps is None or self._modulus is None:
            raise ValueError("All parameters (seed, steps, modulus) must be set before building")
        if self._modulus <= 0:
            raise ValueError(f"Modulus must be positive, got {self._modulus}")
        return VdfChallenge(MPC.mod(self._seed, self._modulus), self._steps, self._modulus)
