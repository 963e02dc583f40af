from typing import Optional

from ..errors import VdfConfigurationError
from ..mpc import MPC
from ..mpc.types import MPZ
from ..utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .abstract.IDebiasingPermutation import IDebiasingPermutation


class DebiasingPermutation(IDebiasingPermutation):
    """XOR-by-one permutation keeping values inside [1, modulus).

    Flipping the lowest bit is cheap and reversible; on [1, modulus) it is
    an involution, which lets the verifier undo the evaluator's step. If the
    flipped value falls out of range (it reaches the modulus or zero) the
    bit is flipped back.
    """

    def __init__(self, modulus: MPZ, max_attempts: Optional[int] = None) -> None:
        """Initialize the permutation.

        Args:
            modulus (MPZ): The prime modulus
            max_attempts (int): Retry bound, defaults to DEBIAS_MAX_ATTEMPTS
        """
        self._modulus = MPC.mpz(modulus)
        self._max_attempts = (
            max_attempts
            if max_attempts is not None
            else EnvironmentManager.get_int(EnvironmentVariables.DEBIAS_MAX_ATTEMPTS)
        )
        if self._max_attempts < 1:
            raise VdfConfigurationError(
                f"Debiasing retry bound must be positive, got {self._max_attempts}"
            )

    def get_modulus(self) -> MPZ:
        return self._modulus

    def get_max_attempts(self) -> int:
        return self._max_attempts

    def apply(self, value: MPZ) -> MPZ:
        result = value ^ 1
        attempts = 0
        while result >= self._modulus or result == 0:
            attempts += 1
            if attempts > self._max_attempts:
                raise VdfConfigurationError(
                    f"Value {hex(value)} cannot be debiased into [1, {hex(self._modulus)}) "
                    f"within {self._max_attempts} attempts"
                )
            result ^= 1
        return result
