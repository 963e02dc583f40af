import logging
from typing import Optional

from ..mpc import MPC
from ..mpc.types import MPZ, T
from ..permutation import DebiasingPermutation
from .abstract.IVdfScheme import IVdfScheme
from .constants import FOUR, ONE
from .validation import is_integer, validate_seed, validate_sqrt_modulus, validate_steps

logger = logging.getLogger(__name__)


class SqrtVDF(IVdfScheme):
    """VDF built from sequential modular square roots in Fp.

    Eval extracts a square root per step with a (p+1)/4 exponentiation,
    which costs a full modular exponentiation and depends on the previous
    step. Verify squares, which costs a single multiplication per step.

    Only one of y and -y is a quadratic residue when p = 3 mod 4, so y^e
    squares back to either y or -y. Eval keeps the even root in the first
    case and the odd root in the second; verify reads the parity to know
    whether to negate after squaring.
    """

    def __init__(self, modulus: T, debias_max_attempts: Optional[int] = None) -> None:
        """Initialize the VDF over a prime modulus.

        Args:
            modulus (MPZ): Prime congruent to 3 mod 4
            debias_max_attempts (int): Optional retry bound for the debiasing permutation

        Raises:
            VdfConfigurationError: If the modulus is invalid
        """
        self._modulus = validate_sqrt_modulus(modulus)
        self._exponent = (self._modulus + ONE) // FOUR
        self._permutation = DebiasingPermutation(self._modulus, debias_max_attempts)

    def get_modulus(self) -> MPZ:
        return self._modulus

    def get_exponent(self) -> MPZ:
        return self._exponent

    def eval(self, seed: T, steps: int) -> MPZ:
        steps = validate_steps(steps)
        x = MPC.mod(validate_seed(seed), self._modulus)
        logger.debug(
            "Evaluating square-root VDF: %d steps over a %d-bit modulus",
            steps,
            self._modulus.bit_length(),
        )

        for _ in range(steps):
            x = self._permutation.apply(x)
            x = self._sqrt_step(x)

        logger.debug("Square-root VDF evaluation finished")
        return x

    def verify(self, seed: T, steps: int, witness: T) -> bool:
        steps = validate_steps(steps)
        expected = MPC.mod(validate_seed(seed), self._modulus)
        if not is_integer(witness):
            return False

        result = MPC.mpz(witness)
        if result < 0 or result >= self._modulus:
            logger.debug("Rejecting witness outside [0, modulus)")
            return False

        for _ in range(steps):
            result = self._square_step(result)
            result = self._permutation.apply(result)

        verified = result == expected
        logger.debug("Square-root VDF verification result: %s", verified)
        return verified

    # Private Methods
    # --------------

    def _sqrt_step(self, value: MPZ) -> MPZ:
        """Slow direction: a root of value or of -value, parity marking which."""
        root = MPC.powmod(value, self._exponent, self._modulus)
        is_residue = MPC.mod(root * root, self._modulus) == value
        if MPC.is_odd(root) == is_residue:
            root = self._modulus - root
        return root

    def _square_step(self, value: MPZ) -> MPZ:
        """Fast direction: square, negating when the root is on the odd branch."""
        square = MPC.mod(value * value, self._modulus)
        if MPC.is_odd(value):
            square = MPC.mod(-square, self._modulus)
        return square
