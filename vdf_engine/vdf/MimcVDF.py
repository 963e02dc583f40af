import logging

from ..mpc import MPC
from ..mpc.types import MPZ, T
from .abstract.IVdfScheme import IVdfScheme
from .constants import MIMC_MODULUS
from .MimcPermutation import MimcPermutation
from .validation import is_integer, validate_seed, validate_steps

logger = logging.getLogger(__name__)


class MimcVDF(IVdfScheme):
    """VDF built from the MiMC permutation over a fixed 256-bit prime field.

    Eval runs the permutation backward (one cube root per step), verify
    runs it forward (one cube per step).
    """

    def get_modulus(self) -> MPZ:
        return MIMC_MODULUS

    def eval(self, seed: T, steps: int) -> MPZ:
        steps = validate_steps(steps)
        seed = MPC.mod(validate_seed(seed), MIMC_MODULUS)
        logger.debug("Evaluating MiMC VDF: %d steps", steps)
        witness = MimcPermutation.backward(steps, seed)
        logger.debug("MiMC VDF evaluation finished")
        return witness

    def verify(self, seed: T, steps: int, witness: T) -> bool:
        steps = validate_steps(steps)
        expected = MPC.mod(validate_seed(seed), MIMC_MODULUS)
        if not is_integer(witness) or witness < 0 or witness >= MIMC_MODULUS:
            logger.debug("Rejecting witness outside the MiMC field")
            return False

        verified = MimcPermutation.forward(steps, witness) == expected
        logger.debug("MiMC VDF verification result: %s", verified)
        return verified
