from ..mpc import MPC
from ..mpc.types import MPZ, T
from .constants import (
    MIMC_FERMAT_EXPONENT,
    MIMC_MODULUS,
    MIMC_ROUND_CONSTANT_COUNT,
    MIMC_ROUND_CONSTANTS,
    THREE,
)


class MimcPermutation:
    """MiMC permutation x -> x^3 + c over the fixed 256-bit field.

    Round i uses constant C[i % 64]. A run of `steps` covers rounds 1 to
    steps - 1, so zero and one step are both the identity.
    """

    @staticmethod
    def round_constant(index: int) -> MPZ:
        return MIMC_ROUND_CONSTANTS[index % MIMC_ROUND_CONSTANT_COUNT]

    @staticmethod
    def forward(steps: int, value: T) -> MPZ:
        """Cheap direction: cube then add the round constant.

        Args:
            steps (int): Number of steps
            value (MPZ): Field element to start from

        Returns:
            MPZ: The permuted field element
        """
        result = MPC.mod(value, MIMC_MODULUS)
        for i in range(1, steps):
            result = MPC.mod(
                MPC.powmod(result, THREE, MIMC_MODULUS) + MimcPermutation.round_constant(i),
                MIMC_MODULUS,
            )
        return result

    @staticmethod
    def backward(steps: int, value: T) -> MPZ:
        """Expensive direction: subtract the round constant then take the cube root.

        Rounds run from steps - 1 down to 1, undoing forward().

        Args:
            steps (int): Number of steps
            value (MPZ): Field element to start from

        Returns:
            MPZ: The field element forward() maps back to value
        """
        result = MPC.mod(value, MIMC_MODULUS)
        for i in range(steps - 1, 0, -1):
            result = MPC.powmod(
                MPC.mod(result - MimcPermutation.round_constant(i), MIMC_MODULUS),
                MIMC_FERMAT_EXPONENT,
                MIMC_MODULUS,
            )
        return result
