from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IDebiasingPermutation(ABC):
    """Abstract base class defining the interface for a debiasing permutation in Fp."""

    @abstractmethod
    def apply(self, value: MPZ) -> MPZ:
        """Map value to a representative strictly inside [1, modulus).

        Args:
            value (MPZ): The value to permute

        Returns:
            MPZ: The permuted value
        """

    @abstractmethod
    def get_modulus(self) -> MPZ:
        """Get the modulus the permutation is bound to.

        Returns:
            MPZ: The modulus
        """
