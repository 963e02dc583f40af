from abc import ABC, abstractmethod
from typing import Self
from ...mpc.types import T
from ..VdfChallenge import VdfChallenge


class IVdfChallengeBuilder(ABC):
    """Abstract base class defining the interface for a VDF challenge builder."""

    @abstractmethod
    def set_seed(self, seed: T) -> Self:
        """Set the seed.

        Args:
            seed (MPZ): The seed

        Returns:
            IVdfChallengeBuilder: The builder instance for chaining
        """

    @abstractmethod
    def set_seed_from_hex(self, seed_hex: str) -> Self:
        """Set the seed from a hex string such as a hash digest.

        Args:
            seed_hex (str): Hex digits, optionally prefixed with 0x

        Returns:
            IVdfChallengeBuilder: The builder instance for chaining
        """

    @abstractmethod
    def set_steps(self, steps: int) -> Self:
        """Set the number of sequential steps.

        Args:
            steps (int): The step count

        Returns:
            IVdfChallengeBuilder: The builder instance for chaining
        """

    @abstractmethod
    def set_modulus(self, modulus: T) -> Self:
        """Set the modulus.

        Args:
            modulus (MPZ): The modulus

        Returns:
            IVdfChallengeBuilder: The builder instance for chaining
        """

    @abstractmethod
    def build(self) -> VdfChallenge:
        """Build the challenge.

        Returns:
            VdfChallenge: The constructed challenge
        """
