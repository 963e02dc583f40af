from abc import ABC, abstractmethod
from multiprocessing import Pool
from typing import List, Tuple

from ...mpc.types import MPZ, T
from ...utils.SystemSpecs import SystemSpecs


class IVdfScheme(ABC):
    """Abstract base class defining the interface for a verifiable delay function."""

    @abstractmethod
    def eval(self, seed: T, steps: int) -> MPZ:
        """Run the slow, sequential direction.

        Args:
            seed (MPZ): The challenge
            steps (int): Number of sequential steps

        Returns:
            MPZ: The witness
        """

    @abstractmethod
    def verify(self, seed: T, steps: int, witness: T) -> bool:
        """Run the fast direction and compare against the challenge.

        Never raises because of the witness; a malformed witness is just wrong.

        Args:
            seed (MPZ): The challenge
            steps (int): Number of sequential steps
            witness (MPZ): The claimed eval output

        Returns:
            bool: True if witness is the eval output for seed and steps
        """

    def verify_many(self, claims: List[Tuple[T, int, T]]) -> List[bool]:
        """
        Verify many independent claims in parallel using multiprocessing.

        Args:
            claims: List of (seed, steps, witness) tuples

        Returns:
            List of verification results in the same order as input claims
        """
        if not claims:
            return []
        num_workers = min(SystemSpecs.get_num_parallel_processes(), len(claims))
        with Pool(num_workers) as pool:
            return pool.map(
                _verify_claim, [(self, seed, steps, witness) for seed, steps, witness in claims]
            )


def _verify_claim(args: Tuple["IVdfScheme", T, int, T]) -> bool:
    """Helper to verify a single claim for multiprocessing."""
    scheme, seed, steps, witness = args
    return scheme.verify(seed, steps, witness)
