from ..mpc.types import MPZ


class VdfChallenge:
    """A VDF challenge: a seed to evaluate for a number of steps under a modulus."""

    def __init__(self, seed: MPZ, steps: int, modulus: MPZ) -> None:
        """Initialize a VDF challenge.

        Args:
            seed (MPZ): The seed, already reduced modulo the modulus
            steps (int): Number of sequential steps
            modulus (MPZ): The modulus
        """
        self._seed = seed
        self._steps = steps
        self._modulus = modulus

    def get_seed(self) -> MPZ:
        return self._seed

    def get_steps(self) -> int:
        return self._steps

    def get_modulus(self) -> MPZ:
        return self._modulus

    def __repr__(self) -> str:
        return f"<VdfChallenge(seed={hex(self._seed)}, steps={self._steps}, modulus={hex(self._modulus)})>"
