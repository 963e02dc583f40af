"""Free-function API for the MiMC VDF."""

from .mpc.types import MPZ, T
from .vdf.MimcVDF import MimcVDF

_SCHEME = MimcVDF()


def eval(seed: T, steps: int) -> MPZ:
    """Compute the witness for seed by running MiMC backward for `steps` steps."""
    return _SCHEME.eval(seed, steps)


def verify(seed: T, steps: int, witness: T) -> bool:
    """Check a witness produced by eval() with the same seed and steps."""
    return _SCHEME.verify(seed, steps, witness)
