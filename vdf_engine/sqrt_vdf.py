"""Free-function API for the square-root VDF."""

from .mpc.types import MPZ, T
from .vdf.SqrtVDF import SqrtVDF


def eval(modulus: T, seed: T, steps: int) -> MPZ:
    """Compute the witness for seed after `steps` sequential square roots modulo modulus."""
    return SqrtVDF(modulus).eval(seed, steps)


def verify(modulus: T, seed: T, steps: int, witness: T) -> bool:
    """Check a witness produced by eval() with the same modulus, seed and steps."""
    return SqrtVDF(modulus).verify(seed, steps, witness)
