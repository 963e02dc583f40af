from ..mpc import MPC


ONE = MPC.mpz(1)
THREE = MPC.mpz(3)
FOUR = MPC.mpz(4)

# MiMC field: 2^256 - 351 * 2^32 + 1, congruent to 2 mod 3 so cubing permutes it
MIMC_MODULUS = MPC.mpz(2**256 - 351 * 2**32 + 1)

# Cube-root exponent by Fermat's little theorem: 3 * e = 1 mod (p - 1)
MIMC_FERMAT_EXPONENT = (MIMC_MODULUS * 2 - 1) // 3

MIMC_ROUND_CONSTANT_COUNT = 64
MIMC_ROUND_CONSTANT_MASK = 2**64 - 1

MIMC_ROUND_CONSTANTS = tuple(
    MPC.mpz(((i**7) ^ 42) & MIMC_ROUND_CONSTANT_MASK)
    for i in range(MIMC_ROUND_CONSTANT_COUNT)
)
