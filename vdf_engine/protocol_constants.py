# protocol_constants.py

from .mpc import MPC


# Example modulus: the Mersenne prime 2^521 - 1 (congruent to 3 mod 4)
EXAMPLE_MODULUS = MPC.mpz(
    "6864797660130609714981900799081393217269435300143305409394463459185543183397656052122559640661454554977296311391480858037121987999716643812574028291115057151"
)

TEST_HASH = "1eeb30c7163271850b6d018e8282093ac6755a771da6267edf6c9b4fce9242ba"

SQRT_DIFFICULTY = 1_000_000  # Approx. one minute of sequential square roots
MIMC_DIFFICULTY = 8192 * 512
