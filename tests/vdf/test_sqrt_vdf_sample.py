import pytest
from gmpy2 import mpz

from vdf_engine.vdf import SqrtVDF


@pytest.fixture
def vdf_mod_7():
    """Fixture to create a SqrtVDF over p = 7, where (p+1)/4 = 2."""
    return SqrtVDF(mpz(7))

@pytest.fixture
def vdf_mod_11():
    """Fixture to create a SqrtVDF over p = 11, where (p+1)/4 = 3."""
    return SqrtVDF(mpz(11))

def test_exponent(vdf_mod_7, vdf_mod_11):
    """Test the square-root exponent (p+1)/4."""
    assert vdf_mod_7.get_exponent() == 2
    assert vdf_mod_11.get_exponent() == 3

def test_eval_residue_step(vdf_mod_7):
    """Test one step on a quadratic residue."""
    # Debias: 3 ^ 1 = 2, a residue (3^2 = 2 mod 7)
    # Root: 2^2 mod 7 = 4, already even
    assert vdf_mod_7.eval(mpz(3), 1) == 4

def test_eval_non_residue_step(vdf_mod_7):
    """Test one step on a non-residue."""
    # Debias: 4 ^ 1 = 5, a non-residue
    # Root: 5^2 mod 7 = 4, a root of -5 = 2; the odd root is 7 - 4 = 3
    assert vdf_mod_7.eval(mpz(4), 1) == 3

def test_eval_two_steps(vdf_mod_7):
    """Test that steps chain: 3 -> 4 -> 3."""
    assert vdf_mod_7.eval(mpz(3), 2) == 3

def test_eval_mod_11(vdf_mod_11):
    """Test single steps over p = 11."""
    # 5 -> debias 4 -> 4^3 = 9 (odd root of a residue) -> 11 - 9 = 2
    assert vdf_mod_11.eval(mpz(5), 1) == 2
    # 2 -> debias 3 -> 3^3 = 5 (odd root of a residue) -> 11 - 5 = 6
    assert vdf_mod_11.eval(mpz(2), 1) == 6
    # 7 -> debias 6 -> 6^3 = 7, a root of -6 and already odd
    assert vdf_mod_11.eval(mpz(7), 1) == 7

@pytest.mark.parametrize("seed, steps, witness", [(3, 1, 4), (4, 1, 3), (3, 2, 3)])
def test_verify_known_witnesses(vdf_mod_7, seed, steps, witness):
    """Test verify on the hand-computed witnesses."""
    assert vdf_mod_7.verify(mpz(seed), steps, mpz(witness))

def test_verify_rejects_other_witnesses(vdf_mod_7):
    """Test that every other residue fails for seed 3, one step."""
    for witness in range(7):
        if witness != 4:
            assert not vdf_mod_7.verify(mpz(3), 1, mpz(witness))

def test_seed_is_reduced(vdf_mod_7):
    """Test that seeds outside [0, p) are reduced first, negatives included."""
    assert vdf_mod_7.eval(mpz(10), 1) == vdf_mod_7.eval(mpz(3), 1)
    assert vdf_mod_7.eval(mpz(-4), 1) == vdf_mod_7.eval(mpz(3), 1)
    assert vdf_mod_7.verify(mpz(10), 1, mpz(4))
