import pytest
from gmpy2 import mpz

from vdf_engine import VdfConfigurationError, mimc_vdf, sqrt_vdf


def test_sqrt_vdf_functions(mersenne_127):
    """Test the module-level square-root API."""
    witness = sqrt_vdf.eval(mersenne_127, mpz(99), 30)
    assert sqrt_vdf.verify(mersenne_127, mpz(99), 30, witness)
    assert not sqrt_vdf.verify(mersenne_127, mpz(99), 30, witness + 1)

def test_sqrt_vdf_functions_known_value():
    """Test the module-level API on a hand-computed witness."""
    assert sqrt_vdf.eval(7, 3, 1) == 4
    assert sqrt_vdf.verify(7, 3, 1, 4)

def test_sqrt_vdf_rejects_bad_modulus():
    """Test that the module-level API validates the modulus."""
    with pytest.raises(VdfConfigurationError):
        sqrt_vdf.eval(13, 3, 1)
    with pytest.raises(VdfConfigurationError):
        sqrt_vdf.verify(0, 3, 1, 4)

def test_mimc_vdf_functions():
    """Test the module-level MiMC API."""
    witness = mimc_vdf.eval(3, 64)
    assert mimc_vdf.verify(3, 64, witness)
    assert not mimc_vdf.verify(3, 64, witness + 1)
    assert mimc_vdf.eval(343170, 3) == 3
