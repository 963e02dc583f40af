import pytest
from gmpy2 import mpz

from vdf_engine.errors import VdfConfigurationError
from vdf_engine.vdf import IVdfScheme, MimcVDF, SqrtVDF, VdfSchemeFactory, VdfSchemeType


def test_create_sqrt(mersenne_127):
    """Test that SQRT builds a SqrtVDF bound to the modulus."""
    scheme = VdfSchemeFactory.create(VdfSchemeType.SQRT, mersenne_127)
    assert isinstance(scheme, SqrtVDF)
    assert isinstance(scheme, IVdfScheme)
    assert scheme.get_modulus() == mersenne_127

def test_create_sqrt_without_modulus():
    """Test that SQRT needs a modulus."""
    with pytest.raises(VdfConfigurationError):
        VdfSchemeFactory.create(VdfSchemeType.SQRT)

def test_create_mimc():
    """Test that MIMC ignores any modulus."""
    assert isinstance(VdfSchemeFactory.create(VdfSchemeType.MIMC), MimcVDF)
    assert isinstance(VdfSchemeFactory.create(VdfSchemeType.MIMC, mpz(7)), MimcVDF)

def test_unknown_scheme():
    """Test that an unknown scheme is rejected."""
    with pytest.raises(VdfConfigurationError):
        VdfSchemeFactory.create("sloth", mpz(7))

def test_scheme_type_from_value():
    """Test lookup of scheme types by their command line names."""
    assert VdfSchemeType("sqrt") is VdfSchemeType.SQRT
    assert VdfSchemeType("mimc") is VdfSchemeType.MIMC

@pytest.mark.parametrize("scheme_type", list(VdfSchemeType))
def test_uniform_round_trip(scheme_type, mersenne_127):
    """Test that every scheme honours the same eval/verify contract."""
    scheme = VdfSchemeFactory.create(scheme_type, mersenne_127)
    witness = scheme.eval(mpz(12345), 40)
    assert scheme.verify(mpz(12345), 40, witness)
    assert not scheme.verify(mpz(12345), 40, witness + 1)
