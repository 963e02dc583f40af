from gmpy2 import mpz

from vdf_engine.mpc import MPC


def test_mpz_conversion():
    """Test that ints and decimal strings convert to mpz."""
    assert isinstance(MPC.mpz(5), type(mpz(0)))
    assert MPC.mpz("12345678901234567890") == 12345678901234567890

def test_powmod():
    """Test modular exponentiation against Python's pow."""
    assert MPC.powmod(5, 117, 19) == pow(5, 117, 19)
    assert MPC.powmod(mpz(2) ** 200, 3, 10007) == pow(2**200, 3, 10007)

def test_mod_is_floor_remainder():
    """Test that negative values reduce into [0, modulus)."""
    assert MPC.mod(-4, 7) == 3
    assert MPC.mod(25, 21) == 4
    assert MPC.mod(0, 7) == 0

def test_is_prime():
    """Test primality on small and Mersenne values."""
    assert MPC.is_prime(7)
    assert MPC.is_prime(mpz(2) ** 127 - 1)
    assert not MPC.is_prime(15)
    assert not MPC.is_prime(mpz(2) ** 128 - 1)

def test_is_odd():
    """Test parity checks."""
    assert MPC.is_odd(7)
    assert not MPC.is_odd(mpz(2) ** 300)

def test_next_prime():
    """Test that next_prime returns the following prime."""
    assert MPC.next_prime(7) == 11
    assert MPC.next_prime(10000) == 10007
