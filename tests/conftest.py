import pytest

from vdf_engine.mpc import MPC


def pytest_addoption(parser):
    parser.addoption(
        "--runslow", action="store_true", default=False, help="run the full-difficulty scenarios"
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: full-difficulty scenario, needs --runslow")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        return
    skip_slow = pytest.mark.skip(reason="needs --runslow")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(scope="session")
def prime_128():
    """A 128-bit prime congruent to 3 mod 4."""
    p = MPC.next_prime(MPC.mpz(2) ** 127)
    while p % 4 != 3:
        p = MPC.next_prime(p)
    return p


@pytest.fixture(scope="session")
def mersenne_127():
    """The Mersenne prime 2^127 - 1."""
    return MPC.mpz(2) ** 127 - 1
