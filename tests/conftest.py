import pytest

from bip85 import root_from_xprv

# Root key used by every test vector in BIP-85
ROOT_XPRV = (
    "xprv9s21ZrQH143K2LBWUUQRFXhucrQqBpKdRRxNVq2zBqsx8HVqFk2uYo8kmbaL"
    "LHRdqtQpUm98uKfu3vca1LqdGhUtyoFnCNkfmXRyPXLjbKb"
)


class UntouchableRoot:
    """Stands in for a root key that must never be derived from"""

    testnet = False

    def ChildKey(self, index):
        raise AssertionError("derivation attempted for rejected parameters")


@pytest.fixture(scope="session")
def root():
    return root_from_xprv(ROOT_XPRV)


@pytest.fixture
def untouchable_root():
    return UntouchableRoot()
