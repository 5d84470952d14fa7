"""
Root keys and single private keys for BIP-85
"""

import hashlib
import logging
from dataclasses import dataclass

import base58
import bip32utils
import ecdsa
from mnemonic import Mnemonic

log = logging.getLogger(__name__)

WIF_MAINNET = b'\x80'
WIF_TESTNET = b'\xef'


@dataclass(frozen=True)
class PrivateKey:
    """A bare secp256k1 private key with its network and compression flag"""

    secret: bytes
    testnet: bool = False
    compressed: bool = True

    def __post_init__(self):
        # Rejects scalars of the wrong size, zero and the curve order or above
        ecdsa.SigningKey.from_string(self.secret, curve=ecdsa.SECP256k1)

    def wif(self):
        """Wallet Import Format string"""
        extended_key = (WIF_TESTNET if self.testnet else WIF_MAINNET) + self.secret
        if self.compressed:
            extended_key += b'\x01'
        checksum = hashlib.sha256(hashlib.sha256(extended_key).digest()).digest()[:4]
        return base58.b58encode(extended_key + checksum).decode()

    def hex(self):
        return self.secret.hex()

    def __str__(self):
        return self.wif()


def root_from_xprv(xprv):
    """Load a root key from a serialized extended private key"""
    key = bip32utils.BIP32Key.fromExtendedKey(xprv.strip())
    if key.public:
        raise ValueError("extended public keys cannot be used for hardened derivation")
    return key


def root_from_mnemonic(mnemonic_phrase, passphrase="", language="english", testnet=False):
    """Build the BIP32 master key for a BIP39 mnemonic"""
    mnemo = Mnemonic(language)
    if not mnemo.check(mnemonic_phrase):
        raise ValueError("invalid BIP39 mnemonic")
    seed = mnemo.to_seed(mnemonic_phrase, passphrase)
    log.debug("Built master key from %d word mnemonic", len(mnemonic_phrase.split()))
    return bip32utils.BIP32Key.fromEntropy(seed, public=False, testnet=testnet)
