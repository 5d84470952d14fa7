"""
BIP-85 applications: WIF keys, extended keys, hex entropy and BIP39 mnemonics

Each application validates its parameters before touching the root key,
builds its hardened path under m/83696968'/<app>' and decodes the 64 bytes
of derived entropy into its own output type.
"""

import logging
from enum import IntEnum

import bip32utils
from mnemonic import Mnemonic

from .derive import HARDENED, derive, hardened
from .errors import InvalidIndex, InvalidLanguage, InvalidLength, InvalidWordCount
from .keys import PrivateKey

log = logging.getLogger(__name__)

HEX_MIN_LENGTH = 16
HEX_MAX_LENGTH = 64
MIN_WORDS = 12
MAX_WORDS = 24


class Application(IntEnum):
    WIF = 2
    XPRV = 32
    BIP39 = 39
    HEX = 128169


class Language(IntEnum):
    """BIP-85 language codes for BIP39 mnemonics"""

    ENGLISH = 0
    JAPANESE = 1
    KOREAN = 2
    SPANISH = 3
    CHINESE_SIMPLIFIED = 4
    CHINESE_TRADITIONAL = 5
    FRENCH = 6
    ITALIAN = 7
    CZECH = 8

    @property
    def wordlist(self):
        """Wordlist name understood by mnemonic.Mnemonic"""
        return self.name.lower()


def _check_index(index):
    if not isinstance(index, int) or index < 0 or index >= HARDENED:
        raise InvalidIndex(index)


def derive_wif(root, index=0):
    """Derive a compressed private key on the root's network"""
    _check_index(index)
    log.debug("Deriving WIF key at index %d", index)
    entropy = derive(root, [hardened(Application.WIF), hardened(index)])
    return PrivateKey(entropy[:32], testnet=root.testnet, compressed=True)


def derive_xprv(root, index=0):
    """
    Derive a new extended private key.

    The first half of the entropy is the chain code and the second half the
    private key. The result is a root of its own: depth 0, zero parent
    fingerprint and child number 0, whatever the depth of `root`.
    """
    _check_index(index)
    log.debug("Deriving extended private key at index %d", index)
    entropy = derive(root, [hardened(Application.XPRV), hardened(index)])
    return bip32utils.BIP32Key(
        secret=entropy[32:],
        chain=entropy[:32],
        depth=0,
        index=0,
        fpr=b'\0\0\0\0',
        public=False,
        testnet=root.testnet,
    )


def derive_hex(root, length=64, index=0):
    """Derive `length` bytes (16 to 64) of raw entropy"""
    if length < HEX_MIN_LENGTH or length > HEX_MAX_LENGTH:
        raise InvalidLength(length)
    _check_index(index)
    log.debug("Deriving %d bytes of hex entropy at index %d", length, index)
    entropy = derive(root, [hardened(Application.HEX), hardened(length), hardened(index)])
    return entropy[:length]


def derive_mnemonic(root, word_count=12, index=0, language=Language.ENGLISH):
    """Derive a BIP39 phrase of 12, 18 or 24 words"""
    if word_count < MIN_WORDS or word_count > MAX_WORDS or word_count % 6 != 0:
        raise InvalidWordCount(word_count)
    _check_index(index)
    try:
        language = Language(language)
    except ValueError:
        raise InvalidLanguage(language) from None

    log.debug(
        "Deriving %d word %s mnemonic at index %d",
        word_count, language.wordlist, index,
    )
    path = [
        hardened(Application.BIP39),
        hardened(language),
        hardened(word_count),
        hardened(index),
    ]
    entropy = derive(root, path)
    return Mnemonic(language.wordlist).to_mnemonic(entropy[:word_count * 4 // 3])


_HANDLERS = {
    Application.WIF: derive_wif,
    Application.XPRV: derive_xprv,
    Application.BIP39: derive_mnemonic,
    Application.HEX: derive_hex,
}


def derive_application(root, app, *args, **kwargs):
    """Run the encoder registered for `app` with the remaining parameters"""
    return _HANDLERS[Application(app)](root, *args, **kwargs)
