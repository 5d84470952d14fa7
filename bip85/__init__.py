"""
Deterministic entropy from BIP32 keychains (BIP-85)
"""

from .apps import (
    Application,
    Language,
    derive_application,
    derive_hex,
    derive_mnemonic,
    derive_wif,
    derive_xprv,
)
from .derive import BIP85_INDEX, HARDENED, derive, derive_path, hardened, parse_path
from .errors import Bip85Error, InvalidIndex, InvalidLanguage, InvalidLength, InvalidWordCount
from .keys import PrivateKey, root_from_mnemonic, root_from_xprv

__all__ = [
    "Application",
    "BIP85_INDEX",
    "Bip85Error",
    "HARDENED",
    "InvalidIndex",
    "InvalidLanguage",
    "InvalidLength",
    "InvalidWordCount",
    "Language",
    "PrivateKey",
    "derive",
    "derive_application",
    "derive_hex",
    "derive_mnemonic",
    "derive_path",
    "derive_wif",
    "derive_xprv",
    "hardened",
    "parse_path",
    "root_from_mnemonic",
    "root_from_xprv",
]
