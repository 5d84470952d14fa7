"""
Derive BIP-85 entropy from a BIP32 root key

Every derivation starts at m/83696968' and walks the rest of the path
through bip32utils. The private key at the end of the path is hashed with
HMAC-SHA512 keyed by "bip-entropy-from-k" to give 64 bytes of entropy.
"""

import hashlib
import hmac
import logging

from .errors import InvalidIndex

log = logging.getLogger(__name__)

HARDENED = 0x80000000
BIP85_INDEX = 83696968
BIP85_CHILD = BIP85_INDEX + HARDENED

ENTROPY_KEY = b"bip-entropy-from-k"
ENTROPY_LENGTH = 64


def hardened(index):
    """Return the hardened child number for a 31-bit index"""
    if not isinstance(index, int) or index < 0 or index >= HARDENED:
        raise InvalidIndex(index)
    return index + HARDENED


def parse_path(path):
    """Parse "m/0'/1h/2" into a list of child numbers"""
    path = path.strip()
    if path in ("", "m"):
        return []
    if path.startswith("m/"):
        path = path[2:]

    indexes = []
    for index_str in path.split('/'):
        if index_str.endswith("'") or index_str.endswith("h"):
            index = hardened(int(index_str[:-1]))
        else:
            index = int(index_str)
            if index < 0 or index >= HARDENED:
                raise InvalidIndex(index)
        indexes.append(index)
    return indexes


def derive(root, path):
    """
    Derive 64 bytes of entropy for a path below m/83696968'.

    `root` is a private bip32utils.BIP32Key and `path` the child numbers that
    follow the BIP-85 index, hardening included. Errors from bip32utils are
    not caught.
    """
    node = root.ChildKey(BIP85_CHILD)
    for index in path:
        node = node.ChildKey(index)

    log.debug("Derived BIP-85 key at depth %d", node.depth)
    return hmac.new(ENTROPY_KEY, node.PrivateKey(), hashlib.sha512).digest()


def derive_path(root, path):
    """
    Derive raw entropy for applications without a dedicated encoder.

    `path` is either a sequence of child numbers or a path string relative to
    the BIP-85 index, e.g. "0'/0'" for m/83696968'/0'/0'.
    """
    if isinstance(path, str):
        path = parse_path(path)
    return derive(root, list(path))
