"""CLI entry point: python -m bip85 <application> [options]"""

import argparse
import logging
import os
import sys

from .apps import derive_hex, derive_mnemonic, derive_wif, derive_xprv
from .derive import derive_path
from .keys import root_from_mnemonic, root_from_xprv

log = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bip85",
        description="Derive deterministic entropy from a BIP32 root key (BIP-85)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument("--xprv", help="Root extended private key (or BIP85_XPRV)")
    parser.add_argument("--mnemonic", help="Root BIP39 mnemonic (or BIP85_MNEMONIC)")
    parser.add_argument("--passphrase", default="", help="BIP39 passphrase")
    parser.add_argument(
        "--testnet", action="store_true",
        help="Use testnet encodings for a mnemonic root",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    p_wif = subparsers.add_parser("wif", help="Derive a WIF private key")
    p_wif.add_argument("--index", type=int, default=0)

    p_xprv = subparsers.add_parser("xprv", help="Derive an extended private key")
    p_xprv.add_argument("--index", type=int, default=0)

    p_hex = subparsers.add_parser("hex", help="Derive hex entropy")
    p_hex.add_argument("--length", type=int, default=64, help="Bytes, 16 to 64")
    p_hex.add_argument("--index", type=int, default=0)

    p_mnemonic = subparsers.add_parser("mnemonic", help="Derive a BIP39 mnemonic")
    p_mnemonic.add_argument("--words", type=int, default=12, help="12, 18 or 24")
    p_mnemonic.add_argument(
        "--language", type=int, default=0, help="BIP-85 language code (0 = English)"
    )
    p_mnemonic.add_argument("--index", type=int, default=0)

    p_raw = subparsers.add_parser("raw", help="Derive 64 bytes for a custom path")
    p_raw.add_argument("path", help="Path below m/83696968', e.g. \"0'/0'\"")

    return parser


def load_root(args):
    """Pick the root key from flags first, then the environment"""
    xprv = args.xprv or (None if args.mnemonic else os.environ.get("BIP85_XPRV"))
    if xprv:
        return root_from_xprv(xprv)

    mnemonic_phrase = args.mnemonic or os.environ.get("BIP85_MNEMONIC")
    if mnemonic_phrase:
        return root_from_mnemonic(
            mnemonic_phrase, args.passphrase, testnet=args.testnet
        )
    return None


def run(args, root):
    if args.command == "wif":
        return derive_wif(root, args.index).wif()
    if args.command == "xprv":
        return derive_xprv(root, args.index).ExtendedKey(private=True, encoded=True)
    if args.command == "hex":
        return derive_hex(root, args.length, args.index).hex()
    if args.command == "mnemonic":
        return derive_mnemonic(root, args.words, args.index, args.language)
    return derive_path(root, args.path).hex()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-5s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        root = load_root(args)
        if root is None:
            print(
                "Error: no root key, use --xprv, --mnemonic, BIP85_XPRV or BIP85_MNEMONIC",
                file=sys.stderr,
            )
            return 1
        log.debug("Running %s", args.command)
        print(run(args, root))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
