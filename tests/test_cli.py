"""
Tests for python -m bip85
"""

import pytest

from bip85.__main__ import main

from .conftest import ROOT_XPRV
from .test_apps import EXPECTED_HEX_64, EXPECTED_MNEMONICS
from .test_derive import EXPECTED_0_0


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("BIP85_XPRV", raising=False)
    monkeypatch.delenv("BIP85_MNEMONIC", raising=False)


def run_cli(capsys, *argv):
    status = main(list(argv))
    captured = capsys.readouterr()
    return status, captured.out.strip(), captured.err.strip()


def test_wif(capsys):
    status, out, _ = run_cli(capsys, "--xprv", ROOT_XPRV, "wif")
    assert status == 0
    assert out == "Kzyv4uF39d4Jrw2W7UryTHwZr1zQVNk4dAFyqE6BuMrMh1Za7uhp"


def test_xprv(capsys):
    status, out, _ = run_cli(capsys, "--xprv", ROOT_XPRV, "xprv", "--index", "0")
    assert status == 0
    assert out == (
        "xprv9s21ZrQH143K2srSbCSg4m4kLvPMzcWydgmKEnMmoZUurYuBuYG46c6P71UG"
        "XMzmriLzCCBvKQWBUv3vPB3m1SATMhp3uEjXHJ42jFg7myX"
    )


def test_hex(capsys):
    status, out, _ = run_cli(capsys, "--xprv", ROOT_XPRV, "hex")
    assert status == 0
    assert out == EXPECTED_HEX_64.hex()


def test_mnemonic(capsys):
    status, out, _ = run_cli(capsys, "--xprv", ROOT_XPRV, "mnemonic", "--words", "24")
    assert status == 0
    assert out == EXPECTED_MNEMONICS[24]


def test_raw(capsys):
    status, out, _ = run_cli(capsys, "--xprv", ROOT_XPRV, "raw", "0'/0'")
    assert status == 0
    assert out == EXPECTED_0_0.hex()


def test_root_from_environment(capsys, monkeypatch):
    monkeypatch.setenv("BIP85_XPRV", ROOT_XPRV)
    status, out, _ = run_cli(capsys, "mnemonic")
    assert status == 0
    assert out == EXPECTED_MNEMONICS[12]


def test_mnemonic_flag_beats_environment(capsys, monkeypatch):
    monkeypatch.setenv("BIP85_XPRV", ROOT_XPRV)
    phrase = "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"
    status, out, _ = run_cli(capsys, "--mnemonic", phrase, "hex")
    assert status == 0
    assert out != EXPECTED_HEX_64.hex()


def test_missing_root(capsys):
    status, out, err = run_cli(capsys, "wif")
    assert status == 1
    assert out == ""
    assert err.startswith("Error: no root key")


def test_invalid_parameters(capsys):
    status, _, err = run_cli(capsys, "--xprv", ROOT_XPRV, "hex", "--length", "65")
    assert status == 1
    assert err == "Error: invalid bytes length: 65. Should be between 16 and 64"

    status, _, err = run_cli(capsys, "--xprv", ROOT_XPRV, "mnemonic", "--words", "13")
    assert status == 1
    assert "invalid number of words for mnemonic: 13" in err


def test_requires_command(capsys):
    with pytest.raises(SystemExit):
        main(["--xprv", ROOT_XPRV])
