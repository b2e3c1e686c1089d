"""
Copyright (c) 2020, The Inception developers
See LICENSE for details
"""

import logging

import pytest

from inception import UnknownNetworkError
from inception.nets import ActiveNetworkSelector, find, mainnet, regtest, testnet


def newSelector():
    return ActiveNetworkSelector(find, mainnet.Params)


def test_default():
    sel = newSelector()
    assert sel.current() is mainnet.Params
    assert sel.current().networkId == "main"
    assert not sel.isTestNet()


def test_selectByName():
    sel = newSelector()
    with pytest.raises(UnknownNetworkError):
        sel.selectByName("bogus")
    assert sel.current() is mainnet.Params

    assert sel.selectByName("testnet") is testnet.Params
    assert sel.current().networkId == "testnet"
    assert sel.isTestNet()

    # A failure leaves the earlier selection.
    with pytest.raises(UnknownNetworkError):
        sel.selectByName("simnet")
    assert sel.current() is testnet.Params

    sel.selectByName("regtest")
    assert sel.current() is regtest.Params
    assert not sel.isTestNet()


def test_selectFromFlags():
    tests = [
        (False, False, mainnet.Params),
        (True, False, testnet.Params),
        (False, True, regtest.Params),
    ]
    for wantTestnet, wantRegtest, want in tests:
        sel = newSelector()
        assert sel.selectFromFlags(wantTestnet, wantRegtest) is want
        assert sel.current() is want


def test_flag_conflict():
    sel = newSelector()
    with pytest.raises(UnknownNetworkError):
        sel.selectFromFlags(True, True)
    assert sel.current() is mainnet.Params

    sel.selectFromFlags(False, True)
    with pytest.raises(UnknownNetworkError):
        sel.selectFromFlags(True, True)
    assert sel.current() is regtest.Params


def test_reselect_warns(caplog):
    sel = newSelector()
    caplog.set_level(logging.INFO)
    sel.selectByName("test")
    assert "reselected" not in caplog.text
    sel.selectByName("regtest")
    assert any(
        r.levelno == logging.WARNING and "reselected" in r.getMessage()
        for r in caplog.records
    )


def test_seal():
    sel = newSelector()
    sel.selectFromFlags(True, False)
    sel.seal()
    with pytest.raises(RuntimeError):
        sel.selectByName("main")
    with pytest.raises(RuntimeError):
        sel.selectFromFlags(False, False)
    assert sel.current() is testnet.Params

    # Sealing without a selection fixes the default.
    sel = newSelector()
    sel.seal()
    with pytest.raises(RuntimeError):
        sel.selectByName("regtest")
    assert sel.current() is mainnet.Params
