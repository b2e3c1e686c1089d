"""
Copyright (c) 2020, The Inception developers
See LICENSE for details
"""

import random

import pytest

from inception import config, nets
from inception.util import helpers


@pytest.fixture
def randBytes():
    def _randBytes(low=0, high=50):
        return bytes(random.randint(0, 255) for _ in range(random.randint(low, high)))

    return _randBytes


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()


@pytest.fixture
def selector(monkeypatch):
    """
    A fresh process-wide network selector, so that tests can select and seal
    without affecting each other.
    """
    sel = nets.ActiveNetworkSelector(nets.find, nets.mainnet.Params)
    monkeypatch.setattr(nets, "selector", sel)
    return sel


@pytest.fixture
def freshConfig(monkeypatch, selector):
    """
    Forget any loaded configuration.
    """
    monkeypatch.setattr(config, "appConfig", None)
    return selector


@pytest.fixture
def restoreLogging():
    """
    Undo any file logging and module log levels a test sets up.
    """
    yield
    old = helpers.LogSettings.handlers.pop("file", None)
    if old:
        helpers.LogSettings.root.removeHandler(old)
        old.close()
    helpers.LogSettings.moduleLevels.clear()
    helpers.prepareLogging()
