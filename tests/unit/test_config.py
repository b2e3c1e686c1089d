"""
Copyright (c) 2020, The Inception developers
See LICENSE for details
"""

import logging
import os

import pytest

from inception import config, nets
from inception.config import CmdArgs, load, netDataDir
from inception.nets import mainnet, regtest, testnet


def test_CmdArgs(tmp_path):
    dataDir = ["--datadir", str(tmp_path)]

    with pytest.raises(SystemExit):
        CmdArgs(["--unknown"] + dataDir)

    cfg = CmdArgs(dataDir)
    assert cfg.netParams is mainnet.Params
    assert cfg.dataDir == str(tmp_path)
    assert cfg.configPath == os.path.join(str(tmp_path), config.CONFIG_NAME)
    assert cfg.netDataDir() == str(tmp_path)
    assert cfg.logLevel == logging.INFO

    cfg = CmdArgs(["--testnet"] + dataDir)
    assert cfg.netParams is testnet.Params
    assert cfg.netDataDir() == os.path.join(str(tmp_path), "testnet")

    cfg = CmdArgs(["--regtest"] + dataDir)
    assert cfg.netParams is regtest.Params
    assert cfg.wantRegtest and not cfg.wantTestnet

    with pytest.raises(SystemExit):
        CmdArgs(["--testnet", "--regtest"] + dataDir)

    with pytest.raises(SystemExit):
        CmdArgs(["--testnet", "--loglevel", ",:"] + dataDir)

    cfg = CmdArgs(["--testnet", "--loglevel", "debug"] + dataDir)
    assert cfg.netParams.networkId == "testnet"
    assert cfg.logLevel == logging.DEBUG

    cfg = CmdArgs(["--loglevel", "A:Warning,B:deBug,C:Critical,D:0"] + dataDir)
    assert len(cfg.moduleLevels) == 4
    assert cfg.moduleLevels["A"] == logging.WARNING
    assert cfg.moduleLevels["B"] == logging.DEBUG
    assert cfg.moduleLevels["C"] == logging.CRITICAL
    assert cfg.moduleLevels["D"] == logging.NOTSET


def test_config_file(tmp_path):
    dataDir = ["--datadir", str(tmp_path)]
    cfgFile = tmp_path / config.CONFIG_NAME

    cfgFile.write_text("testnet=1\n")
    assert CmdArgs(dataDir).netParams is testnet.Params

    cfgFile.write_text("regtest=true\ntestnet=0\n")
    assert CmdArgs(dataDir).netParams is regtest.Params

    # The flags and the file are combined.
    cfgFile.write_text("regtest=yes\n")
    with pytest.raises(SystemExit):
        CmdArgs(["--testnet"] + dataDir)

    cfgFile.write_text("testnet=maybe\n")
    with pytest.raises(SystemExit):
        CmdArgs(dataDir)

    other = tmp_path / "other.conf"
    other.write_text("[inception]\nregtest=1\n")
    assert CmdArgs(["--conf", str(other)] + dataDir).netParams is regtest.Params

    with pytest.raises(SystemExit):
        CmdArgs(["--conf", str(tmp_path / "missing.conf")] + dataDir)


def test_netDataDir():
    base = os.path.join("base", "dir")
    assert netDataDir(mainnet.Params, base) == base
    assert netDataDir(testnet.Params, base) == os.path.join(base, "testnet")
    assert netDataDir(regtest.Params, base) == os.path.join(base, "regtest")
    assert netDataDir(regtest.Params) == os.path.join(config.DEFAULT_DATA_DIR, "regtest")


def test_load(tmp_path, freshConfig, restoreLogging):
    cfg = load(["--regtest", "--datadir", str(tmp_path)])
    assert load() is cfg
    assert nets.params() is regtest.Params
    assert (tmp_path / "regtest").is_dir()
    assert (tmp_path / "regtest" / config.LOG_NAME).is_file()

    # The network is fixed once the configuration is loaded.
    with pytest.raises(RuntimeError):
        nets.selectParams("main")
    assert nets.params() is regtest.Params


def test_load_file_as_datadir(tmp_path, freshConfig, restoreLogging):
    (tmp_path / "testnet").write_text("")
    with pytest.raises(SystemExit):
        load(["--testnet", "--datadir", str(tmp_path)])
