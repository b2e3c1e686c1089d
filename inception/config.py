"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

Configuration settings. The network is chosen with the --testnet and
--regtest flags, or with the same keys in the configuration file.
"""

import argparse
import logging
import os
import sys

from inception import UnknownNetworkError
from inception import nets
from inception.util import helpers


log = helpers.getLogger("CONFIG")

APP_NAME = "inception"

# The default data directory, in an OS-appropriate location.
DEFAULT_DATA_DIR = helpers.appDataDir(APP_NAME)

# The master configuration file name.
CONFIG_NAME = "inception.conf"

LOG_NAME = "inception.log"

logLevelMap = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "notset": logging.NOTSET,
    "0": logging.NOTSET,
}

boolMap = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}


def logLvl(s):
    """
    Get the log level from the map.

    Args:
        s (str): A string which is a key for the logLevelMap. Case-insensitive.
    """
    return logLevelMap[s.lower()]


def parseBool(s):
    """
    Parse a boolean configuration file value. Case-insensitive.

    Args:
        s (str): One of 1, 0, true, false, yes, no, on, off.
    """
    return boolMap[s.strip().lower()]


class CmdArgs:
    """
    CmdArgs are command-line configuration options, merged with the
    configuration file.
    """

    def __init__(self, argv=None):
        """
        Args:
            argv (list(str)): Optional. Default: sys.argv[1:]. The arguments
                to parse.
        """
        self.logLevel = logging.INFO
        self.moduleLevels = {}
        parser = argparse.ArgumentParser(prog=APP_NAME)
        parser.add_argument("--loglevel", help="log level, or comma-separated module:level pairs")
        parser.add_argument("--datadir", help="directory for network data")
        parser.add_argument("--conf", help="path to the configuration file")
        parser.add_argument("--testnet", action="store_true", help="use the test network")
        parser.add_argument("--regtest", action="store_true", help="use the regression test network")
        args, unknown = parser.parse_known_args(argv)
        if unknown:
            sys.exit(f"unknown arguments: {unknown}")

        self.dataDir = args.datadir if args.datadir else DEFAULT_DATA_DIR
        self.configPath = args.conf if args.conf else os.path.join(self.dataDir, CONFIG_NAME)
        fileCfg = {}
        if os.path.isfile(self.configPath):
            fileCfg = helpers.readINI(self.configPath, ("testnet", "regtest"))
        elif args.conf:
            sys.exit(f"configuration file not found: {args.conf}")

        try:
            self.wantTestnet = args.testnet or parseBool(fileCfg.get("testnet", "0"))
            self.wantRegtest = args.regtest or parseBool(fileCfg.get("regtest", "0"))
        except KeyError as e:
            sys.exit(f"malformed boolean in {self.configPath}: {e}")

        # Resolve the flags with a private selector so that a conflict is
        # reported here, before anything is published.
        try:
            selector = nets.ActiveNetworkSelector(nets.find, nets.mainnet.Params)
            self.netParams = selector.selectFromFlags(self.wantTestnet, self.wantRegtest)
        except UnknownNetworkError as e:
            parser.print_usage(sys.stderr)
            sys.exit(f"{APP_NAME}: error: {e}")

        if args.loglevel:
            try:
                if any(ch in args.loglevel for ch in (",", ":")):
                    pairs = (s.split(":") for s in args.loglevel.split(","))
                    self.moduleLevels = {k: logLvl(v) for k, v in pairs}
                else:
                    self.logLevel = logLvl(args.loglevel)
            except Exception:
                sys.exit(f"malformed loglevel specifier: {args.loglevel}")

    def netDataDir(self):
        """
        The data directory of the chosen network.
        """
        return netDataDir(self.netParams, self.dataDir)


def netDataDir(netParams, baseDir=None):
    """
    The directory that holds a network's data: the network's data directory
    suffix under the base data directory. The main network uses the base
    directory itself.

    Args:
        netParams (ChainParams): The network parameters.
        baseDir (str): Optional. Default: DEFAULT_DATA_DIR. The base
            directory.

    Returns:
        str: The directory path.
    """
    baseDir = baseDir if baseDir else DEFAULT_DATA_DIR
    if not netParams.dataDirSuffix:
        return baseDir
    return os.path.join(baseDir, netParams.dataDirSuffix)


appConfig = None


def load(argv=None):
    """
    Load and return the current command-line configuration. The configuration is
    only loaded once. Successive calls to the modular `load` function will
    return the same instance.

    The first load creates the network data directory, starts logging to it,
    and publishes the chosen network, after which the network can no longer be
    changed.

    Args:
        argv (list(str)): Optional. Default: sys.argv[1:]. The arguments to
            parse on the first load.

    Returns:
        CmdArgs: The current command-line configuration.
    """
    global appConfig
    if not appConfig:
        cfg = CmdArgs(argv)
        dataDir = cfg.netDataDir()
        if not helpers.mkdir(dataDir):
            sys.exit(f"data directory {dataDir} is a file")
        helpers.prepareLogging(
            os.path.join(dataDir, LOG_NAME), logLvl=cfg.logLevel, lvlMap=cfg.moduleLevels
        )
        nets.selectParamsFromFlags(cfg.wantTestnet, cfg.wantRegtest)
        nets.selector.seal()
        log.info(f"using data directory {dataDir}")
        appConfig = cfg
    return appConfig
