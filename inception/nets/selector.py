"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

The active network. A process runs on one network, chosen once during startup
and read by everything else afterwards.
"""

from inception import UnknownNetworkError
from inception.util import helpers


log = helpers.getLogger("NETS")


class ActiveNetworkSelector:
    """
    ActiveNetworkSelector holds the active ChainParams. Select the network
    during startup, then call seal. Selecting after seal is a programming error
    and raises RuntimeError. A failed selection leaves the active network
    unchanged.
    """

    def __init__(self, find, default):
        """
        Args:
            find (func(str) -> ChainParams): Look up network parameters by
                name, raising UnknownNetworkError for an unknown name.
            default (ChainParams): The initially active network.
        """
        self.find = find
        self.netParams = default
        self.selected = False
        self.sealed = False

    def current(self):
        """
        The active network parameters.

        Returns:
            ChainParams: The parameters.
        """
        return self.netParams

    def selectByName(self, name):
        """
        Make the named network active.

        Args:
            name (str): A network name, as accepted by find.

        Returns:
            ChainParams: The newly active parameters.
        """
        self.checkWritable()
        return self.publish(self.find(name))

    def selectFromFlags(self, wantTestnet, wantRegtest):
        """
        Make the network chosen by the startup flags active. With neither flag,
        that is the main network. The flags are mutually exclusive.

        Args:
            wantTestnet (bool): Run on the test network.
            wantRegtest (bool): Run on the regression test network.

        Returns:
            ChainParams: The newly active parameters.
        """
        self.checkWritable()
        if wantTestnet and wantRegtest:
            raise UnknownNetworkError("invalid combination of testnet and regtest")
        if wantRegtest:
            return self.publish(self.find("regtest"))
        if wantTestnet:
            return self.publish(self.find("test"))
        return self.publish(self.find("main"))

    def seal(self):
        """
        Prevent further selection.
        """
        self.sealed = True
        log.debug(f"network selection sealed on {self.netParams.networkId}")

    def isTestNet(self):
        """
        Whether the public test network is active. False for the regression
        test network.
        """
        return self.netParams.networkId == "testnet"

    def checkWritable(self):
        if self.sealed:
            raise RuntimeError(
                f"network already fixed to {self.netParams.networkId}. cannot select after startup"
            )

    def publish(self, netParams):
        if self.selected:
            log.warning(
                f"network reselected from {self.netParams.networkId} to {netParams.networkId}"
            )
        self.netParams = netParams
        self.selected = True
        log.info(f"selected network {netParams.networkId}")
        return netParams
