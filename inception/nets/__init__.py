"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

The Inception networks. Importing this package builds the parameters of all
three networks and verifies their genesis blocks.
"""

from inception import InceptionError, UnknownNetworkError

from . import mainnet, regtest, testnet
from .params import AddressKind, ChainParams, NetworkVariant  # noqa: F401
from .selector import ActiveNetworkSelector


the_nets = {n.Params.name: n.Params for n in (mainnet, testnet, regtest)}
# The network IDs are accepted as names too.
for _p in list(the_nets.values()):
    the_nets.setdefault(_p.networkId, _p)
del _p

NetworkIDs = tuple(the_nets[n].name for n in NetworkVariant.all)


def _checkDistinct():
    nets = [the_nets[n] for n in NetworkVariant.all]
    for attr in ("magicBytes", "genesisHash"):
        vals = [getattr(p, attr) for p in nets]
        if len(set(vals)) != len(vals):
            raise InceptionError(f"networks share a {attr}")
    ports = [p.defaultP2PPort for p in nets] + [p.defaultRpcPort for p in nets]
    if len(set(ports)) != len(ports):
        raise InceptionError("networks share a port")


_checkDistinct()


def find(name):
    """
    Get the network parameters based on the network name.

    Args:
        name (str): A chain name (main, test, regtest) or network ID (testnet).

    Returns:
        ChainParams: The network parameters.
    """
    try:
        return the_nets[name]
    except (KeyError, TypeError):
        raise UnknownNetworkError(f"unrecognized network name {name}")


def normalizeName(netName):
    """
    The chain name for any accepted network name.

    Args:
        netName (str): The raw network name.

    Returns:
        str: The chain name.
    """
    return find(netName).name


# The process-wide selection, initially the main network.
selector = ActiveNetworkSelector(find, mainnet.Params)


def params():
    """The active network parameters."""
    return selector.current()


def selectParams(name):
    """
    Make the named network active. See ActiveNetworkSelector.selectByName.
    """
    return selector.selectByName(name)


def selectParamsFromFlags(wantTestnet, wantRegtest):
    """
    Make the network chosen by the startup flags active. See
    ActiveNetworkSelector.selectFromFlags.
    """
    return selector.selectFromFlags(wantTestnet, wantRegtest)


def isTestNet():
    return selector.isTestNet()
