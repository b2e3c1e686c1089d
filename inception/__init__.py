"""
Copyright (c) 2020, The Inception developers
See LICENSE for details
"""


class InceptionError(Exception):
    pass


class GenesisIntegrityError(InceptionError):
    """
    A computed genesis block hash or merkle root does not match the value
    pinned for its network. The parameters cannot be trusted and the process
    must not continue.
    """

    pass


class UnknownNetworkError(InceptionError):
    """
    A network name is not recognized, or the requested combination of networks
    is not allowed.
    """

    pass
