"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

Base-58 check encoding with network version prefixes. The prefix tells which
network, and which kind of data, an encoded string belongs to.
"""

from inception import InceptionError
from inception.crypto import crypto
from inception.nets.params import AddressKind


def encodeAddress(payload, kind, netParams):
    """
    Encode the payload with the network's prefix for the kind.

    Args:
        payload (bytes-like): e.g. a 20-byte public key hash.
        kind (int): An AddressKind.
        netParams (ChainParams): The network parameters.

    Returns:
        str: The base-58 check encoded string.
    """
    return crypto.b58CheckEncode(netParams.base58Prefix(kind), payload)


def decodeAddress(addr, netParams):
    """
    Decode a base-58 check encoded string, identifying its kind by the
    network's prefixes. Strings of other networks are rejected.

    Args:
        addr (str): The encoded string.
        netParams (ChainParams): The network parameters.

    Returns:
        int: The AddressKind.
        ByteArray: The payload.
    """
    # Longer prefixes first. A one-byte prefix could match the first byte of a
    # four-byte one.
    kinds = sorted(
        AddressKind.all, key=lambda k: len(netParams.base58Prefixes[k]), reverse=True
    )
    for kind in kinds:
        prefix = netParams.base58Prefixes[kind]
        try:
            payload, version = crypto.b58CheckDecode(addr, versionLen=len(prefix))
        except InceptionError:
            continue
        if version == prefix:
            return kind, payload
    raise InceptionError(f"{addr} is not a {netParams.networkId} address")
