"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

Hash functions used by the Inception wire format, and base-58 check encoding.
"""

import hashlib

from base58 import b58decode_check, b58encode_check
import dash_hash

from inception import InceptionError
from inception.util.encode import ByteArray


HASH_SIZE = 32


def sha256d(b):
    """
    Double SHA-256 of the bytes.

    Args:
        b (bytes-like): The thing to hash.

    Returns:
        bytes: The 32-byte digest.
    """
    return hashlib.sha256(hashlib.sha256(bytes(b)).digest()).digest()


def doubleHashH(b):
    """
    The double SHA-256 hash as a ByteArray. Transaction hashes and merkle tree
    nodes use this hash.

    Args:
        b (bytes-like): The thing to hash.

    Returns:
        ByteArray: The hash.
    """
    return ByteArray(sha256d(b))


def powHash(b):
    """
    The X11 digest of the bytes, as the Dash family of clients computes it.

    Args:
        b (bytes-like): The serialized block header.

    Returns:
        ByteArray: The 32-byte digest.
    """
    return ByteArray(dash_hash.getPoWHash(bytes(b)), length=HASH_SIZE)


def hashH(b):
    """
    The block identity hash as a ByteArray. Inception identifies a block by
    the X11 digest of its serialized header moved down one byte: the digest's
    least significant byte is dropped and a zero byte becomes the most
    significant. Every pinned genesis hash was produced this way.

    Args:
        b (bytes-like): The serialized block header.

    Returns:
        ByteArray: The hash, in internal (little-endian) byte order.
    """
    digest = powHash(b)
    return digest[1:] + ByteArray(0, length=1)


def b58CheckEncode(version, payload):
    """
    Base-58 check encode the payload behind its version prefix.

    Args:
        version (bytes-like): The network-specific version bytes.
        payload (bytes-like): The data to encode.

    Returns:
        str: The encoded string.
    """
    return b58encode_check(bytes(version) + bytes(payload)).decode()


def b58CheckDecode(s, versionLen=1):
    """
    Decode the base-58 check encoded string, separating the version prefix.
    An exception is raised if the checksum is invalid or missing.

    Args:
        s (str): The encoded string.
        versionLen (int): The length of the version prefix.

    Returns:
        ByteArray: The payload.
        bytes: The version prefix.
    """
    try:
        decoded = b58decode_check(s)
    except ValueError as e:
        raise InceptionError(f"base-58 decode failed: {e}")
    if len(decoded) <= versionLen:
        raise InceptionError("decoded lacking version or payload")
    return ByteArray(decoded[versionLen:]), decoded[:versionLen]
