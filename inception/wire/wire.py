"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

Constants and common routines for the Inception wire encoding.
"""

from inception import InceptionError
from inception.util.encode import ByteArray


# fmt: off
MaxUint8  = (1 << 8) - 1
MaxUint16 = (1 << 16) - 1
MaxUint32 = (1 << 32) - 1
MaxUint64 = (1 << 64) - 1
# fmt: on

# MaxMessagePayload is the maximum bytes a message can be regardless of other
# individual limits imposed by messages themselves.
MaxMessagePayload = 1024 * 1024 * 32  # 32MB

# MessageStartSize is the length of the network magic that frames every
# message.
MessageStartSize = 4

# SFNodeNetwork is a flag used to indicate a peer is a full node.
SFNodeNetwork = 1 << 0


def writeVarInt(pver, val):
    """
    writeVarInt serializes val using a variable number of bytes depending on
    its value.

    Args:
        pver (int): the protocol version.
        val (int): the value to be serialized.

    Returns:
        ByteArray: The encoded integer.
    """
    if val < 0xFD:
        return ByteArray(val, length=1)

    if val <= MaxUint16:
        return ByteArray(0xFD) + ByteArray(val, length=2).littleEndian()

    if val <= MaxUint32:
        return ByteArray(0xFE) + ByteArray(val, length=4).littleEndian()

    return ByteArray(0xFF) + ByteArray(val, length=8).littleEndian()


def writeVarBytes(pver, inBytes):
    """
    writeVarBytes serializes a variable length byte array as a varInt
    containing the number of bytes, followed by the bytes themselves.
    """
    return writeVarInt(pver, len(inBytes)) + inBytes


def readVarInt(b, pver):
    """
    readVarInt reads a variable length integer from b and returns it as an int.

    Args:
        b (ByteArray): the encoded integer. The bytes are consumed.
        pver (int): the protocol version (unused).
    """
    data = {
        0xFF: dict(pop_bytes=8, minRv=0x100000000),
        0xFE: dict(pop_bytes=4, minRv=0x10000),
        0xFD: dict(pop_bytes=2, minRv=0xFD),
    }
    discriminant = b.pop(1).int()
    if discriminant not in data:
        return discriminant
    rv = b.pop(data[discriminant]["pop_bytes"]).unLittle().int()
    # The encoding is not canonical if the value could have been
    # encoded using fewer bytes.
    minRv = data[discriminant]["minRv"]
    if rv < minRv:
        raise InceptionError(f"readVarInt noncanon error: {rv} - {discriminant} <= {minRv}")
    return rv


def readVarBytes(b, pver, maxAllowed, fieldName):
    """
    readVarBytes reads a variable length byte array. A byte array is encoded
    as a varInt containing the length of the array followed by the bytes
    themselves.

    Args:
        b (ByteArray): the encoded bytes. The bytes are consumed.
        pver (int): the protocol version.
        maxAllowed (int): the largest length accepted.
        fieldName (str): used in error messages.

    Returns:
        ByteArray: The decoded bytes.
    """
    count = readVarInt(b, pver)
    if count > maxAllowed:
        raise InceptionError(f"{fieldName} is larger than the max allowed size [count {count}, max {maxAllowed}]")
    return b.pop(count)
