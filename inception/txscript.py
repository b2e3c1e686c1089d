"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

Script data pushes. Only the push encoding needed to build coinbase signature
scripts lives here; script execution is not implemented.
"""

from inception.util.encode import ByteArray


# fmt: off
OP_0         = 0x00
OP_DATA_1    = 0x01
OP_PUSHDATA1 = 0x4C
OP_PUSHDATA2 = 0x4D
OP_PUSHDATA4 = 0x4E
OP_1NEGATE   = 0x4F
OP_1         = 0x51
# fmt: on


def scriptNumBytes(n):
    """
    scriptNumBytes returns a minimal little-endian encoding for a signed
    integer, with the sign carried in the most significant bit.

    Args:
        n (int): The integer to encode.

    Returns:
        ByteArray: The encoded bytes.
    """
    if n == 0:
        return ByteArray()

    isNegative = n < 0
    if isNegative:
        n = -n

    result = bytearray()
    while n > 0:
        result.append(n & 0xFF)
        n >>= 8

    if result[-1] & 0x80 != 0:
        result.append(0x80 if isNegative else 0x00)
    elif isNegative:
        result[-1] |= 0x80

    return ByteArray(result)


def addInt(val):
    """
    addInt returns the passed integer in a form that can be pushed to the end
    of a script.

    Args:
        val (int): The integer to format.

    Returns:
        ByteArray: The formatted integer.
    """
    # Fast path for small integers and OP_1NEGATE.
    if val == 0:
        return ByteArray(OP_0, length=1)
    if val == -1 or 1 <= val <= 16:
        return ByteArray(OP_1 - 1 + val if val > 0 else OP_1NEGATE, length=1)
    return addData(scriptNumBytes(val))


def addData(data):
    """
    Prefaces data with the correct opcode when adding it to the stack.

    Args:
        data (bytes-like): Data to add.

    Returns:
        ByteArray: The data preceded with the correct opcode.
    """
    data = ByteArray(data if data else b"")
    dataLen = len(data)

    # When the data consists of a single number that can be represented
    # by one of the "small integer" opcodes, use that opcode instead of
    # a data push opcode followed by the number.
    if dataLen == 0 or (dataLen == 1 and data[0] == 0):
        return ByteArray(OP_0, length=1)
    elif dataLen == 1 and data[0] <= 16:
        return ByteArray(OP_1 - 1 + data[0], length=1)
    elif dataLen == 1 and data[0] == 0x81:
        return ByteArray(OP_1NEGATE, length=1)

    # Use one of the OP_DATA_# opcodes if the length of the data is small
    # enough so the data push instruction is only a single byte.
    # Otherwise, choose the smallest possible OP_PUSHDATA# opcode that
    # can represent the length of the data.
    if dataLen < OP_PUSHDATA1:
        b = ByteArray((OP_DATA_1 - 1) + dataLen, length=1)
    elif dataLen <= 0xFF:
        b = ByteArray(OP_PUSHDATA1, length=1) + ByteArray(dataLen, length=1)
    elif dataLen <= 0xFFFF:
        b = ByteArray(OP_PUSHDATA2, length=1) + ByteArray(dataLen, length=2).littleEndian()
    else:
        b = ByteArray(OP_PUSHDATA4, length=1) + ByteArray(dataLen, length=4).littleEndian()
    return b + data
