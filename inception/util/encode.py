"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

A class that wraps bytearray and provides some convenient operators.
"""

from inception import InceptionError


def intToBytes(i, signed=False):
    """
    Encodes an integer to the minimum number of big-endian bytes.

    Args:
        i (int): The integer.
        signed (bool): Whether to encode as a signed integer.

    Returns:
        bytearray: The encoded integer.
    """
    length = ((i + ((i * signed) < 0)).bit_length() + 7 + signed) // 8
    return bytearray(i.to_bytes(length, byteorder="big", signed=signed))


def intFromBytes(b, signed=False):
    """
    Decodes a big-endian integer from bytes.

    Args:
        b (bytes-like): The encoded integer.
        signed (bool): Whether to decode as a signed integer.

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b, "big", signed=signed)


def decodeBA(b, copy=False):
    """
    Decode into a bytearray.

    Args:
        b (str, bytes-like, ByteArray, int, list(int)): The value to decode.
            Strings are interpreted as hexadecimal. Integers are minimally
            encoded as unsigned big-endian.
        copy (bool): Whether to copy a bytearray or ByteArray argument rather
            than share its memory.

    Returns:
        bytearray: The decoded bytes.
    """
    if isinstance(b, ByteArray):
        return bytearray(b.b) if copy else b.b
    if isinstance(b, bytearray):
        return bytearray(b) if copy else b
    if isinstance(b, bytes):
        return bytearray(b)
    if isinstance(b, int):
        return intToBytes(b) if b else bytearray([0])
    if isinstance(b, str):
        return bytearray.fromhex(b)
    if hasattr(b, "__iter__"):
        return bytearray(b)
    raise TypeError("decodeBA: unknown type %s" % type(b))


class ByteArray:
    """
    ByteArray manages a bytearray and decodes its constructor argument on the
    fly, so ints, hex strings and bytes-likes can all be used where bytes are
    expected. An integer argument yields its shortest big-endian encoding. Use
    the `length` keyword to get a zero-padded (right-aligned) result, e.g.
    ByteArray(1, length=4) is 00000001.
    """

    def __init__(self, b=b"", copy=True, length=None):
        if length:
            v = decodeBA(b)
            if len(v) > length:
                raise InceptionError(f"value of {len(v)} bytes overflows length {length}")
            self.b = bytearray(length - len(v)) + v
        else:
            self.b = decodeBA(b, copy=copy)

    def __eq__(self, a):
        try:
            return self.b == decodeBA(a)
        except Exception:
            return False

    def __ne__(self, a):
        return not self.__eq__(a)

    def __repr__(self):
        return "ByteArray(" + self.hex() + ")"

    def __len__(self):
        return len(self.b)

    def __add__(self, a):
        return ByteArray(self.b + decodeBA(a))

    def __iadd__(self, a):
        return self.__add__(a)

    def __getitem__(self, k):
        if isinstance(k, slice):
            return ByteArray(self.b[k.start : k.stop : k.step], copy=False)
        return self.b[k]

    def __reversed__(self):
        return ByteArray(bytearray(reversed(self.b)))

    def __hash__(self):
        return hash(bytes(self.b))

    def hex(self):
        """
        The bytes as a hexadecimal string.
        """
        return self.b.hex()

    def rhex(self):
        """
        The bytes, reversed, as a hexadecimal string. Hashes are displayed this
        way.
        """
        return self.__reversed__().hex()

    def iszero(self):
        """
        True if all bytes are zero.
        """
        return all(v == 0 for v in self.b)

    def int(self):
        """The bytes as a big-endian integer."""
        return intFromBytes(self.b)

    def bytes(self):
        """The bytes as Python `bytes`."""
        return bytes(self.b)

    def littleEndian(self):
        """A reversed copy of the ByteArray."""
        return ByteArray(bytearray(reversed(self.b)))

    def unLittle(self):
        """A reversed copy of the ByteArray."""
        return self.littleEndian()

    def copy(self):
        """A copy of the ByteArray."""
        return ByteArray(self.b)

    def pop(self, n):
        """
        Remove n bytes from the beginning of the ByteArray, returning them.
        Raises InceptionError if fewer than n bytes remain.
        """
        if n > len(self.b):
            raise InceptionError(f"pop of {n} bytes from {len(self.b)} remaining")
        b = self[:n]
        self.b = self.b[n:]
        return b


def rba(*a, **k):
    """
    Reversed ByteArray. All args and kwargs are passed to the ByteArray
    constructor.
    """
    return reversed(ByteArray(*a, **k))
