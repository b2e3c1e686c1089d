"""
Copyright (c) 2020, The Inception developers
See LICENSE for details
"""

import pytest

from inception import InceptionError
from inception.util.encode import ByteArray
from inception.wire import wire


class TestWire:
    # fmt: off
    data = (
        (0,                  [0x00]),
        (0xFC,               [0xFC]),
        (0xFD,               [0xFD, 0xFD, 0x0]),
        (wire.MaxUint16,     [0xFD, 0xFF, 0xFF]),
        (wire.MaxUint16 + 1, [0xFE, 0x0,  0x0,  0x1,  0x0]),
        (wire.MaxUint32,     [0xFE, 0xFF, 0xFF, 0xFF, 0xFF]),
        (wire.MaxUint32 + 1, [0xFF, 0x0,  0x0,  0x0,  0x0,  0x1,  0x0,  0x0,  0x0]),
        (wire.MaxUint64,     [0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF]),
    )
    # fmt: on

    def test_write_var_int(self, prepareLogger):
        for val, bytes_ in self.data:
            from_val = wire.writeVarInt(0, val)
            from_bytes = ByteArray(bytes_)
            assert from_val == from_bytes
            val_from_bytes = wire.readVarInt(from_bytes, 0)
            assert val_from_bytes == val
            assert len(from_bytes) == 0
        with pytest.raises(InceptionError):
            wire.writeVarInt(0, wire.MaxUint64 + 1)

    def test_read_var_int(self, prepareLogger):
        assert wire.readVarInt(ByteArray([0xFC]), 0) == 0xFC
        # Non-canonical encodings.
        with pytest.raises(InceptionError):
            wire.readVarInt(ByteArray([0xFE, 0xFF, 0xFF, 0x0, 0x0]), 0)
        with pytest.raises(InceptionError):
            wire.readVarInt(ByteArray([0xFD, 0xFC, 0x0]), 0)
        # Short.
        with pytest.raises(InceptionError):
            wire.readVarInt(ByteArray([0xFD, 0xFC]), 0)

    def test_var_bytes(self):
        b = wire.writeVarBytes(0, ByteArray("0102"))
        assert b == ByteArray("020102")
        b += ByteArray("ff")
        assert wire.readVarBytes(b, 0, 10, "test") == ByteArray("0102")
        assert b == ByteArray("ff")

        with pytest.raises(InceptionError):
            wire.readVarBytes(ByteArray("020102"), 0, 1, "test")
