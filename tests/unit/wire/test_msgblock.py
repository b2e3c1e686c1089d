"""
Copyright (c) 2020, The Inception developers
See LICENSE for details
"""

import pytest

from inception import InceptionError
from inception.nets import mainnet
from inception.util.encode import ByteArray
from inception.wire import msgblock, msgtx


# The hash of an empty version 1 transaction, internal byte order.
emptyTxHash = "d1e179f5cffae673c602158a7f6036ef9f53019b7004263ee248c33d89d87b4b"


class TestBlockHeader:
    def test_serialize(self):
        bh = msgblock.BlockHeader(
            version=2,
            prevBlock=ByteArray("aa" * 32),
            merkleRoot=ByteArray("bb" * 32),
            timestamp=0x5F5E1000,
            bits=0x1D0FFFFF,
            nonce=0xDEADBEEF,
        )
        b = bh.serialize()
        assert len(b) == msgblock.BlockHeaderSize
        assert b.hex() == (
            "02000000" + "aa" * 32 + "bb" * 32 + "00105e5f" + "ffff0f1d" + "efbeadde"
        )
        assert msgblock.BlockHeader.btcDecode(b.copy(), 0) == bh

    def test_defaults(self):
        bh = msgblock.BlockHeader()
        assert bh.version == 1
        assert bh.prevBlock.iszero()
        assert bh.merkleRoot.iszero()
        assert bh.serialize().hex() == "01000000" + "00" * 76

    def test_decode_errors(self):
        b = mainnet.Params.genesisBlock.header.serialize()
        with pytest.raises(InceptionError):
            msgblock.BlockHeader.btcDecode(b[:79], 0)

    def test_hash(self):
        bh = msgblock.BlockHeader.btcDecode(
            mainnet.Params.genesisBlock.header.serialize(), 0
        )
        assert bh.id() == mainnet.GenesisHash
        assert bh.hash().rhex() == mainnet.GenesisHash


class TestMsgBlock:
    def test_serialize(self):
        block = mainnet.Params.genesisBlock
        b = block.serialize()
        reBlock = msgblock.MsgBlock.deserialize(b)
        assert reBlock == block
        assert reBlock.header == block.header
        assert reBlock.transactions == block.transactions
        assert reBlock.signature == ByteArray(b"")
        assert reBlock.id() == mainnet.GenesisHash
        assert reBlock.serialize() == b

        signed = msgblock.MsgBlock(
            header=block.header,
            transactions=block.transactions,
            signature=ByteArray("3006020101020101"),
        )
        reSigned = msgblock.MsgBlock.deserialize(signed.serialize())
        assert reSigned.signature == ByteArray("3006020101020101")

        with pytest.raises(InceptionError):
            msgblock.MsgBlock.deserialize(b + ByteArray("00"))

    def test_merkleRoot(self):
        h = ByteArray(emptyTxHash)
        assert msgblock.merkleRoot([]).iszero()
        assert msgblock.merkleRoot([h]) == h
        two = "26a548cb6816e5641b1a19671128003cea2a1987ae7244a661e71ea84f7b3db9"
        assert msgblock.merkleRoot([h, h]).hex() == two
        # An odd node is paired with itself.
        four = "acd32c1deb19762ef6d1706a37dcdca50aa15db602e5653c83cd2b44a3490889"
        assert msgblock.merkleRoot([h, h, h]).hex() == four
        assert msgblock.merkleRoot([h, h, h, h]).hex() == four

        block = msgblock.MsgBlock()
        assert block.buildMerkleRoot().iszero()
        block.addTransaction(msgtx.MsgTx())
        assert block.buildMerkleRoot().hex() == emptyTxHash
        block.addTransaction(msgtx.MsgTx())
        assert block.buildMerkleRoot().hex() == two
