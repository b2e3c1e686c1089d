"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

Blocks and block headers.
"""

from inception import InceptionError
from inception.crypto import crypto
from inception.util.encode import ByteArray
from inception.wire import wire
from inception.wire.msgtx import MsgTx


# chainhash.HashSize in Go
HASH_SIZE = 32

# BlockHeaderSize is the number of bytes in a serialized block header.
# Version 4 bytes + PrevBlock 32 bytes + MerkleRoot 32 bytes + Timestamp
# 4 bytes + Bits 4 bytes + Nonce 4 bytes.
BlockHeaderSize = 80

# MaxBlockSignatureSize bounds the proof-of-stake block signature.
MaxBlockSignatureSize = 80


class BlockHeader:
    """
    BlockHeader defines information about a block and is used in the block
    (MsgBlock) message.
    """

    def __init__(
        self,
        version=1,
        prevBlock=None,
        merkleRoot=None,
        timestamp=0,
        bits=0,
        nonce=0,
    ):
        # version of the block.  This is not the same as the protocol version.
        self.version = version  # int32

        # hash of the previous block in the block chain.
        self.prevBlock = (
            prevBlock if prevBlock else ByteArray(0, length=HASH_SIZE)
        )  # chainhash.Hash = [32]byte

        # merkle tree reference to hash of all transactions for the block.
        self.merkleRoot = (
            merkleRoot if merkleRoot else ByteArray(0, length=HASH_SIZE)
        )  # chainhash.Hash

        # time the block was created.  This is encoded as a uint32 on the wire
        # and therefore is limited to 2106.
        self.timestamp = timestamp  # uint32

        # difficulty target for the block.
        self.bits = bits  # uint32

        self.nonce = nonce  # uint32

    def __eq__(self, bh):
        return (
            self.version == bh.version
            and self.prevBlock == bh.prevBlock
            and self.merkleRoot == bh.merkleRoot
            and self.timestamp == bh.timestamp
            and self.bits == bh.bits
            and self.nonce == bh.nonce
        )

    @staticmethod
    def btcDecode(b, pver):
        """
        Decode a block header from b. The consumed bytes are removed from b.

        Args:
            b (ByteArray): the bytes to decode.
            pver (int): the protocol version.

        Returns:
            BlockHeader: The decoded header.
        """
        if len(b) < BlockHeaderSize:
            raise InceptionError(
                f"BlockHeader.btcDecode: expected {BlockHeaderSize} bytes, got {len(b)}"
            )
        bh = BlockHeader()
        bh.version = b.pop(4).unLittle().int()
        bh.prevBlock = b.pop(HASH_SIZE)
        bh.merkleRoot = b.pop(HASH_SIZE)
        bh.timestamp = b.pop(4).unLittle().int()
        bh.bits = b.pop(4).unLittle().int()
        bh.nonce = b.pop(4).unLittle().int()
        return bh

    def btcEncode(self, pver):
        """
        Args:
            pver (int): the protocol version.

        Returns:
            ByteArray: The 80-byte encoded header.
        """
        b = ByteArray(self.version, length=4).littleEndian()
        b += ByteArray(self.prevBlock, length=HASH_SIZE)
        b += ByteArray(self.merkleRoot, length=HASH_SIZE)
        b += ByteArray(self.timestamp, length=4).littleEndian()
        b += ByteArray(self.bits, length=4).littleEndian()
        b += ByteArray(self.nonce, length=4).littleEndian()
        return b

    def serialize(self):
        """
        Serialize the BlockHeader.

        Returns:
            ByteArray: The serialized BlockHeader.
        """
        return self.btcEncode(0)

    def hash(self):
        """
        hash computes the block identifier hash for the given block header.
        """
        return crypto.hashH(self.serialize().bytes())

    def id(self):
        return self.hash().rhex()


class MsgBlock:
    """
    MsgBlock is a block header with its transactions. Proof-of-stake blocks
    are also signed by the staker, so the block carries a signature, which is
    empty for proof-of-work blocks.
    """

    def __init__(self, header=None, transactions=None, signature=None):
        self.header = header if header else BlockHeader()
        self.transactions = transactions if transactions else []
        self.signature = signature if signature else ByteArray(b"")

    def __eq__(self, block):
        return (
            self.header == block.header
            and self.transactions == block.transactions
            and self.signature == block.signature
        )

    def addTransaction(self, tx):
        self.transactions.append(tx)

    def buildMerkleRoot(self):
        """
        The merkle root of the block's transactions.

        Returns:
            ByteArray: The root hash.
        """
        return merkleRoot([tx.hash() for tx in self.transactions])

    def btcEncode(self, pver):
        b = self.header.btcEncode(pver)
        b += wire.writeVarInt(pver, len(self.transactions))
        for tx in self.transactions:
            b += tx.btcEncode(pver)
        b += wire.writeVarBytes(pver, self.signature)
        return b

    @staticmethod
    def btcDecode(b, pver):
        block = MsgBlock(header=BlockHeader.btcDecode(b, pver))
        count = wire.readVarInt(b, pver)
        for _ in range(count):
            block.addTransaction(MsgTx.btcDecode(b, pver))
        block.signature = wire.readVarBytes(b, pver, MaxBlockSignatureSize, "block signature")
        return block

    def serialize(self):
        return self.btcEncode(0)

    @staticmethod
    def deserialize(b):
        """
        Args:
            b (bytes-like): the serialized block. Trailing bytes are an error.
        """
        b = ByteArray(b)
        block = MsgBlock.btcDecode(b, 0)
        if len(b) != 0:
            raise InceptionError(f"MsgBlock.deserialize: {len(b)} unused bytes")
        return block

    def hash(self):
        return self.header.hash()

    def id(self):
        return self.header.id()


def merkleRoot(hashes):
    """
    Calculate the merkle root of the hashes. Each level of the tree hashes
    pairs of nodes, with an odd node at the end of a level paired with itself.

    Args:
        hashes (list(ByteArray)): The leaf hashes.

    Returns:
        ByteArray: The root hash, or a zero hash if there are no leaves.
    """
    if not hashes:
        return ByteArray(0, length=HASH_SIZE)
    level = list(hashes)
    while len(level) > 1:
        if len(level) % 2:
            level.append(level[-1])
        level = [
            crypto.doubleHashH((level[i] + level[i + 1]).bytes())
            for i in range(0, len(level), 2)
        ]
    return level[0]
