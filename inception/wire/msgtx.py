"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

Transactions. Inception transactions carry a timestamp after the version, as
in other proof-of-stake chains descended from Peercoin.
"""

from typing import List, Optional

from inception import InceptionError
from inception.crypto import crypto
from inception.util.encode import ByteArray
from inception.wire import wire


HASH_SIZE = 32

# TxVersion is the current latest supported transaction version.
TxVersion = 1

# MaxTxInSequenceNum is the maximum sequence number the sequence field
# of a transaction input can be.
MaxTxInSequenceNum = 0xFFFFFFFF

# MaxPrevOutIndex is the maximum index the index field of a previous
# outpoint can be.
MaxPrevOutIndex = 0xFFFFFFFF

# minTxInPayload is the minimum payload size for a transaction input.
# PreviousOutPoint.Hash + PreviousOutPoint.Index 4 bytes + Varint for
# SignatureScript length 1 byte + Sequence 4 bytes.
minTxInPayload = 9 + HASH_SIZE

# maxTxInPerMessage is the maximum number of transactions inputs that
# a transaction which fits into a message could possibly have.
maxTxInPerMessage = (wire.MaxMessagePayload // minTxInPayload) + 1

# MinTxOutPayload is the minimum payload size for a transaction output.
# Value 8 bytes + Varint for PkScript length 1 byte.
MinTxOutPayload = 9

# maxTxOutPerMessage is the maximum number of transactions outputs that
# a transaction which fits into a message could possibly have.
maxTxOutPerMessage = (wire.MaxMessagePayload // MinTxOutPayload) + 1


class OutPoint:
    """
    OutPoint is used to track previous transaction outputs.
    """

    def __init__(self, txHash: Optional[ByteArray], idx: int):
        self.hash = txHash if txHash else ByteArray(0, length=HASH_SIZE)
        self.index = idx

    def __eq__(self, other) -> bool:
        return self.hash == other.hash and self.index == other.index

    def isNull(self) -> bool:
        """
        True for the outpoint of a coinbase input, which spends nothing.
        """
        return self.hash.iszero() and self.index == MaxPrevOutIndex


class TxIn:
    """
    TxIn defines a transaction input.
    """

    def __init__(
        self,
        previousOutPoint: OutPoint,
        signatureScript: Optional[ByteArray] = None,
        sequence: int = MaxTxInSequenceNum,
    ):
        self.previousOutPoint = previousOutPoint
        self.signatureScript = signatureScript or ByteArray(b"")
        self.sequence = sequence

    def __eq__(self, ti) -> bool:
        return (
            self.previousOutPoint == ti.previousOutPoint
            and self.signatureScript == ti.signatureScript
            and self.sequence == ti.sequence
        )


class TxOut:
    """
    TxOut defines a transaction output.
    """

    def __init__(self, value: int = 0, pkScript: Optional[ByteArray] = None):
        self.value = value
        self.pkScript = pkScript or ByteArray(b"")

    def __eq__(self, to) -> bool:
        return self.value == to.value and self.pkScript == to.pkScript


class MsgTx:
    """
    MsgTx is a transaction: a version, a timestamp, inputs, outputs and a lock
    time.
    """

    def __init__(
        self,
        version: int = TxVersion,
        time: int = 0,
        txIn: Optional[List[TxIn]] = None,
        txOut: Optional[List[TxOut]] = None,
        lockTime: int = 0,
    ):
        self.version = version
        self.time = time
        self.txIn = txIn or []
        self.txOut = txOut or []
        self.lockTime = lockTime

    def __eq__(self, tx) -> bool:
        return (
            self.version == tx.version
            and self.time == tx.time
            and self.txIn == tx.txIn
            and self.txOut == tx.txOut
            and self.lockTime == tx.lockTime
        )

    def addTxIn(self, ti: TxIn):
        self.txIn.append(ti)

    def addTxOut(self, to: TxOut):
        self.txOut.append(to)

    def isCoinBase(self) -> bool:
        """
        A coinbase transaction has exactly one input, which spends the null
        outpoint.
        """
        return len(self.txIn) == 1 and self.txIn[0].previousOutPoint.isNull()

    def btcEncode(self, pver: int) -> ByteArray:
        """
        Encode the transaction for the wire.

        Args:
            pver (int): the protocol version.

        Returns:
            ByteArray: The encoded transaction.
        """
        b = ByteArray(self.version, length=4).littleEndian()
        b += ByteArray(self.time, length=4).littleEndian()
        b += wire.writeVarInt(pver, len(self.txIn))
        for ti in self.txIn:
            b += writeTxIn(pver, ti)
        b += wire.writeVarInt(pver, len(self.txOut))
        for to in self.txOut:
            b += writeTxOut(pver, to)
        b += ByteArray(self.lockTime, length=4).littleEndian()
        return b

    @staticmethod
    def btcDecode(b: ByteArray, pver: int) -> "MsgTx":
        """
        Decode a transaction from b. The consumed bytes are removed from b.

        Args:
            b (ByteArray): the encoded transaction.
            pver (int): the protocol version.

        Returns:
            MsgTx: The decoded transaction.
        """
        tx = MsgTx(
            version=b.pop(4).unLittle().int(), time=b.pop(4).unLittle().int(),
        )

        count = wire.readVarInt(b, pver)
        # Prevent more input transactions than could possibly fit into a
        # message.
        if count > maxTxInPerMessage:
            raise InceptionError(
                f"MsgTx.btcDecode: too many input transactions to fit into max message size [count {count}, max {maxTxInPerMessage}]"
            )
        for _ in range(count):
            tx.addTxIn(readTxIn(b, pver))

        count = wire.readVarInt(b, pver)
        if count > maxTxOutPerMessage:
            raise InceptionError(
                f"MsgTx.btcDecode: too many output transactions to fit into max message size [count {count}, max {maxTxOutPerMessage}]"
            )
        for _ in range(count):
            tx.addTxOut(readTxOut(b, pver))

        tx.lockTime = b.pop(4).unLittle().int()
        return tx

    def serialize(self) -> ByteArray:
        return self.btcEncode(0)

    def hash(self) -> ByteArray:
        """
        The double SHA-256 hash of the serialized transaction.
        """
        return crypto.doubleHashH(self.serialize().bytes())

    def id(self) -> str:
        return self.hash().rhex()


def readTxIn(b: ByteArray, pver: int) -> TxIn:
    """
    Read the next sequence of bytes from b as a transaction input.
    """
    op = OutPoint(txHash=b.pop(HASH_SIZE), idx=b.pop(4).unLittle().int())
    sigScript = wire.readVarBytes(b, pver, wire.MaxMessagePayload, "transaction input signature script")
    return TxIn(previousOutPoint=op, signatureScript=sigScript, sequence=b.pop(4).unLittle().int())


def writeTxIn(pver: int, ti: TxIn) -> ByteArray:
    """
    Encode ti for the wire.
    """
    op = ti.previousOutPoint
    b = ByteArray(op.hash, length=HASH_SIZE)
    b += ByteArray(op.index, length=4).littleEndian()
    b += wire.writeVarBytes(pver, ti.signatureScript)
    b += ByteArray(ti.sequence, length=4).littleEndian()
    return b


def readTxOut(b: ByteArray, pver: int) -> TxOut:
    """
    Read the next sequence of bytes from b as a transaction output.
    """
    value = b.pop(8).unLittle().int()
    pkScript = wire.readVarBytes(b, pver, wire.MaxMessagePayload, "transaction output public key script")
    return TxOut(value=value, pkScript=pkScript)


def writeTxOut(pver: int, to: TxOut) -> ByteArray:
    """
    Encode to for the wire.
    """
    b = ByteArray(to.value, length=8).littleEndian()
    b += wire.writeVarBytes(pver, to.pkScript)
    return b
