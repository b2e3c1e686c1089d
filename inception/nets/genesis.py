"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

Construction and verification of the genesis blocks. Every network shares one
coinbase transaction and differs only in the header's timestamp, bits and
nonce.
"""

from inception import GenesisIntegrityError
from inception import txscript
from inception.util import helpers
from inception.util.encode import ByteArray
from inception.wire import msgtx
from inception.wire.msgblock import BlockHeader, MsgBlock


log = helpers.getLogger("GENESIS")

GenesisMessage = "Jun 6, 2016 05:00:00 UTC: Inception"

# The transaction timestamp is the same for every network, even where the
# block timestamp differs.
GenesisTxTime = 1465189200


def genesisCoinbaseTx(message, txTime):
    """
    The coinbase transaction of a genesis block. Its single input spends
    nothing and its signature script pushes 0, 42 and the message. Its single
    output is empty.

    Args:
        message (str): The human-readable message embedded in the block.
        txTime (int): The transaction timestamp.

    Returns:
        MsgTx: The transaction.
    """
    sigScript = txscript.addInt(0)
    sigScript += txscript.addInt(42)
    sigScript += txscript.addData(message.encode())
    return msgtx.MsgTx(
        version=1,
        time=txTime,
        txIn=[
            msgtx.TxIn(
                previousOutPoint=msgtx.OutPoint(
                    txHash=None, idx=msgtx.MaxPrevOutIndex
                ),
                signatureScript=sigScript,
            )
        ],
        txOut=[msgtx.TxOut()],
        lockTime=0,
    )


def buildGenesisBlock(message, txTime, timestamp, bits, nonce, version=1):
    """
    Build a genesis block.

    Args:
        message (str): The message embedded in the coinbase signature script.
        txTime (int): The coinbase transaction timestamp.
        timestamp (int): The block timestamp.
        bits (int): The compact difficulty target.
        nonce (int): The proof-of-work nonce.
        version (int): Optional. Default 1. The block version.

    Returns:
        MsgBlock: The block, with its merkle root set.
    """
    block = MsgBlock(
        header=BlockHeader(
            version=version,
            prevBlock=ByteArray(0, length=32),
            timestamp=timestamp,
            bits=bits,
            nonce=nonce,
        ),
        transactions=[genesisCoinbaseTx(message, txTime)],
    )
    block.header.merkleRoot = block.buildMerkleRoot()
    return block


def checkGenesis(netName, block, wantHash, wantMerkleRoot=None):
    """
    Verify a genesis block against its pinned hash and, optionally, its pinned
    merkle root. Both are display-order hex strings.

    Args:
        netName (str): The network name, for messages.
        block (MsgBlock): The genesis block.
        wantHash (str): The pinned block hash.
        wantMerkleRoot (str): Optional. The pinned merkle root.

    Returns:
        str: The block hash.

    Raises:
        GenesisIntegrityError: The block does not match.
    """
    txs = block.transactions
    if len(txs) != 1 or not txs[0].isCoinBase():
        msg = f"{netName} genesis block must hold exactly one coinbase transaction, got {len(txs)} transactions"
        log.error(msg)
        raise GenesisIntegrityError(msg)
    merkleRoot = block.buildMerkleRoot()
    if block.header.merkleRoot != merkleRoot:
        msg = f"{netName} genesis header commits to merkle root {block.header.merkleRoot.rhex()}, transactions give {merkleRoot.rhex()}"
        log.error(msg)
        raise GenesisIntegrityError(msg)
    if wantMerkleRoot is not None and merkleRoot.rhex() != wantMerkleRoot:
        msg = f"{netName} genesis merkle root mismatch. wanted {wantMerkleRoot}, got {merkleRoot.rhex()}"
        log.error(msg)
        raise GenesisIntegrityError(msg)

    blockHash = block.id()
    if blockHash != wantHash:
        msg = f"{netName} genesis hash mismatch. wanted {wantHash}, got {blockHash}"
        log.error(msg)
        raise GenesisIntegrityError(msg)
    log.debug(f"{netName} genesis block {blockHash} verified")
    return blockHash
