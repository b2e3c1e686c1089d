"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

mainnet holds the main network parameters. The test network is derived from
these.
"""

from inception.difficulty import MaxUint256, bigToCompact
from inception.nets import genesis, seeds
from inception.nets.params import AddressKind, ChainParams, NetworkVariant


# Chain parameters
PowLimit = MaxUint256 >> 28
PosLimit = MaxUint256 >> 28

GenesisArgs = dict(
    message=genesis.GenesisMessage,
    txTime=genesis.GenesisTxTime,
    timestamp=1465189200,
    bits=bigToCompact(PowLimit),  # 0x1d0fffff
    nonce=2995750,
    version=1,
)
GenesisHash = "0000000a2bfc4455a031e0188a1c3cc957ff2de5f2eff45936f72608dea7fd23"
GenesisMerkleRoot = "0f8fe152f58e52c9c4f2c3c8dca7860e8d26ad8ec7739749f4a8f30fff370f75"

Params = ChainParams(
    name=NetworkVariant.Main,
    networkId="main",
    dataDirSuffix="",
    magicBytes=b"INCP",
    alertSigningKey=bytes.fromhex(
        "04aaffe2833752dcc3d98f335e9153237fa5aba5fa2d1d90090156c141535a3fc7"
        "bc671f83a754e11ab96311b1eb036b56fa2be9e03a1fe17b5074f54e21800836"
    ),
    defaultP2PPort=17000,
    defaultRpcPort=17001,
    powLimit=PowLimit,
    posLimit=PosLimit,
    genesisBlock=genesis.buildGenesisBlock(**GenesisArgs),
    genesisHash=GenesisHash,
    genesisMerkleRoot=GenesisMerkleRoot,
    base58Prefixes={
        AddressKind.PubkeyAddress: bytes([102]),
        AddressKind.ScriptAddress: bytes([112]),
        AddressKind.SecretKey: bytes([202]),
        AddressKind.ExtPublicKey: bytes.fromhex("0488B21E"),  # starts with xpub
        AddressKind.ExtSecretKey: bytes.fromhex("0488ADE4"),  # starts with xprv
    },
    dnsSeeds=[],
    fixedSeedPeers=seeds.convertSeeds(seeds.MainSeeds),
    targetSpacing=60,  # 1 minute
    targetTimespan=10 * 60,  # 10 minutes
    lastProofOfWorkBlockHeight=10080,
    firstProofOfStakeBlockHeight=9800,
    proofOfWorkReward=3333,
    proofOfStakeRewardRateBps=1000,  # 10% per year
    subsidyHalvingInterval=1440,
    modifierInterval=10 * 60,
    stakeMinAge=8 * 60 * 60,  # 8 hours
    stakeMaxAge=24 * 60 * 60,  # 24 hours
    coinbaseMaturity=120,
    requireRpcAuthentication=True,
)
