"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

testnet holds the public test network parameters: the main network parameters
with the values below replaced. The regression test network is derived from
these.
"""

from inception.difficulty import MaxUint256, bigToCompact
from inception.nets import genesis, mainnet, seeds
from inception.nets.params import AddressKind, NetworkVariant


PowLimit = MaxUint256 >> 16
PosLimit = MaxUint256 >> 16

GenesisArgs = dict(
    mainnet.GenesisArgs,
    bits=bigToCompact(PowLimit),  # 0x1f00ffff
    nonce=344590,
)
GenesisHash = "0000324ada8e45c54131ee270b9b7e9ab509dfbe982ca7e13f7741b2c85dc056"

Params = mainnet.Params.derive(
    name=NetworkVariant.Test,
    networkId="testnet",
    dataDirSuffix="testnet",
    magicBytes=b"INCT",
    alertSigningKey=bytes.fromhex(
        "04e44761e96c9056be6b659c04b94fbfebeb5d5257fe028e80695c62f7c2f81f85"
        "d131a669df3be611393f454852a2d08c6314aad5ca3cbe5616262db3d4a6efac"
    ),
    defaultP2PPort=17100,
    defaultRpcPort=17101,
    powLimit=PowLimit,
    posLimit=PosLimit,
    genesisBlock=genesis.buildGenesisBlock(**GenesisArgs),
    genesisHash=GenesisHash,
    base58Prefixes={
        AddressKind.PubkeyAddress: bytes([128]),
        AddressKind.ScriptAddress: bytes([208]),
        AddressKind.SecretKey: bytes([234]),
        AddressKind.ExtPublicKey: bytes.fromhex("043587CF"),  # starts with tpub
        AddressKind.ExtSecretKey: bytes.fromhex("04358394"),  # starts with tprv
    },
    dnsSeeds=[],
    fixedSeedPeers=seeds.convertSeeds(seeds.TestSeeds),
    targetSpacing=10,
    # Proof of work never ends on the test network.
    lastProofOfWorkBlockHeight=0x7FFFFFFF,
    firstProofOfStakeBlockHeight=1080,
    subsidyHalvingInterval=360,
    stakeMinAge=60 * 60,  # 1 hour
    stakeMaxAge=8 * 60 * 60,  # 8 hours
    coinbaseMaturity=60,
)
