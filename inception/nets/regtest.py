"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

regtest holds the regression test network parameters: the test network
parameters with the values below replaced. Blocks are trivial to mine, and
RPC does not require credentials.
"""

from inception.difficulty import MaxUint256, bigToCompact
from inception.nets import genesis, testnet
from inception.nets.params import AddressKind, NetworkVariant


# The proof-of-stake limit is the test network's.
PowLimit = MaxUint256 >> 1

GenesisArgs = dict(
    testnet.GenesisArgs,
    timestamp=1462510800,
    bits=bigToCompact(PowLimit),  # 0x207fffff
    nonce=3248,
)
GenesisHash = "00708596e746e3588fbe80d1b9cbd315fceddb26e2f43fcb774f51707382bec7"

Params = testnet.Params.derive(
    name=NetworkVariant.Regtest,
    networkId="regtest",
    dataDirSuffix="regtest",
    magicBytes=b"INCQ",
    defaultP2PPort=17200,
    defaultRpcPort=17201,
    powLimit=PowLimit,
    genesisBlock=genesis.buildGenesisBlock(**GenesisArgs),
    genesisHash=GenesisHash,
    base58Prefixes={
        AddressKind.PubkeyAddress: bytes([140]),
        AddressKind.ScriptAddress: bytes([19]),
        AddressKind.SecretKey: bytes([239]),
        AddressKind.ExtPublicKey: bytes.fromhex("043587D0"),
        AddressKind.ExtSecretKey: bytes.fromhex("04358395"),
    },
    dnsSeeds=[],
    requireRpcAuthentication=False,
)
