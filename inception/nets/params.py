"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

The chain parameter set. One ChainParams exists per network. Instances are
read-only, and a network that differs from another in only a few values is
built from it with derive.
"""

from types import MappingProxyType

from inception import InceptionError
from inception.difficulty import bigToCompact
from inception.nets import genesis
from inception.util.encode import ByteArray
from inception.wire import wire
from inception.wire.msgblock import MsgBlock


def prefixBytes(prefix):
    """
    A base-58 version prefix as bytes. A single int is a one-byte prefix.

    Args:
        prefix (int or bytes-like): The prefix.

    Returns:
        bytes: The prefix bytes.
    """
    if isinstance(prefix, int):
        if not 0 <= prefix <= wire.MaxUint8:
            raise InceptionError(f"base-58 prefix {prefix} does not fit in a byte")
        return bytes([prefix])
    if isinstance(prefix, ByteArray):
        return prefix.bytes()
    if not isinstance(prefix, (bytes, bytearray)):
        raise InceptionError(f"base-58 prefix must be bytes, got {type(prefix).__name__}")
    return bytes(prefix)


class NetworkVariant:
    """
    The chain names of the three networks.
    """

    Main = "main"
    Test = "test"
    Regtest = "regtest"

    all = (Main, Test, Regtest)


class AddressKind:
    """
    The kinds of base-58 encoded data that carry a network prefix.
    """

    PubkeyAddress = 0
    ScriptAddress = 1
    SecretKey = 2
    ExtPublicKey = 3
    ExtSecretKey = 4

    all = (PubkeyAddress, ScriptAddress, SecretKey, ExtPublicKey, ExtSecretKey)

    names = {
        PubkeyAddress: "PubkeyAddress",
        ScriptAddress: "ScriptAddress",
        SecretKey: "SecretKey",
        ExtPublicKey: "ExtPublicKey",
        ExtSecretKey: "ExtSecretKey",
    }


# The fields of a ChainParams. Every field is required.
FIELDS = (
    # The chain name, one of NetworkVariant.all.
    "name",
    "networkId",
    "dataDirSuffix",
    # Prefixes every message so that peers on other networks are rejected.
    "magicBytes",
    # Uncompressed public key that signs network alerts.
    "alertSigningKey",
    "defaultP2PPort",
    "defaultRpcPort",
    # The easiest allowed proof-of-work and proof-of-stake targets.
    "powLimit",
    "posLimit",
    "genesisBlock",
    # Display-order hex.
    "genesisHash",
    "genesisMerkleRoot",
    "base58Prefixes",
    # (name, host) pairs.
    "dnsSeeds",
    "fixedSeedPeers",
    # Seconds.
    "targetSpacing",
    "targetTimespan",
    "lastProofOfWorkBlockHeight",
    "firstProofOfStakeBlockHeight",
    # Whole coins.
    "proofOfWorkReward",
    # Annual stake reward in basis points.
    "proofOfStakeRewardRateBps",
    "subsidyHalvingInterval",
    # Seconds.
    "modifierInterval",
    "stakeMinAge",
    "stakeMaxAge",
    "coinbaseMaturity",
    "requireRpcAuthentication",
)


class ChainParams:
    """
    ChainParams is the set of constants that define a network. Construction
    verifies the genesis block against its pinned hash and merkle root and
    checks the set for internal consistency. After construction, the
    attributes cannot be reassigned.
    """

    def __init__(self, **kwargs):
        missing = [f for f in FIELDS if f not in kwargs]
        if missing:
            raise InceptionError(f"missing chain parameters: {', '.join(missing)}")
        unknown = [k for k in kwargs if k not in FIELDS]
        if unknown:
            raise InceptionError(f"unknown chain parameters: {', '.join(unknown)}")

        kwargs["magicBytes"] = bytes(kwargs["magicBytes"])
        kwargs["alertSigningKey"] = bytes(kwargs["alertSigningKey"])
        kwargs["base58Prefixes"] = MappingProxyType(
            {k: prefixBytes(v) for k, v in kwargs["base58Prefixes"].items()}
        )
        kwargs["dnsSeeds"] = tuple(tuple(seed) for seed in kwargs["dnsSeeds"])
        kwargs["fixedSeedPeers"] = tuple(kwargs["fixedSeedPeers"])
        # The block is kept serialized, so every genesisBlock is a new copy.
        block = kwargs.pop("genesisBlock")
        if isinstance(block, MsgBlock):
            block = block.serialize().bytes()
        object.__setattr__(self, "genesisBytes", bytes(block))
        for k in FIELDS:
            if k in kwargs:
                object.__setattr__(self, k, kwargs[k])

        self.validate()

    def __setattr__(self, k, v):
        raise AttributeError(f"chain parameters are read-only. cannot set {k}")

    def __delattr__(self, k):
        raise AttributeError(f"chain parameters are read-only. cannot delete {k}")

    def __repr__(self):
        return f"ChainParams({self.networkId})"

    def validate(self):
        """
        Check the parameters. Raises GenesisIntegrityError if the genesis block
        does not match its pinned values, and InceptionError for any other
        inconsistency.
        """
        if self.name not in NetworkVariant.all:
            raise InceptionError(f"unknown chain name {self.name}")
        if len(self.magicBytes) != wire.MessageStartSize:
            raise InceptionError(
                f"{self.name} magic bytes must be {wire.MessageStartSize} bytes, got {len(self.magicBytes)}"
            )
        for kind in AddressKind.all:
            if not self.base58Prefixes.get(kind):
                raise InceptionError(
                    f"{self.name} has no {AddressKind.names[kind]} prefix"
                )
        if len(self.base58Prefixes) != len(AddressKind.all):
            raise InceptionError(f"{self.name} has unknown base-58 prefix kinds")
        if self.defaultP2PPort == self.defaultRpcPort:
            raise InceptionError(
                f"{self.name} P2P and RPC ports are both {self.defaultP2PPort}"
            )
        genesis.checkGenesis(
            self.name, self.genesisBlock, self.genesisHash, self.genesisMerkleRoot
        )

    def derive(self, **overrides):
        """
        A new ChainParams with the values of this one, except for the
        overrides.

        Args:
            **overrides: New values, keyed by field name.

        Returns:
            ChainParams: The new parameters.
        """
        unknown = [k for k in overrides if k not in FIELDS]
        if unknown:
            raise InceptionError(f"unknown chain parameters: {', '.join(unknown)}")
        kwargs = {k: getattr(self, k) for k in FIELDS if k != "genesisBlock"}
        kwargs["genesisBlock"] = self.genesisBytes
        kwargs.update(overrides)
        return ChainParams(**kwargs)

    @property
    def genesisBlock(self):
        """
        The genesis block, decoded from its serialized form. Changes to the
        returned block do not affect the parameters.

        Returns:
            MsgBlock: A new copy of the block.
        """
        return MsgBlock.deserialize(self.genesisBytes)

    def base58Prefix(self, kind):
        """
        The version prefix for the kind of base-58 data.

        Args:
            kind (int): An AddressKind.

        Returns:
            bytes: The prefix.
        """
        try:
            return self.base58Prefixes[kind]
        except KeyError:
            raise InceptionError(f"unknown address kind {kind}")

    @property
    def powLimitBits(self):
        """The compact form of powLimit."""
        return bigToCompact(self.powLimit)

    @property
    def posLimitBits(self):
        """The compact form of posLimit."""
        return bigToCompact(self.posLimit)
