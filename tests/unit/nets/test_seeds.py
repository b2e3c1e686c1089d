"""
Copyright (c) 2020, The Inception developers
See LICENSE for details
"""

import random

import pytest

from inception import InceptionError
from inception.nets import seeds
from inception.wire import wire


def seedRecords(n):
    return [
        (bytes.fromhex("00000000000000000000ffff0a0000") + bytes([i]), 17000 + i)
        for i in range(n)
    ]


def test_convertSeeds():
    now = 1600000000
    records = seedRecords(50)
    addrs = seeds.convertSeeds(records, now=now, rng=random.Random(0))
    assert len(addrs) == len(records)
    for (ip, port), addr in zip(records, addrs):
        assert addr.ip == ip
        assert addr.port == port
        assert addr.services == wire.SFNodeNetwork
        assert now - 2 * seeds.ONE_WEEK <= addr.timestamp < now - seeds.ONE_WEEK
    assert addrs[0].ipString() == "10.0.0.0"
    assert addrs[49].key() == "10.0.0.49:17049"


def test_convertSeeds_bounds():
    class Fixed:
        def __init__(self, v):
            self.v = v

        def randrange(self, n):
            return self.v if self.v < n else n - 1

    now = 1600000000
    record = seedRecords(1)
    # Stamps are at most two weeks old, and more than one week old.
    oldest = seeds.convertSeeds(record, now=now, rng=Fixed(0))[0]
    assert oldest.timestamp == now - 2 * seeds.ONE_WEEK
    newest = seeds.convertSeeds(record, now=now, rng=Fixed(seeds.ONE_WEEK))[0]
    assert newest.timestamp == now - seeds.ONE_WEEK - 1


def test_convertSeeds_defaults():
    assert seeds.convertSeeds([]) == []
    addrs = seeds.convertSeeds(seedRecords(3))
    assert len(addrs) == 3
    assert all(a.timestamp > 0 for a in addrs)


def test_convertSeeds_ipv6():
    ip = bytes.fromhex("20010db8000000000000000000000001")
    addr = seeds.convertSeeds([(ip, 17100)], now=1600000000)[0]
    assert addr.ipString() == "2001:db8::1"
    assert addr.key() == "[2001:db8::1]:17100"


def test_convertSeeds_bad_record():
    with pytest.raises(InceptionError):
        seeds.convertSeeds([(bytes([127, 0, 0, 1]), 17000)], now=1600000000)


def test_tables():
    for records in (seeds.MainSeeds, seeds.TestSeeds):
        for ip, port in records:
            assert len(ip) == 16
            assert 0 < port < 1 << 16
