"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

Fixed seed peers. The tables hold (16-byte address, port) records, with IPv4
addresses in their IPv4-mapped form. They are converted to NetAddress at
import, stamped between one and two weeks old so that address managers
prefer any peer they learn about later.
"""

import random
import time

from inception import InceptionError
from inception.wire.netaddress import NetAddress


ONE_WEEK = 7 * 24 * 60 * 60

# No fixed seeds have been published for either network yet. Records look like
# (bytes.fromhex("00000000000000000000ffff01020304"), 17000).
MainSeeds = ()

TestSeeds = ()


def convertSeeds(records, now=None, rng=None):
    """
    Convert seed records to peer addresses with a last-seen time uniformly
    distributed in [now - 2 weeks, now - 1 week).

    Args:
        records (iterable): (16-byte address, port) pairs.
        now (int): Optional. Default: current time. The time to stamp back
            from.
        rng (random.Random): Optional. Default: the random module. The source
            of the stamp offsets.

    Returns:
        list(NetAddress): One address per record, in order.
    """
    now = int(time.time()) if now is None else now
    rng = rng if rng else random
    addrs = []
    for ip, port in records:
        if len(ip) != 16:
            raise InceptionError(f"seed address must be 16 bytes, got {len(ip)}")
        stamp = now - 2 * ONE_WEEK + rng.randrange(ONE_WEEK)
        addrs.append(NetAddress(ip=ip, port=port, stamp=stamp))
    return addrs
