"""
In-memory classification of pool addresses per EVM chain.

The blacklist holds addresses known NOT to be a pool, the whitelist holds
addresses already verified to be one. Callers derive candidate addresses,
drop the known ones with filter_all(), verify the rest on-chain and feed the
verdict back through add_to_whitelist() / add_to_blacklist().

Each list is a PoolClassificationMap guarded by its own reader-writer lock:
filters share the lock, mutations take it exclusively. When both maps are
needed the blacklist lock is always taken first.
"""

import logging
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Tuple, TypeVar

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from .locks import RWLock
from .pool_types import ChainPools, PoolList, PoolMap, PoolType

logger = logging.getLogger(__name__)

A = TypeVar("A")

_EMPTY: frozenset = frozenset()


def _normalize(addresses: Iterable[A]) -> Tuple[List[A], List[ChecksumAddress]]:
    """Materialize the input and its checksum form, before any lock is taken."""
    items = list(addresses)
    return items, [to_checksum_address(address) for address in items]


class PoolClassificationMap:
    """
    Lock-guarded mapping of chain id to ChainPools.

    A chain missing from the map reads as an empty ChainPools; records are
    created on first write and kept (possibly empty) after removals.
    """

    def __init__(self, name: str):
        self.name = name
        self._lock = RWLock(name)
        self._pools: PoolMap = {}

    @contextmanager
    def read(self) -> Iterator[PoolMap]:
        """Shared access to the underlying map. Do not mutate it."""
        with self._lock.read():
            yield self._pools

    @contextmanager
    def write(self) -> Iterator[PoolMap]:
        """Exclusive access to the underlying map."""
        with self._lock.write():
            yield self._pools

    @property
    def is_poisoned(self) -> bool:
        return self._lock.is_poisoned

    def clear_poison(self):
        """Accept the current (possibly partially updated) contents."""
        self._lock.clear_poison()

    def reset(self):
        """Drop every classification and clear any poisoning."""
        with self._lock.write(ignore_poison=True):
            self._pools.clear()
        self._lock.clear_poison()
        logger.info(f"Reset pool {self.name}")

    def snapshot(self) -> PoolMap:
        """Copy of the current contents, safe to inspect or mutate."""
        with self.read() as pools:
            return {chain_id: chain_pools.copy() for chain_id, chain_pools in pools.items()}

    def __repr__(self) -> str:
        return f"PoolClassificationMap(name={self.name!r})"


class PoolRegistry:
    """
    Blacklist and whitelist of pool addresses, per chain and pool type.

    Construct one at application start and hand it to every consumer.
    pool_type may be a PoolType or its config name ("univ2" / "univ3"); it is
    resolved before any lock is taken, so an unknown one raises ValueError
    without touching the maps.
    All operations raise ReadLockPoisonedError / WriteLockPoisonedError if the
    map they need has been poisoned; a poisoned map never affects the other.
    """

    def __init__(self):
        self.blacklist = PoolClassificationMap("blacklist")
        self.whitelist = PoolClassificationMap("whitelist")

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @staticmethod
    def _add(
        target: PoolClassificationMap,
        addresses: Iterable,
        chain_id: int,
        pool_type: PoolType,
    ):
        pool_type = PoolType(pool_type)
        _, normalized = _normalize(addresses)
        with target.write() as pools:
            chain_pools = pools.get(chain_id)
            if chain_pools is None:
                chain_pools = pools[chain_id] = ChainPools()
            chain_pools.get_list(pool_type).update(normalized)

        logger.debug(
            f"Added {len(normalized)} addresses to {target.name} "
            f"(chain={chain_id}, type={pool_type.value})"
        )

    @staticmethod
    def _remove(
        target: PoolClassificationMap,
        addresses: Iterable,
        chain_id: int,
        pool_type: PoolType,
    ):
        pool_type = PoolType(pool_type)
        _, normalized = _normalize(addresses)
        removal = set(normalized)
        with target.write() as pools:
            chain_pools = pools.get(chain_id)
            if chain_pools is None:
                return
            chain_pools.get_list(pool_type).difference_update(removal)

        logger.debug(
            f"Removed {len(removal)} addresses from {target.name} "
            f"(chain={chain_id}, type={pool_type.value})"
        )

    def add_to_blacklist(self, addresses: Iterable, chain_id: int, pool_type: PoolType):
        """Record addresses as known non-pools on the given chain."""
        self._add(self.blacklist, addresses, chain_id, pool_type)

    def remove_from_blacklist(self, addresses: Iterable, chain_id: int, pool_type: PoolType):
        """Forget blacklisted addresses; unknown chains are a no-op."""
        self._remove(self.blacklist, addresses, chain_id, pool_type)

    def add_to_whitelist(self, addresses: Iterable, chain_id: int, pool_type: PoolType):
        """Record addresses as verified pools on the given chain."""
        self._add(self.whitelist, addresses, chain_id, pool_type)

    def remove_from_whitelist(self, addresses: Iterable, chain_id: int, pool_type: PoolType):
        """Forget whitelisted addresses; unknown chains are a no-op."""
        self._remove(self.whitelist, addresses, chain_id, pool_type)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @staticmethod
    def _pool_list(pools: PoolMap, chain_id: int, pool_type: PoolType) -> PoolList:
        chain_pools = pools.get(chain_id)
        if chain_pools is None:
            return _EMPTY
        return chain_pools.get_list(pool_type)

    def filter_by_blacklist(
        self, addresses: Iterable[A], chain_id: int, pool_type: PoolType
    ) -> List[A]:
        """
        Filter out blacklisted addresses.

        Args:
            addresses: Candidate addresses
            chain_id: EVM chain id
            pool_type: Pool type the candidates belong to

        Returns:
            Candidates that are NOT blacklisted, in input order
        """
        pool_type = PoolType(pool_type)
        items, normalized = _normalize(addresses)
        with self.blacklist.read() as pools:
            blacklist = self._pool_list(pools, chain_id, pool_type)
            filtered = [
                item for item, key in zip(items, normalized) if key not in blacklist
            ]

        logger.debug(
            f"Blacklist filtered {len(items) - len(filtered)}/{len(items)} addresses "
            f"(chain={chain_id}, type={pool_type.value})"
        )
        return filtered

    def filter_by_whitelist(
        self, addresses: Iterable[A], chain_id: int, pool_type: PoolType
    ) -> Tuple[List[A], List[A]]:
        """
        Split addresses by whitelist membership.

        Returns:
            (filtered, intersection): candidates not whitelisted, and
            candidates that are, both in input order
        """
        pool_type = PoolType(pool_type)
        items, normalized = _normalize(addresses)
        filtered = []
        intersection = []
        with self.whitelist.read() as pools:
            whitelist = self._pool_list(pools, chain_id, pool_type)
            for item, key in zip(items, normalized):
                if key in whitelist:
                    intersection.append(item)
                else:
                    filtered.append(item)

        return filtered, intersection

    def filter_all(
        self, addresses: Iterable[A], chain_id: int, pool_type: PoolType
    ) -> Tuple[List[A], List[A]]:
        """
        Filter addresses by both the blacklist and the whitelist.

        Blacklisted candidates are dropped, even when also whitelisted.

        Returns:
            (filtered, intersection_whitelist): unknown candidates that still
            need verification, and candidates already known to be pools
        """
        pool_type = PoolType(pool_type)
        items, normalized = _normalize(addresses)
        filtered = []
        intersection_whitelist = []
        dropped = 0
        with self.blacklist.read() as black_pools, self.whitelist.read() as white_pools:
            blacklist = self._pool_list(black_pools, chain_id, pool_type)
            whitelist = self._pool_list(white_pools, chain_id, pool_type)
            for item, key in zip(items, normalized):
                if key in blacklist:
                    dropped += 1
                elif key in whitelist:
                    intersection_whitelist.append(item)
                else:
                    filtered.append(item)

        logger.debug(
            f"filter_all on chain {chain_id} ({pool_type.value}): "
            f"{dropped} blacklisted, {len(intersection_whitelist)} whitelisted, "
            f"{len(filtered)} unknown"
        )
        return filtered, intersection_whitelist

    def is_blacklisted(self, address, chain_id: int, pool_type: PoolType) -> bool:
        """Check if an address is blacklisted."""
        pool_type = PoolType(pool_type)
        key = to_checksum_address(address)
        with self.blacklist.read() as pools:
            return key in self._pool_list(pools, chain_id, pool_type)

    def is_whitelisted(self, address, chain_id: int, pool_type: PoolType) -> bool:
        """Check if an address is whitelisted."""
        pool_type = PoolType(pool_type)
        key = to_checksum_address(address)
        with self.whitelist.read() as pools:
            return key in self._pool_list(pools, chain_id, pool_type)

    def get_stats(self) -> Dict[str, Dict[int, Dict[str, int]]]:
        """
        Count classified addresses.

        Returns:
            {"blacklist": {chain_id: {"univ2": n, "univ3": m}}, "whitelist": {...}}
        """
        stats = {}
        for target in (self.blacklist, self.whitelist):
            with target.read() as pools:
                stats[target.name] = {
                    chain_id: {
                        pool_type.value: len(chain_pools.get_list(pool_type))
                        for pool_type in PoolType
                    }
                    for chain_id, chain_pools in pools.items()
                }
        return stats
