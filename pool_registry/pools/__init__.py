"""Pool address derivation and blacklist/whitelist classification."""

from pool_registry.pools.create2 import (
    derive_candidate_addresses,
    derive_pool_address,
    pool_salt,
    sort_addresses,
)
from pool_registry.pools.errors import (
    LockPoisonedError,
    PoolRegistryError,
    ReadLockPoisonedError,
    WriteLockPoisonedError,
)
from pool_registry.pools.pool_types import ChainPools, PoolList, PoolMap, PoolType, UniV3Fee
from pool_registry.pools.registry import PoolClassificationMap, PoolRegistry
from pool_registry.pools.candidates import candidate_pool_addresses

__all__ = [
    "ChainPools",
    "LockPoisonedError",
    "PoolClassificationMap",
    "PoolList",
    "PoolMap",
    "PoolRegistry",
    "PoolRegistryError",
    "PoolType",
    "ReadLockPoisonedError",
    "UniV3Fee",
    "WriteLockPoisonedError",
    "candidate_pool_addresses",
    "derive_candidate_addresses",
    "derive_pool_address",
    "pool_salt",
    "sort_addresses",
]
