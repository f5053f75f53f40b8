"""
Core types for pool address derivation and classification.

Domain models shared by the deriver and the classification registry.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, Set

from eth_typing import ChecksumAddress

# Set of unique pool addresses
PoolList = Set[ChecksumAddress]


class PoolType(Enum):
    """Protocol family a pool address belongs to."""

    UNIV2 = "univ2"
    UNIV3 = "univ3"


class UniV3Fee(IntEnum):
    """UniswapV3 pool fee tiers, in hundredths of a basis point."""

    LOWEST = 100  # 0.01%
    LOW = 500  # 0.05%
    MEDIUM = 3000  # 0.3%
    HIGH = 10000  # 1%


@dataclass
class ChainPools:
    """
    Pool addresses of every pool type on a single EVM chain.

    Attributes:
        univ2: Addresses classified under the UniswapV2 protocol family
        univ3: Addresses classified under the UniswapV3 protocol family
    """

    univ2: PoolList = field(default_factory=set)
    univ3: PoolList = field(default_factory=set)

    def get_list(self, pool_type: PoolType) -> PoolList:
        """Return the (mutable) address set for the given pool type."""
        if pool_type is PoolType.UNIV2:
            return self.univ2
        elif pool_type is PoolType.UNIV3:
            return self.univ3
        raise ValueError(f"Unsupported pool type: {pool_type!r}")

    def copy(self) -> "ChainPools":
        return ChainPools(univ2=set(self.univ2), univ3=set(self.univ3))

    def is_empty(self) -> bool:
        return not self.univ2 and not self.univ3


# Map of EVM chain id to the pools classified on that chain
PoolMap = Dict[int, ChainPools]
