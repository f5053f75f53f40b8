"""
Candidate pool addresses for a token pair under a configured protocol.

Combines the protocol configuration (factories, init code hash, fee tiers)
with CREATE2 derivation. The resulting addresses are only candidates: a pool
may never have been deployed for a given pair/fee.
"""

import logging
from typing import List, Optional

from eth_typing import ChecksumAddress

from pool_registry.config import ConfigManager, get_config
from pool_registry.pools.create2 import AddressLike, derive_candidate_addresses
from pool_registry.pools.pool_types import PoolType

logger = logging.getLogger(__name__)


def candidate_pool_addresses(
    protocol: str,
    chain: str,
    token_a: AddressLike,
    token_b: AddressLike,
    config: Optional[ConfigManager] = None,
) -> List[ChecksumAddress]:
    """
    Derive every address a pool for the pair could occupy on a chain.

    Args:
        protocol: Protocol name (uniswap_v2, sushiswap_v2, uniswap_v3)
        chain: Chain name (ethereum, base, arbitrum)
        token_a: First token address, in any order
        token_b: Second token address, in any order
        config: Configuration to read from; the global one if omitted

    Returns:
        Candidate pool addresses, one per factory and fee tier
    """
    config = config or get_config()
    protocol_config = config.get_protocol_chain_config(protocol, chain)

    pool_type = PoolType(protocol_config["pool_type"])
    if pool_type is PoolType.UNIV3:
        fees = protocol_config["fee_tiers"]
    else:
        fees = [None]

    candidates = derive_candidate_addresses(
        protocol_config["factory_addresses"],
        token_a,
        token_b,
        protocol_config["init_code_hash"],
        fees,
    )

    logger.debug(f"{len(candidates)} {protocol} candidates on {chain}")
    return list(candidates.values())
