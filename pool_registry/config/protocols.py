"""
Protocol-specific configuration for pool_registry.

Each protocol entry carries what pool address derivation needs: the
factory (deployer) addresses and the init code hash of the pool bytecode.
"""

from dataclasses import dataclass
from typing import Dict, List

from .base import BaseConfig


@dataclass
class ProtocolConfig(BaseConfig):
    """Configuration for different DeFi protocols."""

    # Init code hashes (keccak256 of the pool creation bytecode)
    UNISWAP_V2_INIT_CODE_HASH: str = BaseConfig.get_env(
        "UNISWAP_V2_INIT_CODE_HASH",
        "0x96e8ac4277198ff8b6f785478aa9a39f403cb768dd02cbee326c3e7da348845f",
    )
    SUSHISWAP_V2_INIT_CODE_HASH: str = BaseConfig.get_env(
        "SUSHISWAP_V2_INIT_CODE_HASH",
        "0xe18a34eb0e04b04f7a0ac29a6e80748dca96319b42c54d679cb821dca90c6303",
    )
    UNISWAP_V3_INIT_CODE_HASH: str = BaseConfig.get_env(
        "UNISWAP_V3_INIT_CODE_HASH",
        "0xe34f199b19b2b4f47f68442619d555527d244f78a3297ea89325f843f87b8b54",
    )

    # 0.01%, 0.05%, 0.3%, 1%
    UNISWAP_V3_FEE_TIERS: tuple = tuple(
        BaseConfig.get_env_int_list("UNISWAP_V3_FEE_TIERS", [100, 500, 3000, 10000])
    )

    @property
    def uniswap_v2_config(self) -> Dict[str, Dict]:
        """Uniswap V2 configuration by chain."""
        return {
            "ethereum": {
                "factory_addresses": [
                    "0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f",
                ],
                "init_code_hash": self.UNISWAP_V2_INIT_CODE_HASH,
                "pool_type": "univ2",
            },
        }

    @property
    def sushiswap_v2_config(self) -> Dict[str, Dict]:
        """Sushiswap V2 configuration by chain."""
        return {
            "ethereum": {
                "factory_addresses": [
                    "0xC0AEe478e3658e2610c5F7A4A2E1777cE9e4f2Ac",
                ],
                "init_code_hash": self.SUSHISWAP_V2_INIT_CODE_HASH,
                "pool_type": "univ2",
            },
            "arbitrum": {
                "factory_addresses": [
                    "0xc35DADB65012eC5796536bD9864eD8773aBc74C4",
                ],
                "init_code_hash": self.SUSHISWAP_V2_INIT_CODE_HASH,
                "pool_type": "univ2",
            },
        }

    @property
    def uniswap_v3_config(self) -> Dict[str, Dict]:
        """Uniswap V3 configuration by chain."""
        return {
            "ethereum": {
                "factory_addresses": ["0x1F98431c8aD98523631AE4a59f267346ea31F984"],
                "init_code_hash": self.UNISWAP_V3_INIT_CODE_HASH,
                "pool_type": "univ3",
                "fee_tiers": list(self.UNISWAP_V3_FEE_TIERS),
            },
            "base": {
                "factory_addresses": ["0x33128a8fC17869897dcE68Ed026d694621f6FDfD"],
                "init_code_hash": self.UNISWAP_V3_INIT_CODE_HASH,
                "pool_type": "univ3",
                "fee_tiers": list(self.UNISWAP_V3_FEE_TIERS),
            },
            "arbitrum": {
                "factory_addresses": ["0x1F98431c8aD98523631AE4a59f267346ea31F984"],
                "init_code_hash": self.UNISWAP_V3_INIT_CODE_HASH,
                "pool_type": "univ3",
                "fee_tiers": list(self.UNISWAP_V3_FEE_TIERS),
            },
        }

    @property
    def supported_protocols(self) -> List[str]:
        """Get list of supported protocols."""
        return [
            "uniswap_v2",
            "sushiswap_v2",
            "uniswap_v3",
        ]

    def _protocol_table(self, protocol: str) -> Dict[str, Dict]:
        if protocol == "uniswap_v2":
            return self.uniswap_v2_config
        elif protocol == "sushiswap_v2":
            return self.sushiswap_v2_config
        elif protocol == "uniswap_v3":
            return self.uniswap_v3_config
        else:
            raise ValueError(f"Unsupported protocol: {protocol}")

    def get_protocol_config(self, protocol: str, chain: str) -> Dict:
        """Get configuration for a specific protocol on a specific chain."""
        table = self._protocol_table(protocol)
        if chain not in table:
            raise ValueError(f"Unsupported chain for {protocol}: {chain}")
        return table[chain]

    def get_chains_for_protocol(self, protocol: str) -> List[str]:
        """Chains on which a protocol has factory deployments."""
        return list(self._protocol_table(protocol).keys())

    def get_factory_addresses(self, protocol: str, chain: str) -> List[str]:
        """Get factory addresses for a protocol on a specific chain."""
        return self.get_protocol_config(protocol, chain).get("factory_addresses", [])

    def get_init_code_hash(self, protocol: str, chain: str) -> str:
        """Get the pool init code hash for a protocol on a specific chain."""
        return self.get_protocol_config(protocol, chain)["init_code_hash"]

    def get_pool_type(self, protocol: str, chain: str) -> str:
        """Get the pool type name ("univ2" or "univ3") of a protocol."""
        return self.get_protocol_config(protocol, chain)["pool_type"]

    def get_fee_tiers(self, protocol: str, chain: str) -> List[int]:
        """Fee tiers for V3-style protocols; empty for V2-style ones."""
        return self.get_protocol_config(protocol, chain).get("fee_tiers", [])
