"""
Chain-specific configuration for pool_registry.
"""

from dataclasses import dataclass
from typing import Dict

from .base import BaseConfig


@dataclass
class ChainConfig(BaseConfig):
    """EVM chains the registry keeps pool classifications for."""

    DEFAULT_CHAIN: str = BaseConfig.get_env("DEFAULT_CHAIN", "ethereum")

    # Chain IDs
    ETHEREUM_CHAIN_ID: int = 1
    BASE_CHAIN_ID: int = 8453
    ARBITRUM_CHAIN_ID: int = 42161

    @property
    def supported_chains(self) -> Dict[str, Dict]:
        """Get configuration for all supported chains."""
        return {
            "ethereum": {
                "chain_id": self.ETHEREUM_CHAIN_ID,
                "native_token": "ETH",
                "explorer_url": "https://etherscan.io",
            },
            "base": {
                "chain_id": self.BASE_CHAIN_ID,
                "native_token": "ETH",
                "explorer_url": "https://basescan.org",
            },
            "arbitrum": {
                "chain_id": self.ARBITRUM_CHAIN_ID,
                "native_token": "ETH",
                "explorer_url": "https://arbiscan.io",
            },
        }

    def get_chain_config(self, chain_name: str) -> Dict:
        """Get configuration for a specific chain."""
        if chain_name not in self.supported_chains:
            raise ValueError(f"Unsupported chain: {chain_name}")
        return self.supported_chains[chain_name]

    def get_chain_id(self, chain_name: str) -> int:
        """Get chain ID for a specific chain."""
        return self.get_chain_config(chain_name)["chain_id"]

    def get_chain_name(self, chain_id: int) -> str:
        """Reverse lookup of a chain name by its chain ID."""
        for name, config in self.supported_chains.items():
            if config["chain_id"] == chain_id:
                return name
        raise ValueError(f"Unsupported chain: {chain_id}")

    @property
    def default_chain_id(self) -> int:
        return self.get_chain_id(self.DEFAULT_CHAIN)
