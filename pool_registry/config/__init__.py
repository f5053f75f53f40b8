"""
Configuration management for pool_registry.

Use get_config() to access all configuration settings.

Example:
    from pool_registry.config import get_config

    config = get_config()

    # Access chain settings
    chain_id = config.chains.get_chain_id("arbitrum")

    # Access protocol settings
    factories = config.protocols.get_factory_addresses("uniswap_v3", "ethereum")
    init_code_hash = config.protocols.get_init_code_hash("uniswap_v3", "ethereum")
"""

from .base import BaseConfig, ConfigError
from .chains import ChainConfig
from .manager import ConfigManager, get_config, reload_config
from .protocols import ProtocolConfig

__all__ = [
    "BaseConfig",
    "ConfigError",
    "ChainConfig",
    "ProtocolConfig",
    "ConfigManager",
    "get_config",
    "reload_config",
]
