"""
Configuration manager for pool_registry.

This module provides a centralized way to access all configuration settings
across the application. It combines all configuration classes into a single
easy-to-use interface.
"""

import logging
from typing import Dict, Any

from eth_utils import is_address
from hexbytes import HexBytes

from .base import BaseConfig, ConfigError
from .chains import ChainConfig
from .protocols import ProtocolConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Centralized configuration manager that combines all configuration classes.

    This class provides easy access to all configuration settings and ensures
    that configurations are properly initialized and validated.
    """

    def __init__(self, environment: str = None):
        """
        Initialize the configuration manager.

        Args:
            environment: Override the environment (local, dev, staging, production, test)
        """
        self._environment = environment
        self._base_config = None
        self._chain_config = None
        self._protocol_config = None
        self._initialize_configs()

    def _initialize_configs(self):
        """Initialize all configuration objects."""
        try:
            self._base_config = BaseConfig()
            if self._environment:
                self._base_config.ENVIRONMENT = self._environment
                self._base_config._validate_config()

            self._chain_config = ChainConfig()
            self._protocol_config = ProtocolConfig()

            logger.info(f"Configuration initialized for environment: {self.environment}")

        except Exception as e:
            logger.error(f"Failed to initialize configuration: {e}")
            raise ConfigError(f"Configuration initialization failed: {e}")

    @property
    def environment(self) -> str:
        """Get current environment."""
        return self._base_config.ENVIRONMENT

    @property
    def base(self) -> BaseConfig:
        """Get base configuration."""
        return self._base_config

    @property
    def chains(self) -> ChainConfig:
        """Get chain configuration."""
        return self._chain_config

    @property
    def protocols(self) -> ProtocolConfig:
        """Get protocol configuration."""
        return self._protocol_config

    def get_protocol_chain_config(self, protocol: str, chain: str) -> Dict[str, Any]:
        """
        Get combined protocol and chain configuration.

        Args:
            protocol: Protocol name (uniswap_v3, sushiswap_v2, etc.)
            chain: Chain name (ethereum, base, arbitrum)

        Returns:
            Combined configuration dictionary
        """
        protocol_config = self.protocols.get_protocol_config(protocol, chain)

        return {
            "protocol": protocol,
            "chain": chain,
            "chain_id": self.chains.get_chain_id(chain),
            "fee_tiers": [],
            **protocol_config
        }

    def validate_configuration(self) -> bool:
        """
        Validate all configuration settings.

        Returns:
            True if all configurations are valid

        Raises:
            ConfigError: If any configuration is invalid
        """
        try:
            if not self.chains.supported_chains:
                raise ConfigError("No chains configured")

            for protocol in self.protocols.supported_protocols:
                for chain in self.protocols.get_chains_for_protocol(protocol):
                    # Raises ValueError for chains the chain config doesn't know
                    self.chains.get_chain_id(chain)

                    addresses = self.protocols.get_factory_addresses(protocol, chain)
                    if not addresses:
                        logger.warning(f"No factory addresses for {protocol} on {chain}")
                    for address in addresses:
                        if not is_address(address):
                            raise ConfigError(
                                f"Invalid factory address for {protocol} on {chain}: {address}"
                            )

                    init_code_hash = self.protocols.get_init_code_hash(protocol, chain)
                    if len(HexBytes(init_code_hash)) != 32:
                        raise ConfigError(
                            f"Init code hash for {protocol} on {chain} must be 32 bytes: {init_code_hash}"
                        )

            logger.info("Configuration validation successful")
            return True

        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise ConfigError(f"Configuration validation failed: {e}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert all configurations to dictionary format."""
        return {
            "environment": self.environment,
            "base": self.base.to_dict() if self.base else {},
            "chains": self.chains.to_dict() if self.chains else {},
            "protocols": self.protocols.to_dict() if self.protocols else {},
        }

    def __repr__(self) -> str:
        """String representation of the configuration manager."""
        return f"ConfigManager(environment={self.environment})"


# Global configuration manager instance
_config_manager = None


def get_config(environment: str = None, force_reload: bool = False) -> ConfigManager:
    """
    Get the global configuration manager instance.

    Args:
        environment: Override environment
        force_reload: Force reload of configuration

    Returns:
        ConfigManager instance
    """
    global _config_manager

    if _config_manager is None or force_reload:
        _config_manager = ConfigManager(environment=environment)
        _config_manager.validate_configuration()

    return _config_manager


def reload_config(environment: str = None) -> ConfigManager:
    """
    Reload the global configuration manager.

    Args:
        environment: Override environment

    Returns:
        New ConfigManager instance
    """
    return get_config(environment=environment, force_reload=True)
