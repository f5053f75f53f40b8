"""Pool address derivation and classification registry for EVM AMM pools."""

__version__ = "0.1.0"
