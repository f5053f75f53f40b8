"""Shared fixtures for pool derivation and registry tests."""

import pytest
from eth_utils import to_checksum_address

from pool_registry.pools import PoolRegistry


@pytest.fixture
def registry():
    """Fresh registry per test, no shared global state."""
    return PoolRegistry()


@pytest.fixture
def addresses():
    """Four real addresses reused across the registry tests."""
    return [
        to_checksum_address(address)
        for address in (
            "0x1F98431c8aD98523631AE4a59f267346ea31F984",
            "0x3b9b5AD79cbb7649143DEcD5afc749a75F8e6C7F",
            "0xff56eb5b1a7faa972291117e5e9565da29bc808d",
            "0x87E0E33558c8e8EAE3c1E9EB276e05574190b48a",
        )
    ]


@pytest.fixture
def make_addresses():
    """Factory for deterministic, distinct checksum addresses."""

    def _make(count: int, offset: int = 1):
        return [
            to_checksum_address((offset + i).to_bytes(20, "big"))
            for i in range(count)
        ]

    return _make
