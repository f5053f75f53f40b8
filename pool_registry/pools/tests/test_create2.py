"""
Tests for CREATE2 pool address derivation.
"""

import pytest
from eth_utils import is_checksum_address, keccak, to_canonical_address

from pool_registry.pools import (
    UniV3Fee,
    derive_candidate_addresses,
    derive_pool_address,
    pool_salt,
    sort_addresses,
)

UNIV3_FACTORY = "0x1F98431c8aD98523631AE4a59f267346ea31F984"
UNIV3_INIT_CODE_HASH = "0xe34f199b19b2b4f47f68442619d555527d244f78a3297ea89325f843f87b8b54"

UNIV2_FACTORY = "0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f"
UNIV2_INIT_CODE_HASH = "0x96e8ac4277198ff8b6f785478aa9a39f403cb768dd02cbee326c3e7da348845f"

WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"


def same_address(a: str, b: str) -> bool:
    return a.lower() == b.lower()


class TestSortAddresses:
    """Token pair ordering."""

    def test_sort_addresses(self):
        """Lower byte value comes first regardless of argument order."""
        address1 = "0x1F98431c8aD98523631AE4a59f267346ea31F984"
        address2 = "0x3b9b5AD79cbb7649143DEcD5afc749a75F8e6C7F"

        assert sort_addresses(address1, address2) == sort_addresses(address2, address1)
        token0, token1 = sort_addresses(address2, address1)
        assert same_address(token0, address1)
        assert same_address(token1, address2)

    def test_sort_ignores_case(self):
        """Ordering is by bytes, not by the hex string's letter case."""
        upper = "0xFF56EB5B1A7FAA972291117E5E9565DA29BC808D"
        lower = "0x140d8d3649ec605cf69018c627fb44ccc76ec89f"

        token0, token1 = sort_addresses(upper, lower)
        assert same_address(token0, lower)
        assert same_address(token1, upper)

    def test_sort_accepts_raw_bytes(self):
        """20 byte values are accepted and returned in checksum form."""
        token0, token1 = sort_addresses(to_canonical_address(WETH), to_canonical_address(USDC))

        assert is_checksum_address(token0)
        assert token0 == USDC
        assert token1 == WETH


class TestDerivePoolAddress:
    """Known vectors and properties of derive_pool_address."""

    def test_univ3_known_vector(self):
        """V3-style derivation with the 1% fee tier."""
        address = derive_pool_address(
            "0x1F98431c8aD98523631AE4a59f267346ea31F984",
            "0x3b9b5AD79cbb7649143DEcD5afc749a75F8e6C7F",
            "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
            int("e34f199b19b2b4f47f68442619d555527d244f78a3297ea89325f843f87b8b54", 16),
            UniV3Fee.HIGH,
        )

        assert is_checksum_address(address)
        assert same_address(address, "0x72b236b8EB61B15833e514750b65b94a73D74A01")

    def test_univ2_known_vector(self):
        """V2-style derivation (no fee) uses the packed pair as salt."""
        address = derive_pool_address(
            "0x28b70f6Ed97429E40FE9a9CD3EB8E86BCBA11dd4",
            "0x140d8d3649ec605cf69018c627fb44ccc76ec89f",
            "0xff56eb5b1a7faa972291117e5e9565da29bc808d",
            int("99e82d1f1ab2914f983fb7f2b987a3e30a55ad1fa8c38239d1f7c1a24fb93e3d", 16),
            None,
        )

        assert same_address(address, "0x87E0E33558c8e8EAE3c1E9EB276e05574190b48a")

    @pytest.mark.parametrize("fee,expected", [
        (UniV3Fee.LOW, "0x88e6A0c2dDD26FEEb64F039a2c41296FcB3f5640"),
        (UniV3Fee.MEDIUM, "0x8ad599c3A0ff1De082011EFDDc58f1908eb6e6D8"),
    ])
    def test_univ3_mainnet_usdc_weth(self, fee, expected):
        """Deployed USDC/WETH pools on Ethereum mainnet."""
        address = derive_pool_address(UNIV3_FACTORY, WETH, USDC, UNIV3_INIT_CODE_HASH, fee)

        assert same_address(address, expected)

    def test_univ2_mainnet_usdc_weth(self):
        """Deployed Uniswap V2 USDC/WETH pair on Ethereum mainnet."""
        address = derive_pool_address(UNIV2_FACTORY, USDC, WETH, UNIV2_INIT_CODE_HASH)

        assert same_address(address, "0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc")

    @pytest.mark.parametrize("fee", [None, 100, 500, 3000, 10000])
    def test_token_order_independent(self, fee):
        """Swapping the tokens never changes the derived address."""
        forward = derive_pool_address(UNIV3_FACTORY, WETH, USDC, UNIV3_INIT_CODE_HASH, fee)
        backward = derive_pool_address(UNIV3_FACTORY, USDC, WETH, UNIV3_INIT_CODE_HASH, fee)

        assert forward == backward

    def test_init_code_hash_forms_are_equivalent(self):
        """int, hex string (with or without 0x) and bytes hashes agree."""
        as_hex = UNIV3_INIT_CODE_HASH
        as_int = int(as_hex, 16)
        as_bytes = bytes.fromhex(as_hex[2:])

        results = {
            derive_pool_address(UNIV3_FACTORY, WETH, USDC, value, UniV3Fee.LOW)
            for value in (as_hex, as_hex[2:], as_int, as_bytes)
        }
        assert len(results) == 1

    def test_init_code_hash_too_long(self):
        """Hashes longer than 32 bytes are rejected."""
        with pytest.raises(ValueError, match="longer than 32 bytes"):
            derive_pool_address(UNIV3_FACTORY, WETH, USDC, b"\x01" * 33)

        with pytest.raises(OverflowError):
            derive_pool_address(UNIV3_FACTORY, WETH, USDC, 1 << 256)

    def test_sensitive_to_every_input(self):
        """Changing any single input changes the address."""
        base = derive_pool_address(UNIV3_FACTORY, WETH, USDC, UNIV3_INIT_CODE_HASH, 500)

        variants = [
            derive_pool_address(UNIV2_FACTORY, WETH, USDC, UNIV3_INIT_CODE_HASH, 500),
            derive_pool_address(UNIV3_FACTORY, WETH, UNIV2_FACTORY, UNIV3_INIT_CODE_HASH, 500),
            derive_pool_address(UNIV3_FACTORY, UNIV2_FACTORY, USDC, UNIV3_INIT_CODE_HASH, 500),
            derive_pool_address(UNIV3_FACTORY, WETH, USDC, UNIV2_INIT_CODE_HASH, 500),
            derive_pool_address(UNIV3_FACTORY, WETH, USDC, UNIV3_INIT_CODE_HASH, 3000),
            derive_pool_address(UNIV3_FACTORY, WETH, USDC, UNIV3_INIT_CODE_HASH, None),
        ]

        assert base not in variants
        assert len(set(variants)) == len(variants)

    def test_nonstandard_fee_is_encoded(self):
        """Fees outside the documented tiers still derive an address."""
        address = derive_pool_address(UNIV3_FACTORY, WETH, USDC, UNIV3_INIT_CODE_HASH, 2500)

        assert is_checksum_address(address)
        assert address != derive_pool_address(
            UNIV3_FACTORY, WETH, USDC, UNIV3_INIT_CODE_HASH, 3000
        )


class TestPoolSalt:
    """Salt encodings."""

    def test_v2_salt_is_packed_pair(self):
        """40 byte packed preimage: token0 ++ token1."""
        expected = keccak(to_canonical_address(USDC) + to_canonical_address(WETH))

        assert pool_salt(WETH, USDC) == expected

    def test_v3_salt_is_abi_encoded(self):
        """96 byte preimage: two left-padded addresses and a uint256 fee."""
        preimage = (
            to_canonical_address(USDC).rjust(32, b"\x00")
            + to_canonical_address(WETH).rjust(32, b"\x00")
            + (3000).to_bytes(32, "big")
        )

        assert pool_salt(WETH, USDC, 3000) == keccak(preimage)


class TestDeriveCandidateAddresses:
    """Bulk derivation over factories and fee tiers."""

    def test_one_candidate_per_factory_and_fee(self):
        fees = [fee.value for fee in UniV3Fee]
        candidates = derive_candidate_addresses(
            [UNIV3_FACTORY], WETH, USDC, UNIV3_INIT_CODE_HASH, fees
        )

        assert list(candidates.keys()) == [(UNIV3_FACTORY, fee) for fee in fees]
        assert len(set(candidates.values())) == len(fees)
        assert candidates[(UNIV3_FACTORY, 500)] == derive_pool_address(
            UNIV3_FACTORY, WETH, USDC, UNIV3_INIT_CODE_HASH, 500
        )

    def test_default_is_v2_style(self):
        candidates = derive_candidate_addresses(
            [UNIV2_FACTORY.lower()], WETH, USDC, UNIV2_INIT_CODE_HASH
        )

        assert list(candidates.keys()) == [(UNIV2_FACTORY, None)]

    def test_no_factories(self):
        assert derive_candidate_addresses([], WETH, USDC, UNIV2_INIT_CODE_HASH) == {}
