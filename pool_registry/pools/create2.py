"""
Deterministic pool address derivation (CREATE2).

Uniswap-style factories deploy each pool with CREATE2, salted by the sorted
token pair (and the fee tier for V3-style pools). The pool address is
therefore a pure function of the factory, the pair, the pool bytecode hash
and the fee, and can be computed without any RPC call:

    V2 salt = keccak256(abi.encodePacked(token0, token1))
    V3 salt = keccak256(abi.encode(token0, token1, fee))
    address = keccak256(0xff ++ factory ++ salt ++ init_code_hash)[12:]
"""

import logging
from typing import Dict, Iterable, Optional, Tuple, Union

from eth_abi import encode
from eth_abi.packed import encode_packed
from eth_typing import ChecksumAddress
from eth_utils import keccak, to_canonical_address, to_checksum_address
from hexbytes import HexBytes

logger = logging.getLogger(__name__)

AddressLike = Union[str, bytes]
InitCodeHash = Union[int, str, bytes]

CREATE2_PREFIX = b"\xff"


def _init_code_hash_bytes(init_code_hash: InitCodeHash) -> bytes:
    """Big-endian 32 byte form of an init code hash given as int, hex or bytes."""
    if isinstance(init_code_hash, int):
        return init_code_hash.to_bytes(32, "big")
    raw = bytes(HexBytes(init_code_hash))
    if len(raw) > 32:
        raise ValueError(f"Init code hash longer than 32 bytes: {init_code_hash!r}")
    return raw.rjust(32, b"\x00")


def sort_addresses(
    token_a: AddressLike, token_b: AddressLike
) -> Tuple[ChecksumAddress, ChecksumAddress]:
    """
    Order two token addresses ascending by their unsigned byte value.

    Returns:
        (token0, token1) as checksum addresses
    """
    raw_a = to_canonical_address(token_a)
    raw_b = to_canonical_address(token_b)
    if raw_a < raw_b:
        return to_checksum_address(raw_a), to_checksum_address(raw_b)
    return to_checksum_address(raw_b), to_checksum_address(raw_a)


def pool_salt(
    token_a: AddressLike, token_b: AddressLike, fee: Optional[int] = None
) -> bytes:
    """
    Compute the CREATE2 salt of a token pair.

    Args:
        token_a: First token address, in any order
        token_b: Second token address, in any order
        fee: Fee tier for V3-style pools; None for V2-style pools

    Returns:
        32 byte salt
    """
    token0, token1 = sort_addresses(token_a, token_b)
    raw0 = to_canonical_address(token0)
    raw1 = to_canonical_address(token1)

    if fee is None:
        return keccak(encode_packed(["address", "address"], [raw0, raw1]))
    return keccak(encode(["address", "address", "uint256"], [raw0, raw1, int(fee)]))


def derive_pool_address(
    factory: AddressLike,
    token_a: AddressLike,
    token_b: AddressLike,
    init_code_hash: InitCodeHash,
    fee: Optional[int] = None,
) -> ChecksumAddress:
    """
    Derive the address a pool occupies under the given factory.

    The init code hash is not checked against anything: a wrong hash simply
    yields an address no pool lives at. Fee tiers are usually one of
    UniV3Fee but any uint256 value is encoded as given.

    Args:
        factory: Factory (pool deployer) address
        token_a: First token address, in any order
        token_b: Second token address, in any order
        init_code_hash: keccak256 of the pool creation bytecode
        fee: Fee tier for V3-style pools; None for V2-style pools

    Returns:
        Checksum address of the pool contract
    """
    salt = pool_salt(token_a, token_b, fee)
    preimage = (
        CREATE2_PREFIX
        + to_canonical_address(factory)
        + salt
        + _init_code_hash_bytes(init_code_hash)
    )
    return to_checksum_address(keccak(preimage)[12:])


def derive_candidate_addresses(
    factories: Iterable[AddressLike],
    token_a: AddressLike,
    token_b: AddressLike,
    init_code_hash: InitCodeHash,
    fees: Iterable[Optional[int]] = (None,),
) -> Dict[Tuple[ChecksumAddress, Optional[int]], ChecksumAddress]:
    """
    Derive one pool address per (factory, fee) combination.

    Returns:
        Mapping of (factory, fee) to the derived pool address, in input order
    """
    fees = list(fees)
    candidates = {}
    for factory in factories:
        factory_address = to_checksum_address(factory)
        for fee in fees:
            candidates[(factory_address, fee)] = derive_pool_address(
                factory_address, token_a, token_b, init_code_hash, fee
            )

    logger.debug(
        f"Derived {len(candidates)} candidate pools for "
        f"{to_checksum_address(token_a)}/{to_checksum_address(token_b)}"
    )
    return candidates
