"""
Script and transaction limits for the Radiant blockchain.

These are consensus-critical values.

Reference: Radiant-Core src/script/script.h
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union


class Limits:
    MAX_SCRIPT_ELEMENT_SIZE_LEGACY = 520
    MAX_SCRIPT_ELEMENT_SIZE = 32_000_000
    MAX_OPS_PER_SCRIPT = 32_000_000
    MAX_PUBKEYS_PER_MULTISIG = 20
    MAX_SCRIPT_SIZE = 32_000_000
    MAX_STACK_SIZE = 32_000_000

    # Below: block height, otherwise UNIX time (Tue Nov 5 00:53:20 1985 UTC)
    LOCKTIME_THRESHOLD = 500_000_000

    # CScriptNum byte widths
    MAX_SCRIPTNUM_SIZE_32_BIT = 4
    MAX_SCRIPTNUM_SIZE_64_BIT = 8
    MAX_SCRIPTNUM_SIZE = 8

    MAX_TX_SIZE = 32_000_000
    MAX_BLOCK_SIZE = 256_000_000
    MIN_TX_SIZE = 100

    REF_SIZE = 36                 # 32-byte txid + 4-byte vout
    HASH256_SIZE = 32
    HASH160_SIZE = 20
    COMPRESSED_PUBKEY_SIZE = 33
    UNCOMPRESSED_PUBKEY_SIZE = 65
    MAX_SIGNATURE_SIZE = 73

    DUST_THRESHOLD = 546          # photons
    COIN = 100_000_000            # photons per RXD
    MAX_MONEY = 21_000_000_000 * COIN


class ScriptConstants:
    EMPTY_SCRIPT = b''
    OP_RETURN_PREFIX = b'\x00\x6a'   # OP_FALSE OP_RETURN
    P2PKH_SCRIPT_SIZE = 25
    P2SH_SCRIPT_SIZE = 23


def exceeds_element_size(size: int) -> bool:
    return size > Limits.MAX_SCRIPT_ELEMENT_SIZE


def exceeds_script_size(size: int) -> bool:
    return size > Limits.MAX_SCRIPT_SIZE


def exceeds_stack_size(depth: int) -> bool:
    return depth > Limits.MAX_STACK_SIZE


def exceeds_op_count(count: int) -> bool:
    return count > Limits.MAX_OPS_PER_SCRIPT


def to_photons(rxd: Union[int, float, Decimal, str]) -> int:
    """Convert an RXD amount to photons, rounding to the nearest photon."""
    return int((Decimal(str(rxd)) * Limits.COIN).to_integral_value(rounding=ROUND_HALF_UP))


def to_rxd(photons: int) -> float:
    """Convert photons to RXD."""
    return photons / Limits.COIN
