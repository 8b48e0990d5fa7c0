"""Bech32 encoding and account addresses."""

from __future__ import annotations

import hashlib

BECH32_PREFIX = "tori"

_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_GENERATORS = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_MAX_LENGTH = 1023
_MAX_ADDRESS_LENGTH = 255


class AddressError(ValueError):
    """Raised for malformed bech32 strings or addresses."""


def _polymod(values: list[int]) -> int:
    checksum = 1
    for value in values:
        top = checksum >> 25
        checksum = ((checksum & 0x1FFFFFF) << 5) ^ value
        for bit, generator in enumerate(_GENERATORS):
            if (top >> bit) & 1:
                checksum ^= generator
    return checksum


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _convert_bits(data: bytes | list[int], from_bits: int, to_bits: int, pad: bool) -> list[int]:
    accumulator = 0
    bits = 0
    result = []
    max_value = (1 << to_bits) - 1
    for value in data:
        if value < 0 or value >> from_bits:
            raise AddressError("invalid data range")
        accumulator = (accumulator << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            result.append((accumulator >> bits) & max_value)
    if pad:
        if bits:
            result.append((accumulator << (to_bits - bits)) & max_value)
    elif bits >= from_bits or ((accumulator << (to_bits - bits)) & max_value):
        raise AddressError("invalid padding")
    return result


def bech32_encode(hrp: str, data: bytes) -> str:
    """Encode 8-bit ``data`` under human-readable part ``hrp``."""
    hrp = hrp.lower()
    words = _convert_bits(bytes(data), 8, 5, True)
    values = _hrp_expand(hrp) + words
    polymod = _polymod(values + [0] * 6) ^ 1
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]
    return hrp + "1" + "".join(_CHARSET[w] for w in words + checksum)


def bech32_decode(text: str) -> tuple[str, bytes]:
    """Decode a bech32 string into its human-readable part and 8-bit data."""
    if len(text) > _MAX_LENGTH:
        raise AddressError("bech32 string too long")
    if any(ord(c) < 33 or ord(c) > 126 for c in text):
        raise AddressError("invalid character in bech32 string")
    if text.lower() != text and text.upper() != text:
        raise AddressError("mixed case in bech32 string")
    text = text.lower()
    separator = text.rfind("1")
    if separator < 1 or separator + 7 > len(text):
        raise AddressError("invalid separator position")
    hrp, body = text[:separator], text[separator + 1:]
    try:
        words = [_CHARSET.index(c) for c in body]
    except ValueError:
        raise AddressError("invalid character in data part") from None
    if _polymod(_hrp_expand(hrp) + words) != 1:
        raise AddressError("invalid checksum")
    return hrp, bytes(_convert_bits(words[:-6], 5, 8, False))


def acc_address_from_bech32(text: str) -> bytes:
    """Decode an account address carrying the chain's prefix."""
    if not text.strip():
        raise AddressError("empty address string is not allowed")
    hrp, data = bech32_decode(text)
    if hrp != BECH32_PREFIX:
        raise AddressError(f"invalid Bech32 prefix; expected {BECH32_PREFIX}, got {hrp}")
    if not data:
        raise AddressError("addresses cannot be empty")
    if len(data) > _MAX_ADDRESS_LENGTH:
        raise AddressError(f"address max length is {_MAX_ADDRESS_LENGTH}, got {len(data)}")
    return data


def module_address(name: str) -> bytes:
    """Return the 20-byte account address of a named module."""
    return hashlib.sha256(name.encode()).digest()[:20]