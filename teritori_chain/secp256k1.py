"""secp256k1 public-key recovery, verification and address derivation."""

from __future__ import annotations

import hashlib

from Crypto.Hash import RIPEMD160, keccak

P = 2**256 - 2**32 - 977
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
G = (
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)

Point = tuple[int, int]


class SignatureError(ValueError):
    """Raised for malformed keys or signatures."""


def _point_add(p: Point | None, q: Point | None) -> Point | None:
    if p is None:
        return q
    if q is None:
        return p
    if p[0] == q[0] and (p[1] + q[1]) % P == 0:
        return None
    if p == q:
        lam = 3 * p[0] * p[0] * pow(2 * p[1], -1, P) % P
    else:
        lam = (q[1] - p[1]) * pow(q[0] - p[0], -1, P) % P
    x = (lam * lam - p[0] - q[0]) % P
    return x, (lam * (p[0] - x) - p[1]) % P


def _point_mul(k: int, point: Point | None) -> Point | None:
    result = None
    addend = point
    while k:
        if k & 1:
            result = _point_add(result, addend)
        addend = _point_add(addend, addend)
        k >>= 1
    return result


def _lift_x(x: int, odd: bool) -> Point:
    if not 0 <= x < P:
        raise SignatureError("x coordinate out of range")
    alpha = (pow(x, 3, P) + 7) % P
    y = pow(alpha, (P + 1) // 4, P)
    if y * y % P != alpha:
        raise SignatureError("point is not on the curve")
    if (y & 1) != odd:
        y = P - y
    return x, y


def _decompress(data: bytes) -> Point:
    if len(data) == 33 and data[0] in (2, 3):
        return _lift_x(int.from_bytes(data[1:], "big"), data[0] == 3)
    if len(data) == 65 and data[0] == 4:
        x = int.from_bytes(data[1:33], "big")
        y = int.from_bytes(data[33:], "big")
        if (y * y - x**3 - 7) % P:
            raise SignatureError("point is not on the curve")
        return x, y
    raise SignatureError("invalid public key encoding")


def _compress(point: Point) -> bytes:
    return bytes([2 + (point[1] & 1)]) + point[0].to_bytes(32, "big")


def recover(digest: bytes, signature: bytes) -> Point:
    """Recover the public key from a 65-byte ``r || s || v`` signature, v in {0, 1}."""
    if len(signature) != 65:
        raise SignatureError("signature must be 65 bytes")
    r = int.from_bytes(signature[:32], "big")
    s = int.from_bytes(signature[32:64], "big")
    v = signature[64]
    if v > 1:
        raise SignatureError("invalid recovery id")
    if not (1 <= r < N and 1 <= s < N):
        raise SignatureError("signature values out of range")
    big_r = _lift_x(r, bool(v))
    e = int.from_bytes(digest, "big")
    total = _point_add(_point_mul(s, big_r), _point_mul((-e) % N, G))
    q = _point_mul(pow(r, -1, N), total)
    if q is None:
        raise SignatureError("recovered point at infinity")
    return q


def verify(public_key: bytes, digest: bytes, signature: bytes) -> bool:
    """Check a 64-byte ``r || s`` low-S signature over ``digest``."""
    if len(signature) != 64:
        return False
    try:
        q = _decompress(public_key)
    except SignatureError:
        return False
    r = int.from_bytes(signature[:32], "big")
    s = int.from_bytes(signature[32:], "big")
    if not (1 <= r < N and 1 <= s <= N // 2):
        return False
    e = int.from_bytes(digest, "big")
    w = pow(s, -1, N)
    point = _point_add(_point_mul(e * w % N, G), _point_mul(r * w % N, q))
    return point is not None and point[0] % N == r


def ethereum_address(point: Point) -> str:
    """Return the checksummed Ethereum address of a public key point."""
    raw = point[0].to_bytes(32, "big") + point[1].to_bytes(32, "big")
    hex_address = keccak.new(digest_bits=256, data=raw).digest()[-20:].hex()
    checksum = keccak.new(digest_bits=256, data=hex_address.encode()).hexdigest()
    return "0x" + "".join(
        c.upper() if int(h, 16) >= 8 else c for c, h in zip(hex_address, checksum)
    )


def cosmos_address(public_key: bytes) -> bytes:
    """Return RIPEMD160(SHA256(key)) for a 33-byte compressed public key."""
    if len(public_key) != 33:
        raise SignatureError("public key must be 33 bytes")
    sha = hashlib.sha256(public_key).digest()
    return RIPEMD160.new(sha).digest()