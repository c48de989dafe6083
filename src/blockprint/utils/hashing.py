"""Fixed-width hashing primitives for block fingerprints.

Every value produced here is reproducible bit-for-bit across processes and
interpreter versions: Python's built-in ``hash()`` is salted per process and
its ints never overflow, so both the string hash and the 64-bit arithmetic are
spelled out explicitly.
"""

from __future__ import annotations

from collections.abc import Iterable

from blockprint.config import HASH_BYTE_ORDER, HASH_BYTES, PRIME_BASE

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1


def wrap32(value: int) -> int:
    """Reduce an int to a signed 32-bit value, two's complement."""
    value &= _MASK32
    return value - (1 << 32) if value >= 1 << 31 else value


def wrap64(value: int) -> int:
    """Reduce an int to a signed 64-bit value, two's complement."""
    value &= _MASK64
    return value - (1 << 64) if value >= 1 << 63 else value


def java_string_hash(value: str) -> int:
    """Polynomial string hash with base 31 over UTF-16 code units.

    Computes ``s[0]*31^(n-1) + s[1]*31^(n-2) + ... + s[n-1]`` with signed
    32-bit overflow, which is the value ``java.lang.String.hashCode()`` returns.
    Characters outside the BMP contribute two code units (a surrogate pair).
    """
    data = value.encode("utf-16-be", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        h = (PRIME_BASE * h + ((data[i] << 8) | data[i + 1])) & _MASK32
    return wrap32(h)


def power_of_base(exponent: int) -> int:
    """``31**exponent`` by repeated multiplication under 64-bit wraparound."""
    pow_ = 1
    for _ in range(exponent):
        pow_ = wrap64(pow_ * PRIME_BASE)
    return pow_


def horner_hash(values: Iterable[str]) -> int:
    """Hash a window of statement values from scratch.

    Gives ``h(v[0])*31^(k-1) + ... + h(v[k-1])`` in 64-bit arithmetic; the
    rolling hash of a window must always equal this.
    """
    h = 0
    for value in values:
        h = wrap64(h * PRIME_BASE + java_string_hash(value))
    return h


def fingerprint_to_bytes(fingerprint: int) -> bytes:
    """Encode a 64-bit fingerprint as 8 big-endian bytes."""
    return wrap64(fingerprint).to_bytes(HASH_BYTES, HASH_BYTE_ORDER, signed=True)


def bytes_to_fingerprint(data: bytes) -> int:
    """Decode 8 big-endian bytes back into a signed 64-bit fingerprint."""
    if len(data) != HASH_BYTES:
        raise ValueError(f"Fingerprint must be {HASH_BYTES} bytes, got {len(data)}")
    return int.from_bytes(data, HASH_BYTE_ORDER, signed=True)
