"""Tests for fixed-width hashing primitives."""

from __future__ import annotations

import pytest

from blockprint.utils.hashing import (
    bytes_to_fingerprint,
    fingerprint_to_bytes,
    horner_hash,
    java_string_hash,
    power_of_base,
    wrap32,
    wrap64,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", 0),
        ("a", 97),
        ("ab", 97 * 31 + 98),
        ("hello", 99162322),
        ("polygenelubricants", -2147483648),
    ],
)
def test_java_string_hash_known_values(value, expected):
    assert java_string_hash(value) == expected


def test_java_string_hash_surrogate_pair():
    # U+1F600 is two UTF-16 code units: 0xD83D 0xDE00
    assert java_string_hash("\U0001F600") == 0xD83D * 31 + 0xDE00


def test_java_string_hash_is_signed_32_bit():
    h = java_string_hash("the quick brown fox jumps over the lazy dog" * 10)
    assert -(1 << 31) <= h < (1 << 31)


def test_wrap32():
    assert wrap32(1 << 31) == -(1 << 31)
    assert wrap32((1 << 32) + 7) == 7
    assert wrap32(-1) == -1


def test_wrap64():
    assert wrap64(1 << 63) == -(1 << 63)
    assert wrap64((1 << 63) - 1) == (1 << 63) - 1
    assert wrap64((1 << 64) + 5) == 5
    assert wrap64(-1) == -1
    assert wrap64(-(1 << 63) - 1) == (1 << 63) - 1


def test_power_of_base_small():
    assert power_of_base(0) == 1
    assert power_of_base(1) == 31
    assert power_of_base(3) == 29791


def test_power_of_base_wraps():
    expected = pow(31, 40, 1 << 64)
    if expected >= 1 << 63:
        expected -= 1 << 64
    assert power_of_base(40) == expected


def test_horner_hash():
    assert horner_hash([]) == 0
    assert horner_hash(["a", "b"]) == 97 * 31 + 98
    assert horner_hash(["a", "b", "c"]) == (97 * 31 + 98) * 31 + 99


def test_fingerprint_bytes_are_big_endian():
    assert fingerprint_to_bytes(1) == b"\x00" * 7 + b"\x01"
    assert fingerprint_to_bytes(-1) == b"\xff" * 8
    assert fingerprint_to_bytes(3105).hex() == "0000000000000c21"
    assert fingerprint_to_bytes(-(1 << 63)) == b"\x80" + b"\x00" * 7


def test_bytes_to_fingerprint():
    assert bytes_to_fingerprint(b"\xff" * 8) == -1
    assert bytes_to_fingerprint(bytes.fromhex("0000000000000c21")) == 3105
    assert bytes_to_fingerprint(fingerprint_to_bytes(-123456789012345)) == -123456789012345


def test_bytes_to_fingerprint_rejects_wrong_length():
    with pytest.raises(ValueError, match="must be 8 bytes"):
        bytes_to_fingerprint(b"\x00" * 4)
