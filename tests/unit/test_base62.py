"""
로컬 유닛 테스트 - Base-N 코덱 검증
"""

import os
import random
import sys

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

# src 경로 추가
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "src"))
from uuid62.base62 import ALPHABET, BASE, decode, encode
from uuid62.errors import InvalidDigit, InvalidRadix

VALID_RADICES = range(2, 63)


def test_alphabet():
    assert len(ALPHABET) == 62
    assert len(set(ALPHABET)) == 62
    assert BASE == 62


@pytest.mark.parametrize(
    "value, radix, expected",
    [
        (13, 2, "1101"),
        (59774123759, 16, "dead0beef"),
        (1, 62, "1"),
        (61, 62, "Z"),
        (62, 62, "10"),
        (63, 62, "11"),
        (35, 36, "z"),
        (255, 10, "255"),
    ],
)
def test_known_values(value, radix, expected):
    """알려진 값 검증 (양방향)"""
    assert encode(value, radix) == expected
    assert decode(expected, radix) == value


def test_default_radix_is_62():
    assert encode(61) == "Z"
    assert decode("10") == 62


def test_zero_is_canonical_zero_digit():
    for radix in VALID_RADICES:
        assert encode(0, radix) == "0", f"Failed for radix={radix}"


def test_empty_string_decodes_to_zero():
    for radix in VALID_RADICES:
        assert decode("", radix) == 0


def test_leading_zeros_are_ignored():
    assert decode("00000013", 10) == 13
    assert decode("0000Z", 62) == 61
    assert decode("0" * 40, 2) == 0


def test_case_sensitive():
    assert decode("a") == 10
    assert decode("A") == 36


def test_large_value_exact():
    value = (1 << 129) - 1
    assert decode(encode(value, 62), 62) == value
    assert encode(value, 16) == "1" + "f" * 32
    assert encode(1 << 128, 2) == "1" + "0" * 128


@pytest.mark.parametrize("radix", [-1, 0, 1, 63, 100])
def test_encode_invalid_radix(radix):
    with pytest.raises(InvalidRadix) as e:
        encode(10, radix)
    assert e.value.radix == radix
    assert str(e.value).startswith("Radix must be")


@pytest.mark.parametrize("radix", [1, 63])
def test_decode_invalid_radix(radix):
    with pytest.raises(InvalidRadix, match="Radix must be"):
        decode("a", radix)


def test_radix_checked_before_digits():
    with pytest.raises(InvalidRadix):
        decode("-", 63)


def test_decode_unknown_character():
    with pytest.raises(InvalidDigit, match="Digit") as e:
        decode("-", 62)
    assert e.value.char == "-"
    assert e.value.index == 0


def test_decode_digit_outside_radix():
    with pytest.raises(InvalidDigit) as e:
        decode("1012", 2)
    assert e.value.char == "2"
    assert e.value.index == 3
    assert e.value.radix == 2


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        decode("!", 62)
    with pytest.raises(ValueError):
        encode(1, 1)


def test_encode_negative_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        encode(-1, 62)


def test_encode_does_not_touch_input():
    value = 123456789
    encode(value, 7)
    assert value == 123456789


def test_random_129bit_roundtrip():
    """시드 고정 난수 1000개, 129비트 범위"""
    rng = random.Random(62)
    for _ in range(1000):
        value = rng.getrandbits(129)
        assert decode(encode(value, 62), 62) == value


@given(st.integers(min_value=0, max_value=(1 << 129) - 1), st.integers(2, 62))
def test_roundtrip_any_radix(value, radix):
    assert decode(encode(value, radix), radix) == value


@settings(max_examples=1000)
@given(st.integers(min_value=0, max_value=(1 << 128) - 1))
def test_roundtrip_128bit(value):
    encoded = encode(value, 62)
    assert decode(encoded, 62) == value
    assert len(encoded) <= 22


@given(st.integers(min_value=0, max_value=10**12), st.integers(min_value=0, max_value=10**12))
def test_encoding_is_injective(a, b):
    if a != b:
        assert encode(a, 62) != encode(b, 62)
