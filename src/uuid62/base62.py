"""
Base-N 인코딩/디코딩 (radix 2~62)
문자 집합: 0-9, a-z, A-Z (62자), 위치 = 자릿값
"""

from uuid62.errors import InvalidDigit, InvalidRadix

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE = len(ALPHABET)
MIN_RADIX = 2

_DIGITS = {char: index for index, char in enumerate(ALPHABET)}


def _check_radix(radix: int) -> None:
    if radix < MIN_RADIX or radix > BASE:
        raise InvalidRadix(radix)


def encode(value: int, radix: int = BASE) -> str:
    """정수 -> radix 진법 문자열 (0은 항상 "0")"""
    _check_radix(radix)
    if value < 0:
        raise ValueError("Only non-negative integers can be encoded")
    if value == 0:
        return ALPHABET[0]

    result = []
    while value:
        value, rem = divmod(value, radix)
        result.append(ALPHABET[rem])
    return "".join(reversed(result))


def decode(text: str, radix: int = BASE) -> int:
    """
    radix 진법 문자열 -> 정수
    빈 문자열은 0, 앞쪽의 "0"은 값에 영향 없음 (패딩 무손실)
    """
    _check_radix(radix)
    value = 0
    for index, char in enumerate(text):
        digit = _DIGITS.get(char)
        if digit is None or digit >= radix:
            raise InvalidDigit(char, index, radix)
        value = value * radix + digit
    return value
