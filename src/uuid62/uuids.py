"""
UUID <-> Base62 변환
UUID를 16바이트 big-endian 부호 없는 정수로 보고 base62 코덱에 넘긴다.
"""

import uuid

from uuid62.base62 import ALPHABET, BASE, decode, encode
from uuid62.errors import MagnitudeOverflow, SerializationError

UUID_BYTES = 16


def padded_width(bits: int, radix: int = BASE) -> int:
    """bits 비트 값을 모두 담는 데 필요한 최소 자릿수"""
    return len(encode((1 << bits) - 1, radix))


# 128비트는 22자리면 충분하지만(62**22 > 2**128), 기존에 저장된
# 23자 키와 호환되도록 선행 0 한 자리를 더 둔다.
PADDED_WIDTH = padded_width(UUID_BYTES * 8) + 1


def _uuid_bytes(value: uuid.UUID | str) -> bytes:
    if isinstance(value, uuid.UUID):
        return value.bytes
    try:
        return uuid.UUID(value).bytes
    except (AttributeError, TypeError, ValueError) as e:
        raise SerializationError(f"Cannot serialize {value!r} as a UUID") from e


def uuid_to_base62(value: uuid.UUID | str, pad: bool = True) -> str:
    """
    UUID -> Base62 문자열
    pad=True면 ALPHABET[0]으로 왼쪽을 채워 항상 PADDED_WIDTH 길이가 된다.
    패딩된 키를 자릿값(ALPHABET 위치) 순으로 비교하면 UUID 정수 순서와 같다.
    """
    number = int.from_bytes(_uuid_bytes(value), "big")
    encoded = encode(number, BASE)
    if pad:
        encoded = encoded.rjust(PADDED_WIDTH, ALPHABET[0])
    return encoded


def base62_to_uuid(text: str) -> uuid.UUID:
    """
    Base62 문자열(패딩 여부 무관) -> UUID
    잘못된 문자는 InvalidDigit, 128비트를 넘는 값은 MagnitudeOverflow.
    """
    number = decode(text, BASE)
    if number.bit_length() > UUID_BYTES * 8:
        raise MagnitudeOverflow(number)
    return uuid.UUID(bytes=number.to_bytes(UUID_BYTES, "big"))
