"""
uuid62 에러 타입
모두 호출자 입력 문제이므로 ValueError 하위 클래스로 둔다.
"""


class Uuid62Error(ValueError):
    """uuid62 에러 공통 부모"""


class InvalidRadix(Uuid62Error):
    def __init__(self, radix: int):
        self.radix = radix
        super().__init__(f"Radix must be between 2-62 inclusive, got {radix}")


class InvalidDigit(Uuid62Error):
    """알파벳에 없거나 radix 범위를 벗어난 문자"""

    def __init__(self, char: str, index: int, radix: int):
        self.char = char
        self.index = index
        self.radix = radix
        super().__init__(
            f"Digit {char!r} at position {index} is outside radix {radix}'s range"
        )


class MagnitudeOverflow(Uuid62Error):
    """디코딩 결과가 16바이트(128비트)를 넘는 경우. 자르지 않고 거부한다."""

    def __init__(self, value: int):
        self.value = value
        size = (value.bit_length() + 7) // 8
        super().__init__(f"Decoded value needs {size} bytes, a UUID holds 16")


class SerializationError(Uuid62Error):
    """UUID를 16바이트 형태로 만들 수 없는 경우"""
