#!/usr/bin/env python3
"""
로컬 UUID <-> Base62 변환 스크립트

사용법:
  python3 scripts/local_run.py encode 3078350b-bfd0-41ff-8cc2-3a3a7969ceb9
  python3 scripts/local_run.py decode 01tsz7Nk9Grmziqc5gFI0pX
  python3 scripts/local_run.py new --count 3
  python3 scripts/local_run.py convert dead0beef --from 16 --to 62

환경 변수:
  UUID62_PAD  encode/new 기본 패딩 여부 (0, false, no 이면 끔, 기본값: 켬)
"""

import argparse
import os
import sys
import uuid
from typing import Optional

# 프로젝트 루트의 src 폴더를 경로에 추가 (설치 없이 실행할 때용)
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_SRC = os.path.join(_PROJECT_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from uuid62.base62 import decode, encode
from uuid62.uuids import base62_to_uuid, uuid_to_base62

_FALSE_VALUES = ("0", "false", "no")


def default_pad() -> bool:
    """UUID62_PAD 환경 변수에서 기본 패딩 여부를 읽는다."""
    return os.environ.get("UUID62_PAD", "1").strip().lower() not in _FALSE_VALUES


def resolve_pad(flag: Optional[bool]) -> bool:
    # --pad / --no-pad 가 환경 변수보다 우선
    return default_pad() if flag is None else flag


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="UUID <-> Base62 변환: encode / decode / new / convert"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_encode = sub.add_parser("encode", help="UUID를 Base62 문자열로 바꿉니다")
    p_encode.add_argument("uuid", help="UUID (예: 3078350b-bfd0-41ff-8cc2-3a3a7969ceb9)")
    p_encode.add_argument(
        "--pad", dest="pad", action=argparse.BooleanOptionalAction, default=None,
        help="23자로 왼쪽 0 패딩 (기본값: UUID62_PAD)",
    )

    p_decode = sub.add_parser("decode", help="Base62 문자열을 UUID로 바꿉니다")
    p_decode.add_argument("text", help="Base62 문자열 (패딩 여부 무관)")

    p_new = sub.add_parser("new", help="새 UUID4를 만들고 Base62로 출력합니다")
    p_new.add_argument("--count", type=int, default=1, help="생성 개수 (기본값: 1)")
    p_new.add_argument(
        "--pad", dest="pad", action=argparse.BooleanOptionalAction, default=None,
        help="23자로 왼쪽 0 패딩 (기본값: UUID62_PAD)",
    )

    p_convert = sub.add_parser("convert", help="숫자를 다른 진법으로 바꿉니다 (2~62)")
    p_convert.add_argument("value", help="변환할 숫자 문자열")
    p_convert.add_argument("--from", dest="from_radix", type=int, default=10,
                           help="입력 진법 (기본값: 10)")
    p_convert.add_argument("--to", dest="to_radix", type=int, default=62,
                           help="출력 진법 (기본값: 62)")
    return parser


def run(args: argparse.Namespace) -> list[str]:
    """명령을 실행하고 출력할 줄 목록을 반환합니다."""
    if args.command == "encode":
        return [uuid_to_base62(args.uuid, pad=resolve_pad(args.pad))]

    if args.command == "decode":
        return [str(base62_to_uuid(args.text.strip()))]

    if args.command == "new":
        if args.count < 1:
            raise ValueError("--count는 1 이상이어야 합니다.")
        pad = resolve_pad(args.pad)
        lines = []
        for _ in range(args.count):
            value = uuid.uuid4()
            lines.append(f"{uuid_to_base62(value, pad=pad)}\t{value}")
        return lines

    # convert
    number = decode(args.value.strip(), args.from_radix)
    return [encode(number, args.to_radix)]


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        lines = run(args)
    except ValueError as e:
        print(f"오류: {e}", file=sys.stderr)
        sys.exit(1)
    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
