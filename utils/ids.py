"""ids: 랜덤 식별자 생성 유틸리티 모듈.

거래 ID, 6자리 숫자 코드, UUID v4, 랜덤 문자열을 암호학적으로 안전한 난수로 생성합니다.
난수 소스와 시계는 생성자로 주입할 수 있으며, 기본값은 secrets 모듈과 로컬 시계입니다.

모든 생성 함수는 형식에 맞는 값을 반환하거나 RandomSourceError를 발생시킵니다.
빈 문자열이나 길이가 모자란 값을 대신 반환하지 않습니다.
"""

import logging
import secrets
import uuid
from datetime import datetime
from typing import Callable, Protocol

from utils.exceptions import RandomSourceError

logger = logging.getLogger(__name__)

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz_-"

_TIMESTAMP_FORMAT = "%y%m%d%H%M%S"
_TRANSACTION_RANDOM_DIGITS = 8
_CODE_DIGITS = 6
_UUID_BYTES = 16


class RandomSource(Protocol):
    def read(self, n: int) -> bytes: ...


class SystemRandomSource:
    """OS 보안 난수 소스 (secrets.token_bytes)."""

    def read(self, n: int) -> bytes:
        """n 바이트의 보안 난수를 반환합니다.

        Raises:
            RandomSourceError: OS 난수 소스 오류 또는 바이트 수 부족.
        """
        try:
            data = secrets.token_bytes(n)
        except OSError as e:
            logger.error(f"보안 난수 생성 실패: {e}")
            raise RandomSourceError(f"보안 난수 {n}바이트 생성 실패") from e

        if len(data) != n:
            raise RandomSourceError(
                f"보안 난수 바이트 부족: 요청 {n}, 수신 {len(data)}"
            )
        return data


class IdGenerator:
    """랜덤 식별자 생성기.

    Args:
        random_source: 보안 난수 소스 (기본값: SystemRandomSource).
        clock: 로컬 현재 시각을 반환하는 함수 (기본값: datetime.now).
    """

    def __init__(
        self,
        random_source: RandomSource | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.random_source = random_source or SystemRandomSource()
        self.clock = clock or datetime.now

    def _read(self, n: int) -> bytes:
        data = self.random_source.read(n)
        # 주입된 소스가 짧게 반환하는 경우도 실패로 처리
        if len(data) != n:
            raise RandomSourceError(
                f"보안 난수 바이트 부족: 요청 {n}, 수신 {len(data)}"
            )
        return data

    def _digits(self, count: int) -> str:
        # 바이트 % 10 (모듈로 편향은 허용)
        return "".join(str(b % 10) for b in self._read(count))

    def transaction_id(self) -> str:
        """거래 ID를 생성합니다.

        형식: yyMMddHHmmss(로컬 시각 12자리) + 랜덤 숫자 8자리, 총 20자.
        같은 초 안에서는 랜덤 부분이 겹칠 수 있으므로 엄격한 유일성이 필요하면
        저장 시점의 유니크 제약 등으로 별도 보장해야 합니다.

        Returns:
            20자리 숫자 문자열.

        Raises:
            RandomSourceError: 난수 생성 실패 시.
        """
        timestamp = self.clock().strftime(_TIMESTAMP_FORMAT)
        return timestamp + self._digits(_TRANSACTION_RANDOM_DIGITS)

    def six_digit_code(self) -> str:
        """6자리 랜덤 숫자 코드를 생성합니다 (인증번호 등).

        Raises:
            RandomSourceError: 난수 생성 실패 시.
        """
        return self._digits(_CODE_DIGITS)

    def uuid4(self) -> str:
        """UUID v4 문자열을 생성합니다.

        16바이트 난수에 RFC 4122 버전(4)과 variant(10) 비트를 설정하고
        소문자 8-4-4-4-12 형식(36자)으로 반환합니다.

        Raises:
            RandomSourceError: 난수 생성 실패 시.
        """
        raw = bytearray(self._read(_UUID_BYTES))
        raw[6] = (raw[6] & 0x0F) | 0x40  # version 4
        raw[8] = (raw[8] & 0x3F) | 0x80  # variant 10xxxxxx
        return str(uuid.UUID(bytes=bytes(raw)))

    def random_string(self, length: int) -> str:
        """지정한 길이의 랜덤 문자열을 생성합니다.

        문자 집합: 숫자, 대문자, 소문자, '_', '-' (64자).
        length가 0 이하이면 난수 소스를 사용하지 않고 빈 문자열을 반환합니다.

        Args:
            length: 생성할 문자열 길이.

        Returns:
            랜덤 문자열.

        Raises:
            RandomSourceError: 난수 생성 실패 시 (빈 문자열을 반환하지 않음).
        """
        if length <= 0:
            return ""
        return "".join(ALPHABET[b % len(ALPHABET)] for b in self._read(length))


_default_generator = IdGenerator()


def generate_transaction_id() -> str:
    """기본 생성기로 거래 ID를 생성합니다."""
    return _default_generator.transaction_id()


def generate_six_digit_code() -> str:
    """기본 생성기로 6자리 숫자 코드를 생성합니다."""
    return _default_generator.six_digit_code()


def generate_uuid4() -> str:
    """기본 생성기로 UUID v4 문자열을 생성합니다."""
    return _default_generator.uuid4()


def generate_random_string(length: int) -> str:
    """기본 생성기로 랜덤 문자열을 생성합니다."""
    return _default_generator.random_string(length)
