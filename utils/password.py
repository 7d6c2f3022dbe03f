"""password: 비밀번호 해싱 및 검증 유틸리티 모듈.

bcrypt를 사용하여 비밀번호를 안전하게 해싱하고 검증합니다.
해시 문자열에 알고리즘, cost, salt가 포함되므로 검증 시 별도 상태가 필요 없습니다.
"""

import logging
import re

import bcrypt

from core.config import settings
from utils.exceptions import HashError

logger = logging.getLogger(__name__)

# bcrypt는 72바이트까지만 사용하므로 그보다 긴 비밀번호는 해싱하지 않는다
_MAX_PASSWORD_BYTES = 72
_BCRYPT_HASH_PATTERN = re.compile(r"\$2[abxy]\$\d{2}\$[./A-Za-z0-9]{53}")


class PasswordHasher:
    """bcrypt 비밀번호 해셔.

    Args:
        rounds: bcrypt cost factor (기본값: settings.BCRYPT_ROUNDS).
    """

    def __init__(self, rounds: int | None = None) -> None:
        self.rounds = settings.BCRYPT_ROUNDS if rounds is None else rounds

    def hash(self, password: str) -> str:
        """비밀번호를 해싱합니다.

        Args:
            password: 평문 비밀번호.

        Returns:
            해싱된 비밀번호 문자열 ($2b$...).

        Raises:
            HashError: 비밀번호가 72바이트를 넘거나 bcrypt가 해시를 생성하지 못한 경우.
        """
        password_bytes = password.encode("utf-8")
        if len(password_bytes) > _MAX_PASSWORD_BYTES:
            raise HashError(f"비밀번호는 {_MAX_PASSWORD_BYTES}바이트를 넘을 수 없습니다.")
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            hashed = bcrypt.hashpw(password_bytes, salt)
        except ValueError as e:
            logger.error(f"비밀번호 해싱 실패: {e}")
            raise HashError(f"비밀번호 해싱 실패: {e}") from e
        return hashed.decode("utf-8")

    def verify(self, password: str, hashed_password: str) -> bool:
        """비밀번호를 검증합니다.

        불일치는 정상 결과(False)이며, 해시 문자열 자체가 잘못된 경우에만 예외가 발생합니다.

        Args:
            password: 평문 비밀번호.
            hashed_password: 해싱된 비밀번호.

        Returns:
            비밀번호 일치 여부.

        Raises:
            HashError: 해시 문자열이 손상되었거나 형식이 잘못된 경우.
        """
        # 잘리거나 덧붙은 해시는 checkpw가 단순 불일치로 처리하므로 형식을 먼저 확인
        if not _BCRYPT_HASH_PATTERN.fullmatch(hashed_password):
            logger.warning("잘못된 비밀번호 해시 형식")
            raise HashError("잘못된 비밀번호 해시 형식")

        password_bytes = password.encode("utf-8")
        # hash()가 거부하는 길이이므로 어떤 저장된 해시와도 일치할 수 없음
        if len(password_bytes) > _MAX_PASSWORD_BYTES:
            return False

        hashed_bytes = hashed_password.encode("utf-8")
        try:
            return bcrypt.checkpw(password_bytes, hashed_bytes)
        except ValueError as e:
            logger.warning(f"잘못된 비밀번호 해시 형식: {e}")
            raise HashError("잘못된 비밀번호 해시 형식") from e


_default_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """기본 해셔로 비밀번호를 해싱합니다."""
    return _default_hasher.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """기본 해셔로 비밀번호를 검증합니다."""
    return _default_hasher.verify(plain_password, hashed_password)
