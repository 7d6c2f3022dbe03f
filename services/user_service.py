"""user_service: 사용자 관련 비즈니스 로직을 처리하는 서비스."""

import logging
import secrets

from models.user_models import User
from utils.exceptions import HashError, RandomSourceError
from utils.ids import IdGenerator
from utils.password import PasswordHasher
from utils.phone import normalize_phone_number
from utils.strings import capitalize_name

logger = logging.getLogger(__name__)


class UserService:
    """사용자 관리 서비스.

    Args:
        id_generator: 토큰/키 생성기 (기본값: IdGenerator()).
        password_hasher: 비밀번호 해셔 (기본값: PasswordHasher()).
    """

    def __init__(
        self,
        id_generator: IdGenerator | None = None,
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        self.id_generator = id_generator or IdGenerator()
        self.password_hasher = password_hasher or PasswordHasher()

    def create_user(
        self,
        username: str,
        password: str,
        fullname: str,
        email: str,
        handphone: str,
    ) -> User:
        """사용자 생성 (회원가입).

        토큰 생성이나 비밀번호 해싱이 실패하면 회원가입 전체를 중단합니다.

        Raises:
            RandomSourceError: 인증 키/토큰 생성 실패 시.
            HashError: 비밀번호 해싱 실패 시.
        """
        now = self.id_generator.clock()
        user = User(
            username=username,
            fullname=capitalize_name(fullname),
            email=email.strip().lower(),
            handphone=normalize_phone_number(handphone),
            status="inactive",
            login_dashboard="N",
            created_at=now,
            updated_at=now,
        )

        try:
            # 1. 비밀번호 해싱
            user.set_password(password, self.password_hasher)
            # 2. 인증 키 및 이메일 인증 토큰 발급
            user.generate_auth_key(self.id_generator)
            user.generate_verification_token(self.id_generator)
        except (RandomSourceError, HashError):
            logger.exception(f"회원가입 중단: {username}")
            raise

        logger.info(f"사용자 생성: {username}")
        return user

    def authenticate(self, user: User, password: str) -> bool:
        """비밀번호로 사용자를 인증합니다.

        Raises:
            HashError: 저장된 해시가 손상된 경우.
        """
        return user.check_password(password, self.password_hasher)

    def request_password_reset(self, user: User) -> str:
        """비밀번호 재설정 토큰을 발급하고 반환합니다."""
        user.generate_password_reset_token(self.id_generator)
        user.updated_at = self.id_generator.clock()
        return user.password_reset_token

    def reset_password(self, user: User, token: str, new_password: str) -> bool:
        """재설정 토큰이 일치하면 비밀번호를 변경하고 토큰을 비웁니다.

        Returns:
            변경 여부 (토큰 불일치 또는 미발급 시 False).
        """
        if not user.password_reset_token or not secrets.compare_digest(
            user.password_reset_token.encode("utf-8"), token.encode("utf-8")
        ):
            return False
        user.set_password(new_password, self.password_hasher)
        user.password_reset_token = ""
        user.updated_at = self.id_generator.clock()
        return True
