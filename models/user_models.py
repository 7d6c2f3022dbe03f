"""user_models: 사용자 데이터 모델 모듈.

사용자 데이터 클래스와 비밀번호/토큰 설정 메서드를 제공합니다.
DB 조회 및 저장은 이 모듈의 범위가 아닙니다.
"""

from dataclasses import dataclass
from datetime import date, datetime

from core.config import settings
from utils.ids import IdGenerator
from utils.password import PasswordHasher


@dataclass
class User:
    """사용자 데이터 클래스.

    Attributes:
        id: 사용자 고유 식별자.
        username: 사용자명.
        auth_key: 인증 키 (랜덤 문자열).
        password_hash: bcrypt 비밀번호 해시.
        pin_hash: bcrypt PIN 해시.
        password_reset_token: 비밀번호 재설정 토큰.
        fullname: 이름.
        email: 이메일 주소.
        handphone: 휴대폰 번호 (정규화된 형식).
        status: 계정 상태.
        login_dashboard: 대시보드 로그인 허용 여부 ("Y" | "N").
        verification_token: 이메일 인증 토큰.
    """

    id: int | None = None
    username: str = ""
    auth_key: str = ""
    password_hash: str = ""
    pin_hash: str = ""
    password_reset_token: str = ""
    fullname: str = ""
    email: str = ""
    handphone: str = ""
    status: str = ""
    login_dashboard: str = "N"
    dob: date | None = None
    gender: str = ""
    address: str | None = None
    country_id: str = ""
    prov_id: int | None = None
    city_id: int | None = None
    postal_code: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    verification_token: str = ""
    avatar: str = ""
    avatar_small: str = ""

    @property
    def can_login_dashboard(self) -> bool:
        return self.login_dashboard == "Y"

    def set_password(self, password: str, hasher: PasswordHasher | None = None) -> None:
        """평문 비밀번호를 해싱하여 password_hash에 저장합니다.

        Raises:
            HashError: 해싱 실패 시 (기존 값은 유지).
        """
        self.password_hash = (hasher or PasswordHasher()).hash(password)

    def set_pin(self, pin: str, hasher: PasswordHasher | None = None) -> None:
        """PIN을 해싱하여 pin_hash에 저장합니다."""
        self.pin_hash = (hasher or PasswordHasher()).hash(pin)

    def check_password(
        self, password: str, hasher: PasswordHasher | None = None
    ) -> bool:
        """비밀번호가 저장된 해시와 일치하는지 확인합니다.

        Raises:
            HashError: 저장된 해시가 손상된 경우.
        """
        return (hasher or PasswordHasher()).verify(password, self.password_hash)

    def generate_auth_key(
        self, generator: IdGenerator | None = None, length: int | None = None
    ) -> None:
        """새 인증 키를 생성하여 auth_key에 저장합니다.

        Raises:
            RandomSourceError: 난수 생성 실패 시 (기존 값은 유지).
        """
        if length is None:
            length = settings.AUTH_KEY_LENGTH
        self.auth_key = (generator or IdGenerator()).random_string(length)

    def generate_password_reset_token(self, generator: IdGenerator | None = None) -> None:
        """비밀번호 재설정 토큰(UUID v4)을 생성합니다."""
        self.password_reset_token = (generator or IdGenerator()).uuid4()

    def generate_verification_token(self, generator: IdGenerator | None = None) -> None:
        """이메일 인증 토큰(UUID v4)을 생성합니다."""
        self.verification_token = (generator or IdGenerator()).uuid4()
