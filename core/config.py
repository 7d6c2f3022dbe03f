"""config: 라이브러리 기본 설정 모듈.

환경 변수(.env 포함)에서 기본값을 읽어옵니다.
각 컴포넌트는 생성자/인자로 값을 직접 주입받을 수 있으며, 여기 값은 기본값으로만 사용됩니다.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """라이브러리 설정을 관리하는 클래스.

    Attributes:
        BCRYPT_ROUNDS: bcrypt cost factor.
        HTTP_TIMEOUT_MS: HTTP 요청 기본 타임아웃 (밀리초).
        PHONE_COUNTRY_CODE: 전화번호 정규화 시 사용할 국가 코드.
        AUTH_KEY_LENGTH: 사용자 auth key 길이.
        LOG_LEVEL: setup_logging 기본 로그 레벨.
    """

    BCRYPT_ROUNDS: int = 10
    HTTP_TIMEOUT_MS: int = 10_000  # 10초

    PHONE_COUNTRY_CODE: str = "62"  # 인도네시아
    AUTH_KEY_LENGTH: int = 32

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
