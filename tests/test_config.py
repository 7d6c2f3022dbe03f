"""test_config: 설정 및 로거 단위 테스트."""

import logging

from core.config import Settings
from core.logger import LOG_FORMAT, PACKAGE_LOGGERS, setup_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("BCRYPT_ROUNDS", "HTTP_TIMEOUT_MS", "PHONE_COUNTRY_CODE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.BCRYPT_ROUNDS == 10
        assert settings.HTTP_TIMEOUT_MS == 10000
        assert settings.PHONE_COUNTRY_CODE == "62"
        assert settings.AUTH_KEY_LENGTH == 32

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("BCRYPT_ROUNDS", "12")
        monkeypatch.setenv("PHONE_COUNTRY_CODE", "82")

        settings = Settings(_env_file=None)

        assert settings.BCRYPT_ROUNDS == 12
        assert settings.PHONE_COUNTRY_CODE == "82"


class TestSetupLogging:
    def test_configures_package_loggers(self):
        loggers = setup_logging("debug")

        assert [logger.name for logger in loggers] == list(PACKAGE_LOGGERS)
        for logger in loggers:
            assert logger.level == logging.DEBUG
            assert logger.handlers[0].formatter._fmt == LOG_FORMAT

    def test_idempotent(self):
        setup_logging()
        setup_logging()

        for name in PACKAGE_LOGGERS:
            assert len(logging.getLogger(name).handlers) == 1
