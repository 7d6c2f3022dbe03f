# logger: 패키지 공통 로거 설정
# 핸들러는 패키지별로 최초 호출 시 한 번만 붙인다.

import logging

from core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# 각 모듈은 logging.getLogger(__name__)을 사용하므로 최상위 패키지 로거에 핸들러를 붙인다
PACKAGE_LOGGERS = ("core", "utils", "models", "services")


def setup_logging(level: str | None = None) -> list[logging.Logger]:
    """패키지 로거들을 설정하고 반환합니다.

    여러 번 호출해도 핸들러가 중복으로 추가되지 않습니다.

    Args:
        level: 로그 레벨 이름 (기본값: settings.LOG_LEVEL).

    Returns:
        설정된 로거 목록.
    """
    if level is None:
        level = settings.LOG_LEVEL
    level_name = level.upper()
    loggers = []
    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level_name)

        # 콘솔 핸들러 추가 (없는 경우)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)

        loggers.append(logger)
    return loggers
