"""formatters: 날짜/시간 포맷팅 및 변환 유틸리티 모듈."""

import re
from datetime import datetime, tzinfo

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# strptime은 0 패딩 없는 필드와 콜론 없는 오프셋(+0700)도 받아들이므로 형태를 먼저 고정한다
_DATETIME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}")
_TZ_DATETIME_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}"
    r"(?:T\d{2}:\d{2}:\d{2}(?:\.\d{1,6})?(?:Z|[+-]\d{2}:\d{2})"
    r"| \d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2})"
)

# 타임존 오프셋이 포함된 입력 형식 (RFC 3339, 공백 구분 형식)
_TZ_LAYOUTS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%d %H:%M:%S%z",
)


def time_to_string(dt: datetime) -> str:
    """datetime 객체를 "YYYY-MM-DD HH:MM:SS" 문자열로 변환합니다.

    Args:
        dt: 변환할 datetime 객체.

    Returns:
        포맷된 문자열 (예: "2023-10-01 12:34:56").
    """
    return dt.strftime(DATETIME_FORMAT)


def string_to_time(value: str) -> datetime:
    """"YYYY-MM-DD HH:MM:SS" 문자열을 datetime 객체로 변환합니다.

    Args:
        value: 변환할 문자열.

    Returns:
        타임존 정보가 없는 datetime 객체.

    Raises:
        ValueError: 형식이 맞지 않거나 빈 문자열인 경우.
    """
    if not _DATETIME_PATTERN.fullmatch(value):
        raise ValueError(f"지원하지 않는 datetime 형식: {value!r}")
    return datetime.strptime(value, DATETIME_FORMAT)


def to_local_time(dt: datetime, tz: tzinfo | None = None) -> datetime:
    """datetime 객체를 로컬 타임존으로 변환합니다.

    타임존 정보가 없는 값은 서버 로컬 시간으로 간주합니다.

    Args:
        dt: 변환할 datetime 객체.
        tz: 대상 타임존 (기본값: 서버 로컬 타임존).

    Returns:
        대상 타임존의 datetime 객체.
    """
    return dt.astimezone(tz)


def string_with_tz_to_local_time(value: str, tz: tzinfo | None = None) -> datetime:
    """타임존이 포함된 datetime 문자열을 로컬 타임존으로 변환합니다.

    지원 형식: "2023-10-01T12:34:56+07:00", "2023-10-01T05:34:56Z",
    "2023-10-01 12:34:56-07:00".

    Args:
        value: 변환할 문자열.
        tz: 대상 타임존 (기본값: 서버 로컬 타임존).

    Returns:
        대상 타임존의 datetime 객체.

    Raises:
        ValueError: 지원하는 형식과 일치하지 않는 경우.
    """
    if not _TZ_DATETIME_PATTERN.fullmatch(value):
        raise ValueError(f"지원하지 않는 datetime 형식: {value!r}")
    for layout in _TZ_LAYOUTS:
        try:
            parsed = datetime.strptime(value, layout)
        except ValueError:
            continue
        return parsed.astimezone(tz)
    raise ValueError(f"지원하지 않는 datetime 형식: {value!r}")


def current_local_time(tz: tzinfo | None = None) -> datetime:
    """현재 시각을 로컬 타임존으로 반환합니다."""
    return datetime.now(tz).astimezone(tz)


def float_or_zero(value: float | None) -> float:
    """None이면 0.0, 아니면 값을 그대로 반환합니다."""
    if value is None:
        return 0.0
    return value
