"""phone: 전화번호 정규화 유틸리티 모듈.

숫자 이외의 문자를 제거하고 국가 코드(기본값 "62")로 시작하는 국제 형식으로 맞춥니다.

Examples:
    >>> normalize_phone_number("+62 812-3456-7890")
    '6281234567890'
    >>> normalize_phone_number("081234567890")
    '6281234567890'
    >>> normalize_phone_number("81234567890")
    '6281234567890'
"""

from core.config import settings


def normalize_phone_number(phone: str, country_code: str | None = None) -> str:
    """전화번호를 국가 코드로 시작하는 숫자 문자열로 정규화합니다.

    규칙:
        - 국가 코드로 시작하면 그대로 반환
        - "0"으로 시작하면 "0"을 국가 코드로 교체
        - "8"로 시작하면 앞에 국가 코드 추가
        - 그 외에는 숫자만 남긴 문자열을 그대로 반환 (숫자가 없으면 빈 문자열)

    Args:
        phone: 입력 전화번호 (하이픈, 공백, 괄호, "+" 등 허용).
        country_code: 국가 코드 (기본값: settings.PHONE_COUNTRY_CODE).

    Returns:
        정규화된 전화번호.
    """
    code = settings.PHONE_COUNTRY_CODE if country_code is None else country_code
    digits = "".join(ch for ch in phone if ch.isdecimal())

    if digits.startswith(code):
        return digits
    if digits.startswith("0"):
        return code + digits[1:]
    if digits.startswith("8"):
        return code + digits
    return digits
