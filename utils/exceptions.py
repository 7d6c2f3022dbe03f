"""exceptions: 라이브러리 공통 예외 모듈.

외부 협력자(난수 소스, bcrypt, HTTP) 실패를 구분 가능한 예외로 표현합니다.
비밀번호 불일치는 예외가 아니며 False로 반환됩니다.
"""


class CommonError(Exception):
    """라이브러리 기본 예외."""


class RandomSourceError(CommonError):
    """보안 난수 소스가 요청한 바이트를 제공하지 못한 경우."""


class HashError(CommonError):
    """bcrypt 해시 생성 또는 파싱에 실패한 경우 (잘못된 해시 문자열 등)."""


class HTTPRequestError(CommonError):
    """HTTP 요청이 전송 단계에서 실패한 경우 (연결 오류, 타임아웃, 잘못된 URL 등)."""
