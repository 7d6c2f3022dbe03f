"""http_client: JSON HTTP 요청 유틸리티 모듈.

httpx.AsyncClient를 감싸 응답 본문(bytes)과 상태 코드를 반환합니다.
4xx/5xx 응답은 예외가 아니라 상태 코드로 전달되며,
전송 단계 실패(연결 오류, 타임아웃, 잘못된 URL)만 HTTPRequestError로 변환합니다.
"""

import json
import logging
from typing import Any, Mapping

import httpx

from core.config import settings
from utils.exceptions import HTTPRequestError

logger = logging.getLogger(__name__)

_JSON_CONTENT_TYPE = "application/json"


class HTTPClient:
    """비동기 JSON HTTP 클라이언트.

    Args:
        timeout_ms: 기본 타임아웃 (밀리초, 기본값: settings.HTTP_TIMEOUT_MS).
        transport: httpx 트랜스포트 (테스트에서 httpx.MockTransport 주입용).
    """

    def __init__(
        self,
        timeout_ms: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout_ms = settings.HTTP_TIMEOUT_MS if timeout_ms is None else timeout_ms
        self.transport = transport

    async def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: bytes | None = None,
        timeout_ms: int | None = None,
    ) -> tuple[bytes, int]:
        """HTTP 요청을 전송합니다.

        Args:
            method: HTTP 메서드 (예: "GET", "POST").
            url: 요청 URL.
            headers: 요청 헤더 (선택).
            body: 요청 본문 (선택).
            timeout_ms: 이번 요청의 타임아웃 (밀리초, 선택).

        Returns:
            (응답 본문, 상태 코드) 튜플.

        Raises:
            HTTPRequestError: 연결 실패, 타임아웃, 잘못된 URL 등.
        """
        if timeout_ms is None:
            timeout_ms = self.timeout_ms
        timeout = httpx.Timeout(timeout_ms / 1000)
        try:
            async with httpx.AsyncClient(
                timeout=timeout, transport=self.transport
            ) as client:
                response = await client.request(
                    method, url, headers=dict(headers or {}), content=body
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"HTTP 요청 실패: {method} {url} ({type(e).__name__})")
            raise HTTPRequestError(f"HTTP 요청 실패: {method} {url}: {e}") from e

        logger.debug(f"{method} {url} - Status: {response.status_code}")
        return response.content, response.status_code

    async def get_json(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        timeout_ms: int | None = None,
    ) -> tuple[bytes, int]:
        """Accept: application/json 헤더를 붙여 GET 요청을 전송합니다."""
        merged = dict(headers or {})
        merged["Accept"] = _JSON_CONTENT_TYPE
        return await self.request("GET", url, merged, None, timeout_ms)

    async def post_json(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        timeout_ms: int | None = None,
    ) -> tuple[bytes, int]:
        """본문을 JSON으로 인코딩하여 POST 요청을 전송합니다.

        Content-Type과 Accept 헤더를 application/json으로 설정합니다.

        Raises:
            HTTPRequestError: 본문을 JSON으로 직렬화할 수 없거나 요청이 실패한 경우.
        """
        try:
            payload = json.dumps(body).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise HTTPRequestError(f"요청 본문 JSON 직렬화 실패: {e}") from e

        merged = dict(headers or {})
        merged["Content-Type"] = _JSON_CONTENT_TYPE
        merged["Accept"] = _JSON_CONTENT_TYPE
        return await self.request("POST", url, merged, payload, timeout_ms)
