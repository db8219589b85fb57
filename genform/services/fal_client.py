from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from genform.config import Settings, get_settings
from genform.utils.logging import get_logger


logger = get_logger('fal')


class InferenceError(Exception):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class InferenceResult:
    success: bool
    result_urls: List[str] = field(default_factory=list)
    error: Optional[str] = None
    request_id: Optional[str] = None


class FalClient:
    def __init__(self, settings: Settings | None = None, client: httpx.AsyncClient | None = None) -> None:
        self.settings = settings or get_settings()
        self.base_url = self.settings.fal_base_url.rstrip('/')
        self.api_key = self.settings.fal_api_key
        self._client = client or httpx.AsyncClient(timeout=self.settings.http_timeout_seconds)

    async def close(self) -> None:
        await self._client.aclose()

    def _headers(self) -> Dict[str, str]:
        return {
            'Authorization': f'Key {self.api_key}',
            'Content-Type': 'application/json',
        }

    async def generate(self, endpoint: str, params: Dict[str, Any]) -> InferenceResult:
        url = f'{self.base_url}/{endpoint.lstrip("/")}'
        logger.info('inference_request', endpoint=endpoint, params=sorted(params))
        try:
            resp = await self._client.post(url, headers=self._headers(), json=params)
        except httpx.HTTPError as exc:
            raise InferenceError(f'fal request failed: {exc}') from exc
        logger.info('inference_response', endpoint=endpoint, status=resp.status_code)
        if resp.status_code >= 400:
            raise InferenceError(f'fal error {resp.status_code}: {resp.text}', resp.status_code)

        try:
            record = resp.json()
        except ValueError as exc:
            logger.warning('inference_bad_body', endpoint=endpoint, error=str(exc))
            raise InferenceError(f'fal returned a non-JSON response: {resp.text[:200]}', resp.status_code) from exc
        if not isinstance(record, dict):
            raise InferenceError(f'fal returned an unexpected response: {type(record).__name__}', resp.status_code)
        urls = self.parse_result_urls(record)
        request_id = resp.headers.get('x-fal-request-id') or record.get('request_id')
        if not urls:
            message = self.get_error(record) or 'No results returned'
            return InferenceResult(success=False, error=message, request_id=request_id)
        return InferenceResult(success=True, result_urls=urls, request_id=request_id)

    @staticmethod
    def get_error(record: Dict[str, Any]) -> Optional[str]:
        detail = record.get('detail') or record.get('error') or record.get('message')
        if isinstance(detail, list) and detail:
            first = detail[0]
            detail = first.get('msg') if isinstance(first, dict) else first
        return str(detail) if detail else None

    def parse_result_urls(self, record: Dict[str, Any]) -> List[str]:
        urls: List[str] = []

        def extend_from(value: Any) -> None:
            if isinstance(value, str):
                cleaned = value.strip()
                if cleaned:
                    urls.append(cleaned)
                return
            if isinstance(value, dict):
                extend_from(value.get('url'))
                return
            if isinstance(value, list):
                for item in value:
                    extend_from(item)

        extend_from(record.get('images'))
        extend_from(record.get('image'))
        extend_from(record.get('video'))
        extend_from(record.get('videos'))

        output = record.get('output')
        if isinstance(output, dict):
            extend_from(output.get('images'))
            extend_from(output.get('image'))
            extend_from(output.get('video'))
            extend_from(output.get('videos'))
        else:
            extend_from(output)

        # Preserve order while removing duplicates.
        return list(dict.fromkeys(urls))
