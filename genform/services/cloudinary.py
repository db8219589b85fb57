from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from genform.config import Settings, get_settings
from genform.utils.files import FileHandle, size_error
from genform.utils.logging import get_logger


logger = get_logger('cloudinary')

ALLOWED_PREFIXES = ('image/', 'video/')


class UploadError(Exception):
    def __init__(self, message: str, filename: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.filename = filename
        self.status_code = status_code


@dataclass(frozen=True)
class UploadResult:
    url: str
    format: str
    public_id: str = ''
    width: Optional[int] = None
    height: Optional[int] = None


class CloudinaryUploader:
    """Unsigned uploads to Cloudinary through an upload preset."""

    def __init__(self, settings: Settings | None = None, client: httpx.AsyncClient | None = None) -> None:
        self.settings = settings or get_settings()
        self._client = client or httpx.AsyncClient(timeout=self.settings.http_timeout_seconds)

    async def close(self) -> None:
        await self._client.aclose()

    def check(self, file: FileHandle) -> None:
        content_type = (file.content_type or '').lower()
        if not content_type.startswith(ALLOWED_PREFIXES):
            raise UploadError(f'Invalid file type. Expected image or video, got: {file.content_type}', file.filename)
        error = size_error(file, self.settings.upload_limit_for(content_type))
        if error:
            raise UploadError(error, file.filename)

    async def upload(self, file: FileHandle) -> UploadResult:
        self.check(file)
        resource_type = 'video' if file.is_video else 'image'
        url = self.settings.cloudinary_upload_url(resource_type)
        data = {
            'upload_preset': self.settings.cloudinary_upload_preset,
            'folder': self.settings.cloudinary_folder,
        }
        files = {'file': (file.filename, file.data, file.content_type)}
        logger.info('upload_start', filename=file.filename, size=file.size, resource_type=resource_type)
        try:
            resp = await self._client.post(url, data=data, files=files)
        except httpx.HTTPError as exc:
            raise UploadError(f'Cloudinary upload failed: {exc}', file.filename) from exc
        if resp.status_code >= 400:
            raise UploadError(
                f'Cloudinary upload error {resp.status_code}: {resp.text}',
                file.filename,
                resp.status_code,
            )
        return self.parse_response(resp.json(), file)

    @staticmethod
    def parse_response(payload: Dict[str, Any], file: FileHandle) -> UploadResult:
        url = str(payload.get('secure_url') or payload.get('url') or '').strip()
        if not url:
            raise UploadError('Cloudinary response did not include a URL', file.filename)
        return UploadResult(
            url=url,
            format=str(payload.get('format') or file.extension),
            public_id=str(payload.get('public_id') or ''),
            width=payload.get('width'),
            height=payload.get('height'),
        )
