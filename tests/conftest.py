from __future__ import annotations

from typing import Any, Dict, List

import pytest

from genform.services.cloudinary import UploadError, UploadResult
from genform.services.drafts import InMemoryDraftStore
from genform.services.fal_client import InferenceError, InferenceResult
from genform.utils.files import FileHandle


MB = 1024 * 1024


class FakeUploader:
    """Records uploads and hands back predictable URLs."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.uploaded: List[str] = []

    async def upload(self, file: FileHandle) -> UploadResult:
        if file.filename == self.fail_on:
            raise UploadError('Cloudinary upload error 500: boom', file.filename, 500)
        self.uploaded.append(file.filename)
        return UploadResult(url=f'https://cdn.test/{file.filename}', format=file.extension)


class FakeInference:
    def __init__(self, result: InferenceResult | None = None, error: Exception | None = None) -> None:
        self.result = result or InferenceResult(success=True, result_urls=['https://out.test/result.png'])
        self.error = error
        self.calls: List[tuple] = []

    async def generate(self, endpoint: str, params: Dict[str, Any]) -> InferenceResult:
        self.calls.append((endpoint, params))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def uploader() -> FakeUploader:
    return FakeUploader()


@pytest.fixture
def inference() -> FakeInference:
    return FakeInference()


@pytest.fixture
def failing_inference() -> FakeInference:
    return FakeInference(error=InferenceError('fal error 503: unavailable', 503))


@pytest.fixture
def draft_store() -> InMemoryDraftStore:
    return InMemoryDraftStore()


@pytest.fixture
def png() -> FileHandle:
    return FileHandle(filename='cat.png', content_type='image/png', data=b'\x89PNG' + b'0' * 64)


@pytest.fixture
def second_png() -> FileHandle:
    return FileHandle(filename='dog.png', content_type='image/png', data=b'\x89PNG' + b'1' * 64)


@pytest.fixture
def large_png() -> FileHandle:
    return FileHandle(filename='huge.png', content_type='image/png', declared_size=15 * MB)


@pytest.fixture
def clip() -> FileHandle:
    return FileHandle(filename='clip.mp4', content_type='video/mp4', declared_size=20 * MB, duration_seconds=8)


@pytest.fixture
def failing_uploader() -> FakeUploader:
    return FakeUploader(fail_on='dog.png')


@pytest.fixture
def rejecting_inference() -> FakeInference:
    return FakeInference(result=InferenceResult(success=False, error='Content policy violation'))


@pytest.fixture
def crashing_inference() -> FakeInference:
    return FakeInference(error=RuntimeError('socket closed'))
