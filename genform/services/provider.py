from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

from genform.services.cloudinary import UploadResult
from genform.services.drafts import Draft
from genform.services.fal_client import InferenceResult
from genform.utils.files import FileHandle


class UploadClient(Protocol):
    async def upload(self, file: FileHandle) -> UploadResult:
        ...


class InferenceClient(Protocol):
    async def generate(self, endpoint: str, params: Dict[str, Any]) -> InferenceResult:
        ...


class DraftStore(Protocol):
    def save(self, namespace: str, draft: Draft) -> None:
        ...

    def load(self, namespace: str) -> Optional[Draft]:
        ...

    def clear(self, namespace: str) -> None:
        ...
