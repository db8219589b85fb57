"""Request payload assembly.

The steps run in a fixed order: fill defaults, upload pending files, rename
fields to their backend keys, then drop empty values.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Mapping, Tuple

from genform.modelspecs.base import ModelDescriptor
from genform.services.cloudinary import UploadError
from genform.services.defaults import apply_defaults, coerce_values, normalize_field_names
from genform.services.provider import UploadClient
from genform.utils.files import FileHandle, iter_files
from genform.utils.logging import get_logger


logger = get_logger('params')


def has_pending_files(field_values: Mapping[str, Any]) -> bool:
    return any(iter_files(value) for value in field_values.values())


def clean(params: Mapping[str, Any]) -> Dict[str, Any]:
    cleaned: Dict[str, Any] = {}
    for key, value in params.items():
        if value is None or value == '':
            continue
        if isinstance(value, (list, tuple)) and len(value) == 0:
            continue
        cleaned[key] = value
    return cleaned


def prepare(field_values: Mapping[str, Any], model: ModelDescriptor) -> Dict[str, Any]:
    return coerce_values(apply_defaults(field_values, model), model)


def finalize(field_values: Mapping[str, Any], model: ModelDescriptor) -> Dict[str, Any]:
    return clean(normalize_field_names(field_values, model))


async def _upload_one(uploader: UploadClient, field_name: str, handle: FileHandle) -> str:
    try:
        result = await uploader.upload(handle)
    except UploadError as exc:
        raise UploadError(f'Failed to upload {field_name}: {exc}', handle.filename, exc.status_code) from exc
    except Exception as exc:
        raise UploadError(f'Failed to upload {field_name}: {exc}', handle.filename) from exc
    return result.url


async def upload_files(field_values: Mapping[str, Any], uploader: UploadClient) -> Dict[str, Any]:
    """Replace every file handle with its uploaded URL.

    All files of the submission upload concurrently. If any one fails the
    whole step fails with the first error in field order and nothing
    partially uploaded is returned.
    """
    jobs: List[Tuple[str, int, FileHandle]] = []
    for name, value in field_values.items():
        for index, handle in enumerate(iter_files(value)):
            jobs.append((name, index, handle))

    resolved: Dict[str, Any] = dict(field_values)
    if not jobs:
        return resolved

    logger.info('upload_fanout', files=len(jobs), fields=sorted({name for name, _, _ in jobs}))
    results = await asyncio.gather(
        *(_upload_one(uploader, name, handle) for name, _, handle in jobs),
        return_exceptions=True,
    )
    for (name, _, handle), outcome in zip(jobs, results):
        if isinstance(outcome, BaseException):
            logger.warning('upload_failed', field=name, filename=handle.filename, error=str(outcome))
            raise outcome

    urls: Dict[str, List[str]] = {}
    for (name, _, _), url in zip(jobs, results):
        urls.setdefault(name, []).append(url)
    for name, field_urls in urls.items():
        if isinstance(field_values[name], FileHandle):
            resolved[name] = field_urls[0]
        else:
            # Keep already-uploaded URLs that sat alongside the new files.
            existing = [item for item in field_values[name] if not isinstance(item, FileHandle)]
            resolved[name] = existing + field_urls
    return resolved


async def build(model: ModelDescriptor, field_values: Mapping[str, Any], uploader: UploadClient) -> Dict[str, Any]:
    prepared = prepare(field_values, model)
    uploaded = await upload_files(prepared, uploader)
    return finalize(uploaded, model)
