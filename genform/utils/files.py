from __future__ import annotations

import mimetypes
from dataclasses import dataclass, field
from typing import Any, List


@dataclass(frozen=True)
class FileHandle:
    """A user-supplied file waiting to be uploaded.

    ``declared_size`` lets callers describe a file without holding its bytes
    (large videos are streamed by the upload collaborator).
    """

    filename: str
    content_type: str
    data: bytes = field(repr=False, default=b'')
    declared_size: int | None = None
    duration_seconds: float | None = None

    @property
    def size(self) -> int:
        if self.declared_size is not None:
            return self.declared_size
        return len(self.data)

    @property
    def extension(self) -> str:
        if '.' in self.filename:
            return self.filename.rsplit('.', 1)[-1].lower()
        guessed = mimetypes.guess_extension(self.content_type or '') or ''
        return guessed.lstrip('.') or 'bin'

    @property
    def is_video(self) -> bool:
        return (self.content_type or '').lower().startswith('video/')

    @property
    def is_image(self) -> bool:
        return (self.content_type or '').lower().startswith('image/')


def is_file(value: Any) -> bool:
    return isinstance(value, FileHandle)


def is_file_list(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and len(value) > 0 and all(isinstance(v, FileHandle) for v in value)


def iter_files(value: Any) -> List[FileHandle]:
    if isinstance(value, FileHandle):
        return [value]
    if isinstance(value, (list, tuple)):
        return [v for v in value if isinstance(v, FileHandle)]
    return []


def format_file_size(size: int) -> str:
    if size < 1024:
        return f'{size} B'
    if size < 1024 * 1024:
        return f'{size / 1024:.1f} KB'
    return f'{size / (1024 * 1024):.1f} MB'


def size_error(file: FileHandle, max_size: int) -> str | None:
    if file.size <= max_size:
        return None
    max_mb = max_size / (1024 * 1024)
    current_mb = file.size / (1024 * 1024)
    return f'File must be {max_mb:.0f}MB or less (current: {current_mb:.1f}MB)'


def duration_error(file: FileHandle, max_duration: float) -> str | None:
    if file.duration_seconds is None or file.duration_seconds <= max_duration:
        return None
    return f'Video must be {max_duration:g} seconds or less (current: {file.duration_seconds:.1f}s)'
