from __future__ import annotations

import re


_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')


def humanize_field_name(field_name: str) -> str:
    """``aspectRatio`` and ``aspect_ratio`` both become ``Aspect Ratio``."""
    spaced = _CAMEL_BOUNDARY.sub(' ', field_name).replace('_', ' ')
    words = [w for w in spaced.split(' ') if w]
    return ' '.join(w[:1].upper() + w[1:].lower() for w in words)


def clamp_text(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 1] + '...'


def is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False
