from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from genform.utils.files import FileHandle
from genform.utils.time import utcnow


@dataclass
class Draft:
    model_id: Optional[str]
    tab: Optional[str]
    field_values: Dict[str, Any] = field(default_factory=dict)
    recent_models: List[str] = field(default_factory=list)
    favorite_models: List[str] = field(default_factory=list)
    saved_at: Any = field(default_factory=utcnow)


def _json_safe(value: Any) -> bool:
    if value is None or isinstance(value, (str, int, float, bool)):
        return True
    if isinstance(value, FileHandle):
        return False
    if isinstance(value, (list, tuple)):
        return all(_json_safe(item) for item in value)
    if isinstance(value, dict):
        return all(isinstance(k, str) and _json_safe(v) for k, v in value.items())
    return False


def persistable_values(field_values: Dict[str, Any]) -> Dict[str, Any]:
    """Drop anything that cannot be stored as JSON; file handles never persist."""
    return {name: copy.deepcopy(value) for name, value in field_values.items() if _json_safe(value)}


class InMemoryDraftStore:
    def __init__(self) -> None:
        self._drafts: Dict[str, Draft] = {}

    def save(self, namespace: str, draft: Draft) -> None:
        self._drafts[namespace] = copy.deepcopy(draft)

    def load(self, namespace: str) -> Optional[Draft]:
        draft = self._drafts.get(namespace)
        return copy.deepcopy(draft) if draft is not None else None

    def clear(self, namespace: str) -> None:
        self._drafts.pop(namespace, None)
