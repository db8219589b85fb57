from __future__ import annotations

from typing import Iterable, List, Optional

from genform.config import get_settings


class ModelPreferences:
    """Recently used and favorite model ids for one session."""

    def __init__(self, limit: Optional[int] = None) -> None:
        self.limit = limit if limit is not None else get_settings().recent_models_limit
        self.recent: List[str] = []
        self.favorites: List[str] = []

    def add_recent(self, model_id: str) -> None:
        self.recent = [model_id] + [mid for mid in self.recent if mid != model_id]
        del self.recent[self.limit:]

    def clear_recent(self) -> None:
        self.recent = []

    def toggle_favorite(self, model_id: str) -> bool:
        if model_id in self.favorites:
            self.favorites.remove(model_id)
            return False
        self.favorites.append(model_id)
        return True

    def is_favorite(self, model_id: str) -> bool:
        return model_id in self.favorites

    def restore(self, recent: Iterable[str], favorites: Iterable[str]) -> None:
        self.recent = []
        for model_id in reversed(list(recent)):
            self.add_recent(model_id)
        self.favorites = list(dict.fromkeys(favorites))
