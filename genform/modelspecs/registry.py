from __future__ import annotations

from enum import Enum
from typing import Dict, List

from genform.modelspecs import images, kling, ltxv, luma, minimax, pika, pixverse, runway, seedance, sora, veo, vidu, wan
from genform.modelspecs.base import ModelDescriptor
from genform.modelspecs.field_registry import is_field_registered, registered_fields


_FAMILIES = (veo, sora, kling, luma, minimax, pika, pixverse, seedance, ltxv, wan, vidu, runway, images)


def _build() -> Dict[str, ModelDescriptor]:
    specs: Dict[str, ModelDescriptor] = {}
    for family in _FAMILIES:
        for model in family.MODELS:
            if model.id in specs:
                raise ValueError(f'duplicate model id {model.id!r}')
            specs[model.id] = model
    return specs


MODEL_SPECS: Dict[str, ModelDescriptor] = _build()


def list_models() -> List[ModelDescriptor]:
    return list(MODEL_SPECS.values())


def get_model(model_id: str) -> ModelDescriptor | None:
    return MODEL_SPECS.get(model_id)


def models_for_tab(tab: str) -> List[ModelDescriptor]:
    key = tab.value if isinstance(tab, Enum) else tab
    return [model for model in MODEL_SPECS.values() if key in model.tabs]


def models_with_capability(name: str) -> List[ModelDescriptor]:
    return [model for model in MODEL_SPECS.values() if model.capabilities.get(name)]


__all__ = [
    'MODEL_SPECS',
    'get_model',
    'is_field_registered',
    'list_models',
    'models_for_tab',
    'models_with_capability',
    'registered_fields',
]
