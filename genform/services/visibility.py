from __future__ import annotations

from enum import Enum
from typing import List, Optional

from genform.modelspecs.base import ModelDescriptor
from genform.modelspecs.fields import ConditionalLogic
from genform.services.resolver import resolve


def _conditional_for(field_name: str, model: ModelDescriptor) -> Optional[ConditionalLogic]:
    config = model.config_for(field_name)
    if config is not None and config.conditional is not None:
        return config.conditional
    return resolve(field_name, model).conditional


def _passes(conditional: Optional[ConditionalLogic], model: ModelDescriptor) -> bool:
    if conditional is None:
        return True
    if conditional.requires_capability and not model.capabilities.get(conditional.requires_capability):
        return False
    if conditional.show_if is not None and not conditional.show_if(model):
        return False
    return True


def is_visible(field_name: str, model: ModelDescriptor, tab: Optional[str] = None) -> bool:
    return field_name in visible_fields(model, tab)


def visible_fields(model: ModelDescriptor, tab: Optional[str] = None) -> List[str]:
    """Fields of ``model`` the form should currently show, in declaration order.

    Capability and predicate gates come from the field's conditional block.
    Configurations marked ``hidden`` never show. When ``tab`` is given, fields
    scoped to other tabs (``style_prompt`` outside restyle, for example) drop out.
    A field that ``depends_on`` another is shown only alongside it.
    """
    tab_key = tab.value if isinstance(tab, Enum) else tab
    shown: List[str] = []
    deferred = []
    for name in model.fields:
        config = model.config_for(name)
        if config is not None and config.hidden:
            continue
        metadata = resolve(name, model)
        if tab_key and metadata.supported_tabs and tab_key not in metadata.supported_tabs:
            continue
        conditional = _conditional_for(name, model)
        if not _passes(conditional, model):
            continue
        if conditional is not None and conditional.depends_on:
            deferred.append((name, conditional.depends_on))
        shown.append(name)

    for name, depends_on in deferred:
        if any(dep not in shown for dep in depends_on):
            shown.remove(name)
    return shown
