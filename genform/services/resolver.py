"""Field metadata lookup.

``resolve`` is total: every name resolves to something renderable. The lookup
order is the static registry, then the model's own configuration for the
field, then a guess from the field name, and finally a plain text input.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from genform.modelspecs.base import (
    FieldConfiguration,
    FileConfig,
    ModelDescriptor,
    SliderConfig,
    TextConfig,
    UrlArrayConfig,
)
from genform.modelspecs.field_registry import IMAGE_SIZE_LIMIT, VIDEO_SIZE_LIMIT, get_registered_field
from genform.modelspecs.fields import FieldKind, FieldMetadata, ValidationRules
from genform.utils.text import humanize_field_name


_COMPONENTS = {
    FieldKind.TEXT: 'TextInput',
    FieldKind.TEXTAREA: 'PromptTextarea',
    FieldKind.SELECT: 'SelectField',
    FieldKind.TEMPLATE_SELECT: 'SelectField',
    FieldKind.TOGGLE: 'ToggleField',
    FieldKind.SLIDER: 'SliderField',
    FieldKind.NUMBER: 'NumberField',
    FieldKind.FILE_SINGLE: 'ImageUploadField',
    FieldKind.FILE_MULTIPLE: 'MultiImageUploadField',
    FieldKind.URL_ARRAY: 'TailImageUrlField',
}
_TOGGLE_PREFIXES = ('is', 'enable', 'has', 'use')


def resolve(field_name: str, model: Optional[ModelDescriptor] = None) -> FieldMetadata:
    registered = get_registered_field(field_name)
    if registered is not None:
        return registered

    config = model.config_for(field_name) if model is not None else None
    if config is not None:
        synthesized = _from_config(field_name, config)
        if synthesized is not None:
            return synthesized
        return _overlay(infer_from_name(field_name), config)

    return infer_from_name(field_name)


def _sniff_kind(config: FieldConfiguration) -> Optional[FieldKind]:
    if config.kind is not None:
        return config.kind
    if config.options:
        return FieldKind.SELECT
    if isinstance(config.default, bool):
        return FieldKind.TOGGLE
    low, high = config.bounds()
    if low is not None or high is not None:
        return FieldKind.SLIDER
    return None


def _from_config(field_name: str, config: FieldConfiguration) -> Optional[FieldMetadata]:
    kind = _sniff_kind(config)
    if kind is None:
        return None

    low, high = config.bounds()
    rules = ValidationRules(min=low, max=high)
    extra = {}
    if isinstance(config, SliderConfig):
        extra['step'] = config.step
    if isinstance(config, TextConfig):
        rules = ValidationRules(min_length=config.min_length, max_length=config.max_length)
    if isinstance(config, FileConfig):
        rules = ValidationRules(min_files=config.min_files, max_files=config.max_files)
        extra['accept'] = config.accept
        extra['preview'] = True
        extra['size_limit'] = config.size_limit or _default_size_limit(config.accept)
    if isinstance(config, UrlArrayConfig):
        rules = ValidationRules(max_files=config.max_items)

    component = _COMPONENTS[kind]
    if kind == FieldKind.FILE_SINGLE and extra.get('accept', '').startswith('video/'):
        component = 'VideoUploadField'

    return FieldMetadata(
        name=field_name,
        kind=kind,
        component=component,
        label=config.label or humanize_field_name(field_name),
        help_text=config.help_text,
        placeholder=config.placeholder,
        backend_key=config.backend_key,
        default=config.default,
        options=config.options,
        min=low,
        max=high,
        conditional=config.conditional,
        validation=rules,
        **extra,
    )


def _overlay(metadata: FieldMetadata, config: FieldConfiguration) -> FieldMetadata:
    return replace(
        metadata,
        label=config.label or metadata.label,
        help_text=config.help_text or metadata.help_text,
        placeholder=config.placeholder or metadata.placeholder,
        default=config.default,
        backend_key=config.backend_key,
        conditional=config.conditional,
    )


def _default_size_limit(accept: str) -> int:
    return VIDEO_SIZE_LIMIT if accept.startswith('video/') else IMAGE_SIZE_LIMIT


def infer_from_name(field_name: str) -> FieldMetadata:
    label = humanize_field_name(field_name)
    lower = field_name.lower()

    if 'image' in lower or 'photo' in lower:
        return FieldMetadata(
            name=field_name,
            kind=FieldKind.FILE_SINGLE,
            component='ImageUploadField',
            label=label,
            accept='image/*',
            preview=True,
            size_limit=IMAGE_SIZE_LIMIT,
        )
    if 'video' in lower:
        return FieldMetadata(
            name=field_name,
            kind=FieldKind.FILE_SINGLE,
            component='VideoUploadField',
            label=label,
            accept='video/*',
            preview=True,
            size_limit=VIDEO_SIZE_LIMIT,
        )
    if 'prompt' in lower:
        return FieldMetadata(name=field_name, kind=FieldKind.TEXTAREA, component='PromptTextarea', label=label)
    if lower.startswith(_TOGGLE_PREFIXES):
        return FieldMetadata(name=field_name, kind=FieldKind.TOGGLE, component='ToggleField', label=label)
    return FieldMetadata(name=field_name, kind=FieldKind.TEXT, component='TextInput', label=label)
