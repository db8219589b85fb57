"""Per-field and whole-form validation.

Errors are plain messages keyed by field name; nothing here raises for bad
input. ``validate_all`` covers the mode-required set and every value present
in the form, including stale values for fields the model no longer shows.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from genform.config import get_settings
from genform.modelspecs.base import FileConfig, ModelDescriptor, TextConfig
from genform.modelspecs.fields import FieldKind, FieldMetadata
from genform.services.resolver import resolve
from genform.utils.files import duration_error, iter_files, size_error
from genform.utils.text import is_blank


FieldErrors = Dict[str, str]

# Entries the active model does not accept are skipped.
MODE_REQUIRED_FIELDS: Dict[str, Tuple[str, ...]] = {
    'text-to-image': ('prompt',),
    'image-reference': ('prompt', 'reference_images'),
    'restyle': ('style_prompt', 'original_image'),
    'text-to-video': ('prompt',),
    'image-to-video': ('prompt', 'imageBase64'),
    'video-to-video': ('videoBase64', 'imageBase64'),
}

# Fields whose requirement is governed by the mode list alone.
_MODE_GOVERNED = frozenset({'prompt', 'style_prompt', 'reference_images', 'original_image'})

_REQUIRED_MESSAGES = {
    'reference_images': 'At least one reference image is required',
    'style_prompt': 'Style prompt is required',
    'original_image': 'Original image is required',
}


def _mode_key(mode: Any) -> str:
    return mode.value if isinstance(mode, Enum) else str(mode or '')


def required_fields(mode: Any, model: ModelDescriptor) -> List[str]:
    names = [name for name in MODE_REQUIRED_FIELDS.get(_mode_key(mode), ()) if model.accepts(name)]
    for name, config in model.field_options.items():
        if config.required and name not in _MODE_GOVERNED and name not in names:
            names.append(name)
    return names


def _required_message(name: str, metadata: FieldMetadata) -> str:
    return _REQUIRED_MESSAGES.get(name) or f'{metadata.label or name} is required'


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _option_values(name: str, model: ModelDescriptor, metadata: FieldMetadata) -> Tuple[Any, ...]:
    values = model.option_values(name)
    if values:
        return values
    return tuple(opt.value for opt in metadata.options)


def _check_options(name: str, value: Any, model: ModelDescriptor, metadata: FieldMetadata) -> Optional[str]:
    options = _option_values(name, model, metadata)
    if not options or isinstance(value, (list, tuple)):
        return None
    if str(value) not in {str(opt) for opt in options}:
        return f'Invalid {(metadata.label or name).lower()}'
    return None


def _check_text(value: str, model: ModelDescriptor, metadata: FieldMetadata, config) -> Optional[str]:
    rules = metadata.validation
    min_length = rules.min_length
    max_length = rules.resolve_max_length(model)
    if isinstance(config, TextConfig):
        min_length = config.min_length if config.min_length is not None else min_length
        max_length = config.max_length if config.max_length is not None else max_length
    if min_length is not None and len(value) < min_length:
        return f'Must be at least {min_length} characters'
    if max_length is not None and len(value) > max_length:
        return f'Must be {max_length} characters or less'
    if rules.pattern and not re.fullmatch(rules.pattern, value):
        return 'Invalid format'
    return None


def _check_number(value: Any, metadata: FieldMetadata, config) -> Optional[str]:
    number = _as_number(value)
    if number is None:
        return 'Must be a number'
    low, high = config.bounds() if config is not None else (None, None)
    if low is None:
        low = metadata.validation.min
    if high is None:
        high = metadata.validation.max
    if low is not None and number < low:
        return f'Must be at least {_format_number(low)}'
    if high is not None and number > high:
        return f'Must be at most {_format_number(high)}'
    return None


def _check_count(value: Any, metadata: FieldMetadata, config) -> Optional[str]:
    if not isinstance(value, (list, tuple)):
        return None
    min_files = metadata.validation.min_files
    max_files = metadata.validation.max_files
    if isinstance(config, FileConfig):
        min_files = config.min_files if config.min_files is not None else min_files
        max_files = config.max_files if config.max_files is not None else max_files
    if min_files is not None and len(value) < min_files:
        return f'Must have at least {min_files} items'
    if max_files is not None and len(value) > max_files:
        return f'Must have at most {max_files} items'
    return None


def _check_files(value: Any, metadata: FieldMetadata, config) -> Optional[str]:
    settings = get_settings()
    field_limit = metadata.size_limit
    if isinstance(config, FileConfig) and config.size_limit:
        field_limit = config.size_limit
    for handle in iter_files(value):
        limit = settings.upload_limit_for(handle.content_type)
        if field_limit:
            limit = min(limit, field_limit)
        error = size_error(handle, limit)
        if error:
            return error
        if metadata.validation.max_duration is not None:
            error = duration_error(handle, metadata.validation.max_duration)
            if error:
                return error
    return None


def validate_field(name: str, value: Any, mode: Any, model: ModelDescriptor) -> Optional[str]:
    metadata = resolve(name, model)
    config = model.config_for(name)

    if is_blank(value):
        if name in required_fields(mode, model):
            return _required_message(name, metadata)
        return None

    error = _check_options(name, value, model, metadata)
    if error:
        return error

    if isinstance(value, str) and metadata.kind in (FieldKind.TEXT, FieldKind.TEXTAREA):
        error = _check_text(value, model, metadata, config)
    elif metadata.kind.is_numeric and not metadata.options and not (config and config.options):
        error = _check_number(value, metadata, config)
    if error:
        return error

    error = _check_count(value, metadata, config)
    if error:
        return error

    error = _check_files(value, metadata, config)
    if error:
        return error

    if metadata.validation.custom is not None:
        return metadata.validation.custom(value, model)
    return None


def validate_all(field_values: Mapping[str, Any], mode: Any, model: ModelDescriptor) -> FieldErrors:
    errors: FieldErrors = {}
    names = required_fields(mode, model)
    for name in field_values:
        if name not in names:
            names.append(name)
    for name in names:
        error = validate_field(name, field_values.get(name), mode, model)
        if error:
            errors[name] = error
    return errors


def is_valid(field_values: Mapping[str, Any], mode: Any, model: ModelDescriptor, errors: Optional[FieldErrors] = None) -> bool:
    """No recorded errors and every mode-required field filled in."""
    if errors is None:
        errors = validate_all(field_values, mode, model)
    if errors:
        return False
    return all(not is_blank(field_values.get(name)) for name in required_fields(mode, model))
