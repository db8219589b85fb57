from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from genform.modelspecs.base import ModelDescriptor
from genform.modelspecs.fields import FieldKind
from genform.services.resolver import resolve
from genform.utils.logging import get_logger


logger = get_logger('defaults')

FieldValues = Dict[str, Any]

# UI names some models expose in place of the backend's canonical names.
FIELD_ALIASES: Dict[str, str] = {
    'quantity': 'num_images',
    'output_quality': 'quality',
}

_TRUE_STRINGS = {'true', '1', 'yes', 'on'}
_FALSE_STRINGS = {'false', '0', 'no', 'off'}


def settings_fields(model: ModelDescriptor) -> List[str]:
    names = list(model.fields)
    for name in model.field_options:
        if name not in names:
            names.append(name)
    return names


def compute_defaults(model: ModelDescriptor) -> FieldValues:
    values: FieldValues = {}
    for name, config in model.field_options.items():
        if config.has_default:
            values[name] = config.default
    return values


def _declared_default(name: str, model: ModelDescriptor) -> Any:
    config = model.config_for(name)
    if config is not None and config.has_default:
        return config.default
    return resolve(name, model).default


def _first_option(name: str, model: ModelDescriptor) -> Any:
    options = model.option_values(name)
    if not options:
        options = tuple(opt.value for opt in resolve(name, model).options)
    return options[0] if options else None


def apply_defaults(field_values: Mapping[str, Any], model: ModelDescriptor) -> FieldValues:
    """Fill fields the model accepts but ``field_values`` leaves unset.

    ``None`` counts as unset. Each missing field takes its declared default,
    else the first declared option, else stays absent. Values already present
    are never touched, so applying this twice changes nothing.
    """
    filled: FieldValues = dict(field_values)
    for name in settings_fields(model):
        if filled.get(name) is not None:
            continue
        value = _declared_default(name, model)
        if value is None:
            value = _first_option(name, model)
        if value is not None:
            filled[name] = value
    return filled


def field_default(name: str, model: ModelDescriptor) -> Any:
    declared = _declared_default(name, model)
    if declared is not None:
        return declared

    metadata = resolve(name, model)
    kind = metadata.kind
    if kind in (FieldKind.TEXT, FieldKind.TEXTAREA):
        return ''
    if kind == FieldKind.TOGGLE:
        return False
    if kind.is_numeric:
        config = model.config_for(name)
        low = config.bounds()[0] if config is not None else None
        if low is None:
            low = metadata.min
        return low if low is not None else 0
    if kind in (FieldKind.FILE_MULTIPLE, FieldKind.URL_ARRAY):
        return []
    return None


def _parse_number(raw: str) -> Optional[float]:
    try:
        number = float(raw)
    except ValueError:
        return None
    return int(number) if number.is_integer() else number


def coerce_value(name: str, value: Any, model: ModelDescriptor) -> Any:
    """Best-effort conversion of form input to the field's natural type.

    Numeric fields parse numeric strings, toggles accept the usual boolean
    spellings. Anything unparseable is returned unchanged for the validator
    to report.
    """
    if value is None:
        return None
    kind = resolve(name, model).kind
    if kind.is_numeric and isinstance(value, str):
        parsed = _parse_number(value.strip())
        return value if parsed is None else parsed
    if kind == FieldKind.TOGGLE and isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return value


def coerce_values(field_values: Mapping[str, Any], model: ModelDescriptor) -> FieldValues:
    return {name: coerce_value(name, value, model) for name, value in field_values.items()}


def resolve_backend_key(name: str, model: Optional[ModelDescriptor] = None) -> str:
    config = model.config_for(name) if model is not None else None
    if config is not None and config.backend_key:
        return config.backend_key
    metadata = resolve(name, model)
    if metadata.backend_key:
        return metadata.backend_key
    return FIELD_ALIASES.get(name, name)


def normalize_field_names(field_values: Mapping[str, Any], model: Optional[ModelDescriptor] = None) -> FieldValues:
    normalized: FieldValues = {}
    for name, value in field_values.items():
        key = resolve_backend_key(name, model)
        if key in normalized:
            logger.debug('backend_key_conflict', field=name, backend_key=key)
        normalized[key] = value
    return normalized
