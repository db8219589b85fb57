from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple, Union

if TYPE_CHECKING:
    from genform.modelspecs.base import FieldOption, ModelDescriptor


class FieldKind(str, Enum):
    TEXT = 'text'
    TEXTAREA = 'textarea'
    SELECT = 'select'
    TEMPLATE_SELECT = 'template-select'
    TOGGLE = 'toggle'
    SLIDER = 'slider'
    NUMBER = 'number'
    FILE_SINGLE = 'file-single'
    FILE_MULTIPLE = 'file-multiple'
    URL_ARRAY = 'url-array'

    @property
    def is_file(self) -> bool:
        return self in (FieldKind.FILE_SINGLE, FieldKind.FILE_MULTIPLE)

    @property
    def is_numeric(self) -> bool:
        return self in (FieldKind.SLIDER, FieldKind.NUMBER)


LengthLimit = Union[int, Callable[['ModelDescriptor'], int]]
CustomCheck = Callable[[Any, 'ModelDescriptor'], Optional[str]]


@dataclass(frozen=True)
class ValidationRules:
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[LengthLimit] = None
    min: Optional[float] = None
    max: Optional[float] = None
    min_files: Optional[int] = None
    max_files: Optional[int] = None
    pattern: Optional[str] = None
    max_duration: Optional[float] = None
    custom: Optional[CustomCheck] = None

    def resolve_max_length(self, model: 'ModelDescriptor') -> Optional[int]:
        if callable(self.max_length):
            return self.max_length(model)
        return self.max_length


@dataclass(frozen=True)
class ConditionalLogic:
    requires_capability: Optional[str] = None
    show_if: Optional[Callable[['ModelDescriptor'], bool]] = None
    depends_on: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FieldMetadata:
    name: str
    kind: FieldKind
    component: str
    label: str = ''
    help_text: str = ''
    placeholder: str = ''
    accept: str = ''
    preview: bool = False
    size_limit: Optional[int] = None
    backend_key: Optional[str] = None
    default: Any = None
    options: Tuple['FieldOption', ...] = ()
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    upload_to_cloud: bool = False
    reorderable: bool = False
    categories: Tuple[str, ...] = ()
    supported_tabs: Tuple[str, ...] = ()
    validation: ValidationRules = field(default_factory=ValidationRules)
    conditional: Optional[ConditionalLogic] = None

    @property
    def is_file(self) -> bool:
        return self.kind.is_file
