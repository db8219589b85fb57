from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from genform.modelspecs.fields import ConditionalLogic, FieldKind


class GenerationMode(str, Enum):
    TEXT_TO_IMAGE = 'text-to-image'
    IMAGE_REFERENCE = 'image-reference'
    RESTYLE = 'restyle'
    TEXT_TO_VIDEO = 'text-to-video'
    IMAGE_TO_VIDEO = 'image-to-video'
    VIDEO_TO_VIDEO = 'video-to-video'


@dataclass(frozen=True)
class FieldOption:
    value: Any
    label: str
    help_text: str = ''


def normalize_options(raw: Iterable[Any] | None) -> Tuple[FieldOption, ...]:
    """Bare scalars, ``(value, label)`` pairs and dicts all become ``FieldOption``."""
    if not raw:
        return ()
    options = []
    for item in raw:
        if isinstance(item, FieldOption):
            options.append(item)
        elif isinstance(item, dict):
            value = item.get('value')
            options.append(FieldOption(value, str(item.get('label') or value), str(item.get('help_text') or '')))
        elif isinstance(item, tuple) and len(item) >= 2:
            options.append(FieldOption(item[0], str(item[1]), str(item[2]) if len(item) > 2 else ''))
        else:
            options.append(FieldOption(item, str(item)))
    return tuple(options)


@dataclass(frozen=True)
class FieldConfiguration:
    """Per-model override for one field.

    The base class is the untyped variant: it carries a default and labels but
    says nothing about the widget. Subclasses pin the kind.
    """

    default: Any = None
    label: str = ''
    help_text: str = ''
    placeholder: str = ''
    user_selectable: bool = True
    required: bool = False
    backend_key: Optional[str] = None
    conditional: Optional[ConditionalLogic] = None
    hidden: bool = False

    @property
    def kind(self) -> Optional[FieldKind]:
        return None

    @property
    def options(self) -> Tuple[FieldOption, ...]:
        return ()

    def option_values(self) -> Tuple[Any, ...]:
        return tuple(opt.value for opt in self.options)

    def bounds(self) -> Tuple[Optional[float], Optional[float]]:
        return None, None

    @property
    def has_default(self) -> bool:
        return self.default is not None


@dataclass(frozen=True)
class SelectConfig(FieldConfiguration):
    choices: Tuple[FieldOption, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'choices', normalize_options(self.choices))

    @property
    def kind(self) -> FieldKind:
        return FieldKind.SELECT

    @property
    def options(self) -> Tuple[FieldOption, ...]:
        return self.choices


@dataclass(frozen=True)
class SliderConfig(FieldConfiguration):
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None

    @property
    def kind(self) -> FieldKind:
        return FieldKind.SLIDER

    def bounds(self) -> Tuple[Optional[float], Optional[float]]:
        return self.min, self.max


@dataclass(frozen=True)
class NumberConfig(SliderConfig):
    @property
    def kind(self) -> FieldKind:
        return FieldKind.NUMBER


@dataclass(frozen=True)
class ToggleConfig(FieldConfiguration):
    @property
    def kind(self) -> FieldKind:
        return FieldKind.TOGGLE


@dataclass(frozen=True)
class TextConfig(FieldConfiguration):
    multiline: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None

    @property
    def kind(self) -> FieldKind:
        return FieldKind.TEXTAREA if self.multiline else FieldKind.TEXT


@dataclass(frozen=True)
class FileConfig(FieldConfiguration):
    multiple: bool = False
    accept: str = 'image/*'
    min_files: Optional[int] = None
    max_files: Optional[int] = None
    size_limit: Optional[int] = None

    @property
    def kind(self) -> FieldKind:
        return FieldKind.FILE_MULTIPLE if self.multiple else FieldKind.FILE_SINGLE


@dataclass(frozen=True)
class UrlArrayConfig(FieldConfiguration):
    max_items: Optional[int] = None

    @property
    def kind(self) -> FieldKind:
        return FieldKind.URL_ARRAY


@dataclass(frozen=True)
class Capabilities:
    supports_end_frame: bool = False
    supports_tail_image: bool = False
    supports_audio_generation: bool = False
    prompt_character_limit: int = 1500
    negative_prompt_character_limit: int = 1500
    fixed_duration: Optional[int] = None
    fixed_aspect_ratio: Optional[str] = None
    fixed_resolution: Optional[str] = None

    def get(self, name: str) -> Any:
        return getattr(self, name, None)


def _non_negative(value: Any, name: str) -> Decimal:
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValueError(f'{name} must be a number, got {value!r}') from exc
    if amount < 0:
        raise ValueError(f'{name} must be non-negative, got {amount}')
    return amount


@dataclass(frozen=True)
class PerSecondCost:
    rate_per_second: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, 'rate_per_second', _non_negative(self.rate_per_second, 'rate_per_second'))


@dataclass(frozen=True)
class FixedCost:
    amount: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, 'amount', _non_negative(self.amount, 'amount'))


@dataclass(frozen=True)
class CostTier:
    resolution: str
    rate: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, 'rate', _non_negative(self.rate, f'tier {self.resolution} rate'))


@dataclass(frozen=True)
class TieredCost:
    base_rate: Decimal
    tiers: Tuple[CostTier, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'base_rate', _non_negative(self.base_rate, 'base_rate'))
        object.__setattr__(self, 'tiers', tuple(self.tiers))

    def rate_for(self, resolution: Optional[str]) -> Optional[Decimal]:
        for tier in self.tiers:
            if tier.resolution == resolution:
                return tier.rate
        return None


class TemplateTier(str, Enum):
    STANDARD = 'STANDARD'
    PREMIUM = 'PREMIUM'
    ADVANCED = 'ADVANCED'


@dataclass(frozen=True)
class TieredTemplateCost:
    standard_rate: Decimal
    premium_rate: Decimal
    advanced_rate: Decimal

    def __post_init__(self) -> None:
        for name in ('standard_rate', 'premium_rate', 'advanced_rate'):
            object.__setattr__(self, name, _non_negative(getattr(self, name), name))

    def rate_for(self, tier: TemplateTier) -> Decimal:
        if tier == TemplateTier.ADVANCED:
            return self.advanced_rate
        if tier == TemplateTier.PREMIUM:
            return self.premium_rate
        return self.standard_rate


CostDescriptor = Union[PerSecondCost, FixedCost, TieredCost, TieredTemplateCost]


VIDU_TEMPLATE_TIERS: Dict[str, TemplateTier] = {
    'hug': TemplateTier.STANDARD,
    'kiss': TemplateTier.STANDARD,
    'dance': TemplateTier.STANDARD,
    'walk': TemplateTier.STANDARD,
    'cinematic_zoom': TemplateTier.PREMIUM,
    'action_sequence': TemplateTier.PREMIUM,
    'dramatic_reveal': TemplateTier.PREMIUM,
    'multi_character': TemplateTier.ADVANCED,
    'complex_scene': TemplateTier.ADVANCED,
    'vfx_heavy': TemplateTier.ADVANCED,
}


@dataclass(frozen=True)
class ModelDescriptor:
    id: str
    display_name: str
    endpoint: str
    media: str
    tabs: Tuple[str, ...]
    fields: Tuple[str, ...]
    cost: CostDescriptor
    field_options: Mapping[str, FieldConfiguration] = field(default_factory=dict, hash=False)
    capabilities: Capabilities = field(default_factory=Capabilities)
    provider: str = ''
    description: str = ''
    features: Tuple[str, ...] = ()
    categories: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'fields', tuple(self.fields))
        object.__setattr__(self, 'tabs', tuple(str(tab.value if isinstance(tab, Enum) else tab) for tab in self.tabs))
        seen = set()
        for name in self.fields:
            if name in seen:
                raise ValueError(f'{self.id}: duplicate field {name!r}')
            seen.add(name)

    def config_for(self, name: str) -> Optional[FieldConfiguration]:
        return self.field_options.get(name)

    def accepts(self, name: str) -> bool:
        return name in self.fields or name in self.field_options

    def supports_tab(self, tab: str) -> bool:
        return str(tab.value if isinstance(tab, Enum) else tab) in self.tabs

    def option_values(self, name: str) -> Tuple[Any, ...]:
        config = self.config_for(name)
        return config.option_values() if config else ()

    def declared_default(self, name: str) -> Any:
        config = self.config_for(name)
        return config.default if config else None
