from __future__ import annotations

import itertools
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from genform.modelspecs.base import (
    VIDU_TEMPLATE_TIERS,
    FixedCost,
    ModelDescriptor,
    PerSecondCost,
    TemplateTier,
    TieredCost,
    TieredTemplateCost,
)
from genform.modelspecs.field_registry import get_registered_field
from genform.utils.credits import ZERO, credits_to_display, format_credits, to_credits
from genform.utils.logging import get_logger


logger = get_logger('pricing')

# Fallbacks used when neither the form nor the model names a value.
# They mirror the long-standing catalog behaviour and carry no further meaning.
FALLBACK_DURATION = 5
FALLBACK_RESOLUTION = '720p'
FALLBACK_TEMPLATE = 'hug'

_LEADING_INT = re.compile(r'\s*\+?(\d+)')


@dataclass(frozen=True)
class CostResult:
    amount: Decimal
    breakdown: Tuple[str, ...]
    display: str
    per_unit: Optional[Decimal] = None
    duration: Optional[int] = None
    currency: str = 'credits'


@dataclass(frozen=True)
class CostRange:
    min: Decimal
    max: Decimal


def _parse_duration(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal) and not value.is_finite():
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (int, float, Decimal)):
        return int(value) if value >= 0 else None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def _present(value: Any) -> bool:
    return value is not None and value != ''


def _field(model: ModelDescriptor, field_values: Mapping[str, Any], name: str) -> Any:
    # Leftovers from another model do not price this one.
    return field_values.get(name) if model.accepts(name) else None


def resolve_duration(model: ModelDescriptor, field_values: Mapping[str, Any]) -> Tuple[int, str]:
    sources = (
        ('field', _field(model, field_values, 'duration')),
        ('model_default', model.declared_default('duration')),
        ('fixed_duration', model.capabilities.fixed_duration),
    )
    for source, raw in sources:
        duration = _parse_duration(raw)
        if duration is not None:
            return duration, source
    logger.debug('pricing_fallback', model=model.id, field='duration', value=FALLBACK_DURATION)
    return FALLBACK_DURATION, 'fallback'


def resolve_resolution(model: ModelDescriptor, field_values: Mapping[str, Any]) -> str:
    for raw in (_field(model, field_values, 'resolution'), model.declared_default('resolution')):
        if _present(raw):
            return str(raw)
    logger.debug('pricing_fallback', model=model.id, field='resolution', value=FALLBACK_RESOLUTION)
    return FALLBACK_RESOLUTION


def resolve_template(model: ModelDescriptor, field_values: Mapping[str, Any]) -> str:
    for raw in (_field(model, field_values, 'template'), model.declared_default('template')):
        if _present(raw):
            return str(raw)
    logger.debug('pricing_fallback', model=model.id, field='template', value=FALLBACK_TEMPLATE)
    return FALLBACK_TEMPLATE


def template_tier(template_id: str) -> TemplateTier:
    return VIDU_TEMPLATE_TIERS.get(template_id, TemplateTier.STANDARD)


def _n(value: Decimal) -> str:
    return credits_to_display(value)


def _per_second(model: ModelDescriptor, rate: Decimal, field_values: Mapping[str, Any], lead: List[str]) -> CostResult:
    duration, _ = resolve_duration(model, field_values)
    total = to_credits(rate * duration)
    breakdown = lead + [
        f'Rate: {_n(rate)}M credits/second',
        f'Duration: {duration} seconds',
        f'Total: {_n(rate)} × {duration} = {_n(total)}M',
    ]
    return CostResult(
        amount=total,
        breakdown=tuple(breakdown),
        display=format_credits(total),
        per_unit=rate,
        duration=duration,
    )


def calculate(model: ModelDescriptor, field_values: Mapping[str, Any]) -> CostResult:
    """Price estimate for ``model`` with the current form values.

    Pure and total: missing or unknown resolution and template values fall
    back to the model's defaults and then to the module fallbacks.
    """
    cost = model.cost

    if isinstance(cost, PerSecondCost):
        return _per_second(model, cost.rate_per_second, field_values, [])

    if isinstance(cost, FixedCost):
        amount = to_credits(cost.amount)
        fixed = model.capabilities.fixed_duration
        suffix = f' ({fixed} seconds)' if fixed else ''
        return CostResult(
            amount=amount,
            breakdown=(f'Fixed cost{suffix}', f'Total: {_n(amount)}M credits'),
            display=format_credits(amount),
        )

    if isinstance(cost, TieredCost):
        resolution = resolve_resolution(model, field_values)
        rate = cost.rate_for(resolution)
        if rate is None:
            rate = cost.base_rate
        return _per_second(model, rate, field_values, [f'Resolution: {resolution}'])

    if isinstance(cost, TieredTemplateCost):
        template_id = resolve_template(model, field_values)
        tier = template_tier(template_id)
        amount = to_credits(cost.rate_for(tier))
        return CostResult(
            amount=amount,
            breakdown=(f'Template: {template_id}', f'Tier: {tier.value}', f'Cost: {_n(amount)}M credits'),
            display=format_credits(amount),
        )

    return CostResult(amount=ZERO, breakdown=('No cost information available',), display='Unknown')


def _declared_options(model: ModelDescriptor, name: str) -> List[Any]:
    values = list(model.option_values(name))
    if not values:
        metadata = get_registered_field(name)
        if metadata is not None:
            values = [opt.value for opt in metadata.options]
    return values


def _candidates(model: ModelDescriptor) -> Iterable[Dict[str, Any]]:
    """Every combination of the price-relevant fields the form can submit.

    ``None`` stands for "left unset", which routes through the fallback chain.
    """
    durations: List[Any] = _declared_options(model, 'duration') or [None]
    resolutions: List[Any] = [None]
    templates: List[Any] = [None]
    if isinstance(model.cost, TieredCost):
        resolutions = _declared_options(model, 'resolution') or [None]
    if isinstance(model.cost, TieredTemplateCost):
        templates = [None] + list(dict.fromkeys(list(VIDU_TEMPLATE_TIERS) + _declared_options(model, 'template')))
    for duration, resolution, template in itertools.product(durations, resolutions, templates):
        values: Dict[str, Any] = {}
        if duration is not None:
            values['duration'] = duration
        if resolution is not None:
            values['resolution'] = resolution
        if template is not None:
            values['template'] = template
        yield values


def get_cost_range(model: ModelDescriptor) -> CostRange:
    amounts = [calculate(model, values).amount for values in _candidates(model)]
    return CostRange(min=min(amounts), max=max(amounts))


def cost_difference(model: ModelDescriptor, old_values: Mapping[str, Any], new_values: Mapping[str, Any]) -> Decimal:
    return calculate(model, new_values).amount - calculate(model, old_values).amount


def format_cost_range(model: ModelDescriptor) -> str:
    cost_range = get_cost_range(model)
    if cost_range.min == cost_range.max:
        return format_credits(cost_range.min)
    return f'{format_credits(cost_range.min)} - {format_credits(cost_range.max)}'


def per_second_rate(model: ModelDescriptor, resolution: Optional[str] = None) -> Optional[Decimal]:
    cost = model.cost
    if isinstance(cost, PerSecondCost):
        return cost.rate_per_second
    if isinstance(cost, TieredCost):
        rate = cost.rate_for(resolution or resolve_resolution(model, {}))
        return rate if rate is not None else cost.base_rate
    return None


def template_rate(model: ModelDescriptor, tier: TemplateTier | str) -> Optional[Decimal]:
    if not isinstance(model.cost, TieredTemplateCost):
        return None
    try:
        resolved = tier if isinstance(tier, TemplateTier) else TemplateTier(str(tier).upper())
    except ValueError:
        resolved = TemplateTier.STANDARD
    return model.cost.rate_for(resolved)
