import itertools
from decimal import Decimal

import pytest

from genform.modelspecs.base import (
    CostTier,
    FixedCost,
    ModelDescriptor,
    PerSecondCost,
    VIDU_TEMPLATE_TIERS,
    SelectConfig,
    TemplateTier,
    TieredCost,
    TieredTemplateCost,
)
from genform.modelspecs.images import GPT_IMAGE_1
from genform.modelspecs.minimax import HAILUO_2_3_STANDARD_TEXT
from genform.modelspecs.registry import list_models
from genform.modelspecs.seedance import BYTEDANCE_SEEDANCE_PRO_FAST_TEXT, SEEDANCE_TEXT
from genform.modelspecs.veo import VEO3
from genform.modelspecs.vidu import VIDU_Q2_PRO, VIDU_REFERENCE, VIDU_TEMPLATE
from genform.services.pricing import (
    CostRange,
    calculate,
    cost_difference,
    format_cost_range,
    get_cost_range,
    per_second_rate,
    resolve_duration,
    template_rate,
    template_tier,
)
from genform.services.validation import validate_field


def _model(cost, **options):
    return ModelDescriptor(
        id='TEST',
        display_name='Test',
        endpoint='test/endpoint',
        media='video',
        tabs=('text-to-video',),
        fields=('prompt',) + tuple(options),
        cost=cost,
        field_options=options,
    )


_DURATION_POOL = [None, '', 'soon', '6s', -3, float('inf'), Decimal('NaN')] + [
    form for seconds in range(0, 26) for form in (seconds, str(seconds))
]
_RESOLUTION_POOL = [None, '', '360p', '480p', '580p', '720p', '1080p', '1440p', '2160p', '4k']
_TEMPLATE_POOL = [None, '', 'never-heard-of-it'] + list(VIDU_TEMPLATE_TIERS)
_ADVANCED_TEMPLATE = next(tid for tid, tier in VIDU_TEMPLATE_TIERS.items() if tier == TemplateTier.ADVANCED)
# Leftovers from a previously selected model, for fields this model does not show.
_STALE = {
    'duration': [None, 25, '25'],
    'resolution': [None, '4k', '2160p'],
    'template': [None, 'never-heard-of-it', _ADVANCED_TEMPLATE],
}


def _accepted(model, name, pool):
    mode = model.tabs[0]
    return [value for value in pool if validate_field(name, value, mode, model) is None]


def _submittable(model):
    """Price-relevant values the form lets through, drawn without consulting the range code."""
    fields = (
        ('duration', _DURATION_POOL),
        ('resolution', _RESOLUTION_POOL),
        ('template', _TEMPLATE_POOL),
    )
    accepted = [(name, _accepted(model, name, pool if model.accepts(name) else _STALE[name])) for name, pool in fields]
    names = [name for name, _ in accepted]
    for combo in itertools.product(*(values for _, values in accepted)):
        yield {name: value for name, value in zip(names, combo) if value is not None}


class TestPerSecond:
    def test_declared_default_duration(self):
        model = _model(PerSecondCost('0.08'), duration=SelectConfig(choices=('5', '10'), default='5'))
        result = calculate(model, {})
        assert result.amount == Decimal('0.4')
        assert result.display == '0.40M credits'
        assert result.breakdown == (
            'Rate: 0.08M credits/second',
            'Duration: 5 seconds',
            'Total: 0.08 × 5 = 0.4M',
        )

    def test_field_value_wins(self):
        assert calculate(SEEDANCE_TEXT, {'duration': '4'}).amount == Decimal('0.5')
        assert calculate(SEEDANCE_TEXT, {}).amount == Decimal('1.5')

    def test_fixed_duration_capability(self):
        assert resolve_duration(VEO3, {}) == (8, 'fixed_duration')
        assert calculate(VEO3, {}).amount == Decimal('3.2')

    def test_constant_fallback(self):
        assert resolve_duration(VIDU_REFERENCE, {}) == (5, 'fallback')
        assert calculate(VIDU_REFERENCE, {}).amount == Decimal('0.5')

    def test_q2_durations(self):
        assert resolve_duration(VIDU_Q2_PRO, {}) == (5, 'model_default')
        assert calculate(VIDU_Q2_PRO, {}).amount == Decimal('0.4')
        assert calculate(VIDU_Q2_PRO, {'duration': '8'}).amount == Decimal('0.64')
        assert get_cost_range(VIDU_Q2_PRO) == CostRange(min=Decimal('0.16'), max=Decimal('0.64'))

    def test_stale_duration_ignored(self):
        # VIDU_REFERENCE has no duration field
        assert resolve_duration(VIDU_REFERENCE, {'duration': '12'}) == (5, 'fallback')

    @pytest.mark.parametrize('raw', [float('inf'), float('-inf'), float('nan'), Decimal('NaN'), Decimal('Infinity')])
    def test_non_finite_duration_falls_through(self, raw):
        assert resolve_duration(SEEDANCE_TEXT, {'duration': raw}) == (12, 'model_default')
        assert resolve_duration(VIDU_Q2_PRO, {'duration': raw}) == (5, 'model_default')
        assert calculate(VIDU_Q2_PRO, {'duration': raw}).amount == Decimal('0.4')

    def test_unparseable_duration_falls_through(self):
        assert resolve_duration(SEEDANCE_TEXT, {'duration': 'soon'}) == (12, 'model_default')
        assert resolve_duration(SEEDANCE_TEXT, {'duration': '6s'}) == (6, 'field')


class TestFixed:
    def test_unaffected_by_fields(self):
        assert calculate(GPT_IMAGE_1, {}).amount == calculate(GPT_IMAGE_1, {'quantity': 4}).amount

    def test_breakdown_notes_fixed_duration(self):
        result = calculate(HAILUO_2_3_STANDARD_TEXT, {})
        assert result.amount == Decimal('0.48')
        assert result.breakdown == ('Fixed cost (6 seconds)', 'Total: 0.48M credits')

    def test_breakdown_without_duration(self):
        assert calculate(GPT_IMAGE_1, {}).breakdown[0] == 'Fixed cost'


class TestTiered:
    def test_resolution_selects_rate(self):
        result = calculate(BYTEDANCE_SEEDANCE_PRO_FAST_TEXT, {'resolution': '480p', 'duration': '10'})
        assert result.amount == Decimal('0.06')
        assert result.breakdown[0] == 'Resolution: 480p'

    def test_declared_default_resolution(self):
        assert calculate(BYTEDANCE_SEEDANCE_PRO_FAST_TEXT, {}).amount == Decimal('0.13')

    def test_unknown_tier_uses_base_rate(self):
        model = _model(TieredCost('0.1', (CostTier('1080p', '0.3'),)))
        # falls back to 720p, which has no tier of its own
        result = calculate(model, {})
        assert result.breakdown[0] == 'Resolution: 720p'
        assert result.amount == Decimal('0.5')

    def test_per_second_rate(self):
        assert per_second_rate(BYTEDANCE_SEEDANCE_PRO_FAST_TEXT, '720p') == Decimal('0.013')
        assert per_second_rate(BYTEDANCE_SEEDANCE_PRO_FAST_TEXT) == Decimal('0.026')
        assert per_second_rate(SEEDANCE_TEXT) == Decimal('0.125')
        assert per_second_rate(GPT_IMAGE_1) is None


class TestTemplates:
    def test_premium_template(self):
        result = calculate(VIDU_TEMPLATE, {'template': 'cinematic_zoom'})
        assert result.amount == Decimal('0.3')
        assert result.breakdown == ('Template: cinematic_zoom', 'Tier: PREMIUM', 'Cost: 0.3M credits')

    def test_default_template(self):
        assert calculate(VIDU_TEMPLATE, {}).amount == Decimal('0.2')

    def test_unknown_template_is_standard(self):
        assert template_tier('never-heard-of-it') == TemplateTier.STANDARD
        assert calculate(VIDU_TEMPLATE, {'template': 'never-heard-of-it'}).amount == Decimal('0.2')

    def test_template_rate(self):
        assert template_rate(VIDU_TEMPLATE, TemplateTier.ADVANCED) == Decimal('0.5')
        assert template_rate(VIDU_TEMPLATE, 'premium') == Decimal('0.3')
        assert template_rate(VIDU_TEMPLATE, 'bogus') == Decimal('0.2')
        assert template_rate(SEEDANCE_TEXT, 'premium') is None


class TestRanges:
    """Any declared option combination prices within the reported range."""

    @pytest.mark.parametrize('model', list_models(), ids=lambda m: m.id)
    def test_calculate_within_range(self, model):
        cost_range = get_cost_range(model)
        assert cost_range.min <= cost_range.max
        for values in _submittable(model):
            amount = calculate(model, values).amount
            assert cost_range.min <= amount <= cost_range.max, values

    def test_seedance_range(self):
        cost_range = get_cost_range(SEEDANCE_TEXT)
        assert cost_range.min == Decimal('0.375')
        assert cost_range.max == Decimal('1.5')
        assert format_cost_range(SEEDANCE_TEXT) == '0.38M credits - 1.50M credits'

    def test_template_range(self):
        cost_range = get_cost_range(VIDU_TEMPLATE)
        assert (cost_range.min, cost_range.max) == (Decimal('0.2'), Decimal('0.5'))

    def test_fixed_range_is_single_value(self):
        assert format_cost_range(GPT_IMAGE_1) == '0.05M credits'

    def test_cost_difference(self):
        assert cost_difference(SEEDANCE_TEXT, {'duration': '5'}, {'duration': '10'}) == Decimal('0.625')


class TestCostDescriptors:
    def test_negative_rates_rejected(self):
        with pytest.raises(ValueError):
            PerSecondCost('-0.1')
        with pytest.raises(ValueError):
            FixedCost('-1')
        with pytest.raises(ValueError):
            TieredTemplateCost('0.1', '-0.2', '0.3')
