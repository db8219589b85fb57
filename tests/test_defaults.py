import pytest

from genform.modelspecs.base import FixedCost, ModelDescriptor, NumberConfig, SelectConfig
from genform.modelspecs.images import FLUX_DEV, GPT_IMAGE_1, IDEOGRAM_V3, NANO_BANANA_PRO
from genform.modelspecs.minimax import MINIMAX_DIRECTOR
from genform.modelspecs.registry import list_models
from genform.modelspecs.seedance import BYTEDANCE_SEEDANCE_LITE_REFERENCE, SEEDANCE_TEXT
from genform.services.defaults import (
    apply_defaults,
    coerce_value,
    compute_defaults,
    field_default,
    normalize_field_names,
    resolve_backend_key,
)


class TestComputeDefaults:
    def test_seeds_declared_defaults_only(self):
        values = compute_defaults(SEEDANCE_TEXT)
        assert values['duration'] == '12'
        assert values['aspectRatio'] == '21:9'
        assert values['cameraFixed'] is False
        # no declared default, so absent rather than None
        assert 'seed' not in values
        assert 'prompt' not in values

    def test_model_without_options_seeds_nothing(self):
        assert compute_defaults(MINIMAX_DIRECTOR) == {}


class TestApplyDefaults:
    """Fill-missing pass run right before the payload is built."""

    def test_existing_values_win(self):
        filled = apply_defaults({'duration': '3', 'prompt': 'a fox'}, SEEDANCE_TEXT)
        assert filled['duration'] == '3'
        assert filled['prompt'] == 'a fox'
        assert filled['aspectRatio'] == '21:9'

    def test_none_counts_as_missing(self):
        assert apply_defaults({'duration': None}, SEEDANCE_TEXT)['duration'] == '12'

    def test_first_option_when_no_default(self):
        model = ModelDescriptor(
            id='TEST',
            display_name='Test',
            endpoint='test/endpoint',
            media='image',
            tabs=('text-to-image',),
            fields=('prompt', 'style'),
            cost=FixedCost('0.1'),
            field_options={'style': SelectConfig(choices=('vivid', 'natural'))},
        )
        assert apply_defaults({}, model) == {'style': 'vivid'}

    def test_select_default_used(self):
        assert apply_defaults({}, GPT_IMAGE_1)['quantity'] == 1

    def test_does_not_mutate_input(self):
        values = {'prompt': 'x'}
        apply_defaults(values, SEEDANCE_TEXT)
        assert values == {'prompt': 'x'}

    @pytest.mark.parametrize('model', list_models(), ids=lambda m: m.id)
    @pytest.mark.parametrize('values', [{}, {'prompt': 'hello', 'duration': None}, {'seed': 7, 'extra': 'kept'}])
    def test_idempotent(self, model, values):
        once = apply_defaults(values, model)
        assert apply_defaults(once, model) == once


class TestFieldDefault:
    def test_type_appropriate_empties(self):
        assert field_default('prompt', SEEDANCE_TEXT) == ''
        assert field_default('duration', SEEDANCE_TEXT) == '12'
        assert field_default('seed', FLUX_DEV) == 0
        assert field_default('referenceImageUrls', BYTEDANCE_SEEDANCE_LITE_REFERENCE) == []
        assert field_default('original_image', GPT_IMAGE_1) is None
        assert field_default('expand_prompt', IDEOGRAM_V3) is True

    def test_numeric_minimum(self):
        model = ModelDescriptor(
            id='TEST',
            display_name='Test',
            endpoint='test/endpoint',
            media='image',
            tabs=('text-to-image',),
            fields=('strength',),
            cost=FixedCost('0.1'),
            field_options={'strength': NumberConfig(min=2, max=9)},
        )
        assert field_default('strength', model) == 2


class TestCoercion:
    def test_numeric_strings(self):
        assert coerce_value('steps', '28', FLUX_DEV) == 28
        assert coerce_value('guidance', '3.5', FLUX_DEV) == 3.5
        assert coerce_value('steps', 'many', FLUX_DEV) == 'many'

    def test_toggle_strings(self):
        assert coerce_value('expand_prompt', 'false', IDEOGRAM_V3) is False
        assert coerce_value('expand_prompt', 'on', IDEOGRAM_V3) is True

    def test_selects_untouched(self):
        assert coerce_value('duration', '5', SEEDANCE_TEXT) == '5'


class TestNormalization:
    def test_alias_renamed(self):
        normalized = normalize_field_names({'quantity': 2, 'output_quality': 'high'}, GPT_IMAGE_1)
        assert normalized == {'num_images': 2, 'quality': 'high'}

    def test_backend_key_precedence(self):
        # model configuration first
        assert resolve_backend_key('guidance', FLUX_DEV) == 'guidance_scale'
        assert resolve_backend_key('steps', FLUX_DEV) == 'num_inference_steps'
        # then registry metadata
        assert resolve_backend_key('original_image', GPT_IMAGE_1) == 'original_image_url'
        assert resolve_backend_key('reference_images', NANO_BANANA_PRO) == 'reference_image_urls'
        # without a model, registry metadata still applies; unknown names pass through
        assert resolve_backend_key('quantity') == 'num_images'
        assert resolve_backend_key('aspectRatio') == 'aspectRatio'

    def test_conflict_last_write_wins(self):
        normalized = normalize_field_names({'num_images': 1, 'quantity': 3}, GPT_IMAGE_1)
        assert normalized == {'num_images': 3}
