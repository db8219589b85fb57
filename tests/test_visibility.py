from genform.modelspecs.base import Capabilities, FieldConfiguration, FixedCost, ModelDescriptor, ToggleConfig
from genform.modelspecs.fields import ConditionalLogic
from genform.modelspecs.images import FLUX_1_1_PRO, GPT_IMAGE_1, NANO_BANANA_PRO
from genform.modelspecs.vidu import VIDU_START_END
from genform.services.visibility import is_visible, visible_fields


def _model(fields, options=None, **capabilities):
    return ModelDescriptor(
        id='TEST',
        display_name='Test',
        endpoint='test/endpoint',
        media='video',
        tabs=('text-to-video',),
        fields=fields,
        cost=FixedCost('1'),
        field_options=options or {},
        capabilities=Capabilities(**capabilities),
    )


class TestConditionalFields:
    """Capability gates and predicates over the model."""

    def test_end_frame_requires_capability(self):
        assert 'endFrameImageBase64' in visible_fields(VIDU_START_END)
        model = _model(('prompt', 'endFrameImageBase64'))
        assert visible_fields(model) == ['prompt']

    def test_duration_hidden_for_fixed_duration_models(self):
        assert visible_fields(_model(('prompt', 'duration'))) == ['prompt', 'duration']
        assert visible_fields(_model(('prompt', 'duration'), fixed_duration=5)) == ['prompt']

    def test_config_conditional_overrides_registry(self):
        options = {'duration': FieldConfiguration(conditional=ConditionalLogic())}
        model = _model(('prompt', 'duration'), options, fixed_duration=5)
        assert visible_fields(model) == ['prompt', 'duration']

    def test_depends_on_hides_orphans(self):
        options = {
            'upscale': ToggleConfig(default=False),
            'upscale_factor': FieldConfiguration(conditional=ConditionalLogic(depends_on=('upscale',))),
        }
        model = _model(('prompt', 'upscale', 'upscale_factor'), options)
        assert visible_fields(model) == ['prompt', 'upscale', 'upscale_factor']

        hidden = dict(options, upscale=ToggleConfig(default=False, hidden=True))
        model = _model(('prompt', 'upscale', 'upscale_factor'), hidden)
        assert visible_fields(model) == ['prompt']

    def test_declaration_order_kept(self):
        fields = ('seed', 'prompt', 'aspectRatio')
        assert visible_fields(_model(fields)) == list(fields)


class TestHiddenAndTabs:
    def test_hidden_configs_never_show(self):
        assert 'enable_safety_checker' not in visible_fields(FLUX_1_1_PRO)
        assert 'sync_mode' not in visible_fields(NANO_BANANA_PRO)
        assert not is_visible('sync_mode', NANO_BANANA_PRO)

    def test_tab_scoping(self):
        text = visible_fields(GPT_IMAGE_1, 'text-to-image')
        assert 'prompt' in text
        assert 'style_prompt' not in text
        assert 'reference_images' not in text

        restyle = visible_fields(GPT_IMAGE_1, 'restyle')
        assert {'style_prompt', 'original_image'} <= set(restyle)
        assert 'reference_images' not in restyle

        assert 'reference_images' in visible_fields(GPT_IMAGE_1, 'image-reference')

    def test_no_tab_shows_everything_visible(self):
        assert visible_fields(GPT_IMAGE_1) == list(GPT_IMAGE_1.fields)
