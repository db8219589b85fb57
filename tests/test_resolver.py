import pytest

from genform.modelspecs.base import FieldConfiguration, FixedCost, ModelDescriptor, SelectConfig, SliderConfig
from genform.modelspecs.fields import FieldKind
from genform.modelspecs.images import GPT_IMAGE_1
from genform.modelspecs.registry import list_models
from genform.services.resolver import infer_from_name, resolve


GARBAGE_NAMES = ['', ' ', 'zzz', '__proto__', 'ünïcode', 'a' * 500, '123', 'foo.bar', 'isReady', 'photoFrame']


def _model(**options):
    return ModelDescriptor(
        id='TEST',
        display_name='Test',
        endpoint='test/endpoint',
        media='video',
        tabs=('text-to-video',),
        fields=tuple(options),
        cost=FixedCost('1'),
        field_options=options,
    )


class TestTotality:
    """Every name resolves to a renderable record, for every model."""

    @pytest.mark.parametrize('model', list_models(), ids=lambda m: m.id)
    def test_all_declared_fields_resolve(self, model):
        for name in model.fields:
            metadata = resolve(name, model)
            assert metadata.component
            assert isinstance(metadata.kind, FieldKind)

    @pytest.mark.parametrize('name', GARBAGE_NAMES)
    def test_garbage_names_resolve_everywhere(self, name):
        for model in list_models():
            assert resolve(name, model) is not None
        assert resolve(name) is not None


class TestLookupOrder:
    def test_registry_wins(self):
        metadata = resolve('prompt', GPT_IMAGE_1)
        assert metadata.component == 'PromptTextarea'
        assert metadata.kind == FieldKind.TEXTAREA

    def test_untyped_config_with_options_is_select(self):
        model = _model(speed=FieldConfiguration())
        assert resolve('speed', model).kind == FieldKind.TEXT

        model = _model(speed=SelectConfig(choices=('slow', 'fast')))
        metadata = resolve('speed', model)
        assert metadata.kind == FieldKind.SELECT
        assert [opt.value for opt in metadata.options] == ['slow', 'fast']

    def test_bool_default_sniffs_toggle(self):
        model = _model(turbo=FieldConfiguration(default=True))
        assert resolve('turbo', model).kind == FieldKind.TOGGLE

    def test_slider_bounds_carry_over(self):
        model = _model(strength=SliderConfig(min=0, max=2))
        metadata = resolve('strength', model)
        assert metadata.kind == FieldKind.SLIDER
        assert (metadata.min, metadata.max) == (0, 2)


class TestNameInference:
    @pytest.mark.parametrize(
        'name, kind, component',
        [
            ('mask_image', FieldKind.FILE_SINGLE, 'ImageUploadField'),
            ('profilePhoto', FieldKind.FILE_SINGLE, 'ImageUploadField'),
            ('driving_video', FieldKind.FILE_SINGLE, 'VideoUploadField'),
            ('scene_prompt', FieldKind.TEXTAREA, 'PromptTextarea'),
            ('enableUpscale', FieldKind.TOGGLE, 'ToggleField'),
            ('use_turbo', FieldKind.TOGGLE, 'ToggleField'),
            ('camera_motion', FieldKind.TEXT, 'TextInput'),
        ],
    )
    def test_patterns(self, name, kind, component):
        metadata = infer_from_name(name)
        assert metadata.kind == kind
        assert metadata.component == component

    def test_label_is_humanized(self):
        assert infer_from_name('camera_motion').label == 'Camera Motion'
        assert infer_from_name('cameraMotion').label == 'Camera Motion'
