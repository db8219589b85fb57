import pytest

from genform.modelspecs.base import FixedCost, GenerationMode, ModelDescriptor, PerSecondCost
from genform.modelspecs.registry import (
    MODEL_SPECS,
    get_model,
    is_field_registered,
    list_models,
    models_for_tab,
    models_with_capability,
    registered_fields,
)


class TestCatalog:
    def test_every_model_is_well_formed(self):
        for model in list_models():
            assert model.endpoint
            assert model.tabs
            assert model.media in ('image', 'video')
            assert len(set(model.fields)) == len(model.fields)

    def test_ids_are_unique(self):
        assert len(MODEL_SPECS) == len(list_models())

    def test_lookup(self):
        assert get_model('VIDU_TEMPLATE').provider == 'Vidu'
        assert get_model('missing') is None

    def test_models_for_tab(self):
        restyle = models_for_tab(GenerationMode.RESTYLE)
        assert {m.id for m in restyle} == {'gpt-image-1', 'gemini-25-flash-image', 'nano-banana-pro'}
        assert all(m.media == 'video' for m in models_for_tab('video-to-video'))
        assert models_for_tab('text-to-image')

    def test_models_with_capability(self):
        ids = {m.id for m in models_with_capability('supports_end_frame')}
        assert 'VIDU_START_END' in ids
        assert 'VIDU_IMAGE' not in ids
        assert models_with_capability('no_such_capability') == []

    def test_field_registry(self):
        assert is_field_registered('prompt')
        assert not is_field_registered('camera_motion')
        assert 'reference_images' in registered_fields()


class TestDescriptorChecks:
    def test_duplicate_fields_rejected(self):
        with pytest.raises(ValueError, match='duplicate field'):
            ModelDescriptor(
                id='BROKEN',
                display_name='Broken',
                endpoint='x',
                media='video',
                tabs=('text-to-video',),
                fields=('prompt', 'prompt'),
                cost=PerSecondCost('0.1'),
            )

    def test_enum_tabs_normalized(self):
        model = ModelDescriptor(
            id='T',
            display_name='T',
            endpoint='x',
            media='image',
            tabs=(GenerationMode.TEXT_TO_IMAGE,),
            fields=('prompt',),
            cost=FixedCost('0.1'),
        )
        assert model.tabs == ('text-to-image',)
        assert model.supports_tab(GenerationMode.TEXT_TO_IMAGE)
