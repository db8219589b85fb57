from genform.services.drafts import Draft, InMemoryDraftStore, persistable_values
from genform.services.preferences import ModelPreferences


class TestPersistableValues:
    def test_files_and_objects_dropped(self, png):
        values = {
            'prompt': 'x',
            'duration': '5',
            'seed': 3,
            'loop': True,
            'imageBase64': png,
            'reference_images': ['https://cdn.test/a.png', png],
            'tail_image_url': ['https://cdn.test/b.png'],
            'when': object(),
        }
        assert persistable_values(values) == {
            'prompt': 'x',
            'duration': '5',
            'seed': 3,
            'loop': True,
            'tail_image_url': ['https://cdn.test/b.png'],
        }


class TestInMemoryDraftStore:
    def test_namespaced_copies(self):
        store = InMemoryDraftStore()
        draft = Draft(model_id='flux-dev', tab='text-to-image', field_values={'prompt': 'x'})
        store.save('a', draft)
        draft.field_values['prompt'] = 'changed'

        loaded = store.load('a')
        assert loaded.field_values == {'prompt': 'x'}
        assert store.load('b') is None
        store.clear('a')
        assert store.load('a') is None


class TestModelPreferences:
    def test_recent_order_and_cap(self):
        prefs = ModelPreferences(limit=3)
        for model_id in ('a', 'b', 'c', 'a', 'd'):
            prefs.add_recent(model_id)
        assert prefs.recent == ['d', 'a', 'c']
        prefs.clear_recent()
        assert prefs.recent == []

    def test_favorites_toggle(self):
        prefs = ModelPreferences(limit=3)
        assert prefs.toggle_favorite('a') is True
        assert prefs.is_favorite('a')
        assert prefs.toggle_favorite('a') is False
        assert not prefs.is_favorite('a')

    def test_restore(self):
        prefs = ModelPreferences(limit=2)
        prefs.restore(['x', 'y', 'z'], ['f', 'f', 'g'])
        assert prefs.recent == ['x', 'y']
        assert prefs.favorites == ['f', 'g']
