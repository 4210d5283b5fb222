"""
Tests for the magic word registry
"""

import pytest

from wordmorph.mapping.magic_words import MAGIC_WORDS, MagicWordRegistry, normalize_word


@pytest.fixture
def registry():
    return MagicWordRegistry()


class TestRegistry:
    def test_size(self, registry):
        assert len(registry) == 30
        assert len(registry.all_words()) == len(MAGIC_WORDS)

    def test_every_entry_loads(self, registry):
        for word, data in MAGIC_WORDS.items():
            entry = registry.get(word)
            assert entry.word == word
            assert entry.category == data['category']
            assert entry.scales == tuple(data['scales'])
            assert all(0.0 <= entry.parameters[k] <= 1.0 for k in data['parameters'])

    def test_apex_words(self, registry):
        assert sorted(registry.apex_words()) == ['euphoria', 'infinity', 'thunder', 'volcano']

    def test_normalized_lookup(self, registry):
        assert normalize_word("Thunder!") == 'thunder'
        assert registry.get("Thunder!").word == 'thunder'
        assert "  WHISPER " in registry
        assert registry.is_magic_word("void")
        assert not registry.is_magic_word("ocean")
        assert registry.get("ocean") is None

    def test_categories(self, registry):
        assert len(registry.categories()) == 9
        assert 'thunder' in registry.words_by_category('elemental')

    def test_stats(self, registry):
        stats = registry.stats()
        assert stats['total_words'] == 30
        assert sum(len(words) for words in stats['categories'].values()) == 30
        assert set(stats['apex_words']) == set(registry.apex_words())
        assert stats['ai_image_words'] == registry.ai_image_words()

    def test_custom_table(self):
        registry = MagicWordRegistry({'Glimmer': {'category': 'light', 'scales': ['lydian'],
                                                  'parameters': {'brilliance': 0.9}}})
        entry = registry.get('glimmer')
        assert entry.scales == ('lydian',)
        assert entry.parameters['brilliance'] == 0.9
        assert entry.parameters['motion'] == 0.5


class TestEntry:
    def test_values_clamped(self, registry):
        entry = registry.get('thunder')
        assert entry.parameters['release_time'] == 1.0
        assert entry.parameters['attack_time'] == 0.001

    def test_parameters_are_read_only(self, registry):
        entry = registry.get('thunder')
        with pytest.raises(TypeError):
            entry.parameters['motion'] = 0.0
        copy = entry.parameters.copy()
        copy['motion'] = 0.0
        assert entry.parameters['motion'] == 0.85

    def test_visual_hints(self, registry):
        entry = registry.get('thunder')
        assert entry.visual_hints == {'color_hue': 45, 'particle_density': 0.9}
        assert entry.trigger_ai_image
