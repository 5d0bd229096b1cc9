"""Tests for ExtractorRegistry."""

import pytest

from figma_simplifier.extractor_registry import ExtractorRegistry
from figma_simplifier.extractors import LayoutExtractor, TextExtractor
from figma_simplifier.extractors.base_extractor import ExtractorHook


class TestExtractorRegistry:
    """Tests for extractor and preset lookup."""

    def setup_method(self):
        self.registry = ExtractorRegistry()

    def test_default_extractors(self):
        assert self.registry.get_supported_extractors() == ['layout', 'text', 'visuals', 'component', 'connector']

    def test_default_presets(self):
        presets = self.registry.get_presets()
        assert presets['all'] == ['layout', 'text', 'visuals', 'component']
        assert presets['layout_and_text'] == ['layout', 'text']
        assert presets['content_only'] == ['text', 'component']
        assert presets['visuals_only'] == ['visuals']
        assert presets['layout_only'] == ['layout']

    def test_get_extractor_returns_fresh_instances(self):
        a = self.registry.get_extractor('text')
        b = self.registry.get_extractor('text')
        assert isinstance(a, TextExtractor)
        assert a is not b

    def test_unknown_extractor_raises(self):
        with pytest.raises(ValueError, match='nope'):
            self.registry.get_extractor('nope')

    def test_build_expands_presets_and_dedups(self):
        hooks = self.registry.build(['layout_and_text', 'layout', 'connector'])
        assert [h.name for h in hooks] == ['layout', 'text', 'connector']
        assert isinstance(hooks[0], LayoutExtractor)

    def test_register_custom(self):
        class Custom(ExtractorHook):
            name = 'custom'

        self.registry.register_extractor('custom', Custom)
        self.registry.register_preset('mine', ['custom', 'text'])
        assert [h.name for h in self.registry.build(['mine'])] == ['custom', 'text']

    def test_preset_with_unknown_member_rejected(self):
        with pytest.raises(ValueError):
            self.registry.register_preset('broken', ['layout', 'missing'])

    def test_registries_are_independent(self):
        self.registry.register_extractor('custom', ExtractorHook)
        assert 'custom' not in ExtractorRegistry().get_supported_extractors()
