"""Extractor registry: named hooks and presets for composing hook lists."""

from typing import Callable

from figma_simplifier.extractors.base_extractor import ExtractorHook

HookFactory = Callable[[], ExtractorHook]


class ExtractorRegistry:
    """Registry mapping extractor names to hook factories.

    A fresh hook instance is built per lookup, so hook lists built from one
    registry never share state. Each registry instance is independent.
    """

    def __init__(self):
        self._factories: dict[str, HookFactory] = {}
        self._presets: dict[str, list[str]] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        from figma_simplifier.extractors.layout_extractor import LayoutExtractor
        from figma_simplifier.extractors.text_extractor import TextExtractor
        from figma_simplifier.extractors.visuals_extractor import VisualsExtractor
        from figma_simplifier.extractors.component_extractor import ComponentExtractor
        from figma_simplifier.extractors.connector_extractor import ConnectorExtractor

        self.register_extractor('layout', LayoutExtractor)
        self.register_extractor('text', TextExtractor)
        self.register_extractor('visuals', VisualsExtractor)
        self.register_extractor('component', ComponentExtractor)
        self.register_extractor('connector', ConnectorExtractor)

        self.register_preset('all', ['layout', 'text', 'visuals', 'component'])
        self.register_preset('layout_and_text', ['layout', 'text'])
        self.register_preset('content_only', ['text', 'component'])
        self.register_preset('visuals_only', ['visuals'])
        self.register_preset('layout_only', ['layout'])

    def register_extractor(self, name: str, factory: HookFactory) -> None:
        self._factories[name] = factory

    def register_preset(self, name: str, extractor_names: list[str]) -> None:
        unknown = [n for n in extractor_names if n not in self._factories]
        if unknown:
            raise ValueError(f"Preset {name!r} references unknown extractors: {', '.join(unknown)}")
        self._presets[name] = list(extractor_names)

    def get_extractor(self, name: str) -> ExtractorHook:
        factory = self._factories.get(name)
        if factory is None:
            raise ValueError(
                f"Unknown extractor {name!r}; expected one of: {', '.join(sorted(self._factories))}"
            )
        return factory()

    def build(self, names: list[str]) -> list[ExtractorHook]:
        """Build hooks for extractor or preset names, in the given order.

        Names are expanded and de-duplicated, keeping first occurrences.
        """
        expanded: list[str] = []
        for name in names:
            for item in self._presets.get(name, [name]):
                if item not in expanded:
                    expanded.append(item)
        return [self.get_extractor(n) for n in expanded]

    def get_supported_extractors(self) -> list[str]:
        return list(self._factories.keys())

    def get_presets(self) -> dict[str, list[str]]:
        return {k: list(v) for k, v in self._presets.items()}
