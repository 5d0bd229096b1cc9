"""Built-in extractor hooks."""

from figma_simplifier.extractors.base_extractor import ExtractorHook
from figma_simplifier.extractors.component_extractor import ComponentExtractor
from figma_simplifier.extractors.connector_extractor import ConnectorExtractor
from figma_simplifier.extractors.layout_extractor import LayoutExtractor
from figma_simplifier.extractors.svg_collapse import (
    SVG_ELIGIBLE_TYPES,
    CollapseSvgContainers,
    is_pure_vector_leaf,
)
from figma_simplifier.extractors.table_extractor import TableMarkdownHook
from figma_simplifier.extractors.text_extractor import TextExtractor
from figma_simplifier.extractors.visuals_extractor import VisualsExtractor


def all_extractors() -> list[ExtractorHook]:
    """The full built-in hook set, in its conventional order."""
    return [
        LayoutExtractor(),
        TextExtractor(),
        VisualsExtractor(),
        ComponentExtractor(),
        CollapseSvgContainers(),
    ]


__all__ = [
    'ExtractorHook', 'LayoutExtractor', 'TextExtractor', 'VisualsExtractor',
    'ComponentExtractor', 'ConnectorExtractor', 'TableMarkdownHook',
    'CollapseSvgContainers', 'is_pure_vector_leaf',
    'SVG_ELIGIBLE_TYPES', 'all_extractors',
]
