"""Pure transformers from raw Figma properties to simplified values."""

from figma_simplifier.transformers.component import (
    sanitize_component_sets,
    sanitize_components,
    simplify_component_properties,
)
from figma_simplifier.transformers.component_simplifier import (
    flatten_all_component_instances,
    flatten_component_instance,
    simplify_all_component_instances,
)
from figma_simplifier.transformers.connector import simplify_all_connectors
from figma_simplifier.transformers.effects import build_border_radius, build_effects
from figma_simplifier.transformers.layout import build_layout
from figma_simplifier.transformers.paint import build_fills, build_strokes, format_color, parse_paint
from figma_simplifier.transformers.style_stripper import strip_styles_from_design
from figma_simplifier.transformers.table import convert_table_to_markdown
from figma_simplifier.transformers.text import build_text_style

__all__ = [
    'build_border_radius', 'build_effects', 'build_fills', 'build_layout',
    'build_strokes', 'build_text_style', 'convert_table_to_markdown',
    'flatten_all_component_instances', 'flatten_component_instance',
    'format_color', 'parse_paint',
    'sanitize_component_sets', 'sanitize_components',
    'simplify_all_component_instances', 'simplify_all_connectors',
    'simplify_component_properties', 'strip_styles_from_design',
]
