"""
Visuals extractor.

Fills, stroke paints and effects are each interned as one composite style
per node: a node with three fills references a single style entry holding
all three, in paint order.
"""

from typing import Any, Mapping

from figma_simplifier.domain.models import NodeAccumulator, TraversalContext
from figma_simplifier.domain.node_types import node_type_info
from figma_simplifier.extractors.base_extractor import ExtractorHook
from figma_simplifier.transformers.css import format_number
from figma_simplifier.transformers.effects import build_border_radius, build_effects
from figma_simplifier.transformers.paint import build_fills, build_strokes


class VisualsExtractor(ExtractorHook):
    """Extracts fills, strokes, effects, opacity and corner radius."""

    name = 'visuals'

    def before_children(
        self,
        node: Mapping[str, Any],
        context: TraversalContext,
        result: NodeAccumulator,
    ) -> None:
        if not node_type_info(node).has_paint:
            return
        styles = context.state.styles

        fills = build_fills(node)
        if fills:
            result['fills'] = styles.intern(fills, prefix='fill')

        strokes = build_strokes(node)
        if strokes:
            result['strokes'] = styles.intern(strokes['colors'], prefix='stroke')
            if 'strokeWeight' in strokes:
                result['stroke_weight'] = strokes['strokeWeight']
            if 'strokeDashes' in strokes:
                result['stroke_dashes'] = strokes['strokeDashes']

        effects = build_effects(node)
        if effects:
            result['effects'] = styles.intern(effects, prefix='effect')

        opacity = node.get('opacity')
        if isinstance(opacity, (int, float)) and opacity < 1:
            result['opacity'] = format_number(opacity)

        radius = build_border_radius(node)
        if radius:
            result['border_radius'] = radius
