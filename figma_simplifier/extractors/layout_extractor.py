"""
Layout extractor.

Emits the node's position, size and auto-layout settings inline (layout
is too node-specific to be worth deduplicating), and publishes the node's
bounding box and layout mode so children can be positioned relative to it.
"""

from typing import Any, Mapping

from figma_simplifier.domain.models import NodeAccumulator, TraversalContext
from figma_simplifier.domain.node_types import node_type_info
from figma_simplifier.extractors.base_extractor import ExtractorHook
from figma_simplifier.transformers.layout import bounding_box, build_layout

PARENT_BOX = 'layout.parent_box'
PARENT_LAYOUT_MODE = 'layout.parent_layout_mode'


class LayoutExtractor(ExtractorHook):
    """Extracts geometry and auto-layout fields for layout-bearing nodes."""

    name = 'layout'

    def before_children(
        self,
        node: Mapping[str, Any],
        context: TraversalContext,
        result: NodeAccumulator,
    ) -> None:
        if not node_type_info(node).has_layout:
            return

        layout = build_layout(
            node,
            parent_box=context.from_parent(PARENT_BOX),
            parent_layout_mode=context.from_parent(PARENT_LAYOUT_MODE),
        )
        if layout:
            result['layout'] = layout

        box = bounding_box(node)
        if box is not None:
            context.inherited[PARENT_BOX] = box
        context.inherited[PARENT_LAYOUT_MODE] = layout.get('layoutMode')
