"""Removal of all visual styling from a simplified design.

Keeps node identity, text content, component references, connector
endpoints, table markdown and the hierarchy.
"""

from dataclasses import replace

from figma_simplifier.domain.models import SimplifiedDesign, SimplifiedNode

STYLE_FIELDS = (
    'layout',
    'text_style',
    'fills',
    'strokes',
    'stroke_weight',
    'stroke_dashes',
    'effects',
    'opacity',
    'border_radius',
)


def strip_styles_from_node(node: SimplifiedNode) -> SimplifiedNode:
    """Return a copy of the node and its subtree without style fields."""
    return replace(
        node,
        **{name: None for name in STYLE_FIELDS},
        children=tuple(strip_styles_from_node(c) for c in node.children),
    )


def strip_styles_from_design(design: SimplifiedDesign) -> SimplifiedDesign:
    """Strip styles from every node and empty `globalVars.styles`."""
    return replace(
        design,
        nodes=[strip_styles_from_node(n) for n in design.nodes],
        styles={},
    )
