"""
Node type registry mapping Figma node `type` tags to metadata.

Figma nodes arrive as untyped bags of optional fields keyed by `type`.
This registry turns the `type` tag into a closed set of capability flags
so each extractor can gate its reads on the node's type instead of on
whichever fields happen to be present.

Types not listed here resolve to a generic pass-through variant that
carries no capabilities: such nodes are emitted with only their id, name
and type.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from figma_simplifier.domain.node_types.categories import NodeCategory


@dataclass(frozen=True)
class NodeTypeInfo:
    """
    Immutable node type information.

    Attributes:
        type_name: The Figma `type` tag (e.g., 'FRAME')
        category: Node category for grouping
        has_layout: Bounding box / auto-layout fields are meaningful
        has_paint: Fills, strokes, effects and corner radii are meaningful
        has_text: `characters` and typography are meaningful
        is_vector_primitive: The node renders as pure vector geometry

    Example:
        >>> info = NodeTypeInfo('TEXT', NodeCategory.TEXT, has_layout=True, has_text=True)
        >>> info.has_text
        True
    """
    type_name: str
    category: NodeCategory
    has_layout: bool = False
    has_paint: bool = False
    has_text: bool = False
    is_vector_primitive: bool = False

    @property
    def is_generic(self) -> bool:
        return self.category is NodeCategory.UNKNOWN


def _frame(type_name: str, category: NodeCategory = NodeCategory.CONTAINER) -> NodeTypeInfo:
    return NodeTypeInfo(type_name, category, has_layout=True, has_paint=True)


def _vector(type_name: str) -> NodeTypeInfo:
    return NodeTypeInfo(
        type_name, NodeCategory.VECTOR,
        has_layout=True, has_paint=True, is_vector_primitive=True,
    )


NODE_TYPE_REGISTRY: Dict[str, NodeTypeInfo] = {
    # =========================================================================
    # Document structure
    # =========================================================================
    'DOCUMENT': NodeTypeInfo('DOCUMENT', NodeCategory.DOCUMENT),
    'CANVAS': NodeTypeInfo('CANVAS', NodeCategory.DOCUMENT),

    # =========================================================================
    # Containers
    # =========================================================================
    'FRAME': _frame('FRAME'),
    'GROUP': _frame('GROUP'),
    'SECTION': _frame('SECTION'),

    # =========================================================================
    # Components
    # =========================================================================
    'COMPONENT': _frame('COMPONENT', NodeCategory.COMPONENT),
    'COMPONENT_SET': _frame('COMPONENT_SET', NodeCategory.COMPONENT),
    'INSTANCE': _frame('INSTANCE', NodeCategory.COMPONENT),

    # =========================================================================
    # Shapes and vectors
    # =========================================================================
    'RECTANGLE': NodeTypeInfo('RECTANGLE', NodeCategory.SHAPE, has_layout=True, has_paint=True),
    'SLICE': NodeTypeInfo('SLICE', NodeCategory.SHAPE, has_layout=True),
    'VECTOR': _vector('VECTOR'),
    'LINE': _vector('LINE'),
    'ELLIPSE': _vector('ELLIPSE'),
    'REGULAR_POLYGON': _vector('REGULAR_POLYGON'),
    'STAR': _vector('STAR'),
    'BOOLEAN_OPERATION': NodeTypeInfo(
        'BOOLEAN_OPERATION', NodeCategory.VECTOR,
        has_layout=True, has_paint=True, is_vector_primitive=True,
    ),
    # Emitted by the SVG collapse, never by the Figma API.
    'IMAGE-SVG': _vector('IMAGE-SVG'),

    # =========================================================================
    # Text
    # =========================================================================
    'TEXT': NodeTypeInfo('TEXT', NodeCategory.TEXT, has_layout=True, has_paint=True, has_text=True),

    # =========================================================================
    # Tables
    # =========================================================================
    'TABLE': NodeTypeInfo('TABLE', NodeCategory.TABLE, has_layout=True, has_paint=True),
    'TABLE_CELL': NodeTypeInfo(
        'TABLE_CELL', NodeCategory.TABLE,
        has_layout=True, has_paint=True, has_text=True,
    ),

    # =========================================================================
    # FigJam diagram nodes
    # =========================================================================
    'CONNECTOR': NodeTypeInfo('CONNECTOR', NodeCategory.DIAGRAM, has_paint=True, has_text=True),
    'STICKY': NodeTypeInfo('STICKY', NodeCategory.DIAGRAM, has_layout=True, has_paint=True, has_text=True),
    'SHAPE_WITH_TEXT': NodeTypeInfo(
        'SHAPE_WITH_TEXT', NodeCategory.DIAGRAM,
        has_layout=True, has_paint=True, has_text=True,
    ),
    'WASHI_TAPE': NodeTypeInfo('WASHI_TAPE', NodeCategory.DIAGRAM, has_layout=True, has_paint=True),
    'STAMP': NodeTypeInfo('STAMP', NodeCategory.DIAGRAM, has_layout=True),
    'HIGHLIGHT': NodeTypeInfo('HIGHLIGHT', NodeCategory.DIAGRAM, has_layout=True, has_paint=True),

    # =========================================================================
    # Embeds
    # =========================================================================
    'WIDGET': NodeTypeInfo('WIDGET', NodeCategory.EMBED, has_layout=True),
    'EMBED': NodeTypeInfo('EMBED', NodeCategory.EMBED, has_layout=True),
    'LINK_UNFURL': NodeTypeInfo('LINK_UNFURL', NodeCategory.EMBED, has_layout=True),
}


def get_node_type_info(type_name: Optional[str]) -> NodeTypeInfo:
    """
    Get node type info from the registry, or the generic fallback.

    Args:
        type_name: The Figma `type` tag

    Returns:
        NodeTypeInfo for known types; a capability-free UNKNOWN variant
        otherwise.

    Example:
        >>> get_node_type_info('FRAME').has_layout
        True
        >>> get_node_type_info('HOLOGRAM').is_generic
        True
    """
    if type_name in NODE_TYPE_REGISTRY:
        return NODE_TYPE_REGISTRY[type_name]
    return NodeTypeInfo(type_name=type_name or 'UNKNOWN', category=NodeCategory.UNKNOWN)


def node_type_info(node: Mapping[str, Any]) -> NodeTypeInfo:
    """Resolve the type info of a raw node."""
    return get_node_type_info(node.get('type'))
