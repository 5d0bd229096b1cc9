"""
Node Type Registry for Figma document nodes.

Maps the `type` tag of a raw Figma node to a closed set of capability
flags. Extractors use the flags as type guards; unknown types fall through
to a generic variant with no capabilities.

Example:
    >>> from figma_simplifier.domain.node_types import get_node_type_info
    >>> info = get_node_type_info('TEXT')
    >>> info.has_text
    True
    >>> get_node_type_info('SOMETHING_NEW').category
    <NodeCategory.UNKNOWN: 'Unknown'>

Module Contents:
    NodeCategory: Enum of node categories (Container, Vector, Text, ...)
    NodeTypeInfo: Immutable dataclass containing node type capabilities
    NODE_TYPE_REGISTRY: Dictionary mapping type tag to NodeTypeInfo
    get_node_type_info: Lookup with generic fallback
    node_type_info: Lookup from a raw node mapping
"""

from figma_simplifier.domain.node_types.categories import NodeCategory
from figma_simplifier.domain.node_types.registry import (
    NODE_TYPE_REGISTRY,
    NodeTypeInfo,
    get_node_type_info,
    node_type_info,
)

__all__ = [
    'NodeCategory',
    'NODE_TYPE_REGISTRY',
    'NodeTypeInfo',
    'get_node_type_info',
    'node_type_info',
]
