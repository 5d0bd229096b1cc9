"""
SVG container collapse.

Icon subtrees are stacks of vector primitives that carry nothing a reader
of the design needs beyond "this is a vector graphic". When every child of
a container is such a primitive, the children are pruned and the container
itself becomes an IMAGE-SVG leaf. Collapsed containers count as primitives
for their own parent, so nested icon groups collapse bottom-up.

Leaf predicate (default): the node type registry marks the child's type
as a vector primitive, and the child has no text, no component reference,
no children and was not truncated by the depth limit. Both the eligible
container types and the predicate can be replaced.
"""

from typing import Any, Callable, Iterable, Mapping, Optional

from figma_simplifier.domain.models import NodeAccumulator, SimplifiedNode, TraversalContext
from figma_simplifier.domain.node_types import get_node_type_info
from figma_simplifier.extractors.base_extractor import ExtractorHook

SVG_TYPE = 'IMAGE-SVG'

SVG_ELIGIBLE_TYPES = frozenset({'FRAME', 'GROUP', 'INSTANCE', 'BOOLEAN_OPERATION', 'VECTOR'})


def is_pure_vector_leaf(node: SimplifiedNode) -> bool:
    """Default leaf predicate for the collapse."""
    return (
        get_node_type_info(node.type).is_vector_primitive
        and not node.children
        and not node.truncated
        and node.text is None
        and node.component_id is None
    )


class CollapseSvgContainers(ExtractorHook):
    """Collapses containers whose children are all pure vector leaves.

    Args:
        container_types: Node types eligible for collapsing.
        is_vector_leaf: Predicate deciding whether a simplified child is a
            pure vector leaf.
    """

    name = 'collapse_svg'

    def __init__(
        self,
        container_types: Optional[Iterable[str]] = None,
        is_vector_leaf: Callable[[SimplifiedNode], bool] = is_pure_vector_leaf,
    ) -> None:
        self.container_types = frozenset(container_types) if container_types is not None else SVG_ELIGIBLE_TYPES
        self.is_vector_leaf = is_vector_leaf

    def after_children(
        self,
        node: Mapping[str, Any],
        context: TraversalContext,
        result: NodeAccumulator,
        children: list[SimplifiedNode],
    ) -> Optional[list[SimplifiedNode]]:
        if result.get('type') not in self.container_types or not children:
            return None
        if not all(self.is_vector_leaf(child) for child in children):
            return None
        result['type'] = SVG_TYPE
        return []
