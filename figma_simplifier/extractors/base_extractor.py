"""
Base class for extractor hooks.

A hook is a `before_children` / `after_children` pair the node walker
calls for every node it visits. Hooks are plain objects composed into an
ordered list at the call site; there is no global hook registry.
"""

from typing import Any, Mapping, Optional

from figma_simplifier.domain.models import NodeAccumulator, SimplifiedNode, TraversalContext


class ExtractorHook:
    """
    Base class for extractor hooks.

    Subclasses override either or both phases. `before_children` runs in
    pre-order and writes into the node's accumulator; `after_children`
    runs in post-order and may rewrite the node's simplified children.
    """

    name = 'hook'

    def before_children(
        self,
        node: Mapping[str, Any],
        context: TraversalContext,
        result: NodeAccumulator,
    ) -> None:
        """
        Read raw node fields and write simplified values into `result`.

        Args:
            node: The raw node (read-only)
            context: The traversal context
            result: The node's accumulator
        """

    def after_children(
        self,
        node: Mapping[str, Any],
        context: TraversalContext,
        result: NodeAccumulator,
        children: list[SimplifiedNode],
    ) -> Optional[list[SimplifiedNode]]:
        """
        Inspect the node's simplified children after recursion.

        Returns:
            A replacement children list, or None to keep them unchanged
        """
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
