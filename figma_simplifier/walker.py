"""Depth-first node walker driving the extractor hooks.

Every visited raw node goes through the same steps:

  1. step the traversal context into the node
  2. run each hook's before_children, in registration order
  3. recurse into the children unless the depth limit or a hook stops it
  4. run each hook's after_children, which may rewrite the children
  5. freeze the accumulator and children into a SimplifiedNode

A hook that raises for one node loses its contribution for that node only.
A malformed node is skipped; its siblings and ancestors are unaffected.
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from figma_simplifier.domain.models import (
    ExtractionState,
    NodeAccumulator,
    SimplifiedNode,
    TraversalContext,
)
from figma_simplifier.domain.node_types import node_type_info
from figma_simplifier.extractors.base_extractor import ExtractorHook

logger = logging.getLogger(__name__)

RawNode = Mapping[str, Any]

# Children of a node at this depth are not walked; the node is marked truncated.
MAX_NESTING_DEPTH = 256


class NodeWalker:
    """Walks raw node trees with an ordered list of extractor hooks.

    Args:
        hooks: Hooks invoked for every node, in this order.
    """

    def __init__(self, hooks: Iterable[ExtractorHook]) -> None:
        self._hooks = list(hooks)

    @property
    def hooks(self) -> list[ExtractorHook]:
        return list(self._hooks)

    def walk(
        self,
        roots: Union[RawNode, Sequence[RawNode]],
        state: Optional[ExtractionState] = None,
        max_depth: Optional[int] = None,
    ) -> list[SimplifiedNode]:
        """Walk one root node or a sequence of root nodes.

        Args:
            roots: A raw node or a list of raw nodes.
            state: Run state receiving styles, side tables and warnings.
                A fresh one is created when omitted.
            max_depth: Depth limit (roots are depth 1), None for unlimited.

        Returns:
            One SimplifiedNode per well-formed, visible root, in input order.
        """
        if isinstance(roots, Mapping):
            roots = [roots]
        context = TraversalContext(state=state or ExtractionState(), max_depth=max_depth)

        results: list[SimplifiedNode] = []
        for root in roots:
            simplified = self._visit(root, context)
            if simplified is not None:
                results.append(simplified)
        return results

    def _visit(self, node: Any, context: TraversalContext) -> Optional[SimplifiedNode]:
        problem = _malformed_reason(node)
        if problem:
            node_id = node.get('id') if isinstance(node, Mapping) else None
            logger.warning("Skipping malformed node %s (parent %s): %s", node_id, context.node_id, problem)
            context.state.warn(node_id, problem)
            return None

        if node.get('visible', True) is False:
            logger.debug("Skipping hidden node %s", node['id'])
            return None

        context.enter(node['id'])
        try:
            if node_type_info(node).is_generic:
                logger.debug("Passing through node %s of unknown type %s", node['id'], node['type'])
            result = NodeAccumulator(id=node['id'], name=node.get('name', ''), type=node['type'])
            for hook in self._hooks:
                self._run_before(hook, node, context, result)

            children: list[SimplifiedNode] = []
            truncated = False
            raw_children = node.get('children')
            if isinstance(raw_children, list) and raw_children and not result.skip_children:
                if not context.can_descend:
                    truncated = True
                elif context.depth >= MAX_NESTING_DEPTH:
                    truncated = True
                    logger.warning("Node %s is nested %d levels deep; children truncated", node['id'], context.depth)
                    context.state.warn(node['id'], f"nested deeper than {MAX_NESTING_DEPTH} levels; children truncated")
                else:
                    for child in raw_children:
                        simplified = self._visit(child, context)
                        if simplified is not None:
                            children.append(simplified)

            for hook in self._hooks:
                children = self._run_after(hook, node, context, result, children)

            return SimplifiedNode.from_accumulator(result, tuple(children), truncated=truncated)
        finally:
            context.leave()

    def _run_before(
        self,
        hook: ExtractorHook,
        node: RawNode,
        context: TraversalContext,
        result: NodeAccumulator,
    ) -> None:
        saved = _Savepoint(context, result)
        try:
            hook.before_children(node, context, result)
        except Exception as e:
            saved.restore()
            self._report(hook, node, context, e)

    def _run_after(
        self,
        hook: ExtractorHook,
        node: RawNode,
        context: TraversalContext,
        result: NodeAccumulator,
        children: list[SimplifiedNode],
    ) -> list[SimplifiedNode]:
        saved = _Savepoint(context, result)
        try:
            rewritten = hook.after_children(node, context, result, list(children))
        except Exception as e:
            saved.restore()
            self._report(hook, node, context, e)
            return children
        return children if rewritten is None else list(rewritten)

    @staticmethod
    def _report(hook: ExtractorHook, node: RawNode, context: TraversalContext, error: Exception) -> None:
        hook_name = getattr(hook, 'name', type(hook).__name__)
        message = f"{type(error).__name__}: {error}"
        logger.warning("Extractor %r failed on node %s: %s", hook_name, node.get('id'), message)
        context.state.warn(node.get('id'), message, hook=hook_name)


class _Savepoint:
    """Everything one hook call may change, captured for rollback."""

    def __init__(self, context: TraversalContext, result: NodeAccumulator) -> None:
        self._context = context
        self._result = result
        self._fields = dict(result)
        self._skip_children = result.skip_children
        self._inherited = dict(context.inherited.maps[0])
        self._state_mark = context.state.checkpoint()

    def restore(self) -> None:
        self._result.clear()
        self._result.update(self._fields)
        self._result.skip_children = self._skip_children
        layer = self._context.inherited.maps[0]
        layer.clear()
        layer.update(self._inherited)
        self._context.state.rollback(self._state_mark)


def _malformed_reason(node: Any) -> Optional[str]:
    if not isinstance(node, Mapping):
        return f"expected a mapping, got {type(node).__name__}"
    for key in ('id', 'type'):
        value = node.get(key)
        if not isinstance(value, str) or not value:
            return f"missing required field '{key}'"
    return None
