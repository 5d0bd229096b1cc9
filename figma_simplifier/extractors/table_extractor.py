"""Table extractor: native TABLE nodes rendered as markdown."""

from typing import Any, Mapping

from figma_simplifier.domain.models import NodeAccumulator, TraversalContext
from figma_simplifier.extractors.base_extractor import ExtractorHook
from figma_simplifier.transformers.table import convert_table_to_markdown, is_table_node


class TableMarkdownHook(ExtractorHook):
    """Replaces a TABLE's cell subtree with a markdown rendering.

    The node becomes TABLE_MARKDOWN and its children are not walked.
    Tables without positioned cells are left alone.
    """

    name = 'table_markdown'

    def before_children(
        self,
        node: Mapping[str, Any],
        context: TraversalContext,
        result: NodeAccumulator,
    ) -> None:
        if not is_table_node(node):
            return
        table = convert_table_to_markdown(node)
        if table is None:
            return
        result['type'] = 'TABLE_MARKDOWN'
        result.update(table)
        result.skip_children = True
