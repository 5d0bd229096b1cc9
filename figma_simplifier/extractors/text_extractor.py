"""
Text extractor.

Text content is kept inline; typography is interned in the style registry
because the same text style recurs across many text nodes.
"""

from typing import Any, Mapping

from figma_simplifier.domain.models import NodeAccumulator, TraversalContext
from figma_simplifier.domain.node_types import node_type_info
from figma_simplifier.extractors.base_extractor import ExtractorHook
from figma_simplifier.transformers.text import TEXT_STYLE_DEFAULTS, build_text_style


class TextExtractor(ExtractorHook):
    """Extracts `characters` and typography from text-bearing nodes."""

    name = 'text'

    def before_children(
        self,
        node: Mapping[str, Any],
        context: TraversalContext,
        result: NodeAccumulator,
    ) -> None:
        if not node_type_info(node).has_text:
            return

        characters = node.get('characters')
        if isinstance(characters, str):
            result['text'] = characters

        text_style = build_text_style(node.get('style'))
        if text_style:
            result['text_style'] = context.state.styles.intern(
                text_style, prefix='text', defaults=TEXT_STYLE_DEFAULTS,
            )
