"""Design extraction orchestration.

Turns raw Figma node trees, or whole `GET /v1/files/:key` and
`GET /v1/files/:key/nodes` responses, into a SimplifiedDesign. Every call
owns a fresh ExtractionState, so runs are independent and reproducible.
"""

import logging
from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from figma_simplifier.domain.models import (
    ExtractionState,
    ExtractOptions,
    SimplifiedDesign,
    SimplifyOptions,
)
from figma_simplifier.extractor_registry import ExtractorRegistry
from figma_simplifier.extractors import CollapseSvgContainers, TableMarkdownHook, all_extractors
from figma_simplifier.extractors.base_extractor import ExtractorHook
from figma_simplifier.transformers.component import sanitize_component_sets, sanitize_components
from figma_simplifier.transformers.component_simplifier import (
    flatten_all_component_instances,
    simplify_all_component_instances,
)
from figma_simplifier.transformers.connector import simplify_all_connectors
from figma_simplifier.transformers.style_stripper import strip_styles_from_design
from figma_simplifier.walker import NodeWalker

logger = logging.getLogger(__name__)

RawNode = Mapping[str, Any]


class DesignExtractor:
    """Wires raw input and extractor hooks into the node walker.

    Args:
        hooks: Hooks to run, in order. Defaults to the full built-in set.
        extra_hooks: Hooks appended after `hooks`.
    """

    def __init__(
        self,
        hooks: Optional[Iterable[ExtractorHook]] = None,
        extra_hooks: Iterable[ExtractorHook] = (),
    ) -> None:
        self._hooks = list(hooks) if hooks is not None else all_extractors()
        self._hooks.extend(extra_hooks)

    @property
    def hooks(self) -> list[ExtractorHook]:
        return list(self._hooks)

    def extract(
        self,
        nodes: Union[RawNode, Sequence[RawNode]],
        options: Optional[ExtractOptions] = None,
    ) -> SimplifiedDesign:
        """Extract one raw node or a list of raw nodes.

        Args:
            nodes: Root node(s) of the tree to simplify. Never mutated.
            options: Depth limit, node-id filter and metadata overrides.

        Returns:
            The simplified design. Never raises for bad nodes; problems
            are reported in `SimplifiedDesign.warnings`.
        """
        roots = [nodes] if isinstance(nodes, Mapping) else list(nodes)
        return self._run(roots, options or ExtractOptions(), ExtractionState())

    def extract_file(
        self,
        response: Mapping[str, Any],
        options: Optional[ExtractOptions] = None,
    ) -> SimplifiedDesign:
        """Extract a Figma file or file-nodes API response.

        Response-level `components` / `componentSets` maps seed the side
        tables; nodes visited during the walk refine them.
        """
        options = options or ExtractOptions()
        state = ExtractionState()
        roots, components, component_sets = _unpack_response(response)
        state.components.update(sanitize_components(components))
        state.component_sets.update(sanitize_component_sets(component_sets))

        if options.name is None and isinstance(response.get('name'), str):
            options = replace(options, name=response['name'])
        if options.last_modified is None and isinstance(response.get('lastModified'), str):
            options = replace(options, last_modified=response['lastModified'])

        return self._run(roots, options, state)

    def _run(self, roots: list[Any], options: ExtractOptions, state: ExtractionState) -> SimplifiedDesign:
        _validate_depth(options.depth)

        if options.node_filter:
            roots = select_subtrees(roots, options.node_filter, state)

        walker = NodeWalker(self._hooks)
        nodes = walker.walk(roots, state, max_depth=options.depth)

        name = options.name
        if name is None:
            single = roots[0] if len(roots) == 1 and isinstance(roots[0], Mapping) else None
            name = single.get('name', '') if single is not None else ''

        logger.debug(
            "Extracted %d root nodes, %d styles, %d warnings",
            len(nodes), len(state.styles), len(state.warnings),
        )
        return SimplifiedDesign(
            name=name,
            last_modified=options.last_modified,
            nodes=nodes,
            components=dict(state.components),
            component_sets=dict(state.component_sets),
            styles=state.styles.as_dict(),
            warnings=list(state.warnings),
        )


def parse_node_ids(value: Optional[str]) -> Optional[list[str]]:
    """Split '1:10;2:20' or '1:10,2:20' into ids; URL-style '1-10' becomes '1:10'."""
    if not value:
        return None
    ids = [part.strip().replace('-', ':') for part in value.replace(',', ';').split(';')]
    return [i for i in ids if i] or None


def select_subtrees(
    roots: Sequence[Any],
    node_ids: Iterable[str],
    state: Optional[ExtractionState] = None,
) -> list[RawNode]:
    """Find the subtrees rooted at the requested node ids.

    Subtrees are returned in document order. An id nested inside an
    already selected subtree is covered by it and not selected again.
    Ids not present in the tree are reported as warnings.
    """
    wanted = set(node_ids)
    selected: list[RawNode] = []
    seen: set[str] = set()

    stack: list[tuple[Any, bool]] = [(root, False) for root in reversed(roots)]
    while stack:
        node, covered = stack.pop()
        if not isinstance(node, Mapping):
            continue
        node_id = node.get('id')
        hit = isinstance(node_id, str) and node_id in wanted
        if hit:
            seen.add(node_id)
            if not covered:
                selected.append(node)
        children = node.get('children')
        if isinstance(children, list):
            stack.extend((child, covered or hit) for child in reversed(children))

    for missing in sorted(wanted - seen):
        logger.warning("Requested node %s not found in document", missing)
        if state is not None:
            state.warn(missing, 'requested node not found in document')
    return selected


def simplify_design(
    response: Mapping[str, Any],
    options: Optional[SimplifyOptions] = None,
    registry: Optional[ExtractorRegistry] = None,
) -> SimplifiedDesign:
    """Full pipeline over an API response: extraction plus optimizations.

    Extractors are chosen by name (default preset 'all'); the connector
    extractor and the SVG collapse always run. Post-processing order is
    connectors, then component instances (flattening wins over
    simplifying), then style stripping, so
    connector endpoints and component data survive the stripping.
    """
    options = options or SimplifyOptions()
    registry = registry or ExtractorRegistry()

    names = list(options.extractors) if options.extractors else ['all']
    if 'connector' not in names:
        names.append('connector')
    hooks: list[ExtractorHook] = []
    if options.tables_to_markdown:
        hooks.append(TableMarkdownHook())
    hooks.extend(registry.build(names))
    hooks.append(CollapseSvgContainers())

    extract_options = ExtractOptions(
        depth=options.depth,
        node_filter=set(options.node_ids) if options.node_ids else None,
    )
    design = DesignExtractor(hooks).extract_file(response, extract_options)

    if options.simplify_connectors:
        design = replace(design, nodes=simplify_all_connectors(design.nodes))
    if options.flatten_component_instances:
        design = replace(design, nodes=flatten_all_component_instances(design.nodes))
    elif options.simplify_component_instances:
        design = replace(design, nodes=simplify_all_component_instances(design.nodes))
    if options.exclude_styles:
        design = strip_styles_from_design(design)
    return design


def _unpack_response(response: Mapping[str, Any]) -> tuple[list[Any], dict, dict]:
    """Split a response into root nodes and component maps."""
    components: dict = dict(response.get('components') or {})
    component_sets: dict = dict(response.get('componentSets') or {})

    document = response.get('document')
    if isinstance(document, Mapping):
        pages = document.get('children')
        return (list(pages) if isinstance(pages, list) else [document]), components, component_sets

    nodes = response.get('nodes')
    if isinstance(nodes, Mapping):
        roots = []
        for node_id, info in nodes.items():
            if not isinstance(info, Mapping) or not isinstance(info.get('document'), Mapping):
                logger.warning("Node %s has no document in response", node_id)
                continue
            roots.append(info['document'])
            components.update(info.get('components') or {})
            component_sets.update(info.get('componentSets') or {})
        return roots, components, component_sets

    if 'id' in response and 'type' in response:
        return [response], components, component_sets

    logger.warning("Could not find root nodes in response")
    return [], components, component_sets


def _validate_depth(depth: Optional[int]) -> None:
    if depth is None:
        return
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
        raise ValueError(f"depth must be a positive integer, got {depth!r}")
