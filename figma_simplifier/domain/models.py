"""Shared data models used across the extraction pipeline."""

from collections import ChainMap
from dataclasses import dataclass, field, fields
from typing import Any, Optional

from figma_simplifier.style_registry import StyleRegistry


# ── Traversal ────────────────────────────────────────────────────────────

class NodeAccumulator(dict):
    """Mutable per-node scratch space filled by extractor hooks.

    Keys are SimplifiedNode field names (snake_case). Keys that are not
    SimplifiedNode fields end up in `SimplifiedNode.extra`. Setting
    `skip_children` stops the walker from recursing into the node.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.skip_children = False


@dataclass(frozen=True)
class NodeWarning:
    """A non-fatal problem found while extracting one node."""

    node_id: Optional[str]
    message: str
    hook: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {'node_id': self.node_id, 'hook': self.hook, 'message': self.message}


@dataclass(frozen=True)
class ComponentDefinition:
    """A component referenced or defined in the document."""

    id: str
    name: str
    key: Optional[str] = None
    component_set_id: Optional[str] = None
    description: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            'id': self.id,
            'key': self.key,
            'name': self.name,
            'componentSetId': self.component_set_id,
            'description': self.description,
        })


@dataclass(frozen=True)
class ComponentSetDefinition:
    """A component set (variant group) referenced or defined in the document."""

    id: str
    name: str
    key: Optional[str] = None
    description: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            'id': self.id,
            'key': self.key,
            'name': self.name,
            'description': self.description,
        })


@dataclass
class ExtractionState:
    """Everything one extraction run owns: styles, side tables, warnings."""

    styles: StyleRegistry = field(default_factory=StyleRegistry)
    components: dict[str, ComponentDefinition] = field(default_factory=dict)
    component_sets: dict[str, ComponentSetDefinition] = field(default_factory=dict)
    warnings: list[NodeWarning] = field(default_factory=list)
    _undo: list[tuple[dict, str, Any]] = field(default_factory=list, repr=False)

    def warn(self, node_id: Optional[str], message: str, hook: Optional[str] = None) -> None:
        self.warnings.append(NodeWarning(node_id=node_id, message=message, hook=hook))

    def add_component(self, component: ComponentDefinition) -> None:
        self._record(self.components, component.id, component)

    def add_component_set(self, component_set: ComponentSetDefinition) -> None:
        self._record(self.component_sets, component_set.id, component_set)

    def _record(self, table: dict, key: str, value: Any) -> None:
        self._undo.append((table, key, table.get(key)))
        table[key] = value

    def checkpoint(self) -> tuple[int, int]:
        """Return a marker for a later rollback of styles and side tables."""
        return self.styles.checkpoint(), len(self._undo)

    def rollback(self, mark: tuple[int, int]) -> None:
        styles_mark, undo_mark = mark
        self.styles.rollback(styles_mark)
        while len(self._undo) > undo_mark:
            table, key, previous = self._undo.pop()
            if previous is None:
                table.pop(key, None)
            else:
                table[key] = previous


@dataclass
class TraversalContext:
    """Per-walk traversal state, passed by reference down the recursion.

    Attributes:
        state: The run's ExtractionState.
        max_depth: Maximum depth, or None for unlimited.
        depth: Depth of the node being visited (roots are at depth 1).
        ancestors: Id chain from the root down to the visited node,
            inclusive.
        inherited: Values published by ancestors. What a hook writes while
            visiting a node lands in that node's own layer and is seen by
            its descendants; it is discarded when the walk leaves the node.
    """

    state: ExtractionState
    max_depth: Optional[int] = None
    depth: int = 0
    ancestors: list[str] = field(default_factory=list)
    inherited: ChainMap = field(default_factory=ChainMap)

    @property
    def node_id(self) -> Optional[str]:
        return self.ancestors[-1] if self.ancestors else None

    @property
    def parent_id(self) -> Optional[str]:
        return self.ancestors[-2] if len(self.ancestors) > 1 else None

    @property
    def can_descend(self) -> bool:
        return self.max_depth is None or self.depth < self.max_depth

    def from_parent(self, key: str, default: Any = None) -> Any:
        """Read an inherited value, ignoring the visited node's own layer."""
        return self.inherited.parents.get(key, default)

    def enter(self, node_id: str) -> None:
        self.depth += 1
        self.ancestors.append(node_id)
        self.inherited = self.inherited.new_child()

    def leave(self) -> None:
        self.depth -= 1
        self.ancestors.pop()
        self.inherited = self.inherited.parents


# ── Output ───────────────────────────────────────────────────────────────

_CAMEL_CASE = {
    'text_style': 'textStyle',
    'stroke_weight': 'strokeWeight',
    'stroke_dashes': 'strokeDashes',
    'border_radius': 'borderRadius',
    'component_id': 'componentId',
    'component_properties': 'componentProperties',
    'start_node_id': 'startNodeId',
    'end_node_id': 'endNodeId',
    'row_count': 'rowCount',
    'column_count': 'columnCount',
}


@dataclass(frozen=True)
class SimplifiedNode:
    """Compact output node. Built once per visited raw node, never mutated."""

    id: str
    name: str
    type: str
    layout: Optional[dict[str, Any]] = None
    text: Optional[str] = None
    text_style: Optional[str] = None
    fills: Optional[str] = None
    strokes: Optional[str] = None
    stroke_weight: Optional[str] = None
    stroke_dashes: Optional[list[float]] = None
    effects: Optional[str] = None
    opacity: Optional[float] = None
    border_radius: Optional[str] = None
    component_id: Optional[str] = None
    component_properties: Optional[dict[str, Any]] = None
    start_node_id: Optional[str] = None
    end_node_id: Optional[str] = None
    markdown: Optional[str] = None
    row_count: Optional[int] = None
    column_count: Optional[int] = None
    truncated: bool = False
    extra: Optional[dict[str, Any]] = None
    children: tuple['SimplifiedNode', ...] = ()

    @classmethod
    def from_accumulator(
        cls,
        result: dict[str, Any],
        children: tuple['SimplifiedNode', ...] = (),
        truncated: bool = False,
    ) -> 'SimplifiedNode':
        known = {f.name for f in fields(cls)} - {'extra', 'children', 'truncated'}
        values = {k: v for k, v in result.items() if k in known}
        extra = {k: v for k, v in result.items() if k not in known and k not in ('children', 'truncated')}
        return cls(
            **values,
            truncated=truncated,
            extra=extra or None,
            children=tuple(children),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys, omitting unset fields."""
        data: dict[str, Any] = {}
        for f in fields(self):
            if f.name in ('extra', 'children'):
                continue
            value = getattr(self, f.name)
            if value is None or (f.name == 'truncated' and not value):
                continue
            data[_CAMEL_CASE.get(f.name, f.name)] = value
        if self.extra:
            for k, v in self.extra.items():
                data.setdefault(k, v)
        if self.children:
            data['children'] = [child.to_dict() for child in self.children]
        return data


@dataclass
class SimplifiedDesign:
    """The assembled result of one extraction run."""

    name: str
    nodes: list[SimplifiedNode]
    components: dict[str, ComponentDefinition] = field(default_factory=dict)
    component_sets: dict[str, ComponentSetDefinition] = field(default_factory=dict)
    styles: dict[str, Any] = field(default_factory=dict)
    last_modified: Optional[str] = None
    warnings: list[NodeWarning] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            'metadata': _drop_none({'name': self.name, 'lastModified': self.last_modified}),
            'nodes': [node.to_dict() for node in self.nodes],
            'components': {k: v.to_dict() for k, v in self.components.items()},
            'componentSets': {k: v.to_dict() for k, v in self.component_sets.items()},
            'globalVars': {'styles': dict(self.styles)},
        }


# ── Options ──────────────────────────────────────────────────────────────

@dataclass
class ExtractOptions:
    """Options accepted by DesignExtractor.extract."""

    depth: Optional[int] = None
    node_filter: Optional[set[str]] = None
    name: Optional[str] = None
    last_modified: Optional[str] = None


@dataclass
class SimplifyOptions:
    """Optimizations applied on top of extraction; all off by default."""

    depth: Optional[int] = None
    node_ids: Optional[list[str]] = None
    extractors: Optional[list[str]] = None
    tables_to_markdown: bool = False
    simplify_connectors: bool = False
    simplify_component_instances: bool = False
    flatten_component_instances: bool = False
    exclude_styles: bool = False


@dataclass
class DumpOptions:
    """Options controlling the dump output."""

    simplify: SimplifyOptions = field(default_factory=SimplifyOptions)
    pretty: bool = True


@dataclass
class DumpResult:
    """Result summary of a dump operation."""

    nodes_extracted: int
    styles_count: int
    warnings_count: int
    output_path: str


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}
