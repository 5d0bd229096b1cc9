"""Reduction of INSTANCE nodes to their semantic content.

An instance's look is defined by its component; what matters to a reader
is which component it is, the property values it exposes and the text it
shows.
"""

from dataclasses import replace

from figma_simplifier.domain.models import SimplifiedNode


def _semantic_copy(node: SimplifiedNode, **overrides) -> SimplifiedNode:
    values = dict(
        id=node.id,
        name=node.name,
        type=node.type,
        component_id=node.component_id,
        component_properties=node.component_properties,
        text=node.text,
        truncated=node.truncated,
    )
    values.update(overrides)
    return SimplifiedNode(**values)


def simplify_component_instance(node: SimplifiedNode) -> SimplifiedNode:
    """Keep only id, name, type, component data and text on INSTANCE nodes.

    Children are processed recursively; non-INSTANCE nodes are otherwise
    passed through unchanged.
    """
    children = tuple(simplify_component_instance(c) for c in node.children)
    if node.type != 'INSTANCE':
        return replace(node, children=children) if children else node
    return _semantic_copy(node, children=children)


def simplify_all_component_instances(nodes: list[SimplifiedNode]) -> list[SimplifiedNode]:
    return [simplify_component_instance(n) for n in nodes]


def extract_all_text(node: SimplifiedNode) -> str:
    """All text in the subtree, depth-first, space separated."""
    texts = [node.text] if node.text else []
    for child in node.children:
        child_text = extract_all_text(child)
        if child_text:
            texts.append(child_text)
    return ' '.join(texts).strip()


def flatten_component_instance(node: SimplifiedNode) -> SimplifiedNode:
    """Collapse INSTANCE subtrees to a single node with flattened text."""
    if node.type != 'INSTANCE':
        if not node.children:
            return node
        return replace(node, children=tuple(flatten_component_instance(c) for c in node.children))
    return _semantic_copy(node, text=extract_all_text(node) or None)


def flatten_all_component_instances(nodes: list[SimplifiedNode]) -> list[SimplifiedNode]:
    return [flatten_component_instance(n) for n in nodes]
