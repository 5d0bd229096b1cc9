"""Reduction of CONNECTOR nodes to their endpoints and label."""

from dataclasses import replace

from figma_simplifier.domain.models import SimplifiedNode


def simplify_connector(node: SimplifiedNode) -> SimplifiedNode:
    """Keep only identity, endpoints and text on CONNECTOR nodes.

    Output for a connector: {id, name, type, startNodeId?, endNodeId?, text?}
    """
    children = tuple(simplify_connector(c) for c in node.children)
    if node.type != 'CONNECTOR':
        return replace(node, children=children) if children else node
    return SimplifiedNode(
        id=node.id,
        name=node.name,
        type=node.type,
        start_node_id=node.start_node_id,
        end_node_id=node.end_node_id,
        text=node.text,
        children=children,
    )


def simplify_all_connectors(nodes: list[SimplifiedNode]) -> list[SimplifiedNode]:
    return [simplify_connector(n) for n in nodes]
