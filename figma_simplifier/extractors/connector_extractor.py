"""Connector extractor: the endpoints of FigJam CONNECTOR nodes."""

from typing import Any, Mapping

from figma_simplifier.domain.models import NodeAccumulator, TraversalContext
from figma_simplifier.extractors.base_extractor import ExtractorHook


class ConnectorExtractor(ExtractorHook):
    """Extracts the ids of the nodes a connector links."""

    name = 'connector'

    def before_children(
        self,
        node: Mapping[str, Any],
        context: TraversalContext,
        result: NodeAccumulator,
    ) -> None:
        if node.get('type') != 'CONNECTOR':
            return
        for raw_key, field in (('connectorStart', 'start_node_id'), ('connectorEnd', 'end_node_id')):
            endpoint = node.get(raw_key)
            if isinstance(endpoint, Mapping) and endpoint.get('endpointNodeId'):
                result[field] = endpoint['endpointNodeId']
