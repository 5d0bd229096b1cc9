"""
Component extractor.

INSTANCE nodes get a reference to their component and their exposed
property values; a component seen only through an instance is recorded
with its id alone. COMPONENT and COMPONENT_SET nodes are recorded in the
run's side tables, keyed by node id, instead of being embedded anywhere.
"""

from typing import Any, Mapping

from figma_simplifier.domain.models import (
    ComponentDefinition,
    ComponentSetDefinition,
    NodeAccumulator,
    TraversalContext,
)
from figma_simplifier.extractors.base_extractor import ExtractorHook
from figma_simplifier.transformers.component import simplify_component_properties

ENCLOSING_COMPONENT_SET = 'component.enclosing_set'


class ComponentExtractor(ExtractorHook):
    """Extracts component references and populates the component side tables."""

    name = 'component'

    def before_children(
        self,
        node: Mapping[str, Any],
        context: TraversalContext,
        result: NodeAccumulator,
    ) -> None:
        node_type = node.get('type')
        state = context.state

        if node_type == 'INSTANCE':
            component_id = node.get('componentId')
            if isinstance(component_id, str) and component_id:
                result['component_id'] = component_id
                if component_id not in state.components:
                    state.add_component(ComponentDefinition(id=component_id, name=''))
            properties = simplify_component_properties(node.get('componentProperties'))
            if properties:
                result['component_properties'] = properties

        elif node_type == 'COMPONENT':
            known = state.components.get(node['id'])
            state.add_component(ComponentDefinition(
                id=node['id'],
                name=node.get('name', ''),
                key=node.get('key') or (known.key if known else None),
                component_set_id=context.from_parent(ENCLOSING_COMPONENT_SET)
                or (known.component_set_id if known else None),
                description=node.get('description') or (known.description if known else None),
            ))

        elif node_type == 'COMPONENT_SET':
            known = state.component_sets.get(node['id'])
            state.add_component_set(ComponentSetDefinition(
                id=node['id'],
                name=node.get('name', ''),
                key=node.get('key') or (known.key if known else None),
                description=node.get('description') or (known.description if known else None),
            ))
            context.inherited[ENCLOSING_COMPONENT_SET] = node['id']
