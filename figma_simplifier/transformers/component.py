"""Component metadata transformers."""

from typing import Any, Mapping, Optional

from figma_simplifier.domain.models import ComponentDefinition, ComponentSetDefinition


def simplify_component_properties(raw: Any) -> Optional[dict[str, Any]]:
    """Reduce Figma's `{name: {type, value, ...}}` map to `{name: value}`.

    Returns None when the instance exposes no properties.
    """
    if not isinstance(raw, Mapping):
        return None
    properties = {}
    for name, prop in raw.items():
        if isinstance(prop, Mapping):
            properties[str(name)] = prop.get('value')
        else:
            properties[str(name)] = prop
    return properties or None


def sanitize_components(raw: Any) -> dict[str, ComponentDefinition]:
    """Convert a response-level `components` map into side-table entries."""
    if not isinstance(raw, Mapping):
        return {}
    components = {}
    for component_id, info in raw.items():
        if not isinstance(info, Mapping):
            continue
        components[component_id] = ComponentDefinition(
            id=component_id,
            key=info.get('key'),
            name=info.get('name', ''),
            component_set_id=info.get('componentSetId'),
            description=info.get('description') or None,
        )
    return components


def sanitize_component_sets(raw: Any) -> dict[str, ComponentSetDefinition]:
    """Convert a response-level `componentSets` map into side-table entries."""
    if not isinstance(raw, Mapping):
        return {}
    component_sets = {}
    for set_id, info in raw.items():
        if not isinstance(info, Mapping):
            continue
        component_sets[set_id] = ComponentSetDefinition(
            id=set_id,
            key=info.get('key'),
            name=info.get('name', ''),
            description=info.get('description') or None,
        )
    return component_sets
