"""Effect transformer: shadows and blurs to CSS properties."""

from typing import Any, Mapping

from figma_simplifier.transformers.css import px
from figma_simplifier.transformers.paint import format_color, is_visible


def _shadow(effect: Mapping[str, Any]) -> str:
    offset = effect.get('offset') or {}
    parts = [
        px(offset.get('x', 0)),
        px(offset.get('y', 0)),
        px(effect.get('radius', 0)),
        px(effect.get('spread', 0)),
        format_color(effect.get('color') or {}),
    ]
    shadow = ' '.join(parts)
    if effect.get('type') == 'INNER_SHADOW':
        return f"inset {shadow}"
    return shadow


def build_effects(node: Mapping[str, Any]) -> dict[str, str]:
    """Collapse the node's visible effects into CSS properties.

    Returns:
        Dict with any of boxShadow, filter, backdropFilter. Empty when the
        node has no visible effects.
    """
    effects = node.get('effects')
    if not isinstance(effects, list):
        return {}
    visible = [e for e in effects if isinstance(e, Mapping) and is_visible(e)]

    shadows = [_shadow(e) for e in visible if e.get('type') in ('DROP_SHADOW', 'INNER_SHADOW')]
    layer_blurs = [f"blur({px(e.get('radius', 0))})" for e in visible if e.get('type') == 'LAYER_BLUR']
    background_blurs = [
        f"blur({px(e.get('radius', 0))})" for e in visible if e.get('type') == 'BACKGROUND_BLUR'
    ]

    result: dict[str, str] = {}
    if shadows:
        result['boxShadow'] = ', '.join(shadows)
    if layer_blurs:
        result['filter'] = ' '.join(layer_blurs)
    if background_blurs:
        result['backdropFilter'] = ' '.join(background_blurs)
    return result


def build_border_radius(node: Mapping[str, Any]) -> str | None:
    """Corner radius as a CSS border-radius string, or None when square."""
    radii = node.get('rectangleCornerRadii')
    if isinstance(radii, list) and len(radii) == 4:
        if all(r == 0 for r in radii):
            return None
        if all(r == radii[0] for r in radii):
            return px(radii[0])
        return ' '.join(px(r) for r in radii)

    radius = node.get('cornerRadius')
    if isinstance(radius, (int, float)) and radius > 0:
        return px(radius)
    return None
