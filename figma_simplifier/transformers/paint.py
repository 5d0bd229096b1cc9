"""Fill and stroke transformers.

Figma paints are converted to CSS-like values: solid colors become hex
strings (or rgba() when translucent), gradients and images become small
dicts. Invisible paints are dropped.
"""

from typing import Any, Mapping, Optional

from figma_simplifier.transformers.css import css_shorthand, format_number, px


def is_visible(item: Mapping[str, Any]) -> bool:
    return item.get('visible', True) is not False


def format_color(color: Mapping[str, Any], opacity: float = 1.0) -> str:
    """Convert a Figma RGBA color (channels 0..1) to a CSS color string."""
    r = round(float(color.get('r', 0)) * 255)
    g = round(float(color.get('g', 0)) * 255)
    b = round(float(color.get('b', 0)) * 255)
    alpha = round(float(color.get('a', 1)) * float(opacity), 2)
    if alpha >= 1:
        return f"#{r:02X}{g:02X}{b:02X}"
    return f"rgba({r}, {g}, {b}, {format_number(alpha)})"


def parse_paint(paint: Mapping[str, Any]) -> Any:
    """Simplify a single Figma Paint."""
    paint_type = paint.get('type')
    opacity = paint.get('opacity', 1.0)

    if paint_type == 'SOLID':
        return format_color(paint.get('color') or {}, opacity)

    if paint_type == 'IMAGE':
        return {
            'type': 'IMAGE',
            'imageRef': paint.get('imageRef'),
            'scaleMode': paint.get('scaleMode'),
        }

    if isinstance(paint_type, str) and paint_type.startswith('GRADIENT_'):
        return {
            'type': paint_type,
            'gradientHandlePositions': [
                {'x': format_number(h.get('x', 0)), 'y': format_number(h.get('y', 0))}
                for h in paint.get('gradientHandlePositions') or []
            ],
            'gradientStops': [
                {
                    'position': format_number(stop.get('position', 0)),
                    'color': format_color(stop.get('color') or {}, opacity),
                }
                for stop in paint.get('gradientStops') or []
            ],
        }

    return {'type': paint_type}


def build_fills(node: Mapping[str, Any]) -> Optional[list[Any]]:
    """Return the node's visible fills, or None when there are none."""
    fills = node.get('fills')
    if not isinstance(fills, list):
        return None
    parsed = [parse_paint(p) for p in fills if isinstance(p, Mapping) and is_visible(p)]
    return parsed or None


def build_strokes(node: Mapping[str, Any]) -> dict[str, Any]:
    """Simplify stroke paints, weight and dash pattern.

    Returns:
        Dict with any of:
        - colors: list of simplified paints
        - strokeWeight: CSS width string ('1px' or per-side shorthand)
        - strokeDashes: dash pattern list
        Empty when the node has no visible strokes.
    """
    strokes = node.get('strokes')
    if not isinstance(strokes, list):
        return {}
    colors = [parse_paint(p) for p in strokes if isinstance(p, Mapping) and is_visible(p)]
    if not colors:
        return {}

    result: dict[str, Any] = {'colors': colors}

    individual = node.get('individualStrokeWeights')
    if isinstance(individual, Mapping):
        weight = css_shorthand(
            individual.get('top', 0), individual.get('right', 0),
            individual.get('bottom', 0), individual.get('left', 0),
        )
        if weight:
            result['strokeWeight'] = weight
    elif isinstance(node.get('strokeWeight'), (int, float)) and node['strokeWeight'] > 0:
        result['strokeWeight'] = px(node['strokeWeight'])

    dashes = node.get('strokeDashes')
    if isinstance(dashes, list) and dashes:
        result['strokeDashes'] = [format_number(d) for d in dashes]

    return result
