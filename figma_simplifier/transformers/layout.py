"""Layout transformer: bounding box and auto-layout fields.

Only values that differ from their defaults are emitted, so a plain
absolutely-positioned rectangle yields little more than its size.
"""

from typing import Any, Mapping, Optional

from figma_simplifier.transformers.css import css_shorthand, format_number, px

LAYOUT_MODES = {'HORIZONTAL': 'row', 'VERTICAL': 'column'}

JUSTIFY_CONTENT = {
    'CENTER': 'center',
    'MAX': 'flex-end',
    'SPACE_BETWEEN': 'space-between',
}

ALIGN_ITEMS = {
    'CENTER': 'center',
    'MAX': 'flex-end',
    'BASELINE': 'baseline',
}

SIZING = {'FILL': 'fill', 'HUG': 'hug'}

# Frames clip their content unless told otherwise; nothing else does.
TYPE_LAYOUT_DEFAULTS: dict[str, dict[str, Any]] = {
    'FRAME': {'clipsContent': True},
    'COMPONENT': {'clipsContent': True},
    'COMPONENT_SET': {'clipsContent': True},
    'INSTANCE': {'clipsContent': True},
}
LAYOUT_DEFAULTS: dict[str, Any] = {'clipsContent': False}


def bounding_box(node: Mapping[str, Any]) -> Optional[dict[str, float]]:
    box = node.get('absoluteBoundingBox')
    if not isinstance(box, Mapping):
        return None
    try:
        return {
            'x': float(box.get('x', 0)),
            'y': float(box.get('y', 0)),
            'width': float(box.get('width', 0)),
            'height': float(box.get('height', 0)),
        }
    except (TypeError, ValueError):
        return None


def build_layout(
    node: Mapping[str, Any],
    parent_box: Optional[Mapping[str, float]] = None,
    parent_layout_mode: Optional[str] = None,
) -> dict[str, Any]:
    """Simplify a node's geometry and auto-layout settings.

    Args:
        node: Raw node.
        parent_box: The parent's absolute bounding box, if known.
        parent_layout_mode: The parent's simplified layoutMode ('row' or
            'column') when the parent is an auto-layout frame.

    Returns:
        Dict of non-default layout values; empty when there are none.
    """
    layout: dict[str, Any] = {}

    mode = LAYOUT_MODES.get(node.get('layoutMode'))
    if mode:
        layout['layoutMode'] = mode
        justify = JUSTIFY_CONTENT.get(node.get('primaryAxisAlignItems'))
        if justify:
            layout['justifyContent'] = justify
        align = ALIGN_ITEMS.get(node.get('counterAxisAlignItems'))
        if align:
            layout['alignItems'] = align
        spacing = node.get('itemSpacing')
        if isinstance(spacing, (int, float)) and spacing:
            layout['gap'] = px(spacing)
        if node.get('layoutWrap') == 'WRAP':
            layout['wrap'] = True

    padding = css_shorthand(
        node.get('paddingTop') or 0,
        node.get('paddingRight') or 0,
        node.get('paddingBottom') or 0,
        node.get('paddingLeft') or 0,
    )
    if padding:
        layout['padding'] = padding

    sizing = {}
    for axis, key in (('horizontal', 'layoutSizingHorizontal'), ('vertical', 'layoutSizingVertical')):
        value = SIZING.get(node.get(key))
        if value:
            sizing[axis] = value
    if sizing:
        layout['sizing'] = sizing

    absolute = node.get('layoutPositioning') == 'ABSOLUTE'
    if absolute and parent_layout_mode:
        layout['position'] = 'absolute'

    box = bounding_box(node)
    if box is not None:
        if absolute or not parent_layout_mode:
            origin_x = parent_box['x'] if parent_box else 0.0
            origin_y = parent_box['y'] if parent_box else 0.0
            x = format_number(box['x'] - origin_x)
            y = format_number(box['y'] - origin_y)
            if x:
                layout['x'] = x
            if y:
                layout['y'] = y
        if box['width'] > 0:
            layout['width'] = format_number(box['width'])
        if box['height'] > 0:
            layout['height'] = format_number(box['height'])

    clips = node.get('clipsContent')
    if isinstance(clips, bool):
        default = TYPE_LAYOUT_DEFAULTS.get(node.get('type'), LAYOUT_DEFAULTS)['clipsContent']
        if clips != default:
            layout['clipsContent'] = clips

    return layout
