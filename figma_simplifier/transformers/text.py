"""Typography transformer."""

from typing import Any, Mapping, Optional

from figma_simplifier.transformers.css import format_number, px

# Values Figma reports for unstyled text; dropped before registration.
TEXT_STYLE_DEFAULTS: dict[str, Any] = {
    'letterSpacing': 0,
    'textCase': 'ORIGINAL',
    'textDecoration': 'NONE',
    'textAlignHorizontal': 'LEFT',
    'textAlignVertical': 'TOP',
}


def build_text_style(style: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Resolve a Figma TypeStyle into a compact typography record.

    Line height is expressed in `em` relative to the font size and letter
    spacing as a percentage, so records stay comparable across sizes.

    Returns:
        Typography dict; empty when `style` carries nothing usable.
    """
    if not isinstance(style, Mapping):
        return {}

    text_style: dict[str, Any] = {
        'fontFamily': style.get('fontFamily'),
        'fontWeight': style.get('fontWeight'),
        'fontSize': style.get('fontSize'),
        'textCase': style.get('textCase'),
        'textDecoration': style.get('textDecoration'),
        'textAlignHorizontal': style.get('textAlignHorizontal'),
        'textAlignVertical': style.get('textAlignVertical'),
    }

    font_size = style.get('fontSize')
    line_height = style.get('lineHeightPx')
    if isinstance(line_height, (int, float)) and isinstance(font_size, (int, float)) and font_size > 0:
        text_style['lineHeight'] = f"{format_number(line_height / font_size)}em"
    elif isinstance(line_height, (int, float)):
        text_style['lineHeight'] = px(line_height)

    spacing = style.get('letterSpacing')
    if isinstance(spacing, (int, float)) and isinstance(font_size, (int, float)) and font_size > 0:
        text_style['letterSpacing'] = f"{format_number(spacing / font_size * 100)}%" if spacing else 0

    return {k: v for k, v in text_style.items() if v is not None}
