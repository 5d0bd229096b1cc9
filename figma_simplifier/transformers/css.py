"""CSS-style value formatting shared by the transformers."""

from typing import Optional, Union

Number = Union[int, float]


def format_number(value: Number) -> Number:
    """Round to two decimals and drop a trailing .0."""
    rounded = round(float(value), 2)
    return int(rounded) if rounded == int(rounded) else rounded


def px(value: Number) -> str:
    return f"{format_number(value)}px"


def css_shorthand(
    top: Number,
    right: Number,
    bottom: Number,
    left: Number,
    ignore_zero: bool = True,
) -> Optional[str]:
    """Collapse four edge values into the shortest CSS shorthand.

    Returns None when every edge is zero and `ignore_zero` is set.
    """
    if ignore_zero and top == right == bottom == left == 0:
        return None
    if top == right == bottom == left:
        return px(top)
    if top == bottom and right == left:
        return f"{px(top)} {px(right)}"
    if right == left:
        return f"{px(top)} {px(right)} {px(bottom)}"
    return f"{px(top)} {px(right)} {px(bottom)} {px(left)}"
