"""Native TABLE nodes rendered as markdown tables.

TABLE nodes hold a flat list of TABLE_CELL children. The grid is rebuilt
from the cells' bounding boxes: cells are grouped into rows by their
rounded y position and ordered within a row by x. The first row is the
header.
"""

from typing import Any, Mapping, Optional


def is_table_node(node: Mapping[str, Any]) -> bool:
    return node.get('type') == 'TABLE'


def extract_text(node: Mapping[str, Any]) -> str:
    """Concatenate the text of a node and its descendants."""
    if node.get('type') in ('TEXT', 'TABLE_CELL') and isinstance(node.get('characters'), str):
        return node['characters']

    children = node.get('children')
    if isinstance(children, list):
        texts = [extract_text(c) for c in children if isinstance(c, Mapping)]
        return ' '.join(t for t in texts if t).strip()
    return ''


def _format_cell(text: str) -> str:
    return text.replace('|', '\\|').replace('\n', ' ')


def convert_table_to_markdown(node: Mapping[str, Any]) -> Optional[dict[str, Any]]:
    """Render a TABLE node.

    Returns:
        Dict with markdown, row_count and column_count, or None when the
        node has no positioned cells.
    """
    children = node.get('children')
    if not isinstance(children, list):
        return None

    rows_by_y: dict[int, list[tuple[float, str]]] = {}
    for cell in children:
        if not isinstance(cell, Mapping) or cell.get('type') != 'TABLE_CELL':
            continue
        box = cell.get('absoluteBoundingBox')
        if not isinstance(box, Mapping):
            continue
        y = round(float(box.get('y', 0)))
        rows_by_y.setdefault(y, []).append((float(box.get('x', 0)), extract_text(cell)))

    if not rows_by_y:
        return None

    rows = [
        [text for _, text in sorted(rows_by_y[y], key=lambda c: c[0])]
        for y in sorted(rows_by_y)
    ]
    column_count = max(len(r) for r in rows)

    lines = []
    for i, row in enumerate(rows):
        padded = row + [''] * (column_count - len(row))
        lines.append('| ' + ' | '.join(_format_cell(c) for c in padded) + ' |')
        if i == 0:
            lines.append('| ' + ' | '.join(['---'] * column_count) + ' |')

    return {
        'markdown': '\n'.join(lines),
        'row_count': len(rows),
        'column_count': column_count,
    }
