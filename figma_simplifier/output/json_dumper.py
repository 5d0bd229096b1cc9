"""JSON output generation.

Writes a simplified design and, when there are any, the warnings collected
while extracting it.
"""

import json
import os
from typing import Any

from figma_simplifier.domain.models import NodeWarning, SimplifiedDesign


def warnings_path(output_path: str) -> str:
    """`out/design.json` → `out/design.warnings.json`."""
    root, _ = os.path.splitext(output_path)
    return f"{root}.warnings.json"


def _ensure_parent(path: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)


class JSONDumper:
    """Writes simplified designs as JSON files.

    Args:
        pretty: Whether to pretty-print JSON (default True).
    """

    def __init__(self, pretty: bool = True) -> None:
        self._indent = 2 if pretty else None

    def dumps(self, design: SimplifiedDesign) -> str:
        """The design document as JSON text."""
        return json.dumps(design.to_dict(), indent=self._indent, ensure_ascii=False, default=str)

    def write_design(self, design: SimplifiedDesign, output_path: str) -> None:
        """Write the design document to `output_path`."""
        _ensure_parent(output_path)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(self.dumps(design))

    def write_warnings(self, warnings: list[NodeWarning], output_path: str) -> None:
        """Write extraction warnings next to the design (only if any exist)."""
        if not warnings:
            return
        self._write_json(warnings_path(output_path), [w.to_dict() for w in warnings])

    def _write_json(self, path: str, data: Any) -> None:
        """Write data as JSON to a file."""
        _ensure_parent(path)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=self._indent, ensure_ascii=False, default=str)
