"""
Data source abstraction for the MCP server.

Provides a uniform interface for reading saved Figma API responses. Only
local storage is supported: the server never fetches from the network.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path


class DataSource(ABC):
    """Abstract interface for reading saved design files."""

    @abstractmethod
    def list_files(self) -> list[str]:
        """Return the names of available design files."""

    @abstractmethod
    def read_json(self, file_name: str) -> dict:
        """Read and parse a design file. Raises FileNotFoundError if missing."""

    @abstractmethod
    def file_exists(self, file_name: str) -> bool:
        """Check if a design file exists."""


class LocalDataSource(DataSource):
    """Reads `<name>.json` design files from a local directory."""

    def __init__(self, data_dir: str):
        self._root = Path(data_dir)
        if not self._root.is_dir():
            raise FileNotFoundError(f"Data directory not found: {self._root}")

    def _path(self, file_name: str) -> Path:
        name = file_name if file_name.endswith(".json") else f"{file_name}.json"
        path = (self._root / name).resolve()
        if self._root.resolve() not in path.parents:
            raise FileNotFoundError(f"Not found: {file_name}")
        return path

    def list_files(self) -> list[str]:
        return sorted(
            e.stem for e in self._root.iterdir()
            if e.is_file() and e.suffix == ".json" and not e.name.endswith(".warnings.json")
        )

    def read_json(self, file_name: str) -> dict:
        path = self._path(file_name)
        if not path.exists():
            raise FileNotFoundError(f"Not found: {file_name}")
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    def file_exists(self, file_name: str) -> bool:
        try:
            return self._path(file_name).exists()
        except FileNotFoundError:
            return False
