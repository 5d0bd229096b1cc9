"""Reader for saved Figma API responses."""
import json
import os
from typing import Any


class DesignReadError(Exception):
    """Error reading a design file."""
    pass


class DesignReader:
    """Reads `GET /v1/files` style JSON documents from disk."""

    def read(self, path: str) -> dict[str, Any]:
        """Read and parse a design file.

        Raises:
            DesignReadError: The file is missing, unreadable, not JSON, or
                not a JSON object.
        """
        if not os.path.isfile(path):
            raise DesignReadError(f"Design file not found: {path}")
        try:
            with open(path, encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise DesignReadError(f"Failed to read design file {path}: {e}")
        if not isinstance(data, dict):
            raise DesignReadError(f"Design file {path} must contain a JSON object")
        return data
