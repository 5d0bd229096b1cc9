"""
Figma Simplifier MCP Server.

Exposes saved Figma API responses, simplified into compact AI-friendly
JSON, to LLM clients via the Model Context Protocol.

Usage:
    python -m mcp_server.server --data-dir /path/to/responses

The directory holds `<name>.json` files saved from `GET /v1/files/:key`
or `GET /v1/files/:key/nodes`.
"""

from __future__ import annotations

import json
import logging
import sys

from mcp.server.fastmcp import FastMCP

from figma_simplifier.design_extractor import parse_node_ids, simplify_design
from figma_simplifier.domain.models import SimplifyOptions
from figma_simplifier.extractor_registry import ExtractorRegistry
from mcp_server.datasource import DataSource, LocalDataSource

logger = logging.getLogger(__name__)

# ── Globals ─────────────────────────────────────────────────────────────

_ds: DataSource | None = None
mcp = FastMCP("figma-simplifier")


def _datasource() -> DataSource:
    if _ds is None:
        raise RuntimeError("Data source not initialized")
    return _ds


def _truncate(data: dict | list, max_chars: int = 80_000) -> dict | list | str:
    text = json.dumps(data, ensure_ascii=False)
    if len(text) <= max_chars:
        return data
    return {
        "_truncated": True,
        "_message": f"Response too large ({len(text):,} chars). Pass node_id, a smaller depth, "
                    "or exclude_styles=True.",
    }


# ── Tools ───────────────────────────────────────────────────────────────


@mcp.tool()
def list_design_files() -> list[str]:
    """List the saved Figma design files available to this server.

    Call this first to discover what's available.
    """
    return _datasource().list_files()


@mcp.tool()
def list_extractors() -> dict:
    """List extractor names and presets accepted by get_design_data."""
    registry = ExtractorRegistry()
    return {
        "extractors": registry.get_supported_extractors(),
        "presets": registry.get_presets(),
    }


@mcp.tool()
def get_design_data(
    file_name: str,
    node_id: str | None = None,
    depth: int | None = None,
    extractors: list[str] | None = None,
    exclude_styles: bool = True,
    tables_to_markdown: bool = True,
    simplify_connectors: bool = True,
    simplify_component_instances: bool = True,
    flatten_component_instances: bool = False,
) -> dict:
    """Get a saved Figma design in simplified, AI-friendly form.

    Returns metadata, the simplified node tree, component and component-set
    tables, and deduplicated styles under globalVars.styles. By default the
    output is tuned for reading structure and content: styles are dropped
    and tables, connectors and component instances are simplified. Pass
    exclude_styles=False to get the styles back.

    Args:
        file_name: Design file name (from list_design_files).
        node_id: Optional node id(s) to focus on, e.g. "1:10", "1:10;2:20"
            or "1-10,2-20".
        depth: Optional tree depth limit. Nodes cut off by it carry
            truncated: true.
        extractors: Extractor or preset names (default: all).
        exclude_styles: Drop all styling information.
        tables_to_markdown: Render TABLE nodes as markdown.
        simplify_connectors: Reduce CONNECTOR nodes to their endpoints.
        simplify_component_instances: Reduce INSTANCE nodes to component data and text.
        flatten_component_instances: Collapse INSTANCE subtrees to one node
            holding all their text (takes precedence over simplifying).
    """
    response = _datasource().read_json(file_name)
    design = simplify_design(response, SimplifyOptions(
        depth=depth,
        node_ids=parse_node_ids(node_id),
        extractors=extractors,
        exclude_styles=exclude_styles,
        tables_to_markdown=tables_to_markdown,
        simplify_connectors=simplify_connectors,
        simplify_component_instances=simplify_component_instances,
        flatten_component_instances=flatten_component_instances,
    ))
    for warning in design.warnings:
        logger.warning("%s: node %s: %s", file_name, warning.node_id, warning.message)
    return _truncate(design.to_dict())


# ── Entry point ─────────────────────────────────────────────────────────

def main():
    import argparse

    parser = argparse.ArgumentParser(description="Figma Simplifier MCP Server")
    parser.add_argument("--data-dir", required=True, help="Local directory containing saved design JSON files")

    args = parser.parse_args()
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)

    global _ds
    import os
    data_dir = os.path.abspath(args.data_dir)
    if not os.path.isdir(data_dir):
        print(f"Error: {data_dir} is not a directory", file=sys.stderr)
        sys.exit(1)
    _ds = LocalDataSource(data_dir)

    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
