"""
Node type categories for Figma document nodes.

Categories group the node types of the Figma REST API so extractors can
decide which properties are meaningful for a node without probing for
field presence.
"""

from enum import Enum


class NodeCategory(str, Enum):
    """
    Categories for Figma node types.

    Categories:
        DOCUMENT: Document root and pages (canvases)
        CONTAINER: Frames, groups and sections holding other nodes
        SHAPE: Basic geometric shapes (rectangles)
        VECTOR: Vector primitives and boolean operations
        TEXT: Text layers
        COMPONENT: Component definitions, sets and instances
        TABLE: FigJam/Figma tables and their cells
        DIAGRAM: FigJam connectors, stickies and shapes with text
        EMBED: Widgets, embeds and link previews
        UNKNOWN: Unrecognized node types
    """
    DOCUMENT = "Document"
    CONTAINER = "Container"
    SHAPE = "Shape"
    VECTOR = "Vector"
    TEXT = "Text"
    COMPONENT = "Component"
    TABLE = "Table"
    DIAGRAM = "Diagram"
    EMBED = "Embed"
    UNKNOWN = "Unknown"
