"""Shared test fixtures."""

import copy
import json

import pytest


# ── Sample Raw Nodes ─────────────────────────────────────────────────────

def solid(r, g, b, a=1.0, **extra):
    """A Figma SOLID paint."""
    return {'type': 'SOLID', 'color': {'r': r, 'g': g, 'b': b, 'a': a}, **extra}


def box(x, y, width, height):
    return {'x': x, 'y': y, 'width': width, 'height': height}


TWO_TEXTS = {
    'id': '1',
    'name': 'Frame',
    'type': 'FRAME',
    'children': [
        {'id': '2', 'name': 'Hi', 'type': 'TEXT', 'characters': 'Hi', 'style': {'fontSize': 16}},
        {'id': '3', 'name': 'Bye', 'type': 'TEXT', 'characters': 'Bye', 'style': {'fontSize': 16}},
    ],
}

ICON = {
    'id': '10:1',
    'name': 'icon/close',
    'type': 'GROUP',
    'children': [
        {'id': '10:2', 'name': 'Line 1', 'type': 'LINE', 'strokes': [solid(0, 0, 0)], 'strokeWeight': 2},
        {'id': '10:3', 'name': 'Line 2', 'type': 'LINE', 'strokes': [solid(0, 0, 0)], 'strokeWeight': 2},
    ],
}

CARD = {
    'id': '20:1',
    'name': 'Card',
    'type': 'FRAME',
    'absoluteBoundingBox': box(100, 200, 320, 180),
    'layoutMode': 'VERTICAL',
    'itemSpacing': 8,
    'paddingTop': 16, 'paddingRight': 16, 'paddingBottom': 16, 'paddingLeft': 16,
    'fills': [solid(1, 1, 1)],
    'cornerRadius': 12,
    'effects': [{
        'type': 'DROP_SHADOW', 'visible': True,
        'color': {'r': 0, 'g': 0, 'b': 0, 'a': 0.25},
        'offset': {'x': 0, 'y': 4}, 'radius': 8,
    }],
    'children': [
        {
            'id': '20:2', 'name': 'Title', 'type': 'TEXT', 'characters': 'Welcome',
            'absoluteBoundingBox': box(116, 216, 288, 24),
            'style': {'fontFamily': 'Inter', 'fontWeight': 700, 'fontSize': 20, 'lineHeightPx': 24},
            'fills': [solid(0.1, 0.1, 0.1)],
        },
        {
            'id': '20:3', 'name': 'Button', 'type': 'INSTANCE', 'componentId': '30:1',
            'absoluteBoundingBox': box(116, 248, 120, 40),
            'componentProperties': {
                'Label#1:0': {'type': 'TEXT', 'value': 'Continue'},
                'Variant': {'type': 'VARIANT', 'value': 'Primary'},
            },
            'fills': [solid(0, 0.4, 1)],
            'children': [
                {
                    'id': 'I20:3;30:2', 'name': 'Label', 'type': 'TEXT', 'characters': 'Continue',
                    'style': {'fontFamily': 'Inter', 'fontWeight': 500, 'fontSize': 14},
                },
            ],
        },
    ],
}

FILE_RESPONSE = {
    'name': 'Design System',
    'lastModified': '2024-05-01T12:00:00Z',
    'document': {
        'id': '0:0',
        'name': 'Document',
        'type': 'DOCUMENT',
        'children': [
            {
                'id': '0:1',
                'name': 'Page 1',
                'type': 'CANVAS',
                'children': [
                    CARD,
                    {
                        'id': '30:0', 'name': 'Button', 'type': 'COMPONENT_SET',
                        'children': [
                            {'id': '30:1', 'name': 'Variant=Primary', 'type': 'COMPONENT',
                             'description': 'Primary action'},
                        ],
                    },
                ],
            },
        ],
    },
    'components': {
        '30:1': {'key': 'abc123', 'name': 'Variant=Primary', 'componentSetId': '30:0', 'description': ''},
        '40:1': {'key': 'def456', 'name': 'Remote Icon', 'description': 'From library'},
    },
    'componentSets': {
        '30:0': {'key': 'set001', 'name': 'Button', 'description': ''},
    },
}

NODES_RESPONSE = {
    'name': 'Design System',
    'lastModified': '2024-05-01T12:00:00Z',
    'nodes': {
        '20:1': {
            'document': CARD,
            'components': {'30:1': {'key': 'abc123', 'name': 'Variant=Primary', 'componentSetId': '30:0'}},
            'componentSets': {},
        },
        '10:1': {'document': ICON, 'components': {}, 'componentSets': {}},
    },
}


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def two_texts():
    return copy.deepcopy(TWO_TEXTS)


@pytest.fixture
def icon():
    return copy.deepcopy(ICON)


@pytest.fixture
def card():
    return copy.deepcopy(CARD)


@pytest.fixture
def file_response():
    return copy.deepcopy(FILE_RESPONSE)


@pytest.fixture
def nodes_response():
    return copy.deepcopy(NODES_RESPONSE)


@pytest.fixture
def write_json(tmp_path):
    """Write data as JSON to a temp file and return its path."""
    def _write(data, filename: str = "design.json") -> str:
        path = tmp_path / filename
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write
