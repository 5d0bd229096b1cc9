"""Tests for DesignExtractor and the simplify_design pipeline."""

import copy
import logging

import pytest

from figma_simplifier.design_extractor import (
    DesignExtractor,
    parse_node_ids,
    select_subtrees,
    simplify_design,
)
from figma_simplifier.domain.models import ExtractOptions, SimplifyOptions
from figma_simplifier.extractors import TextExtractor


class TestDesignExtractor:
    """Tests for extraction over raw node trees."""

    def test_shared_text_style(self, two_texts):
        design = DesignExtractor().extract(two_texts)
        [root] = design.nodes
        assert [c.text_style for c in root.children] == ['text_1', 'text_1']
        assert design.styles == {'text_1': {'fontSize': 16}}
        assert design.name == 'Frame'

    def test_depth_one(self, two_texts):
        design = DesignExtractor().extract(two_texts, ExtractOptions(depth=1))
        [root] = design.nodes
        assert root.children == ()
        assert root.truncated is True
        assert design.styles == {}

    @pytest.mark.parametrize('depth', [0, -1, 1.5, True, '2'])
    def test_invalid_depth_rejected(self, two_texts, depth):
        with pytest.raises(ValueError):
            DesignExtractor().extract(two_texts, ExtractOptions(depth=depth))

    def test_list_of_roots(self, two_texts, icon):
        design = DesignExtractor().extract([two_texts, icon])
        assert [n.id for n in design.nodes] == ['1', '10:1']
        assert design.name == ''

    def test_name_override(self, two_texts):
        design = DesignExtractor().extract(two_texts, ExtractOptions(name='Custom', last_modified='now'))
        assert design.to_dict()['metadata'] == {'name': 'Custom', 'lastModified': 'now'}

    def test_runs_are_independent(self, two_texts, card):
        extractor = DesignExtractor()
        extractor.extract(card)
        design = extractor.extract(two_texts)
        assert list(design.styles) == ['text_1']

    def test_output_deterministic(self, card):
        first = DesignExtractor().extract(card).to_dict()
        second = DesignExtractor().extract(card).to_dict()
        assert first == second

    def test_input_not_mutated(self, card):
        snapshot = copy.deepcopy(card)
        DesignExtractor().extract(card)
        assert card == snapshot

    def test_custom_hooks(self, two_texts):
        design = DesignExtractor(hooks=[TextExtractor()]).extract(two_texts)
        assert design.nodes[0].layout is None
        assert design.nodes[0].children[0].text == 'Hi'

    def test_instance_component_listed(self):
        raw = {'id': '1', 'type': 'FRAME', 'children': [{'id': '2', 'type': 'INSTANCE', 'componentId': '9:1'}]}
        components = DesignExtractor().extract(raw).to_dict()['components']
        assert components == {'9:1': {'id': '9:1', 'name': ''}}

    def test_bad_child_reported_not_raised(self, two_texts):
        two_texts['children'].append({'name': 'broken'})
        design = DesignExtractor().extract(two_texts)
        assert len(design.nodes[0].children) == 2
        assert len(design.warnings) == 1


class TestNodeFilter:
    """Tests for node-id subtree selection."""

    def test_selects_requested_subtree(self, card):
        design = DesignExtractor().extract(card, ExtractOptions(node_filter={'20:3'}))
        [node] = design.nodes
        assert node.id == '20:3'
        assert node.name == 'Button'
        assert design.name == 'Button'

    def test_parse_node_ids(self):
        assert parse_node_ids('1:10;2:20') == ['1:10', '2:20']
        assert parse_node_ids('1-10, 2-20') == ['1:10', '2:20']
        assert parse_node_ids('I5-1;3') == ['I5:1', '3']
        assert parse_node_ids(' ; ') is None
        assert parse_node_ids(None) is None

    def test_nested_ids_covered_by_ancestor(self, card):
        selected = select_subtrees([card], ['I20:3;30:2', '20:3', '20:2'])
        assert [n['id'] for n in selected] == ['20:2', '20:3']

    def test_deeply_nested_id_found(self):
        root = {'id': 'g0', 'type': 'GROUP'}
        node = root
        for i in range(1, 1500):
            child = {'id': f'g{i}', 'type': 'GROUP'}
            node['children'] = [child]
            node = child
        design = DesignExtractor().extract(root, ExtractOptions(node_filter={'g1400'}))
        assert [n.id for n in design.nodes] == ['g1400']
        assert design.warnings == []

    def test_missing_ids_warned(self, card, caplog):
        with caplog.at_level(logging.WARNING):
            design = DesignExtractor().extract(card, ExtractOptions(node_filter={'99:9'}))
        assert design.nodes == []
        assert design.warnings[0].node_id == '99:9'
        assert '99:9' in caplog.text


class TestExtractFile:
    """Tests for whole API responses."""

    def test_file_response(self, file_response):
        design = DesignExtractor().extract_file(file_response)
        data = design.to_dict()

        assert data['metadata'] == {'name': 'Design System', 'lastModified': '2024-05-01T12:00:00Z'}
        [page] = data['nodes']
        assert page['type'] == 'CANVAS'
        assert [c['id'] for c in page['children']] == ['20:1', '30:0']

        assert data['components']['30:1'] == {
            'id': '30:1', 'key': 'abc123', 'name': 'Variant=Primary',
            'componentSetId': '30:0', 'description': 'Primary action',
        }
        assert data['components']['40:1']['description'] == 'From library'
        assert data['componentSets']['30:0'] == {'id': '30:0', 'key': 'set001', 'name': 'Button'}

    def test_card_styles_deduplicated(self, file_response):
        design = DesignExtractor().extract_file(file_response)
        [page] = design.nodes
        card = page.children[0]
        title, button = card.children
        assert card.fills == 'fill_1'
        assert title.text_style == 'text_1'
        assert button.children[0].text_style == 'text_2'
        assert design.styles['text_1'] == {
            'fontFamily': 'Inter', 'fontWeight': 700, 'fontSize': 20, 'lineHeight': '1.2em',
        }

    def test_nodes_response(self, nodes_response):
        design = DesignExtractor().extract_file(nodes_response)
        assert [n.id for n in design.nodes] == ['20:1', '10:1']
        assert design.nodes[1].type == 'IMAGE-SVG'
        assert '30:1' in design.components

    def test_raw_node_as_response(self, card):
        design = DesignExtractor().extract_file(card)
        assert [n.id for n in design.nodes] == ['20:1']

    def test_unrecognized_response(self, caplog):
        with caplog.at_level(logging.WARNING):
            design = DesignExtractor().extract_file({'status': 404})
        assert design.nodes == []
        assert 'root nodes' in caplog.text


class TestSimplifyDesign:
    """Tests for the full pipeline with optimizations."""

    def test_defaults(self, file_response):
        design = simplify_design(file_response)
        card = design.nodes[0].children[0]
        assert card.layout['layoutMode'] == 'column'
        assert card.fills == 'fill_1'

    def test_extractor_selection(self, file_response):
        design = simplify_design(file_response, SimplifyOptions(extractors=['layout_only']))
        card = design.nodes[0].children[0]
        assert card.layout is not None
        assert card.fills is None
        assert design.styles == {}

    def test_unknown_extractor(self, file_response):
        with pytest.raises(ValueError):
            simplify_design(file_response, SimplifyOptions(extractors=['bogus']))

    def test_exclude_styles(self, file_response):
        design = simplify_design(file_response, SimplifyOptions(exclude_styles=True))
        card = design.to_dict()['nodes'][0]['children'][0]
        assert design.styles == {}
        assert 'fills' not in card and 'layout' not in card
        assert card['children'][1]['componentId'] == '30:1'

    def test_simplify_instances(self, file_response):
        design = simplify_design(file_response, SimplifyOptions(simplify_component_instances=True))
        button = design.nodes[0].children[0].children[1]
        assert button.fills is None
        assert button.layout is None
        assert button.component_properties == {'Label#1:0': 'Continue', 'Variant': 'Primary'}

    def test_flatten_instances(self, file_response):
        design = simplify_design(file_response, SimplifyOptions(flatten_component_instances=True))
        button = design.nodes[0].children[0].children[1]
        assert button.children == ()
        assert button.text == 'Continue'
        assert button.fills is None
        assert button.component_id == '30:1'

    def test_flatten_wins_over_simplify(self, file_response):
        options = SimplifyOptions(flatten_component_instances=True, simplify_component_instances=True)
        button = simplify_design(file_response, options).nodes[0].children[0].children[1]
        assert button.children == ()

    def test_connectors(self):
        response = {'document': {'id': '0:0', 'type': 'DOCUMENT', 'children': [
            {'id': 'c', 'name': 'Arrow', 'type': 'CONNECTOR',
             'connectorStart': {'endpointNodeId': 'a'}, 'connectorEnd': {'endpointNodeId': 'b'},
             'strokes': [{'type': 'SOLID', 'color': {'r': 0, 'g': 0, 'b': 0, 'a': 1}}]},
        ]}}
        plain = simplify_design(response, SimplifyOptions(extractors=['layout']))
        assert plain.nodes[0].start_node_id == 'a'

        simplified = simplify_design(response, SimplifyOptions(simplify_connectors=True))
        assert simplified.nodes[0].to_dict() == {
            'id': 'c', 'name': 'Arrow', 'type': 'CONNECTOR', 'startNodeId': 'a', 'endNodeId': 'b',
        }

    def test_tables_to_markdown(self):
        cell = {'type': 'TABLE_CELL', 'characters': 'A',
                'absoluteBoundingBox': {'x': 0, 'y': 0, 'width': 1, 'height': 1}}
        response = {'nodes': {'t': {'document': {
            'id': 't', 'type': 'TABLE', 'children': [dict(cell, id='c')]}}}}
        assert simplify_design(response).nodes[0].type == 'TABLE'
        design = simplify_design(response, SimplifyOptions(tables_to_markdown=True))
        assert design.nodes[0].markdown == '| A |\n| --- |'

    def test_node_ids_and_depth(self, file_response):
        design = simplify_design(file_response, SimplifyOptions(node_ids=['20:1'], depth=1))
        [card] = design.nodes
        assert card.id == '20:1'
        assert card.truncated is True
        assert design.name == 'Design System'
