"""Tests for the MCP data source and tools."""

import json

import pytest

from mcp_server import server
from mcp_server.datasource import LocalDataSource


@pytest.fixture
def data_dir(tmp_path, file_response):
    (tmp_path / 'system.json').write_text(json.dumps(file_response), encoding='utf-8')
    (tmp_path / 'system.warnings.json').write_text('[]', encoding='utf-8')
    (tmp_path / 'notes.txt').write_text('ignored', encoding='utf-8')
    return tmp_path


@pytest.fixture
def datasource(data_dir, monkeypatch):
    ds = LocalDataSource(str(data_dir))
    monkeypatch.setattr(server, '_ds', ds)
    return ds


class TestLocalDataSource:
    """Tests for reading saved responses from disk."""

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LocalDataSource(str(tmp_path / 'nope'))

    def test_list_files_skips_warnings_and_other_files(self, data_dir):
        assert LocalDataSource(str(data_dir)).list_files() == ['system']

    def test_read_with_or_without_extension(self, data_dir):
        ds = LocalDataSource(str(data_dir))
        assert ds.read_json('system')['name'] == 'Design System'
        assert ds.read_json('system.json')['name'] == 'Design System'

    def test_missing_file(self, data_dir):
        ds = LocalDataSource(str(data_dir))
        assert not ds.file_exists('other')
        with pytest.raises(FileNotFoundError):
            ds.read_json('other')

    def test_path_traversal_rejected(self, data_dir):
        (data_dir / 'sub').mkdir()
        ds = LocalDataSource(str(data_dir / 'sub'))
        with pytest.raises(FileNotFoundError):
            ds.read_json('../system')
        assert not ds.file_exists('../system')


class TestTools:
    """Tests for the MCP tool functions."""

    def test_list_design_files(self, datasource):
        assert server.list_design_files() == ['system']

    def test_list_extractors(self):
        result = server.list_extractors()
        assert 'layout' in result['extractors']
        assert result['presets']['visuals_only'] == ['visuals']

    def test_get_design_data(self, datasource):
        data = server.get_design_data('system', exclude_styles=False)
        assert data['metadata']['name'] == 'Design System'
        assert 'fill_1' in data['globalVars']['styles']

    def test_get_design_data_defaults_simplify(self, datasource):
        data = server.get_design_data('system')
        card = data['nodes'][0]['children'][0]
        button = card['children'][1]
        assert data['globalVars']['styles'] == {}
        assert 'fills' not in card
        assert button['componentProperties'] == {'Label#1:0': 'Continue', 'Variant': 'Primary'}

    def test_get_design_data_flattened(self, datasource):
        data = server.get_design_data('system', node_id='20:3', flatten_component_instances=True)
        [button] = data['nodes']
        assert button['text'] == 'Continue'
        assert 'children' not in button

    def test_get_design_data_focused(self, datasource):
        data = server.get_design_data('system', node_id='20:2;20:3', exclude_styles=True)
        assert [n['id'] for n in data['nodes']] == ['20:2', '20:3']
        assert data['globalVars']['styles'] == {}

    def test_get_design_data_url_style_ids(self, datasource):
        data = server.get_design_data('system', node_id='20-2,20-3')
        assert [n['id'] for n in data['nodes']] == ['20:2', '20:3']

    def test_uninitialized(self, monkeypatch):
        monkeypatch.setattr(server, '_ds', None)
        with pytest.raises(RuntimeError):
            server.list_design_files()

    def test_truncate(self):
        assert server._truncate({'a': 1}) == {'a': 1}
        assert server._truncate({'a': 'x' * 100}, max_chars=10)['_truncated'] is True
