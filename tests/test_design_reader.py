"""Tests for DesignReader."""

import pytest

from figma_simplifier.design_reader import DesignReader, DesignReadError


class TestDesignReader:
    """Tests for reading saved API responses."""

    def setup_method(self):
        self.reader = DesignReader()

    def test_reads_json_object(self, write_json, file_response):
        data = self.reader.read(write_json(file_response))
        assert data['name'] == 'Design System'

    def test_missing_file(self, tmp_path):
        with pytest.raises(DesignReadError, match='not found'):
            self.reader.read(str(tmp_path / 'nope.json'))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / 'bad.json'
        path.write_text('{not json', encoding='utf-8')
        with pytest.raises(DesignReadError, match='Failed to read'):
            self.reader.read(str(path))

    def test_non_object(self, write_json):
        with pytest.raises(DesignReadError, match='JSON object'):
            self.reader.read(write_json([1, 2, 3]))
