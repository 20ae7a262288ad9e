"""
Tests for loading exported collection schemas from disk.
"""

import json

import pytest

from pb_modelgen.utils import SchemaFileError, load_collections_file


def write_json(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestLoadCollectionsFile:

    def test_list_export(self, tmp_path, current_payload):
        path = write_json(tmp_path / "pb_schema.json", [current_payload])
        collections = load_collections_file(path)
        assert [c.name for c in collections] == ["posts"]

    def test_items_export(self, tmp_path, legacy_payload):
        path = write_json(tmp_path / "pb_schema.json", {"items": [legacy_payload]})
        assert load_collections_file(path)[0].get_field("status").select_values == (
            "draft",
            "published",
        )

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_collections_file(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "pb_schema.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SchemaFileError, match="Invalid JSON"):
            load_collections_file(path)

    def test_field_entry_not_an_object(self, tmp_path):
        path = write_json(
            tmp_path / "pb_schema.json", [{"name": "posts", "fields": ["title"]}]
        )
        with pytest.raises(SchemaFileError, match="Not a collection export"):
            load_collections_file(path)

    def test_not_a_list(self, tmp_path):
        path = write_json(tmp_path / "pb_schema.json", "posts")
        with pytest.raises(SchemaFileError):
            load_collections_file(path)
