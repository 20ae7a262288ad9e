"""
Pytest configuration and shared fixtures for the pb_modelgen test suite.
"""

import pytest

from pb_modelgen.codegen import CollectionSchema, DartGenerator, FieldType, SchemaField


@pytest.fixture
def generator():
    """Dart generator with default configuration."""
    return DartGenerator()


@pytest.fixture
def posts_collection():
    """The two-field collection used throughout the examples."""
    return CollectionSchema(
        name="posts",
        fields=(
            SchemaField("title", FieldType.TEXT, required=True),
            SchemaField(
                "status",
                FieldType.SELECT,
                required=False,
                options={"values": ["draft", "published"]},
            ),
        ),
    )


@pytest.fixture
def rich_collection():
    """A collection exercising every field type."""
    return CollectionSchema(
        name="user_profiles",
        fields=(
            SchemaField("first_name", FieldType.TEXT, required=True),
            SchemaField("nick_name", FieldType.TEXT),
            SchemaField("age", FieldType.NUMBER, required=True),
            SchemaField("score", FieldType.NUMBER),
            SchemaField("is_active", FieldType.BOOL, required=True),
            SchemaField("birth_date", FieldType.DATE, required=True),
            SchemaField("last_seen", FieldType.DATE),
            SchemaField(
                "role",
                FieldType.SELECT,
                required=True,
                options={"values": ["admin", "power_user", "guest"]},
            ),
            SchemaField("avatar", "file"),
        ),
    )


@pytest.fixture
def legacy_payload():
    """Collection payload as returned by PocketBase 0.22 and earlier."""
    return {
        "id": "pbc_posts",
        "name": "posts",
        "type": "base",
        "system": False,
        "schema": [
            {
                "id": "f1",
                "name": "title",
                "type": "text",
                "required": True,
                "options": {"min": None, "max": None, "pattern": ""},
            },
            {
                "id": "f2",
                "name": "status",
                "type": "select",
                "required": False,
                "options": {"maxSelect": 1, "values": ["draft", "published"]},
            },
        ],
    }


@pytest.fixture
def current_payload():
    """Collection payload as returned by PocketBase 0.23 and later."""
    return {
        "id": "pbc_posts",
        "name": "posts",
        "type": "base",
        "system": False,
        "fields": [
            {"name": "id", "type": "text", "required": True, "system": True},
            {"name": "title", "type": "text", "required": True},
            {
                "name": "status",
                "type": "select",
                "required": False,
                "maxSelect": 1,
                "values": ["draft", "published"],
            },
            {"name": "secret", "type": "text", "hidden": True},
            {"name": "created", "type": "autodate", "system": True},
            {"name": "updated", "type": "autodate", "system": True},
        ],
    }
