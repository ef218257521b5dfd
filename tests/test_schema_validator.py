import pytest

from weather_tools.llm_core.tools.schema import SchemaValidator
from weather_tools.llm_core.exceptions import ToolValidationError


def test_assert_no_recursive_refs_accepts_flat_schema() -> None:
    schema = {
        "type": "object",
        "properties": {"location": {"type": "string"}},
        "required": ["location"],
    }
    SchemaValidator.assert_no_recursive_refs(schema)


def test_assert_no_recursive_refs_accepts_shared_non_recursive_defs() -> None:
    schema = {
        "$defs": {"City": {"type": "object", "properties": {"name": {"type": "string"}}}},
        "properties": {
            "origin": {"$ref": "#/$defs/City"},
            "destination": {"$ref": "#/$defs/City"},
        },
    }
    SchemaValidator.assert_no_recursive_refs(schema)


def test_assert_no_recursive_refs_with_recursion() -> None:
    schema = {
        "$defs": {"Region": {"type": "object", "properties": {"parent": {"$ref": "#/$defs/Region"}}}},
        "properties": {"root": {"$ref": "#/$defs/Region"}},
    }
    with pytest.raises(ToolValidationError, match="Recursive structure detected"):
        SchemaValidator.assert_no_recursive_refs(schema)


def test_sanitize_schema_removes_metadata() -> None:
    schema = {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "$id": "http://example.com/schema",
        "title": "get_weatherParams",
        "type": "object",
        "properties": {"location": {"type": "string", "title": "Location"}},
        "definitions": {"SomeDef": {}},
    }
    sanitized = SchemaValidator.sanitize_schema(schema)

    assert sanitized == {
        "type": "object",
        "properties": {"location": {"type": "string"}},
        "additionalProperties": False,
    }


def test_sanitize_schema_keeps_property_named_title() -> None:
    schema = {"type": "object", "properties": {"title": {"type": "string", "title": "Title"}}}

    sanitized = SchemaValidator.sanitize_schema(schema)

    assert sanitized["properties"] == {"title": {"type": "string"}}


def test_sanitize_schema_respects_explicit_additional_properties() -> None:
    schema = {"type": "object", "properties": {}, "additionalProperties": True}

    assert SchemaValidator.sanitize_schema(schema)["additionalProperties"] is True


def test_sanitize_schema_does_not_mutate_input() -> None:
    schema = {"title": "T", "type": "object", "properties": {"a": {"title": "A", "type": "string"}}}

    SchemaValidator.sanitize_schema(schema)

    assert schema["title"] == "T"
    assert schema["properties"]["a"]["title"] == "A"
