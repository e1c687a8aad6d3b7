"""Tests for the OptionsSchemaEngine facade."""

import pytest

from jsonschema_llm_options.engine import OptionsSchemaEngine
from jsonschema_llm_options.exceptions import MissingRequiredField, UnknownSymbol
from jsonschema_llm_options.options import TransformOptions
from jsonschema_llm_options.results import Err, Record
from jsonschema_llm_options.types import Schema, Symbol

ADMIN, USER, GUEST = Symbol("admin"), Symbol("user"), Symbol("guest")

USER_SCHEMA = [
    ("name", {"type": "string", "required": True, "doc": "The user's name"}),
    ("age", {"type": "integer", "default": 30, "doc": "The user's age"}),
    ("roles", {"type": ("list", ("in", [ADMIN, USER, GUEST])), "default": [USER]}),
]


@pytest.fixture
def engine():
    return OptionsSchemaEngine(USER_SCHEMA)


class TestOptionsSchemaEngine:
    def test_schema_parsed_once(self, engine):
        assert isinstance(engine.schema, Schema)
        assert engine.schema.keys() == ["name", "age", "roles"]

    def test_registry_from_schema(self, engine):
        assert engine.registry.get("admin") is ADMIN

    def test_json_schema_is_a_copy(self, engine):
        document = engine.json_schema()
        document["properties"].clear()
        assert engine.json_schema()["properties"]["name"] == {"type": "string"}

    def test_function_spec(self, engine):
        spec = engine.function_spec("create_user", "Create a new user")
        assert spec["name"] == "create_user"
        assert spec["parameters"]["properties"]["age"] == {
            "type": "integer",
            "default": 30,
            "description": "The user's age",
        }

    def test_transform(self, engine):
        result = engine.transform({"name": "Bo", "roles": ["admin", "guest"]})
        assert result.unwrap() == Record(
            (("name", "Bo"), ("age", 30), ("roles", [ADMIN, GUEST]))
        )

    def test_transform_defaults(self, engine):
        record = engine.transform({"name": "Bo"}).unwrap()
        assert record["roles"] == [USER]

    def test_transform_error(self, engine):
        result = engine.transform({"name": "Bo", "roles": ["root"]})
        assert isinstance(result, Err)
        assert result.error == UnknownSymbol("root")

    def test_transform_or_raise(self, engine):
        with pytest.raises(MissingRequiredField):
            engine.transform_or_raise({})

    def test_extra_symbols(self):
        engine = OptionsSchemaEngine(
            [("state", {"type": "atom"})],
            options=TransformOptions(symbols={"pending"}),
        )
        assert engine.transform({"state": "pending"}).unwrap()["state"] == "pending"

    def test_check_valid(self, engine):
        assert engine.check({"name": "Bo"}) == []

    def test_check_transform_failure(self, engine):
        errors = engine.check({})
        assert errors == ["Required key name not found in response"]

    def test_check_structural_failure(self, engine):
        # types aren't enforced by the transformer; the structural check sees them
        errors = engine.check({"name": 5})
        assert len(errors) == 1
        assert "string" in errors[0]

    def test_check_required_null_reports_type(self, engine):
        errors = engine.check({"name": None})
        assert errors == ["None is not of type 'string'"]

    def test_check_optional_null_is_valid(self, engine):
        assert engine.check({"name": "Bo", "age": None}) == []
