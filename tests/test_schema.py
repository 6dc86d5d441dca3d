"""Tests for schema description and export."""

from __future__ import annotations

import json

import pytest
import yaml

from numbind.engine import U32_MAX, U64_MAX
from numbind.errors import InvalidInputError
from numbind.registry import Registry
from numbind.schema import describe, dump_schemas


class TestDescribe:
    """Tests for describe."""

    def test_add(self, registry):
        doc = describe(registry.get("add"))
        assert doc["export_id"] == "add"
        assert doc["description"] == "Add two unsigned 64-bit integers."
        assert doc["tags"] == ["math"]
        assert doc["may_overflow"] is True
        assert doc["parameters"] == ["left", "right"]
        left = doc["input_schema"]["properties"]["left"]
        assert left["minimum"] == 0
        assert left["maximum"] == U64_MAX

    def test_return_message(self, registry):
        doc = describe(registry.get("return_message"))
        assert doc["input_schema"]["properties"]["n"]["maximum"] == U32_MAX
        assert doc["output_schema"]["properties"]["result"]["type"] == "string"


class TestDumpSchemas:
    """Tests for dump_schemas."""

    def test_json(self, registry):
        data = json.loads(dump_schemas(registry))
        assert list(data) == ["add", "return_message"]
        assert data["return_message"]["parameters"] == ["n"]

    def test_yaml(self, registry):
        data = yaml.safe_load(dump_schemas(registry, format="yaml"))
        assert data["add"]["input_schema"]["properties"]["right"]["maximum"] == U64_MAX

    def test_unknown_format(self, registry):
        with pytest.raises(InvalidInputError, match="toml"):
            dump_schemas(registry, format="toml")

    def test_empty_registry(self):
        assert json.loads(dump_schemas(Registry())) == {}
