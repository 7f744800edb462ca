"""Tests for the MCP server wiring."""

import asyncio
import json

import pytest

from luba_catalog.server import create_server, to_json

TOOL_NAMES = {
    "lookup_token",
    "lookup_component",
    "lookup_primitive",
    "validate_spacing",
    "validate_radius",
    "get_color_palette",
    "suggest_tokens",
    "batch_lookup_tokens",
    "batch_lookup_components",
    "plan_migration",
}

RESOURCE_URIS = {
    "lubaui://tokens/all",
    "lubaui://architecture",
    "lubaui://components",
    "lubaui://reference/full",
}


@pytest.fixture()
def server(store, config):
    return create_server(store, config)


class TestCreateServer:
    """Tests for create_server."""

    def test_tools_registered(self, server):
        """Test all ten tools are exposed."""
        tools = asyncio.run(server.list_tools())
        assert {t.name for t in tools} == TOOL_NAMES

    def test_tools_have_descriptions(self, server):
        """Test every tool carries a human-readable description."""
        for tool in asyncio.run(server.list_tools()):
            assert tool.description

    def test_category_schema_is_enumerated(self, server):
        """Test the token category parameter lists its values."""
        tool = next(t for t in asyncio.run(server.list_tools()) if t.name == "lookup_token")
        assert "query" in tool.inputSchema["required"]
        assert "spacing" in json.dumps(tool.inputSchema["properties"]["category"])

    def test_resources_registered(self, server):
        """Test the read-only resources are exposed."""
        resources = asyncio.run(server.list_resources())
        assert {str(r.uri) for r in resources} == RESOURCE_URIS

    def test_read_architecture(self, server):
        """Test a resource reads as JSON text."""
        contents = list(asyncio.run(server.read_resource("lubaui://architecture")))
        assert "tokenSystem" in json.loads(contents[0].content)

    def test_server_name(self, store, config):
        """Test the configured name is used."""
        named = create_server(store, config.model_copy(update={"server_name": "luba-test"}))
        assert named.name == "luba-test"


class TestToJson:
    """Tests for payload serialization."""

    def test_indented(self):
        """Test payloads are pretty-printed."""
        assert to_json({"found": True}) == '{\n  "found": true\n}'
