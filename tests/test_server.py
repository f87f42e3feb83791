"""
Tests for compiling and registering tools on the MCP server.
"""

import json
from unittest.mock import patch

import pytest
from fastmcp import Client, FastMCP

from medusa_mcp.config import Settings
from medusa_mcp.server import (
    CatalogTool,
    build_server,
    compile_tools,
    is_http_transport,
    register_tools,
)


@pytest.fixture
def settings(tmp_path, store_document, admin_document):
    store_path = tmp_path / "store.json"
    store_path.write_text(json.dumps(store_document), encoding="utf-8")
    admin_path = tmp_path / "admin.json"
    admin_path.write_text(json.dumps(admin_document), encoding="utf-8")
    return Settings(
        _env_file=None,
        store_catalog_path=str(store_path),
        admin_catalog_path=str(admin_path),
        publishable_key="pk_test",
        medusa_username="admin@example.com",
        medusa_password="secret",
        mcp_transport="stdio",
    )


class TestCompileTools:
    async def test_store_and_admin_tools(self, settings, mock_client):
        tools = await compile_tools(settings, mock_client)

        assert [tool.name for tool in tools] == [
            "GetProducts",
            "GetProductsId",
            "PostProductsId",
            "AdminGetProduct",
            "AdminDeleteProduct",
        ]
        mock_client.login.assert_awaited_once_with("admin@example.com", "secret")

    async def test_admin_disabled_skips_login(self, settings, mock_client):
        settings = settings.model_copy(update={"enable_admin_tools": False})

        tools = await compile_tools(settings, mock_client)

        assert all(not tool.name.startswith("Admin") for tool in tools)
        mock_client.login.assert_not_awaited()

    async def test_store_disabled(self, settings, mock_client):
        settings = settings.model_copy(update={"enable_store_tools": False})

        tools = await compile_tools(settings, mock_client)

        assert [tool.name for tool in tools] == ["AdminGetProduct", "AdminDeleteProduct"]

    async def test_login_failure_aborts(self, settings, mock_client):
        mock_client.login.side_effect = RuntimeError("invalid credentials")

        with pytest.raises(RuntimeError):
            await compile_tools(settings, mock_client)


class TestCatalogTool:
    async def test_parameters_are_flat_input_fields(self, settings, mock_client):
        tool = (await compile_tools(settings, mock_client))[1]

        registered = CatalogTool.from_compiled(tool)

        assert registered.name == "GetProductsId"
        assert registered.description == "Get a product."
        assert set(registered.parameters["properties"]) == {"id", "fields"}
        assert "payload" not in registered.parameters["properties"]

    async def test_run_invokes_compiled_tool(self, settings, mock_client):
        tool = (await compile_tools(settings, mock_client))[1]

        result = await CatalogTool.from_compiled(tool).run({"id": "prod_1"})

        assert result.structured_content == {"ok": True}
        assert mock_client.fetch.await_args.args == ("/store/products/prod_1",)


class TestRegisterTools:
    async def test_call_tool_with_flat_arguments(self, settings, mock_client):
        mcp = FastMCP("medusa-test")
        register_tools(mcp, await compile_tools(settings, mock_client))

        async with Client(mcp) as client:
            result = await client.call_tool("GetProductsId", {"id": "42"})

        assert result.structured_content == {"ok": True}
        assert mock_client.fetch.await_args.args == ("/store/products/42",)
        assert mock_client.fetch.await_args.kwargs["method"] == "get"

    async def test_admin_tool_uses_session_token(self, settings, mock_client):
        settings = settings.model_copy(update={"enable_store_tools": False})
        mcp = FastMCP("medusa-test")
        register_tools(mcp, await compile_tools(settings, mock_client))

        async with Client(mcp) as client:
            await client.call_tool("AdminDeleteProduct", {"id": "prod_9"})

        kwargs = mock_client.fetch.await_args.kwargs
        assert mock_client.fetch.await_args.args == ("/admin/products/prod_9",)
        assert kwargs["headers"]["Authorization"] == "Bearer admin-token"
        assert kwargs["body"] == {}


def test_http_transports(settings):
    assert not is_http_transport(settings)
    for transport in ("http", "streamable-http", "SSE"):
        assert is_http_transport(settings.model_copy(update={"mcp_transport": transport}))


class TestBuildServer:
    async def test_stdio_server_has_no_http_app(self, settings, mock_client):
        settings = settings.model_copy(update={"enable_admin_tools": False})

        with patch("medusa_mcp.server.MedusaClient", return_value=mock_client):
            mcp, app = await build_server(settings)

        assert isinstance(mcp, FastMCP)
        assert app is None
