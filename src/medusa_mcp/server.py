"""MCP server setup for the Medusa tools."""

import logging
from typing import Annotated, Any, Dict, List

from fastmcp import FastMCP
from fastmcp.tools import Tool, ToolResult
from pydantic import Field
from pydantic.json_schema import SkipJsonSchema

from .auth import AdminSession, PublishableKeyAuth
from .catalog import load_catalog
from .client import MedusaClient
from .compiler import ToolCompiler
from .config import Settings
from .models import CompiledTool
from .surfaces import ADMIN_SURFACE, STORE_SURFACE

logger = logging.getLogger(__name__)

HTTP_TRANSPORTS = {"http", "streamable-http", "streamablehttp", "sse"}


async def build_server(settings: Settings) -> tuple[FastMCP, object | None]:
    client = MedusaClient(
        base_url=settings.medusa_backend_url,
        publishable_key=settings.publishable_key,
        timeout_seconds=settings.medusa_timeout_seconds,
    )

    tools = await compile_tools(settings, client)

    mcp = FastMCP(settings.service_name, instructions=_instructions())
    register_tools(mcp, tools)

    app = _get_http_app(mcp, settings)
    _attach_healthcheck(app)
    return mcp, app


async def compile_tools(settings: Settings, client: MedusaClient) -> List[CompiledTool]:
    tools: List[CompiledTool] = []

    if settings.enable_store_tools:
        store_catalog = load_catalog(settings.store_catalog())
        store = ToolCompiler(STORE_SURFACE, client, PublishableKeyAuth(settings.publishable_key))
        tools.extend(store.compile(store_catalog))

    if settings.enable_admin_tools:
        admin_catalog = load_catalog(settings.admin_catalog())
        session = AdminSession(client, settings.medusa_username, settings.medusa_password)
        await session.login()
        admin = ToolCompiler(ADMIN_SURFACE, client, session)
        tools.extend(admin.compile(admin_catalog))

    return tools


class CatalogTool(Tool):
    """FastMCP tool whose arguments are the compiled tool's flat input fields."""

    compiled: Annotated[SkipJsonSchema[Any], Field(exclude=True)]

    @classmethod
    def from_compiled(cls, tool: CompiledTool) -> "CatalogTool":
        return cls(
            name=tool.name,
            description=tool.description,
            parameters=tool.input_model.model_json_schema(by_alias=True),
            compiled=tool,
        )

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        result = await self.compiled.invoke(arguments)
        structured = result if isinstance(result, dict) else None
        return ToolResult(
            content=result if result is not None else "",
            structured_content=structured,
        )


def register_tools(mcp: FastMCP, tools: List[CompiledTool]) -> None:
    for tool in tools:
        mcp.add_tool(CatalogTool.from_compiled(tool))
        logger.info("Registered tool: %s", tool.name)


def is_http_transport(settings: Settings) -> bool:
    return settings.mcp_transport.lower() in HTTP_TRANSPORTS


def _attach_healthcheck(app) -> None:  # type: ignore[no-untyped-def]
    if not app:
        return

    async def healthcheck(_request):  # type: ignore[no-untyped-def]
        from starlette.responses import JSONResponse

        return JSONResponse({"status": "ok"})

    app.add_route("/health", healthcheck, methods=["GET"])


def _instructions() -> str:
    return (
        "Medusa commerce tools. "
        "Store tools act as a storefront customer; Admin tools manage the store."
    )


def _get_http_app(mcp: FastMCP, settings: Settings):  # type: ignore[no-untyped-def]
    if not is_http_transport(settings):
        return None
    transport = settings.mcp_transport.lower()
    if transport in {"http"}:
        return mcp.http_app(transport="http", stateless_http=True, json_response=True)
    if transport in {"streamable-http", "streamablehttp"}:
        return mcp.http_app(
            transport="streamable-http", stateless_http=True, json_response=True
        )
    return mcp.http_app(transport="sse")
