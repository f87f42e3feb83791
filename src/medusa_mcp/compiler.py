"""Compile catalog operations into MCP tools."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from .auth import TokenSource
from .catalog import HttpMethod, OperationCatalog, OperationDescriptor
from .client import MedusaClient
from .logging import redact_payload
from .models import CompiledTool, ToolHandler
from .request import build_request
from .schema import ParameterGroups, build_input_model, classify_parameters, synthesize_schema
from .surfaces import Surface


logger = logging.getLogger(__name__)


class MalformedCatalogEntryError(ValueError):
    pass


class ToolCompiler:
    def __init__(self, surface: Surface, client: MedusaClient, auth: TokenSource) -> None:
        self.surface = surface
        self.client = client
        self.auth = auth

    def compile(self, catalog: OperationCatalog) -> List[CompiledTool]:
        tools: List[CompiledTool] = []
        for route, method, operation in catalog.operations():
            if not operation.operation_id:
                continue
            tools.append(self.compile_operation(route, method, operation))

        logger.info("Compiled %s %s tools", len(tools), self.surface.name)
        return tools

    def compile_operation(
        self, route: str, method: HttpMethod, operation: OperationDescriptor
    ) -> CompiledTool:
        if not operation.operation_id:
            raise MalformedCatalogEntryError(
                f"No operationId found for {method.value.upper()} {route}"
            )

        name = self.surface.tool_name(operation.operation_id)
        groups = classify_parameters(operation.parameters)
        input_schema = synthesize_schema(
            operation.parameters, method, self.surface.body_vocabulary
        )

        return CompiledTool(
            name=name,
            description=self.surface.tool_description(operation.description),
            input_schema=input_schema,
            input_model=build_input_model(name, input_schema),
            handler=self._handler(name, route, method, groups),
            route=route,
            method=method,
        )

    def _handler(
        self, name: str, route: str, method: HttpMethod, groups: ParameterGroups
    ) -> ToolHandler:
        client = self.client
        auth = self.auth

        async def handler(arguments: Mapping[str, Any]) -> Any:
            logger.debug("Invoking tool=%s payload=%s", name, redact_payload(dict(arguments)))
            request = build_request(route, method, groups, arguments)
            return await client.fetch(
                request.path,
                method=request.method.value,
                headers=_headers(auth.bearer_token()),
                query=request.query,
                body=request.body,
            )

        handler.__name__ = name
        return handler


def _headers(token: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "Authorization": f"Bearer {token}",
    }
