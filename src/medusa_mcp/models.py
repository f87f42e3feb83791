"""Internal models for compiled tools and prepared requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel

from .catalog import HttpMethod
from .schema import FieldRule, validate_input


ToolHandler = Callable[[Mapping[str, Any]], Awaitable[Any]]


@dataclass(frozen=True)
class PreparedRequest:
    method: HttpMethod
    path: str
    query: List[Tuple[str, str]] = field(default_factory=list)
    body: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class CompiledTool:
    name: str
    description: str
    input_schema: Dict[str, FieldRule]
    input_model: type[BaseModel]
    handler: ToolHandler
    route: str
    method: HttpMethod

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "method": self.method.value,
            "route": self.route,
            "inputSchema": self.input_model.model_json_schema(by_alias=True),
        }

    async def invoke(self, arguments: Mapping[str, Any]) -> Any:
        return await self.handler(validate_input(self.input_model, arguments))
