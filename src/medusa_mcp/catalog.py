"""Operation catalog loader.

A catalog is the ``paths`` section of a Medusa OpenAPI document: route
templates mapped to per-method operation descriptors. Only ``get``, ``post``
and ``delete`` operations are read; other keys on a path item are ignored.
The document shape is validated once at load time so the compiler can work on
typed models instead of probing raw dicts.
"""

from __future__ import annotations

import enum
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    pass


class HttpMethod(str, enum.Enum):
    GET = "get"
    POST = "post"
    DELETE = "delete"


class ParameterSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    type: Optional[str] = None


class ParameterDescriptor(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    name: str
    location: str = Field(alias="in")
    schema_: ParameterSchema = Field(default_factory=ParameterSchema, alias="schema")

    @property
    def schema_type(self) -> str:
        return self.schema_.type or "string"


class OperationDescriptor(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    operation_id: Optional[str] = Field(default=None, alias="operationId")
    description: Optional[str] = None
    parameters: Tuple[ParameterDescriptor, ...] = ()

    @field_validator("parameters", mode="before")
    @classmethod
    def null_parameters_as_empty(cls, value: Any) -> Any:
        return value if value is not None else ()


class PathItem(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    get: Optional[OperationDescriptor] = None
    post: Optional[OperationDescriptor] = None
    delete: Optional[OperationDescriptor] = None

    def operation(self, method: HttpMethod) -> Optional[OperationDescriptor]:
        return getattr(self, method.value)


class OperationCatalog(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    paths: Dict[str, PathItem] = Field(default_factory=dict)

    def operations(self) -> Iterator[Tuple[str, HttpMethod, OperationDescriptor]]:
        """Yield (route, method, operation) in document order, get/post/delete per route."""
        for route, item in self.paths.items():
            for method in HttpMethod:
                operation = item.operation(method)
                if operation is not None:
                    yield route, method, operation


def load_catalog(source: Union[str, Path, Dict[str, Any]]) -> OperationCatalog:
    """Load and validate a catalog from a JSON file path or a parsed document."""
    if isinstance(source, dict):
        document = source
    else:
        path = Path(source)
        logger.info("Loading operation catalog from %s", path)
        try:
            with path.open("r", encoding="utf-8") as handle:
                document = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogError(f"Unable to read catalog {path}: {exc}") from exc

    try:
        catalog = OperationCatalog.model_validate(document)
    except ValidationError as exc:
        raise CatalogError(f"Invalid operation catalog: {exc}") from exc

    logger.debug("Catalog loaded with %s routes", len(catalog.paths))
    return catalog
