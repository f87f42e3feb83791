"""Parameter classification and input schema synthesis."""

from __future__ import annotations

import keyword
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, create_model
from pydantic.fields import FieldInfo

from .catalog import HttpMethod, ParameterDescriptor


FieldRule = Tuple[Any, FieldInfo]


@dataclass(frozen=True)
class ParameterGroups:
    path: Tuple[str, ...]
    query: Tuple[str, ...]
    header: Tuple[str, ...]

    def consumed(self) -> frozenset[str]:
        return frozenset(self.path) | frozenset(self.query)


def classify_parameters(parameters: Sequence[ParameterDescriptor]) -> ParameterGroups:
    path: List[str] = []
    query: List[str] = []
    header: List[str] = []
    for parameter in parameters:
        if parameter.location == "path":
            path.append(parameter.name)
        elif parameter.location == "query":
            query.append(parameter.name)
        elif parameter.location == "header":
            header.append(parameter.name)
    return ParameterGroups(path=tuple(path), query=tuple(query), header=tuple(header))


_TYPE_RULES: Dict[str, Any] = {
    "string": Optional[str],
    "number": Optional[float],
    "boolean": Optional[bool],
    "array": Optional[List[str]],
    "object": Optional[Dict[str, Any]],
}


def optional_rule(annotation: Any, description: Optional[str] = None) -> FieldRule:
    return (annotation, Field(None, description=description))


def parameter_rule(parameter: ParameterDescriptor) -> FieldRule:
    annotation = _TYPE_RULES.get(parameter.schema_type, Optional[str])
    return optional_rule(annotation, description=f"{parameter.location} parameter")


def synthesize_schema(
    parameters: Sequence[ParameterDescriptor],
    method: HttpMethod,
    body_vocabulary: Dict[str, FieldRule],
) -> Dict[str, FieldRule]:
    """Build the field-name to rule mapping for one operation.

    Header parameters are never exposed. For non-GET methods the surface body
    vocabulary is applied after the parameter rules, so a vocabulary entry
    replaces a declared parameter of the same name.
    """
    schema: Dict[str, FieldRule] = {}
    for parameter in parameters:
        if parameter.location == "header":
            continue
        schema[parameter.name] = parameter_rule(parameter)

    if method is not HttpMethod.GET:
        schema.update(body_vocabulary)
    return schema


def build_input_model(tool_name: str, schema: Dict[str, FieldRule]) -> type[BaseModel]:
    """Create a pydantic model for a tool's input; extra keys are kept."""
    fields: Dict[str, Any] = {}
    used: set[str] = set()
    for name, (annotation, info) in schema.items():
        attr = _field_attr(name, used)
        used.add(attr)
        fields[attr] = (
            annotation,
            Field(None, alias=name, description=info.description),
        )

    model_config = ConfigDict(extra="allow", populate_by_name=True, protected_namespaces=())
    model_name = f"{_sanitize_name(tool_name)}Input"
    return create_model(model_name, __config__=model_config, **fields)


def validate_input(model: type[BaseModel], arguments: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate caller input and return it with the caller's original values.

    The model only checks the input; its coerced values (``3`` to ``3.0``,
    ``"yes"`` to ``True``) are not forwarded.
    """
    model.model_validate(dict(arguments))
    return dict(arguments)


def _field_attr(name: str, used: set[str]) -> str:
    attr = _sanitize_name(name).strip("_") or "field"
    if attr[0].isdigit():
        attr = f"f_{attr}"
    if keyword.iskeyword(attr) or hasattr(BaseModel, attr):
        attr = f"{attr}_"
    candidate = attr
    counter = 2
    while candidate in used:
        candidate = f"{attr}_{counter}"
        counter += 1
    return candidate


def _sanitize_name(name: str) -> str:
    return re.sub(r"\W", "_", name)
