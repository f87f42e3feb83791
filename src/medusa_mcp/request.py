"""Turn validated tool input into a concrete backend request."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from .catalog import HttpMethod
from .models import PreparedRequest
from .schema import ParameterGroups


logger = logging.getLogger(__name__)


def build_request(
    route: str,
    method: HttpMethod,
    groups: ParameterGroups,
    arguments: Mapping[str, Any],
) -> PreparedRequest:
    path = build_path(route, groups.path, arguments)
    query = build_query(groups.query, arguments)

    body: Optional[Dict[str, Any]] = None
    if method is HttpMethod.GET:
        logger.info("Fetching %s with GET %s", path, encode_query(query))
    else:
        body = build_body(groups, arguments)

    return PreparedRequest(method=method, path=path, query=query, body=body)


def build_path(route: str, path_params: Tuple[str, ...], arguments: Mapping[str, Any]) -> str:
    """Substitute path params into the route; unresolved placeholders stay verbatim."""
    path = route
    for name in path_params:
        value = arguments.get(name)
        if value is None:
            continue
        path = path.replace(f"{{{name}}}", stringify(value), 1)
    return path


def build_query(query_params: Tuple[str, ...], arguments: Mapping[str, Any]) -> List[Tuple[str, str]]:
    query: List[Tuple[str, str]] = []
    for name in query_params:
        value = arguments.get(name)
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            query.extend((name, stringify(item)) for item in value)
        else:
            query.append((name, stringify(value)))
    return query


def build_body(groups: ParameterGroups, arguments: Mapping[str, Any]) -> Dict[str, Any]:
    consumed = groups.consumed()
    return {key: value for key, value in arguments.items() if key not in consumed}


def encode_query(query: List[Tuple[str, str]]) -> str:
    return urlencode(query)


def stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value)
    return str(value)
