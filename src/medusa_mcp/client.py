"""Medusa backend HTTP client."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    pass


class MedusaClient:
    def __init__(
        self,
        base_url: str,
        publishable_key: str = "",
        timeout_seconds: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.publishable_key = publishable_key
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout_seconds,
            transport=self._transport,
        )

    def _default_headers(self, path: str) -> Dict[str, str]:
        if self.publishable_key and path.startswith("/store"):
            return {"x-publishable-api-key": self.publishable_key}
        return {}

    async def fetch(
        self,
        path: str,
        method: str = "get",
        headers: Optional[Dict[str, str]] = None,
        query: Optional[List[Tuple[str, str]]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send one request and return the decoded response body.

        The HTTP status is not interpreted: an error response is decoded and
        returned like any other. Transport failures propagate as httpx errors.
        """
        request_headers = {**self._default_headers(path), **(headers or {})}
        async with self._client() as client:
            response = await client.request(
                method.upper(),
                path,
                headers=request_headers,
                params=query or None,
                json=body,
            )

        if response.status_code >= 400:
            logger.warning(
                "Medusa returned %s for %s %s", response.status_code, method.upper(), path
            )
        return _decode(response)

    async def login(
        self,
        email: str,
        password: str,
        actor: str = "user",
        provider: str = "emailpass",
    ) -> str:
        url = f"/auth/{actor}/{provider}"
        async with self._client() as client:
            response = await client.post(url, json={"email": email, "password": password})
            response.raise_for_status()
            payload = response.json()

        token = payload.get("token") if isinstance(payload, dict) else None
        if not token:
            raise AuthenticationError(f"No token returned by {url}")
        return str(token)


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        return response.json()
    return response.text
