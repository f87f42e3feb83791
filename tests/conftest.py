"""
Shared fixtures for the compiler tests.
"""

from typing import Any, Dict
from unittest.mock import AsyncMock

import pytest

from medusa_mcp.auth import PublishableKeyAuth
from medusa_mcp.catalog import load_catalog
from medusa_mcp.client import MedusaClient


STORE_DOCUMENT: Dict[str, Any] = {
    "paths": {
        "/store/products": {
            "get": {
                "operationId": "GetProducts",
                "description": "List products.",
                "parameters": [
                    {"name": "x-publishable-api-key", "in": "header", "schema": {"type": "string"}},
                    {"name": "limit", "in": "query", "schema": {"type": "number"}},
                    {"name": "tags", "in": "query", "schema": {"type": "array"}},
                    {"name": "q", "in": "query", "schema": {"type": "string"}},
                ],
            }
        },
        "/store/products/{id}": {
            "get": {
                "operationId": "GetProductsId",
                "description": "Get a product.",
                "parameters": [
                    {"name": "id", "in": "path", "schema": {"type": "string"}},
                    {"name": "fields", "in": "query", "schema": {"type": "string"}},
                ],
            },
            "post": {
                "operationId": "PostProductsId",
                "parameters": [
                    {"name": "id", "in": "path", "schema": {"type": "string"}},
                    {"name": "fields", "in": "query", "schema": {"type": "string"}},
                ],
            },
            "put": {"operationId": "PutProductsId"},
        },
        "/store/carts": {
            "post": {"description": "No operation id here."},
        },
    }
}

ADMIN_DOCUMENT: Dict[str, Any] = {
    "paths": {
        "/admin/products/{id}": {
            "get": {
                "operationId": "GetProduct",
                "description": "Retrieve a product.",
                "parameters": [{"name": "id", "in": "path", "schema": {"type": "string"}}],
            },
            "delete": {
                "operationId": "DeleteProduct",
                "description": "Delete a product.",
                "parameters": [{"name": "id", "in": "path", "schema": {"type": "string"}}],
            },
        }
    }
}


@pytest.fixture
def store_document():
    return STORE_DOCUMENT


@pytest.fixture
def admin_document():
    return ADMIN_DOCUMENT


@pytest.fixture
def store_catalog():
    return load_catalog(STORE_DOCUMENT)


@pytest.fixture
def admin_catalog():
    return load_catalog(ADMIN_DOCUMENT)


@pytest.fixture
def mock_client():
    """MedusaClient double whose fetch/login are AsyncMocks."""
    client = AsyncMock(spec=MedusaClient)
    client.fetch.return_value = {"ok": True}
    client.login.return_value = "admin-token"
    return client


@pytest.fixture
def store_auth():
    return PublishableKeyAuth("pk_test")
