"""Compile the Medusa catalogs and print the resulting tool registry as JSON."""

from __future__ import annotations

import argparse
import json
import os
from pathlib import Path
from typing import Any, Dict, List

from medusa_mcp.auth import AdminSession, PublishableKeyAuth
from medusa_mcp.catalog import load_catalog
from medusa_mcp.client import MedusaClient
from medusa_mcp.compiler import ToolCompiler
from medusa_mcp.config import get_settings
from medusa_mcp.surfaces import ADMIN_SURFACE, STORE_SURFACE


def _compile(surface: str, catalog_path: Path) -> List[Dict[str, Any]]:
    settings = get_settings()
    client = MedusaClient(settings.medusa_backend_url, settings.publishable_key)
    if surface == "admin":
        # Listing never invokes a handler, so the session stays logged out.
        session = AdminSession(client, settings.medusa_username, settings.medusa_password)
        compiler = ToolCompiler(ADMIN_SURFACE, client, session)
    else:
        compiler = ToolCompiler(STORE_SURFACE, client, PublishableKeyAuth(settings.publishable_key))
    return [tool.describe() for tool in compiler.compile(load_catalog(catalog_path))]


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="List the MCP tools compiled from a catalog")
    parser.add_argument(
        "--surface",
        default=os.getenv("MEDUSA_SURFACE", "store"),
        choices=["store", "admin"],
        help="API surface to compile",
    )
    parser.add_argument(
        "--catalog",
        default="",
        help="Path to the catalog JSON (default: configured catalog for the surface)",
    )
    parser.add_argument(
        "--names-only",
        action="store_true",
        help="Print one tool name per line instead of JSON",
    )

    args = parser.parse_args()
    if args.catalog:
        catalog_path = Path(args.catalog).expanduser().resolve()
    elif args.surface == "admin":
        catalog_path = settings.admin_catalog()
    else:
        catalog_path = settings.store_catalog()
    if not catalog_path.exists():
        raise SystemExit(f"Catalog file not found: {catalog_path}")

    tools = _compile(args.surface, catalog_path)
    if args.names_only:
        for tool in tools:
            print(tool["name"])
        return
    print(json.dumps(tools, indent=2))


if __name__ == "__main__":
    main()
