"""Configuration for the Medusa MCP server."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


_OAS_DIR = Path(__file__).resolve().parent / "oas"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, env_file=".env", extra="ignore"
    )

    service_name: str = Field(default="medusa-mcp")

    medusa_backend_url: str = Field(default="http://localhost:9000")
    publishable_key: str = Field(default="")
    medusa_username: str = Field(default="medusa_user")
    medusa_password: str = Field(default="medusa_pass")
    medusa_timeout_seconds: float = Field(default=30)

    store_catalog_path: Optional[str] = Field(default=None)
    admin_catalog_path: Optional[str] = Field(default=None)
    enable_store_tools: bool = Field(default=True)
    enable_admin_tools: bool = Field(default=True)

    mcp_transport: str = Field(default="stdio")
    mcp_host: str = Field(default="0.0.0.0")
    mcp_port: int = Field(default=8000)

    log_level: str = Field(default="INFO")

    def store_catalog(self) -> Path:
        if self.store_catalog_path:
            return Path(self.store_catalog_path)
        return _OAS_DIR / "store.json"

    def admin_catalog(self) -> Path:
        if self.admin_catalog_path:
            return Path(self.admin_catalog_path)
        return _OAS_DIR / "admin.json"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
