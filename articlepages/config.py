"""Configuration for the article pages front-end."""

from __future__ import annotations
import os
from typing import Any

API_BASE = "https://masailworld.onrender.com/api/article"
CACHE_TTL_MS = 30 * 1000  # 30 sec cache
DEFAULT_PORT = 3000


class Config:
    """Startup settings. Only the port comes from the environment."""

    def __init__(self, port: int | None = None, api_base: str = API_BASE,
                 cache_ttl_ms: int = CACHE_TTL_MS):
        if port is None:
            port = int(os.environ.get("PORT") or DEFAULT_PORT)
        self._data: dict = {
            "port": port,
            "api_base": api_base.rstrip("/"),
            "cache_ttl_ms": cache_ttl_ms,
        }

    @property
    def port(self) -> int:
        return self._data["port"]

    @property
    def api_base(self) -> str:
        return self._data["api_base"]

    @property
    def cache_ttl_ms(self) -> int:
        return self._data["cache_ttl_ms"]

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)
