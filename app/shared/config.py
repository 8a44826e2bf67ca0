from __future__ import annotations

import json
import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _json_list(name: str, default: list[str]) -> list[str]:
    value = _env(name)
    if not value:
        return default
    return json.loads(value)


@dataclass(frozen=True)
class Settings:
    graph_api: str
    graph_api_key: str
    graph_gateway_base: str
    graph_request_timeout_seconds: float
    graph_max_retries: int
    api_version: str
    host: str
    port: int
    request_timeout_seconds: float
    rate_limit_interval_ms: int
    cors_allowed_origins: list[str]
    log_level: str


def get_settings() -> Settings:
    return Settings(
        graph_api=_env("GRAPH_API", ""),
        graph_api_key=_env("GRAPH_API_KEY", ""),
        graph_gateway_base=_env("GRAPH_GATEWAY_BASE", "https://gateway.thegraph.com/api"),
        graph_request_timeout_seconds=float(_env("GRAPH_REQUEST_TIMEOUT_SECONDS", "10")),
        graph_max_retries=int(_env("GRAPH_MAX_RETRIES", "1")),
        api_version=_env("API_VERSION", "v1").strip("/"),
        host=_env("HOST", "0.0.0.0"),
        port=int(_env("PORT", "8080")),
        request_timeout_seconds=float(_env("REQUEST_TIMEOUT_SECONDS", "5")),
        rate_limit_interval_ms=int(_env("RATE_LIMIT_INTERVAL_MS", "1000")),
        cors_allowed_origins=_json_list("CORS_ALLOWED_ORIGINS", ["*"]),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
