from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
import logging
import time
from typing import Any

import httpx

from app.application.dto.request_context import RequestContext
from app.application.ports.query_gateway_port import (
    POOLS_BY_TOKEN,
    SWAPS_BY_BLOCK,
    TOKEN_DAY_VOLUMES,
    QueryGatewayError,
    QueryGatewayTimeoutError,
    QueryShape,
)
from app.infrastructure.mappers.subgraph_mapper import (
    map_row_to_day_volume,
    map_row_to_pool,
    map_row_to_swap,
)


logger = logging.getLogger(__name__)


ROW_MAPPERS: dict[str, Callable[[Mapping[str, Any]], Any]] = {
    SWAPS_BY_BLOCK.name: map_row_to_swap,
    POOLS_BY_TOKEN.name: map_row_to_pool,
    TOKEN_DAY_VOLUMES.name: map_row_to_day_volume,
}


@dataclass(frozen=True)
class GraphQueryGatewaySettings:
    graph_api: str
    graph_gateway_base: str
    graph_api_key: str
    timeout_seconds: float
    max_retries: int


class GraphQueryGateway:
    def __init__(self, settings: GraphQueryGatewaySettings):
        self._settings = settings
        self._endpoint = self._resolve_endpoint(settings.graph_api)

    def execute(
        self,
        *,
        context: RequestContext,
        shape: QueryShape,
        variables: Mapping[str, Any],
    ) -> list[Any]:
        mapper = ROW_MAPPERS.get(shape.name)
        if mapper is None:
            raise QueryGatewayError(f"Unsupported query shape: {shape.name}")

        payload = self._post_graphql(
            context=context,
            query=shape.document,
            variables=dict(variables),
        )
        data = payload.get("data") or {}
        if not isinstance(data, dict):
            raise QueryGatewayError(f"Unexpected {shape.name} data: {type(data).__name__}")
        rows = data.get(shape.root_field) or []
        if not isinstance(rows, list):
            raise QueryGatewayError(f"Unexpected {shape.name} rows: {type(rows).__name__}")
        try:
            mapped = [mapper(row) for row in rows]
        except (AttributeError, KeyError, TypeError) as exc:
            raise QueryGatewayError(f"Malformed {shape.name} row: {exc!r}") from exc

        logger.info(
            "graph_query_gateway: fetched shape=%s rows=%s",
            shape.name,
            len(mapped),
        )
        return mapped

    def _post_graphql(self, *, context: RequestContext, query: str, variables: dict) -> dict:
        attempts = max(1, self._settings.max_retries)
        delay = 0.25
        last_exc: Exception | None = None

        for attempt in range(1, attempts + 1):
            timeout = self._timeout_for(context)
            try:
                with httpx.Client(timeout=timeout) as client:
                    response = client.post(
                        self._endpoint,
                        json={"query": query, "variables": variables},
                    )
                    response.raise_for_status()
                    payload = response.json()
            except httpx.TimeoutException as exc:
                raise QueryGatewayTimeoutError("GraphQL request timed out.") from exc
            except (httpx.HTTPError, ValueError) as exc:
                last_exc = exc
                remaining = context.remaining()
                if attempt == attempts or (remaining is not None and remaining <= delay):
                    break
                logger.warning(
                    "graph_query_gateway: graphql_retry attempt=%s/%s error=%s",
                    attempt,
                    attempts,
                    exc,
                )
                time.sleep(delay)
                delay *= 2
                continue

            if context.expired:
                logger.warning("graph_query_gateway: deadline_exceeded attempt=%s", attempt)
                raise QueryGatewayTimeoutError("Request deadline exceeded.")
            if not isinstance(payload, dict):
                raise QueryGatewayError(f"Unexpected GraphQL body: {type(payload).__name__}")

            errors = payload.get("errors") or []
            if errors:
                message = self._format_errors(errors)
                logger.error("graph_query_gateway: graphql_errors errors=%s", message)
                raise QueryGatewayError(message)
            return payload

        logger.error("graph_query_gateway: request_failed attempts=%s error=%s", attempts, last_exc)
        raise QueryGatewayError(f"GraphQL request failed: {last_exc}") from last_exc

    def _timeout_for(self, context: RequestContext) -> float:
        if context.cancelled:
            raise QueryGatewayError("Request context cancelled.")
        remaining = context.remaining()
        if remaining is None:
            return self._settings.timeout_seconds
        if remaining <= 0:
            raise QueryGatewayTimeoutError("Request deadline exceeded.")
        return min(remaining, self._settings.timeout_seconds)

    @staticmethod
    def _format_errors(errors: Any) -> str:
        if not isinstance(errors, list):
            errors = [errors]
        messages = []
        for err in errors:
            if isinstance(err, dict) and "message" in err:
                messages.append(str(err["message"]))
            else:
                messages.append(str(err))
        return " | ".join(messages)

    def _resolve_endpoint(self, graph_api: str) -> str:
        """Resolve the one GRAPH_API value this service is configured with.

        A full URL is used as given. Anything else is taken as a subgraph id
        served through the gateway, keyed when GRAPH_API_KEY is set.
        """
        target = graph_api.strip()
        if not target:
            raise QueryGatewayError("GRAPH_API is required for upstream queries.")
        if target.startswith(("http://", "https://")):
            return target.rstrip("/")
        segments = [self._settings.graph_gateway_base.rstrip("/")]
        if self._settings.graph_api_key.strip():
            segments.append(self._settings.graph_api_key.strip())
        segments += ["subgraphs", "id", target]
        return "/".join(segments)
