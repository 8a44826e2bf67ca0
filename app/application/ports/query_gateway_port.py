from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from app.application.dto.request_context import RequestContext


class QueryGatewayError(RuntimeError):
    pass


class QueryGatewayTimeoutError(QueryGatewayError):
    pass


@dataclass(frozen=True)
class QueryShape:
    name: str
    root_field: str
    document: str


SWAPS_BY_BLOCK = QueryShape(
    name="swaps_by_block",
    root_field="swaps",
    document="""
    query SwapsByBlock($block: Int!, $first: Int!) {
      swaps(block: { number: $block }, first: $first) {
        id
        pool {
          token0 { symbol }
          token1 { symbol }
        }
      }
    }
    """,
)

POOLS_BY_TOKEN = QueryShape(
    name="pools_by_token",
    root_field="pools",
    document="""
    query PoolsByToken($token: String!, $first: Int!) {
      pools(first: $first, where: { or: [{ token0: $token }, { token1: $token }] }) {
        id
        token0 { symbol }
        token1 { symbol }
      }
    }
    """,
)

TOKEN_DAY_VOLUMES = QueryShape(
    name="token_day_volumes",
    root_field="tokenDayDatas",
    document="""
    query TokenDayVolumes($token: String!, $from: Int!, $to: Int!) {
      tokenDayDatas(where: { token: $token, date_gte: $from, date_lte: $to }) {
        volumeUSD
      }
    }
    """,
)


class QueryGatewayPort(Protocol):
    def execute(
        self,
        *,
        context: RequestContext,
        shape: QueryShape,
        variables: Mapping[str, Any],
    ) -> list[Any]:
        ...
