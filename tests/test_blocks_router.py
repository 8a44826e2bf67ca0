from __future__ import annotations

from fastapi.testclient import TestClient

from app.api.deps import get_swapped_tokens_by_block_use_case, get_swaps_by_block_use_case
from app.api.rate_limit import enforce_rate_limit
from app.application.use_cases.get_swapped_tokens_by_block import GetSwappedTokensByBlockUseCase
from app.application.use_cases.get_swaps_by_block import GetSwapsByBlockUseCase
from app.domain.entities.swap import Swap
from app.domain.entities.token import Pool, Token
from app.domain.exceptions import AggregationFailedError, InvalidBlockError, RequestTimeoutError
from app.main import app


class FakeQueryGateway:
    def __init__(self, rows):
        self.rows = rows
        self.calls: list[dict] = []

    def execute(self, *, context, shape, variables):
        self.calls.append(dict(variables))
        return self.rows


class RaisingUseCase:
    def __init__(self, error: Exception):
        self.error = error

    def execute(self, _command, *, context):
        raise self.error


def _client(overrides: dict) -> TestClient:
    app.dependency_overrides[enforce_rate_limit] = lambda: None
    app.dependency_overrides.update(overrides)
    return TestClient(app)


def test_swaps_by_block_defaults_limit_to_five():
    gateway = FakeQueryGateway(
        [Swap(id="0xswap", pool=Pool(token0=Token(symbol="WETH"), token1=Token(symbol="USDC")))]
    )
    client = _client(
        {get_swaps_by_block_use_case: lambda: GetSwapsByBlockUseCase(query_gateway=gateway)}
    )

    response = client.get("/v1/blocks/18319881/swaps")

    assert response.status_code == 200
    assert response.json() == [
        {"id": "0xswap", "pool": {"token0": {"symbol": "WETH"}, "token1": {"symbol": "USDC"}}}
    ]
    assert gateway.calls == [{"block": 18319881, "first": 5}]

    app.dependency_overrides.clear()


def test_swaps_by_block_invalid_block_is_bad_request():
    client = _client(
        {get_swaps_by_block_use_case: lambda: RaisingUseCase(InvalidBlockError("invalid block"))}
    )

    response = client.get("/v1/blocks/invalid/swaps?first=5")

    assert response.status_code == 400
    assert response.json() == {"detail": "invalid block"}

    app.dependency_overrides.clear()


def test_swaps_by_block_timeout_maps_to_408():
    client = _client(
        {get_swaps_by_block_use_case: lambda: RaisingUseCase(RequestTimeoutError("request timeout"))}
    )

    response = client.get("/v1/blocks/18319881/swaps")

    assert response.status_code == 408

    app.dependency_overrides.clear()


def test_swapped_tokens_returns_distinct_symbols():
    gateway = FakeQueryGateway(
        [
            Swap(id="1", pool=Pool(token0=Token(symbol="WETH"), token1=Token(symbol="USDC"))),
            Swap(id="2", pool=Pool(token0=Token(symbol="USDC"), token1=Token(symbol="DAI"))),
        ]
    )
    client = _client(
        {
            get_swapped_tokens_by_block_use_case: lambda: GetSwappedTokensByBlockUseCase(
                get_swaps_by_block_use_case=GetSwapsByBlockUseCase(query_gateway=gateway)
            )
        }
    )

    response = client.get("/v1/blocks/18319881/swaps/tokens?first=10")

    assert response.status_code == 200
    assert sorted(row["symbol"] for row in response.json()) == ["DAI", "USDC", "WETH"]
    assert gateway.calls == [{"block": 18319881, "first": 10}]

    app.dependency_overrides.clear()


def test_swapped_tokens_aggregation_failure_maps_to_502():
    client = _client(
        {
            get_swapped_tokens_by_block_use_case: lambda: RaisingUseCase(
                AggregationFailedError("issue to get swaps")
            )
        }
    )

    response = client.get("/v1/blocks/18319881/swaps/tokens")

    assert response.status_code == 502
    assert response.json() == {"detail": "issue to get swaps"}

    app.dependency_overrides.clear()


def test_ping_is_outside_versioned_prefix():
    client = TestClient(app)

    response = client.get("/ping")

    assert response.status_code == 200
    assert response.text == "."
