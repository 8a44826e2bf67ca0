from __future__ import annotations

import time

from fastapi.testclient import TestClient

from app.api.deps import get_pools_by_token_use_case, get_token_volume_use_case
from app.api.rate_limit import enforce_rate_limit
from app.application.dto.token import GetTokenVolumeInput
from app.application.use_cases.get_pools_by_token import GetPoolsByTokenUseCase
from app.application.use_cases.get_token_volume import GetTokenVolumeUseCase
from app.domain.entities.token import AggregatedVolume, DayVolumeRecord, Pool, Token
from app.domain.exceptions import InvalidRangeError, NoVolumeDataError, SumFailedError
from app.main import app

WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"


class FakeQueryGateway:
    def __init__(self, rows):
        self.rows = rows
        self.calls: list[dict] = []

    def execute(self, *, context, shape, variables):
        self.calls.append(dict(variables))
        return self.rows


class RecordingVolumeUseCase:
    def __init__(self, *, result: AggregatedVolume | None = None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.commands: list[GetTokenVolumeInput] = []

    def execute(self, command: GetTokenVolumeInput, *, context):
        self.commands.append(command)
        if self.error is not None:
            raise self.error
        return self.result


def _client(overrides: dict) -> TestClient:
    app.dependency_overrides[enforce_rate_limit] = lambda: None
    app.dependency_overrides.update(overrides)
    return TestClient(app)


def test_pools_by_token_non_numeric_first_defaults_to_five():
    gateway = FakeQueryGateway([Pool(id="0xpool", token0=Token(symbol="WETH"), token1=Token(symbol="USDT"))])
    client = _client({get_pools_by_token_use_case: lambda: GetPoolsByTokenUseCase(query_gateway=gateway)})

    response = client.get(f"/v1/tokens/{WETH}/pools?first=abc")

    assert response.status_code == 200
    assert response.json() == [
        {"id": "0xpool", "token0": {"symbol": "WETH"}, "token1": {"symbol": "USDT"}}
    ]
    assert gateway.calls == [{"token": WETH, "first": 5}]

    app.dependency_overrides.clear()


def test_pools_by_token_invalid_token_is_bad_request():
    gateway = FakeQueryGateway([])
    client = _client({get_pools_by_token_use_case: lambda: GetPoolsByTokenUseCase(query_gateway=gateway)})

    response = client.get("/v1/tokens/not-a-token/pools")

    assert response.status_code == 400
    assert response.json() == {"detail": "invalid token"}
    assert gateway.calls == []

    app.dependency_overrides.clear()


def test_volume_returns_decimal_string():
    gateway = FakeQueryGateway([DayVolumeRecord(volume_usd="10"), DayVolumeRecord(volume_usd="20.5")])
    client = _client({get_token_volume_use_case: lambda: GetTokenVolumeUseCase(query_gateway=gateway)})

    response = client.get(f"/v1/tokens/{WETH}/volume?from=1000&to=2000")

    assert response.status_code == 200
    assert response.json() == {"volume": "30.5000000000"}
    assert gateway.calls == [{"token": WETH, "from": 1000, "to": 2000}]

    app.dependency_overrides.clear()


def test_volume_defaults_to_last_24_hours():
    use_case = RecordingVolumeUseCase(result=AggregatedVolume(volume="1.0000000000"))
    client = _client({get_token_volume_use_case: lambda: use_case})

    before = int(time.time())
    response = client.get(f"/v1/tokens/{WETH}/volume")
    after = int(time.time())

    assert response.status_code == 200
    command = use_case.commands[0]
    to_ts = int(command.to_ts)
    assert before <= to_ts <= after
    assert int(command.from_ts) == to_ts - 86400

    app.dependency_overrides.clear()


def test_volume_error_statuses():
    cases = [
        (InvalidRangeError("invalid range"), 400),
        (NoVolumeDataError("no token volume"), 404),
        (SumFailedError("issue to get sum of volume"), 500),
    ]
    for error, expected_status in cases:
        use_case = RecordingVolumeUseCase(error=error)
        client = _client({get_token_volume_use_case: lambda: use_case})

        response = client.get(f"/v1/tokens/{WETH}/volume?from=1&to=2")

        assert response.status_code == expected_status
        assert response.json() == {"detail": str(error)}

    app.dependency_overrides.clear()
