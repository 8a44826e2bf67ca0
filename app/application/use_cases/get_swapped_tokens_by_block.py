from __future__ import annotations

from app.application.dto.block import GetSwapsByBlockInput
from app.application.dto.request_context import RequestContext
from app.application.use_cases.get_swaps_by_block import GetSwapsByBlockUseCase
from app.domain.entities.token import Token
from app.domain.exceptions import AggregationFailedError, UpstreamQueryError


class GetSwappedTokensByBlockUseCase:
    """Distinct tokens traded in a block, in first-seen order (token0 before token1)."""

    def __init__(self, *, get_swaps_by_block_use_case: GetSwapsByBlockUseCase):
        self._get_swaps_by_block_use_case = get_swaps_by_block_use_case

    def execute(self, command: GetSwapsByBlockInput, *, context: RequestContext) -> list[Token]:
        try:
            swaps = self._get_swaps_by_block_use_case.execute(command, context=context)
        except UpstreamQueryError as exc:
            raise AggregationFailedError("issue to get swaps") from exc

        tokens_by_symbol: dict[str, Token] = {}
        for swap in swaps:
            for token in (swap.pool.token0, swap.pool.token1):
                if token.symbol not in tokens_by_symbol:
                    tokens_by_symbol[token.symbol] = token
        return list(tokens_by_symbol.values())
