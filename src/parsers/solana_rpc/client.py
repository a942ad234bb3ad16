"""Solana JSON-RPC client: read-only account, supply and history queries.

Unlike the scan checks, this client raises on failure: callers decide
whether a failed query degrades to "unknown" or propagates.
"""

import asyncio
import itertools
from typing import Any

import httpx
from loguru import logger

from src.parsers.solana_rpc.exceptions import RpcResponseError, RpcTransportError
from src.parsers.solana_rpc.models import (
    RpcAccountInfo,
    RpcSignature,
    RpcTokenAccountBalance,
    RpcTokenAmount,
)

MAX_RETRIES = 2
RETRY_DELAYS = [1.0, 3.0]
MAX_SIGNATURES_PER_PAGE = 1000


class SolanaRpcClient:
    """Async HTTP client for a Solana JSON-RPC endpoint."""

    def __init__(
        self, rpc_url: str, *, timeout: float = 15.0, commitment: str = "confirmed"
    ) -> None:
        self._rpc_url = rpc_url
        self._commitment = commitment
        self._ids = itertools.count(1)
        self._client = httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        await self._client.aclose()

    async def _call(self, method: str, params: list[Any]) -> Any:
        """POST a JSON-RPC request, retrying 429/5xx and network errors."""
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }

        for attempt in range(MAX_RETRIES + 1):
            delay = RETRY_DELAYS[min(attempt, len(RETRY_DELAYS) - 1)]
            try:
                resp = await self._client.post(self._rpc_url, json=payload)
            except (httpx.TimeoutException, httpx.TransportError) as e:
                if attempt < MAX_RETRIES:
                    logger.debug(f"[RPC] {method} {type(e).__name__}, retry in {delay}s")
                    await asyncio.sleep(delay)
                    continue
                logger.warning(f"[RPC] {method} failed after {MAX_RETRIES + 1} attempts: {e}")
                raise RpcTransportError(f"{method}: {e}") from e

            if resp.status_code == 429 or resp.status_code >= 500:
                if attempt < MAX_RETRIES:
                    logger.debug(f"[RPC] {method} HTTP {resp.status_code}, retry in {delay}s")
                    await asyncio.sleep(delay)
                    continue
                logger.warning(f"[RPC] {method} HTTP {resp.status_code} after retries")
                raise RpcTransportError(f"{method}: HTTP {resp.status_code}")
            if resp.status_code != 200:
                raise RpcTransportError(f"{method}: HTTP {resp.status_code}")

            try:
                data = resp.json()
            except ValueError as e:
                raise RpcResponseError(method, None, "invalid JSON body") from e

            if "error" in data:
                err = data["error"] or {}
                raise RpcResponseError(method, err.get("code"), err.get("message", ""))
            if "result" not in data:
                raise RpcResponseError(method, None, "missing result")
            return data["result"]

        raise RpcTransportError(f"{method}: exhausted retries")

    async def get_account_info(self, pubkey: str) -> RpcAccountInfo | None:
        """Fetch raw account data. Returns None if the account does not exist."""
        result = await self._call(
            "getAccountInfo",
            [pubkey, {"encoding": "base64", "commitment": self._commitment}],
        )
        value = (result or {}).get("value")
        if value is None:
            return None
        return RpcAccountInfo.model_validate(value)

    async def get_token_supply(self, pubkey: str) -> RpcTokenAmount:
        result = await self._call(
            "getTokenSupply", [pubkey, {"commitment": self._commitment}]
        )
        return RpcTokenAmount.model_validate(_value(result, "getTokenSupply"))

    async def get_token_largest_accounts(
        self, pubkey: str
    ) -> list[RpcTokenAccountBalance]:
        """Largest token accounts for a mint, sorted by balance (node returns max 20)."""
        result = await self._call(
            "getTokenLargestAccounts", [pubkey, {"commitment": self._commitment}]
        )
        return [
            RpcTokenAccountBalance.model_validate(v)
            for v in _value(result, "getTokenLargestAccounts")
        ]

    async def get_signatures_for_address(
        self, pubkey: str, *, limit: int = MAX_SIGNATURES_PER_PAGE, before: str = ""
    ) -> list[RpcSignature]:
        """Fetch signatures newest-first. ``before`` pages further back in history."""
        params: dict[str, Any] = {
            "limit": min(limit, MAX_SIGNATURES_PER_PAGE),
            "commitment": self._commitment,
        }
        if before:
            params["before"] = before

        result = await self._call("getSignaturesForAddress", [pubkey, params])
        return [RpcSignature.model_validate(sig) for sig in result or []]


def _value(result: Any, method: str) -> Any:
    """Unwrap ``{"context": ..., "value": ...}``; a null result or value is malformed."""
    value = result.get("value") if isinstance(result, dict) else None
    if value is None:
        raise RpcResponseError(method, None, "missing result value")
    return value
