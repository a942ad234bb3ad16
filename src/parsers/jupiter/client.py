"""Jupiter Price API v3 client: USD price lookup for the scan token info.

The lite endpoint needs no key; an api_key is sent as x-api-key.
"""

import asyncio
import math

import httpx
from loguru import logger
from pydantic import ValidationError

from src.parsers.jupiter.models import JupiterPriceEntry

DEFAULT_PRICE_URL = "https://lite-api.jup.ag/price/v3/price"
MAX_RETRIES = 2
RETRY_DELAYS = [1.0, 3.0]


class PriceLookupError(Exception):
    pass


class JupiterPriceClient:
    """Async HTTP client for Jupiter Price API v3."""

    def __init__(
        self, api_key: str = "", base_url: str = DEFAULT_PRICE_URL, timeout: float = 10.0
    ) -> None:
        self._base_url = base_url
        headers: dict[str, str] = {}
        if api_key:
            headers["x-api-key"] = api_key
        self._client = httpx.AsyncClient(timeout=timeout, headers=headers)

    async def close(self) -> None:
        await self._client.aclose()

    async def get_price_usd(self, mint: str) -> float | None:
        """Return the USD price of ``mint``, or None if Jupiter has no usable price.

        Raises PriceLookupError when the API could not be reached at all.
        """
        for attempt in range(MAX_RETRIES + 1):
            delay = RETRY_DELAYS[min(attempt, len(RETRY_DELAYS) - 1)]
            try:
                resp = await self._client.get(self._base_url, params={"ids": mint})
            except (httpx.TimeoutException, httpx.TransportError) as e:
                if attempt < MAX_RETRIES:
                    logger.debug(f"[PRICE] {type(e).__name__}, retry in {delay}s")
                    await asyncio.sleep(delay)
                    continue
                logger.warning(f"[PRICE] Failed after {MAX_RETRIES + 1} attempts: {e}")
                raise PriceLookupError(str(e)) from e

            if resp.status_code == 429:
                if attempt < MAX_RETRIES:
                    logger.debug(f"[PRICE] Rate limited, waiting {delay}s")
                    await asyncio.sleep(delay)
                    continue
                logger.warning(f"[PRICE] Rate limited after {MAX_RETRIES + 1} attempts")
                raise PriceLookupError(f"Rate limited after {MAX_RETRIES + 1} attempts")
            if resp.status_code != 200:
                logger.debug(f"[PRICE] HTTP {resp.status_code} for {mint}")
                return None

            return _parse_price(resp.json(), mint)

        raise PriceLookupError(f"Rate limited after {MAX_RETRIES + 1} attempts")


def _parse_price(data: dict, mint: str) -> float | None:
    raw = data.get(mint) if isinstance(data, dict) else None
    if not raw:
        return None
    try:
        entry = JupiterPriceEntry.model_validate(raw)
    except ValidationError:
        logger.debug(f"[PRICE] Unexpected entry shape for {mint[:12]}")
        return None
    price = entry.usd_price
    if not price or not math.isfinite(price):
        return None
    return price
