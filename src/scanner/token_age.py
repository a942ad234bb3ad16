"""Token age estimate from the mint account's signature history.

History is walked newest-first for at most MAX_PAGES pages of PAGE_SIZE
signatures. A mint with more than MAX_PAGES * PAGE_SIZE transactions will
look younger than it is: the oldest signature reached is not the creation.
"""

import time
from decimal import ROUND_HALF_UP, Decimal

from loguru import logger

from src.parsers.solana_rpc.client import SolanaRpcClient
from src.scanner.models import CheckResult

CHECK_NAME = "Token Age"
WEIGHT = 10
PAGE_SIZE = 1000
MAX_PAGES = 5

HOUR = 3600
DAY = 24 * HOUR


async def find_oldest_block_time(rpc: SolanaRpcClient, mint: str) -> int | None:
    """Block time of the oldest signature reachable within the page cap."""
    oldest: int | None = None
    before = ""

    for _ in range(MAX_PAGES):
        page = await rpc.get_signatures_for_address(mint, limit=PAGE_SIZE, before=before)
        if not page:
            break

        # Oldest entry is last; skip trailing sigs the node has no block time for
        for sig in reversed(page):
            if sig.block_time is not None:
                oldest = sig.block_time
                break
        before = page[-1].signature

        if len(page) < PAGE_SIZE:
            break

    return oldest


def describe_age(age_seconds: float) -> tuple[bool, str]:
    """Map an age to (safe, detail)."""
    age = Decimal(age_seconds)
    hours = age / HOUR
    days = age / DAY

    if hours < 24:
        return False, f"{_half_up(hours, 1)} hours old (very new!)"
    if days < 7:
        return False, f"{_half_up(days, 1)} days old (new)"
    if days < 30:
        return True, f"{_half_up(days, 0)} days old"
    if days < 365:
        return True, f"{_half_up(days / 30, 0)} months old"
    return True, f"{_half_up(days / 365, 1)}+ years old"


def _half_up(value: Decimal, places: int) -> str:
    # Halves round away from zero: 2.5 months reads as 3
    return str(value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


async def check_token_age(
    rpc: SolanaRpcClient, mint: str, *, now: float | None = None
) -> CheckResult:
    try:
        oldest = await find_oldest_block_time(rpc, mint)
        if oldest is None:
            return CheckResult(CHECK_NAME, safe=False, detail="Unknown age", weight=WEIGHT)

        current = time.time() if now is None else now
        safe, detail = describe_age(max(current - oldest, 0))
        return CheckResult(CHECK_NAME, safe=safe, detail=detail, weight=WEIGHT)

    except Exception as e:
        logger.debug(f"[AGE] Check failed for {mint[:12]}: {e}")
        return CheckResult(
            CHECK_NAME, safe=True, detail="Check unavailable", weight=WEIGHT, errored=True
        )
