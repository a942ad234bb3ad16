"""Token risk scan: fan out the shared fetches, run the checks, score.

Risk score = sum of weights of checks that ran (not errored) and came back
unsafe, clamped to 0-100:

    Mint Authority     30  supply can still be inflated
    Freeze Authority   20  holder accounts can be frozen
    Top Holders        20  whale concentration, dump risk
    Token Age          10  brand-new tokens are higher risk

    0-20 LOW, 21-50 MEDIUM, 51+ HIGH

Errored checks never count (fail-open): an RPC outage never raises a
score, but it can hide real risk while it lasts. No retries happen here;
the RPC client owns those.
"""

import asyncio
from collections.abc import Iterable
from datetime import datetime, timezone

from loguru import logger

from src.parsers.jupiter.client import JupiterPriceClient
from src.parsers.solana_rpc.client import SolanaRpcClient
from src.scanner.authority import check_freeze_authority, check_mint_authority
from src.scanner.concentration import check_top_holders
from src.scanner.models import CheckResult, RiskLevel, ScanResult, TokenInfo
from src.scanner.snapshot import fetch_price, fetch_snapshot, fetch_supply_info
from src.scanner.token_age import check_token_age
from src.utils.validation import InvalidMintAddressError, is_valid_public_key

MAX_SCORE = 100


def compute_risk_score(checks: Iterable[CheckResult]) -> int:
    score = sum(c.weight for c in checks if c.counts_toward_score)
    return min(MAX_SCORE, max(0, score))


async def scan_token(
    rpc: SolanaRpcClient,
    mint_address: str,
    *,
    prices: JupiterPriceClient | None = None,
) -> ScanResult:
    """Run all safety checks on a mint and produce a risk score.

    Raises InvalidMintAddressError (before any I/O) for a malformed address;
    every other failure is folded into the result.
    """
    if not is_valid_public_key(mint_address):
        raise InvalidMintAddressError(mint_address)

    snapshot, supply_info, price = await asyncio.gather(
        fetch_snapshot(rpc, mint_address),
        fetch_supply_info(rpc, mint_address),
        fetch_price(prices, mint_address),
    )

    checks = tuple(
        await asyncio.gather(
            check_mint_authority(snapshot),
            check_freeze_authority(snapshot),
            check_top_holders(
                rpc, mint_address, supply_info.amount if supply_info else None
            ),
            check_token_age(rpc, mint_address),
        )
    )

    risk_score = compute_risk_score(checks)
    risk_level = RiskLevel.from_score(risk_score)

    errored = [c.name for c in checks if c.errored]
    logger.info(
        f"[SCAN] {mint_address[:12]} score={risk_score} level={risk_level.value}"
        + (f" errored={','.join(errored)}" if errored else "")
    )

    return ScanResult(
        mint_address=mint_address,
        risk_score=risk_score,
        risk_level=risk_level,
        checks=checks,
        token_info=TokenInfo(
            supply=supply_info.amount if supply_info else None,
            decimals=supply_info.decimals if supply_info else None,
            price_usd=price,
        ),
        scanned_at=datetime.now(timezone.utc),
    )
