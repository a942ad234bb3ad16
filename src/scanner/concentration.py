"""Top-10 holder concentration check (whale dump risk).

Balances and supply are raw u64 units that routinely exceed 2**53, so the
share is computed with Python ints and only turned into a float for display.
"""

from loguru import logger

from src.parsers.solana_rpc.client import SolanaRpcClient
from src.scanner.models import CheckResult

CHECK_NAME = "Top Holders"
WEIGHT = 20
TOP_N = 10
EXTREME_PCT = 80
HIGH_PCT = 50


def top10_per_mille(balances: list[int], total_supply: int) -> int:
    """Share of ``total_supply`` held by the first TOP_N balances, in 1/1000 units."""
    top_sum = sum(balances[:TOP_N])
    return top_sum * 1000 // total_supply


async def check_top_holders(
    rpc: SolanaRpcClient, mint: str, supply: str | None = None
) -> CheckResult:
    """``supply`` is the raw supply already fetched for the scan, if any."""
    try:
        accounts = await rpc.get_token_largest_accounts(mint)
        if not accounts:
            return CheckResult(CHECK_NAME, safe=False, detail="No holders found", weight=WEIGHT)

        if supply is None:
            supply = (await rpc.get_token_supply(mint)).amount
        total_supply = int(supply)
        if total_supply == 0:
            return CheckResult(CHECK_NAME, safe=False, detail="Zero supply", weight=WEIGHT)

        per_mille = top10_per_mille([int(a.amount) for a in accounts], total_supply)
        percent = per_mille / 10.0

        if percent > EXTREME_PCT:
            return CheckResult(
                CHECK_NAME,
                safe=False,
                detail=f"Top 10 hold {percent:.1f}% (extreme concentration)",
                weight=WEIGHT,
            )
        if percent > HIGH_PCT:
            return CheckResult(
                CHECK_NAME,
                safe=False,
                detail=f"Top 10 hold {percent:.1f}% (high concentration)",
                weight=WEIGHT,
            )
        return CheckResult(CHECK_NAME, safe=True, detail=f"Top 10 hold {percent:.1f}%", weight=WEIGHT)

    except Exception as e:
        logger.debug(f"[HOLDERS] Check failed for {mint[:12]}: {e}")
        return CheckResult(
            CHECK_NAME, safe=True, detail="Check unavailable", weight=WEIGHT, errored=True
        )
