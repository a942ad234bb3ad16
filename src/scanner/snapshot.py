"""Stage-one fetches shared by every check of a scan.

Each helper degrades to None instead of raising, so one failing fetch
never cancels its siblings in the fan-out.
"""

from loguru import logger

from src.parsers.jupiter.client import JupiterPriceClient
from src.parsers.solana_rpc.client import SolanaRpcClient
from src.scanner.models import MintAccountSnapshot, SupplyInfo


async def fetch_snapshot(rpc: SolanaRpcClient, mint: str) -> MintAccountSnapshot | None:
    """Fetch the mint account once.

    A transport failure also yields None: downstream checks cannot tell
    it apart from a missing account without a second round-trip.
    """
    try:
        account = await rpc.get_account_info(mint)
        if account is None:
            return None
        return MintAccountSnapshot(owner=account.owner, data=account.raw_data)
    except Exception as e:
        logger.debug(f"[SCAN] getAccountInfo failed for {mint[:12]}: {e}")
        return None


async def fetch_supply_info(rpc: SolanaRpcClient, mint: str) -> SupplyInfo | None:
    try:
        supply = await rpc.get_token_supply(mint)
    except Exception as e:
        logger.debug(f"[SCAN] getTokenSupply failed for {mint[:12]}: {e}")
        return None
    return SupplyInfo(amount=supply.amount, decimals=supply.decimals)


async def fetch_price(prices: JupiterPriceClient | None, mint: str) -> float | None:
    if prices is None:
        return None
    try:
        return await prices.get_price_usd(mint)
    except Exception as e:
        logger.debug(f"[SCAN] Price lookup failed for {mint[:12]}: {e}")
        return None
