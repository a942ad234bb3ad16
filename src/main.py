"""Command-line entry point: scan a single SPL token mint.

Usage:
    python -m src.main <MINT_ADDRESS> [--json]
"""

import argparse
import asyncio
import json
import sys

from loguru import logger

from config.settings import settings
from src.parsers.jupiter.client import JupiterPriceClient
from src.parsers.solana_rpc.client import SolanaRpcClient
from src.scanner import InvalidMintAddressError, ScanResult, scan_token
from src.scanner.report import format_scan_report
from src.utils.logger import setup_logger

EXIT_INVALID_ADDRESS = 2


async def main(mint_address: str) -> ScanResult:
    rpc = SolanaRpcClient(settings.resolved_rpc_url, timeout=settings.rpc_timeout_sec)
    prices = (
        JupiterPriceClient(settings.jupiter_api_key, base_url=settings.jupiter_price_url)
        if settings.enable_price_lookup
        else None
    )
    try:
        return await scan_token(rpc, mint_address, prices=prices)
    finally:
        await rpc.close()
        if prices is not None:
            await prices.close()


def run(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Scan an SPL token mint for rug-pull risk")
    parser.add_argument("mint", help="Token mint address (base58)")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    args = parser.parse_args(argv)

    setup_logger(
        json_logs=settings.json_logs,
        level=settings.log_level,
        log_file=settings.log_file or None,
    )

    try:
        result = asyncio.run(main(args.mint))
    except InvalidMintAddressError as e:
        logger.error(str(e))
        return EXIT_INVALID_ADDRESS

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_scan_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(run())
