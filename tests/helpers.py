"""In-memory stand-ins for the RPC and price clients, plus mint byte builders."""

import base64
import struct

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from src.parsers.solana_rpc.models import (
    RpcAccountInfo,
    RpcSignature,
    RpcTokenAccountBalance,
    RpcTokenAmount,
)

TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
AUTHORITY = Pubkey.from_string("9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM")


def build_mint_data(
    *,
    mint_authority: bytes | None = None,
    freeze_authority: bytes | None = None,
    size: int = 82,
) -> bytes:
    """Mint account bytes with authorities at offsets 0/4 and 36/40."""
    data = bytearray(size)
    if mint_authority:
        struct.pack_into("<B3x32s", data, 0, 1, mint_authority)
    if freeze_authority:
        struct.pack_into("<B3x32s", data, 36, 1, freeze_authority)
    return bytes(data)


def account_info(data: bytes, owner: str = TOKEN_PROGRAM_ID) -> RpcAccountInfo:
    return RpcAccountInfo(owner=owner, data=[base64.b64encode(data).decode(), "base64"])


class FakeRpc:
    """SolanaRpcClient stand-in. Pass an Exception instance to make a call fail."""

    def __init__(
        self,
        *,
        account: RpcAccountInfo | Exception | None = None,
        supply: str | Exception = "1000000000",
        decimals: int = 6,
        holders: list[str] | Exception | None = None,
        signature_pages: list[list[RpcSignature]] | Exception | None = None,
    ) -> None:
        self._account = account
        self._supply = supply
        self._decimals = decimals
        self._holders = holders if holders is not None else []
        self._pages = signature_pages if signature_pages is not None else []
        self.calls: list[tuple[str, dict]] = []

    @staticmethod
    def _maybe_raise(value):
        if isinstance(value, Exception):
            raise value
        return value

    async def get_account_info(self, pubkey: str):
        self.calls.append(("getAccountInfo", {}))
        return self._maybe_raise(self._account)

    async def get_token_supply(self, pubkey: str):
        self.calls.append(("getTokenSupply", {}))
        amount = self._maybe_raise(self._supply)
        return RpcTokenAmount(amount=amount, decimals=self._decimals)

    async def get_token_largest_accounts(self, pubkey: str):
        self.calls.append(("getTokenLargestAccounts", {}))
        holders = self._maybe_raise(self._holders)
        return [RpcTokenAccountBalance(amount=a, decimals=self._decimals) for a in holders]

    async def get_signatures_for_address(self, pubkey: str, *, limit: int = 1000, before: str = ""):
        self.calls.append(("getSignaturesForAddress", {"limit": limit, "before": before}))
        pages = self._maybe_raise(self._pages)
        page_index = sum(1 for name, _ in self.calls if name == "getSignaturesForAddress") - 1
        if page_index >= len(pages):
            return []
        return pages[page_index]

    def count(self, method: str) -> int:
        return sum(1 for name, _ in self.calls if name == method)


class FakePrices:
    def __init__(self, price: float | None | Exception = None) -> None:
        self._price = price

    async def get_price_usd(self, mint: str):
        if isinstance(self._price, Exception):
            raise self._price
        return self._price


def signature_page(start: int, count: int, block_time: int | None) -> list[RpcSignature]:
    return [
        RpcSignature(signature=f"sig_{start + i}", slot=start + i, block_time=block_time)
        for i in range(count)
    ]
