"""Pydantic models for the Solana JSON-RPC responses the scanner consumes."""

import base64

from pydantic import BaseModel, ConfigDict, Field


class RpcAccountInfo(BaseModel):
    """Account returned by getAccountInfo (base64 encoding)."""

    owner: str
    lamports: int = 0
    executable: bool = False
    data: list[str] = Field(default_factory=list)  # [payload, "base64"]

    @property
    def raw_data(self) -> bytes:
        if not self.data:
            return b""
        return base64.b64decode(self.data[0])


class RpcTokenAmount(BaseModel):
    """Token amount as returned by getTokenSupply / getTokenLargestAccounts."""

    model_config = ConfigDict(populate_by_name=True)

    amount: str  # raw integer units, decimal string
    decimals: int = 0
    ui_amount_string: str | None = Field(default=None, alias="uiAmountString")


class RpcTokenAccountBalance(RpcTokenAmount):
    """One entry of getTokenLargestAccounts."""

    address: str = ""


class RpcSignature(BaseModel):
    """Transaction signature metadata from getSignaturesForAddress."""

    model_config = ConfigDict(populate_by_name=True)

    signature: str
    slot: int = 0
    block_time: int | None = Field(default=None, alias="blockTime")
    err: dict | str | None = None  # non-None means failed
