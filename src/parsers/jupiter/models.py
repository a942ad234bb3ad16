"""Pydantic models for the Jupiter Price API v3."""

from pydantic import BaseModel, ConfigDict, Field


class JupiterPriceEntry(BaseModel):
    """One mint entry of a /price/v3 response."""

    model_config = ConfigDict(populate_by_name=True)

    usd_price: float | None = Field(default=None, alias="usdPrice")
    block_id: int | None = Field(default=None, alias="blockId")
    decimals: int | None = None
    price_change_24h: float | None = Field(default=None, alias="priceChange24h")
