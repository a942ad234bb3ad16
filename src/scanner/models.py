"""Result types produced by a token scan.

All of them are frozen: a ScanResult is built once per scan and handed to
the caller as-is.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @classmethod
    def from_score(cls, score: int) -> RiskLevel:
        if score <= 20:
            return cls.LOW
        if score <= 50:
            return cls.MEDIUM
        return cls.HIGH


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one safety check.

    ``weight`` is what the check adds to the risk score when unsafe.
    An errored check never contributes, whatever ``safe`` says.
    """

    name: str
    safe: bool
    detail: str
    weight: int
    errored: bool = False

    @property
    def counts_toward_score(self) -> bool:
        return not self.errored and not self.safe

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "safe": self.safe,
            "detail": self.detail,
            "weight": self.weight,
            "errored": self.errored,
        }


@dataclass(frozen=True)
class TokenInfo:
    supply: str | None = None  # raw units, arbitrary precision
    decimals: int | None = None
    price_usd: float | None = None


@dataclass(frozen=True)
class ScanResult:
    mint_address: str
    risk_score: int  # 0-100
    risk_level: RiskLevel
    checks: tuple[CheckResult, ...]
    token_info: TokenInfo
    scanned_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """JSON shape served to the Mini App and the bot."""
        return {
            "mintAddress": self.mint_address,
            "riskScore": self.risk_score,
            "riskLevel": self.risk_level.value,
            "checks": [c.to_dict() for c in self.checks],
            "tokenInfo": {
                "supply": self.token_info.supply,
                "decimals": self.token_info.decimals,
                "price": self.token_info.price_usd,
            },
            "scannedAt": self.scanned_at.isoformat(),
        }


@dataclass(frozen=True)
class MintAccountSnapshot:
    """Mint account fetched once per scan and shared by the authority checks."""

    owner: str
    data: bytes


@dataclass(frozen=True)
class SupplyInfo:
    amount: str
    decimals: int
