from src.scanner.analyze import compute_risk_score, scan_token
from src.scanner.models import CheckResult, RiskLevel, ScanResult, TokenInfo
from src.utils.validation import InvalidMintAddressError

__all__ = [
    "scan_token",
    "compute_risk_score",
    "CheckResult",
    "RiskLevel",
    "ScanResult",
    "TokenInfo",
    "InvalidMintAddressError",
]
