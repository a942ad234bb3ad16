"""Format a ScanResult as a human-readable report."""

from decimal import Decimal

from src.scanner.models import RiskLevel, ScanResult

LEVEL_EMOJI = {
    RiskLevel.LOW: "🟢",
    RiskLevel.MEDIUM: "🟡",
    RiskLevel.HIGH: "🔴",
}


def _ui_supply(raw: str, decimals: int | None) -> str:
    if not decimals:
        return f"{int(raw):,}"
    value = Decimal(raw).scaleb(-decimals)
    return f"{value:,.{min(decimals, 4)}f}"


def format_scan_report(result: ScanResult) -> str:
    lines = [
        f"{LEVEL_EMOJI[result.risk_level]} Risk {result.risk_level.value} "
        f"({result.risk_score}/100)",
        result.mint_address,
        "",
    ]

    for check in result.checks:
        if check.errored:
            mark = "⚪"
        elif check.safe:
            mark = "✅"
        else:
            mark = "❌"
        lines.append(f"{mark} {check.name}: {check.detail}")

    info = result.token_info
    lines.append("")
    if info.supply is not None:
        lines.append(f"Supply: {_ui_supply(info.supply, info.decimals)}")
    if info.price_usd is not None:
        lines.append(f"Price: ${info.price_usd:.8g}")
    lines.append(f"Scanned at {result.scanned_at:%Y-%m-%d %H:%M:%S} UTC")
    return "\n".join(lines)
