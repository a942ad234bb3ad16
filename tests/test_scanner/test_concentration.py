"""Tests for the top-10 holder concentration check."""

import pytest

from src.scanner.concentration import check_top_holders, top10_per_mille
from tests.helpers import USDC_MINT, FakeRpc


def test_per_mille_is_exact_beyond_float_precision() -> None:
    total = 10**15
    # 6 * 10**14 split over 10 holders, plus one tiny holder outside the top 10
    balances = [6 * 10**13] * 10 + [1]
    assert top10_per_mille(balances, total) == 600
    assert top10_per_mille(balances, total) / 10.0 == 60.0


def test_per_mille_huge_u64_values() -> None:
    total = 2**64 - 1
    assert top10_per_mille([total], total) == 1000
    assert top10_per_mille([2**63 + 1], total) == 500
    assert top10_per_mille([total - 1], total) == 999


@pytest.mark.asyncio
async def test_high_concentration() -> None:
    rpc = FakeRpc(holders=[str(6 * 10**14)])
    result = await check_top_holders(rpc, USDC_MINT, str(10**15))

    assert result.safe is False
    assert result.weight == 20
    assert "60.0%" in result.detail
    assert "high concentration" in result.detail


@pytest.mark.asyncio
async def test_extreme_concentration() -> None:
    rpc = FakeRpc(holders=["850", "50"])
    result = await check_top_holders(rpc, USDC_MINT, "1000")

    assert result.safe is False
    assert "90.0%" in result.detail
    assert "extreme concentration" in result.detail


@pytest.mark.asyncio
async def test_exactly_fifty_percent_is_safe() -> None:
    rpc = FakeRpc(holders=["500"])
    result = await check_top_holders(rpc, USDC_MINT, "1000")

    assert result.safe is True
    assert result.detail == "Top 10 hold 50.0%"


@pytest.mark.asyncio
async def test_exactly_eighty_percent_is_high_not_extreme() -> None:
    rpc = FakeRpc(holders=["800"])
    result = await check_top_holders(rpc, USDC_MINT, "1000")

    assert result.safe is False
    assert "high concentration" in result.detail


@pytest.mark.asyncio
async def test_only_top_ten_counted() -> None:
    # 20 holders of 4% each: top 10 = 40%
    rpc = FakeRpc(holders=["40"] * 20)
    result = await check_top_holders(rpc, USDC_MINT, "1000")

    assert result.safe is True
    assert "40.0%" in result.detail


@pytest.mark.asyncio
async def test_no_holders() -> None:
    rpc = FakeRpc(holders=[])
    result = await check_top_holders(rpc, USDC_MINT, "1000")

    assert result.safe is False
    assert result.weight == 20
    assert result.detail == "No holders found"


@pytest.mark.asyncio
@pytest.mark.parametrize("holders", [["0"], ["100", "5"], ["999999"]])
async def test_zero_supply_always_unsafe(holders: list[str]) -> None:
    rpc = FakeRpc(holders=holders)
    result = await check_top_holders(rpc, USDC_MINT, "0")

    assert result.safe is False
    assert result.weight == 20
    assert result.detail == "Zero supply"


@pytest.mark.asyncio
async def test_shared_supply_skips_refetch() -> None:
    rpc = FakeRpc(holders=["10"], supply="1")
    await check_top_holders(rpc, USDC_MINT, "1000")
    assert rpc.count("getTokenSupply") == 0


@pytest.mark.asyncio
async def test_fetches_supply_when_not_shared() -> None:
    rpc = FakeRpc(holders=["10"], supply="1000")
    result = await check_top_holders(rpc, USDC_MINT, None)

    assert rpc.count("getTokenSupply") == 1
    assert result.detail == "Top 10 hold 1.0%"


@pytest.mark.asyncio
async def test_transport_error_fails_open(down_rpc: FakeRpc) -> None:
    result = await check_top_holders(down_rpc, USDC_MINT, "1000")

    assert result.safe is True
    assert result.errored is True
    assert result.detail == "Check unavailable"
