"""Shared test fixtures."""

import pytest

from src.parsers.solana_rpc.exceptions import RpcTransportError
from tests.helpers import FakePrices, FakeRpc


@pytest.fixture
def transport_error() -> RpcTransportError:
    return RpcTransportError("ConnectError: connection refused")


@pytest.fixture
def down_rpc(transport_error: RpcTransportError) -> FakeRpc:
    """RPC where every call fails at the transport level."""
    return FakeRpc(
        account=transport_error,
        supply=transport_error,
        holders=transport_error,
        signature_pages=transport_error,
    )


@pytest.fixture
def no_price() -> FakePrices:
    return FakePrices(None)
