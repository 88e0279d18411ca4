"""Integration tests for the CoinGecko client and MCP server.

These tests run against the real CoinGecko API. The public API needs no key
but is rate limited, so they only run when COINGECKO_INTEGRATION=1.
COINGECKO_API_KEY switches them to the pro API.
"""

import os
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

from coingecko_mcp import server
from coingecko_mcp.cg_api import CoinGeckoClient
from coingecko_mcp.constants import Order
from coingecko_mcp.errors import InvalidParameterError

pytestmark = pytest.mark.skipif(
    os.environ.get("COINGECKO_INTEGRATION") != "1",
    reason="COINGECKO_INTEGRATION=1 not set",
)


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[CoinGeckoClient, None]:
    """Create API client."""
    client = CoinGeckoClient(os.environ.get("COINGECKO_API_KEY"))
    yield client
    await client.close()


@pytest.fixture(autouse=True)
def setup_server_client() -> None:
    """Reset the cached server client before each test."""
    server._client = None


class TestCoinGeckoClient:
    """Tests for the low-level API client."""

    @pytest.mark.asyncio
    async def test_ping(self, client: CoinGeckoClient) -> None:
        result = await client.ping()

        assert result.success is True
        assert "gecko_says" in result.data

    @pytest.mark.asyncio
    async def test_simple_price(self, client: CoinGeckoClient) -> None:
        result = await client.simple.price(ids=["bitcoin", "ethereum"], vs_currencies=["usd", "eur"])

        assert result.success is True
        assert result.data["bitcoin"]["usd"] > 0
        assert result.data["ethereum"]["eur"] > 0

    @pytest.mark.asyncio
    async def test_coins_markets(self, client: CoinGeckoClient) -> None:
        result = await client.coins.markets(order=Order.MARKET_CAP_DESC, per_page=5)

        assert result.success is True
        assert len(result.data) == 5
        assert result.data[0]["market_cap_rank"] == 1

    @pytest.mark.asyncio
    async def test_market_chart(self, client: CoinGeckoClient) -> None:
        result = await client.coins.fetch_market_chart("bitcoin")

        assert result.success is True
        assert len(result.data["prices"]) > 0

    @pytest.mark.asyncio
    async def test_unknown_coin(self, client: CoinGeckoClient) -> None:
        result = await client.coins.fetch("definitely-not-a-real-coin-id")

        assert result.success is False
        assert result.code == 404

    @pytest.mark.asyncio
    async def test_invalid_identifier_is_rejected_locally(self, client: CoinGeckoClient) -> None:
        with pytest.raises(InvalidParameterError):
            await client.exchanges.fetch("")


class TestMCPTools:
    """Tests for MCP tool functions against the real API."""

    @pytest.mark.asyncio
    async def test_ping_tool(self) -> None:
        result = await server.ping.fn()

        assert result["success"] is True

    @pytest.mark.asyncio
    async def test_exchange_detail_tool(self) -> None:
        result = await server.exchange_detail.fn(exchange_id="binance")

        assert result["success"] is True
        assert result["data"]["name"] == "Binance"
