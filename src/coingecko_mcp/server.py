"""CoinGecko MCP Server - expose CoinGecko API operations as MCP tools."""

import os
import sys
from typing import Any

from fastmcp import FastMCP
from loguru import logger

from coingecko_mcp.cg_api import CoinGeckoClient
from coingecko_mcp.constants import TIMEOUT

mcp = FastMCP(name="CoinGecko MCP Server")

_client: CoinGeckoClient | None = None


@mcp.tool
async def ping() -> dict[str, Any]:
    """Check that the CoinGecko API is reachable.

    Returns:
        Response envelope with success, message, code and data
    """
    client = _get_client()
    result = await client.ping()
    return result.to_dict()


@mcp.tool
async def global_market_data() -> dict[str, Any]:
    """Get global cryptocurrency market data.

    Returns total market cap, volume, market cap percentage per coin and the
    number of active cryptocurrencies and markets.
    """
    client = _get_client()
    result = await client.global_data()
    return result.to_dict()


@mcp.tool
async def simple_price(
    ids: str,
    vs_currencies: str = "usd",
    include_market_cap: bool = False,
    include_24hr_vol: bool = False,
    include_24hr_change: bool = False,
) -> dict[str, Any]:
    """Get the current price of coins in one or more currencies.

    Args:
        ids: Comma-separated CoinGecko coin ids (e.g., "bitcoin,ethereum")
        vs_currencies: Comma-separated target currencies (e.g., "usd,eur")
        include_market_cap: Include market cap
        include_24hr_vol: Include 24h volume
        include_24hr_change: Include 24h price change

    Returns:
        Response envelope whose data maps coin id to currency prices
    """
    client = _get_client()
    result = await client.simple.price(
        ids=ids,
        vs_currencies=vs_currencies,
        include_market_cap=include_market_cap,
        include_24hr_vol=include_24hr_vol,
        include_24hr_change=include_24hr_change,
    )
    return result.to_dict()


@mcp.tool
async def supported_vs_currencies() -> dict[str, Any]:
    """List the currencies accepted as vs_currency / vs_currencies."""
    client = _get_client()
    result = await client.simple.supported_vs_currencies()
    return result.to_dict()


@mcp.tool
async def coins_list() -> dict[str, Any]:
    """List all supported coins with id, symbol and name.

    Use this to look up the CoinGecko id for a coin before calling other tools.
    """
    client = _get_client()
    result = await client.coins.list()
    return result.to_dict()


@mcp.tool
async def coins_markets(
    vs_currency: str = "usd",
    ids: str | None = None,
    order: str = "market_cap_desc",
    per_page: int = 100,
    page: int = 1,
) -> dict[str, Any]:
    """Get market data (price, market cap, volume) for coins.

    Args:
        vs_currency: Target currency (default "usd")
        ids: Comma-separated coin ids to filter on
        order: Sort order (e.g., "market_cap_desc", "volume_desc")
        per_page: Results per page (1-250)
        page: Page number

    Returns:
        Response envelope whose data is a list of coin market entries
    """
    client = _get_client()
    result = await client.coins.markets(
        vs_currency=vs_currency,
        ids=ids,
        order=order,
        per_page=per_page,
        page=page,
    )
    return result.to_dict()


@mcp.tool
async def coin_detail(
    coin_id: str,
    tickers: bool = False,
    market_data: bool = True,
    community_data: bool = False,
    developer_data: bool = False,
) -> dict[str, Any]:
    """Get current data for a coin: description, links, market data.

    Args:
        coin_id: CoinGecko coin id (e.g., "bitcoin")
        tickers: Include ticker data
        market_data: Include market data
        community_data: Include community data
        developer_data: Include developer data
    """
    client = _get_client()
    result = await client.coins.fetch(
        coin_id,
        localization=False,
        tickers=tickers,
        market_data=market_data,
        community_data=community_data,
        developer_data=developer_data,
    )
    return result.to_dict()


@mcp.tool
async def coin_market_chart(
    coin_id: str,
    vs_currency: str = "usd",
    days: str = "1",
) -> dict[str, Any]:
    """Get historical prices, market caps and volumes for a coin.

    Args:
        coin_id: CoinGecko coin id (e.g., "bitcoin")
        vs_currency: Target currency (default "usd")
        days: Number of days back, or "max"
    """
    client = _get_client()
    result = await client.coins.fetch_market_chart(coin_id, vs_currency=vs_currency, days=days)
    return result.to_dict()


@mcp.tool
async def coin_history(coin_id: str, date: str) -> dict[str, Any]:
    """Get a snapshot of a coin's data on a past date.

    Args:
        coin_id: CoinGecko coin id (e.g., "bitcoin")
        date: Date in dd-mm-yyyy format (e.g., "30-12-2022")
    """
    client = _get_client()
    result = await client.coins.fetch_history(coin_id, date=date, localization=False)
    return result.to_dict()


@mcp.tool
async def exchanges_list() -> dict[str, Any]:
    """List all supported exchanges with id and name."""
    client = _get_client()
    result = await client.exchanges.list()
    return result.to_dict()


@mcp.tool
async def exchange_detail(exchange_id: str) -> dict[str, Any]:
    """Get exchange details, BTC volume and top tickers.

    Args:
        exchange_id: CoinGecko exchange id (e.g., "binance")
    """
    client = _get_client()
    result = await client.exchanges.fetch(exchange_id)
    return result.to_dict()


@mcp.tool
async def exchange_tickers(
    exchange_id: str,
    coin_ids: str | None = None,
    page: int = 1,
) -> dict[str, Any]:
    """Get tickers traded on an exchange.

    Args:
        exchange_id: CoinGecko exchange id (e.g., "binance")
        coin_ids: Comma-separated coin ids to filter on
        page: Page number (100 tickers per page)
    """
    client = _get_client()
    result = await client.exchanges.fetch_tickers(exchange_id, coin_ids=coin_ids, page=page)
    return result.to_dict()


@mcp.tool
async def exchange_rates() -> dict[str, Any]:
    """Get BTC-to-currency exchange rates."""
    client = _get_client()
    result = await client.exchange_rates.all()
    return result.to_dict()


@mcp.tool
async def derivatives_exchanges(
    order: str | None = None,
    per_page: int | None = None,
    page: int | None = None,
) -> dict[str, Any]:
    """List derivative exchanges with open interest and volume.

    Args:
        order: Sort order (e.g., "open_interest_btc_desc")
        per_page: Results per page
        page: Page number
    """
    client = _get_client()
    result = await client.derivatives.all_exchanges(order=order, per_page=per_page, page=page)
    return result.to_dict()


def configure_logging(level: str | None = None) -> None:
    """Send log records to stderr at `level` (default from COINGECKO_LOG_LEVEL)."""
    level = (level or os.environ.get("COINGECKO_LOG_LEVEL") or "WARNING").upper()
    logger.remove()
    logger.add(sys.stderr, level=level)


def main() -> None:
    """Run the MCP server."""
    configure_logging()
    mcp.run()


def _get_client() -> CoinGeckoClient:
    """Get or create the CoinGecko API client.

    COINGECKO_API_KEY (or CG_API_KEY) switches to the pro API; without it the
    public API is used.
    """
    global _client
    if _client is not None:
        return _client

    api_key = os.environ.get("COINGECKO_API_KEY") or os.environ.get("CG_API_KEY")
    timeout = os.environ.get("COINGECKO_TIMEOUT_MS")
    try:
        timeout_ms = int(timeout) if timeout else TIMEOUT
    except ValueError as e:
        raise ValueError(
            f"COINGECKO_TIMEOUT_MS must be an integer number of milliseconds, got {timeout!r}"
        ) from e

    _client = CoinGeckoClient(api_key, timeout=timeout_ms)
    logger.debug("Created CoinGecko client (pro={})", _client.is_pro)
    return _client


if __name__ == "__main__":
    main()
