"""CoinGecko endpoint catalog, grouped by resource.

Each method validates its identifiers, applies the parameter defaults for its
endpoint and forwards to :meth:`CoinGeckoClient.request`. Identifiers are
inserted into the path as given, so they must already be URL-safe.
"""

from typing import TYPE_CHECKING, Any

from coingecko_mcp.constants import DEFAULT_ASSET_PLATFORM
from coingecko_mcp.params import default_currency, default_days, join_lists
from coingecko_mcp.validation import (
    is_date,
    require_identifier,
    require_number,
    require_param,
)

if TYPE_CHECKING:
    from coingecko_mcp.cg_api import CoinGeckoClient, CoinGeckoResponse


class _EndpointGroup:
    def __init__(self, client: "CoinGeckoClient") -> None:
        self._client = client

    async def _request(self, path: str, params: dict[str, Any] | None = None) -> "CoinGeckoResponse":
        return await self._client.request(path, params)


class Coins(_EndpointGroup):
    """Calls related to coins."""

    async def all(self, **params: Any) -> "CoinGeckoResponse":
        """List all coins with data (name, price, market, developer, community).

        Args:
            order: Sort order, see :class:`Order`
            per_page: Total results per page
            page: Page through results
            localization: Include localized languages
            sparkline: Include sparkline 7 days data
        """
        return await self._request("/coins", params)

    async def list(self) -> "CoinGeckoResponse":
        """List all supported coins (id, symbol, name)."""
        return await self._request("/coins/list")

    async def markets(self, **params: Any) -> "CoinGeckoResponse":
        """List market data for coins (price, market cap, volume).

        Args:
            vs_currency: Target currency, defaults to "usd"
            ids: Coin ids as a list or comma-separated string
            order: Sort order, see :class:`Order`
            per_page: Total results per page
            page: Page through results
            sparkline: Include sparkline 7 days data
        """
        default_currency(params)
        join_lists(params, "ids")
        return await self._request("/coins/markets", params)

    async def fetch(self, coin_id: str, **params: Any) -> "CoinGeckoResponse":
        """Get current data (name, price, market, ...) for a coin."""
        require_identifier("coin_id", coin_id)
        return await self._request(f"/coins/{coin_id}", params)

    async def fetch_tickers(self, coin_id: str, **params: Any) -> "CoinGeckoResponse":
        """Get coin tickers, paginated to 100 items.

        Args:
            coin_id: Coin id, e.g. "bitcoin"
            exchange_ids: Exchange ids as a list or comma-separated string
            page: Page through results
            order: Sort order, see :class:`Order`
        """
        require_identifier("coin_id", coin_id)
        join_lists(params, "exchange_ids")
        return await self._request(f"/coins/{coin_id}/tickers", params)

    async def fetch_history(self, coin_id: str, **params: Any) -> "CoinGeckoResponse":
        """Get historical data (name, price, market, stats) at a given date.

        Args:
            coin_id: Coin id, e.g. "bitcoin"
            date: Snapshot date as "dd-mm-yyyy" or a ``datetime.date``
            localization: Include localized languages
        """
        require_identifier("coin_id", coin_id)
        if is_date(params.get("date")):
            params["date"] = params["date"].strftime("%d-%m-%Y")
        require_param(params, "date", "must be a string in format: dd-mm-yyyy")
        return await self._request(f"/coins/{coin_id}/history", params)

    async def fetch_market_chart(self, coin_id: str, **params: Any) -> "CoinGeckoResponse":
        """Get historical market data (price, market cap, 24h volume).

        Args:
            coin_id: Coin id, e.g. "bitcoin"
            vs_currency: Target currency, defaults to "usd"
            days: Data up to this many days ago, defaults to 1 ("max" allowed)
        """
        require_identifier("coin_id", coin_id)
        default_currency(params)
        default_days(params)
        return await self._request(f"/coins/{coin_id}/market_chart", params)

    async def fetch_market_chart_range(self, coin_id: str, **params: Any) -> "CoinGeckoResponse":
        """Get historical market data within a range of UNIX timestamps.

        Args:
            coin_id: Coin id, e.g. "bitcoin"
            vs_currency: Target currency, defaults to "usd"
            from: Range start as a UNIX timestamp (pass via ``**{"from": ...}``)
            to: Range end as a UNIX timestamp
        """
        require_identifier("coin_id", coin_id)
        default_currency(params)
        require_number(params, "from", "must be a UNIX timestamp")
        require_number(params, "to", "must be a UNIX timestamp")
        return await self._request(f"/coins/{coin_id}/market_chart/range", params)

    async def fetch_status_updates(self, coin_id: str, **params: Any) -> "CoinGeckoResponse":
        """Get status updates for a coin."""
        require_identifier("coin_id", coin_id)
        return await self._request(f"/coins/{coin_id}/status_updates", params)

    async def fetch_coin_contract_info(
        self,
        contract_address: str,
        asset_platform: str = DEFAULT_ASSET_PLATFORM,
    ) -> "CoinGeckoResponse":
        """Get coin info from a token contract address."""
        require_identifier("contract_address", contract_address)
        require_identifier("asset_platform", asset_platform)
        return await self._request(f"/coins/{asset_platform}/contract/{contract_address}")

    async def fetch_coin_contract_market_chart(
        self,
        contract_address: str,
        asset_platform: str = DEFAULT_ASSET_PLATFORM,
        **params: Any,
    ) -> "CoinGeckoResponse":
        """Get historical market data for a token contract address."""
        require_identifier("contract_address", contract_address)
        require_identifier("asset_platform", asset_platform)
        default_currency(params)
        default_days(params)
        return await self._request(
            f"/coins/{asset_platform}/contract/{contract_address}/market_chart", params
        )

    async def fetch_coin_contract_market_chart_range(
        self,
        contract_address: str,
        asset_platform: str = DEFAULT_ASSET_PLATFORM,
        **params: Any,
    ) -> "CoinGeckoResponse":
        """Get historical market data for a token contract within a timestamp range."""
        require_identifier("contract_address", contract_address)
        require_identifier("asset_platform", asset_platform)
        default_currency(params)
        default_days(params)
        require_number(params, "from", "must be a UNIX timestamp")
        require_number(params, "to", "must be a UNIX timestamp")
        return await self._request(
            f"/coins/{asset_platform}/contract/{contract_address}/market_chart/range", params
        )


class Exchanges(_EndpointGroup):
    """Calls related to exchanges."""

    async def all(self) -> "CoinGeckoResponse":
        """List all exchanges with their trade volume and trust score."""
        return await self._request("/exchanges")

    async def list(self) -> "CoinGeckoResponse":
        """List all supported exchange ids and names."""
        return await self._request("/exchanges/list")

    async def fetch(self, exchange_id: str) -> "CoinGeckoResponse":
        """Get exchange volume in BTC and the top 100 tickers."""
        require_identifier("exchange_id", exchange_id)
        return await self._request(f"/exchanges/{exchange_id}")

    async def fetch_tickers(self, exchange_id: str, **params: Any) -> "CoinGeckoResponse":
        """Get exchange tickers, paginated to 100 items.

        Args:
            exchange_id: Exchange id, e.g. "binance"
            coin_ids: Coin ids as a list or comma-separated string
            page: Page through results
            order: Sort order, see :class:`Order`
        """
        require_identifier("exchange_id", exchange_id)
        join_lists(params, "coin_ids")
        return await self._request(f"/exchanges/{exchange_id}/tickers", params)

    async def fetch_status_updates(self, exchange_id: str, **params: Any) -> "CoinGeckoResponse":
        """Get status updates for an exchange."""
        require_identifier("exchange_id", exchange_id)
        return await self._request(f"/exchanges/{exchange_id}/status_updates", params)

    async def fetch_volume_chart(self, exchange_id: str, **params: Any) -> "CoinGeckoResponse":
        """Get volume chart data for an exchange.

        Args:
            exchange_id: Exchange id, e.g. "binance"
            days: Data up to this many days ago
        """
        require_identifier("exchange_id", exchange_id)
        return await self._request(f"/exchanges/{exchange_id}/volume_chart", params)


class StatusUpdates(_EndpointGroup):
    """Calls related to status updates."""

    async def all(self, **params: Any) -> "CoinGeckoResponse":
        """List status updates.

        Args:
            category: See :class:`StatusUpdateCategory`
            project_type: See :class:`StatusUpdateProjectType`
            per_page: Total results per page
            page: Page through results
        """
        return await self._request("/status_updates", params)


class Events(_EndpointGroup):
    """Calls related to events."""

    async def all(self, **params: Any) -> "CoinGeckoResponse":
        """List events, paginated by 100.

        Args:
            country_code: Country code of the event, e.g. "US"
            type: See :class:`EventType`
            page: Page through results
            upcoming_events_only: Only list upcoming events
            from_date: Events after this date, "yyyy-mm-dd"
            to_date: Events before this date, "yyyy-mm-dd"
        """
        return await self._request("/events", params)

    async def fetch_countries(self) -> "CoinGeckoResponse":
        """List the country codes events are held in."""
        return await self._request("/events/countries")

    async def fetch_types(self) -> "CoinGeckoResponse":
        """List the event types."""
        return await self._request("/events/types")


class ExchangeRates(_EndpointGroup):
    """Calls related to exchange rates."""

    async def all(self) -> "CoinGeckoResponse":
        """Get BTC-to-currency exchange rates."""
        return await self._request("/exchange_rates")


class Simple(_EndpointGroup):
    """Calls related to the "simple" endpoints."""

    async def price(self, **params: Any) -> "CoinGeckoResponse":
        """Get current prices of coins in one or more currencies.

        Args:
            ids: Coin ids as a list or comma-separated string (required)
            vs_currencies: Currencies as a list or comma-separated string,
                defaults to "usd"
            include_24hr_vol: Include 24h volume
            include_last_updated_at: Include the last updated timestamp
        """
        join_lists(params, "vs_currencies")
        default_currency(params, "vs_currencies")
        join_lists(params, "ids")
        require_param(params, "ids", "must be of type: str or list and greater than 0 characters")
        return await self._request("/simple/price", params)

    async def supported_vs_currencies(self) -> "CoinGeckoResponse":
        """List the currencies accepted as vs_currency."""
        return await self._request("/simple/supported_vs_currencies")

    async def fetch_token_price(
        self,
        asset_platform: str = DEFAULT_ASSET_PLATFORM,
        **params: Any,
    ) -> "CoinGeckoResponse":
        """Get current prices of tokens by contract address.

        Args:
            asset_platform: Asset platform id, defaults to "ethereum"
            contract_addresses: Contract addresses as a list or comma-separated string
            vs_currencies: Currencies as a list or comma-separated string
            include_market_cap: Include market cap
            include_24hr_vol: Include 24h volume
            include_24hr_change: Include 24h change
            include_last_updated_at: Include the last updated timestamp
        """
        require_identifier("asset_platform", asset_platform)
        require_param(params, "contract_addresses", "must be of type: str or list")
        require_param(params, "vs_currencies", "must be of type: str or list")
        join_lists(params, "contract_addresses", "vs_currencies")
        return await self._request(f"/simple/token_price/{asset_platform}", params)


class AssetPlatforms(_EndpointGroup):
    """Calls related to asset platforms."""

    async def all(self, **params: Any) -> "CoinGeckoResponse":
        """List all asset platforms (blockchain networks)."""
        return await self._request("/asset_platforms", params)


class Finance(_EndpointGroup):
    """Calls related to finance platforms and products."""

    async def fetch_platforms(self, **params: Any) -> "CoinGeckoResponse":
        """List all finance platforms."""
        return await self._request("/finance_platforms", params)

    async def fetch_products(self, **params: Any) -> "CoinGeckoResponse":
        """List all finance products.

        Args:
            per_page: Total results per page
            page: Page through results
            start_at: Start date of the financial products
            end_at: End date of the financial products
        """
        return await self._request("/finance_products", params)


class Indexes(_EndpointGroup):
    """Calls related to market indexes."""

    async def all(self, **params: Any) -> "CoinGeckoResponse":
        """List all market indexes."""
        return await self._request("/indexes", params)

    async def fetch(self, market_id: str, index_id: str) -> "CoinGeckoResponse":
        """Get a market index by market id and index id."""
        require_identifier("market_id", market_id)
        require_identifier("index_id", index_id)
        return await self._request(f"/indexes/{market_id}/{index_id}")

    async def list(self) -> "CoinGeckoResponse":
        """List market index ids and names."""
        return await self._request("/indexes/list")


class Derivatives(_EndpointGroup):
    """Calls related to derivatives."""

    async def fetch_tickers(self) -> "CoinGeckoResponse":
        """List all derivative tickers."""
        return await self._request("/derivatives")

    async def all_exchanges(self, **params: Any) -> "CoinGeckoResponse":
        """List all derivative exchanges.

        Args:
            order: Sort order, see :class:`Order`
            per_page: Total results per page
            page: Page through results
        """
        return await self._request("/derivatives/exchanges", params)

    async def fetch_exchange(self, exchange_id: str, **params: Any) -> "CoinGeckoResponse":
        """Get derivative exchange data, optionally with `include_tickers`."""
        require_identifier("exchange_id", exchange_id)
        return await self._request(f"/derivatives/exchanges/{exchange_id}", params)

    async def list_exchanges(self) -> "CoinGeckoResponse":
        """List derivative exchange ids and names."""
        return await self._request("/derivatives/exchanges/list")
