"""CoinGecko API client using httpx."""

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

import httpx
from loguru import logger

from coingecko_mcp.constants import (
    API_KEY_PARAM,
    API_VERSION,
    HOST,
    PORT,
    PRO_HOST,
    REQUESTS_PER_SECOND,
    TIMEOUT,
    EventType,
    Order,
    StatusUpdateCategory,
    StatusUpdateProjectType,
)
from coingecko_mcp.endpoints import (
    AssetPlatforms,
    Coins,
    Derivatives,
    Events,
    ExchangeRates,
    Exchanges,
    Finance,
    Indexes,
    Simple,
    StatusUpdates,
)
from coingecko_mcp.errors import (
    CoinGeckoParseError,
    CoinGeckoTimeoutError,
    CoinGeckoTransportError,
)
from coingecko_mcp.params import encode_query
from coingecko_mcp.validation import is_object, warn

HTML_ERROR_MARKER = "<!DOCTYPE html>"
THROTTLED_MARKER = "Throttled"


@dataclass(frozen=True)
class CoinGeckoResponse:
    """Uniform result of every CoinGecko call.

    `success` is True exactly when `code` is in [200, 300). Upstream error
    statuses are reported here rather than raised.
    """

    success: bool
    message: str
    code: int
    data: Any

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RequestOptions:
    path: str
    host: str
    method: str = "GET"
    port: int = PORT
    timeout: int = TIMEOUT

    @property
    def url(self) -> str:
        if self.port == PORT:
            return f"https://{self.host}{self.path}"
        return f"https://{self.host}:{self.port}{self.path}"


def resolve_host(api_key: str | None) -> str:
    """Pick the pro host when an API key is configured, else the public host."""
    return PRO_HOST if api_key else HOST


class CoinGeckoClient:
    """Async HTTP client for the CoinGecko REST API.

    API Documentation: https://www.coingecko.com/api/documentation

    Operations are grouped by resource, e.g. ``client.coins.markets()`` or
    ``client.simple.price(ids=["bitcoin"])``. Each returns a
    :class:`CoinGeckoResponse`.
    """

    API_VERSION = API_VERSION
    REQUESTS_PER_SECOND = REQUESTS_PER_SECOND
    TIMEOUT = TIMEOUT
    ORDER = Order
    STATUS_UPDATE_CATEGORY = StatusUpdateCategory
    STATUS_UPDATE_PROJECT_TYPE = StatusUpdateProjectType
    EVENT_TYPE = EventType

    def __init__(self, api_key: str | None = None, timeout: int = TIMEOUT) -> None:
        """Initialize the CoinGecko API client.

        Args:
            api_key: CoinGecko Pro API key. Without one the public host is used.
            timeout: Request timeout in milliseconds
        """
        self._api_key = api_key or None
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            headers={"Accept": "application/json"},
            timeout=timeout / 1000,
        )

        self.coins = Coins(self)
        self.exchanges = Exchanges(self)
        self.status_updates = StatusUpdates(self)
        self.events = Events(self)
        self.exchange_rates = ExchangeRates(self)
        self.simple = Simple(self)
        self.asset_platforms = AssetPlatforms(self)
        self.finance = Finance(self)
        self.indexes = Indexes(self)
        self.derivatives = Derivatives(self)

    @property
    def is_pro(self) -> bool:
        return self._api_key is not None

    @property
    def timeout(self) -> int:
        return self._timeout

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "CoinGeckoClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def ping(self) -> CoinGeckoResponse:
        """Check API server status."""
        return await self.request("/ping")

    async def global_data(self) -> CoinGeckoResponse:
        """Get global cryptocurrency market data."""
        return await self.request("/global")

    def build_request_options(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> RequestOptions:
        """Build the versioned path, query string and host for a request.

        Args:
            path: Path relative to the API version, e.g. "/coins/markets"
            params: Query parameters; anything that is not a mapping is ignored

        Returns:
            RequestOptions for a single GET request
        """
        query_params: dict[str, Any] = dict(params) if is_object(params) else {}
        if self._api_key is not None:
            query_params[API_KEY_PARAM] = self._api_key

        query = encode_query(query_params)
        full_path = f"/api/v{API_VERSION}{path}"
        if query:
            full_path = f"{full_path}?{query}"

        return RequestOptions(
            path=full_path,
            host=resolve_host(self._api_key),
            timeout=self._timeout,
        )

    async def request(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> CoinGeckoResponse:
        """Make an API request and wrap the JSON body in a CoinGeckoResponse.

        Raises:
            CoinGeckoTimeoutError: When the request exceeds the configured timeout
            CoinGeckoTransportError: When the connection fails or the body cannot be decoded
            CoinGeckoParseError: When the body is not valid JSON
        """
        options = self.build_request_options(path, params)
        logger.debug("{} {}{}", options.method, options.host, path)

        try:
            response = await self._client.request(
                options.method,
                options.url,
                timeout=options.timeout / 1000,
            )
        except httpx.TimeoutException as e:
            raise CoinGeckoTimeoutError(options.timeout) from e
        except httpx.RequestError as e:
            raise CoinGeckoTransportError(f"CoinGecko API request failed: {e}") from e

        body = response.text
        logger.debug("{} {} -> {}", options.method, path, response.status_code)

        # CoinGecko answers some failures with a page or plain text instead of JSON
        if body.startswith(HTML_ERROR_MARKER):
            warn(
                "Invalid request",
                "There was a problem with your request. "
                "The parameter(s) you gave are missing or incorrect.",
            )
        elif body.startswith(THROTTLED_MARKER):
            warn("Throttled request", "There was a problem with request limit.")

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise CoinGeckoParseError(response.status_code, body, str(e)) from e

        return CoinGeckoResponse(
            success=200 <= response.status_code < 300,
            message=response.reason_phrase,
            code=response.status_code,
            data=data,
        )
