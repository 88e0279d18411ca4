"""Exceptions raised by the CoinGecko client."""


class CoinGeckoError(Exception):
    """Base class for all CoinGecko client errors."""


class CoinGeckoParameterError(CoinGeckoError, ValueError):
    """A request parameter failed validation before any network I/O."""

    def __init__(self, parameter: str, message: str) -> None:
        self.parameter = parameter
        self.message = message
        super().__init__(f"{parameter}: {message}")


class MissingParameterError(CoinGeckoParameterError):
    """A required parameter was not supplied."""


class InvalidParameterError(CoinGeckoParameterError):
    """A parameter was supplied with the wrong type or an empty value."""


class CoinGeckoTransportError(CoinGeckoError):
    """The request could not be completed at the connection level."""


class CoinGeckoTimeoutError(CoinGeckoTransportError):
    """The request exceeded the configured timeout and was aborted."""

    def __init__(self, timeout_ms: int) -> None:
        self.timeout_ms = timeout_ms
        super().__init__(
            f"CoinGecko API request timed out. Current timeout is: {timeout_ms} milliseconds"
        )


class CoinGeckoParseError(CoinGeckoError):
    """The response body was not valid JSON."""

    def __init__(self, status_code: int, body: str, message: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Invalid JSON in CoinGecko response ({status_code}): {message}")
