"""Query parameter normalization and encoding."""

from collections.abc import Mapping
from enum import Enum
from typing import Any
from urllib.parse import quote, urlencode

from coingecko_mcp.constants import DEFAULT_DAYS, DEFAULT_VS_CURRENCY
from coingecko_mcp.validation import is_array, is_string, is_string_empty


def default_currency(params: dict[str, Any], key: str = "vs_currency") -> dict[str, Any]:
    """Set `key` to "usd" when it is missing or blank."""
    if not is_string(params.get(key)) or is_string_empty(params.get(key)):
        params[key] = DEFAULT_VS_CURRENCY
    return params


def default_days(params: dict[str, Any], key: str = "days") -> dict[str, Any]:
    if params.get(key) is None:
        params[key] = DEFAULT_DAYS
    return params


def join_lists(params: dict[str, Any], *keys: str) -> dict[str, Any]:
    """Join list values of `keys` into comma-separated strings, keeping order."""
    for key in keys:
        value = params.get(key)
        if is_array(value):
            params[key] = ",".join(_to_query_value(v) for v in value)
    return params


def encode_query(params: Mapping[str, Any]) -> str:
    """Percent-encode params into a query string.

    None values are dropped and booleans are sent as "true"/"false".
    Sequences that were not joined are sent as repeated keys.
    """
    pairs: list[tuple[str, Any]] = []
    for key, value in params.items():
        if value is None:
            continue
        if is_array(value):
            pairs.extend((key, _to_query_value(v)) for v in value)
        else:
            pairs.append((key, _to_query_value(value)))
    return urlencode(pairs, quote_via=quote)


def _to_query_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
