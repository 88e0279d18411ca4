"""Type predicates and parameter checks used by the endpoint catalog."""

import datetime
from collections.abc import Mapping
from typing import Any

from loguru import logger

from coingecko_mcp.errors import InvalidParameterError, MissingParameterError


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_string_empty(value: Any) -> bool:
    """Return True for None or a string that is blank once stripped."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid numeric parameter
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_date(value: Any) -> bool:
    return isinstance(value, datetime.date)


def warn(title: str = "", detail: str = "") -> bool:
    """Log a non-fatal diagnostic and return False."""
    logger.warning("{}: {}", title, detail)
    return False


def require_identifier(name: str, value: Any) -> str:
    """Check that a path segment is a non-empty string.

    Raises:
        InvalidParameterError: When the value is not a string or is blank
    """
    if not is_string(value) or is_string_empty(value):
        raise InvalidParameterError(
            name, "must be of type: str and greater than 0 characters"
        )
    return value


def require_param(params: Mapping[str, Any], name: str, detail: str) -> Any:
    """Check that a required query parameter is present and non-empty.

    Raises:
        MissingParameterError: When the parameter is absent or blank
    """
    value = params.get(name)
    if value is None or is_string_empty(value) or (is_array(value) and not value):
        raise MissingParameterError(name, detail)
    return value


def require_number(params: Mapping[str, Any], name: str, detail: str) -> Any:
    """Check that a required query parameter is a number.

    Raises:
        MissingParameterError: When the parameter is absent or not numeric
    """
    value = params.get(name)
    if not is_number(value):
        raise MissingParameterError(name, detail)
    return value
