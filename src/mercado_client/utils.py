"""
Utility functions for Mercado Bitcoin client.

Helper functions and utilities following functional programming principles.
"""

import math
import re
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Tuple, Union
from urllib.parse import quote_plus

# The trade API serialises decimals as plain strings such as "123.45000000"
_DECIMAL_STRING = re.compile(r"-?\d+(\.\d+)?", re.ASCII)

Query = List[Tuple[str, str]]


def parse_decimal_string(value: Any, field: str) -> float:
    """Parse a value-as-string decimal field into a float."""
    if not isinstance(value, str) or not _DECIMAL_STRING.fullmatch(value):
        raise ValueError(f"Field '{field}' is not a decimal string: {value!r}")
    return float(value)


def parse_number(value: Any, field: str) -> float:
    """Parse a native JSON number into a float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Field '{field}' is not a number: {value!r}")
    return float(value)


def parse_integer(value: Any, field: str) -> int:
    """Parse a native JSON integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Field '{field}' is not an integer: {value!r}")
    return value


def parse_string(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"Field '{field}' is not a string: {value!r}")
    return value


def parse_bool(value: Any, field: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"Field '{field}' is not a boolean: {value!r}")
    return value


def parse_timestamp_ms(value: Any, field: str) -> datetime:
    """Convert an epoch-milliseconds integer into an aware UTC datetime."""
    millis = parse_integer(value, field)
    try:
        return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    except (OverflowError, OSError) as e:
        raise ValueError(f"Field '{field}' is out of range: {value!r}") from e


def parse_date(value: Any, field: str) -> date:
    """Parse a ``YYYY-MM-DD`` string."""
    if not isinstance(value, str):
        raise ValueError(f"Field '{field}' is not a date string: {value!r}")
    return datetime.strptime(value, "%Y-%m-%d").date()


def require_dict(data: Any, field: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"Field '{field}' is not an object: {data!r}")
    return data


def format_fixed(value: Union[float, int], precision: int) -> str:
    """Render a number as a fixed-point string with ``precision`` decimals."""
    return f"{value:.{precision}f}"


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def form_encode(params: Query) -> str:
    """Encode ordered pairs as an ``application/x-www-form-urlencoded`` string.

    Pairs keep their insertion order. Only alphanumerics and ``*-._`` stay
    literal; space becomes ``+``.
    """
    return "&".join(
        f"{_form_quote(key)}={_form_quote(value)}" for key, value in params
    )


def _form_quote(value: str) -> str:
    return quote_plus(value, safe="*").replace("~", "%7E")


def validate_symbol(symbol: str) -> bool:
    """Validate currency or coin pair format."""
    if not symbol or not isinstance(symbol, str):
        return False

    return 1 <= len(symbol) <= 20 and symbol.isascii() and symbol.isalnum()


def _is_positive_number(value: Union[float, int]) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def validate_quantity(quantity: Union[float, int], precision: int) -> bool:
    """Validate quantity stays positive once rounded to ``precision`` places."""
    return _is_positive_number(quantity) and float(format_fixed(quantity, precision)) > 0


def validate_price(price: Union[float, int], precision: int) -> bool:
    """Validate price stays positive once rounded to ``precision`` places."""
    return _is_positive_number(price) and float(format_fixed(price, precision)) > 0


def validate_url(url: str) -> bool:
    """Validate URL format."""
    if not url or not isinstance(url, str):
        return False
    return url.startswith(("http://", "https://")) and "." in url
