from __future__ import annotations

import math
from typing import Any, Dict, Optional

import requests

from price_tracker.errors import NetworkError, ParseError


def get_json(
    session: Any,
    url: str,
    *,
    params: Optional[Dict[str, str]] = None,
    timeout: float,
) -> Any:
    """Single GET returning the decoded JSON body; no retries."""
    try:
        response = session.get(url, params=params, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise NetworkError(str(exc)) from exc

    try:
        return response.json()
    except ValueError as exc:
        raise ParseError(f"response body is not valid JSON: {exc}") from exc


def to_price(value: Any, *, field_name: str) -> float:
    if isinstance(value, bool) or value is None or value == "":
        raise ParseError(f"missing or non-numeric value for {field_name}: {value!r}")
    if not isinstance(value, (int, float, str)):
        raise ParseError(f"invalid numeric value for {field_name}: {value!r}")
    try:
        price = float(value)
    except ValueError as exc:
        raise ParseError(f"invalid numeric value for {field_name}: {value!r}") from exc
    if not math.isfinite(price):
        raise ParseError(f"non-finite value for {field_name}: {value!r}")
    return price
