from __future__ import annotations

from typing import Any, Optional

import requests

from price_tracker.errors import ParseError
from price_tracker.integrations.quote_http import get_json, to_price

# Alpha Vantage answers throttling and bad requests with HTTP 200 and one of these keys.
_PROVIDER_MESSAGE_KEYS = ("Error Message", "Note", "Information")


class AlphaVantageClient:
    """Alpha Vantage GLOBAL_QUOTE client."""

    BASE_URL = "https://www.alphavantage.co"

    def __init__(
        self,
        api_key: str,
        *,
        timeout: float = 10.0,
        session: Optional[Any] = None,
        base_url: Optional[str] = None,
    ) -> None:
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests
        self.base_url = base_url or self.BASE_URL

    def get_global_quote_price(self, symbol: str) -> float:
        payload = get_json(
            self.session,
            f"{self.base_url}/query",
            params={"function": "GLOBAL_QUOTE", "symbol": symbol, "apikey": self.api_key},
            timeout=self.timeout,
        )
        if not isinstance(payload, dict):
            raise ParseError("decoded payload must be an object")

        quote = payload.get("Global Quote")
        if not isinstance(quote, dict) or not quote:
            for key in _PROVIDER_MESSAGE_KEYS:
                if payload.get(key):
                    raise ParseError(f"{key}: {payload[key]}")
            raise ParseError(f"missing Global Quote for {symbol} in response")

        raw_price = quote.get("05. price")
        if not isinstance(raw_price, str):
            raise ParseError(f"expected string '05. price' for {symbol}, got {raw_price!r}")
        return to_price(raw_price.strip(), field_name="05. price")
