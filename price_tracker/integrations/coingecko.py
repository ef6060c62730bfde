from __future__ import annotations

from typing import Any, Optional

import requests

from price_tracker.errors import ParseError
from price_tracker.integrations.quote_http import get_json, to_price


class CoinGeckoClient:
    """CoinGecko simple-price client returning a coin's USD price."""

    BASE_URL = "https://api.coingecko.com/api/v3"

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        session: Optional[Any] = None,
        base_url: Optional[str] = None,
    ) -> None:
        self.timeout = timeout
        self.session = session or requests
        self.base_url = base_url or self.BASE_URL

    def get_usd_price(self, coin_id: str) -> float:
        payload = get_json(
            self.session,
            f"{self.base_url}/simple/price",
            params={"ids": coin_id, "vs_currencies": "usd"},
            timeout=self.timeout,
        )

        coin = payload.get(coin_id) if isinstance(payload, dict) else None
        if not isinstance(coin, dict) or "usd" not in coin:
            raise ParseError(f"missing {coin_id}.usd in response")
        return to_price(coin["usd"], field_name=f"{coin_id}.usd")
