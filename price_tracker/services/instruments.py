from __future__ import annotations

from datetime import datetime
from pathlib import Path

from price_tracker.config.settings import Settings
from price_tracker.integrations.alpha_vantage import AlphaVantageClient
from price_tracker.integrations.coingecko import CoinGeckoClient
from price_tracker.schemas.record import PriceRecord
from price_tracker.services.price_log import PriceLog


class Instrument:
    """A tracked asset: fetches its own quote and owns its price log."""

    name: str = ""

    def __init__(self, log: PriceLog) -> None:
        self.log = log

    def fetch_price(self) -> float:
        raise NotImplementedError

    def ensure_initialized(self) -> bool:
        return self.log.ensure_initialized()

    def save_price(self, price: float, timestamp: datetime) -> PriceRecord:
        return self.log.append_record(self.name, price, timestamp)


class CryptoInstrument(Instrument):
    coin_id: str = ""

    def __init__(self, log: PriceLog, client: CoinGeckoClient) -> None:
        super().__init__(log)
        self.client = client

    def fetch_price(self) -> float:
        return self.client.get_usd_price(self.coin_id)


class Bitcoin(CryptoInstrument):
    name = "Bitcoin"
    coin_id = "bitcoin"


class Ethereum(CryptoInstrument):
    name = "Ethereum"
    coin_id = "ethereum"


class SP500(Instrument):
    name = "S&P 500"

    def __init__(self, log: PriceLog, client: AlphaVantageClient, symbol: str = "SPY") -> None:
        super().__init__(log)
        self.client = client
        self.symbol = symbol

    def fetch_price(self) -> float:
        return self.client.get_global_quote_price(self.symbol)


def build_instruments(
    settings: Settings,
    *,
    coingecko: CoinGeckoClient | None = None,
    alpha_vantage: AlphaVantageClient | None = None,
) -> list[Instrument]:
    """Instruments in polling order, each bound to its own log file."""
    data_dir = Path(settings.DATA_DIR)
    coingecko = coingecko or CoinGeckoClient(timeout=settings.REQUEST_TIMEOUT_SEC)
    alpha_vantage = alpha_vantage or AlphaVantageClient(
        settings.ALPHA_VANTAGE_API_KEY,
        timeout=settings.REQUEST_TIMEOUT_SEC,
    )
    return [
        Bitcoin(PriceLog(data_dir / "bitcoin_prices.csv"), coingecko),
        Ethereum(PriceLog(data_dir / "ethereum_prices.csv"), coingecko),
        SP500(PriceLog(data_dir / "sp500_prices.csv"), alpha_vantage, symbol=settings.SP500_SYMBOL),
    ]
