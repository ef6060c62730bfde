import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field


class Settings(BaseModel):
    POLL_INTERVAL_SEC: float = Field(default=10.0, gt=0)
    REQUEST_TIMEOUT_SEC: float = Field(default=10.0, gt=0)
    DATA_DIR: Path = Path(".")
    ALPHA_VANTAGE_API_KEY: str = Field(default="demo", min_length=1)
    SP500_SYMBOL: str = Field(default="SPY", min_length=1)

    @classmethod
    def from_env(cls) -> "Settings":
        raw = {
            "POLL_INTERVAL_SEC": os.getenv("PRICE_TRACKER_INTERVAL_SEC"),
            "REQUEST_TIMEOUT_SEC": os.getenv("PRICE_TRACKER_TIMEOUT_SEC"),
            "DATA_DIR": os.getenv("PRICE_TRACKER_DATA_DIR"),
            "ALPHA_VANTAGE_API_KEY": os.getenv("ALPHA_VANTAGE_API_KEY"),
            "SP500_SYMBOL": os.getenv("PRICE_TRACKER_SP500_SYMBOL"),
        }
        # unset or blank vars fall back to field defaults
        return cls.model_validate(
            {key: value.strip() for key, value in raw.items() if value and value.strip()}
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
