from datetime import datetime

from pydantic import BaseModel

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_HEADER = "timestamp,price"


class PriceRecord(BaseModel):
    instrument: str
    price: float
    timestamp: datetime

    @property
    def formatted_timestamp(self) -> str:
        return self.timestamp.strftime(TIMESTAMP_FORMAT)

    @property
    def formatted_price(self) -> str:
        return f"{self.price:.2f}"

    def to_csv_line(self) -> str:
        return f"{self.formatted_timestamp},{self.formatted_price}\n"

    def status_line(self) -> str:
        return f"[{self.formatted_timestamp}] {self.instrument}: ${self.formatted_price}"
