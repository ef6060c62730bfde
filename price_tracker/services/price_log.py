from __future__ import annotations

from datetime import datetime
from pathlib import Path

from price_tracker.errors import FileError
from price_tracker.schemas.record import LOG_HEADER, PriceRecord


class PriceLog:
    """Append-only `timestamp,price` CSV log for one instrument."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def ensure_initialized(self) -> bool:
        """Create the log with its header if absent. Returns True when created."""
        if self.path.exists():
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileError(f"{self.path.parent}: {exc}") from exc
        try:
            # "x" never truncates a file that appeared after the exists() check
            with self.path.open("x", encoding="utf-8", newline="") as fh:
                fh.write(f"{LOG_HEADER}\n")
        except FileExistsError:
            return False
        except OSError as exc:
            raise FileError(f"{self.path}: {exc}") from exc
        return True

    def append_record(self, instrument_name: str, price: float, timestamp: datetime) -> PriceRecord:
        record = PriceRecord(instrument=instrument_name, price=price, timestamp=timestamp)
        try:
            with self.path.open("a", encoding="utf-8", newline="") as fh:
                fh.write(record.to_csv_line())
                fh.flush()
        except OSError as exc:
            raise FileError(f"{self.path}: {exc}") from exc

        print(record.status_line(), flush=True)
        return record
