from __future__ import annotations

import sys
import time
from datetime import datetime
from enum import Enum
from typing import Callable, Sequence

from price_tracker.errors import FileError, PriceError
from price_tracker.services.instruments import Instrument


class PollState(str, Enum):
    INITIALIZING = "INITIALIZING"
    POLLING = "POLLING"
    STOPPED = "STOPPED"


class PollLoop:
    """Sequential fetch-then-save over all instruments, one cycle per interval."""

    def __init__(
        self,
        instruments: Sequence[Instrument],
        *,
        interval_sec: float = 10.0,
        sleep_fn: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.instruments = list(instruments)
        self.interval_sec = interval_sec
        self.sleep_fn = sleep_fn
        self.clock = clock
        self.state = PollState.INITIALIZING
        self.running = False
        self.cycles = 0

    def initialize(self) -> None:
        for instrument in self.instruments:
            try:
                if instrument.ensure_initialized():
                    print(f"[TRACKER][log_created] path={instrument.log.path}", flush=True)
            except FileError as exc:
                print(f"Error initializing log for {instrument.name}: {exc}", file=sys.stderr, flush=True)
        self.state = PollState.POLLING

    def run_cycle(self) -> dict[str, int]:
        saved = 0
        fetch_errors = 0
        save_errors = 0

        for instrument in self.instruments:
            try:
                price = instrument.fetch_price()
            except PriceError as exc:
                fetch_errors += 1
                print(f"Error fetching price for {instrument.name}: {exc}", file=sys.stderr, flush=True)
                continue

            try:
                instrument.save_price(price, self.clock())
                saved += 1
            except PriceError as exc:
                save_errors += 1
                print(f"Error saving price for {instrument.name}: {exc}", file=sys.stderr, flush=True)

        self.cycles += 1
        return {
            "attempted": len(self.instruments),
            "saved": saved,
            "fetch_errors": fetch_errors,
            "save_errors": save_errors,
        }

    def run_forever(self, *, max_cycles: int | None = None) -> None:
        """Poll until stop() is called; max_cycles bounds the loop for callers that need it."""
        if self.state is PollState.INITIALIZING:
            self.initialize()
        if self.state is PollState.STOPPED:
            return

        self.running = True
        completed = 0
        while self.running:
            summary = self.run_cycle()
            completed += 1
            if summary["fetch_errors"] or summary["save_errors"]:
                print(
                    "[POLL][cycle_done] "
                    f"cycle={self.cycles} saved={summary['saved']} "
                    f"fetch_errors={summary['fetch_errors']} save_errors={summary['save_errors']}",
                    flush=True,
                )
            if max_cycles is not None and completed >= max_cycles:
                break
            if not self.running:
                break
            self.sleep_fn(self.interval_sec)

        self.running = False

    def stop(self) -> None:
        self.running = False
        self.state = PollState.STOPPED
