from __future__ import annotations

import signal

from price_tracker.config.settings import get_settings
from price_tracker.services.instruments import build_instruments
from price_tracker.services.poll_loop import PollLoop


def build_poll_loop() -> PollLoop:
    settings = get_settings()
    return PollLoop(build_instruments(settings), interval_sec=settings.POLL_INTERVAL_SEC)


def main() -> None:
    poll_loop = build_poll_loop()

    def _handle_sigterm(sig, frame):
        print(f"[TRACKER][signal] sig={sig}", flush=True)
        poll_loop.stop()

    signal.signal(signal.SIGTERM, _handle_sigterm)

    poll_loop.initialize()
    print("Starting price tracker...", flush=True)
    print("Press Ctrl+C to stop the program", flush=True)

    try:
        poll_loop.run_forever()
    except KeyboardInterrupt:
        poll_loop.stop()
        print("[TRACKER][stopped] reason=keyboard_interrupt", flush=True)


if __name__ == "__main__":
    main()
