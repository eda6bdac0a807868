from __future__ import annotations

import signal
import threading
from dataclasses import dataclass
from typing import List, Optional, TextIO


def shutdown_signals() -> List[signal.Signals]:
    sigs = [signal.SIGINT]
    if hasattr(signal, "SIGTERM"):
        sigs.append(signal.SIGTERM)
    return sigs


@dataclass(slots=True)
class ShutdownHandler:
    """Prints a notice and exits on the first interrupt or termination signal.

    Raising SystemExit from the handler unwinds the blocking subprocess wait;
    subprocess.run kills the child before re-raising.
    """

    stop: threading.Event
    out: Optional[TextIO] = None

    def __call__(self, signum: int, frame: object) -> None:
        self.stop.set()
        print("\nShutting down...", file=self.out, flush=True)
        raise SystemExit(0)


def install_shutdown_handler(stop: threading.Event, out: Optional[TextIO] = None) -> ShutdownHandler:
    handler = ShutdownHandler(stop, out)
    for sig in shutdown_signals():
        signal.signal(sig, handler)
    return handler
