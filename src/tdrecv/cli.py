from __future__ import annotations

import argparse
import logging
import threading

from . import __version__
from .config import ReceiverConfig
from .constants import (
    CONFLICT_POLICIES,
    DEFAULT_BINARY,
    DEFAULT_CONFLICT,
    DEFAULT_DIR,
    FATAL_EXIT_CODE,
    LOG_FORMAT,
    LOG_LEVELS,
)
from .errors import ReceiverError
from .signals import install_shutdown_handler
from .supervisor import Supervisor

logger = logging.getLogger("tdrecv")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tdrecv", description="Receive Taildrop files into a directory.")
    p.add_argument("--dir", default=DEFAULT_DIR, help="directory to save received files")
    p.add_argument(
        "--conflict",
        choices=CONFLICT_POLICIES,
        default=DEFAULT_CONFLICT,
        help="what the receiver does when a file already exists",
    )
    p.add_argument(
        "--verbose",
        action="store_true",
        help="verbose output from the receiver; logs at DEBUG unless --log-level is given",
    )
    p.add_argument("--version", action="store_true", help="print version and exit")
    p.add_argument("--loop", action="store_true", help="let the receiver loop by itself (file get --loop)")
    p.add_argument("--once", action="store_true", help="run a single receive cycle and exit")
    p.add_argument("--no-list", action="store_true", help="do not list the directory after each cycle")
    p.add_argument("--tailscale", default=DEFAULT_BINARY, help="tailscale executable")
    p.add_argument("--log-level", default=None, choices=LOG_LEVELS, help="logging level (default INFO)")
    return p


def log_level(args: argparse.Namespace) -> int:
    if args.log_level is not None:
        return getattr(logging, args.log_level)
    return logging.DEBUG if args.verbose else logging.INFO


def cmd_receive(args: argparse.Namespace) -> int:
    config = ReceiverConfig.from_args(args)

    stop = threading.Event()
    supervisor = Supervisor(config, stop=stop)
    supervisor.banner()
    install_shutdown_handler(stop)

    metrics = supervisor.run(max_cycles=1 if config.once else None)
    logger.debug("ran %d cycle(s) in %.1fs", metrics.cycles, metrics.duration_s)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.version:
        print(f"tdrecv {__version__}")
        return 0

    logging.basicConfig(level=log_level(args), format=LOG_FORMAT)

    try:
        return cmd_receive(args)
    except ReceiverError as exc:
        logger.critical("%s", exc)
        return FATAL_EXIT_CODE


if __name__ == "__main__":
    raise SystemExit(main())
