from __future__ import annotations

import enum
import logging
import subprocess
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, TextIO

from .config import ReceiverConfig
from .constants import NO_FILES_EXIT_CODE
from .directory import FileEntry, list_files
from .errors import ReceiveFailed

logger = logging.getLogger(__name__)

Runner = Callable[[Sequence[str]], int]


def run_command(argv: Sequence[str]) -> int:
    # stdout/stderr are inherited so the tool's own output streams through
    return subprocess.run(list(argv), check=False).returncode


class CycleResult(enum.Enum):
    RECEIVED = "received"
    NO_FILES = "no_files"
    FAILED = "failed"


@dataclass(slots=True)
class Metrics:
    cycles: int = 0
    received: int = 0
    no_files: int = 0
    failures: int = 0
    start_ts: float = field(default_factory=time.monotonic)
    end_ts: float | None = None

    @property
    def duration_s(self) -> float:
        if self.end_ts is None:
            return 0.0
        return max(0.0, self.end_ts - self.start_ts)

    def record(self, result: CycleResult) -> None:
        self.cycles += 1
        if result is CycleResult.RECEIVED:
            self.received += 1
        elif result is CycleResult.NO_FILES:
            self.no_files += 1
        else:
            self.failures += 1


@dataclass(slots=True)
class Supervisor:
    """Runs the receiver until ``stop`` is set or a fatal error is raised.

    ``stop`` is checked between cycles so an embedding caller can end the loop;
    the CLI signal handler sets it and then exits without waiting.
    """

    config: ReceiverConfig
    stop: threading.Event = field(default_factory=threading.Event)
    runner: Optional[Runner] = None
    out: Optional[TextIO] = None

    def _emit(self, line: str) -> None:
        print(line, file=self.out, flush=True)

    def banner(self) -> None:
        self._emit(f"Listening for Taildrop files in {self.config.output_dir}")
        self._emit("Press Ctrl+C to stop")

    def report(self) -> List[FileEntry]:
        entries = list_files(self.config.output_dir)
        self._emit(f"Files in {self.config.output_dir}:")
        for entry in entries:
            self._emit(f"  {entry.describe()}")
        self._emit("Waiting for more files...")
        return entries

    def run_once(self) -> CycleResult:
        argv = self.config.command().to_argv()
        logger.debug("running: %s", " ".join(argv))

        runner = self.runner or run_command
        try:
            code = runner(argv)
        except OSError as exc:
            raise ReceiveFailed(f"cannot run {argv[0]}: {exc}") from exc

        if code == NO_FILES_EXIT_CODE:
            logger.debug("no files waiting")
            return CycleResult.NO_FILES

        result = CycleResult.RECEIVED
        if code != 0:
            logger.error("error: %s exited with status %d", argv[0], code)
            if self.config.fatal_on_error:
                raise ReceiveFailed(f"{argv[0]} exited with status {code}", returncode=code)
            result = CycleResult.FAILED

        if self.config.list_files:
            self.report()
        return result

    def run(self, max_cycles: Optional[int] = None) -> Metrics:
        """Invoke the receiver until stopped; the loop is the only retry."""
        metrics = Metrics()
        try:
            while not self.stop.is_set():
                if max_cycles is not None and metrics.cycles >= max_cycles:
                    break
                metrics.record(self.run_once())
        finally:
            metrics.end_ts = time.monotonic()
            logger.debug(
                "supervisor done; cycles=%d received=%d no_files=%d failures=%d",
                metrics.cycles,
                metrics.received,
                metrics.no_files,
                metrics.failures,
            )
        return metrics
