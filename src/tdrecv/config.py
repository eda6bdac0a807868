from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from .command import ReceiveCommand
from .constants import CONFLICT_POLICIES, DEFAULT_BINARY, DEFAULT_CONFLICT
from .directory import resolve_output_dir
from .errors import ConfigError


@dataclass(frozen=True, slots=True)
class ReceiverConfig:
    output_dir: Path
    conflict: str = DEFAULT_CONFLICT
    verbose: bool = False
    loop: bool = False
    binary: str = DEFAULT_BINARY
    list_files: bool = True
    once: bool = False

    def __post_init__(self) -> None:
        if self.conflict not in CONFLICT_POLICIES:
            raise ConfigError(f"unknown conflict policy: {self.conflict!r}")

    @property
    def fatal_on_error(self) -> bool:
        return self.loop

    def command(self) -> ReceiveCommand:
        return ReceiveCommand(
            target_dir=self.output_dir,
            conflict=self.conflict,
            verbose=self.verbose,
            loop=self.loop,
            binary=self.binary,
        )

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ReceiverConfig":
        """Resolve parsed CLI flags; creates the output directory."""
        return cls(
            output_dir=resolve_output_dir(args.dir),
            conflict=args.conflict,
            verbose=args.verbose,
            loop=args.loop,
            binary=args.tailscale,
            list_files=not args.no_list,
            once=args.once,
        )
