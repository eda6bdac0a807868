from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from .constants import CONFLICT_POLICIES, DEFAULT_BINARY, DEFAULT_CONFLICT


@dataclass(frozen=True, slots=True)
class ReceiveCommand:
    """One invocation of ``tailscale file get``."""

    target_dir: Path
    conflict: str = DEFAULT_CONFLICT
    verbose: bool = False
    loop: bool = False
    binary: str = DEFAULT_BINARY

    def __post_init__(self) -> None:
        if self.conflict not in CONFLICT_POLICIES:
            raise ValueError(f"unknown conflict policy: {self.conflict!r}")

    @property
    def mode_flag(self) -> str:
        return "--loop" if self.loop else "--wait"

    def to_argv(self) -> List[str]:
        argv = [self.binary, "file", "get", self.mode_flag, f"--conflict={self.conflict}"]
        if self.verbose:
            argv.append("--verbose")
        argv.append(str(self.target_dir))
        return argv
