from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from .constants import DIR_MODE
from .errors import OutputDirError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileEntry:
    name: str
    size: int

    def describe(self) -> str:
        return f"{self.name} ({self.size} bytes)"


def resolve_output_dir(path: Union[str, os.PathLike], mode: int = DIR_MODE) -> Path:
    """Return ``path`` as an absolute directory, creating it and its parents.

    Raises OutputDirError when the path cannot be resolved or created.
    """
    try:
        abs_dir = Path(os.path.abspath(os.path.expanduser(os.fspath(path))))
    except (OSError, ValueError) as exc:
        raise OutputDirError(f"invalid directory: {exc}") from exc

    try:
        abs_dir.mkdir(mode=mode, parents=True, exist_ok=True)
    except (OSError, ValueError) as exc:
        raise OutputDirError(f"failed to create directory: {exc}") from exc

    logger.debug("output directory ready: %s", abs_dir)
    return abs_dir


def list_files(directory: Path) -> List[FileEntry]:
    """Non-directory entries of ``directory`` sorted by name.

    Symlinks are not followed, so a link is reported with its own size.
    """
    entries: List[FileEntry] = []
    try:
        with os.scandir(directory) as it:
            for entry in it:
                if entry.is_dir(follow_symlinks=False):
                    continue
                try:
                    size = entry.stat(follow_symlinks=False).st_size
                except OSError as exc:
                    logger.warning("cannot stat %s: %s", entry.path, exc)
                    continue
                entries.append(FileEntry(entry.name, size))
    except OSError as exc:
        logger.warning("cannot list %s: %s", directory, exc)
        return []

    entries.sort(key=lambda e: e.name)
    return entries
