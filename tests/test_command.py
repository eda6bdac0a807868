from __future__ import annotations

from pathlib import Path

import pytest

from tdrecv.command import ReceiveCommand


def test_wait_mode_argv():
    cmd = ReceiveCommand(Path("/srv/drop"))
    assert cmd.to_argv() == ["tailscale", "file", "get", "--wait", "--conflict=rename", "/srv/drop"]


def test_loop_mode_verbose_argv():
    cmd = ReceiveCommand(Path("/srv/drop"), conflict="skip", verbose=True, loop=True, binary="/usr/bin/ts")
    assert cmd.to_argv() == [
        "/usr/bin/ts",
        "file",
        "get",
        "--loop",
        "--conflict=skip",
        "--verbose",
        "/srv/drop",
    ]


def test_directory_is_last():
    cmd = ReceiveCommand(Path("/srv/drop"), conflict="overwrite", verbose=True)
    assert cmd.to_argv()[-1] == "/srv/drop"


def test_bad_conflict_policy():
    with pytest.raises(ValueError):
        ReceiveCommand(Path("/srv/drop"), conflict="clobber")
