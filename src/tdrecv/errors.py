from __future__ import annotations


class ReceiverError(Exception):
    """Base class for errors that stop the receiver."""


class OutputDirError(ReceiverError):
    pass


class ReceiveFailed(ReceiverError):
    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode


class ConfigError(ReceiverError):
    pass
