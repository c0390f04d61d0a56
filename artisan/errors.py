"""Exception types shared by the command layer and the generators."""

from __future__ import annotations


class UserInputError(ValueError):
    """Raised when a command is missing a required argument or gets a bad one.

    Commands raise it before touching the filesystem; the dispatcher reports
    the message and the command's usage.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
