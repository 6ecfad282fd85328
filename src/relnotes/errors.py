"""Errors raised by the release notes pipeline."""

from typing import List

import pydantic


class ReleaseNotesError(Exception):
    """Base class for failures the caller is expected to report."""


class UnsupportedModeError(ReleaseNotesError):
    """Raised when a request asks for a mode the pipeline cannot serve yet."""

    MESSAGE = "remote mode not implemented yet"

    def __init__(self, mode: str = "remote"):
        self.mode = mode
        super().__init__(self.MESSAGE)


class ValidationError(ReleaseNotesError):
    """Raised when a request does not match the expected shape."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("Invalid release notes request: " + "; ".join(errors))

    @classmethod
    def from_pydantic(cls, exc: pydantic.ValidationError) -> "ValidationError":
        lines = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"]) or "request"
            lines.append(f"{location}: {error['msg']}")
        return cls(lines)
