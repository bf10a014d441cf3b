from __future__ import annotations

"""
Typed Failure Hierarchy.

Every failure of a build is fatal. The resolver and the build driver raise
these exceptions and never terminate the process themselves; only the CLI
layer maps them to a message and an exit status.
"""

from typing import Iterable, List, Optional


class SSIError(Exception):
    """
    Base class for all build failures.

    Attributes:
        path: The offending filesystem path (empty when not applicable).
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class InvalidArgumentsError(SSIError):
    """Wrong number of command line arguments."""


class InvalidInputError(SSIError):
    """The input path is missing or is not a directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"The provided input path is not a valid directory: {path}", path)


class EntryNotFoundError(SSIError):
    """A required entry document is absent from the input directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Entry document not found: {path}", path)


class NotFoundError(SSIError):
    """An include target, or the document opened for resolution, does not exist."""

    def __init__(self, path: str, included_from: Optional[str] = None) -> None:
        if included_from:
            message = f"Included file not found: {path} (referenced from {included_from})"
        else:
            message = f"File not found: {path}"
        super().__init__(message, path)
        self.included_from = included_from


class CycleError(SSIError):
    """
    A document includes itself, directly or transitively.

    Attributes:
        chain: Snapshot of the active chain when the cycle was detected.
    """

    def __init__(self, path: str, chain: Iterable[str] = ()) -> None:
        super().__init__(f"Circular include detected: {path}", path)
        self.chain: List[str] = list(chain)


class DepthLimitError(SSIError):
    """The include chain grew beyond the configured maximum depth."""

    def __init__(self, path: str, max_depth: int) -> None:
        super().__init__(
            f"Include depth limit of {max_depth} exceeded at: {path}", path
        )
        self.max_depth = max_depth


class ConfigError(SSIError):
    """The build configuration could not be loaded or is malformed."""
