"""Exception types raised by pathgraph."""

from __future__ import annotations

from typing import Optional


class PathGraphError(Exception):
    """Base class for all pathgraph errors."""


class OutOfRange(PathGraphError, IndexError):
    """A node id or index falls outside the valid ``[0, n)`` range."""

    def __init__(self, value: object, size: int, what: str = "index") -> None:
        self.value = value
        self.size = size
        super().__init__(f"{what} {value!r} is out of range [0, {size})")


class NoPathFound(PathGraphError, LookupError):
    """The destination cannot be reached from the source."""

    def __init__(self, src: int, dst: int, algorithm: Optional[str] = None) -> None:
        self.src = src
        self.dst = dst
        self.algorithm = algorithm
        message = f"No path from node {src} to node {dst}"
        if algorithm:
            message += f" ({algorithm})"
        super().__init__(message)
