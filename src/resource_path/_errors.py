"""Error hierarchy for resource_path."""

from __future__ import annotations

from typing import Optional


class ResourcePathError(Exception):
    """Base class for all resource_path errors.

    :param message: Human-readable error description.
    :param path: The path involved in the error, if any.
    """

    def __init__(self, message: str = "", *, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        message = self.args[0] if self.args else ""
        if self.path is not None:
            return f"{message} | path={self.path!r}"
        return message

    def __repr__(self) -> str:
        cls = type(self).__name__
        args = [repr(self.args[0] if self.args else "")]
        if self.path is not None:
            args.append(f"path={self.path!r}")
        return f"{cls}({', '.join(args)})"


class DirectoryOutOfRange(ResourcePathError, IndexError):
    """Raised when a directory level beyond the path's depth is requested.

    :param level: The requested level, counted from the leaf.
    :param count: The number of directories the path has.
    """

    def __init__(self, message: str = "", *, path: Optional[str] = None, level: int = 0, count: int = 0) -> None:
        self.level = level
        self.count = count
        super().__init__(message, path=path)


class UnknownProtocol(ResourcePathError, KeyError):
    """Raised when no handler is registered for a protocol.

    :param protocol: The protocol name that was looked up.
    """

    def __init__(self, message: str = "", *, path: Optional[str] = None, protocol: str = "") -> None:
        self.protocol = protocol
        super().__init__(message, path=path)

    def __str__(self) -> str:
        base = ResourcePathError.__str__(self)
        if self.protocol:
            return f"{base} | protocol={self.protocol!r}"
        return base

    def __repr__(self) -> str:
        base = ResourcePathError.__repr__(self)
        if self.protocol:
            return f"{base[:-1]}, protocol={self.protocol!r})"
        return base
