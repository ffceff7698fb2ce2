"""Exceptions for armirror."""

from __future__ import annotations


class MirrorError(Exception):
    """Base class for every error raised by armirror itself.

    Failures coming from caller-supplied collaborators (remote name lookups,
    byte writers) are never wrapped in a ``MirrorError``; they propagate as
    raised.
    """


class SizeExceededError(MirrorError):
    """Raised when a local file is larger than the upload ceiling."""

    def __init__(self, path: str, size: int, limit: int) -> None:
        super().__init__(
            f"Files greater than {limit} bytes are not supported: {path} ({size} bytes)"
        )
        self.path = path
        self.size = size
        self.limit = limit


class UnsupportedEntityKindError(MirrorError):
    """Raised when a listed remote entity is neither a file nor a folder."""

    def __init__(self, kind: str, path: str) -> None:
        super().__init__(f"Unsupported entity kind {kind!r} at {path}")
        self.kind = kind
        self.path = path


class TypeConflictError(MirrorError):
    """Raised when a write would replace a directory with a file or vice versa."""

    def __init__(self, path: str, existing: str, requested: str) -> None:
        super().__init__(f"Cannot override the {existing} {path!r} with a {requested}!")
        self.path = path
        self.existing = existing
        self.requested = requested


class MissingCostError(MirrorError):
    """Raised when upload costs are read before they were computed."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Base costs were never set for {path}")
        self.path = path


class RemoteIdConflictError(MirrorError):
    """Raised when a node already bound to a remote id is bound to another one."""

    def __init__(self, path: str, existing: str, new: str) -> None:
        super().__init__(
            f"{path} is already bound to remote id {existing}, refusing {new}"
        )
        self.path = path
        self.existing = existing
        self.new = new


class EmptyManifestError(MirrorError):
    """Raised when no file entry is left to build a manifest from."""
