"""Errors raised while exploding a directory."""

from pathlib import Path

from .models import EntryKind


class ExploderError(Exception):
    """Base error for the project."""


class SourceNotFoundError(ExploderError):
    def __init__(self, source: Path):
        self.path = source
        super().__init__(f"Source path {source} does not exist")


class SourceNotADirectoryError(ExploderError):
    def __init__(self, source: Path):
        self.path = source
        super().__init__(f"Source path {source} is not a directory")


class DestinationNotADirectoryError(ExploderError):
    def __init__(self, destination: Path):
        self.path = destination
        super().__init__(f"Target path {destination} is not a directory")


class AlreadyExistsError(ExploderError):
    """An entry of the same name is already present in the destination."""

    def __init__(self, kind: EntryKind, name: str, destination: Path):
        self.kind = kind
        self.name = name
        self.destination = destination
        super().__init__(f"{kind.value} {name} already exists in {destination}")


class OperationError(ExploderError):
    """A filesystem step failed. The underlying OSError is the __cause__."""


class SourceNotEmptyError(OperationError):
    def __init__(self, source: Path):
        self.path = source
        super().__init__(f"Failed to remove directory {source}: directory is not empty")


class CopyVerificationError(ExploderError):
    """A cross-device copy does not match its original."""

    def __init__(self, source: Path, target: Path, expected: str, actual: str):
        self.source = source
        self.target = target
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Copy of {source} to {target} is corrupt "
            f"(expected hash {expected}, got {actual})"
        )
