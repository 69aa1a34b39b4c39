"""Data models for the directory exploder."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """What kind of filesystem entry a path refers to."""
    DIR = "Dir"
    FILE = "File"
    ENTRY = "Entry"


class TransferStatus(Enum):
    """How a single entry reached its destination."""
    MOVED = "moved"
    COPIED = "copied"
    PLANNED = "planned"


@dataclass(frozen=True)
class ExplodeConfig:
    """Options for one explode run. Read-only once built."""
    source: Path
    destination: Path = Path(".")
    force: bool = False
    dry_run: bool = False
    verbose: bool = False
    progress: bool = False


@dataclass(frozen=True)
class DirectoryEntry:
    """A direct child of the source directory and where it should go."""
    name: str
    source_path: Path
    destination_path: Path


@dataclass(frozen=True)
class TransferOutcome:
    """Result of transferring one entry."""
    entry: DirectoryEntry
    status: TransferStatus
