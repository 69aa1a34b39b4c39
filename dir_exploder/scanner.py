"""Directory listing and file inspection."""

import os
from pathlib import Path

import xxhash

from .models import DirectoryEntry, EntryKind


def _long_path(path: Path) -> str:
    """Convert path to long path format on Windows to handle paths > 260 chars."""
    path_str = str(Path(path).resolve())
    if os.name == 'nt' and not path_str.startswith('\\\\?\\'):
        return '\\\\?\\' + path_str
    return path_str


def compute_file_hash(file_path: Path, chunk_size: int = 65536) -> str:
    """Compute hash of a file using xxhash (fast hashing algorithm)."""
    hasher = xxhash.xxh64()
    with open(_long_path(file_path), 'rb') as f:
        while chunk := f.read(chunk_size):
            hasher.update(chunk)
    return hasher.hexdigest()


def classify_entry(path: Path) -> EntryKind:
    """Classify a path as a directory, a file or anything else."""
    if path.is_dir():
        return EntryKind.DIR
    if path.is_file():
        return EntryKind.FILE
    return EntryKind.ENTRY


def list_entries(source: Path, destination: Path) -> list[DirectoryEntry]:
    """
    List the direct children of source, paired with their destination paths.

    The listing is read in full before returning so that moving entries out
    of source does not disturb the iteration.

    Args:
        source: Directory whose children are listed (not recursive)
        destination: Directory the children will be moved into

    Returns:
        Entries in filesystem listing order
    """
    entries = []
    with os.scandir(source) as it:
        for dir_entry in it:
            entries.append(DirectoryEntry(
                name=dir_entry.name,
                source_path=Path(dir_entry.path).absolute(),
                destination_path=destination / dir_entry.name,
            ))
    return entries
