"""Core explode logic."""

import errno
import os
import shutil
from pathlib import Path
from typing import Callable

from tqdm import tqdm

from .errors import (
    AlreadyExistsError,
    CopyVerificationError,
    DestinationNotADirectoryError,
    OperationError,
    SourceNotADirectoryError,
    SourceNotEmptyError,
    SourceNotFoundError,
)
from .models import DirectoryEntry, ExplodeConfig, TransferOutcome, TransferStatus
from .scanner import classify_entry, compute_file_hash, list_entries

Notifier = Callable[[str], None]


def copy_file(source: Path, target: Path, overwrite: bool = False) -> None:
    """
    Copy a file (or a symlink, as a link) and verify the copy.

    Regular files are hashed on both sides after copying; a mismatch raises
    CopyVerificationError and the original is left alone.
    """
    if os.path.lexists(target):
        if not overwrite:
            raise FileExistsError(errno.EEXIST, "File exists", str(target))
        if target.is_symlink():
            # Replace the link itself, never what it points to
            target.unlink()
        elif target.is_dir():
            raise IsADirectoryError(errno.EISDIR, "Is a directory", str(target))

    shutil.copy2(source, target, follow_symlinks=False)

    if source.is_file() and not source.is_symlink():
        expected = compute_file_hash(source)
        actual = compute_file_hash(target)
        if expected != actual:
            raise CopyVerificationError(source, target, expected, actual)


def _replace_link(target: Path, overwrite: bool) -> None:
    """Remove a symlink sitting where a directory is about to be created."""
    if target.is_symlink():
        if not overwrite:
            raise FileExistsError(errno.EEXIST, "File exists", str(target))
        target.unlink()


def copy_tree(source: Path, target: Path, overwrite: bool = False) -> None:
    """
    Recursively copy the contents of source into the existing directory target.

    Existing sub-directories are merged. Existing files are replaced only
    when overwrite is set, otherwise FileExistsError is raised.
    """
    with os.scandir(source) as it:
        children = list(it)

    for child in children:
        src = Path(child.path)
        dst = target / child.name
        if child.is_dir(follow_symlinks=False):
            _replace_link(dst, overwrite)
            dst.mkdir(exist_ok=True)
            copy_tree(src, dst, overwrite)
        else:
            copy_file(src, dst, overwrite)

    shutil.copystat(source, target)


def move_or_copy(source: Path, target: Path, overwrite: bool) -> TransferStatus:
    """
    Move source to target, copying instead when they live on different devices.

    Returns:
        MOVED for a plain rename, COPIED when the cross-device fallback ran
    """
    try:
        os.replace(source, target)
        return TransferStatus.MOVED
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise

    if source.is_dir() and not source.is_symlink():
        _replace_link(target, overwrite)
        target.mkdir(exist_ok=overwrite)
        copy_tree(source, target, overwrite)
        # Source root has to end up empty for the final rmdir
        shutil.rmtree(source)
    else:
        copy_file(source, target, overwrite)
        os.remove(source)

    return TransferStatus.COPIED


def transfer_entry(
    config: ExplodeConfig,
    entry: DirectoryEntry,
    notify: Notifier = print
) -> TransferOutcome:
    """
    Transfer a single entry into the destination directory.

    Raises AlreadyExistsError when the destination already holds an entry of
    the same name and force is not set.
    """
    source = entry.source_path
    target = entry.destination_path

    if os.path.lexists(target):
        # Describes the entry being moved, not the one it collides with
        kind = classify_entry(source)
        if not config.force:
            raise AlreadyExistsError(kind, entry.name, config.destination)

    if config.verbose:
        notify(f"Moving {source} -> {target}")

    if config.dry_run:
        return TransferOutcome(entry, TransferStatus.PLANNED)

    try:
        status = move_or_copy(source, target, config.force)
    except OSError as e:
        raise OperationError(f"Failed to move or copy {source} to {target}") from e

    return TransferOutcome(entry, status)


def move_files(config: ExplodeConfig, notify: Notifier = print) -> list[TransferOutcome]:
    """
    Move every direct child of the source directory into the destination.

    Preconditions are checked before anything is changed on disk. Entries are
    transferred one at a time in listing order; the first failure aborts the
    run and entries already moved stay where they are.
    """
    source = config.source
    destination = config.destination

    if config.verbose:
        notify(f"Moving files in {source} -> {destination}")

    if not source.exists():
        raise SourceNotFoundError(source)
    if not source.is_dir():
        raise SourceNotADirectoryError(source)
    if not destination.exists() and not config.dry_run:
        try:
            destination.mkdir()
        except OSError as e:
            raise OperationError(f"Failed to create destination dir {destination}") from e
    if destination.exists() and not destination.is_dir():
        raise DestinationNotADirectoryError(destination)

    try:
        entries = list_entries(source, destination)
    except OSError as e:
        raise OperationError(f"Failed to read directory {source}") from e

    outcomes = []
    with tqdm(entries, desc="Exploding", unit="entry", disable=not config.progress) as pbar:
        for entry in pbar:
            outcomes.append(transfer_entry(config, entry, notify))

    return outcomes


def remove_source_directory(config: ExplodeConfig, notify: Notifier = print) -> None:
    """Remove the emptied source directory. Never recursive, even with force."""
    source = config.source

    if config.verbose:
        notify(f"Removing {source}")

    if config.dry_run:
        return

    try:
        os.rmdir(source)
    except OSError as e:
        if e.errno in (errno.ENOTEMPTY, errno.EEXIST):
            raise SourceNotEmptyError(source) from e
        raise OperationError(f"Failed to remove directory {source}") from e


def explode(config: ExplodeConfig, notify: Notifier = print) -> list[TransferOutcome]:
    """
    Move the contents of config.source into config.destination and remove
    the source directory.

    The source is only removed when every entry was transferred. A summary
    line is sent to notify after success, whatever the verbosity.
    """
    outcomes = move_files(config, notify)
    remove_source_directory(config, notify)

    notify(f"Exploded {config.source} to {config.destination}")
    return outcomes
