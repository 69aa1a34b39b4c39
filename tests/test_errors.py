"""Tests for dir_exploder.errors module."""

from pathlib import Path

from dir_exploder.errors import (
    AlreadyExistsError,
    CopyVerificationError,
    DestinationNotADirectoryError,
    ExploderError,
    OperationError,
    SourceNotADirectoryError,
    SourceNotEmptyError,
    SourceNotFoundError,
)
from dir_exploder.models import EntryKind


class TestErrorMessages:
    """Tests for the messages carried by each error."""

    def test_source_not_found(self):
        error = SourceNotFoundError(Path("missing"))
        assert str(error) == "Source path missing does not exist"
        assert error.path == Path("missing")

    def test_source_not_a_directory(self):
        error = SourceNotADirectoryError(Path("file.txt"))
        assert str(error) == "Source path file.txt is not a directory"

    def test_destination_not_a_directory(self):
        error = DestinationNotADirectoryError(Path("out.txt"))
        assert str(error) == "Target path out.txt is not a directory"

    def test_already_exists(self):
        error = AlreadyExistsError(EntryKind.FILE, "3", Path("dst"))
        assert str(error) == "File 3 already exists in dst"
        assert error.kind is EntryKind.FILE
        assert error.name == "3"

    def test_source_not_empty(self):
        error = SourceNotEmptyError(Path("src"))
        assert "Failed to remove directory src" in str(error)
        assert "not empty" in str(error)

    def test_copy_verification(self):
        error = CopyVerificationError(Path("a"), Path("b"), "aaaa", "bbbb")
        assert "aaaa" in str(error)
        assert "bbbb" in str(error)


class TestHierarchy:
    """All errors share a common base."""

    def test_all_derive_from_base(self):
        for cls in (
            SourceNotFoundError,
            SourceNotADirectoryError,
            DestinationNotADirectoryError,
            AlreadyExistsError,
            OperationError,
            SourceNotEmptyError,
            CopyVerificationError,
        ):
            assert issubclass(cls, ExploderError)

    def test_not_empty_is_operation_error(self):
        assert issubclass(SourceNotEmptyError, OperationError)
