"""Unit tests for FileOperator.

Tests copying, moving, deleting, writing, reading and comparing files,
including precondition failures and translated I/O errors.
"""

import io
import os
import shutil
import stat
from pathlib import Path
from unittest.mock import patch

import pytest
from fstools.core.i18n import Translator
from fstools.filesystem.context import FilesystemContext
from fstools.filesystem.errors import (
    DestinationExists,
    ErrorKind,
    PreconditionViolation,
    SourceNotFound,
    UnderlyingIOFailure,
)
from fstools.filesystem.files import FileOperator
from fstools.filesystem.normalizer import PathNormalizer


@pytest.fixture
def operator(context: FilesystemContext) -> FileOperator:
    return FileOperator(context)


class TestExists:
    """Tests for FileOperator.exists."""

    def test_exists_cleans_path(self, operator: FileOperator, tmp_path: Path) -> None:
        """Redundant separators do not affect existence checks."""
        (tmp_path / "a.txt").write_text("a")

        assert operator.exists(f"{tmp_path}//a.txt") is True
        assert operator.exists(f"{tmp_path}/missing.txt") is False


class TestCopy:
    """Tests for FileOperator.copy."""

    def test_copy_creates_parent(self, operator: FileOperator, tmp_path: Path) -> None:
        """Copying into a missing folder creates it."""
        src = tmp_path / "src.txt"
        src.write_text("payload")
        dest = tmp_path / "new" / "dir" / "dest.txt"

        assert operator.copy(str(src), str(dest)) is True
        assert dest.read_text() == "payload"
        assert src.exists()

    def test_copy_missing_source(self, operator: FileOperator, tmp_path: Path) -> None:
        """Copying a missing source raises SourceNotFound."""
        with pytest.raises(SourceNotFound) as exc_info:
            operator.copy(str(tmp_path / "nope.txt"), str(tmp_path / "dest.txt"))

        assert exc_info.value.key == "FILE_CANNOT_FIND_SOURCE"
        assert not (tmp_path / "dest.txt").exists()

    def test_copy_without_force_keeps_newer_destination(
        self, operator: FileOperator, tmp_path: Path
    ) -> None:
        """Without force, a destination newer than the source is kept."""
        src = tmp_path / "src.txt"
        src.write_text("old")
        dest = tmp_path / "dest.txt"
        dest.write_text("newer")
        os.utime(src, (1_000_000, 1_000_000))
        os.utime(dest, (2_000_000, 2_000_000))

        operator.copy(str(src), str(dest), force=False)

        assert dest.read_text() == "newer"

    def test_copy_without_force_replaces_older_destination(
        self, operator: FileOperator, tmp_path: Path
    ) -> None:
        """Without force, a destination older than the source is replaced."""
        src = tmp_path / "src.txt"
        src.write_text("fresh")
        dest = tmp_path / "dest.txt"
        dest.write_text("stale")
        os.utime(src, (2_000_000, 2_000_000))
        os.utime(dest, (1_000_000, 1_000_000))

        operator.copy(str(src), str(dest), force=False)

        assert dest.read_text() == "fresh"

    def test_copy_force_overwrites(self, operator: FileOperator, tmp_path: Path) -> None:
        """With force, the destination is always overwritten."""
        src = tmp_path / "src.txt"
        src.write_text("old")
        dest = tmp_path / "dest.txt"
        dest.write_text("newer")
        os.utime(src, (1_000_000, 1_000_000))
        os.utime(dest, (2_000_000, 2_000_000))

        operator.copy(str(src), str(dest))

        assert dest.read_text() == "old"

    def test_copy_io_error_translated(self, operator: FileOperator, tmp_path: Path) -> None:
        """An OSError during copy becomes UnderlyingIOFailure."""
        src = tmp_path / "src.txt"
        src.write_text("x")

        with (
            patch.object(shutil, "copy2", side_effect=OSError("Disk full")),
            pytest.raises(UnderlyingIOFailure) as exc_info,
        ):
            operator.copy(str(src), str(tmp_path / "dest.txt"))

        assert exc_info.value.kind == ErrorKind.IO_FAILURE
        assert exc_info.value.key == "FAILED_COPYING_FILE"
        assert "Disk full" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, OSError)


class TestMove:
    """Tests for FileOperator.move."""

    def test_move_file(self, operator: FileOperator, tmp_path: Path) -> None:
        """Moving renames the file."""
        src = tmp_path / "a.txt"
        src.write_text("content")
        dest = tmp_path / "b.txt"

        assert operator.move(str(src), str(dest)) is True
        assert not src.exists()
        assert dest.read_text() == "content"

    def test_move_missing_source(self, operator: FileOperator, tmp_path: Path) -> None:
        """Moving a missing source raises SourceNotFound."""
        with pytest.raises(SourceNotFound):
            operator.move(str(tmp_path / "missing"), str(tmp_path / "dest"))

    def test_move_existing_destination_rejected(
        self, operator: FileOperator, tmp_path: Path
    ) -> None:
        """An existing destination without overwrite is a precondition violation."""
        src = tmp_path / "a.txt"
        src.write_text("source")
        dest = tmp_path / "b.txt"
        dest.write_text("destination")

        with pytest.raises(DestinationExists) as exc_info:
            operator.move(str(src), str(dest))

        assert isinstance(exc_info.value, PreconditionViolation)
        assert exc_info.value.key == "FILE_ALREADY_EXISTS"
        assert src.read_text() == "source"
        assert dest.read_text() == "destination"

    def test_move_overwrite(self, operator: FileOperator, tmp_path: Path) -> None:
        """With overwrite, the destination takes the source's content."""
        src = tmp_path / "a.txt"
        src.write_text("source")
        dest = tmp_path / "b.txt"
        dest.write_text("destination")

        assert operator.move(str(src), str(dest), overwrite=True) is True
        assert not src.exists()
        assert dest.read_text() == "source"

    def test_move_io_error_translated(self, operator: FileOperator, tmp_path: Path) -> None:
        """An OSError during rename becomes UnderlyingIOFailure."""
        src = tmp_path / "a.txt"
        src.write_text("x")

        with (
            patch.object(os, "replace", side_effect=PermissionError("Permission denied")),
            pytest.raises(UnderlyingIOFailure) as exc_info,
        ):
            operator.move(str(src), str(tmp_path / "b.txt"))

        assert exc_info.value.key == "FAILED_RENAMING_FILE"
        assert exc_info.value.path == str(src)


class TestDelete:
    """Tests for FileOperator.delete."""

    def test_delete_file(self, operator: FileOperator, tmp_path: Path) -> None:
        """Deleting a file removes it."""
        target = tmp_path / "a.txt"
        target.write_text("x")

        assert operator.delete(str(target)) is True
        assert not target.exists()

    def test_delete_directory_tree(self, operator: FileOperator, tmp_path: Path) -> None:
        """Deleting a directory removes the whole tree."""
        target = tmp_path / "tree"
        (target / "nested").mkdir(parents=True)
        (target / "nested" / "f.txt").write_text("x")

        assert operator.delete(str(target)) is True
        assert not target.exists()

    def test_delete_dead_symlink(self, operator: FileOperator, tmp_path: Path) -> None:
        """A dead symlink is removed."""
        link = tmp_path / "dead"
        link.symlink_to(tmp_path / "nowhere")

        assert operator.delete(str(link)) is True
        assert not link.is_symlink()

    def test_delete_missing_is_noop(self, operator: FileOperator, tmp_path: Path) -> None:
        """Deleting a missing path succeeds without doing anything."""
        assert operator.delete(str(tmp_path / "missing")) is True

    def test_delete_io_error_translated(self, operator: FileOperator, tmp_path: Path) -> None:
        """An OSError during removal becomes UnderlyingIOFailure."""
        target = tmp_path / "a.txt"
        target.write_text("x")

        with (
            patch.object(Path, "unlink", side_effect=OSError("Read-only file system")),
            pytest.raises(UnderlyingIOFailure) as exc_info,
        ):
            operator.delete(str(target))

        assert exc_info.value.key == "FAILED_DELETING_FILE"
        assert "Read-only file system" in str(exc_info.value)


class TestWriteRead:
    """Tests for FileOperator.write, read and read_bytes."""

    def test_write_then_read_text(self, operator: FileOperator, tmp_path: Path) -> None:
        """Written text can be read back."""
        target = tmp_path / "deep" / "note.txt"

        assert operator.write(str(target), "héllo") is True
        assert operator.read(str(target)) == "héllo"

    def test_write_bytes(self, operator: FileOperator, tmp_path: Path) -> None:
        """Bytes are written verbatim."""
        target = tmp_path / "blob.bin"

        operator.write(str(target), b"\x00\x01\x02")

        assert operator.read_bytes(str(target)) == b"\x00\x01\x02"

    def test_write_replaces_existing(self, operator: FileOperator, tmp_path: Path) -> None:
        """Writing replaces previous contents and leaves no temp files."""
        target = tmp_path / "note.txt"
        target.write_text("old")

        operator.write(str(target), "new")

        assert target.read_text() == "new"
        assert [p.name for p in tmp_path.iterdir()] == ["note.txt"]

    def test_write_io_error_translated(self, operator: FileOperator, tmp_path: Path) -> None:
        """A failed rename becomes UnderlyingIOFailure and removes the temp file."""
        target = tmp_path / "note.txt"

        with (
            patch.object(os, "replace", side_effect=OSError("No space left on device")),
            pytest.raises(UnderlyingIOFailure) as exc_info,
        ):
            operator.write(str(target), "data")

        assert exc_info.value.key == "FAILED_WRITING_FILE"
        assert list(tmp_path.iterdir()) == []

    def test_read_missing_returns_empty(self, operator: FileOperator, tmp_path: Path) -> None:
        """Reading a missing file yields an empty string."""
        assert operator.read(str(tmp_path / "missing.txt")) == ""
        assert operator.read_bytes(str(tmp_path / "missing.bin")) == b""

    def test_read_directory_fails(self, operator: FileOperator, tmp_path: Path) -> None:
        """Reading an existing but unreadable path raises UnderlyingIOFailure."""
        with pytest.raises(UnderlyingIOFailure) as exc_info:
            operator.read(str(tmp_path))

        assert exc_info.value.key == "UNABLE_TO_READ_FILE"

    def test_read_undecodable_fails(self, operator: FileOperator, tmp_path: Path) -> None:
        """Bytes invalid in the encoding raise UnderlyingIOFailure."""
        target = tmp_path / "binary.dat"
        target.write_bytes(b"\xff\xfe\x00")

        with pytest.raises(UnderlyingIOFailure) as exc_info:
            operator.read(str(target))

        assert exc_info.value.key == "UNABLE_TO_READ_FILE"
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_read_other_encoding(self, operator: FileOperator, tmp_path: Path) -> None:
        """The encoding argument is applied when decoding."""
        target = tmp_path / "latin.txt"
        target.write_bytes("café".encode("latin-1"))

        assert operator.read(str(target), encoding="latin-1") == "café"

    def test_write_keeps_existing_mode(self, operator: FileOperator, tmp_path: Path) -> None:
        """Rewriting a file keeps its permission bits."""
        target = tmp_path / "script.sh"
        target.write_text("old")
        os.chmod(target, 0o644)

        operator.write(str(target), "new")

        assert stat.S_IMODE(target.stat().st_mode) == 0o644
        assert target.read_text() == "new"

    def test_write_new_file_uses_umask(self, operator: FileOperator, tmp_path: Path) -> None:
        """A new file gets the default mode under the current umask."""
        old_umask = os.umask(0o022)
        try:
            operator.write(str(tmp_path / "fresh.txt"), "x")
        finally:
            os.umask(old_umask)

        assert stat.S_IMODE((tmp_path / "fresh.txt").stat().st_mode) == 0o644


class TestSame:
    """Tests for FileOperator.same."""

    def test_identical_files(self, operator: FileOperator, tmp_path: Path) -> None:
        """Files with identical bytes are the same."""
        (tmp_path / "a").write_bytes(b"x" * 200_000)
        (tmp_path / "b").write_bytes(b"x" * 200_000)

        assert operator.same(str(tmp_path / "a"), str(tmp_path / "b")) is True

    def test_size_mismatch(self, operator: FileOperator, tmp_path: Path) -> None:
        """Files of different sizes differ."""
        (tmp_path / "a").write_text("abc")
        (tmp_path / "b").write_text("abcd")

        assert operator.same(str(tmp_path / "a"), str(tmp_path / "b")) is False

    def test_same_size_different_content(self, operator: FileOperator, tmp_path: Path) -> None:
        """Files of equal size but different bytes differ."""
        (tmp_path / "a").write_text("abc")
        (tmp_path / "b").write_text("abd")

        assert operator.same(str(tmp_path / "a"), str(tmp_path / "b")) is False

    def test_missing_file(self, operator: FileOperator, tmp_path: Path) -> None:
        """A file that cannot be opened is never the same."""
        (tmp_path / "a").write_text("abc")

        assert operator.same(str(tmp_path / "a"), str(tmp_path / "missing")) is False

    def test_file_and_directory(self, operator: FileOperator, tmp_path: Path) -> None:
        """A file and a directory are never the same."""
        (tmp_path / "a").write_text("abc")
        (tmp_path / "d").mkdir()

        assert operator.same(str(tmp_path / "a"), str(tmp_path / "d")) is False

    def test_uses_backend_streams(self, tmp_path: Path) -> None:
        """Content is read through the backend's open_read."""
        context = FilesystemContext(normalizer=PathNormalizer(separator="/"))
        streams = {"/x/a": b"same", "/x/b": b"same"}

        with (
            patch.object(context.backend, "is_dir", return_value=False),
            patch.object(
                context.backend, "open_read", side_effect=lambda p: io.BytesIO(streams[p])
            ),
        ):
            assert FileOperator(context).same("/x//a", "/x/b") is True


class TestTranslation:
    """Tests for localized failure messages."""

    def test_default_messages_are_french(self, operator: FileOperator, tmp_path: Path) -> None:
        """Without overrides the French default table is used."""
        with pytest.raises(SourceNotFound, match="Impossible de trouver le fichier source"):
            operator.move(str(tmp_path / "missing"), str(tmp_path / "dest"))

    def test_merged_translation_used(self, tmp_path: Path) -> None:
        """Merged translations replace the default message."""
        context = FilesystemContext(
            normalizer=PathNormalizer(separator="/"),
            translator=Translator({"file_cannot_find_source": "Source file not found"}),
        )

        with pytest.raises(SourceNotFound) as exc_info:
            FileOperator(context).move(str(tmp_path / "missing"), str(tmp_path / "dest"))

        assert exc_info.value.message == f"Source file not found : {tmp_path}/missing"
