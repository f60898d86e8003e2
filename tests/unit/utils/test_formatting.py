"""Unit tests for console formatting helpers."""

from fstools.filesystem.models import TargetKind
from fstools.utils.formatting import create_entry_table, create_settings_table


class TestTables:
    """Tests for table factories."""

    def test_file_table(self) -> None:
        """File listings use the file style."""
        table = create_entry_table("Files in /tmp", TargetKind.FILES)

        assert [column.header for column in table.columns] == ["#", "File"]
        assert table.columns[1].style == "file"

    def test_folder_table(self) -> None:
        """Folder listings use the folder style."""
        table = create_entry_table("Folders in /tmp", TargetKind.FOLDERS)

        assert [column.header for column in table.columns] == ["#", "Folder"]
        assert table.columns[1].style == "folder"

    def test_settings_table(self) -> None:
        """Settings tables have a setting and a value column."""
        table = create_settings_table("fstools configuration")

        assert [column.header for column in table.columns] == ["Setting", "Value"]
