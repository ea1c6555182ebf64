"""Unit tests for dropped-file translation."""

import pytest

from models.drop import DroppedFile, add_dropped_files
from models.exceptions import ValidationError
from tests.fixtures.entries import FixedClock, create_store, day


class TestDroppedFile:
    """Test DroppedFile descriptors."""

    def test_display_size(self):
        assert DroppedFile(name="report.pdf", size_bytes=3_221_225).display_size == "3.1 MB"

    def test_empty_file(self):
        assert DroppedFile(name="empty.txt", size_bytes=0).display_size == "0 Bytes"

    def test_negative_size_rejected(self):
        with pytest.raises(Exception):
            DroppedFile(name="bad.bin", size_bytes=-5)


class TestAddDroppedFiles:
    """Test adding dropped files to a store."""

    def test_report_pdf_drop(self):
        store = create_store(clock=FixedClock(day(3)))

        created = add_dropped_files(
            store, [DroppedFile(name="report.pdf", size_bytes=3_221_225)]
        )

        assert len(created) == 1
        file = created[0]
        assert file.name == "report.pdf"
        assert file.file_type == "pdf"
        assert file.size == "3.1 MB"
        assert file.uploaded == day(3)
        assert store.files == created

    def test_every_dropped_file_is_added_in_order(self):
        store = create_store()

        created = add_dropped_files(
            store,
            [
                DroppedFile(name="a.png", size_bytes=2048),
                DroppedFile(name="b.mp3", size_bytes=1024**2),
                DroppedFile(name="c.bin", size_bytes=10),
            ],
        )

        assert [f.name for f in store.files] == ["a.png", "b.mp3", "c.bin"]
        assert [f.file_type for f in created] == ["image", "audio", "file"]
        assert [f.size for f in created] == ["2 KB", "1 MB", "10 Bytes"]

    def test_empty_drop_adds_nothing(self):
        store = create_store()

        assert add_dropped_files(store, []) == []
        assert store.update_count == 0

    def test_blank_name_rejects_whole_drop(self):
        store = create_store()

        with pytest.raises(ValidationError):
            add_dropped_files(
                store,
                [
                    DroppedFile(name="ok.pdf", size_bytes=1),
                    DroppedFile(name="  ", size_bytes=1),
                ],
            )

        assert store.files == []
