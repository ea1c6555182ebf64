"""Unit tests for content resolution and the derivation pipeline.

This test suite covers:
1. resolve_visible_raw for each sidebar section and synthetic folders
2. derive_visible search, filter and sort stages
3. Determinism and stability of the derived lists
"""

import pytest

from models.content import ContentSource, FolderContent
from models.derivation import (
    TRASH_FOLDER_COLOR,
    VisibleItems,
    derive_visible,
    file_sort_key,
    folder_sort_key,
    matches_search,
    resolve_visible_raw,
)
from models.view import SortSpec
from tests.fixtures.entries import (
    create_file,
    create_folder,
    day,
    sample_files,
    sample_folders,
)


def names(entries) -> list[str]:
    return [entry.name for entry in entries]


@pytest.fixture
def content_source():
    return ContentSource(
        entries={
            "Projects": FolderContent(
                folders=[create_folder("subfolder-1", "Frontend")],
                files=[create_file("project-file-1", "Project Plan.pdf")],
            )
        }
    )


class TestResolveRecent:
    """Test the recent section."""

    def test_recent_shows_no_folders(self):
        raw = resolve_visible_raw(sample_folders(), sample_files(), "recent", ["Recent"])

        assert raw.folders == []

    def test_recent_keeps_eight_newest_files(self):
        raw = resolve_visible_raw(sample_folders(), sample_files(), "recent", ["Recent"])

        assert [f.id for f in raw.files] == [
            "file-10", "file-9", "file-8", "file-7",
            "file-6", "file-5", "file-4", "file-3",
        ]

    def test_recent_limit_is_configurable(self):
        raw = resolve_visible_raw(
            [], sample_files(), "recent", ["Recent"], recent_limit=2
        )

        assert [f.id for f in raw.files] == ["file-10", "file-9"]

    def test_recent_uses_last_modified_when_upload_time_missing(self):
        from models.entries import File

        older = create_file("file-old", uploaded=day(1))
        no_upload = File(id="file-new", name="new.pdf", last_modified=day(4))

        raw = resolve_visible_raw([], [older, no_upload], "recent", ["Recent"])

        assert [f.id for f in raw.files] == ["file-new", "file-old"]


class TestResolveLabelledViews:
    """Test the shared, starred and trash sections."""

    def test_shared_subsets(self):
        raw = resolve_visible_raw(sample_folders(), sample_files(), "shared", ["Shared"])

        assert [f.id for f in raw.folders] == ["folder-1", "folder-2"]
        assert [f.id for f in raw.files] == [f"file-{i}" for i in range(1, 7)]
        assert all(entry.label == "shared" for entry in raw.folders + raw.files)

    def test_starred_subsets(self):
        raw = resolve_visible_raw(sample_folders(), sample_files(), "starred", ["Starred"])

        assert [f.id for f in raw.folders] == ["folder-2", "folder-3"]
        assert [f.id for f in raw.files] == ["file-3", "file-4", "file-5", "file-6"]
        assert all(entry.label == "starred" for entry in raw.folders + raw.files)

    def test_trash_subsets_and_grey_folders(self):
        raw = resolve_visible_raw(sample_folders(), sample_files(), "trash", ["Trash"])

        assert [f.id for f in raw.folders] == ["folder-4", "folder-5"]
        assert [f.id for f in raw.files] == ["file-5", "file-6", "file-7", "file-8"]
        assert all(folder.color == TRASH_FOLDER_COLOR for folder in raw.folders)
        assert all(entry.label == "trash" for entry in raw.folders + raw.files)

    def test_labelled_views_keep_names(self):
        """Names are not prefixed; the label field carries the tag."""
        folders = sample_folders()
        raw = resolve_visible_raw(folders, sample_files(), "shared", ["Shared"])

        assert raw.folders[0].name == folders[0].name

    def test_labelled_views_do_not_mutate_backing_entries(self):
        folders = sample_folders()
        files = sample_files()

        for view in ["shared", "starred", "trash"]:
            resolve_visible_raw(folders, files, view, [view])

        assert all(entry.label is None for entry in folders + files)
        assert folders[3].color is None

    def test_short_collections_give_short_subsets(self):
        raw = resolve_visible_raw(
            [create_folder()], [create_file()], "trash", ["Trash"]
        )

        assert raw.folders == []
        assert raw.files == []


class TestResolveMyDrive:
    """Test my-drive content and synthetic folders."""

    def test_root_shows_everything(self, content_source):
        folders = sample_folders()
        files = sample_files()

        raw = resolve_visible_raw(folders, files, "my-drive", ["Drive"], content_source)

        assert [f.id for f in raw.folders] == [f.id for f in folders]
        assert [f.id for f in raw.files] == [f.id for f in files]

    def test_synthetic_folder_shows_its_content(self, content_source):
        raw = resolve_visible_raw(
            sample_folders(), sample_files(), "my-drive", ["Drive", "Projects"], content_source
        )

        assert names(raw.folders) == ["Frontend"]
        assert names(raw.files) == ["Project Plan.pdf"]

    def test_only_last_segment_is_looked_up(self, content_source):
        raw = resolve_visible_raw(
            sample_folders(), sample_files(), "my-drive",
            ["Drive", "Projects", "UI"], content_source,
        )

        assert len(raw.folders) == 6
        assert len(raw.files) == 10

    def test_no_content_source_shows_everything(self):
        raw = resolve_visible_raw(
            sample_folders(), sample_files(), "my-drive", ["Drive", "Projects"]
        )

        assert len(raw.folders) == 6

    def test_settings_shows_nothing(self):
        raw = resolve_visible_raw(sample_folders(), sample_files(), "settings", ["Settings"])

        assert raw == VisibleItems()

    def test_resolution_returns_new_lists(self):
        folders = sample_folders()

        raw = resolve_visible_raw(folders, [], "my-drive", ["Drive"])
        raw.folders.clear()

        assert len(folders) == 6


class TestSearch:
    """Test the search stage."""

    def test_matches_search_is_case_insensitive(self):
        assert matches_search("Q4 Report.pdf", "report")
        assert matches_search("Q4 Report.pdf", "REPORT")
        assert not matches_search("Q4 Report.pdf", "budget")

    def test_empty_query_matches_all(self):
        assert matches_search("anything", "")

    def test_search_applies_to_folders_and_files(self):
        raw = VisibleItems(folders=sample_folders(), files=sample_files())

        result = derive_visible(raw, search_query="re")

        assert names(result.folders) == []
        assert names(result.files) == ["annual report.pdf", "Q4 Report.pdf"]

    def test_no_match_gives_empty_lists(self):
        raw = VisibleItems(folders=sample_folders(), files=sample_files())

        result = derive_visible(raw, search_query="zzz")

        assert result.folders == []
        assert result.files == []


class TestFilter:
    """Test the type filter stage."""

    @pytest.mark.parametrize("filter_type", ["files", "pdf", "image", "figma", "file"])
    def test_file_filters_hide_all_folders(self, filter_type):
        raw = VisibleItems(folders=sample_folders(), files=sample_files())

        result = derive_visible(raw, filter_type=filter_type)

        assert result.folders == []

    def test_folders_filter_hides_all_files(self):
        raw = VisibleItems(folders=sample_folders(), files=sample_files())

        result = derive_visible(raw, filter_type="folders")

        assert result.files == []
        assert len(result.folders) == 6

    def test_type_filter_restricts_files(self):
        raw = VisibleItems(folders=sample_folders(), files=sample_files())

        result = derive_visible(raw, filter_type="pdf")

        assert {f.file_type for f in result.files} == {"pdf"}
        assert len(result.files) == 2

    def test_files_filter_keeps_every_file(self):
        raw = VisibleItems(folders=sample_folders(), files=sample_files())

        result = derive_visible(raw, filter_type="files")

        assert len(result.files) == 10

    def test_search_then_filter(self):
        raw = VisibleItems(folders=sample_folders(), files=sample_files())

        result = derive_visible(raw, search_query="report", filter_type="pdf")

        assert names(result.files) == ["annual report.pdf", "Q4 Report.pdf"]


class TestSortKeys:
    """Test sort key extraction."""

    def test_name_key_is_case_folded(self):
        assert folder_sort_key(create_folder(name="ABC"), "name") == "abc"
        assert file_sort_key(create_file(name="ABC.pdf"), "name") == "abc.pdf"

    def test_date_keys(self):
        folder = create_folder(last_modified=day(3))
        file = create_file(uploaded=day(1), last_modified=day(5))

        assert folder_sort_key(folder, "date") == day(3)
        assert file_sort_key(file, "date") == day(1)

    def test_size_keys_are_bytes(self):
        assert folder_sort_key(create_folder(size="1 KB"), "size") == 1024
        assert file_sort_key(create_file(size="bogus"), "size") == 0

    def test_type_key(self):
        assert file_sort_key(create_file(file_type="zip"), "type") == "zip"
        assert folder_sort_key(create_folder(name="Zeta"), "type") == "zeta"


class TestSort:
    """Test the sort stage."""

    def test_name_sort_scenario(self):
        """'a.txt' orders before 'B.txt' because names are case-folded."""
        files = [
            create_file("file-b", "B.txt", "file", uploaded=day(1)),
            create_file("file-a", "a.txt", "file", uploaded=day(2)),
        ]
        raw = VisibleItems(files=files)

        by_name = derive_visible(raw, sort=SortSpec(field="name", order="asc"))
        by_date = derive_visible(raw, sort=SortSpec(field="date", order="desc"))

        assert names(by_name.files) == ["a.txt", "B.txt"]
        assert names(by_date.files) == ["a.txt", "B.txt"]

    def test_date_ascending(self):
        raw = VisibleItems(folders=sample_folders())

        result = derive_visible(raw, sort=SortSpec(field="date", order="asc"))

        assert [f.id for f in result.folders] == [
            "folder-6", "folder-5", "folder-4", "folder-3", "folder-2", "folder-1",
        ]

    def test_size_descending(self):
        raw = VisibleItems(files=sample_files())

        result = derive_visible(raw, sort=SortSpec(field="size", order="desc"))

        assert names(result.files)[:3] == [
            "Source Files.zip", "Product Demo.mp4", "Podcast.mp3",
        ]
        assert names(result.files)[-1] == "Meeting Notes.docx"

    def test_type_sort_orders_files_by_type(self):
        raw = VisibleItems(files=sample_files())

        result = derive_visible(raw, sort=SortSpec(field="type", order="asc"))

        types = [f.file_type for f in result.files]
        assert types == sorted(types)

    def test_type_sort_orders_folders_by_name(self):
        raw = VisibleItems(folders=sample_folders())

        result = derive_visible(raw, sort=SortSpec(field="type", order="asc"))

        assert names(result.folders) == [
            "archives", "Design Assets", "Documents", "Marketing", "Personal", "Projects",
        ]

    def test_default_sort_is_name_ascending(self):
        raw = VisibleItems(folders=sample_folders())

        result = derive_visible(raw)

        assert names(result.folders)[0] == "archives"

    @pytest.mark.parametrize("order", ["asc", "desc"])
    def test_sort_is_stable_for_equal_keys(self, order):
        """Equal keys keep their input order in both directions."""
        files = [
            create_file("file-1", "one.pdf", size="1 MB"),
            create_file("file-2", "two.pdf", size="1 MB"),
            create_file("file-3", "three.pdf", size="1 MB"),
            create_file("file-4", "big.pdf", size="2 MB"),
        ]
        raw = VisibleItems(files=files)

        result = derive_visible(raw, sort=SortSpec(field="size", order=order))

        equal = [f.id for f in result.files if f.size == "1 MB"]
        assert equal == ["file-1", "file-2", "file-3"]

    @pytest.mark.parametrize("order", ["asc", "desc"])
    def test_type_sort_keeps_input_order_within_type(self, order):
        raw = VisibleItems(files=sample_files())

        result = derive_visible(raw, sort=SortSpec(field="type", order=order))

        pdfs = [f.id for f in result.files if f.file_type == "pdf"]
        assert pdfs == ["file-1", "file-10"]


class TestDeterminism:
    """Test that derivation is a pure function of its inputs."""

    def test_repeated_derivation_is_identical(self):
        raw = VisibleItems(folders=sample_folders(), files=sample_files())
        sort = SortSpec(field="size", order="desc")

        first = derive_visible(raw, "a", "all", sort)
        second = derive_visible(raw, "a", "all", sort)

        assert first.ids() == second.ids()

    def test_input_lists_are_not_reordered(self):
        files = sample_files()
        before = [f.id for f in files]
        raw = VisibleItems(files=files)

        derive_visible(raw, sort=SortSpec(field="name", order="desc"))

        assert [f.id for f in raw.files] == before

    def test_ids_lists_folders_then_files(self):
        items = VisibleItems(folders=[create_folder("folder-z")], files=[create_file("file-z")])

        assert items.ids() == ["folder-z", "file-z"]
