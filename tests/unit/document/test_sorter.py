"""Tests for the category-aware priority sort."""

from __future__ import annotations

import pytest

from todo_manager.document.categories import CategoryIndex
from todo_manager.document.classifier import LineClassifier
from todo_manager.document.grouping import group_items
from todo_manager.document.models import Selection
from todo_manager.document.sorter import sort_key, sort_range, split_blocks
from todo_manager.errors import EmptySelectionError, InvalidRangeError


def _sort_all(lines: list[str], classifier: LineClassifier) -> list[str]:
    return sort_range(lines, Selection.whole(len(lines)), classifier)


class TestSortKey:
    """Tests for sort_key()."""

    def test_stability_for_equal_keys(self, classifier: LineClassifier) -> None:
        """Test equal priorities and untagged items keep their order."""
        lines = ["- [p2] one", "- [p2] two", "- three", "- four"]

        assert _sort_all(lines, classifier) == lines

    def test_key_order(self, classifier: LineClassifier) -> None:
        """Test the key compares checked, then presence of priority, then priority."""
        _, groups = group_items(["- [x] [p1] done", "- open", "- [p3] three"], classifier)
        ordered = sorted(groups, key=sort_key)

        assert [g.parent for g in ordered] == ["- [p3] three", "- open", "- [x] [p1] done"]


class TestSortRange:
    """Tests for sort_range()."""

    def test_checked_parent_sinks_below_group(self, classifier: LineClassifier) -> None:
        """Test a checked item sinks and sub-items keep their internal order."""
        lines = ["- [x] Fix bug", "- [p1] Prepare", "  - [p2] Slides", "  - [x] Agenda"]

        assert _sort_all(lines, classifier) == [
            "- [p1] Prepare",
            "  - [p2] Slides",
            "  - [x] Agenda",
            "- [x] Fix bug",
        ]

    def test_priorities_ascending(self, classifier: LineClassifier) -> None:
        """Test tagged items are ordered by number, untagged items after them."""
        lines = ["- untagged", "- [p3] c", "- [p1] a", "- [p2] b"]

        assert _sort_all(lines, classifier) == ["- [p1] a", "- [p2] b", "- [p3] c", "- untagged"]

    def test_checked_sink_regardless_of_priority(self, classifier: LineClassifier) -> None:
        """Test every checked item ends up after every unchecked one."""
        lines = ["- [x] [p1] a", "- [ ] z", "- [x] b", "- [ ] [p9] y"]
        result = _sort_all(lines, classifier)

        checked = [i for i, line in enumerate(result) if classifier.is_checked(line)]
        unchecked = [i for i, line in enumerate(result) if not classifier.is_checked(line)]
        assert max(unchecked) < min(checked)
        assert result == ["- [ ] [p9] y", "- [ ] z", "- [x] [p1] a", "- [x] b"]

    def test_checked_without_space_sinks(self, classifier: LineClassifier) -> None:
        """Test a checked box glued to its text still sinks."""
        assert _sort_all(["- [x]done", "- b"], classifier) == ["- b", "- [x]done"]

    def test_headings_stay_in_place(self, classifier: LineClassifier) -> None:
        """Test items are sorted only within their own category."""
        lines = ["## A", "- a2", "- [p1] a1", "## B", "- [p2] b2", "- [p1] b1"]

        assert _sort_all(lines, classifier) == [
            "## A",
            "- [p1] a1",
            "- a2",
            "## B",
            "- [p1] b1",
            "- [p2] b2",
        ]

    def test_partial_selection(self, sample_lines: list[str], classifier: LineClassifier) -> None:
        """Test only the selected lines are returned and sorted."""
        result = sort_range(sample_lines, Selection(9, 12), classifier)

        assert result == ["- [ ] [p2] Call mom", "- [ ] Buy groceries", "  - milk", "  - eggs"]

    def test_leading_sub_items_stay_first(self, classifier: LineClassifier) -> None:
        """Test sub-items whose parent is outside the selection are not dropped."""
        lines = ["- parent", "  - orphan", "- b", "- [p1] a"]

        result = sort_range(lines, Selection(2, 4), classifier)

        assert result == ["  - orphan", "- [p1] a", "- b"]

    def test_length_preserved(self, sample_lines: list[str], classifier: LineClassifier) -> None:
        """Test the result has as many lines as the selection."""
        result = _sort_all(sample_lines, classifier)

        assert len(result) == len(sample_lines)
        assert sorted(result) == sorted(sample_lines)

    def test_empty_document(self, classifier: LineClassifier) -> None:
        """Test sorting an empty document is rejected."""
        with pytest.raises(EmptySelectionError):
            sort_range([], Selection(1, 1), classifier)

    @pytest.mark.parametrize(("start", "end"), [(0, 2), (2, 5), (3, 2)])
    def test_invalid_range(self, classifier: LineClassifier, start: int, end: int) -> None:
        """Test inverted and out-of-bounds selections are rejected."""
        with pytest.raises(InvalidRangeError):
            sort_range(["- a", "- b", "- c"], Selection(start, end), classifier)


class TestSplitBlocks:
    """Tests for split_blocks()."""

    def test_leading_block_named_after_owner(
        self, sample_lines: list[str], classifier: LineClassifier
    ) -> None:
        """Test lines before the first selected heading take the enclosing category."""
        index = CategoryIndex.scan(sample_lines, classifier)
        blocks = split_blocks(sample_lines[3:9], 4, classifier, index)

        assert [b.category for b in blocks] == ["Work", "Personal"]
        assert blocks[0].heading is None
        assert blocks[1].heading == "## Personal"

    def test_uncategorized_block(self, classifier: LineClassifier) -> None:
        """Test lines above every heading form an uncategorized block."""
        lines = ["- a", "## A", "- b"]
        blocks = split_blocks(lines, 1, classifier, CategoryIndex.scan(lines, classifier))

        assert [b.category for b in blocks] == ["Uncategorized", "A"]
