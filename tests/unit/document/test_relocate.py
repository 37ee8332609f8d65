"""Tests for moving items between categories."""

from __future__ import annotations

import pytest

from todo_manager.document.categories import CategoryIndex
from todo_manager.document.classifier import LineClassifier
from todo_manager.document.models import Category
from todo_manager.document.relocate import move_block, move_to_category, plan_move
from todo_manager.errors import DocumentError


class TestMoveBlock:
    """Tests for move_block()."""

    def test_move_forward(self) -> None:
        """Test moving a block towards the end."""
        assert move_block(list("abcde"), 2, 2, 3) == list("adbce")

    def test_move_backward(self) -> None:
        """Test moving a block towards the start."""
        assert move_block(list("abcde"), 4, 2, 1) == list("deabc")

    def test_move_to_end(self) -> None:
        """Test inserting past the last remaining item appends."""
        assert move_block(list("abcde"), 1, 1, 5) == list("bcdea")

    def test_works_on_any_sequence(self) -> None:
        """Test non-string items are moved the same way."""
        handles = [object() for _ in range(4)]
        moved = move_block(handles, 1, 2, 3)

        assert moved == [handles[2], handles[3], handles[0], handles[1]]


class TestMoveToCategory:
    """Tests for move_to_category() and plan_move()."""

    def _index(self, lines: list[str], classifier: LineClassifier) -> CategoryIndex:
        return CategoryIndex.scan(lines, classifier)

    def test_move_up_into_earlier_category(
        self, sample_lines: list[str], classifier: LineClassifier
    ) -> None:
        """Test an item with sub-items lands at the end of an earlier category."""
        work = self._index(sample_lines, classifier).by_shortcut("w")

        new_lines, new_position = move_to_category(sample_lines, 9, work, classifier)

        assert new_lines == [
            "# Tasks",
            "",
            "## Work",
            "- [ ] Write report",
            "  - gather numbers",
            "- [x] [p1] Send invoice",
            "",
            "- [ ] Buy groceries",
            "  - milk",
            "  - eggs",
            "## Personal",
            "- [ ] [p2] Call mom",
        ]
        assert new_position == 8

    def test_move_down_into_later_category(
        self, sample_lines: list[str], classifier: LineClassifier
    ) -> None:
        """Test an item moved to the last category is appended to the document."""
        personal = self._index(sample_lines, classifier).by_shortcut("p")

        new_lines, new_position = move_to_category(sample_lines, 4, personal, classifier)

        assert new_lines[-2:] == ["- [ ] Write report", "  - gather numbers"]
        assert new_lines[5] == "## Personal"
        assert new_position == 11
        assert new_lines[new_position - 1] == "- [ ] Write report"

    def test_priority_tag_stripped(self, sample_lines: list[str], classifier: LineClassifier) -> None:
        """Test the moved parent loses its priority tag."""
        work = self._index(sample_lines, classifier).by_shortcut("w")

        new_lines, new_position = move_to_category(sample_lines, 12, work, classifier)

        assert new_lines[new_position - 1] == "- [ ] Call mom"
        assert classifier.category_name(new_lines[new_position]) == "Personal"

    def test_subtree_moves_verbatim(self, classifier: LineClassifier) -> None:
        """Test the line count is kept and sub-items are byte-identical."""
        lines = ["## A", "- [p3] item", "  - [x]  odd  ", "    - deeper", "## B", "- other"]
        target = self._index(lines, classifier).by_name("B")

        new_lines, new_position = move_to_category(lines, 2, target, classifier)

        assert len(new_lines) == len(lines)
        assert new_lines[new_position - 1 : new_position + 2] == [
            "- item",
            "  - [x]  odd  ",
            "    - deeper",
        ]

    def test_plan_span_covers_change(
        self, sample_lines: list[str], classifier: LineClassifier
    ) -> None:
        """Test lines outside the span are untouched."""
        work = self._index(sample_lines, classifier).by_shortcut("w")
        plan = plan_move(sample_lines, 9, work, classifier)
        new_lines = plan.apply(sample_lines)
        low, high = plan.span

        assert plan.count == 3
        assert (low, high) == (8, 11)
        assert new_lines[: low - 1] == sample_lines[: low - 1]
        assert new_lines[high:] == sample_lines[high:]

    def test_line_out_of_range(self, sample_lines: list[str], classifier: LineClassifier) -> None:
        """Test a parent line outside the document is rejected."""
        work = self._index(sample_lines, classifier).by_shortcut("w")

        with pytest.raises(DocumentError):
            plan_move(sample_lines, 13, work, classifier)

    def test_stale_target_rejected(self, sample_lines: list[str], classifier: LineClassifier) -> None:
        """Test a category whose heading is no longer at its line is rejected."""
        stale = Category(name="Work", shortcut="w", line_number=4)

        with pytest.raises(DocumentError) as exc_info:
            plan_move(sample_lines, 9, stale, classifier)

        assert "no longer at line 4" in exc_info.value.message

    def test_target_inside_subtree_rejected(self, classifier: LineClassifier) -> None:
        """Test an item cannot be moved into a heading nested under it."""
        lines = ["- a", "  ## Inner", "- b"]
        inner = self._index(lines, classifier).by_name("Inner")

        with pytest.raises(DocumentError):
            plan_move(lines, 1, inner, classifier)
