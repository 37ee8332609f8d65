"""Category index and shortcut assignment.

Categories are the document's heading lines. Each gets a one-character
shortcut that is easy to guess from its name (first letters of words first),
never colliding with the prompt's own keys (skip, quit, priority digits).
"""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator, Sequence

from todo_manager.config import DEFAULT_RESERVED_SHORTCUTS
from todo_manager.document.classifier import LineClassifier
from todo_manager.document.models import Category
from todo_manager.logging import get_logger

logger = get_logger("document.categories")

# Returned when every candidate character is taken.
SHORTCUT_EXHAUSTED = "?"

UNCATEGORIZED = "Uncategorized"


def _shortcut_candidates(name: str) -> Iterator[str]:
    for word in name.split():
        yield word[0].lower()
    for char in name.lower():
        if "a" <= char <= "z":
            yield char
    yield from string.ascii_lowercase
    yield "0"


def assign_shortcut(
    name: str,
    used: set[str],
    reserved: Iterable[str] = DEFAULT_RESERVED_SHORTCUTS,
) -> str:
    """Pick a shortcut for a category name.

    Candidates in order: first letter of each word, the remaining letters of
    the name, a-z, then 0. The reserved characters and the exhaustion
    sentinel are added to ``used`` before searching. The chosen shortcut is
    not added to ``used``; the caller records it.

    Args:
        name: Category name.
        used: Shortcuts already taken in this scan. Updated with ``reserved``
            and the sentinel.
        reserved: Characters that must never be assigned.

    Returns:
        The shortcut, or SHORTCUT_EXHAUSTED when nothing is free.
    """
    used.update(reserved)
    used.add(SHORTCUT_EXHAUSTED)
    for candidate in _shortcut_candidates(name):
        if candidate not in used:
            return candidate
    logger.warning("shortcuts_exhausted", category=name)
    return SHORTCUT_EXHAUSTED


class CategoryIndex:
    """Ordered categories of one document snapshot.

    Build a fresh index with scan() for every operation; line numbers go
    stale as soon as the document is edited.

    Example:
        >>> index = CategoryIndex.scan(["## A", "- x", "## B", "- y"], classifier)
        >>> index.category_at(4).name
        'B'
    """

    def __init__(self, categories: Sequence[Category] = ()) -> None:
        self._categories = list(categories)
        self._by_shortcut: dict[str, Category] = {}
        for category in self._categories:
            if category.shortcut != SHORTCUT_EXHAUSTED:
                self._by_shortcut.setdefault(category.shortcut, category)

    @classmethod
    def scan(cls, lines: Sequence[str], classifier: LineClassifier) -> CategoryIndex:
        """Collect every heading line in document order."""
        reserved = classifier.config.reserved_shortcut_chars
        used: set[str] = set()
        categories: list[Category] = []

        for line_number, line in enumerate(lines, start=1):
            if not classifier.is_category_heading(line):
                continue
            name = classifier.category_name(line)
            shortcut = assign_shortcut(name, used, reserved)
            used.add(shortcut)
            categories.append(Category(name=name, shortcut=shortcut, line_number=line_number))

        logger.debug("categories_scanned", count=len(categories), line_count=len(lines))
        return cls(categories)

    # =========================================================================
    # Lookup
    # =========================================================================

    def category_at(self, line_number: int) -> Category | None:
        """Category containing ``line_number``: the last heading strictly before it."""
        for category in reversed(self._categories):
            if category.line_number < line_number:
                return category
        return None

    def by_shortcut(self, shortcut: str) -> Category | None:
        return self._by_shortcut.get(shortcut)

    def by_name(self, name: str) -> Category | None:
        for category in self._categories:
            if category.name == name:
                return category
        return None

    @staticmethod
    def end_of(category: Category, lines: Sequence[str], classifier: LineClassifier) -> int:
        """Line number one past the category's last line.

        Scans forward from the heading for the next heading; returns
        ``len(lines) + 1`` when the category runs to the end of the document.
        """
        for line_number in range(category.line_number + 1, len(lines) + 1):
            if classifier.is_category_heading(lines[line_number - 1]):
                return line_number
        return len(lines) + 1

    # =========================================================================
    # Container protocol
    # =========================================================================

    @property
    def categories(self) -> list[Category]:
        return list(self._categories)

    @property
    def names(self) -> list[str]:
        return [c.name for c in self._categories]

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __bool__(self) -> bool:
        return bool(self._categories)

    def __repr__(self) -> str:
        shortcuts = ", ".join(f"{c.shortcut}={c.name}" for c in self._categories)
        return f"CategoryIndex({shortcuts})"
