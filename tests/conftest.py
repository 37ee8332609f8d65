"""
Root conftest.py for todo-manager tests.

This file provides:
1. Common pytest markers for test categorization
2. Shared fixtures (classifier, sample documents, buffers)
3. A scripted prompter for driving interactive runs
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import pytest

from todo_manager.config import TodoConfig
from todo_manager.document.buffer import InMemoryBuffer
from todo_manager.document.classifier import LineClassifier
from todo_manager.interaction import PromptAction, RecordingNotifier
from todo_manager.logging import ROOT_LOGGER_NAME

# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        norm = str(item.fspath).replace("\\", "/")
        if "/tests/unit/" in norm:
            item.add_marker(pytest.mark.unit)
        if "/tests/unit/cli/" in norm:
            item.add_marker(pytest.mark.cli)


def pytest_configure(config):
    """Register custom markers."""
    for name, desc in [
        ("unit", "Fast isolated tests"),
        ("cli", "Command line tests"),
    ]:
        config.addinivalue_line("markers", f"{name}: {desc}")


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by configure_logging() during a test."""
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)


# =============================================================================
# DOCUMENT FIXTURES
# =============================================================================


SAMPLE_DOCUMENT = [
    "# Tasks",
    "",
    "## Work",
    "- [ ] Write report",
    "  - gather numbers",
    "- [x] [p1] Send invoice",
    "",
    "## Personal",
    "- [ ] Buy groceries",
    "  - milk",
    "  - eggs",
    "- [ ] [p2] Call mom",
]


@pytest.fixture
def config() -> TodoConfig:
    """Default configuration."""
    return TodoConfig()


@pytest.fixture
def classifier(config: TodoConfig) -> LineClassifier:
    """Classifier with the default patterns."""
    return LineClassifier(config)


@pytest.fixture
def sample_lines() -> list[str]:
    """Two-category document with sub-items, a checked item and tags."""
    return list(SAMPLE_DOCUMENT)


@pytest.fixture
def sample_buffer(sample_lines: list[str]) -> InMemoryBuffer:
    """In-memory buffer holding the sample document."""
    return InMemoryBuffer(sample_lines)


@pytest.fixture
def notifier() -> RecordingNotifier:
    """Notifier that records every notice."""
    return RecordingNotifier()


# =============================================================================
# PROMPTER FIXTURES
# =============================================================================


class ScriptedPrompter:
    """Prompter that answers from a fixed list of responses.

    Records every ``(line, category)`` it was asked about. Answers ``quit``
    once the script runs out, so a run can never loop forever.

    Usage:
        prompter = ScriptedPrompter(["2", "w", "s"])
        prioritizer = Prioritizer(config, prompter, notifier)
    """

    def __init__(self, responses: Iterable[str | PromptAction] = ()):
        self.responses = list(responses)
        self.asked: list[tuple[str, str | None]] = []

    def prompt(self, line: str, category: str | None) -> str | PromptAction:
        self.asked.append((line, category))
        if not self.responses:
            return PromptAction.quit()
        return self.responses.pop(0)


@pytest.fixture
def scripted_prompter():
    """Factory for ScriptedPrompter instances."""

    def _make(*responses: str | PromptAction) -> ScriptedPrompter:
        return ScriptedPrompter(responses)

    return _make
