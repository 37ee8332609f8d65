"""Configuration for todo-manager.

TodoConfig is an immutable value passed explicitly to every component
(classifier, prioritizer, session). There is no module-level settings object.

Example:
    >>> config = TodoConfig(category_heading_pattern=r"^\\s*###\\s+(.+)$")
    >>> classifier = LineClassifier(config)
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from string import Formatter
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from todo_manager.errors import ConfigurationError

DEFAULT_PRIORITY_TAG_FORMAT = "{prefix} [p{priority}] {content}"
DEFAULT_PRIORITY_TAG_PATTERN = r"\[p(\d+)\]"
DEFAULT_CATEGORY_HEADING_PATTERN = r"^\s*##\s+(.+)$"

# Skip, quit and the nine priority digits.
DEFAULT_RESERVED_SHORTCUTS = frozenset({"s", "q", *"123456789"})

ENV_PREFIX = "TODO_MANAGER_"

_ENV_FIELDS = {
    "PRIORITY_FORMAT": "priority_tag_format",
    "PRIORITY_PATTERN": "priority_tag_pattern",
    "CATEGORY_PATTERN": "category_heading_pattern",
    "RESERVED": "reserved_shortcut_chars",
    "DEBUG": "debug",
    "REQUIRE_CATEGORIES": "require_categories",
}


def _require_one_group(value: str, field: str) -> str:
    try:
        compiled = re.compile(value)
    except re.error as e:
        raise ValueError(f"{field} is not a valid regular expression: {e}") from e
    if compiled.groups < 1:
        raise ValueError(f"{field} must contain a capture group")
    return value


class TodoConfig(BaseModel):
    """Settings shared by all list operations.

    Attributes:
        priority_tag_format: Template for a prioritized line. Receives
            ``prefix`` (indent, marker and checkbox), ``priority`` and ``content``.
        priority_tag_pattern: Regex finding an existing tag; group 1 is the number.
        category_heading_pattern: Regex matching a category heading; group 1 is the name.
        reserved_shortcut_chars: Characters never handed out as category shortcuts.
        debug: Emit debug notices and debug-level logs.
        require_categories: Refuse to prioritize documents without headings
            instead of falling back to priority-only mode.
    """

    model_config = ConfigDict(frozen=True)

    priority_tag_format: str = DEFAULT_PRIORITY_TAG_FORMAT
    priority_tag_pattern: str = DEFAULT_PRIORITY_TAG_PATTERN
    category_heading_pattern: str = DEFAULT_CATEGORY_HEADING_PATTERN
    reserved_shortcut_chars: frozenset[str] = DEFAULT_RESERVED_SHORTCUTS
    debug: bool = False
    require_categories: bool = False

    @field_validator("priority_tag_format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        fields = {name for _, name, _, _ in Formatter().parse(value) if name}
        missing = {"prefix", "priority", "content"} - fields
        if missing:
            raise ValueError(f"priority_tag_format is missing fields: {sorted(missing)}")
        return value

    @field_validator("priority_tag_pattern")
    @classmethod
    def _check_priority_pattern(cls, value: str) -> str:
        return _require_one_group(value, "priority_tag_pattern")

    @field_validator("category_heading_pattern")
    @classmethod
    def _check_heading_pattern(cls, value: str) -> str:
        return _require_one_group(value, "category_heading_pattern")

    @field_validator("reserved_shortcut_chars", mode="before")
    @classmethod
    def _split_reserved(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [c for c in value.replace(",", "") if not c.isspace()]
        return value

    @field_validator("reserved_shortcut_chars")
    @classmethod
    def _check_reserved(cls, value: frozenset[str]) -> frozenset[str]:
        bad = sorted(c for c in value if len(c) != 1)
        if bad:
            raise ValueError(f"reserved_shortcut_chars must be single characters, got {bad}")
        return value

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def create(cls, **values: Any) -> TodoConfig:
        """Build a config, converting pydantic validation errors to ConfigurationError."""
        try:
            return cls(**values)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(p) for p in first.get("loc", ())) or None
            raise ConfigurationError(
                f"Invalid configuration: {first.get('msg', e)}",
                field=field,
                details={"errors": len(e.errors())},
            ) from e

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: Any) -> TodoConfig:
        """Build a config from ``TODO_MANAGER_*`` environment variables.

        Explicit keyword overrides win over the environment.
        """
        environ = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for suffix, field in _ENV_FIELDS.items():
            raw = environ.get(ENV_PREFIX + suffix)
            if raw is not None and raw != "":
                values[field] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.create(**values)
