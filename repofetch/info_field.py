"""The kinds of information shown and the interface each field provides."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Container
from enum import Enum
from typing import ClassVar


class InfoType(Enum):
    """Every field that can appear in the output, in display order."""

    TITLE = "title"
    PROJECT = "project"
    HEAD = "head"
    PENDING = "pending"
    VERSION = "version"
    CREATED = "created"
    LANGUAGES = "languages"
    DEPENDENCIES = "dependencies"
    AUTHORS = "authors"
    LAST_CHANGE = "last-change"
    CONTRIBUTORS = "contributors"
    REPO = "repo"
    COMMITS = "commits"
    LINES_OF_CODE = "lines-of-code"
    SIZE = "size"
    LICENSE = "license"


class InfoField(ABC):
    """A labelled piece of repository information."""

    TYPE: ClassVar[InfoType]

    @abstractmethod
    def value(self) -> str:
        """The text shown for this field."""

    @abstractmethod
    def title(self) -> str:
        """The label shown before the value."""

    def get(self, disabled_fields: Container[InfoType]) -> str | None:
        """The value, or None if the field is disabled or empty."""
        field_value = self.value()
        if self.TYPE in disabled_fields or not field_value:
            return None
        return field_value