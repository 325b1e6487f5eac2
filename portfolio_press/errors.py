"""
Error taxonomy for the publish pipeline.

Every fatal condition raised by the pipeline derives from PublishError so
the CLI can report it as a single line and exit non-zero. Nothing here is
retried: inputs are local files and the transform is deterministic.
"""

from __future__ import annotations

from pathlib import Path


class PublishError(Exception):
    """Base class for errors that abort a publish run."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} ({self.path})"


class ConfigError(PublishError):
    """Configuration file is unreadable or holds invalid values."""


class ContentLoadError(PublishError):
    """An article has malformed or missing metadata."""


class ResourceNotFoundError(PublishError):
    """A referenced structured-data resource does not exist."""


class ResourceDecodeError(PublishError):
    """A structured-data resource exists but cannot be decoded."""


class SlugCollisionError(PublishError):
    """Two entities map to the same output path."""

    def __init__(self, slug: str, first: str, second: str):
        super().__init__(f"Slug collision on '{slug}': '{first}' and '{second}'")
        self.slug = slug
        self.first = first
        self.second = second


class RenderError(PublishError):
    """A renderer was handed content that violates its invariants."""


class OutputError(PublishError):
    """The output tree cannot be written or would clobber content."""
