"""Errors raised while loading blog content from disk."""

from pathlib import Path
from typing import Optional


class ContentError(Exception):
    """Base class for every blog content failure."""

    def __init__(self, message: str, *, slug: Optional[str] = None, path: Optional[Path] = None):
        super().__init__(message)
        self.slug = slug
        self.path = path


class StorageUnavailable(ContentError):
    """The content directory (or a file in it) cannot be read."""


class PostNotFound(ContentError):
    """No content file exists for the requested slug."""


class MalformedContent(ContentError):
    """Front-matter is missing, unparsable or lacks a required field."""


class RenderError(ContentError):
    """The markdown body could not be converted to HTML."""
