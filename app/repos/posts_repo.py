import logging
import os
from pathlib import Path
from typing import Set

from app.exceptions import MalformedContent, PostNotFound, StorageUnavailable

logger = logging.getLogger(__name__)


class FilesystemPostsRepo:
    """Markdown files in one directory, one file per slug."""

    def __init__(
        self,
        content_dir: Path,
        extension: str = ".md",
        reserved_filename: str = "README.md",
    ):
        self.content_dir = Path(content_dir)
        self.extension = extension
        self.reserved_filename = reserved_filename

    def list_slugs(self) -> Set[str]:
        try:
            entries = list(self.content_dir.iterdir())
        except OSError as e:
            logger.error(f"Content directory {self.content_dir} is unavailable: {e}")
            raise StorageUnavailable(
                f"Cannot read content directory {self.content_dir}",
                path=self.content_dir,
            ) from e

        return {
            entry.name.removesuffix(self.extension)
            for entry in entries
            if self._is_content_file(entry)
        }

    def read_post(self, slug: str) -> str:
        if not self.content_dir.is_dir():
            raise StorageUnavailable(
                f"Content directory {self.content_dir} does not exist",
                slug=slug,
                path=self.content_dir,
            )

        path = self.path_for(slug)
        if path is None or not path.is_file():
            raise PostNotFound(f"No post named {slug!r}", slug=slug, path=path)

        try:
            return path.read_text(encoding="utf-8-sig")
        except FileNotFoundError as e:
            # removed between the check and the read
            raise PostNotFound(f"No post named {slug!r}", slug=slug, path=path) from e
        except UnicodeDecodeError as e:
            raise MalformedContent(
                f"Post {slug!r} is not valid UTF-8", slug=slug, path=path
            ) from e
        except OSError as e:
            logger.error(f"Failed to read {path}: {e}")
            raise StorageUnavailable(
                f"Cannot read post {slug!r}", slug=slug, path=path
            ) from e

    def path_for(self, slug: str) -> Path | None:
        """Map a slug to its file, or None when it cannot name a post."""
        if not slug or slug in (".", ".."):
            return None
        if "/" in slug or os.sep in slug or (os.altsep and os.altsep in slug):
            return None
        filename = f"{slug}{self.extension}"
        if filename == self.reserved_filename:
            return None
        return self.content_dir / filename

    def _is_content_file(self, entry: Path) -> bool:
        return (
            entry.name.endswith(self.extension)
            and entry.name != self.reserved_filename
            and len(entry.name) > len(self.extension)
            and entry.is_file()
        )
