import logging

from markdown_it import MarkdownIt

from app.exceptions import RenderError

logger = logging.getLogger(__name__)


class MarkdownRenderer:
    """CommonMark to HTML, with raw HTML blocks passed through."""

    def __init__(self, md: MarkdownIt | None = None):
        self.md = md or MarkdownIt("commonmark", {"html": True})

    def render(self, body: str, slug: str | None = None) -> str:
        try:
            return self.md.render(body)
        except Exception as e:
            logger.error(f"Failed to render markdown for post {slug}: {e}")
            raise RenderError(f"Cannot render post {slug!r}: {e}", slug=slug) from e
