import logging
from typing import Iterable, List, Optional, Set

from app.exceptions import ContentError
from app.schemas.blog import BlogPost, PostPage
from app.services.content_parser import parse_post
from app.services.pagination import paginate

logger = logging.getLogger(__name__)


class PostsService:
    """Read side of the blog: every call goes back to the content files."""

    def __init__(self, repo, renderer):
        self.repo = repo
        self.renderer = renderer

    def list_slugs(self) -> Set[str]:
        return self.repo.list_slugs()

    def get_post(self, slug: str) -> BlogPost:
        markdown = self.repo.read_post(slug)
        metadata, body = parse_post(markdown, slug)
        html = self.renderer.render(body, slug=slug)
        return BlogPost(slug=slug, content=html, **metadata.model_dump())

    def list_posts(self) -> List[BlogPost]:
        """All posts, newest first.

        A single broken file fails the whole listing.
        """
        posts = []
        for slug in self.list_slugs():
            try:
                posts.append(self.get_post(slug))
            except ContentError as e:
                logger.error(f"Failed to load post {slug}: {e}")
                raise
        return sort_posts(posts)

    def list_page(
        self, page: int = 1, per_page: int = 9, tag: Optional[str] = None
    ) -> PostPage:
        posts = self.list_posts()
        if tag:
            posts = filter_by_tag(posts, tag)
        return paginate([p.summary() for p in posts], page, per_page, tag=tag)


def sort_posts(posts: Iterable[BlogPost]) -> List[BlogPost]:
    # slug ascending first, then a stable sort on date descending
    by_slug = sorted(posts, key=lambda p: p.slug)
    return sorted(by_slug, key=lambda p: p.date, reverse=True)


def filter_by_tag(posts: Iterable[BlogPost], tag: str) -> List[BlogPost]:
    wanted = tag.strip().casefold()
    return [p for p in posts if any(t.casefold() == wanted for t in p.tags)]
