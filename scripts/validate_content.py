import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from app.exceptions import ContentError
from app.repos.posts_repo import FilesystemPostsRepo
from app.services.markdown_renderer import MarkdownRenderer
from app.services.posts_service import PostsService
from app.settings import settings

logger = logging.getLogger(__name__)


def validate(service: PostsService) -> Tuple[int, List[Tuple[str, str]]]:
    """Load every post and collect failures instead of stopping at the first."""
    problems = []
    slugs = sorted(service.list_slugs())
    for slug in slugs:
        try:
            service.get_post(slug)
        except ContentError as e:
            problems.append((slug, str(e)))
    return len(slugs), problems


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Check blog markdown files.")
    parser.add_argument(
        "content_dir",
        nargs="?",
        type=Path,
        default=settings.BLOG_CONTENT_DIR,
        help="directory holding the blog markdown files",
    )
    args = parser.parse_args(argv)

    repo = FilesystemPostsRepo(
        args.content_dir,
        extension=settings.BLOG_FILE_EXTENSION,
        reserved_filename=settings.BLOG_RESERVED_FILENAME,
    )
    service = PostsService(repo=repo, renderer=MarkdownRenderer())

    try:
        checked, problems = validate(service)
    except ContentError as e:
        logger.error(f"Validation failed: {e}")
        return 1

    for slug, message in problems:
        print(f"{slug}: {message}")
    logger.info(f"Checked {checked} posts, {len(problems)} broken")
    return 1 if problems else 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    sys.exit(main())
