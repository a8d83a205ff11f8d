import logging
from typing import Tuple

import frontmatter
import yaml
from frontmatter.default_handlers import YAMLHandler
from pydantic import ValidationError

from app.exceptions import MalformedContent
from app.schemas.blog import PostFrontMatter

logger = logging.getLogger(__name__)

# posts only use ---fenced YAML, never TOML or JSON front-matter
_handler = YAMLHandler()


def parse_post(markdown: str, slug: str) -> Tuple[PostFrontMatter, str]:
    """Split a post file into validated front-matter and its markdown body."""
    if not _handler.detect(markdown):
        raise MalformedContent(f"Post {slug!r} has no front-matter block", slug=slug)

    try:
        parsed = frontmatter.loads(markdown, handler=_handler)
    except (yaml.YAMLError, ValueError) as e:
        raise MalformedContent(
            f"Post {slug!r} has unparsable front-matter: {e}", slug=slug
        ) from e

    try:
        metadata = PostFrontMatter.model_validate(parsed.metadata or {})
    except ValidationError as e:
        fields = ", ".join(_describe_errors(e))
        logger.warning(f"Invalid front-matter in post {slug}: {fields}")
        raise MalformedContent(
            f"Post {slug!r} has invalid front-matter: {fields}", slug=slug
        ) from e

    return metadata, parsed.content


def _describe_errors(error: ValidationError):
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"]) or "front-matter"
        yield f"{field} ({item['msg']})"
