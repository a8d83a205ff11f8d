from fastapi import Depends

from app.repos.posts_repo import FilesystemPostsRepo
from app.services.markdown_renderer import MarkdownRenderer
from app.services.posts_service import PostsService
from app.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilesystemPostsRepo(
        current_settings.BLOG_CONTENT_DIR,
        extension=current_settings.BLOG_FILE_EXTENSION,
        reserved_filename=current_settings.BLOG_RESERVED_FILENAME,
    )


def get_markdown_renderer():
    return MarkdownRenderer()


def get_posts_service(
    repo=Depends(get_posts_repo),
    renderer=Depends(get_markdown_renderer),
):
    return PostsService(repo=repo, renderer=renderer)
