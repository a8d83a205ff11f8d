import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app import dependencies as deps
from app.exceptions import PostNotFound
from app.schemas.blog import BlogPost, PostMetadata, PostPage, StructuredData
from app.services.posts_service import PostsService
from app.services.seo import build_blog_structured_data, build_post_metadata
from app.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=PostPage)
def list_posts(
    page: int = Query(1),
    per_page: Optional[int] = Query(None, ge=1),
    tag: Optional[str] = Query(None),
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    """Get one page of post summaries, newest first."""
    size = min(
        per_page or current_settings.POSTS_PER_PAGE,
        current_settings.MAX_POSTS_PER_PAGE,
    )
    try:
        return service.list_page(page=page, per_page=size, tag=tag)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/blog/slugs", response_model=List[str])
def list_slugs(service: PostsService = Depends(deps.get_posts_service)):
    """Get every published slug, for static path generation."""
    try:
        return sorted(service.list_slugs())
    except Exception as e:
        logger.error(f"Unexpected error listing slugs: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/blog/structured-data")
def get_structured_data(
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(deps.get_settings),
) -> StructuredData:
    """schema.org JSON-LD for the blog index page."""
    try:
        posts = service.list_posts()
    except Exception as e:
        logger.error(f"Unexpected error building structured data: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
    return build_blog_structured_data(
        posts, current_settings.SITE_NAME, current_settings.BASE_SITE_URL
    )


@router.get("/posts/{slug}", response_model=BlogPost)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        return service.get_post(slug)
    except PostNotFound:
        raise HTTPException(status_code=404, detail="Post not found")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/posts/{slug}/meta", response_model=PostMetadata)
def get_post_metadata(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    """Get the SEO metadata of a single post."""
    try:
        post = service.get_post(slug)
    except PostNotFound:
        raise HTTPException(status_code=404, detail="Post not found")
    except Exception as e:
        logger.error(f"Unexpected error retrieving metadata for {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
    return build_post_metadata(
        post, current_settings.SITE_NAME, current_settings.BASE_SITE_URL
    )
