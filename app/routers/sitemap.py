import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from app import dependencies as deps
from app.services.posts_service import PostsService
from app.services.sitemap import build_entries, render_sitemap
from app.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sitemap.xml")
def sitemap(
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    try:
        posts = service.list_posts()
    except Exception as e:
        logger.error(f"Sitemap error: {e}")
        raise HTTPException(status_code=500, detail="Failed to build sitemap")

    entries = build_entries(
        current_settings.BASE_SITE_URL,
        current_settings.STATIC_PAGES,
        posts,
        course_slugs=current_settings.COURSE_SLUGS,
    )
    return Response(
        content=render_sitemap(entries),
        media_type="application/xml",
        headers={"Cache-Control": "no-cache"},
    )
