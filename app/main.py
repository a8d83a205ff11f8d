import logging

from fastapi import FastAPI

from app.routers import posts, sitemap
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Miraclin Blog API",
    description="Blog content for the Miraclin Technologies website",
)

app.include_router(posts.router)
app.include_router(sitemap.router)

logger.info(f"Serving blog content from {settings.BLOG_CONTENT_DIR}")


@app.get("/")
async def root():
    return {"message": "Blog content API is running"}
