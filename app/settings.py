from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Blog content on disk
    BLOG_CONTENT_DIR: Path = Path("content/blogs")
    BLOG_FILE_EXTENSION: str = ".md"
    BLOG_RESERVED_FILENAME: str = "README.md"

    # Listing
    POSTS_PER_PAGE: int = 9
    MAX_POSTS_PER_PAGE: int = 50

    # Site
    SITE_NAME: str = "Miraclin Technologies"
    BASE_SITE_URL: str = "https://miracl.in"
    STATIC_PAGES: List[str] = [
        "",
        "/about",
        "/contact",
        "/courses",
        "/career",
        "/team",
        "/research",
        "/project-support",
        "/faq",
        "/privacy",
        "/blog",
        "/locations/thanjavur",
        "/ai-training-thanjavur",
    ]
    COURSE_SLUGS: List[str] = [
        "python-programming",
        "devsecops",
        "cloud-computing",
        "devops",
        "blockchain-development",
        "linux",
        "azure",
        "aws",
        "terraform",
        "ai-agents",
        "full-stack-ai-devsecops-cloud",
        "job-assistance",
    ]

    # Logging
    LOG_LEVEL: str = "INFO"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
