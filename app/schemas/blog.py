import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostFrontMatter(BaseModel):
    """Metadata block at the top of a blog markdown file."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1)
    date: str = Field(min_length=1)
    author: str = Field(min_length=1)
    excerpt: str = Field(min_length=1)
    image: str
    tags: List[str] = Field(default_factory=list)

    @field_validator("date", mode="before")
    @classmethod
    def _convert_date(cls, value):
        # YAML turns unquoted 2024-01-01 into a date object
        if isinstance(value, (datetime.date, datetime.datetime)):
            return value.isoformat()
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple, set)):
            # YAML reads bare years and numbers as ints
            return [str(item) for item in value if item is not None and item != ""]
        return value


class PostSummary(BaseModel):
    slug: str
    title: str
    date: str
    author: str
    excerpt: str
    image: str
    tags: List[str] = Field(default_factory=list)


class BlogPost(PostSummary):
    content: str

    def summary(self) -> PostSummary:
        return PostSummary(**self.model_dump(exclude={"content"}))


class PostPage(BaseModel):
    items: List[PostSummary] = Field(default_factory=list)
    page: int
    per_page: int
    total: int
    total_pages: int
    has_previous: bool = False
    has_next: bool = False
    tag: Optional[str] = None


class OpenGraph(BaseModel):
    title: str
    description: str
    images: List[str] = Field(default_factory=list)
    type: str = "article"
    publishedTime: Optional[str] = None
    authors: List[str] = Field(default_factory=list)


class PostMetadata(BaseModel):
    title: str
    description: str
    keywords: str = ""
    canonical: Optional[str] = None
    openGraph: OpenGraph


StructuredData = Dict[str, Any]
