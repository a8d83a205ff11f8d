import math
from typing import Optional, Sequence

from app.schemas.blog import PostPage, PostSummary


def paginate(
    posts: Sequence[PostSummary],
    page: int,
    per_page: int,
    tag: Optional[str] = None,
) -> PostPage:
    """Slice an already sorted post list into one page.

    Out-of-range page numbers are clamped to the first or last page, so an
    empty listing still yields page 1 of 1.
    """
    if per_page < 1:
        raise ValueError("per_page must be at least 1")

    total = len(posts)
    total_pages = max(1, math.ceil(total / per_page))
    page = min(max(page, 1), total_pages)
    start = (page - 1) * per_page

    return PostPage(
        items=list(posts[start : start + per_page]),
        page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages,
        has_previous=page > 1,
        has_next=page < total_pages,
        tag=tag,
    )
