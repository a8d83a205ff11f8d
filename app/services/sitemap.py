import datetime
from typing import Iterable, List, NamedTuple, Optional
from xml.sax.saxutils import escape

from app.schemas.blog import BlogPost
from app.services.seo import post_url


class SitemapEntry(NamedTuple):
    loc: str
    changefreq: str
    priority: float
    lastmod: Optional[str] = None


def build_entries(
    base_url: str,
    static_pages: Iterable[str],
    posts: Iterable[BlogPost],
    course_slugs: Iterable[str] = (),
    today: datetime.date | None = None,
) -> List[SitemapEntry]:
    base = base_url.rstrip("/")
    lastmod = (today or datetime.date.today()).isoformat()

    entries = []
    pages = list(static_pages) + [f"/courses/{slug}" for slug in course_slugs]
    for page in pages:
        if page == "":
            entries.append(SitemapEntry(base, "daily", 1.0, lastmod))
        elif page.startswith("/courses/"):
            entries.append(SitemapEntry(f"{base}{page}", "weekly", 0.8, lastmod))
        else:
            entries.append(SitemapEntry(f"{base}{page}", "weekly", 0.7, lastmod))

    for post in posts:
        entries.append(
            SitemapEntry(post_url(base, post.slug), "monthly", 0.6, post.date[:10])
        )
    return entries


def render_sitemap(entries: Iterable[SitemapEntry]) -> str:
    urls = []
    for entry in entries:
        lastmod = f"<lastmod>{escape(entry.lastmod)}</lastmod>" if entry.lastmod else ""
        urls.append(
            f"<url><loc>{escape(entry.loc)}</loc>{lastmod}"
            f"<changefreq>{entry.changefreq}</changefreq>"
            f"<priority>{entry.priority:.1f}</priority></url>"
        )
    body = "\n".join(urls)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        f"{body}\n"
        "</urlset>"
    )
