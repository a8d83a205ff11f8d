from typing import Iterable

from app.schemas.blog import BlogPost, OpenGraph, PostMetadata, StructuredData


def post_url(base_url: str, slug: str) -> str:
    return f"{base_url.rstrip('/')}/blog/{slug}"


def build_post_metadata(post: BlogPost, site_name: str, base_url: str) -> PostMetadata:
    """Page metadata for a post detail page."""
    return PostMetadata(
        title=f"{post.title} - {site_name} Blog",
        description=post.excerpt,
        keywords=", ".join(post.tags),
        canonical=post_url(base_url, post.slug),
        openGraph=OpenGraph(
            title=post.title,
            description=post.excerpt,
            images=[post.image] if post.image else [],
            publishedTime=post.date,
            authors=[post.author],
        ),
    )


def build_blog_structured_data(
    posts: Iterable[BlogPost], site_name: str, base_url: str
) -> StructuredData:
    """schema.org Blog JSON-LD listing every post."""
    base = base_url.rstrip("/")
    return {
        "@context": "https://schema.org",
        "@type": "Blog",
        "name": f"{site_name} Blog",
        "url": f"{base}/blog",
        "publisher": {"@type": "Organization", "name": site_name, "url": base},
        "blogPost": [
            {
                "@type": "BlogPosting",
                "headline": post.title,
                "description": post.excerpt,
                "image": post.image,
                "datePublished": post.date,
                "author": {"@type": "Person", "name": post.author},
                "keywords": ", ".join(post.tags),
                "url": post_url(base, post.slug),
            }
            for post in posts
        ],
    }
