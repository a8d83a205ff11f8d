import textwrap
from pathlib import Path

from app.exceptions import PostNotFound, StorageUnavailable
from app.schemas.blog import BlogPost


def post_markdown(
    title="Hello",
    date="2024-01-01",
    author="Ada",
    excerpt="Short summary",
    image="/images/blog/hello.jpg",
    tags=None,
    body="Body text.",
    omit=(),
) -> str:
    """Build a post file with front-matter; fields listed in omit are left out."""
    fields = {
        "title": title,
        "date": date,
        "author": author,
        "excerpt": excerpt,
        "image": image,
    }
    if tags is not None:
        fields["tags"] = "[" + ", ".join(tags) + "]"
    lines = [f"{key}: {value}" for key, value in fields.items() if key not in omit]
    return "---\n" + "\n".join(lines) + "\n---\n" + textwrap.dedent(body).lstrip()


def write_post(content_dir: Path, slug: str, **fields) -> Path:
    path = content_dir / f"{slug}.md"
    path.write_text(post_markdown(**fields), encoding="utf-8")
    return path


def make_post(slug="hello", date="2024-01-01", tags=None, **fields) -> BlogPost:
    data = {
        "title": slug.replace("-", " ").title(),
        "author": "Ada",
        "excerpt": f"About {slug}",
        "image": f"/images/blog/{slug}.jpg",
        "content": "<p>Body</p>\n",
    }
    data.update(fields)
    return BlogPost(slug=slug, date=date, tags=tags or [], **data)


class FakeRepo:
    """
    In-memory stand-in for FilesystemPostsRepo, keyed by slug.
    Pass docs=None to simulate a missing content directory.
    """

    def __init__(self, docs: dict[str, str] | None):
        self.docs = docs
        self.reads = []

    def list_slugs(self):
        if self.docs is None:
            raise StorageUnavailable("content directory missing")
        return set(self.docs)

    def read_post(self, slug: str) -> str:
        self.reads.append(slug)
        if self.docs is None:
            raise StorageUnavailable("content directory missing", slug=slug)
        if slug not in self.docs:
            raise PostNotFound(f"No post named {slug!r}", slug=slug)
        return self.docs[slug]


class FakeRenderer:
    """
    Renderer stand-in that wraps the body so tests can see it was used.
    """

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls = []

    def render(self, body: str, slug: str | None = None) -> str:
        self.calls.append(slug)
        if self.error:
            raise self.error
        return f"<rendered>{body.strip()}</rendered>"


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, posts=None, error: Exception | None = None):
        self.posts = posts or []
        self.error = error
        self.page_calls = []

    def _check(self):
        if self.error:
            raise self.error

    def list_slugs(self):
        self._check()
        return {p.slug for p in self.posts}

    def list_posts(self):
        self._check()
        return list(self.posts)

    def get_post(self, slug: str):
        self._check()
        for post in self.posts:
            if post.slug == slug:
                return post
        raise PostNotFound(f"No post named {slug!r}", slug=slug)

    def list_page(self, page=1, per_page=9, tag=None):
        from app.services.pagination import paginate

        self._check()
        self.page_calls.append((page, per_page, tag))
        return paginate([p.summary() for p in self.posts], page, per_page, tag=tag)
