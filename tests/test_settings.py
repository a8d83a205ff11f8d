from pathlib import Path

from app.settings import Settings, choose_env_file


def test_defaults():
    s = Settings()
    assert s.BLOG_FILE_EXTENSION == ".md"
    assert s.BLOG_RESERVED_FILENAME == "README.md"
    assert s.POSTS_PER_PAGE == 9


def test_content_dir_from_environment(monkeypatch):
    monkeypatch.setenv("BLOG_CONTENT_DIR", "/srv/site/content/blogs")
    monkeypatch.setenv("POSTS_PER_PAGE", "12")

    s = Settings()

    assert s.BLOG_CONTENT_DIR == Path("/srv/site/content/blogs")
    assert s.POSTS_PER_PAGE == 12


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
