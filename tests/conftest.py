"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the site i18n test suite.
"""
import json
import os

import httpx
import pytest
from bs4 import BeautifulSoup

# Use in-memory SQLite for tests
os.environ.setdefault("DATABASE_URL", ":memory:")


class MemoryStorage:
    """Dict-backed stand-in for the preferences table."""

    def __init__(self, items: dict | None = None):
        self.items = dict(items or {})
        self.writes: list[tuple[str, str]] = []

    def get_item(self, key):
        return self.items.get(key)

    def set_item(self, key, value):
        self.items[key] = value
        self.writes.append((key, value))


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def make_storage():
    """Factory for MemoryStorage pre-filled with items."""
    return MemoryStorage


@pytest.fixture
def payloads() -> dict:
    """Namespace → payload for a visitor on the services page."""
    return {
        "services": {
            "meta": {"title": "Services", "description": "What we do"},
            "hero": {"title": "Our services"},
            "shared": "from services",
            "items": [{"name": "Connectivity"}, {"name": "Analytics"}],
            "empty": "",
            "flag": False,
            "nothing": None,
        },
        "solutions": {"shared": "from solutions", "only_solutions": "solutions value"},
        "header": {"nav": {"home": "Home"}, "shared": "from header", "cta": "Talk to us"},
        "footer": {"copyright": "© Example", "shared": "from footer"},
    }


@pytest.fixture
def registry(payloads):
    from src.i18n.translator import TranslationRegistry

    reg = TranslationRegistry(payloads)
    reg.current_page = "services"
    return reg


# ── Static site on disk ───────────────────────────────────────────────────────

PAGE_HTML = """<!DOCTYPE html>
<html lang="zh-CN">
<head><title>placeholder</title></head>
<body>
  <div class="sticky-header__content"></div>
  <header id="site-header"></header>
  <main>
    <h1 data-i18n="hero.title">hero.title</h1>
    <p data-i18n-html="hero.lead">lead</p>
    <input data-i18n-placeholder="form.email" placeholder="">
  </main>
  <footer id="site-footer"></footer>
</body>
</html>
"""

HEADER_HTML = """<nav>
  <a data-i18n="nav.home">nav.home</a>
  <div class="lang-switcher">
    <button data-lang="zh" class="active">中文</button>
    <button data-lang="en">EN</button>
  </div>
</nav>"""

FOOTER_HTML = '<p data-i18n="copyright">copyright</p>'

SITE_CONTENT = {
    "header.zh.json": {"nav": {"home": "首页"}},
    "header.en.json": {"nav": {"home": "Home"}},
    "footer.zh.json": {"copyright": "© 示例"},
    "footer.en.json": {"copyright": "© Example"},
    "index.zh.json": {"meta": {"title": "首页"}, "hero": {"title": "欢迎", "lead": "<b>你好</b>"}},
    "index.en.json": {"meta": {"title": "Home"}, "hero": {"title": "Welcome", "lead": "<b>Hello</b>"}},
    "services.zh.json": {
        "meta": {"title": "服务", "description": "我们的服务"},
        "hero": {"title": "服务"},
        "form": {"email": "邮箱"},
    },
    "services.en.json": {
        "meta": {"title": "Services", "description": "Our services"},
        "hero": {"title": "Services"},
        "form": {"email": "Email"},
    },
    "contact.zh.json": {"hero": {"title": "联系我们"}},
    # contact.en.json deliberately absent → 404
}


@pytest.fixture
def site_dir(tmp_path):
    root = tmp_path / "site"
    (root / "content").mkdir(parents=True)
    for page in ("index", "services", "contact"):
        (root / f"{page}.html").write_text(PAGE_HTML, encoding="utf-8")
    (root / "header.html").write_text(HEADER_HTML, encoding="utf-8")
    (root / "footer.html").write_text(FOOTER_HTML, encoding="utf-8")
    for name, payload in SITE_CONTENT.items():
        (root / "content" / name).write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return root


@pytest.fixture
def site_client_factory(site_dir):
    from src.site.transport import SiteDirectoryTransport

    def factory() -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url="http://site.test/", transport=SiteDirectoryTransport(site_dir)
        )

    return factory


@pytest.fixture
def page_document() -> BeautifulSoup:
    return BeautifulSoup(PAGE_HTML, "html.parser")
