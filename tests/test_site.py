"""
tests/test_site.py
───────────────────
Tests for the local site transport, fragment includer and page renderer.
"""
from pathlib import Path

import httpx
import pytest
from bs4 import BeautifulSoup

from src.i18n.events import FOOTER_LOADED, HEADER_LOADED, EventBus
from src.layout.navbar import PAGE_LINKS
from src.site.includes import FragmentIncluder
from src.site.renderer import PageNotFoundError, SiteRenderer
from src.site.transport import SiteDirectoryTransport


class TestSiteDirectoryTransport:
    @pytest.mark.asyncio
    async def test_serves_json(self, site_client_factory):
        async with site_client_factory() as client:
            response = await client.get("content/index.zh.json", params={"_": "abc"})
        assert response.status_code == 200
        assert response.headers["Content-Type"] == "application/json"
        assert response.json()["hero"]["title"] == "欢迎"

    @pytest.mark.asyncio
    async def test_missing_file(self, site_client_factory):
        async with site_client_factory() as client:
            response = await client.get("content/contact.en.json")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_directory_serves_index(self, site_client_factory):
        async with site_client_factory() as client:
            response = await client.get("/")
        assert response.status_code == 200
        assert "hero.title" in response.text

    @pytest.mark.asyncio
    async def test_escape_rejected(self, site_dir):
        (site_dir.parent / "secret.txt").write_text("nope")
        transport = SiteDirectoryTransport(site_dir)
        request = httpx.Request("GET", "http://site.test/%2E%2E/secret.txt")
        response = await transport.handle_async_request(request)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_only_reads(self, site_client_factory):
        async with site_client_factory() as client:
            response = await client.post("content/index.zh.json", json={})
        assert response.status_code == 405


class TestFragmentIncluder:
    @pytest.mark.asyncio
    async def test_injects_and_announces(self, site_client_factory, page_document):
        bus = EventBus()
        seen = []
        bus.subscribe(HEADER_LOADED, lambda: seen.append("header"))
        bus.subscribe(FOOTER_LOADED, lambda: seen.append("footer"))

        async with site_client_factory() as client:
            result = await FragmentIncluder(client, page_document, bus).include_all()

        assert result == (True, True)
        assert sorted(seen) == ["footer", "header"]
        assert page_document.select_one("#site-header nav") is not None
        assert page_document.select_one(".sticky-header__content nav") is not None
        assert page_document.select_one("#site-footer p")["data-i18n"] == "copyright"

    @pytest.mark.asyncio
    async def test_missing_fragment_emits_nothing(self, site_dir, site_client_factory, page_document):
        (site_dir / "footer.html").unlink()
        bus = EventBus()
        seen = []
        bus.subscribe(FOOTER_LOADED, lambda: seen.append("footer"))

        async with site_client_factory() as client:
            header, footer = await FragmentIncluder(client, page_document, bus).include_all()

        assert header is True
        assert footer is False
        assert seen == []

    @pytest.mark.asyncio
    async def test_page_without_regions(self, site_client_factory):
        doc = BeautifulSoup("<html><body></body></html>", "html.parser")
        async with site_client_factory() as client:
            assert await FragmentIncluder(client, doc, EventBus()).include_all() == (False, False)


class TestSiteRenderer:
    @pytest.mark.asyncio
    async def test_plain_load_uses_locale(self, site_client_factory, storage):
        renderer = SiteRenderer(storage, site_client_factory, locale=lambda: "en-US")
        rendered = await renderer.render("/services.html")
        doc = BeautifulSoup(rendered.html, "html.parser")

        assert rendered.lang == "en"
        assert rendered.page == "services"

        assert doc.h1.get_text() == "Services"
        assert doc.select_one("#site-header a").get_text() == "Home"
        assert doc.select_one("#site-footer p").get_text() == "© Example"
        assert doc.title.get_text() == "Services"
        assert storage.writes == []

    @pytest.mark.asyncio
    async def test_switch_persists_choice(self, site_client_factory, storage):
        renderer = SiteRenderer(storage, site_client_factory, locale=lambda: "en-US")
        rendered = await renderer.render("/", lang="zh")
        doc = BeautifulSoup(rendered.html, "html.parser")

        assert rendered.lang == "zh"

        assert storage.items["lang"] == "zh"
        assert doc.html["lang"] == "zh-CN"
        assert doc.h1.get_text() == "欢迎"
        assert doc.select_one(".sticky-header__content a").get_text() == "首页"

        # Next visit keeps the stored choice over the locale
        doc = BeautifulSoup((await renderer.render("/")).html, "html.parser")
        assert doc.h1.get_text() == "欢迎"

    @pytest.mark.asyncio
    async def test_unknown_path_renders_index(self, site_client_factory, storage):
        renderer = SiteRenderer(storage, site_client_factory, locale=lambda: "zh-CN")
        doc = BeautifulSoup((await renderer.render("/unknown-page.html")).html, "html.parser")
        assert doc.title.get_text() == "首页"

    @pytest.mark.asyncio
    async def test_missing_page_file(self, site_dir, site_client_factory, storage):
        (site_dir / "index.html").unlink()
        renderer = SiteRenderer(storage, site_client_factory)
        with pytest.raises(PageNotFoundError):
            await renderer.render("/")


SAMPLE_SITE = Path(__file__).resolve().parent.parent / "site"


@pytest.fixture
def sample_client_factory():
    def factory() -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url="http://site.test/", transport=SiteDirectoryTransport(SAMPLE_SITE)
        )

    return factory


class TestSampleSite:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("label,href", PAGE_LINKS)
    async def test_every_navbar_link_renders(self, label, href, sample_client_factory, storage):
        renderer = SiteRenderer(storage, sample_client_factory, locale=lambda: "zh-CN")
        rendered = await renderer.render(href)
        doc = BeautifulSoup(rendered.html, "html.parser")

        assert rendered.page == (href.strip("/") or "index")
        assert doc.select_one("#site-header a").get_text() == "首页"
        assert doc.h1.get_text() != "hero.title"

    @pytest.mark.asyncio
    async def test_contact_without_english_payload(self, sample_client_factory, storage):
        renderer = SiteRenderer(storage, sample_client_factory, locale=lambda: "en-US")
        rendered = await renderer.render("/contact")
        doc = BeautifulSoup(rendered.html, "html.parser")

        assert rendered.lang == "en"
        assert doc.html["lang"] == "en"
        # Page payload 404s: page markup stays as authored, shared fragments translate
        assert doc.h1.get_text() == "联系我们"
        assert doc.title.get_text() == "联系我们"
        assert doc.select_one('#site-header a[href="contact.html"]').get_text() == "Contact"
