"""
src/site/transport.py
─────────────────────
httpx transport that answers GET requests from a local site directory, so
the loader and the includer read ``content/*.json`` and the header/footer
fragments straight off disk during development and tests.
"""
from __future__ import annotations

import logging
import mimetypes
from pathlib import Path

import httpx

logger = logging.getLogger(__name__)


class SiteDirectoryTransport(httpx.AsyncBaseTransport):
    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).resolve()

    def _resolve(self, url_path: str) -> Path | None:
        relative = url_path.lstrip("/") or "index.html"
        candidate = (self.root / relative).resolve()
        # Reject anything that escapes the site root ("../", absolute paths)
        if candidate != self.root and self.root not in candidate.parents:
            return None
        if candidate.is_dir():
            candidate = candidate / "index.html"
        return candidate if candidate.is_file() else None

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        if request.method not in ("GET", "HEAD"):
            return httpx.Response(405, request=request)

        path = self._resolve(request.url.path)
        if path is None:
            logger.debug("Not found in %s: %s", self.root, request.url.path)
            return httpx.Response(404, request=request)

        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        body = b"" if request.method == "HEAD" else path.read_bytes()
        return httpx.Response(
            200,
            headers={"Content-Type": content_type, "Cache-Control": "no-store"},
            content=body,
            request=request,
        )
