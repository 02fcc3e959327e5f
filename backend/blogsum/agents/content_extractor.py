"""Content extractor - fetches a blog page and returns its cleaned article text."""

import logging
import re
from urllib.parse import urlparse

import httpx
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from blogsum.config import Settings, get_settings
from blogsum.exceptions import (
    FetchError,
    HttpError,
    ParseError,
    UpstreamTimeoutError,
    ValidationError,
)
from blogsum.models import ExtractedContent

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s+")


class ContentExtractor:
    """Fetches pages over HTTP and pulls the article text out of the HTML.

    The first region matching ``CONTENT_SELECTORS`` wins, so a page with an
    ``<article>`` never falls back to its whole body.
    """

    CONTENT_SELECTORS = ("article", ".post-content", ".blog-content", "body")
    NOISE_TAGS = ["script", "style", "noscript", "template"]

    def __init__(
        self,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.settings.request_timeout_seconds,
                follow_redirects=True,
                headers={"User-Agent": self.settings.user_agent},
            )
        return self._http_client

    async def extract(self, url: str) -> ExtractedContent:
        """Fetch ``url`` and return its cleaned article text."""
        url = (url or "").strip()
        if not url:
            raise ValidationError("URL is required")

        if not self._is_http_url(url):
            raise ValidationError("URL must be an absolute http(s) URL")

        html = await self.fetch_page(url)
        text = self.extract_text(html)
        logger.info("Extracted %d characters from %s", len(text), url)
        return ExtractedContent(source_url=url, text=text)

    async def fetch_page(self, url: str) -> str:
        """Fetch HTML content from a URL, reading at most ``max_content_bytes``."""
        limit = self.settings.max_content_bytes
        try:
            async with self.http_client.stream("GET", url) as response:
                if not response.is_success:
                    raise HttpError(
                        f"Request to {url} failed with status {response.status_code}",
                        upstream_status=response.status_code,
                    )

                content_type = response.headers.get("content-type", "").lower()
                if content_type and not self._is_textual(content_type):
                    raise ParseError(f"Unsupported content type: {content_type}")

                body = bytearray()
                async for chunk in response.aiter_bytes():
                    body.extend(chunk)
                    if len(body) >= limit:
                        logger.warning("Body of %s truncated at %d bytes", url, limit)
                        del body[limit:]
                        break
                encoding = response.charset_encoding or "utf-8"
        except httpx.InvalidURL as e:
            raise ValidationError("URL must be an absolute http(s) URL") from e
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError(f"Timed out fetching {url}") from e
        except httpx.HTTPError as e:
            raise FetchError(f"Could not fetch {url}: {e}") from e

        try:
            return bytes(body).decode(encoding, errors="replace")
        except LookupError:
            return bytes(body).decode("utf-8", errors="replace")

    @staticmethod
    def _is_http_url(url: str) -> bool:
        try:
            parsed = urlparse(url)
            # port is parsed lazily and raises on values like ":abc"
            parsed.port  # noqa: B018
        except ValueError:
            return False
        return parsed.scheme in ("http", "https") and bool(parsed.netloc)

    @staticmethod
    def _is_textual(content_type: str) -> bool:
        return content_type.startswith("text/") or "html" in content_type or "xml" in content_type

    def extract_text(self, html: str) -> str:
        """Return the whitespace-collapsed text of the main content region."""
        if not html.strip():
            raise ParseError("Response body is empty")

        try:
            soup = BeautifulSoup(html, "lxml")
        except ParserRejectedMarkup as e:
            raise ParseError(f"Could not parse HTML: {e}") from e

        for element in soup(self.NOISE_TAGS):
            element.decompose()

        region = None
        for selector in self.CONTENT_SELECTORS:
            region = soup.select_one(selector)
            if region is not None:
                break

        text = WHITESPACE_RE.sub(" ", (region or soup).get_text()).strip()
        if not text:
            raise ParseError("No text content found")
        return text

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
