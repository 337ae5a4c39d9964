import logging
import time
from dataclasses import dataclass

import requests
from bs4 import BeautifulSoup

from seo_auditor.core.config import get_settings
from seo_auditor.core.errors import NetworkError
from seo_auditor.core.schemas import Headings

logger = logging.getLogger(__name__)

# Tags whose text never counts as page content
NON_CONTENT_TAGS = ["script", "style", "nav", "footer", "header", "noscript", "iframe", "svg"]


@dataclass(frozen=True)
class FetchedPage:
    html: str
    elapsed_ms: int


# =========================
# HELPER FUNCTIONS
# =========================

def _text_clean(s: str) -> str:
    return " ".join((s or "").split()).strip()


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "lxml")


# =========================
# FETCH
# =========================

def fetch_page(url: str, timeout: float | None = None) -> FetchedPage:
    """
    Download a page with a single GET. No retries: every failure is
    reported to the caller as a NetworkError.
    """
    settings = get_settings()
    timeout = timeout if timeout is not None else settings.fetch_timeout
    headers = {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }

    logger.info("Fetching %s (timeout=%ss)", url, timeout)
    start = time.perf_counter()
    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout:
        logger.warning("Timeout fetching %s", url)
        raise NetworkError(f"Timed out after {timeout:g}s fetching {url}")
    except requests.exceptions.ConnectionError as e:
        logger.warning("Connection error fetching %s: %s", url, e)
        raise NetworkError(f"Could not connect to {url}")
    except requests.exceptions.HTTPError as e:
        logger.warning("HTTP error fetching %s: %s", url, e)
        raise NetworkError(f"{url} answered HTTP {e.response.status_code}")
    except requests.exceptions.RequestException as e:
        logger.error("Unexpected error fetching %s: %s: %s", url, type(e).__name__, e)
        raise NetworkError(f"Failed to fetch {url}: {str(e)[:200]}")

    elapsed_ms = int(round((time.perf_counter() - start) * 1000))
    html = _decode(response)
    logger.info("Fetched %s: %d chars in %d ms", url, len(html), elapsed_ms)
    return FetchedPage(html=html, elapsed_ms=elapsed_ms)


def _decode(response: requests.Response) -> str:
    """
    Response body as text. Without a declared charset requests falls back to
    ISO-8859-1 for text/html; try UTF-8 first, then the sniffed encoding.
    """
    content_type = response.headers.get("Content-Type", "") or ""
    if "charset" in content_type.lower():
        return response.text
    try:
        return response.content.decode("utf-8")
    except UnicodeDecodeError:
        response.encoding = response.apparent_encoding
        return response.text


# =========================
# EXTRACTION
# =========================

def extract_body_text(html: str) -> str:
    """Visible body text with non-content tags removed."""
    soup = _soup(html)
    for t in soup(NON_CONTENT_TAGS):
        t.decompose()
    root = soup.body or soup
    # separator keeps words from adjacent elements apart
    return root.get_text(separator=" ")


def extract_meta(html: str) -> dict:
    """
    Title, meta description and h1..h6 texts from the raw document.
    Returns a dict with keys: title, description, headings.
    """
    soup = _soup(html)

    title = _text_clean(soup.title.get_text()) if soup.title else ""

    desc_tag = soup.find("meta", attrs={"name": "description"})
    description = _text_clean(desc_tag.get("content", "")) if desc_tag else ""

    headings = {
        f"h{i}": [_text_clean(h.get_text()) for h in soup.find_all(f"h{i}")]
        for i in range(1, 7)
    }

    return {
        "title": title,
        "description": description,
        "headings": Headings(**headings),
    }
