"""
Deterministic page analysis: fetch one URL and build the on-page report.
"""

import logging
from datetime import datetime, timezone

from seo_auditor.core.async_helpers import run_blocking
from seo_auditor.core.config import get_settings
from seo_auditor.core.schemas import AnalysisResult
from seo_auditor.modules.density import analyze_density
from seo_auditor.modules.page_fetcher import extract_body_text, extract_meta, fetch_page
from seo_auditor.modules.seo_rules import SEOScoringEngine, build_meta, evaluate_page, grade_load_time
from seo_auditor.utils.validators import validate_url

logger = logging.getLogger(__name__)


def build_report(url: str, html: str, load_time_ms: int) -> AnalysisResult:
    """Turn already-fetched HTML into an AnalysisResult."""
    settings = get_settings()

    tags = extract_meta(html)
    meta = build_meta(tags["title"], tags["description"], tags["headings"])
    density = analyze_density(extract_body_text(html), top_k=settings.density_top_k)

    suggestions = evaluate_page(meta, density)
    engine = SEOScoringEngine(suggestions)
    score = engine.score()
    logger.info("Analysis of %s: score=%d %s", url, score, engine.severity_count())

    return AnalysisResult(
        url=url,
        timestamp=datetime.now(timezone.utc).isoformat(),
        load_time=load_time_ms,
        load_grade=grade_load_time(load_time_ms),
        meta=meta,
        density=density,
        score=score,
        suggestions=suggestions,
    )


def analyze_url(url: str) -> AnalysisResult:
    """
    Validate, fetch and analyze a single page.

    Raises:
        ValidationError: malformed or disallowed URL.
        NetworkError: the page could not be fetched.
    """
    settings = get_settings()
    url = validate_url(url, allow_private=settings.allow_private_hosts)
    page = fetch_page(url)
    return build_report(url, page.html, page.elapsed_ms)


async def analyze_url_async(url: str) -> AnalysisResult:
    return await run_blocking(analyze_url, url)
