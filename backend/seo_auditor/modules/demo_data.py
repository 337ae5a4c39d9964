"""
Fixed datasets offered when the live analysis cannot reach the page or the
AI provider. Only the timestamp changes between calls.
"""

from datetime import datetime, timezone

from seo_auditor.core.schemas import AIAnalysisResult, AnalysisResult, Headings, KeywordReport
from seo_auditor.modules.seo_rules import SEOScoringEngine, build_meta, evaluate_page, grade_load_time

DEMO_RESULT = {
    "url": "https://example.com",
    "meta": {
        "title": "Example Domain",
        "description": (
            "This is a demo description to show how the UI looks when the backend is not connected. "
            "It simulates a reasonable length meta description for SEO purposes."
        ),
        "headings": {
            "h1": ["Example Domain"],
            "h2": ["More Information", "About Us"],
            "h3": ["Services", "Contact"],
            "h4": [],
            "h5": [],
            "h6": [],
        },
    },
    "density": {
        "single": [
            {"phrase": "domain", "count": 12, "density": 4.5},
            {"phrase": "example", "count": 10, "density": 3.8},
            {"phrase": "web", "count": 8, "density": 3.0},
        ],
        "twoWord": [
            {"phrase": "example domain", "count": 8, "density": 3.0},
            {"phrase": "more info", "count": 5, "density": 1.9},
        ],
        "threeWord": [
            {"phrase": "this domain is", "count": 3, "density": 1.1},
        ],
    },
    "loadTime": 125,
}

DEMO_AI_RESULT = {
    "score": 78,
    "meta": {
        "title": "Example Domain - Your Gateway to the Web",
        "titleLength": 42,
        "description": (
            "This domain is for use in illustrative examples in documents. You may use this domain "
            "in literature without prior coordination or asking for permission."
        ),
        "descriptionLength": 156,
        "headings": {
            "h1": ["Example Domain"],
            "h2": ["About This Domain", "How to Use"],
            "h3": ["Getting Started", "Documentation", "Support"],
        },
    },
    "keywords": [
        {"phrase": "domain", "count": 15, "density": 4.2},
        {"phrase": "example", "count": 12, "density": 3.4},
        {"phrase": "web", "count": 8, "density": 2.3},
        {"phrase": "internet", "count": 6, "density": 1.7},
        {"phrase": "website", "count": 5, "density": 1.4},
        {"phrase": "documentation", "count": 4, "density": 1.1},
        {"phrase": "illustrative", "count": 3, "density": 0.9},
        {"phrase": "permission", "count": 2, "density": 0.6},
    ],
    "suggestions": [
        {"type": "good", "message": "Title length is optimal (42 characters)"},
        {"type": "good", "message": "Meta description is within recommended length (156 characters)"},
        {"type": "good", "message": "Page has exactly one H1 tag"},
        {"type": "warning", "message": "Consider adding more internal links to improve navigation"},
        {"type": "warning", "message": "Keyword 'domain' density is slightly high (4.2%). Aim for 2-3%"},
        {"type": "bad", "message": "No alt text found for images"},
        {"type": "bad", "message": "Missing Open Graph meta tags for social sharing"},
    ],
    "loadTime": 1250,
}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def get_demo_result() -> AnalysisResult:
    """Demo report run through the same rules as a live page."""
    meta_src = DEMO_RESULT["meta"]
    meta = build_meta(meta_src["title"], meta_src["description"], Headings(**meta_src["headings"]))
    density = KeywordReport.model_validate(DEMO_RESULT["density"])
    suggestions = evaluate_page(meta, density)

    return AnalysisResult(
        url=DEMO_RESULT["url"],
        timestamp=_now(),
        load_time=DEMO_RESULT["loadTime"],
        load_grade=grade_load_time(DEMO_RESULT["loadTime"]),
        meta=meta,
        density=density,
        score=SEOScoringEngine(suggestions).score(),
        suggestions=suggestions,
    )


def get_demo_ai_result() -> AIAnalysisResult:
    return AIAnalysisResult.model_validate({**DEMO_AI_RESULT, "timestamp": _now()})
