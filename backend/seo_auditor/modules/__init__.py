"""
Analysis modules: page fetching, keyword density, on-page rules and the
optional AI-delegated analysis.
"""

from .density import analyze_density, tokenize, STOP_WORDS
from .analyzer import analyze_url, analyze_url_async, build_report
from .ai_analyzer import analyze_with_llm

__all__ = [
    # Keyword density
    "analyze_density",
    "tokenize",
    "STOP_WORDS",

    # Page analysis
    "analyze_url",
    "analyze_url_async",
    "build_report",

    # AI path
    "analyze_with_llm",
]
