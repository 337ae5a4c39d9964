"""
AI-delegated SEO analysis.
Asks an external chat model for a full report (score + suggestions) about a
URL. This path bypasses the local density analyzer completely and its output
is not deterministic; callers select it explicitly.
"""

import json
import logging
import re
import time
from datetime import datetime, timezone
from typing import Optional

from langchain_core.prompts import ChatPromptTemplate
from pydantic import ValidationError as PydanticValidationError

from seo_auditor.core.config import get_settings
from seo_auditor.core.errors import (
    AuditError,
    CredentialInvalidError,
    CredentialMissingError,
    NetworkError,
    UpstreamParseError,
)
from seo_auditor.core.llm_factory import build_llm, resolve_model, resolve_provider
from seo_auditor.core.schemas import AIAnalysisResult
from seo_auditor.utils.validators import validate_url

logger = logging.getLogger(__name__)

# Provider answers that mean the key was rejected
_CREDENTIAL_STATUS_CODES = {400, 401, 403}

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")

ANALYSIS_PROMPT = ChatPromptTemplate.from_messages([
    ("system",
     "You are a technical SEO auditor. You answer ONLY with a valid JSON object, "
     "no markdown and no additional text."
    ),
    ("user",
     """Analyze the SEO of this webpage URL: {url}

Please provide a comprehensive SEO analysis in the following JSON format:
{{
  "score": <number 0-100 representing overall SEO score>,
  "meta": {{
    "title": "<page title>",
    "titleLength": <number>,
    "description": "<meta description>",
    "descriptionLength": <number>,
    "headings": {{
      "h1": ["<h1 texts>"],
      "h2": ["<h2 texts>"],
      "h3": ["<h3 texts>"]
    }}
  }},
  "keywords": [
    {{"phrase": "<keyword>", "count": <number>, "density": <percentage>}}
  ],
  "suggestions": [
    {{"type": "good|warning|bad", "message": "<suggestion text>"}}
  ]
}}

Important guidelines:
1. Score should reflect real SEO quality (title length, meta description, heading structure, keyword usage)
2. Title optimal length: 50-60 characters
3. Description optimal length: 150-160 characters
4. Check for H1 tag presence (should have exactly 1)
5. Analyze keyword density (2-3% is optimal)
6. Provide actionable suggestions
7. Keywords array should have top 10 keywords with their count and density percentage"""
    ),
])


def _status_code(exc: Optional[BaseException]) -> Optional[int]:
    """HTTP status of a provider error: openai/anthropic use status_code, google uses code."""
    while exc is not None:
        for code in (
            getattr(exc, "status_code", None),
            getattr(getattr(exc, "response", None), "status_code", None),
            getattr(exc, "code", None),
        ):
            if isinstance(code, int):
                return code
        # wrapped errors keep the provider exception as their cause
        exc = exc.__cause__
    return None


def _message_text(content) -> str:
    """Chat model content may be a string or a list of content blocks."""
    if isinstance(content, str):
        return content
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


def parse_analysis(text: str) -> AIAnalysisResult:
    """Parse the model answer, tolerating a ```json fenced block."""
    if not text or not text.strip():
        raise UpstreamParseError("Empty response from the AI model")

    json_str = _CODE_FENCE.sub("", text.strip())
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise UpstreamParseError(f"AI model returned invalid JSON: {e.msg}")
    if not isinstance(data, dict):
        raise UpstreamParseError("AI model returned JSON that is not an object")

    try:
        return AIAnalysisResult.model_validate(data)
    except PydanticValidationError as e:
        raise UpstreamParseError(f"AI model response has an unexpected shape: {e.error_count()} error(s)")


def analyze_with_llm(
    url: str,
    api_key: Optional[str],
    model: Optional[str] = None,
    provider: Optional[str] = None,
    llm=None,
) -> AIAnalysisResult:
    """
    Delegate a full SEO analysis of `url` to a chat model.

    Args:
        url: Page to analyze.
        api_key: Credential supplied by the caller.
        model: Optional model name; provider default if omitted.
        provider: Optional provider name; configured default if omitted.
        llm: Prebuilt chat model (tests).

    Raises:
        CredentialMissingError, CredentialInvalidError, ValidationError,
        UpstreamParseError, NetworkError
    """
    if not api_key or not api_key.strip():
        raise CredentialMissingError("An API key is required for AI analysis")

    settings = get_settings()
    url = validate_url(url, allow_private=settings.allow_private_hosts)

    if llm is None:
        provider = resolve_provider(provider)
        model = resolve_model(provider, model)
        llm = build_llm(provider, model, api_key.strip())

    messages = ANALYSIS_PROMPT.format_messages(url=url)
    start = time.perf_counter()
    try:
        res = llm.invoke(messages)
    except AuditError:
        raise
    except Exception as e:
        code = _status_code(e)
        if code in _CREDENTIAL_STATUS_CODES:
            logger.warning("AI provider rejected the credential (HTTP %s)", code)
            raise CredentialInvalidError("The API key was rejected by the AI provider")
        logger.error("AI analysis failed for %s: %s: %s", url, type(e).__name__, e)
        raise NetworkError(f"Analysis failed: {str(e)[:200]}")
    elapsed_ms = int(round((time.perf_counter() - start) * 1000))

    result = parse_analysis(_message_text(res.content))
    logger.info("AI analysis of %s: score=%d in %d ms", url, result.score, elapsed_ms)
    return result.model_copy(update={
        "load_time": elapsed_ms,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })
