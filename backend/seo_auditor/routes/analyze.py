"""
Analysis API Routes
POST /api/analyze     — Fetch a page and build the deterministic on-page report.
POST /api/density     — Keyword density tables for raw text.
GET  /api/demo        — Fixed demo report.
POST /api/ai-analyze  — Delegate the analysis to an external chat model.
GET  /api/ai/demo     — Fixed demo AI report.
GET  /api/ai/models   — Available AI providers and models.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Header, Request
from pydantic import BaseModel

from seo_auditor.core.async_helpers import run_blocking
from seo_auditor.core.config import get_settings
from seo_auditor.core.llm_factory import get_provider_info
from seo_auditor.core.rate_limit import NETWORK_LIMIT, limiter
from seo_auditor.core.schemas import AIAnalysisResult, AnalysisResult, KeywordReport
from seo_auditor.modules.ai_analyzer import analyze_with_llm
from seo_auditor.modules.analyzer import analyze_url_async
from seo_auditor.modules.demo_data import get_demo_ai_result, get_demo_result
from seo_auditor.modules.density import analyze_density

logger = logging.getLogger(__name__)

router = APIRouter()


class AnalyzeRequest(BaseModel):
    url: str = ""


class DensityRequest(BaseModel):
    text: str = ""


class AIAnalyzeRequest(BaseModel):
    url: str = ""
    model: Optional[str] = None
    provider: Optional[str] = None


@router.post("/analyze", response_model=AnalysisResult)
@limiter.limit(NETWORK_LIMIT)
async def analyze(request: Request, req: AnalyzeRequest):
    logger.info("ANALYZE START: url=%s", req.url)
    return await analyze_url_async(req.url)


@router.post("/density", response_model=KeywordReport)
async def density(req: DensityRequest):
    top_k = get_settings().density_top_k
    return await run_blocking(analyze_density, req.text, top_k=top_k)


@router.get("/demo", response_model=AnalysisResult)
async def demo():
    return get_demo_result()


@router.post("/ai-analyze", response_model=AIAnalysisResult)
@limiter.limit(NETWORK_LIMIT)
async def ai_analyze(request: Request, req: AIAnalyzeRequest, x_api_key: Optional[str] = Header(default=None)):
    """The credential travels in the X-API-Key header and is never stored."""
    logger.info("AI-ANALYZE START: url=%s provider=%s model=%s", req.url, req.provider, req.model)
    return await run_blocking(
        analyze_with_llm, req.url, x_api_key, model=req.model, provider=req.provider
    )


@router.get("/ai/demo", response_model=AIAnalysisResult)
async def ai_demo():
    return get_demo_ai_result()


@router.get("/ai/models")
async def ai_models():
    return get_provider_info()
