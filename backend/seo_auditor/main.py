import logging
from pathlib import Path

from dotenv import load_dotenv

# Load .env BEFORE settings are read
backend_dir = Path(__file__).resolve().parent.parent
load_dotenv(backend_dir / ".env")

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from seo_auditor.core.async_helpers import shutdown_executor
from seo_auditor.core.config import get_settings
from seo_auditor.core.errors import AuditError, ValidationError
from seo_auditor.core.rate_limit import limiter
from seo_auditor.routes.analyze import router as analyze_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SEO Page Auditor - Backend",
    version=settings.app_version,
    description="On-page SEO audit: meta tags, headings and keyword density",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def audit_error_handler(request: Request, exc: AuditError):
    logger.warning("%s %s failed [%s]: %s", request.method, request.url.path, exc.kind, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


app.add_exception_handler(AuditError, audit_error_handler)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies (wrong types, invalid JSON) answer like any other validation error."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    )
    return await audit_error_handler(request, ValidationError(f"Invalid request: {details}"))


app.add_exception_handler(RequestValidationError, request_validation_handler)

# CORS middleware — restrict to known frontend origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-API-Key"],
)

app.include_router(analyze_router, prefix="/api")


@app.on_event("shutdown")
async def shutdown_event():
    shutdown_executor()


@app.get("/api/health")
async def health():
    return {
        "status": "ok",
        "version": settings.app_version,
        "llm_provider": settings.llm_provider,
    }


def run():
    """Console entry point: serve the API with uvicorn."""
    import uvicorn
    uvicorn.run(
        "seo_auditor.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
