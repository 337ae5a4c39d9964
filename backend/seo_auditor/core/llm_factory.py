"""
Multi-Provider LLM Factory
Builds the chat model used by the optional AI analysis path.

The API key always comes from the caller of the request and is never read
from the environment, so instances are built per request and not cached.

Supported providers:
  - openai    → ChatOpenAI (GPT-4o, GPT-4o-mini, GPT-4-turbo, o3-mini, …)
  - anthropic → ChatAnthropic (Claude Sonnet 4, Claude 3.5 Sonnet, Claude 3 Haiku, …)
  - ollama    → ChatOllama (Llama 3.1, Qwen, Gemma, any local model via Ollama)
  - google    → ChatGoogleGenerativeAI (Gemini 2.5 Flash, Gemini 2.5 Pro, …)
"""

import logging
from typing import Optional, Dict, Any
from langchain_core.language_models.chat_models import BaseChatModel

from seo_auditor.core.config import get_settings
from seo_auditor.core.errors import ValidationError

logger = logging.getLogger(__name__)

# ── Provider → Model defaults ──────────────────────────────────────────────
PROVIDER_DEFAULTS: Dict[str, str] = {
    "openai": "gpt-4o-mini",
    "anthropic": "claude-sonnet-4-20250514",
    "ollama": "llama3.1:8b",
    "google": "gemini-2.5-flash",
}

PROVIDER_MODELS: Dict[str, list] = {
    "openai": [
        "gpt-4o-mini", "gpt-4o", "gpt-4-turbo", "o3-mini",
    ],
    "anthropic": [
        "claude-sonnet-4-20250514", "claude-3-5-sonnet-20241022",
        "claude-3-haiku-20240307",
    ],
    "ollama": [
        "llama3.1:8b", "llama3.3:latest", "qwen2.5:latest", "gemma2:latest",
    ],
    "google": [
        "gemini-3-pro", "gemini-3-flash", "gemini-2.5-pro", "gemini-2.5-flash",
        "gemini-2.5-flash-lite", "gemini-2.0-flash", "gemini-1.5-flash", "gemini-1.5-pro",
    ],
}


def resolve_provider(provider: Optional[str] = None) -> str:
    """Requested provider, else the configured one."""
    provider = (provider or get_settings().llm_provider).lower().strip()
    if provider not in PROVIDER_DEFAULTS:
        raise ValidationError(
            f"Unsupported LLM provider: '{provider}'. "
            f"Supported: {', '.join(PROVIDER_DEFAULTS.keys())}"
        )
    return provider


def resolve_model(provider: str, model: Optional[str] = None) -> str:
    """Requested model, else LLM_MODEL (only for LLM_PROVIDER), else the provider default."""
    settings = get_settings()
    explicit = (model or "").strip()
    if explicit:
        return explicit
    configured = (settings.llm_model or "").strip()
    if configured and provider == settings.llm_provider.lower().strip():
        return configured
    return PROVIDER_DEFAULTS[provider]


def build_llm(provider: str, model: str, api_key: str) -> BaseChatModel:
    """Instantiate the LangChain chat model for the given provider."""
    settings = get_settings()
    logger.info("Creating LLM instance: provider=%s model=%s", provider, model)

    if provider == "openai":
        from langchain_openai import ChatOpenAI
        return ChatOpenAI(
            model=model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            api_key=api_key,
        )

    elif provider == "anthropic":
        from langchain_anthropic import ChatAnthropic
        return ChatAnthropic(
            model=model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            api_key=api_key,
        )

    elif provider == "ollama":
        from langchain_ollama import ChatOllama
        return ChatOllama(
            model=model,
            temperature=settings.llm_temperature,
            num_predict=settings.llm_max_tokens,
            base_url=settings.ollama_base_url,
        )

    elif provider == "google":
        from langchain_google_genai import ChatGoogleGenerativeAI
        return ChatGoogleGenerativeAI(
            model=model,
            temperature=settings.llm_temperature,
            max_output_tokens=settings.llm_max_tokens,
            google_api_key=api_key,
        )

    raise ValidationError(
        f"Unsupported LLM provider: '{provider}'. "
        f"Supported: {', '.join(PROVIDER_DEFAULTS.keys())}"
    )


def get_provider_info() -> Dict[str, Any]:
    """Return the default provider, model, and available options."""
    provider = resolve_provider()
    return {
        "default_provider": provider,
        "default_model": resolve_model(provider),
        "providers": {
            name: {
                "models": models,
                "default_model": PROVIDER_DEFAULTS[name],
            }
            for name, models in PROVIDER_MODELS.items()
        },
    }
