# backend/trip_api/core/llm.py

from openai import OpenAI

from trip_api.core.config_loader import Settings


# ---------------------------------------------------------------------------
# Groq exposes an OpenAI-compatible chat completions API
# ---------------------------------------------------------------------------
def build_completion_client(settings: Settings) -> OpenAI:
    if not settings.GROQ_API_KEY:
        raise RuntimeError("GROQ_API_KEY is not set")

    return OpenAI(api_key=settings.GROQ_API_KEY, base_url=settings.GROQ_BASE_URL)
