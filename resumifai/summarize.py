import logging

from google import genai
from google.genai import types as gtypes

from .config import Settings
from .deadline import call_with_deadline
from .errors import GenerationError, PipelineError


def init_gemini(settings: Settings):
    """Build the Gemini client once per app; None when no API key is configured."""
    if not settings.gemini_api_key:
        logging.warning("GEMINI_API_KEY unset; generation requests will fail")
        return None
    return genai.Client(api_key=settings.gemini_api_key)


def extract_text(response) -> str:
    """Decode the generated text from a generate_content response envelope."""
    candidates = getattr(response, "candidates", None)
    if not candidates:
        raise GenerationError("Response has no candidates")
    content = getattr(candidates[0], "content", None)
    if content is None:
        raise GenerationError("First candidate has no content")
    parts = getattr(content, "parts", None)
    if not parts:
        raise GenerationError("Candidate content has no parts")
    text = getattr(parts[0], "text", None)
    if not text:
        raise GenerationError("First part has no text")
    return text


def generate(client, prompt: str, settings: Settings) -> str:
    if client is None:
        raise GenerationError("Model not configured (set GEMINI_API_KEY)")
    cfg = gtypes.GenerateContentConfig(temperature=settings.gemini_temperature)
    try:
        resp = call_with_deadline(client.models.generate_content,
                                  model=settings.gemini_model, contents=prompt, config=cfg,
                                  timeout_ms=settings.generation_timeout_ms, what="generation call")
    except PipelineError:
        raise
    except Exception as e:
        raise GenerationError(f"{type(e).__name__}: {e}") from e
    return extract_text(resp)
