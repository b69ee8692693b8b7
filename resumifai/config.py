import os
import logging
from dataclasses import dataclass

DEFAULT_ORIGINS = (
    "https://victordeabreuandrade.github.io",
    "https://victordeabreuandrade.github.io/",
    "https://victordeabreuandrade.github.io/resumifai-web",
    "https://victordeabreuandrade.github.io/resumifai-web/",
)


def _split(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(v.strip() for v in value.split(",") if v.strip())


def _int(environ, name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logging.warning(f"Ignoring non-integer {name}={raw!r}, using {default}")
        return default


def _float(environ, name: str, default: float) -> float:
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logging.warning(f"Ignoring non-numeric {name}={raw!r}, using {default}")
        return default


def _level(environ) -> str:
    raw = (environ.get("LOG_LEVEL") or "INFO").upper()
    if not isinstance(logging.getLevelName(raw), int):
        logging.warning(f"Ignoring unknown LOG_LEVEL={raw!r}, using INFO")
        return "INFO"
    return raw


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.0-flash"
    gemini_temperature: float = 0.7
    allowed_origins: tuple[str, ...] = DEFAULT_ORIGINS
    transcript_service_url: str | None = None
    transcript_service_key: str | None = None
    transcript_languages: tuple[str, ...] = ()
    # deadlines in milliseconds, one per class of external call
    init_timeout_ms: int = 10_000
    metadata_timeout_ms: int = 20_000
    transcript_timeout_ms: int = 10_000
    generation_timeout_ms: int = 10_000
    max_transcript_chars: int = 160_000
    expose_error_details: bool = False
    log_level: str = "INFO"
    port: int = 8080

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            gemini_api_key=env.get("GEMINI_API_KEY") or env.get("GOOGLE_GENERATIVE_AI_API_KEY"),
            gemini_model=env.get("GEMINI_MODEL", "gemini-2.0-flash"),
            gemini_temperature=_float(env, "GEMINI_TEMPERATURE", 0.7),
            allowed_origins=_split(env.get("FRONT_END_ORIGINS")) or DEFAULT_ORIGINS,
            transcript_service_url=(env.get("TRANSCRIPT_SERVICE_URL") or "").strip() or None,
            transcript_service_key=env.get("TRANSCRIPT_SERVICE_KEY") or None,
            transcript_languages=_split(env.get("TRANSCRIPT_LANGUAGES")),
            init_timeout_ms=_int(env, "INIT_TIMEOUT_MS", 10_000),
            metadata_timeout_ms=_int(env, "METADATA_TIMEOUT_MS", 20_000),
            transcript_timeout_ms=_int(env, "TRANSCRIPT_TIMEOUT_MS", 10_000),
            generation_timeout_ms=_int(env, "GENERATION_TIMEOUT_MS", 10_000),
            max_transcript_chars=_int(env, "MAX_TRANSCRIPT_CHARS", 160_000),
            expose_error_details=env.get("EXPOSE_ERROR_DETAILS", "false").lower() == "true",
            log_level=_level(env),
            port=_int(env, "PORT", 8080),
        )
