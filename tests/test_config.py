from resumifai.config import DEFAULT_ORIGINS, Settings


def test_defaults():
    s = Settings.from_env({})
    assert s.gemini_api_key is None
    assert s.gemini_model == "gemini-2.0-flash"
    assert s.allowed_origins == DEFAULT_ORIGINS
    assert (s.init_timeout_ms, s.metadata_timeout_ms, s.transcript_timeout_ms, s.generation_timeout_ms) == \
        (10_000, 20_000, 10_000, 10_000)
    assert s.expose_error_details is False


def test_from_env():
    s = Settings.from_env({
        "GOOGLE_GENERATIVE_AI_API_KEY": "legacy",
        "FRONT_END_ORIGINS": "https://a.example, https://b.example,",
        "TRANSCRIPT_LANGUAGES": "pt,en",
        "GENERATION_TIMEOUT_MS": "2500",
        "EXPOSE_ERROR_DETAILS": "TRUE",
        "log_level": "ignored",
    })
    assert s.gemini_api_key == "legacy"
    assert s.allowed_origins == ("https://a.example", "https://b.example")
    assert s.transcript_languages == ("pt", "en")
    assert s.generation_timeout_ms == 2500
    assert s.expose_error_details is True


def test_primary_key_wins():
    assert Settings.from_env({"GEMINI_API_KEY": "new", "GOOGLE_GENERATIVE_AI_API_KEY": "old"}).gemini_api_key == "new"


def test_bad_numbers_fall_back():
    s = Settings.from_env({"METADATA_TIMEOUT_MS": "soon", "GEMINI_TEMPERATURE": "warm"})
    assert s.metadata_timeout_ms == 20_000
    assert s.gemini_temperature == 0.7


def test_unknown_log_level_falls_back():
    assert Settings.from_env({"LOG_LEVEL": "chatty"}).log_level == "INFO"
    assert Settings.from_env({"LOG_LEVEL": "debug"}).log_level == "DEBUG"


def test_app_starts_with_unknown_log_level():
    from resumifai.main import create_app

    app = create_app(Settings.from_env({"LOG_LEVEL": "chatty"}))
    assert app.test_client().get("/health").status_code == 200
