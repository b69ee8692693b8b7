from types import SimpleNamespace

import pytest

from resumifai.captions import Transcript
from resumifai.config import Settings
from resumifai.main import create_app


def gemini_response(text="A short summary."):
    part = SimpleNamespace(text=text)
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])


class FakeModels:
    def __init__(self, response=None, error=None):
        self.response = response if response is not None else gemini_response()
        self.error = error
        self.calls = []

    def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents})
        if self.error:
            raise self.error
        return self.response


class FakeGemini:
    def __init__(self, **kw):
        self.models = FakeModels(**kw)


class FakeProvider:
    def __init__(self, name, text="Hello there world", error=None):
        self.name = name
        self.text = text
        self.error = error
        self.calls = []

    def fetch(self, req, settings):
        self.calls.append(req)
        if self.error:
            raise self.error
        return Transcript(text=self.text, provider=self.name)


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-key", transcript_service_url="https://transcripts.example/api")


@pytest.fixture
def gemini():
    return FakeGemini()


@pytest.fixture
def provider():
    return FakeProvider("fake")


@pytest.fixture
def client(settings, gemini, provider):
    app = create_app(settings, client=gemini, providers=[(lambda source: True, provider)])
    app.config["TESTING"] = True
    return app.test_client()
