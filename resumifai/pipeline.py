"""
Request validation and orchestration: validate → fetch transcript → build
prompt → generate. Route handlers only ever see an Outcome; every exception
raised by a stage is turned into one here.
"""
import time
import logging
from dataclasses import dataclass

from .captions import AcquisitionRequest, fetch_transcript
from .config import Settings
from .errors import MissingIdentifier, PipelineError, UnexpectedError
from .prompts import Mode, build_prompt, parse_mode
from .summarize import generate


@dataclass(frozen=True)
class GenerationRequest:
    mode: Mode = Mode.SUMMARY
    word_limit: str | int | None = None


@dataclass(frozen=True)
class Outcome:
    value: str | None = None
    failure: PipelineError | None = None
    field: str = "summary"

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def status(self) -> int:
        return 200 if self.ok else self.failure.status

    def body(self, details: bool = False) -> dict:
        if self.ok:
            return {self.field: self.value}
        body = {"error": self.failure.message}
        if details:
            body["details"] = self.failure.detail
        return body


def _text(value) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def validate_request(payload) -> tuple[AcquisitionRequest, GenerationRequest]:
    data = payload if isinstance(payload, dict) else {}
    video_id = _text(data.get("videoId"))
    word_limit = data.get("wordLimit")

    logging.info(f"Video ID: {video_id}")
    logging.info(f"Word limit: {word_limit}")

    if not video_id:
        raise MissingIdentifier("videoId missing or empty")
    return (
        AcquisitionRequest(identifier=video_id, url=_text(data.get("url"))),
        GenerationRequest(mode=parse_mode(data.get("mode")), word_limit=word_limit),
    )


def _run(field: str, stages) -> Outcome:
    try:
        return Outcome(value=stages(), field=field)
    except PipelineError as e:
        logging.warning(f"{type(e).__name__}: {e.detail}")
        return Outcome(failure=e, field=field)
    except Exception as e:
        logging.exception("Unexpected pipeline failure")
        return Outcome(failure=UnexpectedError(f"{type(e).__name__}: {e}"), field=field)


def run_summary(payload, settings: Settings, client, providers=None) -> Outcome:
    def stages():
        acq, gen = validate_request(payload)

        t0 = time.time()
        transcript = fetch_transcript(acq, settings, providers)
        captions_ms = int((time.time() - t0) * 1000)

        prompt = build_prompt(transcript.text, gen.mode, gen.word_limit,
                              max_chars=settings.max_transcript_chars)

        t0 = time.time()
        summary = generate(client, prompt, settings)
        gemini_ms = int((time.time() - t0) * 1000)

        logging.info({
            "evt": "timings",
            "captions_ms": captions_ms,
            "gemini_ms": gemini_ms,
            "source": transcript.provider,
            "mode": gen.mode.name,
            "transcript_length": len(transcript.text),
            "summary_length": len(summary),
        })
        return summary

    return _run("summary", stages)


def run_transcription(video_id, settings: Settings, url=None, providers=None) -> Outcome:
    def stages():
        acq, _ = validate_request({"videoId": video_id, "url": url})
        return fetch_transcript(acq, settings, providers).text

    return _run("transcription", stages)
