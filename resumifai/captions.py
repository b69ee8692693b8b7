import re
import logging
from dataclasses import dataclass
from urllib.parse import urlparse, parse_qs

import requests
from youtube_transcript_api import (
    YouTubeTranscriptApi, TranscriptsDisabled, NoTranscriptFound,
)

from .config import Settings
from .deadline import call_with_deadline
from .errors import PipelineError, ProviderError, TimeoutExceeded, TranscriptNotFound

VTT_HEADER = "WEBVTT"


@dataclass(frozen=True)
class AcquisitionRequest:
    identifier: str
    url: str | None = None

    @property
    def source(self) -> str:
        return self.url or self.identifier


@dataclass(frozen=True)
class Transcript:
    text: str
    provider: str


def extract_video_id(url: str) -> str | None:
    try:
        u = urlparse(url); host = (u.netloc or "").lower(); path = u.path or ""; qs = parse_qs(u.query)
        if "youtu.be" in host:    return path.strip("/").split("/")[0][:11] or None
        if "youtube" not in host: return None
        if "v" in qs and qs["v"]: return qs["v"][0][:11]
        m = re.search(r"/(?:embed|v|shorts|live)/([0-9A-Za-z_-]{11})", path)
        return m.group(1) if m else None
    except ValueError:
        return None


class YouTubeCaptions:
    """Default provider: youtube-transcript-api, one client per request."""

    name = "youtube"

    def __init__(self, api_factory=YouTubeTranscriptApi):
        self.api_factory = api_factory

    def fetch(self, req: AcquisitionRequest, settings: Settings) -> Transcript:
        video_id = extract_video_id(req.identifier) or req.identifier.strip()

        api = call_with_deadline(self.api_factory,
                                 timeout_ms=settings.init_timeout_ms, what="transcript client init")
        try:
            tlist = call_with_deadline(api.list, video_id,
                                       timeout_ms=settings.metadata_timeout_ms, what="video metadata fetch")
            track = self._pick(tlist, settings.transcript_languages)
            if track is None:
                raise TranscriptNotFound(f"No transcript tracks for {video_id}")
            fetched = call_with_deadline(track.fetch,
                                         timeout_ms=settings.transcript_timeout_ms, what="transcript fetch")
        except (NoTranscriptFound, TranscriptsDisabled) as e:
            raise TranscriptNotFound(f"{type(e).__name__} for {video_id}") from e

        text = " ".join(snippet.text for snippet in fetched)
        if not text.strip():
            raise TranscriptNotFound(f"Empty transcript for {video_id}")
        return Transcript(text=text, provider=self.name)

    @staticmethod
    def _pick(tlist, languages):
        if languages:
            return tlist.find_transcript(list(languages))
        # manually created tracks are listed before generated ones
        return next(iter(tlist), None)


class TikTokCaptions:
    """
    Alternate provider: third-party transcription service over HTTP.

    The service answers {"transcripts": {track_id: "<WEBVTT blob>", ...}}. The
    last track is used; later entries are the final ones by upstream convention.
    """

    name = "tiktok"

    def fetch(self, req: AcquisitionRequest, settings: Settings) -> Transcript:
        endpoint = settings.transcript_service_url
        if not endpoint:
            raise ProviderError("TRANSCRIPT_SERVICE_URL unset")
        headers = {"Accept": "application/json"}
        if settings.transcript_service_key:
            headers["x-api-key"] = settings.transcript_service_key

        seconds = settings.transcript_timeout_ms / 1000
        try:
            r = call_with_deadline(requests.post, endpoint, json={"url": req.source},
                                   headers=headers, timeout=seconds,
                                   timeout_ms=settings.transcript_timeout_ms, what="transcription service call")
        except requests.Timeout as e:
            raise TimeoutExceeded(f"Timeout: transcription service call took longer than {settings.transcript_timeout_ms} ms") from e
        except requests.RequestException as e:
            raise ProviderError(f"Transcription service network error: {e}") from e
        if r.status_code != 200:
            raise ProviderError(f"Transcription service status {r.status_code}: {r.text[:200]}")
        try:
            data = r.json()
        except ValueError as e:
            raise ProviderError("Transcription service returned invalid JSON") from e
        return Transcript(text=self.normalize(data), provider=self.name)

    @staticmethod
    def normalize(data) -> str:
        tracks = data.get("transcripts") if isinstance(data, dict) else None
        if not isinstance(tracks, dict) or not tracks:
            raise TranscriptNotFound("Transcription service returned no tracks")
        last = list(tracks.values())[-1]
        if not isinstance(last, str):
            raise ProviderError(f"Unexpected track type {type(last).__name__}")
        text = last.removeprefix(VTT_HEADER).lstrip()
        if not text:
            raise TranscriptNotFound("Last transcript track is empty")
        return text


def is_tiktok(source: str) -> bool:
    return "tiktok.com" in source.lower()


def _always(source: str) -> bool:
    return True


# First matching predicate wins; the last entry is the catch-all.
PROVIDERS = [
    (is_tiktok, TikTokCaptions()),
    (_always, YouTubeCaptions()),
]


def fetch_transcript(req: AcquisitionRequest, settings: Settings, providers=None) -> Transcript:
    for matches, provider in (providers or PROVIDERS):
        if not matches(req.source):
            continue
        logging.info(f"Fetching transcript via {provider.name}")
        try:
            transcript = provider.fetch(req, settings)
        except PipelineError:
            raise
        except Exception as e:
            raise ProviderError(f"{provider.name}: {type(e).__name__}: {e}") from e
        logging.info(f"Got {len(transcript.text)} chars via {transcript.provider}")
        return transcript
    raise ProviderError(f"No transcript provider for {req.source!r}")
