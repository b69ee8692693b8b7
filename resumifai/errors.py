"""
Failure kinds of the transcript → generation pipeline.

Each kind carries the HTTP status and the user-facing message it maps to.
`detail` is the internal diagnostic and is only sent to clients when
EXPOSE_ERROR_DETAILS is enabled.
"""


class PipelineError(Exception):
    status = 500
    message = "Unexpected error processing the request."

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class MissingIdentifier(PipelineError):
    status = 400
    message = "You must inform a video ID."


class TranscriptNotFound(PipelineError):
    status = 400
    message = "Transcription not found!"


class ProviderError(PipelineError):
    status = 500
    message = "Error trying to extract the video transcription."


class TimeoutExceeded(PipelineError):
    status = 500
    message = "Error processing the request."


class GenerationError(PipelineError):
    status = 500
    message = "Problems with the generation backend."


class UnexpectedError(PipelineError):
    pass
