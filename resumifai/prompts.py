from enum import Enum

NO_LIMIT = "noLimits"
SCRIPT_LANGUAGE = "Brazilian Portuguese"


class Mode(Enum):
    SUMMARY = "summary"
    STEP_BY_STEP = "StepByStep"
    SCRIPT = "script"


def parse_mode(raw) -> Mode:
    """'StepByStep' and 'script' select their templates; anything else is a summary."""
    if raw == Mode.STEP_BY_STEP.value:
        return Mode.STEP_BY_STEP
    if raw == Mode.SCRIPT.value:
        return Mode.SCRIPT
    return Mode.SUMMARY


def word_limit_phrase(limit) -> str:
    if limit is None or limit == NO_LIMIT:
        return ""
    return f"Respect the limit of {limit} words. "


_PROMPTS = {
    Mode.SUMMARY: (
        "Sum up the text below, keeping the important information. "
        "Don't include information about ads and sponsorship. "
        "{limit}Finally, keep the summary in the same language as the text. "
        "That's the text:\n\n{transcript}"
    ),
    Mode.STEP_BY_STEP: (
        "Rewrite the text below as a step-by-step guide, with numbered steps in the order "
        "they should be followed. Keep only what is needed to reproduce each step. "
        "Don't include information about ads and sponsorship. "
        "{limit}Finally, keep the guide in the same language as the text. "
        "That's the text:\n\n{transcript}"
    ),
    Mode.SCRIPT: (
        "Rewrite the content of the text below as the script of a short social media video. "
        "Open with a line that grabs attention in the first seconds and keep a dry sense of humor "
        "throughout. Write only what the narrator says: no stage directions, camera notes or "
        "speaker labels. Don't include information about ads and sponsorship. "
        "{limit}Write the script in " + SCRIPT_LANGUAGE + ", whatever the language of the text. "
        "That's the text:\n\n{transcript}"
    ),
}


def build_prompt(transcript: str, mode: Mode = Mode.SUMMARY, word_limit=None,
                 max_chars: int | None = None) -> str:
    if max_chars is not None and len(transcript) > max_chars:
        transcript = transcript[:max_chars]
    return _PROMPTS[mode].format(limit=word_limit_phrase(word_limit), transcript=transcript)
