"""
MusicBank - Gemini API Client Module

Provides a LyricsGenerator class that wraps the Gemini ``generateContent``
REST endpoint to write Korean song lyrics for a topic, together with a
style recommendation and a SUNO AI ready version of the song.

Every call makes exactly one HTTP attempt.  Failures are raised as
``LyricsRequestError`` subclasses and turned into user-facing text by
``describe_error``.
"""

import logging

import requests

from ai_models import DEFAULT_MODEL
from response_parser import (
    LYRICS_MARKER, STYLE_MARKER, SUNO_MARKER, ParsedSections, parse_response,
)
from timeouts import TIMEOUTS

logger = logging.getLogger("musicbank.api")

API_BASE = "https://generativelanguage.googleapis.com/v1beta"

# Sampling parameters sent with every request
GENERATION_CONFIG = {
    "temperature": 0.8,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 2048,
}

MSG_CHECK_API_KEY = "API 키를 확인해주세요."
MSG_GENERIC_FAILURE = "가사 생성 중 오류가 발생했습니다."


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class LyricsRequestError(Exception):
    """Raised when lyrics generation fails for any reason."""


class HttpStatusError(LyricsRequestError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int):
        super().__init__(f"API request failed: HTTP {status_code}")
        self.status_code = status_code


class MalformedEnvelopeError(LyricsRequestError):
    """The API answered 2xx but the body is not the expected envelope."""


class NetworkFailureError(LyricsRequestError):
    """The request never produced an HTTP response."""


# ---------------------------------------------------------------------------
# Prompt template
# ---------------------------------------------------------------------------

_PROMPT_TEMPLATE = """
다음 주제나 내용을 바탕으로 한국어 노래 가사를 작성해주세요:

주제: {topic}

다음 형식으로 응답해주세요:

{lyrics_marker}
[여기에 2-3절의 가사를 작성해주세요. 각 절은 4-6줄 정도로 구성하고, 후렴구도 포함해주세요.]

{style_marker}
[이 가사에 어울리는 음악 스타일을 추천해주세요. 예: 팝, 발라드, 락, 재즈, R&B, 힙합 등]

{suno_marker}
[가사와 스타일을 SUNO AI에서 사용할 수 있는 형식으로 정리해주세요. 가사는 그대로 유지하고, 스타일 정보를 명확하게 포함해주세요.]

가사는 감정적이고 리듬감 있게 작성해주시고, 주제와 잘 어울리는 메타포와 이미지를 사용해주세요.
"""


def build_prompt(topic: str) -> str:
    """Substitute *topic* into the fixed lyrics-writing template."""
    return _PROMPT_TEMPLATE.format(
        topic=topic,
        lyrics_marker=LYRICS_MARKER,
        style_marker=STYLE_MARKER,
        suno_marker=SUNO_MARKER,
    )


def build_payload(prompt: str) -> dict:
    """Wrap a prompt in the ``generateContent`` request body."""
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": dict(GENERATION_CONFIG),
    }


def extract_text(data) -> str:
    """Pull ``candidates[0].content.parts[0].text`` out of a response body.

    Raises:
        MalformedEnvelopeError: If any level of the envelope is missing.
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise MalformedEnvelopeError(
            "API response envelope is malformed: no candidate text"
        ) from exc
    if not isinstance(text, str):
        raise MalformedEnvelopeError(
            "API response envelope is malformed: candidate text is not a string"
        )
    return text


def describe_error(exc: Exception) -> str:
    """Translate a generation failure into the message shown to the user.

    Failures whose text mentions the API point the user at their key;
    everything else gets the generic notice.
    """
    if "API" in str(exc):
        return MSG_CHECK_API_KEY
    return MSG_GENERIC_FAILURE


# ---------------------------------------------------------------------------
# LyricsGenerator
# ---------------------------------------------------------------------------

class LyricsGenerator:
    """Generates lyrics via the Gemini API for a single credential."""

    def __init__(self, api_key: str, model: str | None = None, timeout: float | None = None):
        self.api_key = api_key
        self.model = model or DEFAULT_MODEL
        self.timeout = timeout if timeout is not None else TIMEOUTS["api_request_s"]

    @property
    def url(self) -> str:
        return f"{API_BASE}/models/{self.model}:generateContent"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate_content(self, topic: str) -> str:
        """Send one generation request for *topic* and return the raw text.

        The caller is responsible for checking that *topic* and the API key
        are non-empty.

        Raises:
            HttpStatusError: On a non-2xx response.
            MalformedEnvelopeError: On a 2xx response without candidate text.
            NetworkFailureError: On DNS, connection or timeout failures.
        """
        payload = build_payload(build_prompt(topic))
        logger.info("Requesting lyrics from %s (%d chars of topic)", self.model, len(topic))

        try:
            resp = requests.post(
                self.url,
                params={"key": self.api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            # The exception text carries the full URL, key included
            logger.error("Gemini request failed: %s", type(exc).__name__)
            raise NetworkFailureError(
                f"Network failure: {type(exc).__name__}"
            ) from exc

        if not 200 <= resp.status_code < 300:
            logger.error("Gemini returned HTTP %d", resp.status_code)
            raise HttpStatusError(resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            logger.error("Gemini returned HTTP %d with a non-JSON body", resp.status_code)
            raise MalformedEnvelopeError(
                "API response envelope is malformed: body is not JSON"
            ) from exc

        text = extract_text(data)
        logger.info("Gemini responded HTTP %d with %d chars", resp.status_code, len(text))
        return text

    def generate_sections(self, topic: str) -> ParsedSections:
        """Generate lyrics for *topic* and split them into sections."""
        return parse_response(self.generate_content(topic))
