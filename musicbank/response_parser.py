"""
MusicBank - Response Parser

Splits the free-text Gemini response into the three sections requested by
the prompt template: lyrics, recommended style, and the SUNO AI format.

Each section is located independently in the same raw string by its
literal marker.  The first occurrence of a marker wins and a section ends
at the first later marker that may follow it, or at end-of-string.
"""

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Markers (shared with the prompt template in api_client.py)
# ---------------------------------------------------------------------------

LYRICS_MARKER = "**가사:**"
STYLE_MARKER = "**추천 스타일:**"
SUNO_MARKER = "**SUNO AI 형식:**"


# ---------------------------------------------------------------------------
# Data
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ParsedSections:
    """The three labeled sections of one generation result."""
    lyrics: str = ""
    style: str = ""
    suno_format: str = ""

    def is_empty(self) -> bool:
        return not (self.lyrics or self.style or self.suno_format)


class CopyTarget(Enum):
    """Which part of a result the user asked to copy."""
    ALL = "all"
    LYRICS = "lyrics"
    SUNO = "suno"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _extract(raw: str, marker: str, terminators: tuple[str, ...]) -> str:
    """Return the trimmed text after *marker* up to the nearest terminator."""
    start = raw.find(marker)
    if start == -1:
        return ""
    start += len(marker)

    end = len(raw)
    for terminator in terminators:
        idx = raw.find(terminator, start)
        if idx != -1 and idx < end:
            end = idx
    return raw[start:end].strip()


def parse_response(raw: str) -> ParsedSections:
    """Split a raw model response into lyrics, style and SUNO sections.

    Never raises.  A section whose marker is missing comes back as an
    empty string.
    """
    return ParsedSections(
        lyrics=_extract(raw, LYRICS_MARKER, (STYLE_MARKER, SUNO_MARKER)),
        style=_extract(raw, STYLE_MARKER, (SUNO_MARKER,)),
        suno_format=_extract(raw, SUNO_MARKER, ()),
    )


# ---------------------------------------------------------------------------
# Clipboard rendering
# ---------------------------------------------------------------------------

def format_for_copy(
    lyrics: str,
    style: str,
    suno_format: str,
    target: CopyTarget = CopyTarget.ALL,
) -> str:
    """Render the text placed on the clipboard for a copy request.

    Takes the displayed strings rather than a ``ParsedSections`` so the
    fallback messages shown in the UI are copied as they appear.
    """
    if target is CopyTarget.LYRICS:
        return lyrics
    if target is CopyTarget.SUNO:
        return suno_format
    return (
        f"🎵 가사\n{lyrics}\n\n"
        f"🎨 추천 스타일\n{style}\n\n"
        f"🎤 SUNO AI 형식\n{suno_format}"
    )
