"""Tests for splitting model responses into lyrics, style and SUNO sections."""

from response_parser import (
    LYRICS_MARKER, STYLE_MARKER, SUNO_MARKER,
    CopyTarget, ParsedSections, format_for_copy, parse_response,
)


class TestParseResponse:
    def test_empty_string(self):
        sections = parse_response("")
        assert sections == ParsedSections("", "", "")
        assert sections.is_empty()

    def test_all_three_sections(self):
        raw = "**가사:**A\n**추천 스타일:**B\n**SUNO AI 형식:**C"
        sections = parse_response(raw)
        assert sections.lyrics == "A"
        assert sections.style == "B"
        assert sections.suno_format == "C"

    def test_no_markers(self):
        sections = parse_response("그냥 평범한 텍스트입니다.")
        assert sections.is_empty()

    def test_fields_do_not_reparse(self, sample_response):
        sections = parse_response(sample_response)
        for field in (sections.lyrics, sections.style, sections.suno_format):
            assert field
            assert parse_response(field).is_empty()

    def test_missing_lyrics_marker(self):
        raw = f"{STYLE_MARKER} 록\n{SUNO_MARKER} [Rock] 가사"
        sections = parse_response(raw)
        assert sections.lyrics == ""
        assert sections.style == "록"
        assert sections.suno_format == "[Rock] 가사"

    def test_missing_style_marker_lyrics_stop_at_suno(self):
        raw = f"{LYRICS_MARKER}\n첫 줄\n둘째 줄\n{SUNO_MARKER}\n[Pop]"
        sections = parse_response(raw)
        assert sections.lyrics == "첫 줄\n둘째 줄"
        assert sections.style == ""
        assert sections.suno_format == "[Pop]"

    def test_lyrics_only_runs_to_end(self):
        sections = parse_response(f"서문\n{LYRICS_MARKER}\n  끝까지 가사  \n")
        assert sections.lyrics == "끝까지 가사"
        assert sections.style == ""
        assert sections.suno_format == ""

    def test_extra_blank_lines_do_not_change_content(self):
        tight = f"{LYRICS_MARKER}A\n{STYLE_MARKER}B\n{SUNO_MARKER}C"
        loose = (
            f"\n\n{LYRICS_MARKER}\n\n\nA\n\n\n\n{STYLE_MARKER}\n \n B \n\n"
            f"{SUNO_MARKER}\n\n\tC\n\n\n"
        )
        assert parse_response(tight) == parse_response(loose)

    def test_markers_are_case_sensitive(self):
        sections = parse_response("**suno ai 형식:** lower case")
        assert sections.suno_format == ""

    def test_first_occurrence_wins(self):
        raw = f"{LYRICS_MARKER}one{STYLE_MARKER}s1{LYRICS_MARKER}two{STYLE_MARKER}s2"
        sections = parse_response(raw)
        assert sections.lyrics == "one"
        assert sections.style == f"s1{LYRICS_MARKER}two{STYLE_MARKER}s2"

    def test_sample_response(self, sample_response):
        sections = parse_response(sample_response)
        assert sections.lyrics.startswith("[Verse 1]")
        assert sections.lyrics.endswith("영원히 함께해")
        assert sections.style == "어쿠스틱 발라드, 느린 템포, 따뜻한 피아노"
        assert sections.suno_format.startswith("[Style: Acoustic Ballad]")

    def test_sections_appear_in_raw_in_order(self, sample_response):
        sections = parse_response(sample_response)
        positions = [
            sample_response.index(sections.lyrics),
            sample_response.index(sections.style),
            sample_response.index(sections.suno_format),
        ]
        assert positions == sorted(positions)


class TestFormatForCopy:
    def test_all_layout(self):
        text = format_for_copy("L", "S", "U", CopyTarget.ALL)
        assert text == "🎵 가사\nL\n\n🎨 추천 스타일\nS\n\n🎤 SUNO AI 형식\nU"

    def test_default_target_is_all(self):
        assert format_for_copy("L", "S", "U") == format_for_copy("L", "S", "U", CopyTarget.ALL)

    def test_lyrics_only(self):
        assert format_for_copy("L", "S", "U", CopyTarget.LYRICS) == "L"

    def test_suno_only(self):
        assert format_for_copy("L", "S", "U", CopyTarget.SUNO) == "U"
