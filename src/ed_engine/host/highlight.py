"""Locate regex capture groups across rendered text segments.

A page is modelled as an ordered list of text segments (its text nodes).
Segments are concatenated into one flat string, the regex runs over that
string, and each capture-group span is mapped back to ``(segment, offset)``
anchors so a host can wrap exactly that range in a styled element.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from ed_engine.errors import ErrorKind
from ed_engine.parsing import compile_pattern
from ed_engine.runtime import telemetry

HIGHLIGHT_CLASS = "rh-highlight-span"


@dataclass(frozen=True, slots=True)
class TextSegment:
    text: str
    excluded: bool = False


@dataclass(frozen=True, slots=True)
class MapEntry:
    segment: int
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True, slots=True)
class TextMap:
    full_text: str
    entries: Tuple[MapEntry, ...]


@dataclass(frozen=True, slots=True)
class SegmentAnchor:
    segment: int
    offset: int


@dataclass(frozen=True, slots=True)
class HighlightSpan:
    group: int
    start: int
    end: int
    start_anchor: SegmentAnchor
    end_anchor: SegmentAnchor

    @property
    def css_class(self) -> str:
        return f"{HIGHLIGHT_CLASS} rh-highlight-g{self.group}"


def build_text_map(segments: Sequence[TextSegment]) -> TextMap:
    entries: List[MapEntry] = []
    chunks: List[str] = []
    offset = 0
    for index, segment in enumerate(segments):
        if segment.excluded:
            continue
        entries.append(MapEntry(segment=index, start=offset, length=len(segment.text)))
        chunks.append(segment.text)
        offset += len(segment.text)
    return TextMap(full_text="".join(chunks), entries=tuple(entries))


def find_segment_range(
    text_map: TextMap, start: int, end: int
) -> Tuple[Optional[SegmentAnchor], Optional[SegmentAnchor]]:
    start_anchor: Optional[SegmentAnchor] = None
    end_anchor: Optional[SegmentAnchor] = None
    for entry in text_map.entries:
        if start_anchor is None and entry.end > start:
            start_anchor = SegmentAnchor(entry.segment, start - entry.start)
        if end_anchor is None and entry.end >= end:
            end_anchor = SegmentAnchor(entry.segment, end - entry.start)
            break
    return start_anchor, end_anchor


def find_highlights(regex_string: str, segments: Sequence[TextSegment]) -> List[HighlightSpan]:
    """Capture-group spans, last match first and last group first.

    Group 0 is never highlighted and zero-width groups are skipped.
    """

    pattern = compile_pattern(regex_string, kind=ErrorKind.INVALID_REGEX)
    text_map = build_text_map(segments)
    if not text_map.full_text:
        return []

    spans: List[HighlightSpan] = []
    for match in reversed(list(pattern.finditer(text_map.full_text))):
        for group in range(pattern.groups, 0, -1):
            start, end = match.span(group)
            if start < 0 or start == end:
                continue
            start_anchor, end_anchor = find_segment_range(text_map, start, end)
            if start_anchor is None or end_anchor is None:
                continue
            spans.append(HighlightSpan(group, start, end, start_anchor, end_anchor))
    return spans


class Highlighter:
    """Remembers the active regex so hosts can re-run it after edits."""

    def __init__(self) -> None:
        self.active: Optional[str] = None

    def apply(self, regex_string: str, segments: Iterable[TextSegment]) -> List[HighlightSpan]:
        self.active = regex_string or None
        if not self.active:
            return []
        with telemetry.span(
            "highlight::apply",
            logger_name="ed_engine.host.highlight",
            component="host",
            metadata={"regex": regex_string},
        ) as handle:
            spans = find_highlights(regex_string, list(segments))
            handle.add_metadata("spans", len(spans))
        return spans

    def reapply(self, segments: Iterable[TextSegment]) -> List[HighlightSpan]:
        if not self.active:
            return []
        return self.apply(self.active, segments)

    def remove(self) -> None:
        self.active = None


__all__ = [
    "HIGHLIGHT_CLASS",
    "TextSegment",
    "TextMap",
    "MapEntry",
    "SegmentAnchor",
    "HighlightSpan",
    "build_text_map",
    "find_segment_range",
    "find_highlights",
    "Highlighter",
]
