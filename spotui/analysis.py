"""Audio analysis view: pitches, tempo, key and time signature at a play position."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

PITCHES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

_U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class Beat:
    start: float


@dataclass(frozen=True)
class Segment:
    start: float
    pitches: tuple[float, ...] = ()


@dataclass(frozen=True)
class Section:
    start: float
    tempo: float
    tempo_confidence: float
    key: int
    key_confidence: float
    time_signature: int
    time_signature_confidence: float


@dataclass
class AudioAnalysis:
    beats: list[Beat] = field(default_factory=list)
    segments: list[Segment] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)


@dataclass(frozen=True)
class AnalysisView:
    """Text lines describing the section and one bar per pitch."""

    lines: tuple[str, ...]
    bars: tuple[tuple[str, int], ...]


def pitch_name(index: int) -> str:
    """Name of a pitch class; out-of-range indices fall back to C."""
    if 0 <= index < len(PITCHES):
        return PITCHES[index]
    return PITCHES[0]


def bar_chart_title(tick_rate: int) -> str:
    if tick_rate <= 0:
        raise ValueError(f"tick rate must be positive, is {tick_rate}")
    return f"Pitches | Tick Rate {tick_rate} {1000 // tick_rate}FPS"


def _format_number(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _as_u64(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U64_MAX:
        return _U64_MAX
    return int(value)


def _bar_value(pitch: float, beat_offset: float) -> int:
    total = _as_u64(pitch * 1000.0) + _as_u64(beat_offset * 3000.0)
    # an overflowing sum shows as an empty bar
    return total if total <= _U64_MAX else 0


def analyse(analysis: AudioAnalysis, song_progress_ms: int) -> AnalysisView | None:
    """Build the view for the given play position, or None if nothing lies ahead."""
    progress_seconds = song_progress_ms / 1000.0

    beat = next((b for b in analysis.beats if b.start >= progress_seconds), None)
    beat_offset = beat.start - progress_seconds if beat is not None else 0.0
    segment = next((s for s in analysis.segments if s.start >= progress_seconds), None)
    section = next((s for s in analysis.sections if s.start >= progress_seconds), None)
    if segment is None or section is None:
        return None

    lines = (
        f"Tempo: {_format_number(section.tempo)} "
        f"(confidence {section.tempo_confidence * 100.0:.0f}%)",
        f"Key: {pitch_name(section.key)} "
        f"(confidence {section.key_confidence * 100.0:.0f}%)",
        f"Time Signature: {section.time_signature}/4 "
        f"(confidence {section.time_signature_confidence * 100.0:.0f}%)",
    )
    bars = tuple(
        (pitch_name(index), _bar_value(pitch, beat_offset))
        for index, pitch in enumerate(segment.pitches)
    )
    return AnalysisView(lines=lines, bars=bars)