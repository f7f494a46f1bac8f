"""Display helpers: highlight colours, durations and widths."""

from __future__ import annotations

from typing import Any, Iterable

from spotui.user_config import Color, Rgb, Theme

SMALL_TERMINAL_HEIGHT = 45


def get_color(highlight_state: tuple[bool, bool], theme: Theme) -> Color | Rgb:
    """Foreground colour for a block given (is_active, is_hovered)."""
    is_active, is_hovered = highlight_state
    if is_active:
        return theme.selected
    if is_hovered:
        return theme.hovered
    return theme.inactive


def create_artist_string(artists: Iterable[Any]) -> str:
    """Join artist names with commas; items are names or objects with ``name``."""
    return ", ".join(str(getattr(artist, "name", artist)) for artist in artists)


def millis_to_minutes(millis: int) -> str:
    minutes, remainder = divmod(millis, 60000)
    seconds = remainder // 1000
    return f"{minutes}:{seconds:02d}"


def display_track_progress(progress: int, track_duration: int) -> str:
    remaining = max(track_duration - progress, 0)
    return (
        f"{millis_to_minutes(progress)}/{millis_to_minutes(track_duration)}"
        f" (-{millis_to_minutes(remaining)})"
    )


def get_percentage_width(width: int, percentage: float) -> int:
    """Share of the width left after padding; ``percentage`` is between 0 and 1."""
    padding = 3
    if width < padding:
        raise ValueError(f"width {width} is smaller than the padding {padding}")
    return int((width - padding) * percentage)


def get_track_progress_percentage(song_progress_ms: int, track_duration_ms: int) -> int:
    """Progress as a whole percentage, clamped to 0..100."""
    if track_duration_ms <= 0:
        return 0
    progress = min(song_progress_ms, track_duration_ms)
    return int(max(0.0, progress / track_duration_ms * 100.0))


def get_main_layout_margin(terminal_height: int) -> int:
    """Margin of the main layout: 1 on tall terminals, none on small ones."""
    if terminal_height < 0:
        raise ValueError(f"terminal height {terminal_height} is negative")
    if terminal_height > SMALL_TERMINAL_HEIGHT:
        return 1
    return 0