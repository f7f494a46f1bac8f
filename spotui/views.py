"""Labels, titles and geometry used when drawing the main screens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Collection, Iterable

from spotui.formatting import create_artist_string
from spotui.help import HelpEntry, get_help_docs

_PLAYING_MARK = "▶ "
_LIKED_MARK = "♥ "

_DIALOG_MAX_WIDTH = 45
_DIALOG_HEIGHT = 8


class RepeatState(Enum):
    OFF = "off"
    TRACK = "track"
    CONTEXT = "context"

    @property
    def label(self) -> str:
        """Text shown for this state in the playbar."""
        return _REPEAT_LABELS[self]

    def next(self) -> RepeatState:
        """The state that follows this one when cycling the repeat mode."""
        return _REPEAT_CYCLE[self]


_REPEAT_LABELS = {
    RepeatState.OFF: "Off",
    RepeatState.TRACK: "Track",
    RepeatState.CONTEXT: "All",
}

_REPEAT_CYCLE = {
    RepeatState.OFF: RepeatState.CONTEXT,
    RepeatState.CONTEXT: RepeatState.TRACK,
    RepeatState.TRACK: RepeatState.OFF,
}


class RecommendationsContext(Enum):
    SONG = "Song"
    ARTIST = "Artist"


@dataclass(frozen=True)
class Rect:
    """An area of the terminal, in cells."""

    x: int
    y: int
    width: int
    height: int


def recommendations_title(context: RecommendationsContext | None, seed: str) -> str:
    """Title of the recommendations table for the given seed."""
    if context is None:
        return "Recommendations"
    return f"Recommendations based on {context.value} '{seed}'"


def playbar_title(
    is_playing: bool,
    device_name: str,
    shuffle_state: bool,
    repeat_state: RepeatState,
    volume_percent: int,
) -> str:
    """Title line of the playbar describing the playback state."""
    play_title = "Playing" if is_playing else "Paused"
    shuffle_text = "On" if shuffle_state else "Off"
    return (
        f"{play_title:<7} ({device_name} | Shuffle: {shuffle_text:<3} | "
        f"Repeat: {repeat_state.label:<5} | Volume: {volume_percent:>2}%)"
    )


def track_label(
    name: str,
    artists: Iterable[Any],
    track_id: str | None,
    playing_id: str | None,
    liked_ids: Collection[str],
) -> str:
    """A song entry of the search results, marked when playing or liked."""
    track_key = track_id or ""
    label = ""
    if (playing_id or "") == track_key:
        label += _PLAYING_MARK
    if track_key in liked_ids:
        label += _LIKED_MARK
    return f"{label}{name} - {create_artist_string(artists)}"


def saved_label(text: str, item_id: str | None, saved_ids: Collection[str]) -> str:
    """Prefix the text with a heart if the item is saved or followed."""
    if item_id is not None and item_id in saved_ids:
        return f"{_LIKED_MARK}{text}"
    return text


def dialog_rect(width: int, height: int) -> Rect:
    """Where the confirmation dialog sits in a terminal of the given size."""
    if width < 2:
        raise ValueError(f"terminal width {width} is too small for a dialog")
    if height < 0:
        raise ValueError(f"terminal height {height} is negative")
    dialog_width = min(width - 2, _DIALOG_MAX_WIDTH)
    left = (width - dialog_width) // 2
    top = height // 4
    return Rect(left, top, dialog_width, _DIALOG_HEIGHT)


def help_rows(offset: int) -> list[HelpEntry]:
    """Help entries from the given scroll offset onwards."""
    docs = get_help_docs()
    if offset < 0 or offset > len(docs):
        raise IndexError(f"help offset {offset} is out of range 0..{len(docs)}")
    return docs[offset:]