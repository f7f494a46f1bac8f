"""Help screen contents: every shortcut with its description and context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class HelpEntry:
    """One row of the help table."""

    description: str
    event: str
    context: str

    def __iter__(self) -> Iterator[str]:
        return iter((self.description, self.event, self.context))


_HELP_DOCS = (
    HelpEntry("Scroll down to next result page", "<Ctrl+d>", "Pagination"),
    HelpEntry("Scroll up to previous result page", "<Ctrl+u>", "Pagination"),
    HelpEntry("Jump to start of playlist", "<Ctrl+a>", "Pagination"),
    HelpEntry("Jump to end of playlist", "<Ctrl+e>", "Pagination"),
    HelpEntry("Jump to currently playing album", "a", "General"),
    HelpEntry("Jump to currently playing artist's album list", "A", "General"),
    HelpEntry("Jump to current play context", "o", "General"),
    HelpEntry("Increase volume by 10%", "+", "General"),
    HelpEntry("Decrease volume by 10%", "-", "General"),
    HelpEntry("Skip to next track", "n", "General"),
    HelpEntry("Skip to previous track", "p", "General"),
    HelpEntry("Seek backwards 5 seconds", "<", "General"),
    HelpEntry("Seek forwards 5 seconds", ">", "General"),
    HelpEntry("Toggle shuffle", "<Ctrl+s>", "General"),
    HelpEntry("Copy url to currently playing song", "c", "General"),
    HelpEntry("Copy url to currently playing album", "C", "General"),
    HelpEntry("Cycle repeat mode", "<Ctrl+r>", "General"),
    HelpEntry("Move selection left", "h | <Left Arrow Key> | <Ctrl+b>", "General"),
    HelpEntry("Move selection down", "j | <Down Arrow Key> | <Ctrl+n>", "General"),
    HelpEntry("Move selection up", "k | <Up Arrow Key> | <Ctrl+p>", "General"),
    HelpEntry("Move selection right", "l | <Right Arrow Key> | <Ctrl+f>", "General"),
    HelpEntry("Move selection to top of list", "H", "General"),
    HelpEntry("Move selection to middle of list", "M", "General"),
    HelpEntry("Move selection to bottom of list", "L", "General"),
    HelpEntry("Enter input for search", "/", "General"),
    HelpEntry("Pause/Resume playback", "<Space>", "General"),
    HelpEntry("Enter active mode", "<Enter>", "General"),
    HelpEntry("Go to audio analysis screen", "v", "General"),
    HelpEntry("Go to playbar only screen (basic view)", "B", "General"),
    HelpEntry("Go back or exit when nowhere left to back to", "q", "General"),
    HelpEntry("Select device to play music on", "d", "General"),
    HelpEntry("Enter hover mode", "<Esc>", "Selected block"),
    HelpEntry("Save track in list or table", "s", "Selected block"),
    HelpEntry(
        "Start playback or enter album/artist/playlist", "<Enter>", "Selected block"
    ),
    HelpEntry("Play recommendations for song/artist", "r", "Selected block"),
    HelpEntry("Play all tracks for artist", "e", "Library -> Artists"),
    HelpEntry("Search with input text", "<Enter>", "Search input"),
    HelpEntry("Move cursor one space left", "<Left Arrow Key>", "Search input"),
    HelpEntry("Move cursor one space right", "<Right Arrow Key>", "Search input"),
    HelpEntry("Delete entire input", "<Ctrl+l>", "Search input"),
    HelpEntry("Delete text from cursor to start of input", "<Ctrl+u>", "Search input"),
    HelpEntry("Delete text from cursor to end of input", "<Ctrl+k>", "Search input"),
    HelpEntry("Delete previous word", "<Ctrl+w>", "Search input"),
    HelpEntry("Jump to start of input", "<Ctrl+a>", "Search input"),
    HelpEntry("Jump to end of input", "<Ctrl+e>", "Search input"),
    HelpEntry(
        "Escape from the input back to hovered block", "<Esc>", "Search input"
    ),
    HelpEntry("Delete saved album", "D", "Library -> Albums"),
    HelpEntry("Delete saved playlist", "D", "Playlist"),
    HelpEntry("Follow an artists/playlist", "w", "Search result"),
    HelpEntry("Play random song in playlist", "S", "Selected Playlist"),
)


def get_help_docs() -> list[HelpEntry]:
    """All help entries, in display order."""
    return list(_HELP_DOCS)