"""Table layouts: column headers, scrolling and row decoration for track lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Collection, Sequence

from spotui.formatting import get_percentage_width

# Rows taken up by the border, the header and the space below it.
_TABLE_PADDING = 5

_PLAYING_MARK = "▶ "
_LIKED_MARK = " ♥"


class TableId(Enum):
    ALBUM = "album"
    ALBUM_LIST = "album_list"
    ARTIST = "artist"
    SONG = "song"
    RECENTLY_PLAYED = "recently_played"
    MADE_FOR_YOU = "made_for_you"


# Tables whose rows are songs and so show the playing and liked marks.
_SONG_TABLES = frozenset({TableId.SONG, TableId.RECENTLY_PLAYED, TableId.ALBUM})


class ColumnId(Enum):
    NONE = "none"
    SONG_TITLE = "song_title"
    LIKED = "liked"


@dataclass(frozen=True)
class TableHeaderItem:
    """One column: its heading, its width in cells and what it holds."""

    text: str
    width: int
    column_id: ColumnId = ColumnId.NONE


@dataclass(frozen=True)
class TableHeader:
    table_id: TableId
    items: tuple[TableHeaderItem, ...] = ()

    def get_index(self, column_id: ColumnId) -> int | None:
        """Position of the first column with the given id, or None."""
        return next(
            (index for index, item in enumerate(self.items) if item.column_id is column_id),
            None,
        )

    @property
    def texts(self) -> tuple[str, ...]:
        return tuple(item.text for item in self.items)

    @property
    def widths(self) -> tuple[int, ...]:
        return tuple(item.width for item in self.items)


@dataclass(frozen=True)
class TableItem:
    """An entry to show: its id and one formatted cell per column."""

    id: str
    format: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TableRow:
    """A row ready for display."""

    id: str
    cells: tuple[str, ...]
    playing: bool = False
    selected: bool = False


def table_offset(height: int, selected_index: int) -> int:
    """Number of leading rows to skip so the selected row stays visible."""
    visible = height - _TABLE_PADDING
    if visible < 0 or selected_index < visible:
        return 0
    return selected_index - visible


def build_table_rows(
    header: TableHeader,
    items: Sequence[TableItem],
    selected_index: int,
    height: int,
    playing_id: str | None = None,
    liked_ids: Collection[str] = frozenset(),
) -> list[TableRow]:
    """The rows visible in a table of the given height, marked for display."""
    offset = table_offset(height, selected_index)
    playing_index = (
        None
        if playing_id is None
        else next((i for i, item in enumerate(items) if item.id == playing_id), None)
    )
    is_song_table = header.table_id in _SONG_TABLES
    title_index = header.get_index(ColumnId.SONG_TITLE)
    liked_index = header.get_index(ColumnId.LIKED)

    rows = []
    for index, item in enumerate(items[offset:], start=offset):
        cells = list(item.format)
        playing = False
        if is_song_table:
            if title_index is not None and index == playing_index:
                cells[title_index] = f"{_PLAYING_MARK}{cells[title_index]}"
                playing = True
            if liked_index is not None and item.id in liked_ids:
                cells[liked_index] = _LIKED_MARK
        rows.append(
            TableRow(
                id=item.id,
                cells=tuple(cells),
                playing=playing,
                selected=index == selected_index,
            )
        )
    return rows


def _narrowed(width: int, amount: int) -> int:
    if width < amount:
        raise ValueError(f"column width {width} is too small to remove {amount}")
    return width - amount


def song_table_header(width: int) -> TableHeader:
    """Columns of the song and recommendation tables."""
    return TableHeader(
        TableId.SONG,
        (
            TableHeaderItem("", 2, ColumnId.LIKED),
            TableHeaderItem("Title", get_percentage_width(width, 0.3), ColumnId.SONG_TITLE),
            TableHeaderItem("Artist", get_percentage_width(width, 0.3)),
            TableHeaderItem("Album", get_percentage_width(width, 0.3)),
            TableHeaderItem("Length", get_percentage_width(width, 0.1)),
        ),
    )


def album_table_header(width: int) -> TableHeader:
    """Columns of an album's track list."""
    return TableHeader(
        TableId.ALBUM,
        (
            TableHeaderItem("", 2, ColumnId.LIKED),
            TableHeaderItem("#", 3),
            TableHeaderItem(
                "Title",
                _narrowed(get_percentage_width(width, 2.0 / 5.0), 5),
                ColumnId.SONG_TITLE,
            ),
            TableHeaderItem("Artist", get_percentage_width(width, 2.0 / 5.0)),
            TableHeaderItem("Length", get_percentage_width(width, 1.0 / 5.0)),
        ),
    )


def recently_played_header(width: int) -> TableHeader:
    """Columns of the recently played tracks table."""
    return TableHeader(
        TableId.RECENTLY_PLAYED,
        (
            TableHeaderItem("", 2, ColumnId.LIKED),
            # the title gives up the width of the fixed column before it
            TableHeaderItem(
                "Title",
                _narrowed(get_percentage_width(width, 2.0 / 5.0), 2),
                ColumnId.SONG_TITLE,
            ),
            TableHeaderItem("Artist", get_percentage_width(width, 2.0 / 5.0)),
            TableHeaderItem("Length", get_percentage_width(width, 1.0 / 5.0)),
        ),
    )


def album_list_header(width: int) -> TableHeader:
    """Columns of the saved albums table."""
    return TableHeader(
        TableId.ALBUM_LIST,
        (
            TableHeaderItem("Name", get_percentage_width(width, 2.0 / 5.0)),
            TableHeaderItem("Artists", get_percentage_width(width, 2.0 / 5.0)),
            TableHeaderItem("Release Date", get_percentage_width(width, 1.0 / 5.0)),
        ),
    )


def artist_table_header(width: int) -> TableHeader:
    """Columns of the followed artists table."""
    return TableHeader(
        TableId.ARTIST,
        (TableHeaderItem("Artist", get_percentage_width(width, 1.0)),),
    )


def made_for_you_header(width: int) -> TableHeader:
    """Columns of the made-for-you playlists table."""
    return TableHeader(
        TableId.MADE_FOR_YOU,
        (TableHeaderItem("Name", get_percentage_width(width, 2.0 / 5.0)),),
    )