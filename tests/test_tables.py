import pytest

from spotui.formatting import get_percentage_width
from spotui.tables import (
    ColumnId,
    TableHeader,
    TableHeaderItem,
    TableId,
    TableItem,
    album_list_header,
    album_table_header,
    artist_table_header,
    build_table_rows,
    made_for_you_header,
    recently_played_header,
    song_table_header,
    table_offset,
)


def _song_items(count):
    return [
        TableItem(f"id{n}", ("", f"song{n}", "artist", "album", "3:00"))
        for n in range(count)
    ]


def test_get_index_finds_columns():
    header = song_table_header(80)
    assert header.get_index(ColumnId.LIKED) == 0
    assert header.get_index(ColumnId.SONG_TITLE) == 1


def test_get_index_missing_column_is_none():
    header = artist_table_header(80)
    assert header.get_index(ColumnId.SONG_TITLE) is None
    assert header.get_index(ColumnId.LIKED) is None


def test_song_header_columns():
    width = 103
    header = song_table_header(width)
    assert header.table_id is TableId.SONG
    assert header.texts == ("", "Title", "Artist", "Album", "Length")
    assert header.widths[0] == 2
    assert header.widths[1] == get_percentage_width(width, 0.3)
    assert header.widths[4] == get_percentage_width(width, 0.1)


def test_album_header_title_is_narrowed():
    width = 83
    header = album_table_header(width)
    assert header.texts == ("", "#", "Title", "Artist", "Length")
    assert header.widths[:2] == (2, 3)
    assert header.widths[2] == header.widths[3] - 5


def test_recently_played_header_title_is_narrowed():
    header = recently_played_header(83)
    assert header.table_id is TableId.RECENTLY_PLAYED
    assert header.texts == ("", "Title", "Artist", "Length")
    assert header.widths[1] == header.widths[2] - 2


def test_album_header_too_narrow_raises():
    with pytest.raises(ValueError):
        album_table_header(5)


def test_album_list_and_made_for_you_headers():
    assert album_list_header(60).texts == ("Name", "Artists", "Release Date")
    assert made_for_you_header(60).texts == ("Name",)
    assert made_for_you_header(60).widths == (get_percentage_width(60, 2.0 / 5.0),)
    assert artist_table_header(60).widths == (get_percentage_width(60, 1.0),)


@pytest.mark.parametrize("selected", [0, 3, 14])
def test_offset_zero_while_selection_fits(selected):
    assert table_offset(20, selected) == 0


@pytest.mark.parametrize("height,selected", [(20, 15), (20, 40), (10, 7)])
def test_offset_keeps_selection_at_bottom(height, selected):
    offset = table_offset(height, selected)
    assert selected - offset == height - 5


def test_offset_tiny_table_is_zero():
    assert table_offset(3, 50) == 0


def test_rows_mark_selected_and_skip_offset():
    items = _song_items(30)
    rows = build_table_rows(song_table_header(80), items, 25, 20)
    offset = table_offset(20, 25)
    assert len(rows) == len(items) - offset
    assert rows[0].id == items[offset].id
    assert [row.id for row in rows if row.selected] == ["id25"]


def test_rows_mark_playing_and_liked():
    items = _song_items(4)
    rows = build_table_rows(
        song_table_header(80), items, 0, 20, playing_id="id2", liked_ids={"id1"}
    )
    assert rows[2].playing
    assert rows[2].cells[1] == "▶ song2"
    assert rows[1].cells[0] == " ♥"
    assert rows[0].cells == items[0].format
    assert not rows[0].playing


def test_non_song_tables_are_not_decorated():
    header = TableHeader(
        TableId.ARTIST,
        (TableHeaderItem("Artist", 10, ColumnId.SONG_TITLE),),
    )
    items = [TableItem("a", ("Band",))]
    rows = build_table_rows(header, items, 0, 20, playing_id="a", liked_ids={"a"})
    assert rows[0].cells == ("Band",)
    assert not rows[0].playing
    assert rows[0].selected


def test_playing_row_outside_view_not_marked():
    items = _song_items(30)
    rows = build_table_rows(song_table_header(80), items, 29, 10, playing_id="id0")
    assert all(not row.playing for row in rows)
    assert all(row.cells == item.format for row, item in zip(rows, items[-len(rows):]))