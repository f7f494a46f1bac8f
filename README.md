# spotui

This package holds the parts of a terminal music player that do not depend on
any drawing library. It reads the user's configuration and parses key
bindings and theme colours. It lays out track tables, builds the text of the
audio analysis view and formats playback information. It also provides a
queue of keyboard and timer events and a small server that captures an
authorisation redirect.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Configuration

`spotui.user_config.UserConfig` holds three things:

- `keys`, a `KeyBindings`
- `theme`, a `Theme`
- `behavior`, a `BehaviorConfig`

`load_config()` applies a YAML file on top of the defaults. If
`config_file_path` is not set, it uses `~/.config/spotify-tui/config.yml`,
and `get_or_build_paths()` creates that directory when it is missing. A
missing or empty file leaves the defaults unchanged.

```yaml
keybindings:
  back: "ctrl-q"
  search: "space"
behavior:
  seek_milliseconds: 10000
  volume_increment: 5
  tick_rate_milliseconds: 200
  show_loading_indicator: false
theme:
  active: "Cyan"
  selected: "255, 128, 0"
```

```python
from spotui.user_config import UserConfig

config = UserConfig()
config.load_config()
print(config.behavior.volume_increment)
```

### Keys

`parse_key` turns a shortcut string into a `Key`. A shortcut can be any of:

- a single character
- a name: `left`, `right`, `up`, `down`, `backspace`/`delete`, `del`, `esc`/`escape`, `pageup`, `pagedown` or `space`
- a modifier with a key, such as `ctrl-s` or `alt-x`

`check_reserved_keys` raises `ConfigError` for the keys kept for navigation:

- `h`, `j`, `k`, `l`, `H`, `M`, `L`
- the arrow keys, backspace and enter

### Colours

`parse_theme_item` accepts a named `Color`, such as `LightCyan`, or an
`r, g, b` triple, which becomes an `Rgb`. Any other text prints a warning and
gives `Color.BLACK`.

### Behaviour

Each setting can also be applied directly with `load_keybindings`,
`load_theme` and `load_behavior_config`.

- A volume increment outside 0–100 is rejected.
- A tick rate of 1000 ms or more is rejected.
- Values of the wrong type are rejected.

All of these raise `ConfigError`.

## Formatting

`spotui.formatting` turns playback data into text and widths:

```python
from spotui.formatting import millis_to_minutes, display_track_progress

millis_to_minutes(90_000)                    # "1:30"
display_track_progress(60_000, 120_000)      # "1:00/2:00 (-1:00)"
```

It also provides:

- `get_color(highlight_state, theme)`: the colour of a block from `(is_active, is_hovered)`
- `create_artist_string`: artist names joined by commas
- `get_percentage_width`: a share of a width after padding
- `get_track_progress_percentage`: progress as a percentage, clamped to 0–100
- `get_main_layout_margin`: the layout margin for a terminal height

## Other modules

- `spotui.help`: the help table as `HelpEntry` rows (`get_help_docs`).
- `spotui.analysis`: `analyse(analysis, song_progress_ms)` finds the next beat, segment and section of an `AudioAnalysis`. It returns an `AnalysisView` that holds the tempo, key and time-signature lines and one bar per pitch. It returns `None` when nothing lies ahead. `bar_chart_title` and `pitch_name` are helpers for this view.
- `spotui.redirect`: `redirect_uri_web_server(port, on_listening)` listens on 127.0.0.1 and returns the path of the first well-formed request. Once the socket is bound, it calls `on_listening` with the port. `parse_redirect_request`, `success_response` and `error_response` are its request and response helpers.
- `spotui.events`: `Events` puts keyboard input and timer ticks on one queue.
  - The keys come from standard input, or from any iterable of `Key` that you pass in.
  - `next()` waits for the next `Event`.
  - `close()`, or leaving a `with` block, stops the ticks.
  - Input stops after the exit key set in `EventsConfig`.
- `spotui.tables`: table headers for each table kind (`song_table_header`, `album_table_header` and the others), `table_offset` for scrolling, and `build_table_rows`, which marks the playing, liked and selected rows.
- `spotui.views`: the playbar title, the recommendations title and the song labels for search results, plus the following.
  - `saved_label` adds a heart to saved or followed items.
  - `dialog_rect` places the confirmation dialog.
  - `help_rows` scrolls the help table.
  - `RepeatState.next()` cycles the repeat mode.

## What this package does not do

- It has no command to run.
- It draws nothing on screen; the text and sizes it computes are meant to be passed to a renderer of your choice.
- It has no client for a streaming service. It does not fetch playlists, search, control playback or refresh tokens.
- The redirect server only returns the path it received. Exchanging that for a token is left to the caller.