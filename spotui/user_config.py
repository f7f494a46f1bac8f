"""User configuration: key bindings, theme colours and behaviour settings."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

import yaml

FILE_NAME = "config.yml"
CONFIG_DIR = ".config"
APP_CONFIG_DIR = "spotify-tui"


class ConfigError(Exception):
    """Raised when the user configuration is invalid or cannot be loaded."""


class KeyCode(Enum):
    CHAR = "char"
    CTRL = "ctrl"
    ALT = "alt"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    BACKSPACE = "backspace"
    DELETE = "delete"
    ESC = "esc"
    PAGE_UP = "pageup"
    PAGE_DOWN = "pagedown"
    ENTER = "enter"


@dataclass(frozen=True)
class Key:
    """A key press; ``char`` is set for character, ctrl and alt keys."""

    code: KeyCode
    char: str | None = None

    def __str__(self) -> str:
        if self.code is KeyCode.CHAR:
            return repr(self.char)
        if self.code in (KeyCode.CTRL, KeyCode.ALT):
            return f"{self.code.value}-{self.char}"
        return self.code.value


class Color(Enum):
    RESET = "Reset"
    BLACK = "Black"
    RED = "Red"
    GREEN = "Green"
    YELLOW = "Yellow"
    BLUE = "Blue"
    MAGENTA = "Magenta"
    CYAN = "Cyan"
    GRAY = "Gray"
    DARK_GRAY = "DarkGray"
    LIGHT_RED = "LightRed"
    LIGHT_GREEN = "LightGreen"
    LIGHT_YELLOW = "LightYellow"
    LIGHT_BLUE = "LightBlue"
    LIGHT_MAGENTA = "LightMagenta"
    LIGHT_CYAN = "LightCyan"
    WHITE = "White"


@dataclass(frozen=True)
class Rgb:
    """A true-colour value."""

    r: int
    g: int
    b: int


@dataclass
class Theme:
    analysis_bar: Color | Rgb = Color.LIGHT_CYAN
    analysis_bar_text: Color | Rgb = Color.BLACK
    active: Color | Rgb = Color.CYAN
    banner: Color | Rgb = Color.LIGHT_CYAN
    error_border: Color | Rgb = Color.RED
    error_text: Color | Rgb = Color.LIGHT_RED
    hint: Color | Rgb = Color.YELLOW
    hovered: Color | Rgb = Color.MAGENTA
    inactive: Color | Rgb = Color.GRAY
    playbar_background: Color | Rgb = Color.BLACK
    playbar_progress: Color | Rgb = Color.LIGHT_CYAN
    playbar_text: Color | Rgb = Color.WHITE
    selected: Color | Rgb = Color.LIGHT_CYAN
    text: Color | Rgb = Color.WHITE


# Theme entries the user may override, in the order they are applied.
_USER_THEME_FIELDS = (
    "active",
    "banner",
    "error_border",
    "error_text",
    "hint",
    "hovered",
    "inactive",
    "playbar_background",
    "playbar_progress",
    "playbar_text",
    "selected",
    "text",
)


def _char(c: str) -> Key:
    return Key(KeyCode.CHAR, c)


@dataclass
class KeyBindings:
    back: Key = _char("q")
    jump_to_album: Key = _char("a")
    jump_to_artist_album: Key = _char("A")
    jump_to_context: Key = _char("o")
    manage_devices: Key = _char("d")
    decrease_volume: Key = _char("-")
    increase_volume: Key = _char("+")
    toggle_playback: Key = _char(" ")
    seek_backwards: Key = _char("<")
    seek_forwards: Key = _char(">")
    next_track: Key = _char("n")
    previous_track: Key = _char("p")
    help: Key = _char("?")
    shuffle: Key = Key(KeyCode.CTRL, "s")
    repeat: Key = Key(KeyCode.CTRL, "r")
    search: Key = _char("/")
    submit: Key = Key(KeyCode.ENTER)
    copy_song_url: Key = _char("c")
    copy_album_url: Key = _char("C")
    audio_analysis: Key = _char("v")
    basic_view: Key = _char("B")


@dataclass
class BehaviorConfig:
    seek_milliseconds: int = 5 * 1000
    volume_increment: int = 10
    tick_rate_milliseconds: int = 250
    show_loading_indicator: bool = True


_NAMED_KEYS = {
    "left": Key(KeyCode.LEFT),
    "right": Key(KeyCode.RIGHT),
    "up": Key(KeyCode.UP),
    "down": Key(KeyCode.DOWN),
    "backspace": Key(KeyCode.BACKSPACE),
    "delete": Key(KeyCode.BACKSPACE),
    "del": Key(KeyCode.DELETE),
    "esc": Key(KeyCode.ESC),
    "escape": Key(KeyCode.ESC),
    "pageup": Key(KeyCode.PAGE_UP),
    "pagedown": Key(KeyCode.PAGE_DOWN),
    "space": Key(KeyCode.CHAR, " "),
}

_RESERVED_KEYS = frozenset(
    [*(_char(c) for c in "hjklHML")]
    + [
        Key(KeyCode.UP),
        Key(KeyCode.DOWN),
        Key(KeyCode.LEFT),
        Key(KeyCode.RIGHT),
        Key(KeyCode.BACKSPACE),
        Key(KeyCode.ENTER),
    ]
)


def _first_char(section: str, key: str) -> str:
    if not section:
        raise ConfigError(f'The shortcut "{key}" is missing a key after the modifier')
    return section[0]


def parse_key(key: str) -> Key:
    """Parse a shortcut such as ``j``, ``ctrl-r`` or ``esc`` into a Key."""
    if len(key) == 1:
        return _char(key)

    sections = key.split("-")
    if len(sections) > 2:
        raise ConfigError(
            f'Shortcut can only have 2 keys, "{key}" has {len(sections)}'
        )

    modifier = sections[0].lower()
    if modifier in ("ctrl", "alt"):
        if len(sections) < 2:
            raise ConfigError(f'The shortcut "{key}" is missing a key after the modifier')
        code = KeyCode.CTRL if modifier == "ctrl" else KeyCode.ALT
        return Key(code, _first_char(sections[1], key))
    try:
        return _NAMED_KEYS[modifier]
    except KeyError:
        raise ConfigError(f'The key "{sections[0]}" is unknown.') from None


def check_reserved_keys(key: Key) -> None:
    """Raise ConfigError if the key is reserved for navigation."""
    if key in _RESERVED_KEYS:
        raise ConfigError(f"The key {key} is reserved and cannot be remapped")


_RGB_PART = re.compile(r"\+?\d+")


def _parse_channel(part: str) -> int:
    text = part.strip()
    if not _RGB_PART.fullmatch(text):
        raise ConfigError(f'Invalid colour component "{part}"')
    value = int(text)
    if value > 255:
        raise ConfigError(f'Colour component "{part}" is out of range')
    return value


def parse_theme_item(theme_item: str) -> Color | Rgb:
    """Parse a colour name or an ``r, g, b`` triple."""
    try:
        return Color(theme_item)
    except ValueError:
        pass
    parts = theme_item.split(",")
    if len(parts) >= 3:
        return Rgb(*(_parse_channel(part) for part in parts[:3]))
    print(f"Unexpected color {theme_item}")
    return Color.BLACK


def _optional(section: Mapping[str, Any], name: str, kind: type, kind_name: str) -> Any:
    value = section.get(name)
    if value is None:
        return None
    # bool is a subclass of int; keep them apart
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(f"Invalid type for {name}: expected {kind_name}")
    return value


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any] | None:
    value = data.get(name)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ConfigError(f"Invalid type for {name}: expected a mapping")
    return value


@dataclass
class UserConfig:
    """Key bindings, theme and behaviour, optionally loaded from a YAML file."""

    keys: KeyBindings = field(default_factory=KeyBindings)
    theme: Theme = field(default_factory=Theme)
    behavior: BehaviorConfig = field(default_factory=BehaviorConfig)
    config_file_path: Path | None = None

    def get_or_build_paths(self) -> Path:
        """Create the configuration directories and record the file path."""
        try:
            home = Path.home()
        except RuntimeError:
            raise ConfigError("No $HOME directory found for client config") from None
        app_config_dir = home / CONFIG_DIR / APP_CONFIG_DIR
        try:
            app_config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(f"Cannot create {app_config_dir}: {exc}") from exc
        self.config_file_path = app_config_dir / FILE_NAME
        return self.config_file_path

    def load_keybindings(self, keybindings: Mapping[str, Any]) -> None:
        for binding in dataclasses.fields(KeyBindings):
            key_string = _optional(keybindings, binding.name, str, "a string")
            if key_string is None:
                continue
            key = parse_key(key_string)
            setattr(self.keys, binding.name, key)
            check_reserved_keys(key)

    def load_theme(self, theme: Mapping[str, Any]) -> None:
        for name in _USER_THEME_FIELDS:
            item = _optional(theme, name, str, "a string")
            if item is not None:
                setattr(self.theme, name, parse_theme_item(item))

    def load_behavior_config(self, behavior_config: Mapping[str, Any]) -> None:
        seek = _optional(behavior_config, "seek_milliseconds", int, "an integer")
        if seek is not None:
            if not 0 <= seek <= 0xFFFFFFFF:
                raise ConfigError("seek_milliseconds is out of range")
            self.behavior.seek_milliseconds = seek

        volume = _optional(behavior_config, "volume_increment", int, "an integer")
        if volume is not None:
            if volume < 0 or volume > 100:
                raise ConfigError(
                    f"Volume increment must be between 0 and 100, is {volume}"
                )
            self.behavior.volume_increment = volume

        tick_rate = _optional(behavior_config, "tick_rate_milliseconds", int, "an integer")
        if tick_rate is not None:
            if tick_rate < 0:
                raise ConfigError("tick_rate_milliseconds is out of range")
            if tick_rate >= 1000:
                raise ConfigError("Tick rate must be below 1000")
            self.behavior.tick_rate_milliseconds = tick_rate

        indicator = _optional(behavior_config, "show_loading_indicator", bool, "a boolean")
        if indicator is not None:
            self.behavior.show_loading_indicator = indicator

    def load_config(self) -> None:
        """Read the YAML config file, if present, and apply it."""
        path = self.config_file_path or self.get_or_build_paths()
        if not path.exists():
            return
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read {path}: {exc}") from exc
        if not text.strip():
            return
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid config file {path}: {exc}") from exc
        if data is None:
            return
        if not isinstance(data, Mapping):
            raise ConfigError(f"Invalid config file {path}: expected a mapping")

        keybindings = _section(data, "keybindings")
        behavior = _section(data, "behavior")
        theme = _section(data, "theme")
        if keybindings is not None:
            self.load_keybindings(keybindings)
        if behavior is not None:
            self.load_behavior_config(behavior)
        if theme is not None:
            self.load_theme(theme)