import pytest

from spotui.user_config import (
    BehaviorConfig,
    Color,
    ConfigError,
    Key,
    KeyBindings,
    KeyCode,
    Rgb,
    Theme,
    UserConfig,
    check_reserved_keys,
    parse_key,
    parse_theme_item,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("j", Key(KeyCode.CHAR, "j")),
        ("J", Key(KeyCode.CHAR, "J")),
        ("ctrl-j", Key(KeyCode.CTRL, "j")),
        ("ctrl-J", Key(KeyCode.CTRL, "J")),
        ("-", Key(KeyCode.CHAR, "-")),
        ("esc", Key(KeyCode.ESC)),
        ("del", Key(KeyCode.DELETE)),
        ("alt-x", Key(KeyCode.ALT, "x")),
        ("space", Key(KeyCode.CHAR, " ")),
        ("delete", Key(KeyCode.BACKSPACE)),
        ("PageUp", Key(KeyCode.PAGE_UP)),
    ],
)
def test_parse_key(text, expected):
    assert parse_key(text) == expected


def test_parse_key_too_many_sections():
    with pytest.raises(ConfigError, match="only have 2 keys"):
        parse_key("ctrl-alt-x")


def test_parse_key_unknown():
    with pytest.raises(ConfigError, match="unknown"):
        parse_key("hyper-x")


def test_parse_key_modifier_without_key():
    with pytest.raises(ConfigError):
        parse_key("ctrl-")


def test_reserved_key_enter():
    with pytest.raises(ConfigError, match="reserved"):
        check_reserved_keys(Key(KeyCode.ENTER))


@pytest.mark.parametrize("key", [Key(KeyCode.CHAR, "h"), Key(KeyCode.UP), Key(KeyCode.BACKSPACE)])
def test_other_reserved_keys(key):
    with pytest.raises(ConfigError):
        check_reserved_keys(key)


def test_unreserved_key_is_accepted():
    assert check_reserved_keys(Key(KeyCode.CHAR, "x")) is None


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Reset", Color.RESET),
        ("Black", Color.BLACK),
        ("Red", Color.RED),
        ("Green", Color.GREEN),
        ("Yellow", Color.YELLOW),
        ("Blue", Color.BLUE),
        ("Magenta", Color.MAGENTA),
        ("Cyan", Color.CYAN),
        ("Gray", Color.GRAY),
        ("DarkGray", Color.DARK_GRAY),
        ("LightRed", Color.LIGHT_RED),
        ("LightGreen", Color.LIGHT_GREEN),
        ("LightYellow", Color.LIGHT_YELLOW),
        ("LightBlue", Color.LIGHT_BLUE),
        ("LightMagenta", Color.LIGHT_MAGENTA),
        ("LightCyan", Color.LIGHT_CYAN),
        ("White", Color.WHITE),
        ("23, 43, 45", Rgb(23, 43, 45)),
    ],
)
def test_parse_theme_item(name, expected):
    assert parse_theme_item(name) == expected


def test_parse_theme_item_unexpected_is_black():
    assert parse_theme_item("purple") is Color.BLACK


@pytest.mark.parametrize("text", ["300, 0, 0", "a, b, c", "-1, 2, 3"])
def test_parse_theme_item_bad_rgb(text):
    with pytest.raises(ConfigError):
        parse_theme_item(text)


def test_defaults():
    config = UserConfig()
    assert config.keys.back == Key(KeyCode.CHAR, "q")
    assert config.keys.shuffle == Key(KeyCode.CTRL, "s")
    assert config.keys.submit == Key(KeyCode.ENTER)
    assert config.behavior == BehaviorConfig(5000, 10, 250, True)
    assert config.theme.active is Color.CYAN
    assert config.config_file_path is None


def test_load_keybindings():
    config = UserConfig()
    config.load_keybindings({"back": "ctrl-q", "help": "F", "unknown": "x"})
    assert config.keys.back == Key(KeyCode.CTRL, "q")
    assert config.keys.help == Key(KeyCode.CHAR, "F")
    assert config.keys.search == KeyBindings().search


def test_load_keybindings_reserved():
    config = UserConfig()
    with pytest.raises(ConfigError):
        config.load_keybindings({"back": "j"})


def test_load_theme():
    config = UserConfig()
    config.load_theme({"active": "Red", "text": "1,2,3"})
    assert config.theme.active is Color.RED
    assert config.theme.text == Rgb(1, 2, 3)
    assert config.theme.hint == Theme().hint


def test_load_behavior_config():
    config = UserConfig()
    config.load_behavior_config(
        {
            "seek_milliseconds": 1000,
            "volume_increment": 5,
            "tick_rate_milliseconds": 100,
            "show_loading_indicator": False,
        }
    )
    assert config.behavior == BehaviorConfig(1000, 5, 100, False)


def test_volume_increment_limit():
    config = UserConfig()
    with pytest.raises(ConfigError, match="between 0 and 100, is 101"):
        config.load_behavior_config({"volume_increment": 101})


def test_tick_rate_limit():
    config = UserConfig()
    with pytest.raises(ConfigError, match="below 1000"):
        config.load_behavior_config({"tick_rate_milliseconds": 1000})


def test_load_config_from_file(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(
        "keybindings:\n  back: ctrl-c\nbehavior:\n  volume_increment: 20\ntheme:\n  hint: Blue\n",
        encoding="utf-8",
    )
    config = UserConfig(config_file_path=path)
    config.load_config()
    assert config.keys.back == Key(KeyCode.CTRL, "c")
    assert config.behavior.volume_increment == 20
    assert config.theme.hint is Color.BLUE


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("   \n", encoding="utf-8")
    config = UserConfig(config_file_path=path)
    config.load_config()
    assert config.keys == KeyBindings()


def test_load_config_missing_file(tmp_path):
    config = UserConfig(config_file_path=tmp_path / "absent.yml")
    config.load_config()
    assert config.behavior == BehaviorConfig()


def test_load_config_invalid_yaml(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("keybindings: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        UserConfig(config_file_path=path).load_config()


def test_get_or_build_paths(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    config = UserConfig()
    path = config.get_or_build_paths()
    assert path == tmp_path / ".config" / "spotify-tui" / "config.yml"
    assert path.parent.is_dir()
    assert config.config_file_path == path