"""Terminal input and tick events delivered through one queue."""

from __future__ import annotations

import codecs
import os
import queue
import sys
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from spotui.user_config import Key, KeyCode

try:
    import termios
    import tty
except ImportError:  # not a POSIX terminal
    termios = None
    tty = None


class EventKind(Enum):
    INPUT = "input"
    TICK = "tick"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    key: Key | None = None


@dataclass(frozen=True)
class EventsConfig:
    exit_key: Key = field(default_factory=lambda: Key(KeyCode.CTRL, "c"))
    tick_rate: float = 0.25


_ESCAPE_SEQUENCES = (
    ("[A", Key(KeyCode.UP)),
    ("[B", Key(KeyCode.DOWN)),
    ("[C", Key(KeyCode.RIGHT)),
    ("[D", Key(KeyCode.LEFT)),
    ("OA", Key(KeyCode.UP)),
    ("OB", Key(KeyCode.DOWN)),
    ("OC", Key(KeyCode.RIGHT)),
    ("OD", Key(KeyCode.LEFT)),
    ("[3~", Key(KeyCode.DELETE)),
    ("[5~", Key(KeyCode.PAGE_UP)),
    ("[6~", Key(KeyCode.PAGE_DOWN)),
)


def _decode_keys(text: str) -> list[Key]:
    """Turn raw terminal input into key presses."""
    keys = []
    pos = 0
    while pos < len(text):
        ch = text[pos]
        pos += 1
        if ch == "\x1b":
            rest = text[pos:]
            match = next(
                ((seq, key) for seq, key in _ESCAPE_SEQUENCES if rest.startswith(seq)),
                None,
            )
            if match is not None:
                keys.append(match[1])
                pos += len(match[0])
            elif rest and rest[0] not in "\x1b[":
                keys.append(Key(KeyCode.ALT, rest[0]))
                pos += 1
            else:
                keys.append(Key(KeyCode.ESC))
        elif ch in "\r\n":
            keys.append(Key(KeyCode.ENTER))
        elif ch in "\x7f\x08":
            keys.append(Key(KeyCode.BACKSPACE))
        elif ch == "\t":
            keys.append(Key(KeyCode.CHAR, "\t"))
        elif 1 <= ord(ch) <= 26:
            keys.append(Key(KeyCode.CTRL, chr(ord(ch) + 96)))
        elif ch != "\x00":
            keys.append(Key(KeyCode.CHAR, ch))
    return keys


def _terminal_keys() -> Iterator[Key]:
    """Read key presses from standard input, in cbreak mode when it is a terminal."""
    fd = sys.stdin.fileno()
    saved = None
    if termios is not None and os.isatty(fd):
        saved = termios.tcgetattr(fd)
        tty.setcbreak(fd)
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    try:
        while True:
            data = os.read(fd, 64)
            if not data:
                return
            yield from _decode_keys(decoder.decode(data))
    finally:
        if saved is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)


class Events:
    """Input and tick events, each produced on its own thread."""

    def __init__(
        self, config: EventsConfig | None = None, keys: Iterable[Key] | None = None
    ) -> None:
        self.config = config if config is not None else EventsConfig()
        self._queue: queue.Queue[Event] = queue.Queue()
        self._stopped = threading.Event()
        source = keys if keys is not None else _terminal_keys()
        threading.Thread(target=self._read_input, args=(source,), daemon=True).start()
        threading.Thread(target=self._tick, daemon=True).start()

    def _read_input(self, keys: Iterable[Key]) -> None:
        for key in keys:
            if self._stopped.is_set():
                return
            self._queue.put(Event(EventKind.INPUT, key))
            if key == self.config.exit_key:
                return

    def _tick(self) -> None:
        while not self._stopped.is_set():
            self._queue.put(Event(EventKind.TICK))
            self._stopped.wait(self.config.tick_rate)

    def next(self) -> Event:
        """Wait for the next event and return it."""
        return self._queue.get()

    def close(self) -> None:
        """Stop producing events."""
        self._stopped.set()

    def __enter__(self) -> Events:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()