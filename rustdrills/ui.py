"""Terminal styling, status messages and a progress spinner."""

from __future__ import annotations

import itertools
import os
import sys
import threading

_RESET = "\x1b[0m"


def emoji_enabled() -> bool:
    """Return True unless the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" not in os.environ


def _colors_enabled() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    if "NO_COLOR" in os.environ or os.environ.get("CLICOLOR") == "0":
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _style(code: str, text: object) -> str:
    text = str(text)
    if not _colors_enabled():
        return text
    return f"\x1b[{code}m{text}{_RESET}"


def bold(text: object) -> str:
    """Render text in bold."""
    return _style("1", text)


def blue(text: object) -> str:
    """Render text in blue."""
    return _style("34", text)


def red(text: object) -> str:
    """Render text in red."""
    return _style("31", text)


def green(text: object) -> str:
    """Render text in green."""
    return _style("32", text)


def warn(message: str) -> None:
    """Print a red warning line."""
    symbol = "⚠️ " if emoji_enabled() else "!"
    print(f"{red(symbol)} {red(message)}")


def success(message: str) -> None:
    """Print a green success line."""
    symbol = "✅" if emoji_enabled() else "✓"
    print(f"{green(symbol)} {green(message)}")


class _Spinner:
    """A steadily ticking spinner drawn on a terminal; silent otherwise."""

    _FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"

    def __init__(self, message: str, *, stream=None, interval: float = 0.1):
        self._stream = stream if stream is not None else sys.stderr
        self._message = message
        self._interval = interval
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        isatty = getattr(self._stream, "isatty", None)
        if isatty is not None and isatty():
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()

    def set_message(self, message: str) -> None:
        with self._lock:
            self._message = message

    def _spin(self) -> None:
        for frame in itertools.cycle(self._FRAMES):
            with self._lock:
                self._stream.write(f"\r\x1b[2K{frame} {self._message}")
                self._stream.flush()
            if self._stop.wait(self._interval):
                break

    def finish_and_clear(self) -> None:
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        self._stream.write("\r\x1b[2K")
        self._stream.flush()

    def __enter__(self) -> "_Spinner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish_and_clear()