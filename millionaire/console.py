"""Keyboard, screen and sound access for the terminal game."""

from __future__ import annotations

import os
import select
import shutil
import subprocess
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, TextIO

try:
    import msvcrt
except ImportError:
    msvcrt = None

try:
    import termios
    import tty
except ImportError:
    termios = tty = None

try:
    import winsound
except ImportError:
    winsound = None

ENTER = "\r"
UP = "up"
DOWN = "down"

_ESCAPES = {"[A": UP, "[B": DOWN}
_WINDOWS_ARROWS = {"H": UP, "P": DOWN}
_PLAYERS = ("afplay", "aplay", "paplay")


class Console:
    """Writes to the terminal, reads single keys and lines, plays sounds.

    When ``input`` is given, or standard input is not a terminal, keys and
    lines are read from that text stream: Enter is a newline and arrows are
    the usual ``ESC [ A`` / ``ESC [ B`` sequences.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        input: TextIO | None = None,
        sound_dir: str | os.PathLike[str] = "sound",
    ) -> None:
        self._output = output if output is not None else sys.stdout
        if input is None and not sys.stdin.isatty():
            input = sys.stdin
        self._input = input
        self.sound_dir = Path(sound_dir)
        self._saved_mode = None
        self._sound_process: subprocess.Popen | None = None

    def __enter__(self) -> "Console":
        if self._input is None and termios is not None and msvcrt is None:
            fd = sys.stdin.fileno()
            self._saved_mode = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        return self

    def __exit__(self, *exc_info) -> None:
        if self._saved_mode is not None:
            termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, self._saved_mode)
            self._saved_mode = None
        self._stop_sound()

    def write(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()

    def clear(self) -> None:
        """Blank the screen and home the cursor."""
        self.write("\033[2J\033[H")

    def getch(self) -> str:
        """One key press: a character, ``ENTER``, ``UP`` or ``DOWN``.

        Raises EOFError when scripted input runs out.
        """
        if self._input is not None:
            return _decode(lambda: self._input.read(1))
        if msvcrt is not None:
            key = msvcrt.getwch()
            if key in ("\x00", "\xe0"):
                second = msvcrt.getwch()
                return _WINDOWS_ARROWS.get(second, second)
            return ENTER if key in "\r\n" else key
        with self._cbreak():
            return _decode(self._read_posix_char)

    def kbhit(self) -> bool:
        """Whether a key is waiting to be read."""
        if self._input is not None:
            return True
        if msvcrt is not None:
            return bool(msvcrt.kbhit())
        with self._cbreak():
            ready, _, _ = select.select([sys.stdin], [], [], 0)
        return bool(ready)

    def readline(self) -> str:
        """A whole line of text, without its line ending."""
        if self._input is not None:
            return self._input.readline().rstrip("\r\n")
        with self._canonical():
            return sys.stdin.readline().rstrip("\r\n")

    def play_sound(self, name: str) -> bool:
        """Start ``<sound_dir>/<name>.wav`` in the background, replacing any sound playing."""
        path = self.sound_dir / f"{name}.wav"
        if not path.is_file():
            return False
        if winsound is not None:
            winsound.PlaySound(str(path), winsound.SND_FILENAME | winsound.SND_ASYNC)
            return True
        for command in _PLAYERS:
            executable = shutil.which(command)
            if executable:
                self._stop_sound()
                self._sound_process = subprocess.Popen(
                    [executable, str(path)],
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                )
                return True
        return False

    def _stop_sound(self) -> None:
        process, self._sound_process = self._sound_process, None
        if process is not None and process.poll() is None:
            process.terminate()

    def _read_posix_char(self) -> str:
        return os.read(sys.stdin.fileno(), 1).decode(errors="replace")

    @contextmanager
    def _cbreak(self) -> Iterator[None]:
        if self._saved_mode is not None or termios is None or not sys.stdin.isatty():
            yield
            return
        fd = sys.stdin.fileno()
        old = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old)

    @contextmanager
    def _canonical(self) -> Iterator[None]:
        if self._saved_mode is None:
            yield
            return
        fd = sys.stdin.fileno()
        termios.tcsetattr(fd, termios.TCSADRAIN, self._saved_mode)
        try:
            yield
        finally:
            tty.setcbreak(fd)


def _decode(read: Callable[[], str]) -> str:
    key = read()
    if not key:
        raise EOFError("no more input")
    if key in "\r\n":
        return ENTER
    if key == "\x1b":
        sequence = read() + read()
        return _ESCAPES.get(sequence, sequence)
    return key