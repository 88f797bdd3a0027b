import io
from unittest import mock

import pytest

from millionaire.console import DOWN, ENTER, UP, Console


def make_console(text="", sound_dir="nowhere"):
    out = io.StringIO()
    return Console(output=out, input=io.StringIO(text), sound_dir=sound_dir), out


def test_write_appends_text():
    console, out = make_console()
    console.write("hello")
    console.write(" world")
    assert out.getvalue() == "hello world"


def test_clear_writes_erase_and_home():
    console, out = make_console()
    console.clear()
    assert out.getvalue() == "\033[2J\033[H"


@pytest.mark.parametrize(
    "text, expected",
    [("a", "a"), ("E", "E"), ("\n", ENTER), ("\r", ENTER), ("\x1b[A", UP), ("\x1b[B", DOWN)],
)
def test_getch_decodes_keys(text, expected):
    console, _ = make_console(text)
    assert console.getch() == expected


def test_getch_reads_keys_in_order():
    console, _ = make_console("H\x1b[B\nx")
    assert [console.getch() for _ in range(4)] == ["H", DOWN, ENTER, "x"]


def test_getch_at_end_of_input_raises():
    console, _ = make_console("")
    with pytest.raises(EOFError):
        console.getch()


def test_kbhit_with_scripted_input():
    console, _ = make_console("a")
    assert console.kbhit() is True


def test_readline_strips_line_endings():
    console, _ = make_console("Alice\r\nParis\n")
    assert console.readline() == "Alice"
    assert console.readline() == "Paris"
    assert console.readline() == ""


def test_getch_then_readline_share_the_stream():
    console, _ = make_console("\nBob\nz")
    assert console.getch() == ENTER
    assert console.readline() == "Bob"
    assert console.getch() == "z"


def test_context_manager_returns_console():
    console, _ = make_console()
    with console as entered:
        assert entered is console


def test_play_sound_missing_file(tmp_path):
    console, _ = make_console(sound_dir=tmp_path)
    assert console.play_sound("correct") is False


def test_play_sound_without_player(tmp_path):
    (tmp_path / "correct.wav").write_bytes(b"RIFF")
    console, _ = make_console(sound_dir=tmp_path)
    with mock.patch("millionaire.console.winsound", None), mock.patch(
        "millionaire.console.shutil.which", return_value=None
    ):
        assert console.play_sound("correct") is False


def test_play_sound_starts_player(tmp_path):
    sound = tmp_path / "correct.wav"
    sound.write_bytes(b"RIFF")
    console, _ = make_console(sound_dir=tmp_path)
    with mock.patch("millionaire.console.winsound", None), mock.patch(
        "millionaire.console.shutil.which", return_value="/usr/bin/aplay"
    ), mock.patch("millionaire.console.subprocess.Popen") as popen:
        assert console.play_sound("correct") is True
    assert popen.call_args[0][0] == ["/usr/bin/aplay", str(sound)]