"""Terminal drawing for the quiz: every function returns the text to write."""

from __future__ import annotations

GREEN = "\033[32m"
RED = "\033[31m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
WHITE = "\033[1;37m"
BLACK = "\033[30m"
BG_CREAM = "\033[48;5;230m"
BG_SALMON = "\033[48;5;203m"
BG_RED = "\033[48;5;196m"
BG_DARK_BLUE = "\033[48;5;21m"
BG_LIGHT_BLUE = "\033[48;5;12m"
BG_BROWN = "\033[48;5;94m"
BG_GREEN = "\033[48;5;22m"

ERASE = "\033[2K"
RESET = "\033[0m"

ANSWER_LETTERS = "ABCD"
_ANSWER_COLUMNS = dict(zip(ANSWER_LETTERS, (10, 14, 18, 22)))

PRIZE_LADDER: tuple[tuple[int, str], ...] = (
    (15, "1000000 $"),
    (14, "500000 $"),
    (13, "250000 $"),
    (12, "125000 $"),
    (11, "64000 $"),
    (10, "32000 $"),
    (9, "16000 $"),
    (8, "8000 $"),
    (7, "4000 $"),
    (6, "2000 $"),
    (5, "1000 $"),
    (4, "500 $"),
    (3, "300 $"),
    (2, "200 $"),
    (1, "100 $"),
)

MENU_TITLES = (
    "                   Tutorial                 ",
    "                   New Game                 ",
)

HELP_TITLES = (
    "             50:50 - Fifty-Fifty            ",
    "             Phone a friend                 ",
    "             Ask the audience               ",
)

_HELP_BANNER = (
    "  _    _ ______ _      _____  ",
    " | |  | |  ____| |    |  __ \\ ",
    " | |__| | |__  | |    | |__) |",
    " |  __  |  __| | |    |  ___/ ",
    " | |  | | |____| |____| |     ",
    " |_|  |_|______|______|_|     ",
    "                              ",
)

_GAME_BANNER = (
    "  __  __ _____ _      _      _____ ____  _   _          _____ _____  ______ ",
    " |  \\/  |_   _| |    | |    |_   _/ __ \\| \\ | |   /\\   |_   _|  __ \\|  ____|",
    " | \\  / | | | | |    | |      | || |  | |  \\| |  /  \\    | | | |__) | |__   ",
    " | |\\/| | | | | |    | |      | || |  | | . ` | / /\\ \\   | | |  _  /|  __|  ",
    " | |  | |_| |_| |____| |____ _| || |__| | |\\  |/ ____ \\ _| |_| | \\ \\| |____ ",
    " |_|  |_|_____|______|______|_____\\____/|_| \\_/_/    \\_\\_____|_|  \\_\\______|",
    "                                                                           ",
    "                                                                           ",
)

_LOGIN_BANNER = (
    " _                 _       ",
    "| |               (_)      ",
    "| |     ___   __ _ _ _ __  ",
    "| |    / _ \\ / _` | | '_ \\ ",
    "| |___| (_) | (_| | | | | |",
    "|______\\___/ \\__, |_|_| |_|",
    "              __/ |        ",
    "             |___/         ",
)

_MENU_BANNER = (
    "                                               _                            _                                                        ",
    "                                              | |                          | |                                                       ",
    "                                 __      _____| | ___ ___  _ __ ___   ___  | |_ ___    _ __ ___  _   _    __ _  __ _ _ __ ___   ___  ",
    "                                 \\ \\ /\\ / / _ | |/ __/ _ \\| '_ ` _ \\ / _ \\ | __/ _ \\  | '_ ` _ \\| | | |  / _` |/ _` | '_ ` _ \\ / _ \\ ",
    "                                  \\ V  V |  __| | (_| (_) | | | | | |  __/ | || (_) | | | | | | | |_| | | (_| | (_| | | | | | |  __/ ",
    "                                   \\_/\\_/ \\___|_|\\___\\___/|_| |_| |_|\\___|  \\__\\___/  |_| |_| |_|\\__, |  \\__, |\\__,_|_| |_| |_|\\___| ",
    "                                                                                                  __/ |   __/ |                      ",
    "                                                                                                 |___/   |___/                       ",
)

_PANEL_INNER = " " * 46


def goto(x: int, y: int) -> str:
    """Cursor move to zero-based column ``x`` and row ``y``."""
    return f"\033[{y + 1};{x + 1}H"


def _answer_tile(letter: str, background: str, foreground: str) -> str:
    x = _ANSWER_COLUMNS[letter]
    blank = background + " " * 5 + RESET + "\n"
    return (
        goto(x, 25) + blank
        + goto(x, 26) + background + "  " + foreground + letter + background + "  " + RESET + "\n"
        + goto(x, 27) + blank
    )


def draw_answers() -> str:
    """The four answer tiles in their idle colours."""
    return "".join(_answer_tile(letter, BG_DARK_BLUE, WHITE) for letter in ANSWER_LETTERS)


def draw_answer_selected(letter: str) -> str:
    """The tile for ``letter`` highlighted; nothing for an unknown letter."""
    if letter not in _ANSWER_COLUMNS:
        return ""
    return _answer_tile(letter, BG_LIGHT_BLUE, BLACK)


def draw_table() -> str:
    """The prize ladder beside the question."""
    rule = BG_BROWN + " " * 44 + RESET + "\n"
    parts = [
        goto(112, 21) + rule,
        goto(112, 22) + BG_BROWN + "  " + BG_CREAM + BLUE + "  Question number  "
        + BG_BROWN + "  " + BG_CREAM + "   Question value  " + BG_BROWN + "  " + RESET + "\n",
        goto(112, 23) + rule,
    ]
    for row, (number, value) in enumerate(PRIZE_LADDER):
        parts.append(
            goto(112, 24 + row) + BG_BROWN + "  "
            + BG_CREAM + BLACK + str(number).rjust(10) + RESET + BG_CREAM + "  "
            + BG_CREAM + BLACK + value.rjust(26) + RESET + BG_CREAM + "  "
            + BG_BROWN + "  " + RESET + "\n"
        )
    parts.append(goto(112, 23 + 16) + rule)
    return "".join(parts)


def _options_panel(x: int, top: int, titles: tuple[str, ...], idx: int) -> str:
    parts = [
        goto(x, top) + BG_DARK_BLUE + "  " + BG_DARK_BLUE + WHITE
        + "                   Options                    " + BG_DARK_BLUE + "  " + RESET + "\n",
        goto(x, top + 1) + BG_DARK_BLUE + "  " + BG_DARK_BLUE + _PANEL_INNER
        + BG_DARK_BLUE + "  " + RESET + "\n",
        goto(x, top + 2) + BG_DARK_BLUE + "  " + BG_LIGHT_BLUE + _PANEL_INNER
        + BG_DARK_BLUE + "  " + RESET + "\n",
    ]
    first = top + 3
    for i, title in enumerate(titles):
        row = first + i * 2
        if i == idx:
            item = (BG_DARK_BLUE + "  " + RESET + BG_BROWN + WHITE + title + "  "
                    + BG_DARK_BLUE + "  " + RESET + "\n")
        else:
            item = (BG_DARK_BLUE + "  " + RESET + BG_LIGHT_BLUE + BLACK + title + "  "
                    + RESET + BG_DARK_BLUE + "  " + RESET + "\n")
        parts.append(goto(x, row) + item)
        parts.append(goto(x, row + 1) + BG_DARK_BLUE + "  " + BG_LIGHT_BLUE + _PANEL_INNER
                     + BG_DARK_BLUE + "  " + RESET + "\n")
    parts.append(goto(x, first + len(titles) * 2) + BG_DARK_BLUE + " " * 50 + RESET + "\n")
    return "".join(parts)


def help_screen(idx: int) -> str:
    """Prize ladder, HELP banner and the lifeline menu with ``idx`` selected."""
    banner = "".join(goto(120, 2 + i) + line for i, line in enumerate(_HELP_BANNER))
    return draw_table() + banner + _options_panel(110, 10, HELP_TITLES, idx)


def main_menu_screen(idx: int) -> str:
    """Welcome banner and the main menu with ``idx`` selected."""
    banner = "".join(goto(0, 5 + i) + line + "\n" for i, line in enumerate(_MENU_BANNER))
    return "\n" * 4 + banner + _options_panel(60, 18, MENU_TITLES, idx)


def game_banner() -> str:
    """The title drawn above each question."""
    return "".join(goto(10, 2 + i) + line for i, line in enumerate(_GAME_BANNER))


def login_banner() -> str:
    """The login title and heading."""
    art = "".join(goto(65, 10 + i) + line for i, line in enumerate(_LOGIN_BANNER))
    return art + goto(74, 20) + BG_BROWN + WHITE + "::[ Login ]::" + RESET


def time_up_box() -> str:
    """The red box shown when the clock runs out."""
    blank = BG_RED + " " * 19 + RESET + "\n"
    return (
        goto(10, 29) + blank
        + goto(10, 30) + BG_RED + "  " + WHITE + "   TIME'S UP   " + BG_RED + "  " + RESET + "\n"
        + goto(10, 31) + blank
    )


def result_box(correct: bool) -> str:
    """The box announcing a correct or a wrong answer."""
    if correct:
        background = BG_GREEN
        message = "  Congratulations! That's the correct answer!  "
    else:
        background = BG_RED
        message = "Sorry. That's incorrect! Better luck next time!"
    blank = background + " " * 51 + RESET + "\n"
    return (
        goto(10, 29) + blank
        + goto(10, 30) + background + "  " + WHITE + message + background + "  " + RESET + "\n"
        + goto(10, 31) + blank
    )