"""The quiz game: menu, login, questions, lifelines and the command entry point."""

from __future__ import annotations

import argparse
import enum
import os
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .console import DOWN, ENTER, UP, Console
from .questions import Question, QuestionList, fifty_fifty, load_questions, render_fifty_fifty
from .screen import (
    BLUE,
    GREEN,
    RESET,
    YELLOW,
    draw_answer_selected,
    draw_answers,
    game_banner,
    goto,
    help_screen,
    login_banner,
    main_menu_screen,
    result_box,
    time_up_box,
)

TIME_LIMIT = 30
VERDICT_WINDOW = 5
POLL_INTERVAL = 0.05
CALL_DURATION = 44
AUDIENCE_DURATION = 32


@dataclass
class Player:
    name: str
    address: str
    occupation: str


@dataclass
class Lifelines:
    """Which lifelines have been spent in the current game."""

    fifty_fifty_used: bool = False
    call_used: bool = False
    audience_used: bool = False


class Outcome(enum.Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    TIME_UP = "time_up"
    LATE_WRONG = "late_wrong"  # wrong after the verdict window: no verdict, play goes on


class Game:
    """One session: the main menu and any number of games played from it."""

    def __init__(
        self,
        console: Console,
        questions_path: str | os.PathLike[str] = "questions.txt",
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        rng: random.Random | None = None,
    ) -> None:
        self.console = console
        self.questions_path = Path(questions_path)
        self.questions = QuestionList()
        self.player: Player | None = None
        self.lifelines = Lifelines()
        self._clock = clock
        self._sleep = sleep
        self._rng = rng or random.Random()
        self._help_idx = 0

    def run(self) -> None:
        """Show the start prompt and the main menu until 'E' is pressed."""
        console = self.console
        console.write(goto(75, 20) + YELLOW + "START TO PLAY!" + RESET)
        self._wait_for_enter()
        idx = 0
        console.write(main_menu_screen(idx))
        while True:
            key = console.getch()
            if key == ENTER:
                console.clear()
                if idx == 0:
                    console.write("Tutorial")
                else:
                    self.login()
                    console.clear()
                    self.play()
                    console.write(goto(65, 20) + "Press any key to back to main menu...")
                self._back_to_menu(idx)
            elif key == "E":
                self.questions.clear()
                return
            else:
                if key == UP:
                    idx = (idx - 1) % 2
                elif key == DOWN:
                    idx = (idx + 1) % 2
                console.write(main_menu_screen(idx))

    def login(self) -> Player:
        console = self.console
        console.write(login_banner())
        console.write(goto(64, 22) + _label("   Enter your name:  "))
        name = console.readline()
        console.write(goto(64, 24) + _label("   Enter your address:  "))
        address = console.readline()
        console.write(goto(64, 26) + _label("   Enter your occupation:  "))
        occupation = console.readline()
        self.player = Player(name, address, occupation)
        return self.player

    def play(self) -> list[Outcome]:
        """Ask the questions from the file in order until one ends the game."""
        console = self.console
        try:
            questions = load_questions(self.questions_path)
        except OSError:
            console.write(f"Unable to open file {self.questions_path.name}\n")
            return []
        self.lifelines = Lifelines()
        self._help_idx = 0
        outcomes = []
        for number, question in enumerate(questions, start=1):
            outcome = self.ask_question(question)
            outcomes.append(outcome)
            console.getch()
            if outcome in (Outcome.TIME_UP, Outcome.WRONG):
                console.clear()
                break
            if number < len(questions):
                console.clear()
        return outcomes

    def ask_question(self, question: Question) -> Outcome:
        """Show one question, wait for an answer or a lifeline, and judge it."""
        console = self.console
        console.write(game_banner())
        console.write(draw_answers())
        console.play_sound("mainTheme")
        start = self._clock()
        self.questions.add(question)
        console.write(question.render())
        console.write(help_screen(self._help_idx))
        prompt = goto(10, 23) + "Your answer:  "
        console.write(prompt)

        key = ""
        elapsed = 0
        time_up = False
        while not time_up:
            elapsed = int(self._clock() - start)
            if elapsed >= TIME_LIMIT:
                console.play_sound("timesUp")
                console.write(time_up_box())
                time_up = True
            if console.kbhit():
                key = console.getch()
                if key == "H":
                    self._choose_lifeline(question)
                    console.write(prompt)
                    key = console.getch()
                break
            if not time_up:
                self._sleep(POLL_INTERVAL)

        if time_up:
            return Outcome.TIME_UP
        if key == question.answer:
            console.write(draw_answer_selected(key))
            console.write(result_box(True))
            console.play_sound("correct")
            return Outcome.CORRECT
        if elapsed < VERDICT_WINDOW:
            console.write(draw_answer_selected(key))
            console.write(result_box(False))
            console.play_sound("wrong")
            return Outcome.WRONG
        return Outcome.LATE_WRONG

    def fifty_fifty(self, question: Question) -> tuple[str, str]:
        """Take away two wrong choices and redraw the question."""
        self.console.play_sound("50-50")
        removed = fifty_fifty(question, self._rng)
        self.console.write(render_fifty_fifty(question, removed))
        return removed

    def call_friend(self, question: Question) -> str:
        """Ask for a friend's name, wait for the call and give the answer."""
        console = self.console
        console.write(goto(30, 23) + "Who do you want to call? ")
        words = console.readline().split()
        name = words[0] if words else ""
        console.write(goto(30, 25) + BLUE + f"We are connecting with {name}..." + RESET + "\n")
        console.play_sound("callfriend")
        self._sleep(CALL_DURATION)
        console.write(goto(30, 27) + GREEN + f"{name} chooses answer {question.answer}" + RESET)
        return name

    def ask_audience(self, question: Question) -> None:
        console = self.console
        console.write(goto(30, 25) + BLUE + "We are consulting the audience..." + RESET)
        console.play_sound("askAudience")
        self._sleep(AUDIENCE_DURATION)
        console.write(
            goto(30, 27) + GREEN
            + f"80% of the audience chooses answer {question.answer}" + RESET
        )

    def _choose_lifeline(self, question: Question) -> None:
        console = self.console
        used = self.lifelines
        while True:
            key = console.getch()
            if key == ENTER:
                idx = self._help_idx
                if idx == 0 and not used.fifty_fifty_used:
                    self.fifty_fifty(question)
                    used.fifty_fifty_used = True
                    return
                if idx == 1 and not used.call_used:
                    self.call_friend(question)
                    used.call_used = True
                    return
                if idx == 2 and not used.audience_used:
                    self.ask_audience(question)
                    used.audience_used = True
                    return
            elif key == "e":
                return
            else:
                if key == UP:
                    self._help_idx = (self._help_idx - 1) % 3
                elif key == DOWN:
                    self._help_idx = (self._help_idx + 1) % 3
                console.write(help_screen(self._help_idx))

    def _wait_for_enter(self) -> None:
        while self.console.getch() != ENTER:
            pass

    def _back_to_menu(self, idx: int) -> None:
        self._wait_for_enter()
        self.console.clear()
        self.console.write(main_menu_screen(idx))


def _label(text: str) -> str:
    from .screen import BG_BROWN, WHITE

    return BG_BROWN + WHITE + text + RESET


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="millionaire", description="Terminal quiz game.")
    parser.add_argument("--questions", default="questions.txt", help="question file")
    parser.add_argument("--sounds", default="sound", help="directory of .wav sounds")
    args = parser.parse_args(argv)
    with Console(sound_dir=args.sounds) as console:
        game = Game(console, args.questions)
        try:
            game.run()
        except (EOFError, KeyboardInterrupt):
            pass
        finally:
            console.write(RESET + "\n")
    return 0