# millionaire

A terminal quiz game in the style of "Who Wants to Be a Millionaire". It asks
multiple-choice questions from a text file one at a time. You have 30 seconds
for each question. Each of three lifelines can be used once per game:

- **50:50** removes two wrong answers,
- **Phone a friend** asks a friend whose name you type,
- **Ask the audience** polls the studio audience.

A prize ladder from 100 $ up to 1000000 $ is drawn beside each question.

## Installing

```
pip install .
```

## Playing

```
millionaire [--questions FILE] [--sounds DIR]
```

- `--questions` is the question file. The default is `questions.txt` in the
  current directory.
- `--sounds` is the directory of `.wav` sounds. The default is `sound`.

Press Enter on the title screen. In the main menu:

- move between **Tutorial** and **New Game** with the Up and Down arrow keys,
- press Enter to select an item,
- press `E` to quit.

After an item has finished, press Enter to return to the menu.

A new game asks for your name, address and occupation, then goes through the
questions in file order. While a question is shown:

- type `A`, `B`, `C` or `D` to answer;
- type `H` to open the lifeline menu. Move in it with the arrow keys and press
  Enter to use the selected lifeline, or press `e` to leave it without using
  one. Then type your answer.

Verdicts:

- A correct answer is shown in green.
- A wrong answer given within the first 5 seconds is shown in red and ends the
  game.
- A wrong answer given later gets no verdict, and the next question follows.
- If 30 seconds pass before a key is pressed, "TIME'S UP" is shown and the game
  ends.

Press a key to move on after each question.

The lifelines work as follows:

- Phone a friend waits 44 seconds, then the friend names the correct answer.
- Ask the audience waits 32 seconds, then reports that 80% of the audience
  chose the correct answer.

If the question file cannot be opened, a message is shown and you return to
the menu.

If standard input is not a terminal, keys and lines are read from it as text.
Enter is a newline, and arrows are `ESC [ A` and `ESC [ B`. The game ends
quietly when that input runs out.

### Sounds

These files are played from the sound directory when present:

- `mainTheme.wav`
- `correct.wav`
- `wrong.wav`
- `timesUp.wav`
- `50-50.wav`
- `callfriend.wav`
- `askAudience.wav`

Windows uses `winsound`. Elsewhere the first of `afplay`, `aplay` or `paplay`
found on the `PATH` is started in the background. Missing files, or no player,
mean silence.

## Question file format

Each question takes one line, with fields separated by semicolons:

1. the question,
2. the four answers,
3. the letter of the correct answer.

Only the first character of the last field is used. Blank lines are skipped. A
line with too few fields raises `ValueError`.

```
What is the capital of France?;A. Berlin;B. Paris;C. Rome;D. Madrid;B
Which planet is known as the red planet?;A. Venus;B. Jupiter;C. Mars;D. Saturn;C
```

## Using it as a library

```python
import random
from millionaire.questions import load_questions, fifty_fifty

questions = load_questions("questions.txt")
first = questions[0]
removed = fifty_fifty(first, random.Random())  # two wrong letters, e.g. ("C", "A")
```

The modules:

- `millionaire.questions` has `Question`, `QuestionList`, `parse_questions`,
  `load_questions`, `fifty_fifty` and `render_fifty_fifty`.
- `millionaire.screen` builds the drawing text as strings: menus, answer tiles,
  the prize table and result boxes.
- `millionaire.console.Console` handles keys, lines, screen output and sound.
- `millionaire.game.Game` runs a full session on a `Console`.

## What it does not do

- The tutorial item only prints the word "Tutorial".
- The player's details are kept only for the session and are not saved.
- The prize ladder is drawn but winnings are not tracked or shown.