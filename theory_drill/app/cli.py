"""
Command Line Interface for Theory Drill
=======================================

This module runs the drills in a terminal: it shows a menu, asks one
question at a time, reads a single line per answer and prints the verdict.

Usage Examples:
    # Menu loop - pick drills until you quit
    python -m theory_drill.app.cli

    # Play one drill and exit
    python -m theory_drill.app.cli --game 4

    # Chord drill restricted to II and V chords
    python -m theory_drill.app.cli --game 4 --functions II,V

    # Print the generated quiz as JSON without asking it
    python -m theory_drill.app.cli --game 2 --json --seed 3

    # Show help
    python -m theory_drill.app.cli --help
"""

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Tuple
import random

from theory_drill.app.staff import render_staff
from theory_drill.data.schema import ChordFilter, Quiz, QuizKind, ScaleQuiz
from theory_drill.rules.grading import DegreeVerdict
from theory_drill.rules.harmony import ChordFunction, MajorScale, get_diatonic_sevenths
from theory_drill.rules.quizzes import (
    chord_function_quiz,
    italian_name_quiz,
    scale_quiz,
    sheet_note_quiz,
)


# =============================================================================
# PART 1: SESSION SETTINGS
# =============================================================================

RST = "\033[0m"
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"

# The drill behind menu entry 5
TWO_FIVE_FILTER = ChordFilter(functions={ChordFunction.II, ChordFunction.V})


@dataclass
class Session:
    """
    Settings and random source shared by every quiz of one run.

    Attributes:
        rng: Random source passed to every generator
        chord_filter: Functions asked by the chord drill (menu entry 4)
        color: Print verdicts with ANSI colors
        verbose: Print extra details after each quiz
    """
    rng: random.Random
    chord_filter: ChordFilter
    color: bool = True
    verbose: bool = False


# =============================================================================
# PART 2: ARGUMENT PARSER SETUP
# =============================================================================

def parse_functions(text: str) -> ChordFilter:
    """argparse type for --functions: comma-separated Roman numerals."""
    numerals = [part for part in text.replace(" ", "").split(",") if part]
    try:
        return ChordFilter.from_numerals(numerals)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser object
    """
    parser = argparse.ArgumentParser(
        prog="theory-drill",
        description="""
Music theory drills in the terminal: read notes from the staff, spell
major scales, translate note names to Italian and name diatonic chords.
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-g", "--game",
        type=int,
        choices=sorted(GAMES),
        help="Play this drill once and exit (see the menu for numbers)"
    )

    parser.add_argument(
        "--functions",
        type=parse_functions,
        default=None,
        help="Chord functions for the chord drill, e.g. 'II,V' (default: all)"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random source to repeat a session"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the generated quiz as JSON instead of asking it (needs --game)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show extra details after each quiz"
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output"
    )

    return parser


# =============================================================================
# PART 3: INPUT AND OUTPUT
# =============================================================================

def read_answer(prompt: str = "") -> Optional[str]:
    """Read one line from the user, or None when input is closed."""
    try:
        return input(prompt)
    except EOFError:
        return None


def require_answer(prompt: str = "") -> str:
    answer = read_answer(prompt)
    if answer is None:
        raise EOFError("no input available")
    return answer


def colorize(text: str, color: str, session: Session) -> str:
    if not session.color:
        return text
    return f"{color}{text}{RST}"


def correct_output(text: str, session: Session) -> None:
    print(colorize(text, GREEN, session))


def incorrect_output(text: str, session: Session) -> None:
    print(colorize(text, RED, session))


def skip_output(text: str, session: Session) -> None:
    print(colorize(text, YELLOW, session))


def format_quiz_json(quiz: Quiz) -> str:
    return quiz.model_dump_json(indent=2)


def format_harmonization(scale: MajorScale) -> str:
    """List the diatonic seventh chords of a key, one per numeral."""
    lines = [f"Diatonic sevenths of {scale.tonic} major:"]
    for function, chord in zip(ChordFunction, get_diatonic_sevenths(scale)):
        lines.append(f"  {function.name:4} = {chord}")
    return "\n".join(lines)


# =============================================================================
# PART 4: PLAYING QUIZZES
# =============================================================================

def play_quiz(quiz: Quiz, session: Session) -> bool:
    """
    Ask a single-answer quiz and print the verdict.

    Returns:
        True if the answer was correct

    Raises:
        EOFError: If input closes before an answer is read
    """
    if quiz.kind == QuizKind.SHEET_NOTE:
        print(f"{quiz.prompt}\n{render_staff(quiz.subject)}\n")
    else:
        print(quiz.prompt)

    quiz.submit(require_answer())

    correct = quiz.check_answer()
    if correct:
        correct_output("Correct!", session)
    else:
        incorrect_output(f"Incorrect! The correct answer is {quiz.expected_answer}", session)

    if session.verbose and quiz.kind == QuizKind.CHORD_FUNCTION and quiz.scale:
        scale = MajorScale.from_symbol(quiz.scale)
        if scale is not None:
            print(format_harmonization(scale))
    return correct


def _prompted_answers() -> Iterator[str]:
    while True:
        yield require_answer()


def play_scale_quiz(quiz: ScaleQuiz, session: Session) -> List[DegreeVerdict]:
    """
    Ask a scale one degree at a time.

    An empty line skips a degree. The first wrong note ends the quiz.

    Returns:
        The verdicts of the degrees that were asked
    """
    print(quiz.prompt)

    verdicts = []
    for verdict in quiz.grade(_prompted_answers()):
        verdicts.append(verdict)
        if verdict.skipped:
            skip_output(f"skipping note..., the answer was {verdict.expected}", session)
        elif verdict.correct:
            correct_output("correct!", session)
        else:
            incorrect_output(f"incorrect! next note was {verdict.expected}", session)

    if session.verbose:
        print(f"Scale: {quiz.expected_answer}")
    return verdicts


# =============================================================================
# PART 5: GAME SELECTION
# =============================================================================

def _chord_drill(session: Session) -> Quiz:
    return chord_function_quiz(session.chord_filter, rng=session.rng)


def _two_five_drill(session: Session) -> Quiz:
    return chord_function_quiz(TWO_FIVE_FILTER, rng=session.rng)


GAMES: Dict[int, Tuple[str, Callable[[Session], Quiz]]] = {
    1: ("sheet note", lambda session: sheet_note_quiz(session.rng)),
    2: ("circle of fifths", lambda session: scale_quiz(session.rng)),
    3: ("american to italian notes", lambda session: italian_name_quiz(session.rng)),
    4: ("chord function", _chord_drill),
    5: ("chord function (II, V)", _two_five_drill),
}


def build_quiz(game: int, session: Session) -> Quiz:
    """Generate the quiz for a menu entry."""
    if game not in GAMES:
        raise ValueError(f"Unknown game: {game}. Valid games are: {sorted(GAMES)}")
    _, generator = GAMES[game]
    return generator(session)


def play_game(game: int, session: Session) -> None:
    quiz = build_quiz(game, session)
    if isinstance(quiz, ScaleQuiz):
        play_scale_quiz(quiz, session)
    else:
        play_quiz(quiz, session)


def format_menu() -> str:
    lines = ["", "choose a game:", ""]
    for number, (name, _) in GAMES.items():
        lines.append(f"{number}. {name}")
    lines.append("")
    lines.append("q. quit")
    return "\n".join(lines)


# =============================================================================
# PART 6: INTERACTIVE MODE
# =============================================================================

def run_interactive_mode(session: Session) -> None:
    """
    Show the menu and play drills until the user quits.

    Commands: a game number, 'help' to show the menu again,
    'quit' or 'exit' to stop.
    """
    print(format_menu())

    while True:
        try:
            choice = require_answer("\n> ").strip().lower()

            if choice in ["quit", "exit", "q"]:
                print("\nGoodbye!")
                break

            if choice in ["help", "h", "?", ""]:
                print(format_menu())
                continue

            if not choice.isdigit() or int(choice) not in GAMES:
                skip_output(f"invalid game: '{choice}'", session)
                print(format_menu())
                continue

            print()
            play_game(int(choice), session)

        except KeyboardInterrupt:
            print("\n\nInterrupted. Goodbye!")
            break
        except EOFError:
            print("\n\nGoodbye!")
            break


# =============================================================================
# PART 7: MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point for the CLI.

    Dispatches to:
    - JSON mode if --json is set (needs --game)
    - Single game mode if --game is set
    - Interactive mode otherwise
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.json and args.game is None:
        parser.error("--json needs --game")

    session = Session(
        rng=random.Random(args.seed),
        chord_filter=args.functions if args.functions is not None else ChordFilter(),
        color=not args.no_color,
        verbose=args.verbose,
    )

    if args.json:
        print(format_quiz_json(build_quiz(args.game, session)))
        return

    if args.game is not None:
        try:
            play_game(args.game, session)
        except (KeyboardInterrupt, EOFError):
            print("\n\nGoodbye!")
            sys.exit(1)
        return

    run_interactive_mode(session)


if __name__ == "__main__":
    main()
