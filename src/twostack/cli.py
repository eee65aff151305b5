from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, List, Sequence, Tuple, TypeVar

from twostack.codec import list_machine_files, load_machine, save_machine
from twostack.engine import EngineSettings, ExecutionEngine, RunResult
from twostack.error import (
    ConfigurationError,
    FormatError,
    InputError,
    MachineFileError,
    StepLimitExceededError,
)
from twostack.models import Configuration, Transition
from twostack.report import (
    SEPARATOR,
    center_text,
    format_configuration,
    format_stacks,
    format_trace_step,
    format_verdict,
)
from twostack.validator import (
    ConfigurationValidator,
    parse_alphabet,
    parse_end_states,
    parse_start_state,
    parse_states,
    parse_transitions,
)

T = TypeVar("T")

TITLE = "2-STACK PDA SIMULATOR"
VERSION = "VERSION 1.0"


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="twostack",
        description="Simulator for two-stack pushdown automata",
    )
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser(
        "run",
        help="Simulate one or more words on a machine file",
    )
    run_parser.add_argument("file", type=Path, help="Machine description file")
    run_parser.add_argument("words", nargs="+", help="Input words to simulate")
    run_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the verdict for each word",
    )
    _add_engine_arguments(run_parser)

    show_parser = subparsers.add_parser(
        "show",
        help="Print the configuration stored in a machine file",
    )
    show_parser.add_argument("file", type=Path, help="Machine description file")

    interactive_parser = subparsers.add_parser(
        "interactive",
        help="Create, load and run machines from an interactive menu",
    )
    interactive_parser.add_argument(
        "--directory",
        type=Path,
        default=Path("."),
        help="Directory used to list, load and save machine files",
    )
    _add_engine_arguments(interactive_parser)

    args = parser.parse_args(argv)
    command: str | None = args.command

    if command is None:
        parser.print_help()
        sys.exit(1)

    if command == "run":
        sys.exit(run_command(args.file, args.words, _settings(args), args.quiet))
    if command == "show":
        sys.exit(show_command(args.file))
    if command == "interactive":
        interactive_command(args.directory, _settings(args))


def _add_engine_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--max-steps",
        type=_positive_int,
        default=None,
        help="Abort a simulation after this many steps",
    )
    parser.add_argument(
        "--first-match",
        action="store_true",
        help="Apply only the first matching transition per step",
    )
    parser.add_argument(
        "--halt-on-stack-failure",
        action="store_true",
        help="Reject the word as soon as a pop cannot be satisfied",
    )


def _positive_int(text: str) -> int:
    if not text.isdigit() or int(text) < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{text}'")
    return int(text)


def _settings(args: argparse.Namespace) -> EngineSettings:
    return EngineSettings(
        max_steps=args.max_steps,
        first_match_only=args.first_match,
        halt_on_stack_failure=args.halt_on_stack_failure,
    )


def _load(path: Path) -> Configuration | None:
    try:
        return load_machine(path)
    except (MachineFileError, FormatError) as e:
        print(f"Error reading from file: {e}", file=sys.stderr)
    except ConfigurationError as e:
        print("Error reading from file: invalid configuration", file=sys.stderr)
        for message in e.errors:
            print(message, file=sys.stderr)
    return None


def run_command(
    path: Path, words: Sequence[str], settings: EngineSettings, quiet: bool = False
) -> int:
    configuration = _load(path)
    if configuration is None:
        return 1
    engine = ExecutionEngine(configuration, settings)
    for word in words:
        simulate_word(engine, word, quiet)
    return 0


def show_command(path: Path) -> int:
    configuration = _load(path)
    if configuration is None:
        return 1
    print(format_configuration(configuration))
    return 0


def simulate_word(
    engine: ExecutionEngine, word: str, quiet: bool = False
) -> RunResult | None:
    try:
        simulation = engine.start(word)
    except InputError as e:
        print(e, file=sys.stderr)
        return None

    if not quiet:
        print(format_stacks(*simulation.context.stacks.snapshot()))
        print()
    try:
        for step in simulation:
            for failure in step.failures:
                print(failure, file=sys.stderr)
            if not quiet:
                print(format_trace_step(step))
                print()
    except StepLimitExceededError as e:
        print(e, file=sys.stderr)
        return None

    result = simulation.result()
    print(format_verdict(result))
    print()
    return result


def interactive_command(directory: Path, settings: EngineSettings) -> None:
    print(SEPARATOR)
    print(center_text(TITLE))
    print(center_text(VERSION))
    try:
        while True:
            _display_menu()
            choice = input(">> ").strip()
            if choice == "new":
                configuration = configure_machine()
                _offer_save(configuration, directory)
                machine_loop(ExecutionEngine(configuration, settings))
            elif choice == "load":
                configuration = _select_machine(directory)
                if configuration is not None:
                    machine_loop(ExecutionEngine(configuration, settings))
            elif choice == "exit":
                break
            else:
                print("Invalid choice. Please try again.\n", file=sys.stderr)
    except EOFError:
        print()
    print("Exiting the 2-Stack-PDA Simulator. Goodbye!")


def _display_menu() -> None:
    print(SEPARATOR)
    print("Menu:")
    print("Type 'new' to create a new machine.")
    print("Type 'load' to load a machine from a file.")
    print("Type 'exit' to close the app.")
    print(SEPARATOR)
    print("Enter your choice: ")


def _ask(prompt: str, parse: Callable[[str], T]) -> T:
    while True:
        print(prompt)
        try:
            return parse(input(">> "))
        except ConfigurationError as e:
            for message in e.errors:
                print(message, file=sys.stderr)


def configure_machine() -> Configuration:
    while True:
        alphabet = _ask(
            "Enter the input alphabet (separate symbols with commas, blanks/spaces not allowed): ",
            parse_alphabet,
        )
        states = _ask(
            "Enter the set of states (separate symbols with commas, blanks/spaces not allowed): ",
            parse_states,
        )
        start = _ask(
            "Enter the starting state (blanks/spaces not allowed): ",
            lambda text: parse_start_state(text, states),
        )
        ends = _ask(
            "Enter the end states (separate symbols with commas, blanks/spaces not allowed): ",
            lambda text: parse_end_states(text, states),
        )
        transitions = _ask_transitions()
        try:
            return ConfigurationValidator().validate(
                alphabet=alphabet,
                states=states,
                start=start,
                ends=ends,
                transitions=transitions,
            )
        except ConfigurationError as e:
            for message in e.errors:
                print(message, file=sys.stderr)
            print("Please configure the machine again.", file=sys.stderr)


def _ask_transitions() -> Tuple[Transition, ...]:
    print(
        "Enter the transitions in the following format:\n"
        "current_state,input_symbol,pop_stack1,pop_stack2,push_stack1,push_stack2,next_state\n"
        "Separate the elements with commas. Blanks/spaces are not allowed.\n"
        "When you're done, type 'end'."
    )
    lines: List[str] = []
    while True:
        line = input(">> ")
        if line.strip().lower() != "end":
            lines.append(line)
            continue
        if not lines:
            print("No valid transitions entered. Please try again.", file=sys.stderr)
            continue
        try:
            return parse_transitions(lines)
        except ConfigurationError as e:
            print("One or more transitions are invalid.", file=sys.stderr)
            for message in e.errors:
                print(message, file=sys.stderr)
            print("Please enter all transitions again:", file=sys.stderr)
            lines.clear()


def _offer_save(configuration: Configuration, directory: Path) -> None:
    print("Do you want to save this machine to a file? (yes/no)")
    if input(">> ").strip().lower() != "yes":
        return
    print("Enter the file name: ")
    name = input(">> ").strip()
    try:
        path = save_machine(configuration, name, directory)
    except MachineFileError as e:
        print(f"Error saving machine to file: {e}", file=sys.stderr)
        return
    print(f"Machine saved to file: {path}")


def _select_machine(directory: Path) -> Configuration | None:
    try:
        machine_files = list_machine_files(directory)
    except MachineFileError as e:
        print(e, file=sys.stderr)
        return None
    if not machine_files:
        print(f"No machine files found in {directory}.")
        return None

    print("Select a machine to load:")
    for index, path in enumerate(machine_files, start=1):
        print(f"{index}. {path.name}")

    selection = -1
    while selection < 0 or selection > len(machine_files):
        print("Enter the number of the machine to load (or 0 to cancel): ")
        answer = input(">> ").strip()
        selection = int(answer) if answer.isdigit() else -1
    if selection == 0:
        return None

    selected = machine_files[selection - 1]
    configuration = _load(selected)
    if configuration is not None:
        print(f"Machine: {selected.name} loaded!")
    return configuration


def machine_loop(engine: ExecutionEngine) -> None:
    while True:
        print("Enter the input string (or 'menu' or 'show'): ")
        word = input(">> ")
        if word == "menu":
            return
        if word == "show":
            print(format_configuration(engine.configuration))
        else:
            simulate_word(engine, word)


if __name__ == "__main__":
    main()
