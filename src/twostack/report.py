from typing import Iterable, List

from twostack.engine import RunResult, TraceStep
from twostack.models import Configuration

SEPARATOR = "---------------------------------------------------"


def format_list(items: Iterable[object]) -> str:
    return "[" + ", ".join(str(item) for item in items) + "]"


def format_stack(contents: Iterable[str]) -> str:
    return format_list(contents)


def format_stacks(stack1: Iterable[str], stack2: Iterable[str]) -> str:
    return f"Stack 1: {format_stack(stack1)}\nStack 2: {format_stack(stack2)}"


def format_configuration(configuration: Configuration) -> str:
    lines: List[str] = [
        f"Input Alphabet: {format_list(configuration.alphabet)}",
        f"States: {format_list(configuration.states)}",
        f"Start State: [{configuration.start}]",
        f"End State(s): {format_list(configuration.ends)}",
        "Transitions:",
    ]
    lines.extend(format_list(t.fields()) for t in configuration.transitions)
    return "\n".join(lines)


def format_trace_step(step: TraceStep) -> str:
    return f"Transition: {step.transition}\n" + format_stacks(step.stack1, step.stack2)


def format_verdict(result: RunResult) -> str:
    if result.accepted:
        return f"Word {result.word} accepted!"
    return f"Word {result.word} failed!"


def center_text(text: str, width: int = len(SEPARATOR)) -> str:
    padding = max(width - len(text), 0) // 2
    return " " * padding + text + " " * padding
