from twostack.engine import ExecutionEngine
from twostack.models import Configuration
from twostack.report import (
    center_text,
    format_configuration,
    format_stack,
    format_stacks,
    format_trace_step,
    format_verdict,
)


def test_format_stack():
    assert format_stack(("#", "a")) == "[#, a]"
    assert format_stack(()) == "[]"


def test_format_stacks():
    assert format_stacks(("#",), ()) == "Stack 1: [#]\nStack 2: []"


def test_format_configuration(ab_machine: Configuration):
    assert format_configuration(ab_machine) == (
        "Input Alphabet: [a, b]\n"
        "States: [0, 1]\n"
        "Start State: [0]\n"
        "End State(s): [1]\n"
        "Transitions:\n"
        "[0, a, E, E, a, E, 0]\n"
        "[0, b, E, E, E, E, 1]"
    )


def test_format_trace_step(ab_machine: Configuration):
    result = ExecutionEngine(ab_machine).run("ab")
    assert format_trace_step(result.trace[0]) == (
        "Transition: 0,a,E,E,a,E,0\nStack 1: [#, a]\nStack 2: [#]"
    )


def test_format_verdict(ab_machine: Configuration):
    engine = ExecutionEngine(ab_machine)
    assert format_verdict(engine.run("ab")) == "Word ab accepted!"
    assert format_verdict(engine.run("aa")) == "Word aa failed!"


def test_center_text():
    assert center_text("ab", 6) == "  ab  "
    assert center_text("toolong", 3) == "toolong"
