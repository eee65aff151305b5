import pytest

from twostack.models import Configuration, Transition


def make_transition(text: str) -> Transition:
    source, symbol, pop1, pop2, push1, push2, target = text.split(",")
    return Transition(
        source=int(source),
        symbol=symbol,
        pop1=pop1,
        pop2=pop2,
        push1=push1,
        push2=push2,
        target=int(target),
    )


@pytest.fixture
def ab_machine() -> Configuration:
    return Configuration(
        alphabet=("a", "b"),
        states=(0, 1),
        start=0,
        ends=(1,),
        transitions=(
            make_transition("0,a,E,E,a,E,0"),
            make_transition("0,b,E,E,E,E,1"),
        ),
    )


@pytest.fixture
def anbncn_machine() -> Configuration:
    # a^n b^n c^n with n >= 1: stack 1 counts a's, stack 2 counts b's.
    return Configuration(
        alphabet=("a", "b", "c"),
        states=(0, 1, 2, 3),
        start=0,
        ends=(3,),
        transitions=(
            make_transition("0,a,E,E,a,E,0"),
            make_transition("0,b,a,E,E,b,1"),
            make_transition("1,b,a,E,E,b,1"),
            make_transition("1,c,#,b,#,E,2"),
            make_transition("2,c,#,b,#,E,2"),
            make_transition("2,E,#,#,#,#,3"),
        ),
    )


ANBNCN_TEXT = """inputAlphabet=a,b,c
states=0,1,2,3
startState=0
endStates=3
transition=0,a,E,E,a,E,0
transition=0,b,a,E,E,b,1
transition=1,b,a,E,E,b,1
transition=1,c,#,b,#,E,2
transition=2,c,#,b,#,E,2
transition=2,E,#,#,#,#,3
"""


@pytest.fixture
def anbncn_file(tmp_path):
    path = tmp_path / "anbncn.txt"
    path.write_text(ANBNCN_TEXT, encoding="utf-8")
    return path
