import pytest
from pydantic import ValidationError

from twostack.models import Configuration, Transition

from conftest import make_transition


def test_transition_fields_and_str():
    transition = make_transition("0,a,E,b;c,a,E,1")
    assert transition.fields() == ("0", "a", "E", "b;c", "a", "E", "1")
    assert str(transition) == "0,a,E,b;c,a,E,1"


def test_transition_sequences():
    transition = make_transition("0,a,x;y,E,a;b;c,d,1")
    assert transition.pop_sequence(1) == ["x", "y"]
    assert transition.pop_sequence(2) == []
    assert transition.push_sequence(1) == ["a", "b", "c"]
    assert transition.push_sequence(2) == ["d"]
    assert transition.expected_top(1) == "y"
    assert transition.expected_top(2) is None


def test_transition_invalid_stack_index():
    transition = make_transition("0,a,E,E,E,E,1")
    with pytest.raises(ValueError, match="Stack index must be 1 or 2"):
        transition.pop_sequence(3)


@pytest.mark.parametrize("value", ["", "a b", "a,b"])
def test_transition_rejects_bad_field(value: str):
    with pytest.raises(ValidationError):
        Transition(
            source=0, symbol=value, pop1="E", pop2="E", push1="E", push2="E", target=1
        )


def test_transition_is_frozen():
    transition = make_transition("0,a,E,E,E,E,1")
    with pytest.raises(ValidationError):
        transition.target = 2


def test_configuration_valid(ab_machine: Configuration):
    assert ab_machine.alphabet == ("a", "b")
    assert ab_machine.is_end_state(1)
    assert not ab_machine.is_end_state(0)


def test_configuration_is_frozen(ab_machine: Configuration):
    with pytest.raises(ValidationError):
        ab_machine.start = 1


@pytest.mark.parametrize(
    "overrides,message",
    [
        ({"alphabet": ()}, "at least one symbol"),
        ({"alphabet": ("a", "#")}, "is reserved"),
        ({"alphabet": ("a", "E")}, "is reserved"),
        ({"alphabet": ("a", "b;c")}, "reserved separator"),
        ({"alphabet": ("a", "a")}, "Duplicate alphabet symbols"),
        ({"alphabet": ("a", "")}, "must not be empty"),
        ({"states": ()}, "At least one state"),
        ({"states": (0, 0, 1)}, "Duplicate states"),
        ({"start": 5}, "Start state 5"),
        ({"ends": ()}, "At least one end state"),
        ({"ends": (1, 1)}, "Duplicate end states"),
        ({"ends": (9,)}, "End state 9"),
    ],
)
def test_configuration_invariants(overrides, message):
    fields = dict(alphabet=("a", "b"), states=(0, 1), start=0, ends=(1,))
    fields.update(overrides)
    with pytest.raises(ValidationError, match=message):
        Configuration(**fields)


def test_configuration_allows_undeclared_transition_states():
    configuration = Configuration(
        alphabet=("a",),
        states=(0, 1),
        start=0,
        ends=(1,),
        transitions=(make_transition("0,a,E,E,E,E,5"), make_transition("7,a,E,E,E,E,5")),
    )
    assert configuration.undeclared_transition_states() == [5, 7]


@pytest.mark.parametrize("value", ["a;", ";", ";a", "a;;b", "E;a", "a;E"])
def test_transition_rejects_malformed_sequence(value: str):
    with pytest.raises(ValidationError, match="empty or epsilon symbol"):
        Transition(
            source=0, symbol="a", pop1=value, pop2="E", push1="E", push2="E", target=1
        )
    with pytest.raises(ValidationError, match="empty or epsilon symbol"):
        Transition(
            source=0, symbol="a", pop1="E", pop2="E", push1="E", push2=value, target=1
        )


def test_transition_accepts_well_formed_sequence():
    transition = make_transition("0,a,#;a,E,a;b;#,E,1")
    assert transition.pop_sequence(1) == ["#", "a"]
    assert transition.push_sequence(1) == ["a", "b", "#"]
