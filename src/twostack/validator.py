from typing import Iterable, List, Sequence, Tuple

from pydantic import ValidationError

from twostack.constants import (
    RESERVED_CHARACTERS,
    RESERVED_SYMBOLS,
    TRANSITION_FIELD_COUNT,
)
from twostack.error import ConfigurationError
from twostack.helpers import is_integer, parse_integer, split_fields
from twostack.models import Configuration, Transition


def parse_alphabet(text: str) -> Tuple[str, ...]:
    text = text.strip()
    if not text:
        raise ConfigurationError(
            "Invalid input alphabet. Please enter at least one character."
        )
    symbols = split_fields(text)
    errors: List[str] = []
    seen: set[str] = set()
    for symbol in symbols:
        if not symbol:
            errors.append("Invalid input alphabet. Empty symbols are not allowed.")
        elif symbol in RESERVED_SYMBOLS:
            errors.append(f"Invalid input alphabet. Symbol '{symbol}' is reserved.")
        elif any(ch in symbol for ch in RESERVED_CHARACTERS):
            errors.append(
                f"Invalid input alphabet. Symbol '{symbol}' contains a reserved separator."
            )
        elif any(ch.isspace() for ch in symbol):
            errors.append("Invalid input alphabet. Blanks/spaces are not allowed.")
        elif symbol in seen:
            errors.append(
                f"Invalid input alphabet. Duplicate symbol '{symbol}' is not allowed."
            )
        seen.add(symbol)
    if errors:
        raise ConfigurationError(errors)
    return tuple(symbols)


def parse_states(text: str) -> Tuple[int, ...]:
    states: List[int] = []
    for token in split_fields(text):
        if not is_integer(token):
            raise ConfigurationError("Invalid state(s). Only numbers are allowed.")
        state = parse_integer(token)
        if state in states:
            raise ConfigurationError(
                "Invalid states. Duplicate states are not allowed."
            )
        states.append(state)
    return tuple(states)


def parse_start_state(text: str, states: Sequence[int]) -> int:
    if not is_integer(text):
        raise ConfigurationError("Invalid start state. Please enter a valid integer.")
    start = parse_integer(text)
    if start not in states:
        raise ConfigurationError(
            "Invalid start state. The start state must be one of the defined states."
        )
    return start


def parse_end_states(text: str, states: Sequence[int]) -> Tuple[int, ...]:
    ends: List[int] = []
    for token in split_fields(text):
        if not is_integer(token):
            raise ConfigurationError("Invalid end states. Only integers are allowed.")
        end = parse_integer(token)
        if end not in states:
            raise ConfigurationError(
                f"Invalid end state: {end}. The end state must be one of the defined states."
            )
        if end in ends:
            raise ConfigurationError(
                "Invalid end states. Duplicate end states are not allowed."
            )
        ends.append(end)
    return tuple(ends)


def parse_transition(text: str) -> Transition:
    fields = split_fields(text.strip())
    rendered = "[" + ", ".join(fields) + "]"
    if len(fields) != TRANSITION_FIELD_COUNT:
        raise ConfigurationError(
            f"The length of a transition needs to be {TRANSITION_FIELD_COUNT}: {rendered}"
        )
    if not is_integer(fields[0]) or not is_integer(fields[6]):
        raise ConfigurationError(
            f"The 'current_state' and 'next_state' need to be Integers: {rendered}"
        )
    source, symbol, pop1, pop2, push1, push2, target = fields
    try:
        return Transition(
            source=parse_integer(source),
            symbol=symbol,
            pop1=pop1,
            pop2=pop2,
            push1=push1,
            push2=push2,
            target=parse_integer(target),
        )
    except ValidationError as e:
        raise ConfigurationError(
            [f"{message}: {rendered}" for message in _validation_messages(e)]
        ) from e


def parse_transitions(lines: Iterable[str]) -> Tuple[Transition, ...]:
    """
    Parses every line before failing, so the raised ConfigurationError lists
    all invalid transitions at once.
    """
    transitions: List[Transition] = []
    errors: List[str] = []
    for line in lines:
        try:
            transitions.append(parse_transition(line))
        except ConfigurationError as e:
            errors.extend(e.errors)
    if errors:
        raise ConfigurationError(errors)
    return tuple(transitions)


class ConfigurationValidator:
    def __init__(self, strict_transitions: bool = False) -> None:
        self.strict_transitions = strict_transitions

    def build(
        self,
        alphabet: str,
        states: str,
        start: str,
        ends: str,
        transitions: Iterable[str],
    ) -> Configuration:
        errors: List[str] = []

        parsed_alphabet = self._collect(errors, parse_alphabet, alphabet)
        parsed_states = self._collect(errors, parse_states, states)
        parsed_start = None
        parsed_ends = None
        if parsed_states is not None:
            parsed_start = self._collect(errors, parse_start_state, start, parsed_states)
            parsed_ends = self._collect(errors, parse_end_states, ends, parsed_states)
        parsed_transitions = self._collect(errors, parse_transitions, transitions)

        if errors:
            raise ConfigurationError(errors)
        return self.validate(
            alphabet=parsed_alphabet,
            states=parsed_states,
            start=parsed_start,
            ends=parsed_ends,
            transitions=parsed_transitions,
        )

    def validate(self, **fields) -> Configuration:
        try:
            configuration = Configuration(**fields)
        except ValidationError as e:
            raise ConfigurationError(_validation_messages(e)) from e
        if self.strict_transitions:
            undeclared = configuration.undeclared_transition_states()
            if undeclared:
                raise ConfigurationError(
                    [
                        f"Transition state {state} is not one of the defined states."
                        for state in undeclared
                    ]
                )
        return configuration

    @staticmethod
    def _collect(errors: List[str], parse, *args):
        try:
            return parse(*args)
        except ConfigurationError as e:
            errors.extend(e.errors)
            return None


def _validation_messages(error: ValidationError) -> List[str]:
    messages: List[str] = []
    for detail in error.errors():
        context = detail.get("ctx") or {}
        if "error" in context:
            messages.append(str(context["error"]))
        else:
            location = ".".join(str(part) for part in detail["loc"])
            messages.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return messages
