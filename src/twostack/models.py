from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from twostack.constants import (
    EPSILON,
    FIELD_SEPARATOR,
    RESERVED_CHARACTERS,
    RESERVED_SYMBOLS,
    SEQUENCE_SEPARATOR,
)
from twostack.helpers import split_sequence


class Transition(BaseModel):
    """
    One rule of the transition relation: in state `source`, reading `symbol`
    (or EPSILON), pop `pop1`/`pop2` and push `push1`/`push2`, then move to
    `target`. Pop and push fields may hold a `;`-separated symbol sequence.
    """

    model_config = ConfigDict(frozen=True)

    source: int
    symbol: str
    pop1: str
    pop2: str
    push1: str
    push2: str
    target: int

    @field_validator("symbol", "pop1", "pop2", "push1", "push2")
    @classmethod
    def _check_field(cls, value: str) -> str:
        if not value:
            raise ValueError("Transition fields must not be empty, use 'E' for epsilon.")
        if FIELD_SEPARATOR in value:
            raise ValueError(f"Transition field '{value}' must not contain ','.")
        if any(ch.isspace() for ch in value):
            raise ValueError(f"Transition field '{value}' must not contain blanks.")
        if SEQUENCE_SEPARATOR in value:
            for part in value.split(SEQUENCE_SEPARATOR):
                if not part or part == EPSILON:
                    raise ValueError(
                        f"Transition field '{value}' holds an empty or epsilon symbol in its sequence."
                    )
        return value

    def pop_sequence(self, stack: int) -> List[str]:
        return split_sequence(self._stack_field("pop", stack))

    def push_sequence(self, stack: int) -> List[str]:
        return split_sequence(self._stack_field("push", stack))

    def expected_top(self, stack: int) -> str | None:
        """The symbol that has to be on top of `stack`, or None for EPSILON."""
        sequence = self.pop_sequence(stack)
        if not sequence:
            return None
        return sequence[-1]

    def fields(self) -> Tuple[str, ...]:
        return (
            str(self.source),
            self.symbol,
            self.pop1,
            self.pop2,
            self.push1,
            self.push2,
            str(self.target),
        )

    def _stack_field(self, kind: str, stack: int) -> str:
        if stack not in (1, 2):
            raise ValueError(f"Stack index must be 1 or 2, got {stack}.")
        return getattr(self, f"{kind}{stack}")

    def __str__(self) -> str:
        return FIELD_SEPARATOR.join(self.fields())


class Configuration(BaseModel):
    model_config = ConfigDict(frozen=True)

    alphabet: Tuple[str, ...]
    states: Tuple[int, ...]
    start: int
    ends: Tuple[int, ...]
    transitions: Tuple[Transition, ...] = ()

    @field_validator("alphabet")
    @classmethod
    def _check_alphabet(cls, alphabet: Tuple[str, ...]) -> Tuple[str, ...]:
        if not alphabet:
            raise ValueError("The input alphabet needs at least one symbol.")
        for symbol in alphabet:
            if not symbol:
                raise ValueError("Alphabet symbols must not be empty.")
            if symbol in RESERVED_SYMBOLS:
                raise ValueError(f"Alphabet symbol '{symbol}' is reserved.")
            if any(ch in symbol for ch in RESERVED_CHARACTERS):
                raise ValueError(
                    f"Alphabet symbol '{symbol}' contains a reserved separator."
                )
            if any(ch.isspace() for ch in symbol):
                raise ValueError(f"Alphabet symbol '{symbol}' must not contain blanks.")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("Duplicate alphabet symbols are not allowed.")
        return alphabet

    @field_validator("states")
    @classmethod
    def _check_states(cls, states: Tuple[int, ...]) -> Tuple[int, ...]:
        if not states:
            raise ValueError("At least one state is required.")
        if len(set(states)) != len(states):
            raise ValueError("Duplicate states are not allowed.")
        return states

    @model_validator(mode="after")
    def _check_start_and_ends(self) -> Configuration:
        if self.start not in self.states:
            raise ValueError(
                f"Start state {self.start} must be one of the defined states."
            )
        if not self.ends:
            raise ValueError("At least one end state is required.")
        if len(set(self.ends)) != len(self.ends):
            raise ValueError("Duplicate end states are not allowed.")
        for end in self.ends:
            if end not in self.states:
                raise ValueError(
                    f"End state {end} must be one of the defined states."
                )
        return self

    def is_end_state(self, state: int) -> bool:
        return state in self.ends

    def undeclared_transition_states(self) -> List[int]:
        declared = set(self.states)
        found: List[int] = []
        for transition in self.transitions:
            for state in (transition.source, transition.target):
                if state not in declared and state not in found:
                    found.append(state)
        return found
