from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from twostack.constants import BOTTOM, EPSILON, SEQUENCE_SEPARATOR
from twostack.error import StackOperationError
from twostack.models import Transition


class SymbolStack:
    def __init__(self) -> None:
        self._stack: List[str] = []

    @property
    def top(self) -> Optional[str]:
        if not self._stack:
            return None
        return self._stack[-1]

    @property
    def contents(self) -> Tuple[str, ...]:
        return tuple(self._stack)

    def push(self, symbol: str) -> None:
        self._stack.append(symbol)

    def pop(self) -> str:
        if not self._stack:
            raise IndexError("PDA stack is empty.")
        return self._stack.pop()

    def clear(self) -> None:
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)


class StackPair:
    def __init__(self) -> None:
        self.stack1 = SymbolStack()
        self.stack2 = SymbolStack()
        self.reset()

    def reset(self) -> None:
        for stack in (self.stack1, self.stack2):
            stack.clear()
            stack.push(BOTTOM)

    @property
    def tops(self) -> Tuple[Optional[str], Optional[str]]:
        return self.stack1.top, self.stack2.top

    def snapshot(self) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        return self.stack1.contents, self.stack2.contents

    @staticmethod
    def apply(stack: SymbolStack, pop: Sequence[str], push: Sequence[str]) -> None:
        """
        Pops `pop` right to left, then pushes `push` left to right.
        A missing or mismatched symbol raises StackOperationError; symbols
        popped before the failure stay popped and nothing is pushed.
        """
        pop_spec = SEQUENCE_SEPARATOR.join(pop) or EPSILON
        for expected in reversed(pop):
            if stack.top is None:
                raise StackOperationError(pop_spec, "stack is empty")
            if stack.top != expected:
                raise StackOperationError(
                    pop_spec, f"expected '{expected}' on top, found '{stack.top}'"
                )
            stack.pop()

        for symbol in push:
            stack.push(symbol)

    def apply_transition(self, transition: Transition) -> List[str]:
        failures: List[str] = []
        for index, stack in ((1, self.stack1), (2, self.stack2)):
            try:
                self.apply(
                    stack,
                    transition.pop_sequence(index),
                    transition.push_sequence(index),
                )
            except StackOperationError as e:
                failures.append(str(e))
        # Only stack 1 gets its bottom marker back.
        if not len(self.stack1):
            self.stack1.push(BOTTOM)
        return failures
