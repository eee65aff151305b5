from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, PositiveInt

from twostack.constants import EPSILON, Verdict
from twostack.error import InputError, StepLimitExceededError
from twostack.matcher import match
from twostack.models import Configuration, Transition
from twostack.pda import StackPair


class EngineSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    # None keeps the unbounded behaviour: a machine looping on epsilon never halts.
    max_steps: Optional[PositiveInt] = None
    halt_on_stack_failure: bool = False
    first_match_only: bool = False


class TraceStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    transition: Transition
    stack1: Tuple[str, ...]
    stack2: Tuple[str, ...]
    failures: Tuple[str, ...] = ()


class RunResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    verdict: Verdict
    final_state: int
    steps: int
    trace: Tuple[TraceStep, ...]
    stack1: Tuple[str, ...]
    stack2: Tuple[str, ...]

    @property
    def accepted(self) -> bool:
        return self.verdict is Verdict.ACCEPTED


class ExecutionContext:
    def __init__(self, start_state: int) -> None:
        self._state: int = start_state
        self._cursor: int = 0
        self.stacks = StackPair()

    @property
    def state(self) -> int:
        return self._state

    @property
    def cursor(self) -> int:
        return self._cursor

    def set_state(self, new_state: int) -> None:
        self._state = new_state

    def advance(self) -> None:
        self._cursor += 1


class Simulation:
    """
    A single run of a configuration over one word. Owns its own execution
    context, so simulations never share stacks.

    Each call to `step` performs one iteration of the machine loop: accept if
    the current state is an end state, otherwise read the next symbol (EPSILON
    once the word is exhausted), apply every matching transition in order and
    advance the cursor. When nothing matches the word is rejected.
    """

    def __init__(
        self,
        configuration: Configuration,
        word: str,
        settings: EngineSettings | None = None,
    ) -> None:
        self._configuration = configuration
        self._word = word
        self._settings = settings or EngineSettings()
        self._context = ExecutionContext(configuration.start)
        self._verdict = Verdict.RUNNING
        self._trace: List[TraceStep] = []
        self._steps = 0

    @property
    def word(self) -> str:
        return self._word

    @property
    def verdict(self) -> Verdict:
        return self._verdict

    @property
    def context(self) -> ExecutionContext:
        return self._context

    @property
    def trace(self) -> Tuple[TraceStep, ...]:
        return tuple(self._trace)

    @property
    def current_symbol(self) -> str:
        if self._context.cursor < len(self._word):
            return self._word[self._context.cursor]
        return EPSILON

    def step(self) -> List[TraceStep]:
        if self._verdict is not Verdict.RUNNING:
            return []

        if self._configuration.is_end_state(self._context.state):
            self._verdict = Verdict.ACCEPTED
            return []

        stack1_top, stack2_top = self._context.stacks.tops
        matches = match(
            self._configuration.transitions,
            self._context.state,
            self.current_symbol,
            stack1_top,
            stack2_top,
        )
        if not matches:
            self._verdict = Verdict.REJECTED
            return []

        max_steps = self._settings.max_steps
        if max_steps is not None and self._steps >= max_steps:
            raise StepLimitExceededError(max_steps, self._word)

        if self._settings.first_match_only:
            matches = matches[:1]

        applied: List[TraceStep] = []
        for transition in matches:
            self._context.set_state(transition.target)
            failures = self._context.stacks.apply_transition(transition)
            stack1, stack2 = self._context.stacks.snapshot()
            applied.append(
                TraceStep(
                    transition=transition,
                    stack1=stack1,
                    stack2=stack2,
                    failures=tuple(failures),
                )
            )
            if failures and self._settings.halt_on_stack_failure:
                self._verdict = Verdict.REJECTED
                break

        self._trace.extend(applied)
        self._steps += 1
        self._context.advance()
        return applied

    def __iter__(self) -> Iterator[TraceStep]:
        while self._verdict is Verdict.RUNNING:
            yield from self.step()

    def run(self) -> RunResult:
        for _ in self:
            pass
        return self.result()

    def result(self) -> RunResult:
        stack1, stack2 = self._context.stacks.snapshot()
        return RunResult(
            word=self._word,
            verdict=self._verdict,
            final_state=self._context.state,
            steps=self._steps,
            trace=tuple(self._trace),
            stack1=stack1,
            stack2=stack2,
        )


class ExecutionEngine:
    def __init__(
        self,
        configuration: Configuration,
        settings: EngineSettings | None = None,
    ) -> None:
        self.configuration = configuration
        self.settings = settings or EngineSettings()

    def check_word(self, word: str) -> None:
        alphabet = set(self.configuration.alphabet)
        invalid = [ch for ch in word if ch not in alphabet]
        if invalid:
            raise InputError(invalid)

    def start(self, word: str) -> Simulation:
        self.check_word(word)
        return Simulation(self.configuration, word, self.settings)

    def run(self, word: str) -> RunResult:
        return self.start(word).run()
