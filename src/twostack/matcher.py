from typing import Iterable, List, Optional

from twostack.models import Transition


def pop_matches(expected: Optional[str], top: Optional[str]) -> bool:
    # An empty stack has nothing to compare against and accepts any pop.
    if expected is None or top is None:
        return True
    return expected == top


def match(
    transitions: Iterable[Transition],
    state: int,
    symbol: str,
    stack1_top: Optional[str],
    stack2_top: Optional[str],
) -> List[Transition]:
    """
    Returns every transition applicable to the given state, input symbol and
    stack tops, in declaration order. Ambiguous relations yield all matches.
    """
    return [
        transition
        for transition in transitions
        if transition.source == state
        and transition.symbol == symbol
        and pop_matches(transition.expected_top(1), stack1_top)
        and pop_matches(transition.expected_top(2), stack2_top)
    ]
