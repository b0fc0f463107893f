"""Symbol-driven successor computation."""

from typing import Hashable, Iterable, Set

from fsacore.automaton.closure import closure_set
from fsacore.automaton.fsa import EPSILON, Automaton
from fsacore.automaton.state_set import StateSet


def step(automaton: Automaton, state: int, symbol: Hashable) -> StateSet:
    """Compute the states reachable from ``state`` by consuming ``symbol``.

    The epsilon-closure is taken both before and after the symbol move:
    the closure of ``state`` is computed first, every ``symbol`` transition
    out of it is followed, and the closure of the targets is returned.

    Args:
        automaton: The automaton to explore.
        state: The state to step from.
        symbol: A non-epsilon symbol. Symbols the automaton never uses
            simply produce an empty set.

    Returns:
        The successor set, possibly empty.

    Raises:
        ValueError: If ``symbol`` is ``EPSILON``.
    """
    return step_set(automaton, (state,), symbol)


def step_set(automaton: Automaton, states: Iterable[int], symbol: Hashable) -> StateSet:
    """Compute the union of :func:`step` over every state in ``states``.

    Closure and the symbol move both distribute over union, so this closes
    the whole input set once instead of stepping each member separately.

    Raises:
        ValueError: If ``symbol`` is ``EPSILON``.
    """
    if symbol is EPSILON:
        raise ValueError("step requires a non-epsilon symbol")

    moved: Set[int] = set()
    for current in closure_set(automaton, states):
        moved.update(automaton.targets(current, symbol))
    if not moved:
        return StateSet()
    return closure_set(automaton, moved)
