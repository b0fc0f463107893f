"""Epsilon-closure computation."""

from typing import Iterable, Set

from fsacore.automaton.fsa import EPSILON, Automaton
from fsacore.automaton.state_set import StateSet


def closure(automaton: Automaton, state: int) -> StateSet:
    """Compute the epsilon-closure of a single state.

    The closure holds ``state`` itself plus every state reachable from it
    through zero or more epsilon transitions.

    Args:
        automaton: The automaton to explore.
        state: The state to start from. An id the automaton does not know
            has no transitions, so its closure is just itself.

    Returns:
        The closure as a new StateSet.
    """
    return _epsilon_reach(automaton, (state,))


def closure_set(automaton: Automaton, states: Iterable[int]) -> StateSet:
    """Compute the union of the epsilon-closures of ``states``.

    All seeds share one worklist, so states reachable from several seeds
    are visited once.
    """
    return _epsilon_reach(automaton, states)


def _epsilon_reach(automaton: Automaton, seeds: Iterable[int]) -> StateSet:
    result: Set[int] = set()
    stack = []
    for seed in seeds:
        if seed not in result:
            result.add(seed)
            stack.append(seed)

    while stack:
        current = stack.pop()
        for target in automaton.targets(current, EPSILON):
            if target not in result:
                result.add(target)
                stack.append(target)

    return StateSet(frozenset(result))
