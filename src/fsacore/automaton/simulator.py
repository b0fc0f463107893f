"""Input-string acceptance for finite automata."""

from typing import Hashable, Iterable, List

from fsacore.automaton.closure import closure
from fsacore.automaton.fsa import EPSILON, Automaton
from fsacore.automaton.state_set import StateSet
from fsacore.automaton.step import step_set


def accepts(automaton: Automaton, symbols: Iterable[Hashable]) -> bool:
    """Check whether ``automaton`` accepts the input ``symbols``.

    Simulation starts from the epsilon-closure of the start state and
    applies :func:`~fsacore.automaton.step.step_set` once per symbol.
    A string is consumed one character at a time.

    Args:
        automaton: The automaton to run.
        symbols: The input sequence. Empty input tests only whether the
            start closure holds an accepting state.

    Returns:
        True if some configuration reached after the whole input contains
        an accepting state. False if there is no start state, or if the
        configuration empties out along the way (including on symbols the
        automaton never uses).
    """
    start = automaton.start
    if start is None:
        return False

    current = closure(automaton, start)
    for symbol in symbols:
        current = _advance(automaton, current, symbol)
        if current.is_empty():
            return False

    return current.intersects(automaton.accepting)


def trace(automaton: Automaton, symbols: Iterable[Hashable]) -> List[StateSet]:
    """Record the configurations visited while simulating ``symbols``.

    Returns:
        The start closure followed by the configuration after each symbol.
        The list stops at the first empty configuration, and is empty when
        the automaton has no start state.
    """
    start = automaton.start
    if start is None:
        return []

    current = closure(automaton, start)
    configurations = [current]
    for symbol in symbols:
        current = _advance(automaton, current, symbol)
        configurations.append(current)
        if current.is_empty():
            break
    return configurations


def _advance(automaton: Automaton, current: StateSet, symbol: Hashable) -> StateSet:
    # No labeled transition ever carries EPSILON, so it is a dead end in input.
    if symbol is EPSILON:
        return StateSet()
    return step_set(automaton, current, symbol)
