"""Structural determinism check."""

from typing import Hashable, List, Optional, Set, Tuple

from fsacore.automaton.fsa import Automaton


def nondeterministic_points(automaton: Automaton) -> List[Tuple[int, Optional[Hashable]]]:
    """Find every ``(state, symbol)`` pair that breaks determinism.

    A pair is reported when the state has an epsilon transition (reported
    with symbol ``EPSILON``) or when two or more of its transitions carry
    the same symbol, whatever their targets. Pairs are listed once each,
    in the order the offending transition was added.
    """
    seen: Set[Tuple[int, Optional[Hashable]]] = set()
    reported: Set[Tuple[int, Optional[Hashable]]] = set()
    points: List[Tuple[int, Optional[Hashable]]] = []

    for transition in automaton.transitions:
        key = (transition.source, transition.symbol)
        if (transition.is_epsilon() or key in seen) and key not in reported:
            reported.add(key)
            points.append(key)
        seen.add(key)

    return points


def is_deterministic(automaton: Automaton) -> bool:
    """Check whether the automaton is structurally deterministic.

    True iff there are no epsilon transitions and no state has two
    transitions on the same symbol. Completeness is not required: a
    missing transition means implicit rejection.
    """
    seen: Set[Tuple[int, Optional[Hashable]]] = set()
    for transition in automaton.transitions:
        if transition.is_epsilon():
            return False
        key = (transition.source, transition.symbol)
        if key in seen:
            return False
        seen.add(key)
    return True
