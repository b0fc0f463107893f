"""
Pytest configuration and fixtures for fsacore tests.

Provides the reference (a|b)*abb automaton, a family of small automata for
property tests, and helpers for enumerating inputs and comparing DFAs.
"""

import itertools
from collections import deque

import pytest

from fsacore import EPSILON, Automaton


def build_example_nfa() -> Automaton:
    """Thompson-style NFA for (a|b)*abb with states 0-10."""
    nfa = Automaton()
    for state in range(11):
        nfa.add_state(state, start=state == 0, accepting=state == 10)
    for source, target in [(0, 1), (0, 7), (1, 2), (1, 4), (3, 6), (5, 6), (6, 1), (6, 7)]:
        nfa.add_transition(source, target, EPSILON)
    nfa.add_transition(2, 3, "a")
    nfa.add_transition(4, 5, "b")
    nfa.add_transition(7, 8, "a")
    nfa.add_transition(8, 9, "b")
    nfa.add_transition(9, 10, "b")
    return nfa


EXAMPLE = "abb_suffix"

# name -> (states, transitions, start, accepting)
AUTOMATA = {
    "epsilon_cycle": (
        [0, 1, 2, 3],
        [(0, 1, EPSILON), (1, 2, EPSILON), (2, 0, EPSILON), (1, 1, "a"), (2, 3, "b")],
        0,
        [3],
    ),
    "ends_with_ab": (
        [0, 1, 2],
        [(0, 0, "a"), (0, 0, "b"), (0, 1, "a"), (1, 2, "b")],
        0,
        [2],
    ),
    "accepts_empty": (
        [0, 1],
        [(0, 1, "a"), (1, 0, EPSILON)],
        0,
        [0],
    ),
    "duplicate_transitions": (
        [0, 1],
        [(0, 1, "a"), (0, 1, "a"), (1, 0, "b")],
        0,
        [1],
    ),
    "already_deterministic": (
        [0, 1],
        [(0, 1, "a"), (1, 0, "b")],
        0,
        [1],
    ),
    "unreachable_states": (
        [0, 1, 2],
        [(0, 1, "a"), (2, 2, "a"), (2, 1, EPSILON)],
        0,
        [1, 2],
    ),
    "integer_symbols": (
        [0, 1],
        [(0, 0, 0), (0, 1, 1), (1, 1, 0), (1, 0, 1)],
        0,
        [0],
    ),
}


def build_automaton(name: str) -> Automaton:
    if name == EXAMPLE:
        return build_example_nfa()
    states, transitions, start, accepting = AUTOMATA[name]
    return Automaton.from_transitions(states, transitions, start=start, accepting=accepting)


def inputs_up_to(alphabet, max_length):
    """Yield every input sequence over ``alphabet`` up to ``max_length``."""
    for length in range(max_length + 1):
        yield from itertools.product(alphabet, repeat=length)


def canonical_form(automaton: Automaton):
    """Describe a deterministic automaton independently of state numbering.

    States reachable from the start are renumbered in BFS order, visiting
    symbols sorted by ``repr``. Two DFAs with equal canonical forms have the
    same transition function up to renaming.
    """
    if automaton.start is None:
        return None

    order = {automaton.start: 0}
    queue = deque([automaton.start])
    edges = []
    symbols = sorted(automaton.alphabet, key=repr)
    while queue:
        state = queue.popleft()
        for symbol in symbols:
            for target in automaton.targets(state, symbol):
                if target not in order:
                    order[target] = len(order)
                    queue.append(target)
                edges.append((order[state], repr(symbol), order[target]))

    accepting = sorted(order[s] for s in automaton.accepting if s in order)
    return len(order), sorted(edges), accepting


@pytest.fixture
def example_nfa():
    """The reference NFA for (a|b)*abb."""
    return build_example_nfa()


@pytest.fixture(params=[EXAMPLE] + sorted(AUTOMATA))
def automaton(request):
    """Each automaton of the property-test family in turn."""
    return build_automaton(request.param)


@pytest.fixture
def all_inputs():
    """Enumerator of every input up to a given length."""
    return inputs_up_to


@pytest.fixture
def canonical():
    """Numbering-independent description of a DFA."""
    return canonical_form
