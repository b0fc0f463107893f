"""
fsacore - Nondeterministic finite automata with epsilon transitions.

Build an automaton state by state, simulate input strings against it, and
convert it to an equivalent deterministic automaton by subset construction.

Example usage:
    >>> from fsacore import Automaton, EPSILON
    >>> nfa = Automaton.from_transitions(
    ...     states=[0, 1],
    ...     transitions=[(0, 0, "a"), (0, 1, EPSILON)],
    ...     start=0,
    ...     accepting=[1],
    ... )
    >>> nfa.accepts("aaa")
    True
    >>> dfa = nfa.to_dfa()
    >>> dfa.is_deterministic()
    True

For more control:
    >>> from fsacore import Config, to_dfa
    >>> dfa = to_dfa(nfa, config=Config(max_dfa_states=64))
"""

from fsacore.automaton import (
    EPSILON,
    Automaton,
    State,
    StateSet,
    SubsetConstructor,
    Transition,
    accepts,
    closure,
    closure_set,
    is_deterministic,
    nondeterministic_points,
    step,
    step_set,
    to_dfa,
    trace,
)
from fsacore.config import Config
from fsacore.exceptions import (
    CapacityError,
    ConstructionError,
    DuplicateStateError,
    FSAError,
    MultipleStartStatesError,
    NoStartStateError,
    UnknownStateError,
)

__version__ = "0.1.0"

__all__ = [
    # Model
    "Automaton",
    "State",
    "Transition",
    "StateSet",
    "EPSILON",
    # Operations
    "closure",
    "closure_set",
    "step",
    "step_set",
    "accepts",
    "trace",
    "is_deterministic",
    "nondeterministic_points",
    "SubsetConstructor",
    "to_dfa",
    # Configuration
    "Config",
    # Exceptions
    "FSAError",
    "ConstructionError",
    "DuplicateStateError",
    "UnknownStateError",
    "MultipleStartStatesError",
    "NoStartStateError",
    "CapacityError",
    # Version
    "__version__",
]
