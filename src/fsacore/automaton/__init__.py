"""Automaton model and algorithms."""

from fsacore.automaton.state_set import StateSet
from fsacore.automaton.fsa import EPSILON, Automaton, State, Transition
from fsacore.automaton.closure import closure, closure_set
from fsacore.automaton.step import step, step_set
from fsacore.automaton.simulator import accepts, trace
from fsacore.automaton.determinism import is_deterministic, nondeterministic_points
from fsacore.automaton.subset import SubsetConstructor, to_dfa

__all__ = [
    "StateSet",
    "EPSILON",
    "Automaton",
    "State",
    "Transition",
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
]
