"""Configuration for automaton construction and conversion."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Size limits applied while building and converting automata.

    Every limit defaults to ``None``, meaning containers grow on demand.
    A set limit is enforced strictly: going past it raises
    :class:`~fsacore.exceptions.CapacityError` instead of dropping data.

    Attributes:
        max_states: Maximum number of states an automaton may hold.
        max_transitions: Maximum number of transitions an automaton may hold.
        max_dfa_states: Maximum number of DFA states subset construction
            may discover before giving up.
    """

    max_states: Optional[int] = None
    max_transitions: Optional[int] = None
    max_dfa_states: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("max_states", "max_transitions", "max_dfa_states"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def default(cls) -> "Config":
        """Unbounded configuration."""
        return cls()
