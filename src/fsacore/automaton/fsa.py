"""Finite automaton data model: states, transitions and the automaton itself."""

import logging
from dataclasses import dataclass, field
from typing import (
    Dict,
    FrozenSet,
    Hashable,
    Iterable,
    List,
    Optional,
    Sequence,
    Tuple,
)

from fsacore.automaton.state_set import StateSet
from fsacore.config import Config
from fsacore.exceptions import (
    CapacityError,
    ConstructionError,
    DuplicateStateError,
    MultipleStartStatesError,
    UnknownStateError,
)

logger = logging.getLogger(__name__)

# The empty move. Every other hashable value is an ordinary alphabet symbol.
EPSILON = None

Symbol = Optional[Hashable]


def symbol_repr(symbol: Symbol) -> str:
    """Render a symbol for display, using ``ε`` for epsilon."""
    return "ε" if symbol is EPSILON else str(symbol)


@dataclass(frozen=True)
class State:
    """A single automaton state.

    Attributes:
        id: Non-negative integer identifying the state.
        start: Whether this is the start state.
        accepting: Whether this is an accepting state.
    """

    id: int
    start: bool = False
    accepting: bool = False

    def __str__(self) -> str:
        flags = []
        if self.start:
            flags.append("start")
        if self.accepting:
            flags.append("accepting")
        if flags:
            return f"{self.id} ({', '.join(flags)})"
        return str(self.id)


@dataclass(frozen=True)
class Transition:
    """A labeled edge between two states.

    Attributes:
        source: Source state id.
        target: Target state id.
        symbol: The symbol consumed, or ``EPSILON`` for an empty move.
    """

    source: int
    target: int
    symbol: Symbol = EPSILON

    def is_epsilon(self) -> bool:
        return self.symbol is EPSILON

    def __str__(self) -> str:
        return f"{self.source} --{symbol_repr(self.symbol)}--> {self.target}"


@dataclass(repr=False)
class Automaton:
    """Nondeterministic finite automaton with epsilon transitions.

    An automaton is built incrementally with :meth:`add_state` and
    :meth:`add_transition` and is read-only for every query afterwards:
    closure, stepping, simulation, the determinism check and subset
    construction never modify it, so built automata can be queried from
    several threads at once.

    Transitions form a multiset. Several transitions may leave one state
    on the same symbol (that is what makes the automaton nondeterministic)
    and repeating an identical transition is allowed.

    Attributes:
        config: Size limits enforced while building.
    """

    config: Config = field(default_factory=Config.default)
    _states: Dict[int, State] = field(default_factory=dict, init=False)
    _start: Optional[int] = field(default=None, init=False)
    _transitions: List[Transition] = field(default_factory=list, init=False)
    # state id -> outgoing transitions, in insertion order
    _outgoing: Dict[int, List[Transition]] = field(default_factory=dict, init=False)
    # insertion-ordered set of non-epsilon symbols
    _alphabet: Dict[Hashable, None] = field(default_factory=dict, init=False)

    @classmethod
    def from_transitions(
        cls,
        states: Iterable[int],
        transitions: Iterable[Sequence],
        start: Optional[int] = None,
        accepting: Iterable[int] = (),
        config: Optional[Config] = None,
    ) -> "Automaton":
        """Build an automaton in one call.

        Args:
            states: State ids, in the order they should be enumerated.
            transitions: ``(source, target, symbol)`` triples. A
                ``(source, target)`` pair is an epsilon transition.
            start: The start state id, if any.
            accepting: Ids of accepting states.
            config: Optional size limits.

        Returns:
            The built automaton.

        Raises:
            ConstructionError: If any state or transition is malformed.
        """
        automaton = cls(config=config or Config.default())
        state_ids = list(states)
        accepting_ids = set(accepting)

        known = set(state_ids)
        if start is not None and start not in known:
            raise UnknownStateError("start state was not declared", state=start)
        undeclared = accepting_ids - known
        if undeclared:
            raise UnknownStateError(
                "accepting state was not declared", state=min(undeclared, key=repr)
            )

        for state_id in state_ids:
            automaton.add_state(
                state_id,
                start=state_id == start,
                accepting=state_id in accepting_ids,
            )
        for entry in transitions:
            try:
                size = len(entry)
            except TypeError:
                size = None
            if size not in (2, 3):
                raise ConstructionError(
                    f"transition {entry!r} must be (source, target) or (source, target, symbol)"
                )
            automaton.add_transition(*entry)
        return automaton

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_state(self, state_id: int, start: bool = False, accepting: bool = False) -> State:
        """Register a state.

        Re-adding an existing id with the same flags is a no-op; re-adding
        it with different flags is an error rather than an overwrite.

        Raises:
            ConstructionError: If ``state_id`` is not a non-negative int.
            DuplicateStateError: If the id exists with different flags.
            MultipleStartStatesError: If another state is already the start.
            CapacityError: If ``config.max_states`` would be exceeded.
        """
        if isinstance(state_id, bool) or not isinstance(state_id, int) or state_id < 0:
            raise ConstructionError(
                "state ids must be non-negative integers", state=state_id
            )

        state = State(state_id, bool(start), bool(accepting))
        existing = self._states.get(state_id)
        if existing is not None:
            if existing == state:
                return existing
            raise DuplicateStateError(
                f"state already declared as {existing}, cannot redeclare as {state}",
                state=state_id,
            )

        if state.start and self._start is not None:
            raise MultipleStartStatesError(
                f"state {self._start} is already the start state", state=state_id
            )

        limit = self.config.max_states
        if limit is not None and len(self._states) >= limit:
            logger.warning("State limit %d reached adding state %d", limit, state_id)
            raise CapacityError("states", limit)

        self._states[state_id] = state
        self._outgoing[state_id] = []
        if state.start:
            self._start = state_id
        logger.debug("Added state %s", state)
        return state

    def add_transition(self, source: int, target: int, symbol: Symbol = EPSILON) -> Transition:
        """Register a transition from ``source`` to ``target``.

        Raises:
            UnknownStateError: If either endpoint was never added.
            ConstructionError: If ``symbol`` is not hashable.
            CapacityError: If ``config.max_transitions`` would be exceeded.
        """
        for endpoint in (source, target):
            if not self._has_state(endpoint):
                raise UnknownStateError(
                    "transition references an undeclared state", state=endpoint
                )
        try:
            hash(symbol)
        except TypeError:
            raise ConstructionError(f"symbol {symbol!r} is not hashable") from None

        limit = self.config.max_transitions
        if limit is not None and len(self._transitions) >= limit:
            logger.warning("Transition limit %d reached", limit)
            raise CapacityError("transitions", limit)

        transition = Transition(source, target, symbol)
        self._transitions.append(transition)
        self._outgoing[source].append(transition)
        if symbol is not EPSILON:
            self._alphabet.setdefault(symbol, None)
        logger.debug("Added transition %s", transition)
        return transition

    def _has_state(self, state_id: object) -> bool:
        try:
            return state_id in self._states
        except TypeError:
            return False

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def states(self) -> Tuple[int, ...]:
        """State ids in the order they were added."""
        return tuple(self._states)

    @property
    def start(self) -> Optional[int]:
        """The start state id, or ``None`` if no state is flagged start."""
        return self._start

    @property
    def accepting(self) -> FrozenSet[int]:
        return frozenset(s.id for s in self._states.values() if s.accepting)

    @property
    def transitions(self) -> Tuple[Transition, ...]:
        return tuple(self._transitions)

    @property
    def alphabet(self) -> Tuple[Hashable, ...]:
        """Distinct non-epsilon symbols, in order of first appearance."""
        return tuple(self._alphabet)

    def state(self, state_id: int) -> State:
        """Look up a state by id.

        Raises:
            UnknownStateError: If no such state exists.
        """
        if not self._has_state(state_id):
            raise UnknownStateError("no such state", state=state_id)
        return self._states[state_id]

    def is_accepting(self, state_id: int) -> bool:
        if not self._has_state(state_id):
            return False
        return self._states[state_id].accepting

    def transitions_from(self, state_id: int) -> List[Transition]:
        """Outgoing transitions of a state, in insertion order."""
        if not self._has_state(state_id):
            return []
        return list(self._outgoing[state_id])

    def targets(self, state_id: int, symbol: Symbol) -> List[int]:
        """Direct successors of ``state_id`` on ``symbol``, without closure."""
        if not self._has_state(state_id):
            return []
        return [t.target for t in self._outgoing[state_id] if t.symbol == symbol]

    def has_epsilon_transitions(self) -> bool:
        return any(t.is_epsilon() for t in self._transitions)

    def size(self) -> int:
        """Return number of states."""
        return len(self._states)

    def transition_count(self) -> int:
        """Return total number of transitions."""
        return len(self._transitions)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def closure(self, state_id: int) -> StateSet:
        """Epsilon-closure of one state. See :func:`fsacore.automaton.closure.closure`."""
        from fsacore.automaton.closure import closure

        return closure(self, state_id)

    def step(self, state_id: int, symbol: Hashable) -> StateSet:
        """Successors on ``symbol``. See :func:`fsacore.automaton.step.step`."""
        from fsacore.automaton.step import step

        return step(self, state_id, symbol)

    def accepts(self, symbols: Iterable[Hashable]) -> bool:
        """Check whether the automaton accepts an input sequence."""
        from fsacore.automaton.simulator import accepts

        return accepts(self, symbols)

    def is_deterministic(self) -> bool:
        from fsacore.automaton.determinism import is_deterministic

        return is_deterministic(self)

    def to_dfa(self, config: Optional[Config] = None) -> "Automaton":
        """Convert to an equivalent DFA using subset construction."""
        from fsacore.automaton.subset import to_dfa

        return to_dfa(self, config)

    def __str__(self) -> str:
        lines = [
            "States: " + ", ".join(str(s) for s in self._states.values()),
            "Alphabet: " + ", ".join(symbol_repr(a) for a in self._alphabet),
            "Transitions:",
        ]
        lines.extend(f"  {t}" for t in self._transitions)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Automaton(states={self.size()}, transitions={self.transition_count()}, "
            f"start={self._start!r})"
        )
