"""NFA to DFA conversion by subset construction."""

import logging
from collections import deque
from typing import Deque, Dict, Hashable, List, Optional, Tuple

from fsacore.automaton.closure import closure
from fsacore.automaton.fsa import Automaton
from fsacore.automaton.state_set import StateSet
from fsacore.automaton.step import step_set
from fsacore.config import Config
from fsacore.exceptions import CapacityError, NoStartStateError

logger = logging.getLogger(__name__)


class SubsetConstructor:
    """Builds a deterministic automaton equivalent to a nondeterministic one.

    Each DFA state stands for the set of NFA states reachable under one
    input prefix. DFA states are numbered ``0..k`` in discovery order,
    with ``0`` always the start state. Discovery follows a FIFO worklist
    and the source alphabet's first-appearance order, so converting the
    same automaton twice yields identically numbered results.

    The source automaton is only read. The result shares nothing with it.

    Attributes:
        automaton: The automaton being converted.
        config: Limits for the conversion and for the built DFA.
        subsets: After :meth:`construct`, the NFA state set behind each
            DFA state, indexed by DFA state number.
    """

    def __init__(self, automaton: Automaton, config: Optional[Config] = None):
        self.automaton = automaton
        self.config = config or automaton.config
        self.subsets: List[StateSet] = []

    def construct(self) -> Automaton:
        """Run subset construction.

        Returns:
            A new deterministic Automaton.

        Raises:
            NoStartStateError: If the source automaton has no start state.
            CapacityError: If ``config.max_dfa_states`` (or the DFA's own
                state/transition limits) would be exceeded.
        """
        nfa = self.automaton
        if nfa.start is None:
            raise NoStartStateError("cannot build a DFA without a start state")

        alphabet = nfa.alphabet
        initial = closure(nfa, nfa.start)

        index: Dict[StateSet, int] = {initial: 0}
        subsets: List[StateSet] = [initial]
        queue: Deque[StateSet] = deque([initial])
        delta: List[Tuple[int, int, Hashable]] = []
        logger.debug("DFA state 0 = %s", initial)

        while queue:
            current = queue.popleft()
            source = index[current]

            for symbol in alphabet:
                successor = step_set(nfa, current, symbol)
                if successor.is_empty():
                    continue

                target = index.get(successor)
                if target is None:
                    target = len(subsets)
                    self._check_capacity(target + 1)
                    index[successor] = target
                    subsets.append(successor)
                    queue.append(successor)
                    logger.debug("DFA state %d = %s", target, successor)

                delta.append((source, target, symbol))

        self.subsets = subsets
        dfa = self._build(subsets, delta)
        logger.debug(
            "Subset construction produced %d states and %d transitions from %d NFA states",
            dfa.size(),
            dfa.transition_count(),
            nfa.size(),
        )
        return dfa

    def label(self, dfa_state: int) -> str:
        """Render the NFA state set behind a DFA state, e.g. ``{1,2,4,7}``.

        Only meaningful after :meth:`construct`.

        Raises:
            ValueError: If ``dfa_state`` is not a state of the constructed DFA.
        """
        if not 0 <= dfa_state < len(self.subsets):
            if not self.subsets:
                raise ValueError("label() called before construct()")
            raise ValueError(
                f"no DFA state {dfa_state}; states are 0..{len(self.subsets) - 1}"
            )
        return str(self.subsets[dfa_state])

    def _check_capacity(self, count: int) -> None:
        limit = self.config.max_dfa_states
        if limit is not None and count > limit:
            logger.warning("DFA state limit %d reached during subset construction", limit)
            raise CapacityError("dfa_states", limit)

    def _build(self, subsets: List[StateSet], delta: List[Tuple[int, int, Hashable]]) -> Automaton:
        accepting = self.automaton.accepting
        dfa = Automaton(config=self.config)
        for number, subset in enumerate(subsets):
            dfa.add_state(number, start=number == 0, accepting=subset.intersects(accepting))
        for source, target, symbol in delta:
            dfa.add_transition(source, target, symbol)
        return dfa


def to_dfa(automaton: Automaton, config: Optional[Config] = None) -> Automaton:
    """Convenience function to convert an automaton to a DFA.

    Args:
        automaton: The source automaton.
        config: Optional limits; defaults to the source automaton's.

    Returns:
        A new deterministic Automaton.
    """
    constructor = SubsetConstructor(automaton, config)
    return constructor.construct()
