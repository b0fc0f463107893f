"""Immutable sets of automaton state identifiers."""

from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Iterable, Iterator, Tuple, Union


@dataclass(frozen=True)
class StateSet:
    """An unordered, duplicate-free collection of state ids.

    Equality and hashing are set-based, so two StateSets built from the
    same members in any order (and with any repetitions) compare equal and
    can key the same dictionary entry. Iteration yields members in sorted
    order so that anything derived from a StateSet enumerates stably.

    Attributes:
        members: The state ids in this set.
    """

    members: FrozenSet[int] = frozenset()

    def __post_init__(self) -> None:
        # members is always a private frozenset
        if not isinstance(self.members, frozenset):
            object.__setattr__(self, "members", frozenset(self.members))

    @classmethod
    def of(cls, *states: int) -> "StateSet":
        """Build a StateSet from the given ids."""
        return cls(frozenset(states))

    @classmethod
    def from_iterable(cls, states: Iterable[int]) -> "StateSet":
        """Build a StateSet from any iterable of ids."""
        return cls(frozenset(states))

    def contains(self, state: int) -> bool:
        return state in self.members

    def insert(self, state: int) -> "StateSet":
        """Return a set that also holds ``state``.

        The receiver is never modified; if ``state`` is already a member
        the receiver itself is returned.
        """
        if state in self.members:
            return self
        return StateSet(self.members | {state})

    def union(self, other: "StateSet") -> "StateSet":
        if not other.members:
            return self
        if not self.members:
            return other
        return StateSet(self.members | other.members)

    def equals(self, other: "StateSet") -> bool:
        """Set equality: same cardinality and every member shared."""
        return len(self.members) == len(other.members) and all(
            state in other.members for state in self.members
        )

    def intersects(self, states: Union["StateSet", AbstractSet[int]]) -> bool:
        """Check whether any member of this set is also in ``states``."""
        if isinstance(states, StateSet):
            states = states.members
        return not self.members.isdisjoint(states)

    def is_empty(self) -> bool:
        return not self.members

    def sorted(self) -> Tuple[int, ...]:
        """Members in ascending order."""
        return tuple(sorted(self.members))

    def __contains__(self, state: object) -> bool:
        return state in self.members

    def __iter__(self) -> Iterator[int]:
        return iter(self.sorted())

    def __len__(self) -> int:
        return len(self.members)

    def __bool__(self) -> bool:
        return bool(self.members)

    def __or__(self, other: "StateSet") -> "StateSet":
        return self.union(other)

    def __str__(self) -> str:
        return "{" + ",".join(str(state) for state in self.sorted()) + "}"

    def __repr__(self) -> str:
        return f"StateSet({self})"


EMPTY = StateSet()
