"""Custom exceptions for fsacore."""

from typing import Hashable, Optional


class FSAError(Exception):
    """Base exception for all fsacore errors."""

    pass


class ConstructionError(FSAError):
    """Raised when an automaton is built from malformed states or transitions."""

    def __init__(self, message: str, state: Optional[Hashable] = None) -> None:
        self.state = state
        super().__init__(message)

    def __str__(self) -> str:
        if self.state is not None:
            return f"{super().__str__()} (state {self.state!r})"
        return super().__str__()


class DuplicateStateError(ConstructionError):
    """Raised when a state id is re-added with different flags."""

    pass


class UnknownStateError(ConstructionError):
    """Raised when a transition references a state that was never added."""

    pass


class MultipleStartStatesError(ConstructionError):
    """Raised when a second state is flagged as the start state."""

    pass


class NoStartStateError(FSAError):
    """Raised when an operation needs a start state and there is none."""

    pass


class CapacityError(FSAError):
    """Raised when a configured size limit is exceeded."""

    def __init__(self, kind: str, limit: int) -> None:
        self.kind = kind
        self.limit = limit
        super().__init__(f"{kind} limit exceeded: {limit}")
