"""Custom exceptions for relang."""

from typing import Any, Optional, Tuple


class RelangError(Exception):
    """Base exception for all relang errors."""

    pass


class InvalidTransition(RelangError):
    """Raised when a transition references an undeclared state or symbol.

    Attributes:
        transition: The offending (source, symbol, target) triple, verbatim.
        position: Index of the triple in the caller's transition list.
        reason: Short description of which part of the triple is invalid.
    """

    def __init__(
        self,
        transition: Tuple[Any, Any, Any],
        position: int = -1,
        reason: str = "invalid transition",
    ) -> None:
        self.transition = transition
        self.position = position
        self.reason = reason
        super().__init__(f"{reason}: {transition!r}")

    def __str__(self) -> str:
        if self.position >= 0:
            return f"{super().__str__()} at position {self.position}"
        return super().__str__()


class InvalidAutomatonError(RelangError):
    """Raised when states, alphabet or state subsets are malformed."""

    pass


class DefinitionError(RelangError):
    """Raised when an automaton definition document cannot be read."""

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        self.source = source
        super().__init__(message)

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {super().__str__()}"
        return super().__str__()
