"""Configuration for automaton construction and queries."""

from dataclasses import dataclass
from typing import Any, Optional


DEFAULT_EPSILON_MARKER = "-"

# Default for empty_chain_marker: use whatever epsilon_marker is
FOLLOW_EPSILON_MARKER: Any = object()


@dataclass
class Config:
    """Settings shared by the builder, the recognizer and the CLI.

    Attributes:
        epsilon_marker: Transition label that denotes an empty transition.
        empty_chain_marker: Character that, anywhere in a query, turns the
            whole query into the empty chain. Defaults to ``epsilon_marker``;
            ``None`` disables it.
        use_fast_path: Simulate a single path when the automaton is
            deterministic instead of running the general search.
        accept_token: Line printed by the CLI for accepted chains.
        reject_token: Line printed by the CLI for rejected chains.
    """

    epsilon_marker: str = DEFAULT_EPSILON_MARKER
    empty_chain_marker: Optional[str] = FOLLOW_EPSILON_MARKER
    use_fast_path: bool = True
    accept_token: str = "aceita"
    reject_token: str = "rejeita"

    def __post_init__(self) -> None:
        if not isinstance(self.epsilon_marker, str) or len(self.epsilon_marker) != 1:
            raise ValueError("epsilon_marker must be a single character")
        if self.empty_chain_marker is FOLLOW_EPSILON_MARKER:
            self.empty_chain_marker = self.epsilon_marker
        if self.empty_chain_marker is not None and (
            not isinstance(self.empty_chain_marker, str)
            or len(self.empty_chain_marker) != 1
        ):
            raise ValueError("empty_chain_marker must be a single character or None")

    @classmethod
    def default(cls) -> "Config":
        """Return the default configuration."""
        return cls()
