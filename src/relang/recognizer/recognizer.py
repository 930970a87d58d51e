"""Membership queries against a built automaton."""

import logging
from typing import List, Optional, Sequence

from relang.automaton.automaton import Automaton
from relang.automaton.graph import Transition
from relang.config import Config
from relang.recognizer.deterministic import simulate_path
from relang.recognizer.search import search_path

logger = logging.getLogger(__name__)


class Recognizer:
    """Answers membership queries for one automaton.

    The strategy is chosen once: the single-path simulation when the
    automaton is deterministic and the fast path is enabled, the general
    search otherwise. Queries hold no state between calls, so one instance
    may serve any number of callers.
    """

    def __init__(self, automaton: Automaton, config: Optional[Config] = None):
        self.automaton = automaton
        self.config = config or Config.default()
        self.fast_path = self.config.use_fast_path and automaton.is_deterministic
        logger.debug(
            "Recognizer for %r uses %s",
            automaton,
            "single-path simulation" if self.fast_path else "general search",
        )

    def prepare(self, chain: Sequence[str]) -> Optional[Sequence[str]]:
        """Normalize a query before searching.

        A chain containing the empty-chain marker anywhere becomes the empty
        chain, whatever else it contains. This is a compatibility quirk of the
        line protocol, not an escaping mechanism.

        Returns:
            The chain to search, or None when a symbol lies outside the
            alphabet and the chain is rejected outright.
        """
        marker = self.config.empty_chain_marker
        if marker is not None and marker in chain:
            return ""
        if not self.automaton.covers(chain):
            return None
        return chain

    def find_path(self, chain: Sequence[str]) -> Optional[List[Transition]]:
        """Return one accepting run of ``chain``, or None if it is rejected."""
        prepared = self.prepare(chain)
        if prepared is None:
            return None
        if self.fast_path:
            return simulate_path(self.automaton, prepared)
        return search_path(self.automaton, prepared)

    def accepts(self, chain: Sequence[str]) -> bool:
        """Check whether ``chain`` belongs to the automaton's language."""
        return self.find_path(chain) is not None

    def __call__(self, chain: Sequence[str]) -> bool:
        return self.accepts(chain)


def accepts(
    automaton: Automaton, chain: Sequence[str], config: Optional[Config] = None
) -> bool:
    """Convenience function to run a single membership query.

    Args:
        automaton: A built automaton.
        chain: The symbols to test, as a string or a sequence of characters.
        config: Optional configuration.

    Returns:
        True if the automaton accepts the chain.
    """
    return Recognizer(automaton, config).accepts(chain)


def find_path(
    automaton: Automaton, chain: Sequence[str], config: Optional[Config] = None
) -> Optional[List[Transition]]:
    """Convenience function returning one accepting run of ``chain``, or None."""
    return Recognizer(automaton, config).find_path(chain)
