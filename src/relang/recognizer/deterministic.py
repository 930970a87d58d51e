"""Single-path simulation for deterministic automata."""

from typing import List, Optional, Sequence

from relang.automaton.automaton import Automaton
from relang.automaton.graph import Transition


def simulate_path(automaton: Automaton, chain: Sequence[str]) -> Optional[List[Transition]]:
    """Follow the unique run of ``chain`` through a deterministic automaton.

    Only valid when ``automaton.is_deterministic``; on a nondeterministic
    automaton following one path could reject chains another path accepts.

    Returns:
        The transitions taken if the run ends in an accepting state, else None.

    Raises:
        ValueError: If the automaton is not deterministic.
    """
    if not automaton.is_deterministic:
        raise ValueError("single-path simulation requires a deterministic automaton")

    current = automaton.initial_indices[0]
    path: List[Transition] = []
    for symbol in chain:
        edges = automaton.outgoing(current, symbol)
        if not edges:
            return None
        edge = edges[0]
        path.append(edge)
        current = edge.target.index

    if automaton.state(current).accepting:
        return path
    return None


def simulate(automaton: Automaton, chain: Sequence[str]) -> bool:
    """Check membership by simulating the single deterministic run."""
    return simulate_path(automaton, chain) is not None
