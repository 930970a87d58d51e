"""Immutable finite automaton with empty transitions."""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Hashable, Iterable, List, Sequence, Set, Tuple

from relang.automaton.graph import State, Transition, TransitionGraph
from relang.config import DEFAULT_EPSILON_MARKER


@dataclass(frozen=True)
class Automaton:
    """A validated automaton, created by the builder and never mutated.

    Attributes:
        graph: Frozen transition graph holding states and transitions.
        alphabet: Declared symbols, in declaration order.
        initial_indices: Graph indices of the initial states.
        accepting_indices: Graph indices of the accepting states.
        epsilon_marker: Label used for empty transitions at the boundary.
    """

    graph: TransitionGraph
    alphabet: Tuple[str, ...]
    initial_indices: Tuple[int, ...]
    accepting_indices: Tuple[int, ...]
    epsilon_marker: str = DEFAULT_EPSILON_MARKER
    _symbols: FrozenSet[str] = field(init=False, repr=False, compare=False)
    _labels: Dict[Hashable, int] = field(init=False, repr=False, compare=False)
    _deterministic: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_symbols", frozenset(self.alphabet))
        object.__setattr__(
            self, "_labels", {state.label: state.index for state in self.graph.nodes}
        )
        object.__setattr__(self, "_deterministic", self._compute_deterministic())

    def _compute_deterministic(self) -> bool:
        if len(self.initial_indices) != 1:
            return False
        for state in self.graph.nodes:
            for symbol in self.graph.symbols_from(state.index):
                edges = self.graph.outgoing(state.index, symbol)
                if symbol is None and edges:
                    return False
                if len(edges) > 1:
                    return False
        return True

    @property
    def is_deterministic(self) -> bool:
        """True with one initial state, no empty transitions and at most one
        transition per (state, symbol)."""
        return self._deterministic

    @property
    def states(self) -> Tuple[Hashable, ...]:
        return tuple(state.label for state in self.graph.nodes)

    @property
    def initial_states(self) -> Tuple[Hashable, ...]:
        return tuple(self.graph.node(i).label for i in self.initial_indices)

    @property
    def accepting_states(self) -> Tuple[Hashable, ...]:
        return tuple(self.graph.node(i).label for i in self.accepting_indices)

    @property
    def transitions(self) -> List[Tuple[Hashable, str, Hashable]]:
        """Transitions as (source, symbol, target) triples, in registration order."""
        return [edge.as_triple(self.epsilon_marker) for edge in self.graph.edges]

    @property
    def state_count(self) -> int:
        return self.graph.node_count()

    @property
    def transition_count(self) -> int:
        return self.graph.edge_count()

    def index_of(self, label: Hashable) -> int:
        """Return the graph index of the state with the given label.

        Raises:
            KeyError: If no state carries ``label``.
        """
        return self._labels[label]

    def state(self, index: int) -> State:
        return self.graph.node(index)

    def has_symbol(self, symbol: str) -> bool:
        return symbol in self._symbols

    def covers(self, chain: Iterable[str]) -> bool:
        """Check that every symbol of ``chain`` belongs to the alphabet.

        Elements that are not strings never belong to it.
        """
        return all(isinstance(symbol, str) and symbol in self._symbols for symbol in chain)

    def outgoing(self, index: int, symbol: str) -> Tuple[Transition, ...]:
        return self.graph.outgoing(index, symbol)

    def epsilon_edges(self, index: int) -> Tuple[Transition, ...]:
        return self.graph.outgoing(index, None)

    def epsilon_closure(self, indices: Iterable[int]) -> Set[int]:
        """Compute the states reachable through zero or more empty transitions."""
        stack = list(indices)
        closure = set(stack)
        while stack:
            current = stack.pop()
            for edge in self.graph.outgoing(current, None):
                target = edge.target.index
                if target not in closure:
                    closure.add(target)
                    stack.append(target)
        return closure

    def accepts_empty(self) -> bool:
        """Check whether the empty chain is accepted."""
        closure = self.epsilon_closure(self.initial_indices)
        return any(self.graph.node(i).accepting for i in closure)

    def describe(self, path: Sequence[Transition]) -> List[Tuple[Hashable, str, Hashable]]:
        """Render a run as user-facing triples."""
        return [edge.as_triple(self.epsilon_marker) for edge in path]

    def __repr__(self) -> str:
        return (
            f"Automaton(states={self.state_count}, "
            f"transitions={self.transition_count}, "
            f"alphabet={''.join(self.alphabet)!r})"
        )
