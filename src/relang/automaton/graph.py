"""Index-based multigraph backing an automaton."""

from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional, Tuple


@dataclass(frozen=True)
class State:
    """A node of the transition graph.

    Attributes:
        index: Position of the node in the graph arena; the node's identity.
        label: Identifier supplied by the caller.
        accepting: Whether a run ending here with no input left is accepted.
    """

    index: int
    label: Hashable
    accepting: bool = False

    def __repr__(self) -> str:
        mark = "*" if self.accepting else ""
        return f"State({self.label!r}{mark}@{self.index})"


@dataclass(frozen=True)
class Transition:
    """A directed, possibly unlabeled, edge between two states.

    ``symbol`` is ``None`` for an empty (epsilon) transition.
    """

    index: int
    source: State
    symbol: Optional[str]
    target: State

    def is_epsilon(self) -> bool:
        return self.symbol is None

    def as_triple(self, epsilon_marker: str) -> Tuple[Hashable, str, Hashable]:
        """Return the transition in the caller's (source, symbol, target) form."""
        symbol = epsilon_marker if self.symbol is None else self.symbol
        return (self.source.label, symbol, self.target.label)

    def __repr__(self) -> str:
        symbol = "ε" if self.symbol is None else self.symbol
        return f"{self.source.label!r} -{symbol}-> {self.target.label!r}"


class TransitionGraph:
    """Arena of states plus per-node outgoing edge lists.

    Nodes and edges are addressed by small integer handles. Outgoing edges
    are grouped by symbol (``None`` for epsilon) and kept in insertion order.
    Once frozen, the graph rejects further additions and hands out edge
    groups as tuples.
    """

    def __init__(self) -> None:
        self._nodes: List[State] = []
        self._edges: List[Transition] = []
        self._outgoing: List[Dict[Optional[str], List[Transition]]] = []
        self._frozen_outgoing: List[Dict[Optional[str], Tuple[Transition, ...]]] = []
        self._frozen = False

    def add_node(self, label: Hashable, accepting: bool = False) -> State:
        self._check_mutable()
        state = State(index=len(self._nodes), label=label, accepting=accepting)
        self._nodes.append(state)
        self._outgoing.append({})
        return state

    def add_edge(self, source: int, symbol: Optional[str], target: int) -> Transition:
        self._check_mutable()
        transition = Transition(
            index=len(self._edges),
            source=self._nodes[source],
            symbol=symbol,
            target=self._nodes[target],
        )
        self._edges.append(transition)
        self._outgoing[source].setdefault(symbol, []).append(transition)
        return transition

    def freeze(self) -> "TransitionGraph":
        if not self._frozen:
            self._frozen_outgoing = [
                {symbol: tuple(edges) for symbol, edges in by_symbol.items()}
                for by_symbol in self._outgoing
            ]
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("transition graph is frozen")

    def node(self, index: int) -> State:
        return self._nodes[index]

    @property
    def nodes(self) -> Tuple[State, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> Tuple[Transition, ...]:
        return tuple(self._edges)

    def outgoing(self, index: int, symbol: Optional[str]) -> Tuple[Transition, ...]:
        """Get edges leaving ``index`` labeled with ``symbol`` (``None`` = epsilon)."""
        if self._frozen:
            return self._frozen_outgoing[index].get(symbol, ())
        return tuple(self._outgoing[index].get(symbol, ()))

    def all_outgoing(self, index: int) -> List[Transition]:
        """Get every edge leaving ``index``, ordered by registration."""
        result = []
        for edges in self._outgoing[index].values():
            result.extend(edges)
        result.sort(key=lambda t: t.index)
        return result

    def symbols_from(self, index: int) -> List[Optional[str]]:
        return list(self._outgoing[index].keys())

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)
