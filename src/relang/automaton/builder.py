"""Builder and validator for automata."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Sequence, Set, Tuple

from relang.automaton.automaton import Automaton
from relang.automaton.graph import TransitionGraph
from relang.config import Config
from relang.exceptions import InvalidAutomatonError, InvalidTransition

logger = logging.getLogger(__name__)

TransitionTriple = Tuple[Hashable, str, Hashable]


@dataclass
class AutomatonBuilder:
    """Declarative description of an automaton.

    Example:
        >>> automaton = AutomatonBuilder(
        ...     states=[0, 1],
        ...     alphabet=["a"],
        ...     initial_states=[0],
        ...     accepted_states=[1],
        ...     transitions=[(0, "a", 1)],
        ... ).build()
    """

    states: Sequence[Hashable] = field(default_factory=list)
    alphabet: Sequence[str] = field(default_factory=list)
    initial_states: Sequence[Hashable] = field(default_factory=list)
    accepted_states: Sequence[Hashable] = field(default_factory=list)
    transitions: Sequence[TransitionTriple] = field(default_factory=list)

    def build(self, config: Optional[Config] = None) -> Automaton:
        """Validate the description and build the automaton.

        Raises:
            InvalidAutomatonError: If states, alphabet or state subsets are malformed.
            InvalidTransition: For the first transition that fails validation.
        """
        return build_automaton(
            self.states,
            self.alphabet,
            self.initial_states,
            self.accepted_states,
            self.transitions,
            config=config,
        )


def build_automaton(
    states: Sequence[Hashable],
    alphabet: Sequence[str],
    initial_states: Sequence[Hashable],
    accepted_states: Sequence[Hashable],
    transitions: Sequence[TransitionTriple],
    config: Optional[Config] = None,
) -> Automaton:
    """Build a validated automaton.

    States are registered first, in the given order, each becoming a graph
    node that carries its accepting flag. Transitions are then registered in
    the given order. Validation stops at the first invalid transition; later
    transitions are neither checked nor added.

    Args:
        states: Unique state identifiers.
        alphabet: Unique single-character symbols, excluding the epsilon marker.
        initial_states: Subset of ``states`` where runs start.
        accepted_states: Subset of ``states`` where runs may end.
        transitions: (source, symbol, target) triples; the symbol may be the
            epsilon marker for an empty transition.
        config: Optional configuration (provides the epsilon marker).

    Returns:
        The immutable automaton.

    Raises:
        InvalidAutomatonError: If states, alphabet or state subsets are malformed.
        InvalidTransition: For the first transition that fails validation.
    """
    config = config or Config.default()
    marker = config.epsilon_marker

    state_list = list(states)
    initial_states = list(initial_states)
    symbols = _validate_alphabet(alphabet, marker, config.empty_chain_marker)
    declared = _validate_states(state_list)
    initial = _validate_subset(initial_states, declared, "initial")
    accepted = _validate_subset(accepted_states, declared, "accepted")

    graph = TransitionGraph()
    index: Dict[Hashable, int] = {}
    initial_indices: List[int] = []
    accepting_indices: List[int] = []

    for label in state_list:
        is_accepting = label in accepted
        node = graph.add_node(label, accepting=is_accepting)
        index[label] = node.index
        if is_accepting:
            accepting_indices.append(node.index)

    # Initial order follows the caller's list so searches start predictably
    for label in _unique(initial_states):
        initial_indices.append(index[label])

    symbol_set = frozenset(symbols)
    for position, transition in enumerate(transitions):
        source, symbol, target = _unpack(transition, position)

        if not _is_hashable(source) or source not in index:
            raise _invalid(transition, position, "unknown source state")
        if not _is_hashable(target) or target not in index:
            raise _invalid(transition, position, "unknown target state")

        if symbol == marker:
            edge_symbol = None
        elif _is_hashable(symbol) and symbol in symbol_set:
            edge_symbol = symbol
        else:
            raise _invalid(transition, position, "symbol not in alphabet")

        graph.add_edge(index[source], edge_symbol, index[target])

    logger.debug(
        "Built automaton with %d states, %d transitions, %d initial, %d accepting",
        graph.node_count(),
        graph.edge_count(),
        len(initial_indices),
        len(accepting_indices),
    )

    return Automaton(
        graph=graph.freeze(),
        alphabet=tuple(symbols),
        initial_indices=tuple(initial_indices),
        accepting_indices=tuple(accepting_indices),
        epsilon_marker=marker,
    )


def _invalid(transition: Any, position: int, reason: str) -> InvalidTransition:
    logger.debug("Rejecting transition %d %r: %s", position, transition, reason)
    return InvalidTransition(transition, position=position, reason=reason)


def _unpack(transition: Any, position: int) -> TransitionTriple:
    try:
        source, symbol, target = transition
    except (TypeError, ValueError):
        raise _invalid(transition, position, "malformed transition") from None
    return source, symbol, target


def _is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def _unique(items: Sequence[Hashable]) -> List[Hashable]:
    seen: Set[Hashable] = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def _validate_alphabet(
    alphabet: Sequence[str], marker: str, empty_chain_marker: Optional[str]
) -> List[str]:
    symbols = list(alphabet)
    for symbol in symbols:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise InvalidAutomatonError(
                f"alphabet symbols must be single characters, got {symbol!r}"
            )
        if symbol == marker:
            raise InvalidAutomatonError(
                f"alphabet must not contain the epsilon marker {marker!r}"
            )
        if symbol == empty_chain_marker:
            raise InvalidAutomatonError(
                f"alphabet must not contain the empty-chain marker {empty_chain_marker!r}"
            )
    if len(set(symbols)) != len(symbols):
        raise InvalidAutomatonError("alphabet symbols must be unique")
    return symbols


def _validate_states(states: List[Hashable]) -> Set[Hashable]:
    for label in states:
        if not _is_hashable(label):
            raise InvalidAutomatonError(f"state identifiers must be hashable, got {label!r}")
    declared = set(states)
    if len(declared) != len(states):
        raise InvalidAutomatonError("state identifiers must be unique")
    return declared


def _validate_subset(
    subset: Sequence[Hashable], declared: Set[Hashable], kind: str
) -> Set[Hashable]:
    result = set()
    for label in subset:
        if not _is_hashable(label) or label not in declared:
            raise InvalidAutomatonError(f"{kind} state {label!r} is not a declared state")
        result.add(label)
    return result
