"""General membership search over automata with empty transitions.

The search explores the run tree depth-first, one (state, position) pair at
a time, using an explicit work stack instead of call-stack recursion. Every
pair is entered at most once per query: a pair that was already entered has
either been fully explored without reaching acceptance, or is still pending
on the stack, so entering it again can never produce a new answer. This is
what makes cycles of empty transitions terminate, and it bounds the work to
O((len(chain) + 1) * (states + transitions)).
"""

from typing import Dict, List, Optional, Sequence, Set, Tuple

from relang.automaton.automaton import Automaton
from relang.automaton.graph import Transition

# (state index, chain position)
SearchNode = Tuple[int, int]


def search_path(automaton: Automaton, chain: Sequence[str]) -> Optional[List[Transition]]:
    """Find one accepting run of ``chain``.

    The chain must already be preprocessed (sentinel handling and alphabet
    check are the recognizer's job).

    Returns:
        The transitions of the first accepting run found, empty transitions
        included, or None if no run accepts.
    """
    length = len(chain)
    # visited[pos] holds the states already entered with ``pos`` symbols consumed
    visited: List[Set[int]] = [set() for _ in range(length + 1)]
    parents: Dict[SearchNode, Tuple[SearchNode, Transition]] = {}

    for initial in automaton.initial_indices:
        if initial in visited[0]:
            continue
        visited[0].add(initial)
        stack: List[SearchNode] = [(initial, 0)]

        while stack:
            node = stack.pop()
            index, pos = node

            if pos == length and automaton.state(index).accepting:
                return _unwind(parents, node)

            successors: List[Tuple[Transition, SearchNode]] = []
            if pos < length:
                for edge in automaton.outgoing(index, chain[pos]):
                    successors.append((edge, (edge.target.index, pos + 1)))
            for edge in automaton.epsilon_edges(index):
                successors.append((edge, (edge.target.index, pos)))

            # Reversed so the first matching edge is explored first
            for edge, successor in reversed(successors):
                target, next_pos = successor
                if target in visited[next_pos]:
                    continue
                visited[next_pos].add(target)
                parents[successor] = (node, edge)
                stack.append(successor)

    return None


def search(automaton: Automaton, chain: Sequence[str]) -> bool:
    """Check whether some run of ``chain`` ends in an accepting state."""
    return search_path(automaton, chain) is not None


def _unwind(
    parents: Dict[SearchNode, Tuple[SearchNode, Transition]], node: SearchNode
) -> List[Transition]:
    path: List[Transition] = []
    while node in parents:
        node, edge = parents[node]
        path.append(edge)
    path.reverse()
    return path
