"""Automaton construction and validation."""

from relang.automaton.graph import State, Transition, TransitionGraph
from relang.automaton.automaton import Automaton
from relang.automaton.builder import AutomatonBuilder, build_automaton

__all__ = [
    "State",
    "Transition",
    "TransitionGraph",
    "Automaton",
    "AutomatonBuilder",
    "build_automaton",
]
