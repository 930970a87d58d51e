"""
relang - Membership queries for regular languages given as finite automata.

Automata may be nondeterministic, have several initial and accepting states,
and use empty transitions (labeled with ``-``), including cycles of them.

Example usage:
    >>> from relang import build_automaton, accepts
    >>> automaton = build_automaton(
    ...     states=[0, 1, 2],
    ...     alphabet=["a", "b"],
    ...     initial_states=[1],
    ...     accepted_states=[2],
    ...     transitions=[(0, "a", 1), (0, "b", 1), (1, "a", 1),
    ...                  (1, "b", 2), (2, "a", 0), (2, "b", 2)],
    ... )
    >>> accepts(automaton, "ab")
    True

For repeated queries against the same automaton:
    >>> from relang import Recognizer
    >>> recognizer = Recognizer(automaton)
    >>> [recognizer.accepts(chain) for chain in ("b", "ba", "bb")]
    [True, False, True]
"""

__version__ = "0.1.0"

from relang.config import Config
from relang.automaton import (
    Automaton,
    AutomatonBuilder,
    State,
    Transition,
    build_automaton,
)
from relang.recognizer import Recognizer, accepts, find_path
from relang.definition import load_definition, load_definition_file
from relang.exceptions import (
    RelangError,
    InvalidTransition,
    InvalidAutomatonError,
    DefinitionError,
)

__all__ = [
    # Main API
    "build_automaton",
    "accepts",
    "find_path",
    "AutomatonBuilder",
    "Recognizer",
    # Model
    "Automaton",
    "State",
    "Transition",
    # Configuration
    "Config",
    "load_definition",
    "load_definition_file",
    # Exceptions
    "RelangError",
    "InvalidTransition",
    "InvalidAutomatonError",
    "DefinitionError",
    # Version
    "__version__",
]
