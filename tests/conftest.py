"""Shared automata for the test suite."""

import pytest

from relang import build_automaton


@pytest.fixture
def example_automaton():
    """States {0,1,2} over {a,b}, starting in 1, accepting in 2."""
    return build_automaton(
        states=[0, 1, 2],
        alphabet=["a", "b"],
        initial_states=[1],
        accepted_states=[2],
        transitions=[
            (0, "a", 1),
            (0, "b", 1),
            (1, "a", 1),
            (1, "b", 2),
            (2, "a", 0),
            (2, "b", 2),
        ],
    )


@pytest.fixture
def epsilon_cycle_automaton():
    """0 and 1 are joined by an empty-transition cycle; 'a' leads from 1 to 2."""
    return build_automaton(
        states=[0, 1, 2],
        alphabet=["a"],
        initial_states=[0],
        accepted_states=[2],
        transitions=[(0, "-", 1), (1, "-", 0), (1, "a", 2)],
    )


@pytest.fixture
def ends_with_aba():
    """Nondeterministic automaton for strings over {a,b} ending in 'aba'."""
    return build_automaton(
        states=[0, 1, 2, 3],
        alphabet=["a", "b"],
        initial_states=[0],
        accepted_states=[3],
        transitions=[
            (0, "a", 0),
            (0, "b", 0),
            (0, "a", 1),
            (1, "b", 2),
            (2, "a", 3),
        ],
    )
