"""Tests for membership queries.

Every scenario runs against both strategies: the general search and, where
the automaton qualifies, the single-path simulation.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from relang import Config, Recognizer, accepts, build_automaton, find_path
from relang.recognizer import search, search_path, simulate


GENERAL = Config(use_fast_path=False)
STRATEGIES = [
    pytest.param(Config(), id="auto"),
    pytest.param(GENERAL, id="general"),
]


# =============================================================================
# EXAMPLE AUTOMATON
# =============================================================================


class TestExampleAutomaton:
    """Start in 1, accept in 2, over {a, b}."""

    CHAINS = [
        ("ab", True),
        ("b", True),
        ("a", False),
        ("ba", False),
        ("bb", True),
        ("-", False),
        ("", False),
        ("abab", False),
        ("baab", True),
        ("aaaab", True),
        ("babb", True),
    ]

    @pytest.mark.parametrize("config", STRATEGIES)
    @pytest.mark.parametrize("chain,expected", CHAINS)
    def test_chain(self, example_automaton, config, chain, expected):
        assert accepts(example_automaton, chain, config) is expected

    def test_picks_fast_path(self, example_automaton):
        assert Recognizer(example_automaton).fast_path is True
        assert Recognizer(example_automaton, GENERAL).fast_path is False

    @pytest.mark.parametrize("config", STRATEGIES)
    def test_accepts_character_sequence(self, example_automaton, config):
        assert accepts(example_automaton, ["a", "b"], config) is True
        assert accepts(example_automaton, ("b", "a"), config) is False


# =============================================================================
# EMPTY-CHAIN MARKER
# =============================================================================


class TestEmptyChainMarker:
    """A query containing the marker anywhere is the empty query."""

    @pytest.fixture
    def accepts_empty(self):
        return build_automaton(
            states=[0, 1],
            alphabet=["a"],
            initial_states=[0],
            accepted_states=[0],
            transitions=[(0, "a", 1)],
        )

    MARKED = ["-", "a-", "-a", "aa-aa", "zz-", "--"]

    @pytest.mark.parametrize("chain", MARKED)
    def test_marker_overrides_chain(self, accepts_empty, chain):
        assert accepts(accepts_empty, chain) is True
        assert find_path(accepts_empty, chain) == []

    def test_without_marker(self, accepts_empty):
        assert accepts(accepts_empty, "a") is False
        assert accepts(accepts_empty, "") is True

    def test_marker_disabled(self, accepts_empty):
        config = Config(empty_chain_marker=None)
        assert accepts(accepts_empty, "-", config) is False
        assert accepts(accepts_empty, "", config) is True


# =============================================================================
# ALPHABET CLOSURE
# =============================================================================


class TestAlphabetClosure:
    """Symbols outside the alphabet reject without searching."""

    @pytest.mark.parametrize("chain", ["c", "abc", "b ", "\n", "B"])
    def test_rejects_foreign_symbols(self, example_automaton, chain):
        assert accepts(example_automaton, chain) is False
        assert accepts(example_automaton, chain, GENERAL) is False

    NON_STRING = [
        [["a"]],
        [{"b"}],
        ["b", None],
        [1, 2],
    ]

    @pytest.mark.parametrize("chain", NON_STRING)
    def test_rejects_non_string_elements(self, example_automaton, chain):
        assert accepts(example_automaton, chain) is False
        assert accepts(example_automaton, chain, GENERAL) is False
        assert find_path(example_automaton, chain) is None

    def test_no_search_performed(self, example_automaton, monkeypatch):
        def fail(*args):
            raise AssertionError("search must not run")

        monkeypatch.setattr("relang.recognizer.recognizer.search_path", fail)
        monkeypatch.setattr("relang.recognizer.recognizer.simulate_path", fail)
        assert accepts(example_automaton, "bx", GENERAL) is False
        assert accepts(example_automaton, "bx") is False


# =============================================================================
# NONDETERMINISM AND EMPTY TRANSITIONS
# =============================================================================


class TestNondeterminism:
    """Any accepting run is enough."""

    CHAINS = [
        ("aba", True),
        ("ababa", True),
        ("bbaba", True),
        ("aab", False),
        ("abab", False),
        ("ab", False),
        ("", False),
    ]

    @pytest.mark.parametrize("chain,expected", CHAINS)
    def test_ends_with_aba(self, ends_with_aba, chain, expected):
        assert accepts(ends_with_aba, chain) is expected

    def test_not_deterministic(self, ends_with_aba):
        assert ends_with_aba.is_deterministic is False
        assert Recognizer(ends_with_aba).fast_path is False

    def test_single_path_refuses_nondeterministic(self, ends_with_aba):
        with pytest.raises(ValueError):
            simulate(ends_with_aba, "aba")

    def test_any_initial_state(self):
        automaton = build_automaton(
            states=[0, 1, 2, 3],
            alphabet=["x", "y"],
            initial_states=[0, 2],
            accepted_states=[1, 3],
            transitions=[(0, "x", 1), (2, "y", 3)],
        )
        assert accepts(automaton, "x") is True
        assert accepts(automaton, "y") is True
        assert accepts(automaton, "xy") is False

    def test_no_initial_states(self):
        automaton = build_automaton([0], ["a"], [], [0], [(0, "a", 0)])
        assert accepts(automaton, "") is False
        assert accepts(automaton, "a") is False


class TestEpsilonTransitions:
    """Empty transitions never consume input and may form cycles."""

    CHAINS = [
        ("a", True),
        ("", False),
        ("aa", False),
        ("-", False),
    ]

    @pytest.mark.parametrize("chain,expected", CHAINS)
    def test_cycle_terminates(self, epsilon_cycle_automaton, chain, expected):
        assert accepts(epsilon_cycle_automaton, chain) is expected

    def test_self_loop(self):
        automaton = build_automaton(
            states=[0, 1],
            alphabet=["a"],
            initial_states=[0],
            accepted_states=[1],
            transitions=[(0, "-", 0), (0, "-", 0), (1, "-", 1)],
        )
        assert accepts(automaton, "") is False
        assert accepts(automaton, "a") is False

    def test_epsilon_after_last_symbol(self):
        automaton = build_automaton(
            states=[0, 1, 2],
            alphabet=["a"],
            initial_states=[0],
            accepted_states=[2],
            transitions=[(0, "a", 1), (1, "-", 2), (2, "-", 1)],
        )
        assert accepts(automaton, "a") is True
        assert accepts(automaton, "") is False

    def test_epsilon_between_symbols(self):
        automaton = build_automaton(
            states=[0, 1, 2, 3],
            alphabet=["a", "b"],
            initial_states=[0],
            accepted_states=[3],
            transitions=[(0, "a", 1), (1, "-", 2), (2, "-", 1), (2, "b", 3)],
        )
        assert accepts(automaton, "ab") is True
        assert accepts(automaton, "a") is False
        assert accepts(automaton, "abb") is False

    EMPTY_CASES = [
        ([(0, "-", 1), (1, "-", 2)], [2], True),
        ([(0, "-", 1), (1, "-", 0)], [2], False),
        ([(0, "a", 2), (1, "-", 2)], [2], False),
        ([], [0], True),
    ]

    @pytest.mark.parametrize("transitions,accepted,expected", EMPTY_CASES)
    def test_empty_chain_matches_closure(self, transitions, accepted, expected):
        automaton = build_automaton([0, 1, 2], ["a"], [0], accepted, transitions)
        assert automaton.accepts_empty() is expected
        assert accepts(automaton, "") is expected


# =============================================================================
# QUERY PROPERTIES
# =============================================================================


class TestQueryProperties:
    def test_concurrent_queries_share_recognizer(self, ends_with_aba):
        recognizer = Recognizer(ends_with_aba)
        chains = ["aba", "ab", "", "bbaba", "abab", "ba" * 500 + "aba", "ab" * 500] * 25
        expected = [recognizer.accepts(chain) for chain in chains]
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(recognizer.accepts, chains))
        assert results == expected
        assert results[:5] == [True, False, False, True, False]

    def test_repeated_queries_agree(self, ends_with_aba):
        recognizer = Recognizer(ends_with_aba)
        chains = ["aba", "ab", "", "bbaba", "aba", "ab", "abab", "aba"]
        first = [recognizer.accepts(chain) for chain in chains]
        second = [recognizer(chain) for chain in reversed(chains)]
        assert first == list(reversed(second))

    def test_long_chain_with_epsilon_loops(self):
        automaton = build_automaton(
            states=[0, 1],
            alphabet=["a"],
            initial_states=[0],
            accepted_states=[1],
            transitions=[(0, "a", 0), (0, "-", 1), (1, "-", 0)],
        )
        chain = "a" * 20000
        assert search(automaton, chain) is True
        assert accepts(automaton, chain) is True

    def test_long_rejected_chain(self, ends_with_aba):
        chain = "ab" * 10000
        assert accepts(ends_with_aba, chain) is False
        assert accepts(ends_with_aba, chain + "a") is True

    def test_exponential_ambiguity_stays_fast(self):
        # Two parallel a-edges per step give 2**n runs; memoization keeps it linear
        automaton = build_automaton(
            states=[0, 1, 2],
            alphabet=["a", "b"],
            initial_states=[0],
            accepted_states=[2],
            transitions=[(0, "a", 0), (0, "a", 1), (1, "a", 0), (1, "a", 1), (0, "b", 2)],
        )
        assert accepts(automaton, "a" * 5000) is False
        assert accepts(automaton, "a" * 5000 + "b") is True


# =============================================================================
# ACCEPTING RUNS
# =============================================================================


class TestFindPath:
    @pytest.mark.parametrize("config", STRATEGIES)
    def test_example_path(self, example_automaton, config):
        path = find_path(example_automaton, "ab", config)
        assert example_automaton.describe(path) == [(1, "a", 1), (1, "b", 2)]

    def test_path_includes_epsilon(self, epsilon_cycle_automaton):
        path = find_path(epsilon_cycle_automaton, "a")
        assert epsilon_cycle_automaton.describe(path) == [(0, "-", 1), (1, "a", 2)]
        assert path[0].is_epsilon()

    def test_rejected_has_no_path(self, example_automaton):
        assert find_path(example_automaton, "ba") is None
        assert find_path(example_automaton, "bc") is None

    def test_path_consumes_chain(self, ends_with_aba):
        path = search_path(ends_with_aba, "bbaba")
        symbols = "".join(edge.symbol for edge in path if not edge.is_epsilon())
        assert symbols == "bbaba"
        assert path[-1].target.accepting
        for previous, following in zip(path, path[1:]):
            assert previous.target == following.source

    def test_empty_path_for_accepting_initial(self):
        automaton = build_automaton([0], ["a"], [0], [0], [])
        assert find_path(automaton, "") == []
