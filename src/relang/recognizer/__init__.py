"""Membership queries over built automata."""

from relang.recognizer.search import search, search_path
from relang.recognizer.deterministic import simulate, simulate_path
from relang.recognizer.recognizer import Recognizer, accepts, find_path

__all__ = [
    "search",
    "search_path",
    "simulate",
    "simulate_path",
    "Recognizer",
    "accepts",
    "find_path",
]
