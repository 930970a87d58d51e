"""Load automaton definitions from JSON documents."""

import json
from typing import Any, Dict, List, Mapping, Optional, Tuple

from relang.automaton.builder import AutomatonBuilder
from relang.exceptions import DefinitionError


# Strings that start in state 1, are over {a, b}, and end in state 2
EXAMPLE_DEFINITION: Dict[str, Any] = {
    "states": [0, 1, 2],
    "alphabet": ["a", "b"],
    "initial_states": [1],
    "accepted_states": [2],
    "transitions": [
        [0, "a", 1],
        [0, "b", 1],
        [1, "a", 1],
        [1, "b", 2],
        [2, "a", 0],
        [2, "b", 2],
    ],
}

_LIST_KEYS = ("states", "initial_states", "accepted_states")


def load_definition(data: Mapping[str, Any], source: Optional[str] = None) -> AutomatonBuilder:
    """Turn a definition mapping into a builder.

    The mapping needs ``states``, ``alphabet`` (or ``symbols``),
    ``initial_states``, ``accepted_states`` and ``transitions``. The alphabet
    may be a list of characters or a single string. Transitions are
    three-element lists. Only the shape is checked here; the builder checks
    the content.

    Raises:
        DefinitionError: If the mapping has missing keys or wrong shapes.
    """
    if not isinstance(data, Mapping):
        raise DefinitionError("definition must be an object", source)

    fields: Dict[str, List[Any]] = {}
    for key in _LIST_KEYS:
        fields[key] = _require_list(data, key, source)

    if "alphabet" in data:
        alphabet = data["alphabet"]
    elif "symbols" in data:
        alphabet = data["symbols"]
    else:
        raise DefinitionError("missing key 'alphabet'", source)
    if isinstance(alphabet, str):
        alphabet = list(alphabet)
    elif not isinstance(alphabet, list):
        raise DefinitionError("'alphabet' must be a list or a string", source)

    transitions: List[Tuple[Any, Any, Any]] = []
    for position, item in enumerate(_require_list(data, "transitions", source)):
        if not isinstance(item, (list, tuple)) or len(item) != 3:
            raise DefinitionError(
                f"transition {position} must have exactly three elements, got {item!r}",
                source,
            )
        transitions.append(tuple(item))

    return AutomatonBuilder(
        states=fields["states"],
        alphabet=alphabet,
        initial_states=fields["initial_states"],
        accepted_states=fields["accepted_states"],
        transitions=transitions,
    )


def load_definition_file(path: str) -> AutomatonBuilder:
    """Read a JSON definition file.

    Raises:
        DefinitionError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise DefinitionError(f"cannot read definition: {e.strerror}", path) from e
    except ValueError as e:
        raise DefinitionError(f"invalid JSON: {e}", path) from e
    return load_definition(data, source=path)


def example_builder() -> AutomatonBuilder:
    return load_definition(EXAMPLE_DEFINITION)


def _require_list(data: Mapping[str, Any], key: str, source: Optional[str]) -> List[Any]:
    if key not in data:
        raise DefinitionError(f"missing key {key!r}", source)
    value = data[key]
    if not isinstance(value, list):
        raise DefinitionError(f"{key!r} must be a list", source)
    return value
