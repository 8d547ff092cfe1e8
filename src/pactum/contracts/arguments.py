"""Per-call argument map construction."""

from typing import Any, Dict, Sequence, Tuple, Union


class _Missing:
    """Marker for a parameter that was not supplied to a call."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()

ArgumentMap = Dict[Union[int, str], Any]


def build_argument_map(names: Sequence[str], args: Tuple[Any, ...],
                       kwargs: Dict[str, Any]) -> ArgumentMap:
    """Map call arguments by zero-based position and by parameter name.

    Positional arguments are keyed by index, and also by ``names[i]`` when a
    name is declared at that index. Keyword arguments are keyed by name, and
    also by their declared index when the name is in ``names``.

    Parameters not supplied are simply absent; look them up with
    ``arg_map.get(name, MISSING)``.

    Examples
    --------
    >>> build_argument_map(("a", "b"), (1,), {"b": 2})
    {0: 1, 'a': 1, 'b': 2, 1: 2}
    """
    arg_map: ArgumentMap = {}
    for index, value in enumerate(args):
        arg_map[index] = value
        if index < len(names):
            arg_map[names[index]] = value

    if kwargs:
        positions = {name: index for index, name in enumerate(names)}
        for name, value in kwargs.items():
            arg_map[name] = value
            if name in positions:
                arg_map[positions[name]] = value

    return arg_map
