from typing import Dict, List, NamedTuple


class Pair(NamedTuple):
    key: str
    value: int


def sort_by_value(mapping: Dict[str, int]) -> List[Pair]:
    """
    Flatten a mapping into pairs ordered by value, largest first.

    Equal values are ordered by key so the output is deterministic.
    """
    return sorted(
        (Pair(key, value) for key, value in mapping.items()),
        key=lambda pair: (-pair.value, pair.key)
    )
