import copy
from typing import Any


def is_object(value: Any) -> bool:
    """True for mapping nodes of the document tree."""
    return isinstance(value, dict)


def is_array(value: Any) -> bool:
    return isinstance(value, list)


def is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def deep_clone(value: Any) -> Any:
    """Returns an independent copy of a JSON-like value."""
    return copy.deepcopy(value)


def count_nested_key(value: Any, key: str) -> int:
    """Counts how many mappings anywhere inside ``value`` carry ``key``."""
    count = 0

    if is_object(value):
        if key in value:
            count += 1
        for item in value.values():
            count += count_nested_key(item, key)
    elif is_array(value):
        for item in value:
            count += count_nested_key(item, key)

    return count
