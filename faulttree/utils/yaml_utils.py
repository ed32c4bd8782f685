"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Return a copy of ``data`` with every key converted to a string.

    YAML 1.1 reads keys such as ``yes``, ``no``, ``on`` and ``off`` as booleans
    and bare numbers as ints. Event attribute mappings are keyed by name, so
    keys become ``"True"``/``"False"`` or their ``str()`` form.

    Examples:
        >>> normalize_yaml_dict_keys({True: 1, 2: "b", "rate": 0.1})
        {'True': 1, '2': 'b', 'rate': 0.1}
    """
    return {str(key): value for key, value in data.items()}
