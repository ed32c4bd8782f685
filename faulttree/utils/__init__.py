"""Utility helpers used across faulttree.

Small, self-contained helpers that do not depend on project internals.
"""

from faulttree.utils.yaml_utils import normalize_yaml_dict_keys

__all__ = ["normalize_yaml_dict_keys"]
