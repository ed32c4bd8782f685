"""Model definition language for fault trees (YAML loader and schema)."""

from faulttree.dsl.loader import (
    build_fault_tree,
    load_fault_tree,
    load_fault_tree_file,
    load_model_yaml,
)

__all__ = [
    "build_fault_tree",
    "load_fault_tree",
    "load_fault_tree_file",
    "load_model_yaml",
]
