"""Integrations of fault trees with third-party graph libraries."""

from faulttree.lib.nx import to_networkx

__all__ = ["to_networkx"]
