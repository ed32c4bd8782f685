"""NetworkX export of classified fault trees.

Example:
    >>> from faulttree.dsl.loader import load_fault_tree
    >>> from faulttree.lib.nx import to_networkx
    >>>
    >>> tree = load_fault_tree(yaml_text)
    >>> G = to_networkx(tree)
    >>> sorted(G.successors(tree.top_event_id))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from faulttree.model.fault_tree import FaultTree


def to_networkx(tree: "FaultTree") -> nx.DiGraph:
    """Convert a classified fault tree to a directed graph.

    Nodes are gate and primary event identifiers with attributes ``kind``
    (``"gate"`` or the primary event kind value), ``orig_id`` and ``top``.
    Edges run from each gate to its children.

    Args:
        tree: Fault tree after ``gather_primary_events``.

    Returns:
        A new ``networkx.DiGraph``; the graph carries ``name`` as graph data.

    Raises:
        RuntimeError: If the tree has not been classified yet.
    """
    if not tree.locked:
        raise RuntimeError(
            f"Fault tree '{tree.name}' must be classified before export"
        )

    graph = nx.DiGraph(name=tree.name)
    for gid, gate in tree.gates.items():
        graph.add_node(
            gid, kind="gate", orig_id=gate.orig_id, top=gid == tree.top_event_id
        )
    for pid, event in tree.primary_events.items():
        graph.add_node(pid, kind=event.kind.value, orig_id=event.orig_id, top=False)
    for gid, gate in tree.gates.items():
        for child_id in gate.children:
            graph.add_edge(gid, child_id)
    return graph
