"""Structural checks on fault trees that classification does not enforce.

Classification only partitions child references. These helpers report gates
nobody references, cyclic gate references, and primary events a loader
defined but the tree never reached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Set

import networkx as nx

if TYPE_CHECKING:
    from faulttree.model.event import PrimaryEvent
    from faulttree.model.fault_tree import FaultTree


def find_orphan_gates(tree: "FaultTree") -> List[str]:
    """Return identifiers of non-top gates that no other gate references.

    A gate referencing only itself is still an orphan.

    Args:
        tree: Fault tree with gates registered.

    Returns:
        Sorted list of orphan gate identifiers.
    """
    referenced: Set[str] = set()
    for gate in tree.gates.values():
        referenced.update(cid for cid in gate.children if cid != gate.id)
    return sorted(gid for gid in tree.inter_events if gid not in referenced)


def validate_gate_hierarchy(tree: "FaultTree") -> None:
    """Detect gates that reference each other in a cycle.

    Only gate-to-gate references are followed; the check runs over registered
    gates and does not require classification.

    Args:
        tree: Fault tree with gates registered.

    Raises:
        ValueError: If a cycle is found, with the cycle path in the message.
    """
    gates = tree.gates
    graph = nx.DiGraph()
    graph.add_nodes_from(gates)
    for gid, gate in gates.items():
        for child_id in gate.children:
            if child_id in gates:
                graph.add_edge(gid, child_id)

    try:
        cycle = nx.find_cycle(graph)
    except nx.NetworkXNoCycle:
        return

    path = [gates[src].orig_id for src, _dst in cycle]
    cycle_str = " -> ".join(path) + f" -> {path[0]}"
    raise ValueError(
        f"Circular reference detected in gates of fault tree '{tree.name}':\n"
        f"  {cycle_str}"
    )


def find_unused_primary_events(
    tree: "FaultTree", defined: Iterable["PrimaryEvent"]
) -> List["PrimaryEvent"]:
    """Return defined primary events that classification did not reach.

    Args:
        tree: Classified fault tree.
        defined: Primary events created by the loader.

    Returns:
        Unused events sorted by identifier.
    """
    reached = tree.primary_events
    unused = [
        event for event in defined if reached.get(event.id) is not event
    ]
    return sorted(unused, key=lambda e: e.id)
