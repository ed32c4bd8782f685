"""JSON-safe model report for a classified fault tree.

The report has two sections:

- ``information``: software identity, generation time, model feature counts
  and the warnings accumulated by the tree.
- ``fault-tree``: the tree name, top event, gates, and primary events. CCF
  member events list their group, order, group size and members.

Display identifiers (``orig_id``) are used throughout.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from faulttree._version import __version__
from faulttree.model.event import PrimaryEvent
from faulttree.model.fault_tree import FaultTree


def _primary_event_entry(event: PrimaryEvent) -> Dict[str, Any]:
    entry: Dict[str, Any] = {"name": event.orig_id, "type": event.kind.value}
    if event.ccf is not None:
        entry["ccf-group"] = event.ccf.group_name
        entry["order"] = event.ccf.order
        entry["group-size"] = event.ccf.group_size
        entry["members"] = list(event.ccf.member_names)
    return entry


def model_features(tree: FaultTree) -> Dict[str, int]:
    """Count gates and primary events by kind."""
    ccf_events = tree.ccf_events
    return {
        "gates": len(tree.gates),
        "basic-events": len(tree.basic_events),
        "house-events": len(tree.house_events),
        "ccf-events": len(ccf_events),
        "ccf-groups": len({e.ccf.group_name for e in ccf_events.values() if e.ccf}),
    }


def build_model_report(tree: FaultTree) -> Dict[str, Any]:
    """Build the report dictionary for a classified tree.

    Args:
        tree: Fault tree after ``gather_primary_events``.

    Returns:
        Dictionary made of JSON primitives only.

    Raises:
        RuntimeError: If the tree has not been classified.
    """
    if not tree.locked:
        raise RuntimeError(
            f"Fault tree '{tree.name}' must be classified before reporting"
        )

    gates: List[Dict[str, Any]] = []
    for gate in tree.gates.values():
        children = [
            child.orig_id if child is not None else child_id
            for child_id, child in gate.children.items()
        ]
        gates.append({"name": gate.orig_id, "children": children})

    primary_events = [
        _primary_event_entry(event)
        for event in sorted(tree.primary_events.values(), key=lambda e: e.orig_id)
    ]

    return {
        "information": {
            "software": {"name": "faulttree", "version": __version__},
            "time": datetime.now().isoformat(timespec="seconds"),
            "model-features": model_features(tree),
            "warnings": tree.warning_list,
        },
        "fault-tree": {
            "name": tree.name,
            "top-event": tree.top_event.orig_id if tree.top_event else None,
            "gates": gates,
            "primary-events": primary_events,
        },
    }
