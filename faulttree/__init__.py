"""faulttree: Fault tree model registry and primary event classification.

Builds the logical structure of a fault tree: gates are registered one at a
time, the first becoming the top event, and a single classification pass
partitions every child reference into gates and primary events (basic,
house, and common-cause-failure members). The classified tree is read-only
and ready for downstream cut-set, probability, or reporting stages.

Primary API:
    FaultTree - Gate registry with classification
    Gate, PrimaryEvent - Event variants
    load_fault_tree() - Build a classified tree from model YAML
    build_model_report() - JSON-safe summary of a classified tree
    to_networkx() - Export a classified tree as a NetworkX DiGraph

Example:
    from faulttree import FaultTree, Gate, basic_event

    pump = basic_event("pump")
    top = Gate("top")
    top.add_child(pump)

    tree = FaultTree("system")
    tree.add_gate(top)
    tree.gather_primary_events()
    assert set(tree.primary_events) == {"pump"}
"""

from __future__ import annotations

from faulttree import cli, logging
from faulttree._version import __version__
from faulttree.config import MODEL_CONFIG, ModelConfig
from faulttree.dsl.loader import build_fault_tree, load_fault_tree, load_fault_tree_file
from faulttree.errors import (
    DuplicateIdentifierError,
    FaultTreeError,
    LockedModificationError,
    UninitializedEventError,
)
from faulttree.lib.nx import to_networkx
from faulttree.model.event import (
    CcfMembership,
    Event,
    Gate,
    PrimaryEvent,
    PrimaryEventKind,
    basic_event,
    ccf_event,
    house_event,
)
from faulttree.model.fault_tree import FaultTree
from faulttree.report import build_model_report

__all__ = [
    # Version
    "__version__",
    # Model
    "FaultTree",
    "Event",
    "Gate",
    "PrimaryEvent",
    "PrimaryEventKind",
    "CcfMembership",
    "basic_event",
    "house_event",
    "ccf_event",
    # Errors
    "FaultTreeError",
    "LockedModificationError",
    "DuplicateIdentifierError",
    "UninitializedEventError",
    # Loading
    "load_fault_tree",
    "load_fault_tree_file",
    "build_fault_tree",
    # Configuration
    "ModelConfig",
    "MODEL_CONFIG",
    # Output
    "build_model_report",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
