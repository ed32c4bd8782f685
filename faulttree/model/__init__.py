"""Fault tree model package.

Defines the event variants (gates and primary events) and the ``FaultTree``
registry that classifies primary events once all gates are registered.
"""

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

__all__ = [
    # Events
    "Event",
    "Gate",
    "PrimaryEvent",
    "PrimaryEventKind",
    "CcfMembership",
    "basic_event",
    "house_event",
    "ccf_event",
    # Registry
    "FaultTree",
]
