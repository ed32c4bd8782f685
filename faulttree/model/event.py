"""Fault tree event model with Gate and PrimaryEvent variants.

Events are tagged by Python type: a child of a gate is either a ``Gate``
(internal node) or a ``PrimaryEvent`` (leaf). Both expose ``id`` and
``orig_id``. Primary events carry a ``PrimaryEventKind`` discriminator and,
for common-cause-failure members, a ``CcfMembership`` record.

Dataclasses are declared with ``eq=False``: the same event object is shared
by reference between the tree registry and every parent gate, so identity
comparison is the meaningful one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class PrimaryEventKind(str, Enum):
    """Subtype discriminator for leaf events."""

    BASIC = "basic"
    HOUSE = "house"
    CCF = "ccf"


@dataclass
class CcfMembership:
    """Group information of a common-cause-failure member event.

    Attributes:
        group_name (str): Name of the owning CCF group.
        member_names (List[str]): Basic events failing together in this event.
        group_size (int): Number of members in the whole CCF group.
    """

    group_name: str
    member_names: List[str] = field(default_factory=list)
    group_size: int = 1

    def __post_init__(self) -> None:
        if self.group_size < 1:
            raise ValueError(
                f"CCF group '{self.group_name}' size must be positive, "
                f"got {self.group_size}"
            )
        if not 1 <= self.order <= self.group_size:
            raise ValueError(
                f"CCF event of group '{self.group_name}' must list between 1 and "
                f"{self.group_size} members, got {self.order}"
            )

    @property
    def order(self) -> int:
        """Number of members failing together."""
        return len(self.member_names)


@dataclass(eq=False)
class PrimaryEvent:
    """Leaf event of a fault tree.

    Attributes:
        id (str): Identifier used as the key in gate and tree maps.
        kind (PrimaryEventKind): Basic, house, or CCF member.
        orig_id (str): Display identifier; defaults to ``id``.
        ccf (Optional[CcfMembership]): Group data, required for CCF members only.
        attrs (Dict[str, Any]): Opaque data for downstream analysis
            (e.g., probability, house state).
    """

    id: str
    kind: PrimaryEventKind = PrimaryEventKind.BASIC
    orig_id: str = ""
    ccf: Optional[CcfMembership] = None
    attrs: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Primary event identifier must be non-empty.")
        self.kind = PrimaryEventKind(self.kind)
        if not self.orig_id:
            self.orig_id = self.id
        if self.kind is PrimaryEventKind.CCF and self.ccf is None:
            raise ValueError(f"CCF event '{self.id}' requires group membership data")
        if self.kind is not PrimaryEventKind.CCF and self.ccf is not None:
            raise ValueError(
                f"Only CCF events carry group membership; '{self.id}' "
                f"is a {self.kind.value} event"
            )

    @property
    def is_basic(self) -> bool:
        """True for basic events, including CCF members."""
        return self.kind is not PrimaryEventKind.HOUSE

    @property
    def is_house(self) -> bool:
        return self.kind is PrimaryEventKind.HOUSE

    @property
    def is_ccf(self) -> bool:
        return self.kind is PrimaryEventKind.CCF


@dataclass(eq=False)
class Gate:
    """Internal fault tree node whose children are gates or primary events.

    Children are keyed by identifier. A value of ``None`` marks a reference the
    loader could not materialize; classification rejects it.

    Attributes:
        id (str): Identifier used as the key in gate and tree maps.
        orig_id (str): Display identifier; defaults to ``id``.
        children (Dict[str, Optional[Event]]): Child events keyed by identifier.
        attrs (Dict[str, Any]): Opaque data such as the logic operator.
    """

    id: str
    orig_id: str = ""
    children: Dict[str, Optional["Event"]] = field(default_factory=dict)
    attrs: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Gate identifier must be non-empty.")
        if not self.orig_id:
            self.orig_id = self.id

    def add_child(self, event: "Event") -> None:
        """Attach an event under its identifier.

        Raises:
            ValueError: If the gate already has a child with that identifier.
        """
        if event.id in self.children:
            raise ValueError(
                f"Gate '{self.orig_id}' already has child '{event.orig_id}'."
            )
        self.children[event.id] = event

    def add_child_ref(self, identifier: str) -> None:
        """Record a child identifier whose event is not materialized."""
        if identifier in self.children:
            raise ValueError(f"Gate '{self.orig_id}' already has child '{identifier}'.")
        self.children[identifier] = None


Event = Union[Gate, PrimaryEvent]


def basic_event(id: str, orig_id: str = "", **attrs: Any) -> PrimaryEvent:
    """Create a basic event with optional attributes."""
    return PrimaryEvent(id, PrimaryEventKind.BASIC, orig_id=orig_id, attrs=attrs)


def house_event(id: str, orig_id: str = "", **attrs: Any) -> PrimaryEvent:
    """Create a house event with optional attributes."""
    return PrimaryEvent(id, PrimaryEventKind.HOUSE, orig_id=orig_id, attrs=attrs)


def ccf_event(
    id: str,
    group_name: str,
    member_names: List[str],
    group_size: int,
    orig_id: str = "",
    **attrs: Any,
) -> PrimaryEvent:
    """Create a common-cause-failure member event."""
    return PrimaryEvent(
        id,
        PrimaryEventKind.CCF,
        orig_id=orig_id,
        ccf=CcfMembership(group_name, list(member_names), group_size),
        attrs=attrs,
    )
