"""Fault tree registry and primary event classification.

A ``FaultTree`` accepts gates one at a time while a model is being built.
The first registered gate becomes the top event; every later gate goes into
a flat registry keyed by identifier. ``gather_primary_events`` locks the
tree and, in a single pass over the top event and the flat registry,
collects every child that is not a registered gate as a primary event.

The pass only looks at immediate children. It relies on all gates at every
depth being registered before it runs, so no top-down descent is needed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from faulttree.config import MODEL_CONFIG, ModelConfig
from faulttree.errors import (
    DuplicateIdentifierError,
    LockedModificationError,
    UninitializedEventError,
)
from faulttree.logging import get_logger
from faulttree.model.event import Gate, PrimaryEvent
from faulttree.model.validation import find_orphan_gates

LOGGER = get_logger(__name__)


@dataclass
class FaultTree:
    """Registry of gates and discovered primary events of one fault tree.

    Attributes:
        name (str): Name of the fault tree.
        top_event_id (str): Identifier of the top gate; empty until the first
            registration.
        top_event (Optional[Gate]): The top gate.
        locked (bool): Set by classification; registration fails afterwards.
        warnings (str): Accumulated warning text, one warning per line.
        inter_events (Dict[str, Gate]): Non-top gates by identifier.
        primary_events (Dict[str, PrimaryEvent]): Leaves by identifier,
            populated by classification.
        config (ModelConfig): Options for warnings recorded by classification.
    """

    name: str
    top_event_id: str = field(default="", init=False)
    top_event: Optional[Gate] = field(default=None, init=False)
    locked: bool = field(default=False, init=False)
    warnings: str = field(default="", init=False)
    inter_events: Dict[str, Gate] = field(default_factory=dict, init=False)
    primary_events: Dict[str, PrimaryEvent] = field(default_factory=dict, init=False)
    config: ModelConfig = field(default_factory=lambda: MODEL_CONFIG, repr=False)

    def add_gate(self, gate: Gate) -> None:
        """Register a gate.

        The first gate becomes the top event without any check. Children are
        not validated here; dangling references surface at classification.

        Args:
            gate: Fully constructed gate.

        Raises:
            LockedModificationError: If the tree is already classified.
            DuplicateIdentifierError: If the identifier equals the top event's
                or a registered gate's identifier.
        """
        if self.locked:
            raise LockedModificationError(
                f"Fault tree '{self.name}' is locked. No change is allowed."
            )

        if self.top_event is None:
            self.top_event = gate
            self.top_event_id = gate.id
            LOGGER.debug("Fault tree '%s': top event '%s'", self.name, gate.orig_id)
            return

        if gate.id == self.top_event_id or gate.id in self.inter_events:
            raise DuplicateIdentifierError(
                gate.id,
                f"Trying to doubly define gate '{gate.orig_id}' "
                f"in fault tree '{self.name}'",
            )
        self.inter_events[gate.id] = gate
        LOGGER.debug("Fault tree '%s': registered gate '%s'", self.name, gate.orig_id)

    def gather_primary_events(self) -> None:
        """Lock the tree and collect all primary events.

        Visits the top event, then every registered gate in registration
        order. A child whose identifier is not a registered gate is a primary
        event. Calling again re-walks the same gates with the same result.

        Raises:
            UninitializedEventError: If such a child is not a materialized
                ``PrimaryEvent``, or is the top event itself.
            DuplicateIdentifierError: If two different primary event objects
                share one identifier.
        """
        self.locked = True
        if self.top_event is None:
            LOGGER.debug("Fault tree '%s' has no gates to classify", self.name)
            return

        for gate in self._iter_gates():
            self._collect_primary_children(gate)

        LOGGER.debug(
            "Fault tree '%s': %d gates, %d primary events",
            self.name,
            len(self.inter_events) + 1,
            len(self.primary_events),
        )

        if self.config.warn_orphan_gates:
            orphans = find_orphan_gates(self)
            if orphans:
                names = [self.inter_events[gid].orig_id for gid in orphans]
                self._record_warning_once(
                    f"Found orphan gates: {self.config.format_names(names)}"
                )

    classify = gather_primary_events

    def add_warning(self, text: str) -> None:
        """Append a warning line and log it."""
        LOGGER.warning("Fault tree '%s': %s", self.name, text)
        self.warnings += text + "\n"

    @property
    def gates(self) -> Dict[str, Gate]:
        """All gates including the top event, top first."""
        result: Dict[str, Gate] = {}
        if self.top_event is not None:
            result[self.top_event_id] = self.top_event
        result.update(self.inter_events)
        return result

    @property
    def basic_events(self) -> Dict[str, PrimaryEvent]:
        """Basic events, CCF members included."""
        return {k: v for k, v in self.primary_events.items() if v.is_basic}

    @property
    def house_events(self) -> Dict[str, PrimaryEvent]:
        return {k: v for k, v in self.primary_events.items() if v.is_house}

    @property
    def ccf_events(self) -> Dict[str, PrimaryEvent]:
        return {k: v for k, v in self.primary_events.items() if v.is_ccf}

    @property
    def warning_list(self) -> List[str]:
        return [line for line in self.warnings.splitlines() if line]

    def _iter_gates(self) -> Iterator[Gate]:
        if self.top_event is not None:
            yield self.top_event
        yield from self.inter_events.values()

    def _collect_primary_children(self, gate: Gate) -> None:
        for child_id, child in gate.children.items():
            if child_id in self.inter_events:
                continue
            if child_id == self.top_event_id:
                raise UninitializedEventError(
                    child_id,
                    parent=gate.orig_id,
                    message=(
                        f"Gate '{gate.orig_id}' references the top event "
                        f"'{self.top_event.orig_id}' as a child"
                    ),
                )
            if not isinstance(child, PrimaryEvent):
                raise UninitializedEventError(child_id, parent=gate.orig_id)
            known = self.primary_events.get(child_id)
            if known is None:
                self.primary_events[child_id] = child
            elif known is not child:
                raise DuplicateIdentifierError(
                    child_id,
                    f"Primary event '{child.orig_id}' is defined by two "
                    f"different objects in fault tree '{self.name}'",
                )

    def _record_warning_once(self, text: str) -> None:
        if text not in self.warning_list:
            self.add_warning(text)
