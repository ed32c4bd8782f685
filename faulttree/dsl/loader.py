"""YAML loader for fault tree models.

Parses a model YAML string, checks its shape against the packaged JSON
schema, materializes gates and primary events, registers the gates on a
``FaultTree`` and classifies it.

Model layout::

    name: PumpSystem
    top: SystemFails            # optional; defaults to the first gate
    gates:
      - name: SystemFails
        inputs: [PumpsFail, ValveStuck]
        attrs: {type: or}
    basic_events:
      - name: ValveStuck
        attrs: {probability: 0.01}
    house_events:
      - name: MaintenanceMode
    ccf_events:
      - name: "[PumpA PumpB]"
        group: Pumps
        members: [PumpA, PumpB]
        group_size: 2
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
import yaml

from faulttree.config import MODEL_CONFIG, ModelConfig
from faulttree.logging import get_logger
from faulttree.model.event import (
    CcfMembership,
    Gate,
    PrimaryEvent,
    PrimaryEventKind,
)
from faulttree.model.fault_tree import FaultTree
from faulttree.model.validation import (
    find_unused_primary_events,
    validate_gate_hierarchy,
)
from faulttree.utils.yaml_utils import normalize_yaml_dict_keys

LOGGER = get_logger(__name__)

RECOGNIZED_KEYS = {
    "name",
    "top",
    "gates",
    "basic_events",
    "house_events",
    "ccf_events",
}

_EVENT_SECTIONS = {
    "basic_events": PrimaryEventKind.BASIC,
    "house_events": PrimaryEventKind.HOUSE,
    "ccf_events": PrimaryEventKind.CCF,
}


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("faulttree.schemas")
        .joinpath("fault_tree.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_model_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load and validate a fault tree model YAML string.

    Returns:
        The model as a plain dictionary with schema shape enforced.

    Raises:
        ValueError: If the YAML is not a mapping or has unrecognized keys.
        jsonschema.ValidationError: If the model does not match the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(map(str, data.keys())) - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in model: {', '.join(sorted(extra))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    # Early shape checks give clearer messages than schema errors
    for section in ("gates", *_EVENT_SECTIONS):
        entries = data.get(section)
        if entries is None:
            continue
        if not isinstance(entries, list):
            raise ValueError(f"'{section}' must be a list")
        for entry in entries:
            if not isinstance(entry, dict) or "name" not in entry:
                raise ValueError(f"Each entry of '{section}' needs a 'name' field")

    jsonschema.validate(data, _load_schema())
    return data


def build_fault_tree(
    data: Dict[str, Any], config: Optional[ModelConfig] = None
) -> FaultTree:
    """Build and classify a fault tree from a validated model dictionary.

    Gate inputs are resolved by identifier. An input naming no gate and no
    primary event is kept as a dangling reference, which classification
    reports as ``UninitializedEventError``.

    Args:
        data: Model dictionary as returned by ``load_model_yaml``.
        config: Loader options; defaults to ``MODEL_CONFIG``.

    Returns:
        A locked ``FaultTree``.

    Raises:
        ValueError: On duplicate event names, an unknown ``top`` gate, or
            cyclic gate references.
    """
    config = config or MODEL_CONFIG
    to_id = (lambda name: name.lower()) if config.normalize_ids else str

    defined: Dict[str, str] = {}

    def claim(name: str, section: str) -> str:
        event_id = to_id(name)
        if event_id in defined:
            raise ValueError(
                f"Event '{name}' in '{section}' is already defined "
                f"in '{defined[event_id]}'"
            )
        defined[event_id] = section
        return event_id

    primaries: Dict[str, PrimaryEvent] = {}
    for section, kind in _EVENT_SECTIONS.items():
        for entry in data.get(section) or []:
            name = entry["name"]
            ccf = None
            if kind is PrimaryEventKind.CCF:
                ccf = CcfMembership(
                    group_name=entry["group"],
                    member_names=list(entry["members"]),
                    group_size=entry["group_size"],
                )
            event_id = claim(name, section)
            primaries[event_id] = PrimaryEvent(
                event_id,
                kind,
                orig_id=name,
                ccf=ccf,
                attrs=normalize_yaml_dict_keys(entry.get("attrs") or {}),
            )

    gates: Dict[str, Gate] = {}
    for entry in data["gates"]:
        name = entry["name"]
        gate_id = claim(name, "gates")
        gates[gate_id] = Gate(
            gate_id,
            orig_id=name,
            attrs=normalize_yaml_dict_keys(entry.get("attrs") or {}),
        )

    for entry in data["gates"]:
        gate = gates[to_id(entry["name"])]
        for input_name in entry["inputs"]:
            child_id = to_id(input_name)
            child = gates.get(child_id) or primaries.get(child_id)
            if child is None:
                gate.add_child_ref(child_id)
            else:
                gate.add_child(child)

    top_id = to_id(data["top"]) if "top" in data else next(iter(gates))
    if top_id not in gates:
        raise ValueError(f"Top event '{data['top']}' is not a defined gate")

    tree_name = str(data.get("name") or gates[top_id].orig_id)
    tree = FaultTree(name=tree_name, config=config)
    tree.add_gate(gates[top_id])
    for gate_id, gate in gates.items():
        if gate_id != top_id:
            tree.add_gate(gate)

    validate_gate_hierarchy(tree)
    tree.gather_primary_events()

    if config.warn_unused_primary_events:
        unused = find_unused_primary_events(tree, primaries.values())
        if unused:
            names = [event.orig_id for event in unused]
            tree.add_warning(
                f"Found unused primary events: {config.format_names(names)}"
            )

    LOGGER.info(
        "Loaded fault tree '%s': %d gates, %d primary events",
        tree.name,
        len(tree.gates),
        len(tree.primary_events),
    )
    return tree


def load_fault_tree(yaml_str: str, config: Optional[ModelConfig] = None) -> FaultTree:
    """Parse, validate, build and classify a fault tree from YAML text."""
    return build_fault_tree(load_model_yaml(yaml_str), config=config)


def load_fault_tree_file(
    path: Path, config: Optional[ModelConfig] = None
) -> FaultTree:
    """Load a fault tree from a YAML file."""
    LOGGER.debug("Reading fault tree model from %s", path)
    return load_fault_tree(Path(path).read_text(encoding="utf-8"), config=config)
