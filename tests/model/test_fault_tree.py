"""Tests for FaultTree gate registration and primary event classification."""

import pytest

from faulttree.config import ModelConfig
from faulttree.errors import (
    DuplicateIdentifierError,
    FaultTreeError,
    LockedModificationError,
    UninitializedEventError,
)
from faulttree.model.event import Gate, basic_event, ccf_event, house_event
from faulttree.model.fault_tree import FaultTree


@pytest.fixture
def tree():
    """Fixture providing an empty fault tree."""
    return FaultTree("system")


class TestRegistration:
    """Tests for add_gate."""

    def test_new_tree_state(self, tree):
        assert tree.name == "system"
        assert tree.top_event is None
        assert tree.top_event_id == ""
        assert tree.locked is False
        assert tree.warnings == ""
        assert tree.inter_events == {}
        assert tree.primary_events == {}

    def test_first_gate_becomes_top_event(self, tree, two_level_gates):
        top, gate_a, _, _ = two_level_gates
        tree.add_gate(top)
        assert tree.top_event is top
        assert tree.top_event_id == "top"
        assert tree.inter_events == {}

        tree.add_gate(gate_a)
        assert tree.inter_events == {"A": gate_a}
        assert tree.top_event is top

    def test_first_gate_is_top_regardless_of_identifier(self, tree):
        """Whatever gate comes first is the top event."""
        first = Gate("zzz-not-a-top-name")
        tree.add_gate(first)
        tree.add_gate(Gate("top"))
        assert tree.top_event is first
        assert set(tree.inter_events) == {"top"}

    def test_duplicate_of_top_event_rejected(self, tree):
        tree.add_gate(Gate("top"))
        with pytest.raises(DuplicateIdentifierError) as exc_info:
            tree.add_gate(Gate("top"))
        assert exc_info.value.identifier == "top"
        assert tree.inter_events == {}

    def test_duplicate_of_registered_gate_rejected(self, tree):
        tree.add_gate(Gate("top"))
        original = Gate("B")
        tree.add_gate(original)
        with pytest.raises(DuplicateIdentifierError):
            tree.add_gate(Gate("B"))
        assert tree.inter_events["B"] is original

    def test_identifier_match_is_exact(self, tree):
        """No normalization: differently cased identifiers do not collide."""
        tree.add_gate(Gate("top"))
        tree.add_gate(Gate("Top"))
        tree.add_gate(Gate("b"))
        tree.add_gate(Gate("B"))
        assert set(tree.inter_events) == {"Top", "b", "B"}

    def test_children_not_validated_on_registration(self, tree):
        """Dangling child references are accepted until classification."""
        gate = Gate("top")
        gate.add_child_ref("not-yet-defined")
        tree.add_gate(gate)
        assert tree.top_event is gate

    def test_registration_after_classification_rejected(self, tree):
        tree.gather_primary_events()
        with pytest.raises(LockedModificationError):
            tree.add_gate(Gate("B"))
        assert tree.top_event is None

    def test_locked_rejects_even_valid_gate(self, tree, two_level_gates):
        top, gate_a, _, _ = two_level_gates
        tree.add_gate(top)
        tree.add_gate(gate_a)
        tree.gather_primary_events()
        with pytest.raises(LockedModificationError, match="locked"):
            tree.add_gate(Gate("B"))
        assert tree.inter_events == {"A": gate_a}

    def test_errors_share_base_class(self):
        assert issubclass(LockedModificationError, FaultTreeError)
        assert issubclass(DuplicateIdentifierError, ValueError)
        assert issubclass(UninitializedEventError, ValueError)


class TestClassification:
    """Tests for gather_primary_events."""

    def test_scenario_shared_leaf(self, tree, two_level_gates):
        """Shared leaves are discovered once; the gate registry is unchanged."""
        top, gate_a, leaf1, leaf2 = two_level_gates
        tree.add_gate(top)
        tree.add_gate(gate_a)
        tree.gather_primary_events()

        assert tree.locked is True
        assert tree.primary_events == {"leaf1": leaf1, "leaf2": leaf2}
        assert tree.inter_events == {"A": gate_a}

    def test_every_child_resolves_to_exactly_one_map(self, tree):
        leaves = [basic_event(f"e{i}") for i in range(4)]
        g1, g2, g3 = Gate("g1"), Gate("g2"), Gate("g3")
        g1.add_child(g2)
        g1.add_child(leaves[0])
        g2.add_child(g3)
        g2.add_child(leaves[1])
        g3.add_child(leaves[2])
        g3.add_child(leaves[3])
        g3.add_child(house_event("h"))
        for gate in (g1, g2, g3):
            tree.add_gate(gate)
        tree.gather_primary_events()

        for gate in tree.gates.values():
            for child_id in gate.children:
                in_gates = child_id in tree.inter_events
                in_primary = child_id in tree.primary_events
                assert in_gates != in_primary
        assert set(tree.primary_events) == {"e0", "e1", "e2", "e3", "h"}

    def test_deep_leaves_found_without_descent(self, tree):
        """Leaves under gates registered before their parents are found."""
        leaf = basic_event("deep")
        inner = Gate("inner")
        inner.add_child(leaf)
        middle = Gate("middle")
        middle.add_child(inner)
        top = Gate("top")
        top.add_child(middle)

        tree.add_gate(top)
        tree.add_gate(inner)
        tree.add_gate(middle)
        tree.gather_primary_events()
        assert tree.primary_events == {"deep": leaf}

    def test_classification_is_idempotent(self, tree, two_level_gates):
        top, gate_a, _, _ = two_level_gates
        tree.add_gate(top)
        tree.add_gate(gate_a)
        tree.gather_primary_events()
        gates_before = dict(tree.inter_events)
        primaries_before = dict(tree.primary_events)

        tree.classify()

        assert tree.inter_events == gates_before
        assert tree.primary_events == primaries_before
        assert tree.locked is True

    def test_empty_tree_classification_locks(self, tree):
        tree.gather_primary_events()
        assert tree.locked is True
        assert tree.primary_events == {}

    def test_dangling_reference_raises(self, tree):
        top = Gate("top")
        top.add_child(basic_event("ok"))
        top.add_child_ref("missing")
        tree.add_gate(top)
        with pytest.raises(UninitializedEventError) as exc_info:
            tree.gather_primary_events()
        assert exc_info.value.identifier == "missing"
        assert exc_info.value.parent == "top"

    def test_unregistered_gate_child_raises(self, tree):
        """A gate referenced as a child but never registered is not a leaf."""
        top = Gate("top")
        top.add_child(Gate("never-registered"))
        tree.add_gate(top)
        with pytest.raises(UninitializedEventError, match="never-registered"):
            tree.gather_primary_events()

    def test_reference_to_top_event_named_in_error(self, tree):
        """A gate pointing back at the top event gets a dedicated message."""
        top = Gate("top", orig_id="Top")
        top.add_child(basic_event("e"))
        stray = Gate("stray", orig_id="Stray")
        stray.add_child(top)
        tree.add_gate(top)
        tree.add_gate(stray)
        with pytest.raises(UninitializedEventError) as exc_info:
            tree.gather_primary_events()
        assert exc_info.value.identifier == "top"
        assert exc_info.value.parent == "Stray"
        assert "references the top event 'Top'" in str(exc_info.value)
        assert "not initialized" not in str(exc_info.value)

    def test_conflicting_primary_objects_raise(self, tree):
        top = Gate("top")
        top.add_child(basic_event("pump"))
        other = Gate("other")
        other.add_child(basic_event("pump"))
        top.add_child(other)
        tree.add_gate(top)
        tree.add_gate(other)
        with pytest.raises(DuplicateIdentifierError, match="pump"):
            tree.gather_primary_events()

    def test_kind_views(self, tree):
        top = Gate("top")
        top.add_child(basic_event("b"))
        top.add_child(house_event("h"))
        top.add_child(ccf_event("[x y]", "grp", ["x", "y"], 2))
        tree.add_gate(top)
        tree.gather_primary_events()

        assert set(tree.basic_events) == {"b", "[x y]"}
        assert set(tree.house_events) == {"h"}
        assert set(tree.ccf_events) == {"[x y]"}

    def test_gates_view_lists_top_first(self, tree, two_level_gates):
        top, gate_a, _, _ = two_level_gates
        tree.add_gate(top)
        tree.add_gate(gate_a)
        assert list(tree.gates) == ["top", "A"]


class TestWarnings:
    """Tests for warning accumulation and orphan gate reporting."""

    def test_add_warning_accumulates_lines(self, tree):
        tree.add_warning("first")
        tree.add_warning("second")
        assert tree.warnings == "first\nsecond\n"
        assert tree.warning_list == ["first", "second"]

    def test_orphan_gate_warning(self, tree, two_level_gates):
        top, gate_a, _, _ = two_level_gates
        orphan = Gate("Lonely")
        orphan.add_child(basic_event("island"))
        tree.add_gate(top)
        tree.add_gate(gate_a)
        tree.add_gate(orphan)
        tree.gather_primary_events()

        assert tree.warning_list == ["Found orphan gates: Lonely"]
        # Orphans are still classified like any registered gate
        assert "island" in tree.primary_events

    def test_self_referencing_orphan_warned(self, tree):
        top = Gate("top")
        top.add_child(basic_event("x"))
        loop = Gate("b")
        loop.add_child(loop)
        loop.add_child(basic_event("y"))
        tree.add_gate(top)
        tree.add_gate(loop)
        tree.gather_primary_events()

        assert tree.warning_list == ["Found orphan gates: b"]
        assert set(tree.primary_events) == {"x", "y"}

    def test_orphan_warning_recorded_once(self, tree):
        tree.add_gate(Gate("top"))
        tree.add_gate(Gate("orphan"))
        tree.gather_primary_events()
        tree.gather_primary_events()
        assert tree.warning_list == ["Found orphan gates: orphan"]

    def test_orphan_warning_disabled(self):
        tree = FaultTree("quiet", config=ModelConfig(warn_orphan_gates=False))
        tree.add_gate(Gate("top"))
        tree.add_gate(Gate("orphan"))
        tree.gather_primary_events()
        assert tree.warnings == ""

    def test_warnings_allowed_after_lock(self, tree):
        tree.gather_primary_events()
        tree.add_warning("late")
        assert tree.warning_list == ["late"]
