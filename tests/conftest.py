"""Shared fixtures for fault tree tests."""

from __future__ import annotations

import pytest

from faulttree.model.event import Gate, basic_event


@pytest.fixture
def two_level_gates():
    """Gates 'top' -> {'A', 'leaf1'} and 'A' -> {'leaf1', 'leaf2'}.

    ``leaf1`` is shared by both gates. Returns ``(top, gate_a, leaf1, leaf2)``.
    """
    leaf1 = basic_event("leaf1")
    leaf2 = basic_event("leaf2")

    gate_a = Gate("A")
    gate_a.add_child(leaf1)
    gate_a.add_child(leaf2)

    top = Gate("top")
    top.add_child(gate_a)
    top.add_child(leaf1)
    return top, gate_a, leaf1, leaf2
