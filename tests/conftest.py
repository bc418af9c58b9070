"""
Pytest configuration and shared fixtures for Shader Graph tests.

This file provides:
1. Shared graph fixtures (the scalar chain, a textured Main graph)
2. Helper functions for wiring nodes by socket name

Usage:
    pytest tests/ -v
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from shader_graph.ir.graph import Graph
from shader_graph.ir.kinds import NodeKind


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def link(graph, src_node, src_name, dst_node, dst_name):
    """Connect ``src_node.src_name`` into ``dst_node.dst_name``."""
    graph.connect(graph.find_output(src_node.id, src_name), graph.find_input(dst_node.id, dst_name))


def set_input(graph, node, name, value):
    graph.set_value(graph.find_input(node.id, name), value)


def body_lines(code: str):
    """Non-empty lines of a generated stage body."""
    return [line for line in code.split("\n") if line]


# =============================================================================
# PYTEST FIXTURES
# =============================================================================

@pytest.fixture
def empty_graph():
    """Creates an empty Graph for testing."""
    return Graph(name="TestGraph")


@pytest.fixture
def scalar_chain():
    """
    MakeScalar(2) -> AddScalar.v1, AddScalar.v2 = 3.

    Returns:
        (graph, make, add)
    """
    graph = Graph(name="ScalarChain")
    make = graph.add_node(NodeKind.MAKE_SCALAR)
    add = graph.add_node(NodeKind.ADD_SCALAR)

    set_input(graph, make, "value", 2)
    set_input(graph, add, "v2", 3)
    link(graph, make, "out", add, "v1")
    return graph, make, add


@pytest.fixture
def textured_main():
    """
    MainTexure2D.out -> Main.color, MainTexure2D.alpha -> Main.alpha.

    Returns:
        (graph, tex, main)
    """
    graph = Graph(name="TexturedMain")
    tex = graph.add_node(NodeKind.MAIN_TEXTURE_2D)
    main = graph.add_node(NodeKind.MAIN)

    link(graph, tex, "out", main, "color")
    link(graph, tex, "alpha", main, "alpha")
    return graph, tex, main
