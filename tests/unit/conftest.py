"""Unit test fixtures.

Most helpers live in tests/conftest.py.
"""

from pathlib import Path

import pytest

from relink.api.link.LinkGraph import LinkGraph
from relink.api.scan.scan_tree import scan_tree
from tests.conftest import read_tree, run_cmd, write_tree

__all__ = ["build_graph", "read_tree", "run_cmd", "write_tree"]


def build_graph(root: Path) -> LinkGraph:
    """Scan root with default settings and build its link graph."""
    return LinkGraph.build(scan_tree(root))


@pytest.fixture
def graph_of():
    return build_graph
