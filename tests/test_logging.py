import logging

import numpy as np

from pfs_layout import Graph, Node, pfs
from pfs_layout.geometry import overlap
from pfs_layout.logging_utils import _safe_repr, debug_log_call


def test_debug_logging_traces_geometry_calls(caplog):
    caplog.set_level(logging.DEBUG, logger="pfs_layout.geometry")

    overlap(Node(0, 0, width=2, height=2), Node(1, 0, width=2, height=2))

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Entering overlap") for message in messages)
    assert any(message == "Exiting overlap -> True" for message in messages)


def test_pfs_logs_pipeline_milestones(caplog):
    caplog.set_level(logging.INFO, logger="pfs_layout")
    graph = Graph(nodes=[Node(0, 0, width=2, height=2, index=0), Node(1, 0, width=2, height=2, index=1)])

    pfs(graph)

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Running PFS on 2 node(s)") for message in messages)
    assert any("Committed positions: 1 of 2 node(s) moved" in message for message in messages)


def test_debug_log_call_wraps_once_and_reraises(caplog):
    logger = logging.getLogger("pfs_layout.tests")
    caplog.set_level(logging.DEBUG, logger="pfs_layout.tests")

    @debug_log_call(logger)
    def explode():
        raise KeyError("boom")

    assert debug_log_call(logger)(explode) is explode
    try:
        explode()
    except KeyError:
        pass
    else:  # pragma: no cover - assertion helper
        raise AssertionError("expected KeyError")

    assert any("Exception in" in record.getMessage() for record in caplog.records)


def test_safe_repr_summarizes_graphs_and_arrays():
    graph = Graph(nodes=[Node(0, 0), Node(1, 1)])

    assert _safe_repr(graph) == "Graph(nodes=2, edges=0)"
    assert "shape=(100,)" in _safe_repr(np.arange(100))
    assert _safe_repr(list(range(10))).endswith("... (10 items)]")
