import json

import pytest

import pfs_layout.__main__ as cli


def _write_graph(path, nodes):
    path.write_text(json.dumps({"nodes": nodes, "edges": []}), encoding="utf-8")


def _overlapping_nodes():
    return [
        {"index": 0, "label": "a", "x": 0, "y": 0, "width": 2, "height": 2},
        {"index": 1, "label": "b", "x": 1, "y": 0, "width": 2, "height": 2},
        {"index": 2, "label": "c", "x": 0, "y": 1, "width": 2, "height": 2},
    ]


def test_main_writes_adjusted_graph(tmp_path):
    graph_path = tmp_path / "graph.json"
    _write_graph(graph_path, _overlapping_nodes())
    output_path = tmp_path / "out" / "adjusted.json"

    cli.main([str(graph_path), "--output", str(output_path)])

    payload = json.loads(output_path.read_text(encoding="utf-8"))
    positions = {node["label"]: (node["x"], node["y"]) for node in payload["nodes"]}
    assert positions == {"a": (0.0, 0.0), "b": (2.0, 0.0), "c": (0.0, 2.0)}


def test_main_prints_graph_and_summary(tmp_path, capsys):
    graph_path = tmp_path / "graph.json"
    _write_graph(graph_path, _overlapping_nodes())

    cli.main([str(graph_path), "--padding", "1", "--summary"])

    out = capsys.readouterr().out
    graph_text, summary = out.split("Summary:")
    payload = json.loads(graph_text)
    assert len(payload["nodes"]) == 3
    assert "overlaps before: 3" in summary
    assert "overlaps after: 0" in summary
    assert "order preserved: True" in summary


@pytest.mark.parametrize(
    "extra_args",
    [["--padding", "-1"], ["--algorithm", "NOPE"]],
)
def test_main_exits_on_bad_arguments(tmp_path, extra_args):
    graph_path = tmp_path / "graph.json"
    _write_graph(graph_path, _overlapping_nodes())

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(graph_path), *extra_args])

    assert excinfo.value.code == 1


def test_main_exits_on_unreadable_graph(tmp_path):
    graph_path = tmp_path / "graph.json"
    graph_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(graph_path)])

    assert excinfo.value.code == 1


@pytest.mark.parametrize(
    "content",
    [
        "[]",
        '"graph"',
        '{"nodes": [5]}',
        '{"nodes": [{"x": 0, "y": 0}], "edges": ["a-b"]}',
    ],
)
def test_main_exits_on_graph_with_wrong_shape(tmp_path, content):
    graph_path = tmp_path / "graph.json"
    graph_path.write_text(content, encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(graph_path)])

    assert excinfo.value.code == 1
