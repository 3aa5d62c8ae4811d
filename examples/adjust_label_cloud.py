"""Example: remove overlaps from a cluster of word labels and report the cost."""

from pfs_layout import Graph, Node, PFSOptions, count_overlaps, layout_quality_summary, pfs

LABELS = [
    ("layout", 0.0, 0.0, 60.0, 20.0),
    ("mental", 30.0, 8.0, 60.0, 20.0),
    ("map", 45.0, -5.0, 40.0, 20.0),
    ("push", 10.0, 15.0, 40.0, 20.0),
    ("force", 70.0, 10.0, 50.0, 20.0),
    ("scan", 35.0, 25.0, 40.0, 20.0),
]


def main() -> None:
    graph = Graph(
        nodes=[
            Node(x, y, width=w, height=h, index=idx, label=label)
            for idx, (label, x, y, w, h) in enumerate(LABELS)
        ]
    )
    before = graph.positions()
    print(f"Overlapping pairs before: {count_overlaps(graph, 4.0)}")

    pfs(graph, PFSOptions(padding=4.0))

    for node in sorted(graph.nodes, key=lambda n: n.index):
        x0, y0 = before[node.index]
        print(f"{node.label:>8}: ({x0:7.2f}, {y0:7.2f}) -> ({node.x:7.2f}, {node.y:7.2f})")
    print(f"Summary: {layout_quality_summary(graph, before, 4.0)}")


if __name__ == "__main__":
    main()
