import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pfs_layout import (
    PFSOptions,
    ValidationError,
    count_overlaps,
    get_algorithm,
    graph_from_dict,
    graph_to_dict,
    layout_quality_summary,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Remove node overlaps from a JSON graph layout")
    parser.add_argument("path", help="Path to the JSON graph ({'nodes': [...], 'edges': [...]})")
    parser.add_argument(
        "--padding",
        type=float,
        default=0.0,
        help="Minimum gap enforced between nodes (default: 0)",
    )
    parser.add_argument(
        "--algorithm",
        default="PFS",
        help="Registered adjustment algorithm to run (default: PFS)",
    )
    parser.add_argument(
        "--output",
        help="Write the adjusted graph to this path instead of stdout",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print overlap and displacement statistics",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Reading graph from %s", args.path)
    try:
        with open(args.path, encoding="utf-8") as fin:
            payload = json.load(fin)
        graph = graph_from_dict(payload)
    except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
        logger.error("Cannot read graph from %s: %s", args.path, exc)
        raise SystemExit(1)

    before = graph.positions()
    overlaps_before = count_overlaps(graph, args.padding)
    logger.info("Loaded %d node(s) with %d overlapping pair(s)", len(graph.nodes), overlaps_before)

    try:
        algorithm = get_algorithm(args.algorithm)
        result = algorithm(graph, PFSOptions(padding=args.padding))
    except (ValidationError, ValueError) as exc:
        logger.error("Adjustment failed: %s", exc)
        raise SystemExit(1)

    rendered = json.dumps(graph_to_dict(result.graph), indent=2)
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing adjusted graph to %s", output_path)
        output_path.write_text(rendered + "\n", encoding="utf-8")
    else:
        print(rendered)

    if args.summary:
        summary = layout_quality_summary(result.graph, before, args.padding)
        print("Summary:")
        print(f"  nodes: {int(summary['nodes'])}")
        print(f"  overlaps before: {overlaps_before}")
        print(f"  overlaps after: {int(summary['overlaps'])}")
        print(f"  total displacement: {summary['total_displacement']:.6f}")
        print(f"  max displacement: {summary['max_displacement']:.6f}")
        print(f"  order preserved: {bool(summary['order_preserved'])}")


if __name__ == "__main__":
    main(sys.argv[1:])
