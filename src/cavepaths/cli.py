import argparse
import logging
import sys
from pathlib import Path

import requests

from . import graph_viz
from .config import load_settings
from .fetch import PuzzleInputClient
from .graph import CaveGraph
from .parsing import load_edges
from .paths import describe_path, enumerate_paths, sorted_paths


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="cavepaths",
        description="Count paths through a cave system",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Count paths under both revisit policies
  cavepaths --input data/sample_small.txt

  # List the first 10 paths that may revisit one small cave
  cavepaths --input data/sample_small.txt --policy revisit --show-paths 10

  # Download your own input, then browse the graph
  cavepaths --fetch --input data/input.txt --visualize
        """
    )
    ap.add_argument("--input", help="Edge list, one 'a-b' per line, or YAML with 'edges:'")
    ap.add_argument("--config", help="YAML/JSON settings file")
    ap.add_argument("--policy", choices=["single", "revisit", "both"],
                    help="Revisit policy (default: both)")
    ap.add_argument("--show-paths", type=int, help="Print the first N paths per policy")
    ap.add_argument("--max-expansions", type=int, help="Abort after expanding N caves")
    ap.add_argument("--workers", type=int, help="Worker processes for the search")
    ap.add_argument("--fetch", action="store_true",
                    help="Download the puzzle input into --input if it is missing")
    ap.add_argument("--session", help="Session cookie for --fetch (default: $AOC_SESSION)")
    ap.add_argument("--year", type=int)
    ap.add_argument("--day", type=int)
    ap.add_argument("--visualize", action="store_true",
                    help="Serve the cave graph visualization in a browser")
    ap.add_argument("--port", type=int, help="Port for visualization server (default: 5000)")
    ap.add_argument("--html", help="Write the visualization to this HTML file and exit")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap.parse_args(argv)


def main(argv=None) -> int:
    a = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if a.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings(a.config).merged(
            input=a.input,
            policies=None if a.policy in (None, "both") else [a.policy],
            show_paths=a.show_paths,
            max_expansions=a.max_expansions,
            workers=a.workers,
            session=a.session,
            year=a.year,
            day=a.day,
            port=a.port,
        )
        if a.policy == "both":
            settings.policies = ["single", "revisit"]

        if a.fetch:
            client = PuzzleInputClient(session=settings.session)
            p = client.fetch_to(settings.input, settings.year, settings.day)
            print(f"Puzzle input: {p.resolve()}")

        graph = CaveGraph.build(load_edges(settings.input),
                                start_label=settings.start_label,
                                end_label=settings.end_label)

        results = {}
        for policy in settings.revisit_policies():
            results[policy.value] = enumerate_paths(
                graph, policy,
                max_expansions=settings.max_expansions,
                workers=settings.workers,
            )
    except (ValueError, FileNotFoundError, requests.RequestException) as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        return 1

    # --- Visualization branch ---
    if a.html:
        out = graph_viz.save_html(graph, results, a.html)
        print(f"Cave graph saved to {out.resolve()} (open in a browser)")
        return 0
    if a.visualize:
        print("="*70)
        print("Launching Cave System Visualization")
        print(f"Graph file: {settings.input}")
        print(f"URL: http://localhost:{settings.port}")
        print("="*70)
        graph_viz.create_app(graph, results).run(host="0.0.0.0", port=settings.port)
        return 0

    # --- Normal CLI path ---
    print("="*70)
    print(f"Cave System: {Path(settings.input).name}")
    print("="*70)
    print(f"Caves: {len(graph)}")
    print(f"Tunnels: {graph.edge_count}")
    for policy, paths in results.items():
        print(f"Paths ({policy}): {len(paths)}")

    if settings.show_paths > 0:
        for policy, paths in results.items():
            print(f"\nFirst {settings.show_paths} paths ({policy}):")
            for i, p in enumerate(sorted_paths(paths)[:settings.show_paths], 1):
                print(f"[{i}] {describe_path(p)}")
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
