#!/usr/bin/env python3
"""
graph_viz.py - Cave system visualizer
- Force-directed PyVis layout of the cave graph
- Colors caves by kind, highlights one chosen path
- Lists enumerated paths per revisit policy in a styled table
Serve with: cavepaths --input data/sample_small.txt --visualize
"""

import html as htmlmod
from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence, Set

from flask import Flask, Response, jsonify
from pyvis.network import Network

from .caves import CaveKind
from .graph import CaveGraph
from .paths import Path as CavePath
from .paths import describe_path, sorted_paths

KIND_STYLE = {
    CaveKind.START: ("#7DCEA0", 30),   # green
    CaveKind.END: ("#F5B041", 30),     # amber
    CaveKind.SMALL: ("#5DADE2", 18),   # blue
    CaveKind.LARGE: ("#AF7AC5", 34),   # purple
}

HIGHLIGHT_COLOR = "#E74C3C"


def path_edges(path: Optional[Sequence[str]]) -> Set[frozenset]:
    if not path:
        return set()
    return {frozenset(pair) for pair in zip(path, path[1:])}


def build_network(graph: CaveGraph, highlight: Optional[Sequence[str]] = None) -> Network:
    hot = path_edges(highlight)
    net = Network(height='700px', width='100%', directed=False, bgcolor="#1a1a1a", font_color="white")

    net.set_options("""
    var options = {
      "edges": {"smooth": false, "font": {"size": 12, "face": "arial"}},
      "nodes": {"font": {"size": 18, "face": "arial"}, "shadow": true},
      "physics": {"enabled": true, "barnesHut": {"springLength": 140}}
    }
    """)

    for label in sorted(graph.caves):
        kind = graph.kind(label)
        color, size = KIND_STYLE[kind]
        net.add_node(label, label=label, color=color, size=size,
                     title=f"{label} ({kind.value})")

    for a, b in graph.edges():
        if frozenset((a, b)) in hot:
            net.add_edge(a, b, color=HIGHLIGHT_COLOR, width=4)
        else:
            net.add_edge(a, b, color="gray", width=1)

    return net


CUSTOM_CSS = """
<style>
  body { font-family: 'Segoe UI', Roboto, sans-serif; background-color: #121212;
         color: #f0f0f0; margin: 0; padding: 0; }
  h2, h3 { text-align: center; color: #f1c40f; font-weight: 600; }
  .container { max-width: 1100px; margin: 0 auto; padding: 20px; }
  .graph-box { background: #1e1e1e; border-radius: 12px;
               box-shadow: 0 0 20px rgba(0,0,0,0.5); padding: 10px; }
  table { border-collapse: collapse; width: 100%; margin-top: 20px; background: #1f1f1f; }
  th, td { padding: 8px 12px; text-align: left; font-family: 'Courier New', monospace; }
  th { background-color: #333; color: #f1c40f; text-transform: uppercase; font-size: 0.9em; }
  tr:nth-child(even) { background-color: #2a2a2a; }
  .footer { text-align: center; color: #999; margin-top: 40px; font-size: 0.85em; }
</style>
"""


def _paths_table(policy: str, paths: Iterable[CavePath], limit: int) -> str:
    ordered = sorted_paths(paths)
    rows = "".join(
        f"<tr><td>{i}</td><td>{htmlmod.escape(describe_path(p))}</td></tr>"
        for i, p in enumerate(ordered[:limit], 1)
    )
    more = ""
    if len(ordered) > limit:
        more = f"<p>... and {len(ordered) - limit} more</p>"
    return (
        f"<div class='container'><h3>Policy '{htmlmod.escape(policy)}': {len(ordered)} paths</h3>"
        f"<table><tr><th>#</th><th>Path</th></tr>{rows}</table>{more}</div>"
    )


def build_html(graph: CaveGraph, paths_by_policy: Dict[str, Set[CavePath]],
               limit: int = 20) -> str:
    """Render the graph plus one path table per policy as a standalone page.

    The shortest path of the first policy with any paths is highlighted.
    """
    highlight = None
    for paths in paths_by_policy.values():
        if paths:
            highlight = sorted_paths(paths)[0]
            break

    page = build_network(graph, highlight).generate_html()
    tables = "".join(_paths_table(policy, paths, limit)
                     for policy, paths in paths_by_policy.items())
    footer = (f"<div class='footer'>{len(graph)} caves, {graph.edge_count} tunnels"
              f"{' | highlighted: ' + htmlmod.escape(describe_path(highlight)) if highlight else ''}</div>")

    page = page.replace("</head>", CUSTOM_CSS + "\n</head>")
    page = page.replace("<body>", "<body><div class='container'><h2>Cave System</h2><div class='graph-box'>")
    page = page.replace("</body>", "</div></div>" + tables + footer + "</body>")
    return page


def create_app(graph: CaveGraph, paths_by_policy: Dict[str, Set[CavePath]],
               limit: int = 20) -> Flask:
    app = Flask(__name__)

    @app.route('/')
    def index():
        return Response(build_html(graph, paths_by_policy, limit), mimetype='text/html')

    @app.route('/paths.json')
    def paths_json():
        return jsonify({
            "caves": len(graph),
            "edges": graph.edge_count,
            "policies": {
                policy: {
                    "count": len(paths),
                    "paths": [list(p) for p in sorted_paths(paths)[:limit]],
                }
                for policy, paths in paths_by_policy.items()
            },
        })

    return app


def save_html(graph: CaveGraph, paths_by_policy: Dict[str, Set[CavePath]],
              out: str = "cave_graph.html", limit: int = 20) -> Path:
    html_file = Path(out)
    html_file.write_text(build_html(graph, paths_by_policy, limit))
    return html_file
