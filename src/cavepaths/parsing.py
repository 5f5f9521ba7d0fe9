from pathlib import Path
from typing import Any, List, Tuple

import yaml

from .errors import InputFormatError

Edge = Tuple[str, str]


def parse_edge(line: str, line_no: int = 1) -> Edge:
    a, sep, b = line.strip().partition("-")
    a, b = a.strip(), b.strip()
    if not sep or not a or not b:
        raise InputFormatError(line_no, line)
    return a, b


def parse_edges(text: str) -> List[Edge]:
    """Parse ``a-b`` lines into edge pairs; blank lines are skipped."""
    return [parse_edge(line, n)
            for n, line in enumerate(text.splitlines(), 1)
            if line.strip()]


def _edges_from_yaml(doc: Any) -> List[Edge]:
    items = doc.get("edges") if isinstance(doc, dict) else doc
    if not isinstance(items, list):
        raise InputFormatError(1, "YAML document without an 'edges' list")
    edges = []
    for n, item in enumerate(items, 1):
        if isinstance(item, str):
            edges.append(parse_edge(item, n))
        elif isinstance(item, (list, tuple)) and len(item) == 2:
            edges.append((str(item[0]), str(item[1])))
        else:
            raise InputFormatError(n, repr(item))
    return edges


def load_edges(path: str) -> List[Edge]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"{path} not found")
    if p.suffix.lower() in (".yaml", ".yml"):
        return _edges_from_yaml(yaml.safe_load(p.read_text()))
    return parse_edges(p.read_text())
