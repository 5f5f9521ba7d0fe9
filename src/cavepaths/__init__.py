"""Path counting through cave systems of small and large caves."""

from .caves import Cave, CaveKind, classify
from .errors import (
    CavePathsError,
    ExpansionLimitExceeded,
    InputFormatError,
    MalformedGraph,
    UnboundedSearch,
    UnreachableTerminal,
)
from .graph import CaveGraph
from .parsing import load_edges, parse_edges
from .paths import RevisitPolicy, count_paths, enumerate_paths, require_paths

__all__ = [
    "Cave",
    "CaveKind",
    "classify",
    "CaveGraph",
    "RevisitPolicy",
    "enumerate_paths",
    "count_paths",
    "require_paths",
    "parse_edges",
    "load_edges",
    "CavePathsError",
    "MalformedGraph",
    "UnboundedSearch",
    "UnreachableTerminal",
    "ExpansionLimitExceeded",
    "InputFormatError",
]
