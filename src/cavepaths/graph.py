import logging
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple

from .caves import Cave, CaveKind, classify
from .errors import MalformedGraph

logger = logging.getLogger(__name__)

Classifier = Callable[[str], CaveKind]


class CaveGraph:
    """Undirected cave system, read-only once built.

    ``adj`` maps every cave label to the frozenset of its neighbours and
    ``caves`` maps every label to its :class:`Cave`. Use :meth:`build` rather
    than calling the constructor with hand-made mappings.
    """

    def __init__(self, caves: Dict[str, Cave], adj: Dict[str, FrozenSet[str]]):
        self.caves = caves
        self.adj = adj
        self.start = self._single(CaveKind.START)
        self.end = self._single(CaveKind.END)

    @classmethod
    def build(cls, edges: Iterable[Tuple[str, str]],
              start_label: str = "start", end_label: str = "end",
              classifier: Optional[Classifier] = None) -> "CaveGraph":
        if classifier is None:
            def classifier(label: str) -> CaveKind:
                return classify(label, start_label, end_label)

        caves: Dict[str, Cave] = {}
        adj: Dict[str, set] = {}
        for a, b in edges:
            if a == b:
                raise MalformedGraph(f"self-loop on cave {a!r}")
            for label in (a, b):
                if label not in caves:
                    try:
                        caves[label] = Cave(label, classifier(label))
                    except ValueError as e:
                        raise MalformedGraph(str(e)) from e
            adj.setdefault(a, set()).add(b)
            adj.setdefault(b, set()).add(a)

        graph = cls(caves, {label: frozenset(n) for label, n in adj.items()})
        for label, other in graph.large_pairs():
            logger.warning("large caves %s and %s are adjacent; path count is unbounded",
                           label, other)
        logger.debug("built cave graph: %d caves, %d edges", len(caves), graph.edge_count)
        return graph

    def _single(self, kind: CaveKind) -> str:
        found = sorted(c.label for c in self.caves.values() if c.kind is kind)
        if not found:
            raise MalformedGraph(f"no {kind.value} cave in graph")
        if len(found) > 1:
            raise MalformedGraph(f"more than one {kind.value} cave: {', '.join(found)}")
        return found[0]

    def neighbors(self, label: str) -> FrozenSet[str]:
        return self.adj.get(label, frozenset())

    def kind(self, label: str) -> CaveKind:
        return self.caves[label].kind

    @property
    def edge_count(self) -> int:
        return sum(len(n) for n in self.adj.values()) // 2

    def edges(self) -> List[Tuple[str, str]]:
        """Each undirected edge once, as a sorted pair, in sorted order."""
        return sorted({tuple(sorted((a, b))) for a, ns in self.adj.items() for b in ns})

    def large_pairs(self) -> List[Tuple[str, str]]:
        return [(a, b) for a, b in self.edges()
                if self.kind(a) is CaveKind.LARGE and self.kind(b) is CaveKind.LARGE]

    def __len__(self) -> int:
        return len(self.caves)

    def __contains__(self, label: object) -> bool:
        return label in self.caves

    def __repr__(self) -> str:
        return f"CaveGraph(caves={len(self.caves)}, edges={self.edge_count})"
