"""Depth-first enumeration of every legal start-to-end path through a cave graph.

Two revisit policies share one depth-first walk and differ only in whether a
small cave already on the path may be entered again:

* ``SINGLE_VISIT``: never.
* ``ONE_REVISIT``: once per path, for a single small cave of its choosing.

Paths are tuples of cave labels. Every branch of the search extends its own
tuple, and the graph is never written to, so top-level branches can run in
separate worker processes and their results merged by set union.
"""

import logging
from concurrent.futures import ProcessPoolExecutor
from enum import Enum
from typing import Iterable, List, Optional, Set, Tuple

from .caves import CaveKind
from .errors import ExpansionLimitExceeded, UnboundedSearch, UnreachableTerminal
from .graph import CaveGraph

logger = logging.getLogger(__name__)

Path = Tuple[str, ...]


class RevisitPolicy(Enum):
    SINGLE_VISIT = "single"
    ONE_REVISIT = "revisit"

    @classmethod
    def parse(cls, name: str) -> "RevisitPolicy":
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"unknown revisit policy {name!r} (choose from {choices})") from None


def next_revisit_state(graph: CaveGraph, path: Path, label: str, revisit_used: bool,
                       policy: RevisitPolicy) -> Optional[bool]:
    """Return the revisit flag after stepping into ``label``, or None if illegal."""
    kind = graph.kind(label)
    if kind is CaveKind.START:
        return None
    if kind is CaveKind.SMALL and label in path:
        if policy is RevisitPolicy.ONE_REVISIT and not revisit_used:
            return True
        return None
    return revisit_used


class _Walker:
    def __init__(self, graph: CaveGraph, policy: RevisitPolicy,
                 max_expansions: Optional[int] = None):
        self.graph = graph
        self.policy = policy
        self.max_expansions = max_expansions
        self.expansions = 0
        self.found: Set[Path] = set()

    def walk(self, path: Path, revisit_used: bool = False) -> None:
        """Depth-first walk from ``path`` on an explicit stack of pending branches.

        A step from one large cave straight into another can be repeated
        forever, so it raises UnboundedSearch instead of being followed.
        """
        stack = [(path, revisit_used)]
        while stack:
            path, revisit_used = stack.pop()
            last = path[-1]
            if last == self.graph.end:
                self.found.add(path)
                continue

            self.expansions += 1
            if self.max_expansions is not None and self.expansions > self.max_expansions:
                raise ExpansionLimitExceeded(self.max_expansions)

            last_is_large = self.graph.kind(last) is CaveKind.LARGE
            for label in self.graph.neighbors(last):
                used = next_revisit_state(self.graph, path, label, revisit_used, self.policy)
                if used is None:
                    continue
                if last_is_large and self.graph.kind(label) is CaveKind.LARGE:
                    raise UnboundedSearch(last, label)
                stack.append((path + (label,), used))


def _walk_branch(graph: CaveGraph, policy: RevisitPolicy, max_expansions: Optional[int],
                 first: str) -> Set[Path]:
    walker = _Walker(graph, policy, max_expansions)
    walker.walk((graph.start, first))
    logger.debug("branch via %s: %d paths, %d expansions",
                 first, len(walker.found), walker.expansions)
    return walker.found


def enumerate_paths(graph: CaveGraph, policy: RevisitPolicy = RevisitPolicy.SINGLE_VISIT,
                    *, max_expansions: Optional[int] = None, workers: int = 1) -> Set[Path]:
    """Collect every distinct legal path from ``graph.start`` to ``graph.end``.

    An empty set means no route exists; that is not an error here (see
    :func:`require_paths`). ``max_expansions`` caps the number of caves the
    search extends from, per top-level branch when ``workers`` > 1, and raises
    :class:`ExpansionLimitExceeded` when hit. Two connected large caves on
    a reachable path raise :class:`UnboundedSearch`.
    """
    if workers <= 1:
        walker = _Walker(graph, policy, max_expansions)
        walker.walk((graph.start,))
        logger.debug("%s: %d paths, %d expansions",
                     policy.value, len(walker.found), walker.expansions)
        return walker.found

    start = (graph.start,)
    firsts = sorted(label for label in graph.neighbors(graph.start)
                    if next_revisit_state(graph, start, label, False, policy) is not None)
    found: Set[Path] = set()
    with ProcessPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_walk_branch, graph, policy, max_expansions, first)
                   for first in firsts]
        for future in futures:
            found |= future.result()
    return found


def count_paths(graph: CaveGraph, policy: RevisitPolicy = RevisitPolicy.SINGLE_VISIT,
                **kwargs) -> int:
    return len(enumerate_paths(graph, policy, **kwargs))


def require_paths(graph: CaveGraph, policy: RevisitPolicy = RevisitPolicy.SINGLE_VISIT,
                  **kwargs) -> Set[Path]:
    """Like :func:`enumerate_paths`, but an empty result raises UnreachableTerminal."""
    found = enumerate_paths(graph, policy, **kwargs)
    if not found:
        raise UnreachableTerminal(f"no path from {graph.start!r} to {graph.end!r}")
    return found


def describe_path(path: Iterable[str]) -> str:
    return ",".join(path)


def sorted_paths(paths: Iterable[Path]) -> List[Path]:
    return sorted(paths, key=lambda p: (len(p), p))
