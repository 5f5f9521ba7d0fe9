"""Exceptions raised while building cave graphs and walking them.

Errors carrying structured fields keep those fields as their ``args`` and
format the message in ``__str__``, so they survive the trip back from a
worker process unchanged.
"""


class CavePathsError(ValueError):
    """Base class for every error raised by cavepaths."""


class MalformedGraph(CavePathsError):
    """The edge list cannot form a valid cave system."""


class UnreachableTerminal(CavePathsError):
    """No legal path leads from the start cave to the end cave."""


class ExpansionLimitExceeded(CavePathsError):
    """The search expanded more caves than its budget allows."""

    def __init__(self, limit: int):
        super().__init__(limit)
        self.limit = limit

    def __str__(self) -> str:
        return f"path search expanded more than {self.limit} caves"


class UnboundedSearch(CavePathsError):
    """Two connected large caves make the number of paths infinite."""

    def __init__(self, first: str, second: str):
        super().__init__(first, second)
        self.first = first
        self.second = second

    def __str__(self) -> str:
        return (f"large caves {self.first} and {self.second} are connected; "
                "paths can bounce between them forever")


class InputFormatError(CavePathsError):
    """An edge-list line is not of the form ``a-b``."""

    def __init__(self, line_no: int, line: str):
        super().__init__(line_no, line)
        self.line_no = line_no
        self.line = line

    def __str__(self) -> str:
        return f"line {self.line_no}: expected '<cave>-<cave>', got {self.line!r}"
