from dataclasses import dataclass
from enum import Enum


class CaveKind(Enum):
    START = "start"
    END = "end"
    SMALL = "small"   # restricted: visited once (or twice, once per path)
    LARGE = "large"   # unrestricted


@dataclass(frozen=True)
class Cave:
    label: str
    kind: CaveKind

    @property
    def is_terminal(self) -> bool:
        return self.kind in (CaveKind.START, CaveKind.END)


def classify(label: str, start_label: str = "start", end_label: str = "end") -> CaveKind:
    """Map a cave label to its kind from its surface form alone.

    The reserved start/end keywords win; otherwise an all-lowercase label is a
    small cave and an all-uppercase label a large one. Anything else (mixed
    case, no letters, empty) has no kind and raises ``ValueError``.
    """
    if label == start_label:
        return CaveKind.START
    if label == end_label:
        return CaveKind.END
    if label.islower():
        return CaveKind.SMALL
    if label.isupper():
        return CaveKind.LARGE
    raise ValueError(f"cannot classify cave label {label!r}")
