"""Settings for the cavepaths command line, loaded from YAML or JSON."""

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import List, Optional

import yaml

from .paths import RevisitPolicy


@dataclass
class Settings:
    input: str = "data/input.txt"
    policies: List[str] = field(default_factory=lambda: [p.value for p in RevisitPolicy])
    start_label: str = "start"
    end_label: str = "end"
    max_expansions: Optional[int] = None
    workers: int = 1
    show_paths: int = 0
    year: int = 2021
    day: int = 12
    session: Optional[str] = None
    port: int = 5000

    def revisit_policies(self) -> List[RevisitPolicy]:
        return [RevisitPolicy.parse(name) for name in self.policies]

    def merged(self, **overrides) -> "Settings":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


SETTING_TYPES = {
    "input": (str,),
    "policies": (list,),
    "start_label": (str,),
    "end_label": (str,),
    "max_expansions": (int, type(None)),
    "workers": (int,),
    "show_paths": (int,),
    "year": (int,),
    "day": (int,),
    "session": (str, type(None)),
    "port": (int,),
}


def _check_type(path: str, key: str, value) -> None:
    expected = SETTING_TYPES[key]
    # bool is an int subclass, but "workers: yes" is a typo, not a count
    if isinstance(value, bool) or not isinstance(value, expected):
        names = " or ".join("null" if t is type(None) else t.__name__ for t in expected)
        raise ValueError(f"{path}: setting {key!r} must be {names}, got {value!r}")
    if key == "policies" and not all(isinstance(name, str) for name in value):
        raise ValueError(f"{path}: setting 'policies' must list policy names, got {value!r}")


def load_settings(path: Optional[str] = None) -> Settings:
    """Read settings from ``path``; no path means defaults.

    Both ``.yaml``/``.yml`` and JSON files are accepted. A ``policies`` entry
    may be a single name. Unknown keys are rejected.
    """
    if path is None:
        return Settings()
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"{path} not found")
    if p.suffix.lower() in (".yaml", ".yml"):
        raw = yaml.safe_load(p.read_text()) or {}
    else:
        raw = json.loads(p.read_text())
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping of settings")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"{path}: unknown settings: {', '.join(unknown)}")
    if isinstance(raw.get("policies"), str):
        raw["policies"] = [raw["policies"]]
    for key, value in raw.items():
        _check_type(path, key, value)

    settings = Settings(**raw)
    settings.revisit_policies()
    return settings
