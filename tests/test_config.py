import json

import pytest

from cavepaths.config import Settings, load_settings
from cavepaths.paths import RevisitPolicy


def test_defaults():
    s = load_settings()
    assert s.revisit_policies() == [RevisitPolicy.SINGLE_VISIT, RevisitPolicy.ONE_REVISIT]
    assert s.max_expansions is None
    assert (s.year, s.day, s.port) == (2021, 12, 5000)


def test_shipped_config(data_dir):
    s = load_settings(str(data_dir / "config.yaml"))
    assert s.input == "data/sample_large.txt"
    assert s.max_expansions == 5000000


def test_yaml_single_policy(tmp_path):
    p = tmp_path / "settings.yaml"
    p.write_text("policies: revisit\nworkers: 4\n")
    s = load_settings(str(p))
    assert s.revisit_policies() == [RevisitPolicy.ONE_REVISIT]
    assert s.workers == 4


def test_json_settings(tmp_path):
    p = tmp_path / "settings.json"
    p.write_text(json.dumps({"input": "caves.txt", "show_paths": 3}))
    s = load_settings(str(p))
    assert (s.input, s.show_paths) == ("caves.txt", 3)


def test_empty_yaml_is_defaults(tmp_path):
    p = tmp_path / "settings.yaml"
    p.write_text("")
    assert load_settings(str(p)) == Settings()


def test_unknown_key(tmp_path):
    p = tmp_path / "settings.yaml"
    p.write_text("inptu: caves.txt\n")
    with pytest.raises(ValueError, match="unknown settings: inptu"):
        load_settings(str(p))


def test_bad_policy(tmp_path):
    p = tmp_path / "settings.yaml"
    p.write_text("policies: [single, thrice]\n")
    with pytest.raises(ValueError, match="thrice"):
        load_settings(str(p))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(str(tmp_path / "absent.yaml"))


def test_merged_ignores_none():
    s = Settings(input="a.txt", workers=2).merged(input=None, workers=3, show_paths=None)
    assert (s.input, s.workers, s.show_paths) == ("a.txt", 3, 0)


@pytest.mark.parametrize("line, key", [
    ("workers: '2'", "workers"),
    ("workers: yes", "workers"),
    ("port: 50.5", "port"),
    ("input: [a.txt]", "input"),
    ("policies: [1, 2]", "policies"),
    ("max_expansions: lots", "max_expansions"),
])
def test_wrong_value_types(tmp_path, line, key):
    p = tmp_path / "settings.yaml"
    p.write_text(line + "\n")
    with pytest.raises(ValueError, match=f"setting '{key}' must"):
        load_settings(str(p))


def test_null_allowed_where_optional(tmp_path):
    p = tmp_path / "settings.yaml"
    p.write_text("max_expansions: null\nsession: null\n")
    s = load_settings(str(p))
    assert s.max_expansions is None
    assert s.session is None
