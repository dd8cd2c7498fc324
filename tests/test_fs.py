"""Test YAML file handling.

Tests for lazy_brush.utils.fs:
    - ensure_dir creates parents
    - atomic_yaml_dump leaves no temp file behind
    - load_yaml errors: missing file, malformed YAML

Run:
    pytest tests/test_fs.py -v
"""

import pytest
import yaml

from lazy_brush.utils import fs


def test_ensure_dir(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    assert fs.ensure_dir(target) == target
    assert target.is_dir()
    # Existing directory is fine
    fs.ensure_dir(target)


def test_atomic_yaml_dump_and_load(tmp_path):
    path = tmp_path / "cfg" / "brush.yaml"
    data = {"schema": "lazy_brush.v1", "brush": {"radius": 25.0, "enabled": True}}
    fs.atomic_yaml_dump(data, path)

    assert fs.load_yaml(path) == data
    assert not path.with_suffix(".yaml.tmp").exists()


def test_atomic_yaml_dump_keeps_key_order(tmp_path):
    path = tmp_path / "brush.yaml"
    fs.atomic_yaml_dump({"schema": "x", "brush": {}, "stroke": {}}, path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert [line.split(":")[0] for line in lines] == ["schema", "brush", "stroke"]


def test_load_yaml_missing(tmp_path):
    with pytest.raises(FileNotFoundError, match="YAML file not found"):
        fs.load_yaml(tmp_path / "missing.yaml")


def test_load_yaml_malformed(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("brush: {radius: [1, 2\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError, match="Failed to parse"):
        fs.load_yaml(path)


def test_load_yaml_empty_returns_none(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert fs.load_yaml(path) is None
