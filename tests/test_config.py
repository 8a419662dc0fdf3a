import json

import pytest

from shootgen.config import load_shoot_config
from shootgen.errors import ConfigError


def _write(tmp_path, data):
    path = tmp_path / "shoot.json"
    path.write_text(json.dumps(data) if not isinstance(data, str) else data)
    return path


def test_load_camel_case(tmp_path):
    path = _write(tmp_path, {
        "shootName": "tm-shoot",
        "namespace": "garden-it",
        "k8sVersion": "1.27.3",
        "allowPrivilegedContainers": True,
        "shootAnnotations": {"team": "qa"},
    })
    cfg = load_shoot_config(path)
    assert cfg.shoot_name == "tm-shoot"
    assert cfg.namespace == "garden-it"
    assert cfg.k8s_version == "1.27.3"
    assert cfg.allow_privileged_containers is True
    assert cfg.shoot_annotations == {"team": "qa"}


def test_load_snake_case_keeps_flag_unset(tmp_path):
    path = _write(tmp_path, {"shoot_name": "s", "namespace": "ns", "k8s_version": "1.28.0"})
    cfg = load_shoot_config(path)
    assert cfg.allow_privileged_containers is None
    assert cfg.shoot_annotations == {}


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError) as excinfo:
        load_shoot_config(tmp_path / "nope.json")
    assert excinfo.value.kind == "invalid_config"


def test_invalid_json(tmp_path):
    with pytest.raises(ConfigError) as excinfo:
        load_shoot_config(_write(tmp_path, "{not json"))
    assert "not valid JSON" in excinfo.value.message


def test_missing_field(tmp_path):
    with pytest.raises(ConfigError) as excinfo:
        load_shoot_config(_write(tmp_path, {"shootName": "s", "namespace": "ns"}))
    assert any("k8sVersion" in e for e in excinfo.value.details["errors"])


def test_unknown_key(tmp_path):
    with pytest.raises(ConfigError):
        load_shoot_config(_write(tmp_path, {
            "shootName": "s",
            "namespace": "ns",
            "k8sVersion": "1.28.0",
            "region": "eu-west-1",
        }))


def test_not_utf8(tmp_path):
    path = tmp_path / "shoot.json"
    path.write_bytes(b'{"shootName": "\xff"}')
    with pytest.raises(ConfigError) as excinfo:
        load_shoot_config(path)
    assert "not readable" in excinfo.value.message
    assert excinfo.value.details["path"] == str(path)


def test_directory_path(tmp_path):
    with pytest.raises(ConfigError) as excinfo:
        load_shoot_config(tmp_path)
    assert excinfo.value.kind == "invalid_config"
