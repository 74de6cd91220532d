"""
Test RegistryConfig
===================

YAML inventory loading and seeding a LaneRegistry from it.
"""

import pytest

from bahia_registry import (
    DEFAULT_STATUS,
    REPORT_TITLE,
    LaneRegistry,
    RegistryConfig,
    SegmentConfig,
)


INVENTORY = """\
title: "CARRILES BICI"
default_status: "Operativo"
segments:
  - name: "Paseo Marítimo"
    length_km: 3.5
  - name: "Vía Verde"
    length_km: 2
    status: "Cerrado por obras"
"""


def write(tmp_path, text, name="lanes.yaml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_from_yaml(tmp_path):
    config = RegistryConfig.from_yaml(write(tmp_path, INVENTORY))

    assert config.title == "CARRILES BICI"
    assert config.default_status == "Operativo"
    assert config.segments == [
        SegmentConfig(name="Paseo Marítimo", length_km=3.5),
        SegmentConfig(name="Vía Verde", length_km=2, status="Cerrado por obras"),
    ]


def test_from_yaml_defaults(tmp_path):
    config = RegistryConfig.from_yaml(write(tmp_path, "segments: []\n"))

    assert config.title == REPORT_TITLE
    assert config.default_status == DEFAULT_STATUS
    assert config.segments == []


def test_from_yaml_empty_file(tmp_path):
    config = RegistryConfig.from_yaml(write(tmp_path, ""))
    assert config.segments == []


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        RegistryConfig.from_yaml(tmp_path / "missing.yaml")


def test_from_yaml_invalid_yaml(tmp_path):
    with pytest.raises(ValueError):
        RegistryConfig.from_yaml(write(tmp_path, "segments: [unclosed\n"))


def test_from_yaml_root_not_mapping(tmp_path):
    with pytest.raises(ValueError):
        RegistryConfig.from_yaml(write(tmp_path, "- a\n- b\n"))


def test_from_yaml_segment_missing_length(tmp_path):
    with pytest.raises(ValueError):
        RegistryConfig.from_yaml(write(tmp_path, "segments:\n  - name: A\n"))


@pytest.mark.parametrize("name, length_km", [
    ("", 1.0),
    ("   ", 1.0),
    ("A", 0),
    ("A", -2.5),
    ("A", "3"),
    ("A", True),
    (123, 1.0),
    (None, 1.0),
])
def test_segment_config_validation(name, length_km):
    with pytest.raises(ValueError):
        SegmentConfig(name=name, length_km=length_km)


def test_segment_config_rejects_non_string_status():
    with pytest.raises(ValueError):
        SegmentConfig(name="A", length_km=1.0, status=42)
    assert SegmentConfig(name="A", length_km=1.0, status=None).status is None


@pytest.mark.parametrize("document", [
    "title: 2024\n",
    "default_status: 1\n",
    "default_status: [a, b]\n",
    "segments:\n  - name: 123\n    length_km: 1.0\n",
    "segments:\n  - name: A\n    length_km: 1.0\n    status: 7\n",
])
def test_from_yaml_rejects_non_string_fields(tmp_path, document):
    with pytest.raises(ValueError):
        RegistryConfig.from_yaml(write(tmp_path, document))


def test_registry_config_validation():
    with pytest.raises(ValueError):
        RegistryConfig(title="")
    with pytest.raises(ValueError):
        RegistryConfig(default_status="")


def test_registry_from_config(tmp_path):
    config = RegistryConfig.from_yaml(write(tmp_path, INVENTORY))
    registry = LaneRegistry.from_config(config)

    assert registry.count() == 2
    assert registry.total_length() == 5.5
    assert registry.query_status("Paseo Marítimo") == "Operativo"
    assert registry.query_status("Vía Verde") == "Cerrado por obras"
    assert registry.report().startswith("CARRILES BICI\n")

    # Re-adding falls back to the configured default status
    registry.add_segment("Vía Verde", 2.0)
    assert registry.query_status("Vía Verde") == "Operativo"
