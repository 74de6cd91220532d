"""
Test bahia-lanes CLI
====================

Runs main() in-process against a temporary inventory file.
"""

import json
import logging

import pytest

from bahia_cli.cli import main, parse_status_assignment


INVENTORY = """\
segments:
  - name: "Paseo Marítimo"
    length_km: 3.5
  - name: "Vía Verde"
    length_km: 2.0
"""


@pytest.fixture
def inventory(tmp_path):
    path = tmp_path / "lanes.yaml"
    path.write_text(INVENTORY, encoding="utf-8")
    return str(path)


def test_report(inventory, capsys):
    assert main(["report", inventory, "--set-status", "Vía Verde=Cerrado por obras"]) == 0

    out = capsys.readouterr().out
    assert out == (
        "INFORME DE CARRILES BICI - Bahía de Cádiz\n"
        "===========================================\n"
        "- Paseo Marítimo (3.5 km): En servicio\n"
        "- Vía Verde (2.0 km): Cerrado por obras\n"
        "Longitud total: 5.5 km\n"
    )


def test_report_json(inventory, capsys):
    assert main(["report", inventory, "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["segment_count"] == 2
    assert data["total_length_km"] == 5.5
    assert [s["name"] for s in data["segments"]] == ["Paseo Marítimo", "Vía Verde"]


def test_report_unknown_segment(inventory, capsys):
    assert main(["report", inventory, "--set-status", "Inexistente=X"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: El tramo indicado no existe: Inexistente" in captured.err


def test_total(inventory, capsys):
    assert main(["total", inventory]) == 0
    assert capsys.readouterr().out.strip() == "5.5"


def test_status(inventory, capsys):
    assert main(["status", inventory, "Paseo Marítimo"]) == 0
    assert capsys.readouterr().out.strip() == "En servicio"


def test_status_unknown_segment(inventory, capsys):
    assert main(["status", inventory, "Inexistente"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_list(inventory, capsys):
    assert main(["list", inventory]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Paseo Marítimo\t3.5",
        "Vía Verde\t2.0",
    ]


def test_missing_config(tmp_path, capsys):
    assert main(["total", str(tmp_path / "missing.yaml")]) == 1
    assert "Config file not found" in capsys.readouterr().err


def test_invalid_segment_in_config(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("segments:\n  - name: A\n    length_km: -1\n", encoding="utf-8")

    assert main(["report", str(path)]) == 1
    assert "length_km must be > 0" in capsys.readouterr().err


def test_non_string_title_in_config(tmp_path, capsys):
    path = tmp_path / "bad_title.yaml"
    path.write_text("title: 2024\nsegments: []\n", encoding="utf-8")

    assert main(["report", str(path)]) == 1
    assert "title must be a non-empty string" in capsys.readouterr().err


def test_debug_logs_each_loaded_segment(inventory, caplog):
    with caplog.at_level(logging.DEBUG):
        assert main(["--log-level", "DEBUG", "list", inventory]) == 0

    entries = [
        json.loads(r.getMessage())
        for r in caplog.records
        if r.name == "bahia_registry.cli"
    ]
    added = [e for e in entries if e['event'] == 'segment.added']
    assert [e['metadata']['name'] for e in added] == ["Paseo Marítimo", "Vía Verde"]
    assert all(e['level'] == 'DEBUG' for e in added)
    assert entries[len(added)]['event'] == 'registry.loaded'


def test_no_command(capsys):
    assert main([]) == 1
    assert "usage:" in capsys.readouterr().out


def test_parse_status_assignment():
    assert parse_status_assignment("Vía Verde=Cerrado por obras") == (
        "Vía Verde", "Cerrado por obras"
    )
    assert parse_status_assignment("A=b=c") == ("A", "b=c")
    assert parse_status_assignment("A=") == ("A", "")


@pytest.mark.parametrize("raw", ["sin-igual", "=X", "  =X"])
def test_parse_status_assignment_rejects(raw):
    import argparse

    with pytest.raises(argparse.ArgumentTypeError):
        parse_status_assignment(raw)
