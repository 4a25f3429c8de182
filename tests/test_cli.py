# tests/test_cli.py
"""
Testes da CLI `examplegen` (click).

Os testes exercitam o comando `generate` via `CliRunner`, verificando a
saída humana, a saída JSON e o código de saída em falhas.
"""

import json
from pathlib import Path

from click.testing import CliRunner

from examplegen.cli import cli
from examplegen.version import __version__


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_generate_human_output(tmp_path: Path, write_yaml, catalog_dict):
    catalog = write_yaml(tmp_path / "catalog.yaml", catalog_dict)
    result = CliRunner().invoke(
        cli, ["generate", str(catalog), "--root", str(tmp_path), "--run-id", "run-cli"]
    )
    assert result.exit_code == 0, result.output
    assert "Generated 2 example manifests (run run-cli)" in result.output
    assert "subnet.yaml" in result.output
    assert (tmp_path / "examples-generated" / "ec2" / "vpc.yaml").exists()


def test_generate_json_output(tmp_path: Path, write_yaml, catalog_dict):
    catalog = write_yaml(tmp_path / "catalog.yaml", catalog_dict)
    result = CliRunner().invoke(
        cli, ["generate", str(catalog), "--root", str(tmp_path), "--json-output"]
    )
    assert result.exit_code == 0, result.output
    summary = json.loads(result.output)
    assert summary["status"] == "success"
    assert len(summary["written"]) == 2
    assert summary["warnings"] == {}
    assert summary["report_path"].endswith(".examplegen-report.json")


def test_generate_with_local_config(tmp_path: Path, write_yaml, catalog_dict):
    catalog = write_yaml(tmp_path / "catalog.yaml", catalog_dict)
    local = write_yaml(tmp_path / "local.yaml", {"output": {"dir_name": "examples"}, "report": {"enabled": False}})
    result = CliRunner().invoke(
        cli,
        ["generate", str(catalog), "--root", str(tmp_path), "--local-config", str(local), "--json-output"],
    )
    assert result.exit_code == 0, result.output
    summary = json.loads(result.output)
    assert summary["report_path"] is None
    assert (tmp_path / "examples" / "ec2" / "subnet.yaml").exists()


def test_generate_failure_exits_with_error_payload(tmp_path: Path, write_yaml, catalog_dict):
    catalog_dict["resources"][0]["example"]["vpc_cidr"] = "${aws_vpc.main.tags}"
    catalog = write_yaml(tmp_path / "catalog.yaml", catalog_dict)
    result = CliRunner().invoke(
        cli, ["generate", str(catalog), "--root", str(tmp_path), "--json-output"]
    )
    assert result.exit_code == 1
    payload = json.loads(result.output)
    assert payload["status"] == "failed"
    assert payload["error"]["type"] == "REFERENCE_RESOLUTION_FAILED"


def test_generate_missing_catalog_reports_catalog_error(tmp_path: Path):
    result = CliRunner().invoke(
        cli, ["generate", str(tmp_path / "missing.yaml"), "--root", str(tmp_path), "--json-output"]
    )
    assert result.exit_code == 1
    assert json.loads(result.output)["error"]["type"] == "CATALOG_INVALID"
