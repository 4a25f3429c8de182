"""Interface de linha de comando do examplegen (click)."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

import click

from examplegen.core.catalog import CatalogError
from examplegen.core.config import ConfigError
from examplegen.core.errors import exception_to_error
from examplegen.core.exceptions import ExampleGenException
from examplegen.core.runner import GenerationResult, run_generation
from examplegen.version import __version__


def _summary(result: GenerationResult) -> Dict[str, Any]:
    return {
        "run_id": result.ctx.run_id,
        "status": result.report.run.get("status"),
        "written": [str(p) for p in result.written],
        "warnings": {k: list(v) for k, v in sorted(result.ctx.warnings.items())},
        "report_path": str(result.report_path) if result.report_path else None,
    }


def _format_summary(summary: Dict[str, Any]) -> str:
    lines = [f"Generated {len(summary['written'])} example manifests (run {summary['run_id']})"]
    for path in summary["written"]:
        lines.append(f"  ✓ {path}")
    if summary["warnings"]:
        lines.append("Warnings:")
        for resource, messages in summary["warnings"].items():
            for message in messages:
                lines.append(f"  ! {resource}: {message}")
    if summary["report_path"]:
        lines.append(f"Report: {summary['report_path']}")
    return "\n".join(lines)


@click.group()
@click.version_option(__version__, prog_name="examplegen")
def cli() -> None:
    """Generate resolved example manifests from a resource catalog."""


@cli.command(name="generate")
@click.argument("catalog", type=click.Path(dir_okay=False))
@click.option("--root", "root_dir", default=".", show_default=True,
              type=click.Path(file_okay=False), help="Root output directory")
@click.option("--config", "defaults_path", type=click.Path(dir_okay=False),
              help="Configuration defaults file (YAML/JSON)")
@click.option("--local-config", "local_path", type=click.Path(dir_okay=False),
              help="Optional local overrides file (YAML/JSON)")
@click.option("--run-id", default=None, help="Explicit run identifier")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
def generate(
    catalog: str,
    root_dir: str,
    defaults_path: Optional[str],
    local_path: Optional[str],
    run_id: Optional[str],
    json_output: bool,
) -> None:
    """Resolve references and write one manifest per catalog resource."""
    try:
        result = run_generation(
            catalog_path=catalog,
            root_dir=root_dir,
            defaults_path=defaults_path,
            local_path=local_path,
            run_id=run_id,
        )
    except (ExampleGenException, ConfigError, CatalogError) as e:
        payload = exception_to_error(e).to_dict()
        if json_output:
            click.echo(json.dumps({"status": "failed", "error": payload}, indent=2, sort_keys=True))
        else:
            click.echo(f"Error: {payload['message']}", err=True)
            if payload.get("hint"):
                click.echo(f"Hint: {payload['hint']}", err=True)
        raise SystemExit(1)

    summary = _summary(result)
    if json_output:
        click.echo(json.dumps(summary, indent=2, sort_keys=True))
    else:
        click.echo(_format_summary(summary))


def main() -> None:  # pragma: no cover
    cli()
