"""
Driver de um run completo de geração de exemplos.

Sequência:
    1. configuração efetiva (defaults + local)
    2. catálogo de recursos (load + validação)
    3. registro de cada recurso em ordem lexicográfica de nome
    4. flush: resolução de referências e escrita dos manifests
    5. relatório de rastreabilidade (quando `report.enabled`)

Qualquer falha durante 3–4 é fatal: é registrada no relatório (com o
ErrorPayload), o relatório é persistido e a exceção é relançada.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from examplegen.core.catalog import load_catalog
from examplegen.core.config import compute_config_hash, load_config
from examplegen.core.context import GenerationContext
from examplegen.core.errors import exception_to_error
from examplegen.core.examples.generator import ExampleGenerator
from examplegen.core.traceability.report import (
    GenerationReport,
    add_event,
    create_report,
    document_written,
    run_failed,
    run_finished,
    save_report,
)
from examplegen.version import __version__


REPORT_FILE_NAME = ".examplegen-report.json"


@dataclass(frozen=True)
class GenerationResult:
    """Resultado agregado de um run de geração."""

    written: List[Path]
    report: GenerationReport
    ctx: GenerationContext
    report_path: Optional[Path] = None


def _report_path(ctx: GenerationContext, root_dir: Path) -> Optional[Path]:
    if not ctx.setting("report", "enabled"):
        return None
    configured = ctx.setting("report", "path")
    if configured:
        p = Path(configured)
        return p if p.is_absolute() else root_dir / p
    return root_dir / ctx.setting("output", "dir_name") / REPORT_FILE_NAME


def _now() -> datetime:
    return datetime.now(timezone.utc)


def run_generation(
    *,
    catalog_path: str,
    root_dir: Union[str, Path],
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
    run_id: Optional[str] = None,
) -> GenerationResult:
    root = Path(root_dir)
    config = load_config(defaults_path=defaults_path, local_path=local_path)
    catalog = load_catalog(path=catalog_path)

    ctx = GenerationContext.create(
        config=config,
        run_id=run_id,
        meta={"root_dir": str(root), "catalog_path": str(catalog_path)},
    )
    report = create_report(
        run_id=ctx.run_id,
        started_at=ctx.created_at,
        examplegen_version=__version__,
        config_hash=compute_config_hash(config),
        catalog_hash=catalog.digest,
    )
    add_event(report, event_type="run_started", ts=ctx.created_at,
              payload={"resources": len(catalog)})
    report_path = _report_path(ctx, root)

    generator = ExampleGenerator(root, ctx=ctx)
    try:
        for entry in catalog.sorted_resources():
            generator.generate(
                name=entry.name,
                group=entry.group,
                version=entry.version,
                kind=entry.kind,
                example=entry.example,
                omitted_fields=entry.omitted_fields,
                transformations=entry.transformations,
                external_name=entry.external_name,
            )
        written = generator.store_examples()
    except Exception as e:
        run_failed(report, ts=_now(), error=exception_to_error(e).to_dict())
        if report_path is not None:
            save_report(report, report_path)
        raise

    for doc in generator.store:
        document_written(
            report,
            resource=doc.identifier,
            output_path=str(doc.output_path),
            ts=_now(),
            warnings=ctx.warnings.get(doc.identifier),
        )
    run_finished(report, ts=_now())
    if report_path is not None:
        save_report(report, report_path)

    return GenerationResult(written=written, report=report, ctx=ctx, report_path=report_path)
