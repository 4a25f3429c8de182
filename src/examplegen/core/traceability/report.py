"""
Relatório de geração — rastreabilidade de um run do examplegen.

O relatório consolida, de forma determinística e auditável:
    - metadados do run (run_id, started_at, versão)
    - hashes das entradas (configuração efetiva e catálogo)
    - estado final de cada documento escrito
    - Event Log ordenado de eventos explícitos

Princípios fundamentais:
    - Nenhum evento é emitido implicitamente
    - A ordem do Event Log reflete a ordem real das chamadas
    - O relatório é serializável e reconstruível (round-trip)

Decisões arquiteturais:
    - UTC é o timezone canônico para todos os timestamps
    - O formato de persistência é JSON determinístico

Limites explícitos:
    - Não resolve referências nem escreve manifests
    - Não decide políticas de falha
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


def _ensure_tzaware_utc(dt: datetime) -> datetime:
    """Timestamps timezone-naive são assumidos como UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _iso(dt: datetime) -> str:
    return _ensure_tzaware_utc(dt).isoformat()


@dataclass
class GenerationReport:
    """
    Registro de um run de geração.

    Campos principais:
        - run: metadados da execução (run_id, started_at, status, ...)
        - inputs: hashes da configuração e do catálogo
        - documents: estado por recurso (output_path, warnings)
        - events: Event Log ordenado
    """

    run: Dict[str, Any]
    inputs: Dict[str, Any]
    documents: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "run": dict(self.run),
            "inputs": dict(self.inputs),
            "documents": {k: dict(v) for k, v in self.documents.items()},
            "events": [dict(e) for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationReport":
        return cls(
            run=dict(data.get("run", {})),
            inputs=dict(data.get("inputs", {})),
            documents={k: dict(v) for k, v in (data.get("documents", {}) or {}).items()},
            events=[dict(e) for e in (data.get("events", []) or [])],
        )


def create_report(
    *,
    run_id: str,
    started_at: datetime,
    examplegen_version: str,
    config_hash: str,
    catalog_hash: str,
) -> GenerationReport:
    """
    Cria o relatório inicial de um run.

    ⚠️ Importante: esta função **não emite eventos implicitamente**.
    """
    return GenerationReport(
        run={
            "run_id": run_id,
            "started_at": _iso(started_at),
            "examplegen_version": examplegen_version,
            "status": "running",
        },
        inputs={
            "config_hash": config_hash,
            "catalog_hash": catalog_hash,
        },
    )


def add_event(
    report: GenerationReport,
    *,
    event_type: str,
    ts: datetime,
    resource: Optional[str] = None,
    payload: Optional[Dict[str, Any]] = None,
) -> None:
    """Adiciona um evento explícito ao Event Log (ordem de chamada preservada)."""
    ev: Dict[str, Any] = {"event_type": event_type, "timestamp": _iso(ts)}
    if resource is not None:
        ev["resource"] = resource
    if payload is not None:
        ev["payload"] = payload
    report.events.append(ev)


def document_written(
    report: GenerationReport,
    *,
    resource: str,
    output_path: str,
    ts: datetime,
    warnings: Optional[List[str]] = None,
) -> None:
    report.documents[resource] = {
        "resource": resource,
        "status": "written",
        "output_path": output_path,
        "written_at": _iso(ts),
        "warnings": list(warnings or []),
    }
    add_event(report, event_type="document_written", ts=ts, resource=resource,
              payload={"output_path": output_path})


def run_finished(report: GenerationReport, *, ts: datetime) -> None:
    report.run.update(
        {
            "status": "success",
            "finished_at": _iso(ts),
            "documents_written": len(report.documents),
        }
    )
    add_event(report, event_type="run_finished", ts=ts,
              payload={"documents_written": len(report.documents)})


def run_failed(report: GenerationReport, *, ts: datetime, error: Dict[str, Any]) -> None:
    """Registra a falha fatal do run com o ErrorPayload serializado."""
    report.run.update(
        {
            "status": "failed",
            "finished_at": _iso(ts),
            "error": dict(error),
        }
    )
    add_event(report, event_type="run_failed", ts=ts,
              resource=(error.get("details") or {}).get("resource"),
              payload={"type": error.get("type")})


def save_report(report: GenerationReport, path: Path) -> None:
    """Persiste o relatório em JSON determinístico (indentado, chaves ordenadas)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(report.to_dict(), ensure_ascii=False, indent=2, sort_keys=True),
        encoding="utf-8",
    )


def load_report(path: Path) -> GenerationReport:
    data = json.loads(path.read_text(encoding="utf-8"))
    return GenerationReport.from_dict(data)
