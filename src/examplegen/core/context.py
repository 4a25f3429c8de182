"""
Contexto de execução compartilhado de um run de geração.

O `GenerationContext` é o meio canônico para:
    - expor a configuração efetiva ao generator, store e resolver
    - registrar eventos estruturados de execução (log)
    - coletar warnings não fatais por recurso (ex.: referência não resolvível)

Invariantes:
    - Eventos sempre incluem `run_id`, `resource`, `level` e `timestamp`
    - Warnings são agrupados pelo identificador do recurso
    - Cada run possui seu próprio contexto (sem estado global)

Limites explícitos:
    - Não resolve referências
    - Não persiste eventos automaticamente (ver traceability.report)
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from examplegen.core.config.loader import DEFAULT_CONFIG


@dataclass
class GenerationContext:
    """
    Contexto de um run de geração de exemplos.

    Campos canônicos:
    - run_id: identificador único da execução
    - created_at: timestamp UTC de criação do contexto
    - config: configuração efetiva (defaults + local deep-merge)
    - meta: metadados livres (ex.: root_dir, catalog_path)
    - events: log estruturado de eventos
    - warnings: warnings por recurso
    """

    run_id: str
    created_at: datetime
    config: Dict[str, Any]
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    @classmethod
    def create(
        cls,
        *,
        config: Optional[Dict[str, Any]] = None,
        run_id: Optional[str] = None,
        meta: Optional[Dict[str, Any]] = None,
    ) -> "GenerationContext":
        return cls(
            run_id=run_id or uuid4().hex,
            created_at=datetime.now(timezone.utc),
            config=config if config is not None else deepcopy(DEFAULT_CONFIG),
            meta=dict(meta or {}),
        )

    # -----------------------------
    # Config access
    # -----------------------------
    def setting(self, section: str, key: str) -> Any:
        """Lê `config[section][key]`, caindo para `DEFAULT_CONFIG`."""
        value = (self.config.get(section) or {}).get(key)
        if value is None:
            return DEFAULT_CONFIG[section][key]
        return value

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, resource: Optional[str], level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "resource": resource,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, resource: str, message: str) -> None:
        if resource not in self.warnings:
            self.warnings[resource] = []
        self.warnings[resource].append(message)
        self.log(resource=resource, level="WARNING", message=message)
