"""Documento de exemplo pendente de resolução/escrita (um por recurso)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict


class ResolutionState(str, Enum):
    """
    Estado de resolução de referências de um documento.

    Transições permitidas (únicas):
        UNRESOLVED → RESOLVING → RESOLVED

    `RESOLVING` distingue um documento em resolução (ciclo, se
    referenciado novamente) de um já resolvido (reuso memoizado).
    """

    UNRESOLVED = "unresolved"
    RESOLVING = "resolving"
    RESOLVED = "resolved"


@dataclass
class ResourceDocument:
    identifier: str
    output_path: Path
    tree: Dict[str, Any]
    state: ResolutionState = field(default=ResolutionState.UNRESOLVED)

    @property
    def resolved(self) -> bool:
        return self.state is ResolutionState.RESOLVED
