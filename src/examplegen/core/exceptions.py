"""
examplegen — Canonical Exceptions (v1)

Este módulo define as exceções tipadas fatais do examplegen.

Objetivo:
- Permitir que resolver, store e writer levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para ErrorPayload
- Evitar ValueError/RuntimeError genéricos nas falhas que abortam um flush

Taxonomia coberta aqui (classes fatais):
- lookup estrutural de campo (tipo incompatível ao endereçar um path)
- ciclo de referências entre documentos
- falha de serialização do manifest
- falha de I/O (criação de diretório, escrita de arquivo)

Placeholders malformados e referências não resolvíveis NÃO são exceções:
o valor permanece literal e um warning é registrado no contexto.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ExampleGenException(Exception):
    """Base class para exceções fatais do examplegen.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Resolução de referências
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ReferenceLookupError(ExampleGenException):
    """Campo referenciado existe mas não pode ser lido como string."""


@dataclass(frozen=True)
class ReferenceCycleError(ExampleGenException):
    """Documento referencia (direta ou indiretamente) um documento em resolução."""


@dataclass(frozen=True)
class ReferenceResolutionError(ExampleGenException):
    """Falha fatal ao resolver as referências de um recurso (encapsulada)."""


# ---------------------------------------------------------------------------
# Escrita
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ManifestSerializationError(ExampleGenException):
    """O documento resolvido não pôde ser serializado em YAML."""


@dataclass(frozen=True)
class ManifestWriteError(ExampleGenException):
    """Falha de filesystem ao criar diretório ou escrever o manifest."""
