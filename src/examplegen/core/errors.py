"""
examplegen — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros reportados pelo examplegen.
Erros são artefatos do run: aparecem no relatório de rastreabilidade e na
saída da CLI, devendo ser:

- explícitos
- serializáveis
- acionáveis
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from examplegen.core.exceptions import ExampleGenException


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do examplegen.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Resolução
REFERENCE_LOOKUP_FAILED = "REFERENCE_LOOKUP_FAILED"
REFERENCE_CYCLE_DETECTED = "REFERENCE_CYCLE_DETECTED"
REFERENCE_RESOLUTION_FAILED = "REFERENCE_RESOLUTION_FAILED"

# Escrita
MANIFEST_SERIALIZATION_FAILED = "MANIFEST_SERIALIZATION_FAILED"
MANIFEST_WRITE_FAILED = "MANIFEST_WRITE_FAILED"

# Entradas
CONFIG_INVALID = "CONFIG_INVALID"
CATALOG_INVALID = "CATALOG_INVALID"

# Fallback
GENERATION_FAILED = "GENERATION_FAILED"


_CODES_BY_EXCEPTION = {
    "ReferenceLookupError": REFERENCE_LOOKUP_FAILED,
    "ReferenceCycleError": REFERENCE_CYCLE_DETECTED,
    "ReferenceResolutionError": REFERENCE_RESOLUTION_FAILED,
    "ManifestSerializationError": MANIFEST_SERIALIZATION_FAILED,
    "ManifestWriteError": MANIFEST_WRITE_FAILED,
}


def exception_to_error(exc: Exception) -> ErrorPayload:
    """Converte exceções em ErrorPayload (serializável, acionável).

    Regras:
    - ExampleGenException: já vem com message/details/hint; o código é
      derivado da classe concreta.
    - ConfigError / CatalogError: mapeadas para códigos de entrada inválida.
    - Outras exceções: encapsuladas como GENERATION_FAILED, sem stack trace.
    """
    # imports tardios: config/catalog não dependem deste módulo
    from examplegen.core.catalog.errors import CatalogError
    from examplegen.core.config.errors import ConfigError

    if isinstance(exc, ExampleGenException):
        name = exc.__class__.__name__
        return ErrorPayload(
            type=_CODES_BY_EXCEPTION.get(name, name),
            message=str(exc) or "Erro de geração",
            details=dict(exc.details or {}),
            hint=exc.hint,
        )

    if isinstance(exc, ConfigError):
        return ErrorPayload(
            type=CONFIG_INVALID,
            message=str(exc) or "Configuração inválida",
            details={"exception_class": exc.__class__.__name__},
            hint="Revise o arquivo de configuração (defaults/local) antes de reexecutar.",
        )

    if isinstance(exc, CatalogError):
        return ErrorPayload(
            type=CATALOG_INVALID,
            message=str(exc) or "Catálogo de recursos inválido",
            details={"exception_class": exc.__class__.__name__},
            hint="Corrija o catálogo de recursos para aderir ao formato v1.",
        )

    return ErrorPayload(
        type=GENERATION_FAILED,
        message=str(exc) or "Erro inesperado durante a geração",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique o relatório do run e a configuração de geração.",
    )
