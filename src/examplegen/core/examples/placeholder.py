"""
Parser de placeholders de referência.

Sintaxe reconhecida (valor string inteiro):

    ${<tipo do recurso>.<nome do recurso>.<campo>[.<campo>...]}
    ${file("<caminho>")}

Regras:
    - apenas strings que são exatamente `${...}` são placeholders; não há
      interpolação parcial nem avaliação de expressões
    - menos de 3 segmentos após o split por `.` → não é placeholder
      (ignorado silenciosamente, não é erro)
    - o nome do recurso (segmento 1) é exigido pela sintaxe mas não é usado
      na resolução
    - `file("...")` é reconhecido apenas pelo derivador de secrets

Os padrões são compilados uma única vez, no import do módulo.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional, Tuple


PLACEHOLDER_PATTERN = re.compile(r"\$\{(.+)\}")
FILE_LITERAL_PATTERN = re.compile(r'file\("(.+)"\)')

# raiz, no manifest, dos campos endereçados por um placeholder
FOR_PROVIDER_PATH = "spec.forProvider"


@dataclass(frozen=True)
class PlaceholderExpression:
    """Forma interpretada de `${tipo.nome.campo...}`."""

    resource_identifier: str
    resource_name: str
    field_path_segments: Tuple[str, ...]

    @property
    def field_path(self) -> str:
        return ".".join(self.field_path_segments)

    @property
    def manifest_path(self) -> str:
        return f"{FOR_PROVIDER_PATH}.{self.field_path}"


def placeholder_inner(value: Any) -> Optional[str]:
    """Retorna o conteúdo entre `${` e `}` ou None se `value` não for placeholder."""
    if not isinstance(value, str):
        return None
    m = PLACEHOLDER_PATTERN.fullmatch(value)
    if m is None:
        return None
    return m.group(1)


def parse_placeholder(value: Any) -> Optional[PlaceholderExpression]:
    inner = placeholder_inner(value)
    if inner is None:
        return None
    parts = inner.split(".")
    if len(parts) < 3:
        return None
    return PlaceholderExpression(
        resource_identifier=parts[0],
        resource_name=parts[1],
        field_path_segments=tuple(parts[2:]),
    )


def parse_file_literal(inner: str) -> Optional[str]:
    """Caminho dentro de `file("...")` em um conteúdo de placeholder, se houver."""
    m = FILE_LITERAL_PATTERN.search(inner)
    if m is None:
        return None
    return m.group(1)
