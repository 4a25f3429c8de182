"""
Leitura do catálogo de recursos a partir de arquivo.

`load_catalog` é o único ponto de entrada usado pelo runner:

    arquivo (.yaml/.yml/.json) → dados brutos → validate_catalog
        → ResourceCatalog com `digest` preenchido

O `digest` (SHA-256 do JSON canônico dos dados brutos) identifica a
entrada do run no relatório de rastreabilidade. Catálogos com o mesmo
conteúdo produzem o mesmo digest, independentemente do formato do
arquivo e da ordem das chaves.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import yaml

from .errors import (
    CatalogFileNotFoundError,
    CatalogParseError,
    CatalogPathMissingError,
    UnsupportedCatalogFormatError,
)
from .schema import ResourceCatalog, validate_catalog


_PARSERS: Dict[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.loads,
}


def _digest(data: Dict[str, Any]) -> str:
    canonical = json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def read_catalog_file(path: Optional[Union[str, Path]]) -> Dict[str, Any]:
    """
    Lê e interpreta o arquivo do catálogo, sem validação de schema.

    Raises:
        CatalogPathMissingError: caminho ausente ou em branco.
        CatalogFileNotFoundError: arquivo inexistente.
        UnsupportedCatalogFormatError: extensão fora de YAML/JSON.
        CatalogParseError: conteúdo inválido, vazio ou raiz que não é mapa.
    """
    if path is None or not str(path).strip():
        raise CatalogPathMissingError("catalog path is required")

    catalog_file = Path(path)
    parse = _PARSERS.get(catalog_file.suffix.lower())
    if parse is None:
        raise UnsupportedCatalogFormatError(f"unsupported catalog format: {catalog_file.suffix}")
    if not catalog_file.is_file():
        raise CatalogFileNotFoundError(f"catalog file not found: {catalog_file}")

    try:
        data = parse(catalog_file.read_text(encoding="utf-8"))
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise CatalogParseError(f"{catalog_file}: {e}") from e

    if data is None:
        raise CatalogParseError(f"{catalog_file}: catalog file is empty")
    if not isinstance(data, dict):
        raise CatalogParseError(
            f"{catalog_file}: catalog root must be a mapping, got {type(data).__name__}"
        )
    return data


def load_catalog(*, path: Optional[Union[str, Path]]) -> ResourceCatalog:
    """Lê, valida e identifica (digest) o catálogo em `path`."""
    data = read_catalog_file(path)
    return replace(validate_catalog(data), digest=_digest(data))
