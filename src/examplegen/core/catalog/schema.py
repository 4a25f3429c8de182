"""
Schema canônico — Resource Catalog v1.

Formato:

    catalog_version: "1"
    resources:
      - name: aws_db_instance          # identificador (tipo do recurso)
        group: rds.aws.upbound.io
        version: v1beta1
        kind: Instance
        external_name: ""              # opcional
        example: {...}                 # árvore bruta de parâmetros (ou null)
        omitted_fields: [a.b]          # opcional
        transformations:               # opcional, chave = nome hierárquico de origem
          kms_key_id:
            target: kmsKeyIdRef
            is_reference: true
            is_sensitive: false

Esta implementação evita dependências externas (ex.: Pydantic), como o
restante do core.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from examplegen.core.examples.transform import TransformationRule

from .errors import CatalogValidationError


SUPPORTED_CATALOG_VERSIONS = {"1"}


def _is_non_empty_str(x: Any) -> bool:
    return isinstance(x, str) and bool(x.strip())


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise CatalogValidationError(msg)


@dataclass(frozen=True)
class ResourceEntry:
    """Entradas de geração de um único recurso."""

    name: str
    group: str
    version: str
    kind: str
    example: Optional[Dict[str, Any]]
    omitted_fields: Tuple[str, ...] = ()
    transformations: Dict[str, TransformationRule] = field(default_factory=dict)
    external_name: Optional[str] = None


@dataclass(frozen=True)
class ResourceCatalog:
    """Representação interna explícita do Resource Catalog v1."""

    catalog_version: str
    resources: Tuple[ResourceEntry, ...]
    # SHA-256 do conteúdo bruto; preenchido por load_catalog
    digest: Optional[str] = None

    def __iter__(self) -> Iterator[ResourceEntry]:
        return iter(self.resources)

    def __len__(self) -> int:
        return len(self.resources)

    def sorted_resources(self) -> List[ResourceEntry]:
        return sorted(self.resources, key=lambda r: r.name)


def _validate_rule(where: str, source_path: str, spec: Any) -> TransformationRule:
    _expect(_is_non_empty_str(source_path), f"{where}: transformation keys must be non-empty strings")
    _expect(isinstance(spec, dict), f"{where}.{source_path} must be a mapping")
    target = spec.get("target")
    _expect(_is_non_empty_str(target), f"{where}.{source_path}.target is required")
    is_reference = spec.get("is_reference", False)
    is_sensitive = spec.get("is_sensitive", False)
    _expect(isinstance(is_reference, bool), f"{where}.{source_path}.is_reference must be boolean")
    _expect(isinstance(is_sensitive, bool), f"{where}.{source_path}.is_sensitive must be boolean")
    return TransformationRule(
        source_path=source_path,
        target_name=target,
        is_reference=is_reference,
        is_sensitive=is_sensitive,
    )


def _validate_resource(i: int, r: Any, seen: set) -> ResourceEntry:
    where = f"resources[{i}]"
    _expect(isinstance(r, dict), f"{where} must be a mapping")

    for key in ("name", "group", "version", "kind"):
        _expect(_is_non_empty_str(r.get(key)), f"{where}.{key} is required")
    name = r["name"]
    _expect(name not in seen, f"duplicate resource name: {name}")
    seen.add(name)

    example = r.get("example")
    _expect(example is None or isinstance(example, dict), f"{where}.example must be a mapping or null")

    omitted = r.get("omitted_fields") or []
    _expect(isinstance(omitted, list), f"{where}.omitted_fields must be a list")
    _expect(all(_is_non_empty_str(o) for o in omitted), f"{where}.omitted_fields must contain strings")

    transformations = r.get("transformations") or {}
    _expect(isinstance(transformations, dict), f"{where}.transformations must be a mapping")
    rules = {
        src: _validate_rule(f"{where}.transformations", src, spec)
        for src, spec in transformations.items()
    }

    external_name = r.get("external_name")
    _expect(
        external_name is None or isinstance(external_name, str),
        f"{where}.external_name must be a string",
    )

    return ResourceEntry(
        name=name,
        group=r["group"],
        version=r["version"],
        kind=r["kind"],
        example=example,
        omitted_fields=tuple(omitted),
        transformations=rules,
        external_name=external_name or None,
    )


def validate_catalog(data: Any) -> ResourceCatalog:
    """Valida e materializa um Resource Catalog v1."""
    _expect(isinstance(data, dict), "Resource Catalog must be a mapping/dict")

    cv = data.get("catalog_version")
    _expect(cv is not None and str(cv) in SUPPORTED_CATALOG_VERSIONS, "catalog_version must be '1' in v1")

    resources = data.get("resources")
    _expect(isinstance(resources, list), "resources must be a list")

    seen: set = set()
    entries = [_validate_resource(i, r, seen) for i, r in enumerate(resources)]

    return ResourceCatalog(catalog_version=str(cv), resources=tuple(entries))
