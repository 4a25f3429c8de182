"""
Catálogo de recursos do examplegen.

O catálogo materializa, em arquivo, as entradas que o gerador consome de
colaboradores externos: exemplo bruto, omissões, regras de transformação,
external-name e grupo/versão/kind de cada recurso.
"""

from .errors import (
    CatalogError,
    CatalogFileNotFoundError,
    CatalogParseError,
    CatalogPathMissingError,
    CatalogValidationError,
    UnsupportedCatalogFormatError,
)
from .loader import load_catalog, read_catalog_file
from .schema import ResourceCatalog, ResourceEntry, validate_catalog

__all__ = [
    "CatalogError",
    "CatalogFileNotFoundError",
    "CatalogParseError",
    "CatalogPathMissingError",
    "CatalogValidationError",
    "ResourceCatalog",
    "ResourceEntry",
    "UnsupportedCatalogFormatError",
    "load_catalog",
    "read_catalog_file",
    "validate_catalog",
]
