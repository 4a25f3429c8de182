"""Erros canônicos do catálogo de recursos.

O catálogo é a entrada que descreve, por recurso, o exemplo bruto, as
omissões e as regras de transformação. Falhas de carregamento/validação
devem produzir erros explícitos e estáveis.
"""


class CatalogError(Exception):
    """Erro base do domínio de catálogo."""


class CatalogPathMissingError(CatalogError):
    """Nenhum caminho de catálogo foi informado."""


class CatalogFileNotFoundError(CatalogError):
    """Arquivo de catálogo não existe no caminho informado."""


class UnsupportedCatalogFormatError(CatalogError):
    """Formato de catálogo não suportado (v1: YAML/JSON)."""


class CatalogParseError(CatalogError):
    """Falha ao parsear YAML/JSON."""


class CatalogValidationError(CatalogError):
    """Catálogo não é estruturalmente válido segundo o schema v1."""
