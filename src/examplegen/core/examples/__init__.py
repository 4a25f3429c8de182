"""
Geração de manifests de exemplo com resolução de referências.

Componentes (das folhas para o topo):
    - fieldpath   → nomes hierárquicos e lookup de campos
    - placeholder → parser de `${tipo.nome.campo}` e `file("...")`
    - secrets     → coordenadas (nome, chave) de secrets ilustrativos
    - transform   → omissão/rename/referência de campos por recurso
    - resolver    → substituição memoizada de placeholders entre documentos
    - store       → documentos pendentes, flush e escrita
    - generator   → montagem do manifest e caminho de saída
"""

from .document import ResolutionState, ResourceDocument
from .fieldpath import (
    FieldNotFoundError,
    FieldPathError,
    FieldTypeError,
    InvalidFieldPathError,
    get_hierarchical_name,
    get_string,
    get_value,
    matches_path,
    parse_field_path,
)
from .generator import EXTERNAL_NAME_ANNOTATION, ExampleGenerator
from .placeholder import (
    PlaceholderExpression,
    parse_file_literal,
    parse_placeholder,
    placeholder_inner,
)
from .resolver import ReferenceResolver
from .secrets import SecretCoordinate, derive_secret_coordinate
from .store import DocumentStore
from .transform import TransformationRule, transform_fields

__all__ = [
    "EXTERNAL_NAME_ANNOTATION",
    "DocumentStore",
    "ExampleGenerator",
    "FieldNotFoundError",
    "FieldPathError",
    "FieldTypeError",
    "InvalidFieldPathError",
    "PlaceholderExpression",
    "ReferenceResolver",
    "ResolutionState",
    "ResourceDocument",
    "SecretCoordinate",
    "TransformationRule",
    "derive_secret_coordinate",
    "get_hierarchical_name",
    "get_string",
    "get_value",
    "matches_path",
    "parse_field_path",
    "parse_file_literal",
    "parse_placeholder",
    "placeholder_inner",
    "transform_fields",
]
