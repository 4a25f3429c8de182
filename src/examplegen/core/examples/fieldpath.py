"""
Nomes hierárquicos e lookup de campos em árvores de parâmetros.

Este módulo concentra o endereçamento de campos aninhados por caminho
lógico, usado em dois momentos distintos:

    - transformação: nomes hierárquicos `prefixo.campo` (índices de lista
      não fazem parte do nome) comparados com listas de omissão e regras
    - resolução: leitura do valor em `spec.forProvider.<campo...>` de um
      documento referenciado, aceitando índices (`a[0].b`) e chaves entre
      colchetes (`a[chave.com.pontos]`)

Taxonomia de erros de lookup:
    - FieldNotFoundError: chave ausente ou índice fora do intervalo
      (benigno: o placeholder é mantido literal)
    - FieldTypeError: tipo incompatível ao endereçar o caminho (fatal)
    - InvalidFieldPathError: caminho sintaticamente inválido (fatal)
"""

from __future__ import annotations

from typing import Any, Iterable, List, Union


Segment = Union[str, int]


class FieldPathError(ValueError):
    """Erro base de endereçamento de campos."""

    def __init__(self, message: str, *, path: str):
        super().__init__(message)
        self.path = path


class FieldNotFoundError(FieldPathError):
    """Nenhum valor existe no caminho informado."""


class FieldTypeError(FieldPathError):
    """O caminho atravessa (ou termina em) um valor de tipo incompatível."""


class InvalidFieldPathError(FieldPathError):
    """O caminho não pôde ser interpretado."""


def get_hierarchical_name(prefix: str, name: str) -> str:
    if not prefix:
        return name
    return f"{prefix}.{name}"


def matches_path(candidate: str, paths: Iterable[str]) -> bool:
    """True se `candidate` for igual a alguma entrada de `paths`."""
    return any(candidate == p for p in paths)


def parse_field_path(path: str) -> List[Segment]:
    """
    Converte `a.b[0].c` em `["a", "b", 0, "c"]`.

    Colchetes com conteúdo que não seja só dígitos ASCII produzem uma chave literal
    (`a[x.y]` → `["a", "x.y"]`).

    Raises:
        InvalidFieldPathError: segmento vazio ou colchete sem par.
    """
    segments: List[Segment] = []
    buf = ""
    i = 0
    n = len(path)
    # True logo após um `]`, onde só `.` ou `[` são aceitos
    after_bracket = False

    while i < n:
        ch = path[i]
        if ch == ".":
            if not buf and not after_bracket:
                raise InvalidFieldPathError(f"segmento vazio em {path!r}", path=path)
            if buf:
                segments.append(buf)
                buf = ""
            after_bracket = False
            if i == n - 1:
                raise InvalidFieldPathError(f"segmento vazio em {path!r}", path=path)
        elif ch == "[":
            if buf:
                segments.append(buf)
                buf = ""
            elif not segments:
                raise InvalidFieldPathError(f"caminho não pode iniciar com '[': {path!r}", path=path)
            end = path.find("]", i)
            if end == -1:
                raise InvalidFieldPathError(f"colchete sem fechamento em {path!r}", path=path)
            inner = path[i + 1:end]
            if not inner:
                raise InvalidFieldPathError(f"colchete vazio em {path!r}", path=path)
            segments.append(int(inner) if inner.isascii() and inner.isdigit() else inner)
            i = end
            after_bracket = True
        elif ch == "]":
            raise InvalidFieldPathError(f"colchete sem abertura em {path!r}", path=path)
        else:
            if after_bracket:
                raise InvalidFieldPathError(f"esperado '.' ou '[' após ']' em {path!r}", path=path)
            buf += ch
        i += 1

    if buf:
        segments.append(buf)
    if not segments:
        raise InvalidFieldPathError("caminho vazio", path=path)
    return segments


def get_value(tree: Any, path: str) -> Any:
    """
    Retorna o valor em `path` dentro de `tree`.

    Raises:
        FieldNotFoundError: chave ausente ou índice fora do intervalo.
        FieldTypeError: chave em não-mapa ou índice em não-lista.
        InvalidFieldPathError: caminho inválido.
    """
    current = tree
    walked = ""
    for segment in parse_field_path(path):
        if isinstance(segment, int):
            walked = f"{walked}[{segment}]"
            if not isinstance(current, list):
                raise FieldTypeError(f"{walked}: não é uma lista", path=path)
            if segment >= len(current):
                raise FieldNotFoundError(f"{walked}: índice fora do intervalo", path=path)
            current = current[segment]
        else:
            walked = get_hierarchical_name(walked, segment)
            if not isinstance(current, dict):
                raise FieldTypeError(f"{walked}: não é um objeto", path=path)
            if segment not in current:
                raise FieldNotFoundError(f"{walked}: campo ausente", path=path)
            current = current[segment]
    return current


def get_string(tree: Any, path: str) -> str:
    """Como `get_value`, exigindo que o valor encontrado seja string."""
    value = get_value(tree, path)
    if not isinstance(value, str):
        raise FieldTypeError(f"{path}: não é uma string ({type(value).__name__})", path=path)
    return value
