"""
Transformação de campos de um documento de exemplo (por recurso).

Aplicada uma única vez por recurso, antes de qualquer resolução de
referências, sobre a árvore de parâmetros (`spec.forProvider`).

Ordem canônica em cada nó (com nome hierárquico `prefixo.chave`):
    1. omissão: remove no máximo um filho por entrada de `omitted_fields`
    2. recursão estrutural: mapas recebem o prefixo estendido; listas
       propagam o mesmo prefixo estendido a cada elemento que for mapa
       (índices não fazem parte do nome; demais elementos são ignorados)
    3. regras: cada regra cujo `source_path` casa com um filho remove
       esse filho e insere `target_name` com
         - o valor original (rename simples)
         - `{name: "example"}` (referência)
         - `{name, namespace, key}` (referência a secret)
       referências preservam a forma: valor original lista → lista de
       um elemento

Entradas de omissão ou regras sem correspondência são no-ops.
A árvore é mutada in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional

from .fieldpath import get_hierarchical_name, matches_path
from .secrets import derive_secret_coordinate


DEFAULT_REFERENCE_NAME = "example"
DEFAULT_SECRET_NAMESPACE = "crossplane-system"


@dataclass(frozen=True)
class TransformationRule:
    """Instrução de rename/referência para um campo (`source_path`)."""

    source_path: str
    target_name: str
    is_reference: bool = False
    is_sensitive: bool = False


def _ref_field(original: Any, ref: Dict[str, Any]) -> Any:
    if isinstance(original, list):
        return [ref]
    return ref


def _transformed_value(
    rule: TransformationRule,
    original: Any,
    *,
    reference_name: str,
    secret_namespace: str,
) -> Any:
    if not rule.is_reference:
        return original
    if not rule.is_sensitive:
        return _ref_field(original, {"name": reference_name})
    coord = derive_secret_coordinate(original)
    return _ref_field(
        original,
        {
            "name": coord.secret_name,
            "namespace": secret_namespace,
            "key": coord.secret_key,
        },
    )


def transform_fields(
    params: Dict[str, Any],
    omitted_fields: Iterable[str],
    transformations: Optional[Mapping[str, TransformationRule]],
    name_prefix: str = "",
    *,
    reference_name: str = DEFAULT_REFERENCE_NAME,
    secret_namespace: str = DEFAULT_SECRET_NAMESPACE,
) -> Dict[str, Any]:
    """
    Aplica omissões e regras de transformação recursivamente a `params`.

    Args:
        params: nó mapa corrente (mutado in place).
        omitted_fields: nomes hierárquicos a remover.
        transformations: regras indexadas pelo nome hierárquico de origem.
        name_prefix: nome hierárquico do nó corrente ("" na raiz).

    Returns:
        O próprio `params`, já transformado.
    """
    omitted = list(omitted_fields)
    rules = dict(transformations or {})

    # nomes hierárquicos são únicos por nível: cada entrada remove no máximo um filho
    for n in list(params):
        if matches_path(get_hierarchical_name(name_prefix, n), omitted):
            del params[n]

    for n, v in params.items():
        child_prefix = get_hierarchical_name(name_prefix, n)
        if isinstance(v, dict):
            transform_fields(
                v, omitted, rules, child_prefix,
                reference_name=reference_name,
                secret_namespace=secret_namespace,
            )
        elif isinstance(v, list):
            for e in v:
                if isinstance(e, dict):
                    transform_fields(
                        e, omitted, rules, child_prefix,
                        reference_name=reference_name,
                        secret_namespace=secret_namespace,
                    )

    for hn, rule in rules.items():
        for n, v in list(params.items()):
            if hn == get_hierarchical_name(name_prefix, n):
                del params[n]
                params[rule.target_name] = _transformed_value(
                    rule, v,
                    reference_name=reference_name,
                    secret_namespace=secret_namespace,
                )
                break

    return params
