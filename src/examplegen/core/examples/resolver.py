"""
Resolução de placeholders entre documentos de exemplo.

Cada string `${tipo.nome.campo...}` em um documento é substituída pelo
valor string encontrado em `spec.forProvider.<campo...>` na forma
*resolvida* do documento do recurso `tipo`.

Algoritmo:
    - busca em profundidade; mapas: todos os valores; listas: apenas
      elementos que são mapas (mesma convenção da transformação)
    - o documento referenciado é resolvido antes do lookup (recursão
      direta, memoizada pelo estado do documento)
    - cada documento é resolvido no máximo uma vez

Política de falhas:
    - string que não é placeholder: inalterada
    - recurso referenciado desconhecido: inalterada (warning)
    - campo referenciado ausente: inalterada (warning)
    - tipo incompatível no lookup: ReferenceLookupError (fatal)
    - referência a documento em resolução (inclusive o próprio documento):
      com `on_cycle="tolerate"` (padrão) o lookup é feito no documento
      parcialmente resolvido, sem recursão (warning); com
      `on_cycle="error"` levanta ReferenceCycleError
    - uma falha fatal devolve os documentos em resolução ao estado
      UNRESOLVED, permitindo nova tentativa
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from examplegen.core.context import GenerationContext
from examplegen.core.exceptions import ReferenceCycleError, ReferenceLookupError

from .document import ResolutionState, ResourceDocument
from .fieldpath import FieldNotFoundError, FieldPathError, get_string
from .placeholder import PlaceholderExpression, parse_placeholder


class ReferenceResolver:
    """Resolve referências de documentos registrados, sob demanda."""

    def __init__(
        self,
        documents: Mapping[str, ResourceDocument],
        *,
        on_cycle: str = "tolerate",
        ctx: Optional[GenerationContext] = None,
    ):
        if on_cycle not in ("error", "tolerate"):
            raise ValueError(f"on_cycle inválido: {on_cycle!r}")
        self.documents = documents
        self.on_cycle = on_cycle
        self.ctx = ctx
        # documentos em resolução, do mais externo ao corrente
        self._chain: List[str] = []

    def resolve_document(self, doc: ResourceDocument) -> None:
        if doc.state is ResolutionState.RESOLVED:
            return
        if doc.state is ResolutionState.RESOLVING:
            self._on_cycle(doc)
            return

        doc.state = ResolutionState.RESOLVING
        self._chain.append(doc.identifier)
        try:
            self._resolve_mapping(doc, doc.tree)
        except BaseException:
            doc.state = ResolutionState.UNRESOLVED
            raise
        finally:
            self._chain.pop()
        doc.state = ResolutionState.RESOLVED

        if self.ctx is not None:
            self.ctx.log(resource=doc.identifier, level="INFO", message="document resolved")

    # ------------------------------------------------------------------
    # Walk
    # ------------------------------------------------------------------
    def _resolve_mapping(self, doc: ResourceDocument, node: Dict[str, Any]) -> None:
        for key, value in list(node.items()):
            if isinstance(value, dict):
                self._resolve_mapping(doc, value)
            elif isinstance(value, list):
                for element in value:
                    if isinstance(element, dict):
                        self._resolve_mapping(doc, element)
            elif isinstance(value, str):
                resolved = self._resolve_string(doc, value)
                if resolved is not None:
                    node[key] = resolved

    def _resolve_string(self, doc: ResourceDocument, value: str) -> Optional[str]:
        expr = parse_placeholder(value)
        if expr is None:
            return None

        target = self.documents.get(expr.resource_identifier)
        if target is None:
            self._warn(doc, f"unknown resource in reference {value}")
            return None

        self.resolve_document(target)

        try:
            return get_string(target.tree, expr.manifest_path)
        except FieldNotFoundError:
            self._warn(doc, f"field not found for reference {value}")
            return None
        except FieldPathError as e:
            raise ReferenceLookupError(
                message=f"não foi possível ler {expr.manifest_path} de {target.identifier}: {e}",
                details=self._lookup_details(doc, expr),
                hint="Ajuste o placeholder para apontar para um campo string do recurso referenciado.",
            ) from e

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _on_cycle(self, doc: ResourceDocument) -> None:
        chain = self._chain[self._chain.index(doc.identifier):] + [doc.identifier]
        if self.on_cycle == "error":
            raise ReferenceCycleError(
                message="ciclo de referências: " + " -> ".join(chain),
                details={"resource": self._chain[-1], "chain": chain},
                hint="Remova a referência circular do exemplo ou configure resolution.on_cycle=tolerate.",
            )
        self._warn_resource(self._chain[-1], "reference cycle tolerated: " + " -> ".join(chain))

    def _lookup_details(self, doc: ResourceDocument, expr: PlaceholderExpression) -> Dict[str, Any]:
        return {
            "resource": doc.identifier,
            "referenced_resource": expr.resource_identifier,
            "field_path": expr.manifest_path,
        }

    def _warn(self, doc: ResourceDocument, message: str) -> None:
        self._warn_resource(doc.identifier, message)

    def _warn_resource(self, resource: str, message: str) -> None:
        if self.ctx is not None:
            self.ctx.add_warning(resource=resource, message=message)
