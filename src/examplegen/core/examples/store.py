"""
Store canônica de documentos de exemplo e escrita dos manifests.

Fluxo:
    register (um documento não resolvido por recurso)
        → flush: resolve todos → remove campos de controle → serializa
          em YAML → cria diretório → escreve (sobrescrevendo)

Decisões (v1):
- Todos os documentos são resolvidos antes da primeira escrita: uma falha
  de resolução não deixa manifests parciais, e a remoção de campos de
  controle (ex.: `depends_on`) nunca afeta o lookup de outro documento
- Iteração em ordem lexicográfica de identificador (saída independente
  da ordem de registro)
- Formato: YAML com chaves ordenadas e estilo em bloco
- Qualquer falha é fatal para o flush inteiro e carrega o recurso

Limites explícitos:
- Não é segura para uso concorrente
- A escrita não é transacional: uma falha de I/O pode deixar parte dos
  arquivos escritos
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

import yaml

from examplegen.core.context import GenerationContext
from examplegen.core.exceptions import (
    ExampleGenException,
    ManifestSerializationError,
    ManifestWriteError,
    ReferenceResolutionError,
)

from .document import ResourceDocument
from .resolver import ReferenceResolver


class DocumentStore:
    """Documentos pendentes indexados pelo identificador do recurso."""

    def __init__(
        self,
        *,
        ctx: Optional[GenerationContext] = None,
        on_cycle: Optional[str] = None,
        strip_fields: Optional[Iterable[str]] = None,
    ):
        self.ctx = ctx
        self.on_cycle = on_cycle or (ctx.setting("resolution", "on_cycle") if ctx else "tolerate")
        if strip_fields is None:
            strip_fields = ctx.setting("resolution", "strip_fields") if ctx else ["depends_on"]
        self.strip_fields: List[str] = list(strip_fields)
        self._documents: Dict[str, ResourceDocument] = {}

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------
    def register(
        self,
        identifier: str,
        output_path: Union[str, Path],
        tree: Dict[str, Any],
    ) -> ResourceDocument:
        """Insere um documento não resolvido; um registro anterior é substituído."""
        doc = ResourceDocument(identifier=identifier, output_path=Path(output_path), tree=tree)
        self._documents[identifier] = doc
        if self.ctx is not None:
            self.ctx.log(
                resource=identifier,
                level="INFO",
                message="document registered",
                output_path=str(doc.output_path),
            )
        return doc

    def get(self, identifier: str) -> ResourceDocument:
        return self._documents[identifier]

    @property
    def documents(self) -> Dict[str, ResourceDocument]:
        return dict(self._documents)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[ResourceDocument]:
        return (self._documents[i] for i in sorted(self._documents))

    # ------------------------------------------------------------------
    # Resolve / write
    # ------------------------------------------------------------------
    def resolve_all(self) -> None:
        """Resolve as referências de todos os documentos (idempotente)."""
        resolver = ReferenceResolver(self._documents, on_cycle=self.on_cycle, ctx=self.ctx)
        for doc in self:
            try:
                resolver.resolve_document(doc)
            except ExampleGenException as e:
                raise ReferenceResolutionError(
                    message=f"não foi possível resolver referências do recurso {doc.identifier}: {e}",
                    details={
                        **e.details,
                        "resource": doc.identifier,
                        "origin_resource": e.details.get("resource"),
                        "cause": e.__class__.__name__,
                    },
                    hint=e.hint,
                ) from e

    def flush(self) -> List[Path]:
        """
        Resolve todos os documentos e escreve seus manifests.

        Returns:
            List[Path]: caminhos escritos, em ordem de identificador.

        Raises:
            ReferenceResolutionError: falha fatal de resolução.
            ManifestSerializationError: falha de serialização YAML.
            ManifestWriteError: falha de filesystem.
        """
        self.resolve_all()

        written: List[Path] = []
        for doc in self:
            self._strip_control_fields(doc)
            text = self._serialize(doc)
            self._write(doc, text)
            written.append(doc.output_path)
        return written

    def _strip_control_fields(self, doc: ResourceDocument) -> None:
        spec = doc.tree.get("spec")
        for_provider = spec.get("forProvider") if isinstance(spec, dict) else None
        if not isinstance(for_provider, dict):
            return
        for name in self.strip_fields:
            for_provider.pop(name, None)

    def _serialize(self, doc: ResourceDocument) -> str:
        try:
            return yaml.safe_dump(
                doc.tree,
                sort_keys=True,
                default_flow_style=False,
                allow_unicode=True,
            )
        except yaml.YAMLError as e:
            raise ManifestSerializationError(
                message=f"não foi possível serializar o manifest do recurso {doc.identifier}: {e}",
                details={"resource": doc.identifier},
                hint="O exemplo contém valores não representáveis em YAML.",
            ) from e

    def _write(self, doc: ResourceDocument, text: str) -> None:
        manifest_dir = doc.output_path.parent
        try:
            manifest_dir.mkdir(mode=0o750, parents=True, exist_ok=True)
        except OSError as e:
            raise ManifestWriteError(
                message=f"não foi possível criar o diretório {manifest_dir}: {e}",
                details={"resource": doc.identifier, "path": str(manifest_dir)},
            ) from e

        try:
            doc.output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise ManifestWriteError(
                message=f"não foi possível escrever {doc.output_path} do recurso {doc.identifier}: {e}",
                details={"resource": doc.identifier, "path": str(doc.output_path)},
            ) from e

        if self.ctx is not None:
            self.ctx.log(
                resource=doc.identifier,
                level="INFO",
                message="manifest written",
                output_path=str(doc.output_path),
            )
