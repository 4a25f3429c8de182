"""
Montagem dos manifests de exemplo por recurso.

Para cada recurso com exemplo, o generator:
    - copia a árvore de parâmetros recebida (o input do chamador não é mutado)
    - aplica omissões e regras de transformação
    - monta o manifest `{apiVersion, kind, metadata, spec.forProvider}`
    - calcula o caminho de saída e registra o documento no store

Layout de saída:
    <root>/<output.dir_name>/<primeiro segmento do grupo>/<kind>.<output.extension>
    (grupo e kind em minúsculas)

Recursos sem exemplo são ignorados.
"""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from examplegen.core.context import GenerationContext

from .document import ResourceDocument
from .store import DocumentStore
from .transform import TransformationRule, transform_fields


EXTERNAL_NAME_ANNOTATION = "crossplane.io/external-name"


class ExampleGenerator:
    """Gera e armazena manifests de exemplo em `<root_dir>`."""

    def __init__(
        self,
        root_dir: Union[str, Path],
        *,
        config: Optional[Dict[str, Any]] = None,
        ctx: Optional[GenerationContext] = None,
    ):
        self.root_dir = Path(root_dir)
        self.ctx = ctx or GenerationContext.create(config=config)
        self.store = DocumentStore(ctx=self.ctx)

    def manifest_path(self, group: str, kind: str) -> Path:
        dir_name = self.ctx.setting("output", "dir_name")
        extension = self.ctx.setting("output", "extension")
        short_group = group.split(".")[0].lower()
        return self.root_dir / dir_name / short_group / f"{kind.lower()}.{extension}"

    def generate(
        self,
        *,
        name: str,
        group: str,
        version: str,
        kind: str,
        example: Optional[Dict[str, Any]],
        omitted_fields: Iterable[str] = (),
        transformations: Optional[Mapping[str, TransformationRule]] = None,
        external_name: Optional[str] = None,
    ) -> Optional[ResourceDocument]:
        """
        Transforma o exemplo de um recurso e registra seu manifest.

        Returns:
            O documento registrado, ou None se o recurso não possui exemplo.
        """
        if not example:
            self.ctx.log(resource=name, level="INFO", message="no example, skipped")
            return None

        params = deepcopy(example)
        transform_fields(
            params,
            omitted_fields,
            transformations,
            reference_name=self.ctx.setting("manifest", "metadata_name"),
            secret_namespace=self.ctx.setting("manifest", "secret_namespace"),
        )

        metadata: Dict[str, Any] = {"name": self.ctx.setting("manifest", "metadata_name")}
        if external_name:
            metadata["annotations"] = {EXTERNAL_NAME_ANNOTATION: external_name}

        manifest = {
            "apiVersion": f"{group}/{version}",
            "kind": kind,
            "metadata": metadata,
            "spec": {
                "forProvider": params,
            },
        }
        return self.store.register(name, self.manifest_path(group, kind), manifest)

    def store_examples(self) -> List[Path]:
        """Resolve referências e escreve todos os manifests registrados."""
        return self.store.flush()
