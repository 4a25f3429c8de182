"""
examplegen — geração de manifests de exemplo com resolução de referências.

A partir de árvores de parâmetros de exemplo por recurso (com placeholders
`${tipo.nome.campo}`), o examplegen:
    - aplica omissões e regras de rename/referência por recurso
    - resolve referências entre documentos, de forma memoizada
    - escreve um manifest YAML por recurso em `examples-generated/`

Arquitetura em alto nível:
    - core.config       → carregamento, merge e hashing de configuração
    - core.catalog      → catálogo de recursos (entrada do gerador)
    - core.examples     → transformação, resolução, store e escrita
    - core.traceability → relatório e Event Log do run
    - core.runner       → driver de um run completo
    - cli               → interface de linha de comando

Limites explícitos:
    - Não deriva exemplos a partir de schemas de provider
    - Não valida semântica dos recursos
    - Não avalia expressões: apenas substituição de string inteira
"""

from .version import __version__
from .core.examples import DocumentStore, ExampleGenerator, TransformationRule
from .core.runner import GenerationResult, run_generation

__all__ = [
    "DocumentStore",
    "ExampleGenerator",
    "GenerationResult",
    "TransformationRule",
    "__version__",
    "run_generation",
]
