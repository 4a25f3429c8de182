"""
Exceções canônicas da camada de configuração do examplegen.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, validação estrutural e resolução da configuração de
geração de exemplos.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de resolução de referências
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do examplegen.

    Todas as exceções levantadas durante carregamento, merge e validação
    estrutural da configuração devem herdar desta classe.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de defaults informado explicitamente
    não é encontrado.

    Limites explícitos:
        - Não tenta cair para os defaults embutidos quando um caminho foi
          fornecido e não existe
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando a extensão do arquivo de configuração não é
    suportada.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração não é um
    dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"resolution": {"on_cycle": "error"}}
        - override: {"resolution": "tolerate"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidConfigValueError(ConfigError):
    """
    Exceção levantada quando uma chave conhecida possui valor inválido
    (ex.: `resolution.on_cycle` fora de `error`/`tolerate`).
    """
