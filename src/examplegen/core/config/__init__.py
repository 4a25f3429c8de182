"""
Camada de configuração do examplegen.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Validação estrutural das chaves conhecidas
    - Geração de hash canônico para o relatório de rastreabilidade

Limites explícitos:
    - Não resolve referências nem escreve manifests
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigValueError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import CYCLE_POLICIES, DEFAULT_CONFIG, load_config, validate_config
from .merge import deep_merge

__all__ = [
    "CYCLE_POLICIES",
    "DEFAULT_CONFIG",
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidConfigValueError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "deep_merge",
    "load_config",
    "validate_config",
]
