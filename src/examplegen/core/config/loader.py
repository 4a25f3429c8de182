"""
Loader canônico da configuração de geração de exemplos.

A configuração efetiva é resolvida a partir de:
    - defaults (arquivo informado ou `DEFAULT_CONFIG` embutido)
    - um arquivo local de overrides (opcional)

Responsabilidades do módulo:
    - Carregar arquivos de configuração em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz, valores conhecidos)
    - Resolver a configuração final via deep-merge determinístico

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults
    - A mesma entrada sempre produz a mesma configuração final

Limites explícitos:
    - Não persiste configuração ou hash
    - Não interage com o store de documentos
"""

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigValueError,
    UnsupportedConfigFormatError,
)


CYCLE_POLICIES = ("error", "tolerate")

DEFAULT_CONFIG: Dict[str, Any] = {
    "output": {
        "dir_name": "examples-generated",
        "extension": "yaml",
    },
    "manifest": {
        "metadata_name": "example",
        "secret_namespace": "crossplane-system",
    },
    "resolution": {
        "on_cycle": "tolerate",
        "strip_fields": ["depends_on"],
    },
    "report": {
        "enabled": True,
        "path": None,
    },
}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = config.get(name)
    if not isinstance(value, dict):
        raise InvalidConfigValueError(f"Seção '{name}' deve ser um mapa")
    return value


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Valida estruturalmente as chaves consumidas pelo examplegen.

    Raises:
        InvalidConfigValueError: Se alguma chave conhecida tiver valor inválido.
    """
    output = _section(config, "output")
    for key in ("dir_name", "extension"):
        value = output.get(key)
        if not isinstance(value, str) or not value.strip():
            raise InvalidConfigValueError(f"output.{key} deve ser string não vazia")

    manifest = _section(config, "manifest")
    for key in ("metadata_name", "secret_namespace"):
        value = manifest.get(key)
        if not isinstance(value, str) or not value.strip():
            raise InvalidConfigValueError(f"manifest.{key} deve ser string não vazia")

    resolution = _section(config, "resolution")
    if resolution.get("on_cycle") not in CYCLE_POLICIES:
        raise InvalidConfigValueError(
            f"resolution.on_cycle deve ser um de {list(CYCLE_POLICIES)}, "
            f"recebido: {resolution.get('on_cycle')!r}"
        )
    strip_fields = resolution.get("strip_fields")
    if not isinstance(strip_fields, list) or not all(isinstance(f, str) for f in strip_fields):
        raise InvalidConfigValueError("resolution.strip_fields deve ser lista de strings")

    report = _section(config, "report")
    if not isinstance(report.get("enabled"), bool):
        raise InvalidConfigValueError("report.enabled deve ser booleano")
    if report.get("path") is not None and not isinstance(report.get("path"), str):
        raise InvalidConfigValueError("report.path deve ser string ou null")

    return config


def load_config(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva de geração.

    Política de resolução:
        - Sem `defaults_path`, `DEFAULT_CONFIG` é a base
        - Com `defaults_path`, o arquivo é mesclado sobre `DEFAULT_CONFIG`
          e deve existir
        - O arquivo local é opcional; quando presente tem prioridade

    Args:
        defaults_path (Optional[str]): Caminho para um arquivo de defaults.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Configuração final resolvida e validada.

    Raises:
        DefaultsNotFoundError: Se `defaults_path` não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
        InvalidConfigValueError: Se a configuração final for inválida.
    """
    effective = deepcopy(DEFAULT_CONFIG)

    if defaults_path is not None:
        effective = deep_merge(effective, _load_file(Path(defaults_path)))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return validate_config(effective)
