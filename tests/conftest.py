# tests/conftest.py
"""
Fixtures compartilhados para testes do examplegen.

Este módulo define fixtures reutilizáveis que fornecem:
- contexto de geração controlado (GenerationContext)
- árvores de exemplo mínimas com placeholders
- catálogos de recursos prontos para serem materializados em disco

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Dados retornados são determinísticos e isolados (novo objeto por teste)
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture escreve manifests
    - Nenhuma fixture contém lógica de domínio

Limites explícitos:
    - Não substituir testes de integração
    - Não validar semântica completa do catálogo
"""

from pathlib import Path
from typing import Any, Dict

import pytest
import yaml


@pytest.fixture
def ctx():
    """
    GenerationContext com configuração default e run_id fixo.

    O import é feito dentro da fixture para que falhas de import apareçam
    no teste que a consome, e não na coleta.
    """
    from examplegen.core.context import GenerationContext

    return GenerationContext.create(run_id="run-test")


@pytest.fixture
def vpc_and_subnet_examples() -> Dict[str, Dict[str, Any]]:
    """
    Par canônico de exemplos: `aws_subnet` referencia `aws_vpc`.

    `aws_vpc.spec.forProvider.cidr_block` é string e pode ser lido por
    placeholders `${aws_vpc.main.cidr_block}`.
    """
    return {
        "aws_vpc": {
            "cidr_block": "10.0.0.0/16",
            "tags": {"Name": "main"},
        },
        "aws_subnet": {
            "cidr_block": "10.0.1.0/24",
            "vpc_cidr": "${aws_vpc.main.cidr_block}",
            "depends_on": ["aws_vpc.main"],
        },
    }


@pytest.fixture
def catalog_dict(vpc_and_subnet_examples) -> Dict[str, Any]:
    """Resource Catalog v1 mínimo com dois recursos e uma regra de referência."""
    return {
        "catalog_version": "1",
        "resources": [
            {
                "name": "aws_subnet",
                "group": "ec2.aws.upbound.io",
                "version": "v1beta1",
                "kind": "Subnet",
                "example": vpc_and_subnet_examples["aws_subnet"],
                "transformations": {
                    "vpc_id": {"target": "vpcIdRef", "is_reference": True},
                },
            },
            {
                "name": "aws_vpc",
                "group": "ec2.aws.upbound.io",
                "version": "v1beta1",
                "kind": "VPC",
                "external_name": "vpc-0123",
                "example": vpc_and_subnet_examples["aws_vpc"],
            },
        ],
    }


@pytest.fixture
def write_yaml():
    """Materializa um dict como YAML em `path` e retorna o próprio path."""

    def _write(path: Path, data: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write
