"""
Derivação de coordenadas de secret para campos sensíveis.

Um campo sensível transformado em referência vira um objeto
`{name, namespace, key}` apontando para um secret ilustrativo. As
coordenadas são derivadas do valor original do campo:

    ${file("/a/b/c.pem")}           → ("example-secret", "attribute.c.pem")
    ${aws_db_instance.main.password} → ("example-db-instance", "attribute.password")
    qualquer outro valor             → ("example-secret", "example-key")
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Any

from .placeholder import parse_file_literal, placeholder_inner


DEFAULT_SECRET_NAME = "example-secret"
DEFAULT_SECRET_KEY = "example-key"


@dataclass(frozen=True)
class SecretCoordinate:
    secret_name: str = DEFAULT_SECRET_NAME
    secret_key: str = DEFAULT_SECRET_KEY


def derive_secret_coordinate(value: Any) -> SecretCoordinate:
    inner = placeholder_inner(value)
    if inner is None:
        return SecretCoordinate()

    file_path = parse_file_literal(inner)
    if file_path is not None:
        return SecretCoordinate(secret_key=f"attribute.{posixpath.basename(file_path)}")

    parts = inner.split(".")
    if len(parts) < 3:
        return SecretCoordinate()
    # aws_db_instance -> db-instance: o primeiro token é o prefixo do provider
    name = "-".join(parts[0].split("_")[1:])
    return SecretCoordinate(
        secret_name=f"example-{name}",
        secret_key="attribute." + ".".join(parts[2:]),
    )
