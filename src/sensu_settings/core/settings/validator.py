# src/sensu_settings/core/settings/validator.py
"""
Interface do Validator externo e validador estrutural padrão.

O core não impõe schema: regras específicas de cada serviço pertencem a
validadores injetados no loader. O `StructuralValidator` cobre apenas os
invariantes do modelo de dados (categorias e definições são mapas).

Formato de falha:
    {"object": <valor sob suspeita>, "message": <texto>}
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List, Protocol

from .categories import Category

Failure = Dict[str, Any]


class Validator(Protocol):
    """Contrato do validador: lista vazia significa settings válidos."""

    def run(self, settings: Mapping, service: str) -> List[Failure]:
        ...


def service_name(program: str) -> str:
    """Token após o último hífen do basename (ex.: "sensu-client" → "client")."""
    return Path(program).name.split("-")[-1]


class StructuralValidator:
    """Valida apenas a forma das categorias e de suas definições."""

    def run(self, settings: Mapping, service: str) -> List[Failure]:
        failures: List[Failure] = []

        def _expect(cond: bool, obj: Any, message: str) -> None:
            if not cond:
                failures.append({"object": obj, "message": message})

        for category in Category:
            definitions = settings.get(category.value)
            _expect(
                isinstance(definitions, Mapping),
                definitions,
                f"{category.value} must be a mapping",
            )
            if not isinstance(definitions, Mapping):
                continue
            for name, details in definitions.items():
                _expect(
                    isinstance(details, Mapping),
                    details,
                    f"{category.singular} {name} definition must be a mapping",
                )
        return failures
