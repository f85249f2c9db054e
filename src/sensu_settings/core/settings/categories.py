# src/sensu_settings/core/settings/categories.py
"""
Categorias de definições da árvore de settings.

A raiz da árvore sempre contém quatro coleções de definições nomeadas:
checks, filters, mutators e handlers. Cada coleção é um mapa
`nome -> atributos`.

Este módulo define:
    - Category → enum fixo das quatro categorias
    - list_definitions → visão em lista, com `name` sintetizado na leitura
    - definition_exists → teste de existência por nome

Princípios fundamentais:
    - As funções são somente leitura e operam sobre a árvore crua
    - O atributo `name` nunca é armazenado na árvore, apenas sintetizado

Limites explícitos:
    - Não valida os atributos das definições
    - Não cria categorias além das quatro reconhecidas
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Hashable, List, Union

from .errors import UnknownCategoryError
from .indifferent import canonical_key


class Category(str, Enum):
    """
    Categorias reconhecidas de definições.

    Os valores são as chaves canônicas de topo da árvore de settings.
    """

    CHECKS = "checks"
    FILTERS = "filters"
    MUTATORS = "mutators"
    HANDLERS = "handlers"

    @property
    def singular(self) -> str:
        return self.value[:-1]

    @classmethod
    def parse(cls, value: Union["Category", str]) -> "Category":
        if isinstance(value, cls):
            return value
        try:
            return cls(canonical_key(value))
        except ValueError:
            raise UnknownCategoryError(
                f"unknown category: {value!r} "
                f"(expected one of {', '.join(c.value for c in cls)})"
            ) from None


CategoryLike = Union[Category, str]


def default_settings() -> Dict[str, Any]:
    """Árvore inicial: as quatro categorias, vazias."""
    return {category.value: {} for category in Category}


def _category_mapping(tree: Mapping, category: CategoryLike) -> Mapping:
    key = Category.parse(category).value
    definitions = tree.get(key)
    if not isinstance(definitions, Mapping):
        return {}
    return definitions


def list_definitions(tree: Mapping, category: CategoryLike) -> List[Dict[str, Any]]:
    """
    Lista as definições de uma categoria.

    Cada item é uma cópia dos atributos da definição acrescida de `name`,
    igual à chave da definição. A ordem segue a iteração do mapa.

    Raises:
        UnknownCategoryError: Se a categoria não for reconhecida.
    """
    definitions = []
    for name, details in _category_mapping(tree, category).items():
        item = dict(details) if isinstance(details, Mapping) else {}
        item["name"] = canonical_key(name)
        definitions.append(item)
    return definitions


def definition_exists(tree: Mapping, category: CategoryLike, name: Hashable) -> bool:
    """Verifica se a categoria possui uma definição com o nome informado."""
    return canonical_key(name) in _category_mapping(tree, category)
