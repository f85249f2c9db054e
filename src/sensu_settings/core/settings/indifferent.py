# src/sensu_settings/core/settings/indifferent.py
"""
Acesso indiferente a chaves da árvore de settings.

Este módulo define o `IndifferentDict`, um `dict` cujas chaves são sempre
armazenadas na forma canônica (string), e que aceita tanto a forma textual
quanto formas simbólicas da mesma chave em qualquer leitura ou escrita.

Formas de chave aceitas:
    - str            → forma canônica
    - enum.Enum      → valor do membro (ex.: `Category.CHECKS` → "checks")
    - bytes          → decodificado como UTF-8
    - outros         → renderizados com `str()`

Princípios fundamentais:
    - A conversão é explícita e aplicada de uma vez na árvore inteira
    - Nenhuma leitura cria entradas (sem auto-vivificação)
    - Iterar sobre o mapa produz sempre as chaves canônicas

Invariantes:
    - Toda chave armazenada é uma string canônica
    - Todo valor do tipo mapa é também um `IndifferentDict`
    - `make_indifferent` é idempotente e não muta o input

Limites explícitos:
    - Mapas dentro de sequências não são convertidos
    - Não faz coerção de valores, apenas de chaves
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Hashable, Iterable, Tuple, Union

_MISSING_DEFAULT = object()


def canonical_key(key: Hashable) -> str:
    """Retorna a forma canônica (string) de uma chave."""
    if isinstance(key, Enum):
        return canonical_key(key.value)
    if isinstance(key, str):
        return key
    if isinstance(key, bytes):
        return key.decode("utf-8")
    return str(key)


def _wrap(value: Any) -> Any:
    if isinstance(value, Mapping) and not isinstance(value, IndifferentDict):
        return IndifferentDict(value)
    return value


class IndifferentDict(dict):
    """
    Mapa com acesso indiferente entre forma textual e simbólica da chave.

    `tree["api"]["port"]`, `tree[b"api"]["port"]` e
    `tree[SomeEnum.API]["port"]` resolvem para a mesma entrada.

    Chaves ausentes levantam `KeyError`, como em um `dict` comum.
    """

    def __init__(
        self,
        data: Union[Mapping, Iterable[Tuple[Hashable, Any]], None] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__()
        if data is not None:
            self.update(data)
        if kwargs:
            self.update(kwargs)

    def __getitem__(self, key: Hashable) -> Any:
        return super().__getitem__(canonical_key(key))

    def __setitem__(self, key: Hashable, value: Any) -> None:
        super().__setitem__(canonical_key(key), _wrap(value))

    def __delitem__(self, key: Hashable) -> None:
        super().__delitem__(canonical_key(key))

    def __contains__(self, key: object) -> bool:
        return super().__contains__(canonical_key(key))  # type: ignore[arg-type]

    def get(self, key: Hashable, default: Any = None) -> Any:
        return super().get(canonical_key(key), default)

    def pop(self, key: Hashable, default: Any = _MISSING_DEFAULT) -> Any:
        if default is _MISSING_DEFAULT:
            return super().pop(canonical_key(key))
        return super().pop(canonical_key(key), default)

    def setdefault(self, key: Hashable, default: Any = None) -> Any:
        key = canonical_key(key)
        if not super().__contains__(key):
            self[key] = default
        return super().__getitem__(key)

    def update(self, *args: Any, **kwargs: Any) -> None:
        if len(args) > 1:
            raise TypeError(f"update expected at most 1 argument, got {len(args)}")
        if args:
            other = args[0]
            items = other.items() if isinstance(other, Mapping) else other
            for key, value in items:
                self[key] = value
        for key, value in kwargs.items():
            self[key] = value

    def copy(self) -> "IndifferentDict":
        return IndifferentDict(self)

    def __or__(self, other: Any) -> "IndifferentDict":
        if not isinstance(other, Mapping):
            return NotImplemented
        result = IndifferentDict(self)
        result.update(other)
        return result

    def __ior__(self, other: Any) -> "IndifferentDict":
        self.update(other)
        return self

    def __repr__(self) -> str:
        return f"IndifferentDict({dict.__repr__(self)})"


def make_indifferent(tree: Mapping) -> IndifferentDict:
    """
    Converte uma árvore de settings para acesso indiferente.

    A conversão é recursiva sobre valores do tipo mapa e produz uma nova
    árvore; o input nunca é mutado. Uma árvore já convertida é devolvida
    como está.

    Args:
        tree (Mapping): Árvore de settings (chaves canônicas ou não).

    Returns:
        IndifferentDict: Visão com acesso indiferente em todos os níveis.
    """
    if isinstance(tree, IndifferentDict):
        return tree
    return IndifferentDict(
        (key, make_indifferent(value) if isinstance(value, Mapping) else value)
        for key, value in tree.items()
    )
