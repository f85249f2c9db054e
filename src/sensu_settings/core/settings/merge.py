# src/sensu_settings/core/settings/merge.py
"""
Utilitário canônico de deep-merge de settings.

Este módulo implementa a política oficial de deep-merge utilizada pelo
loader para sobrepor sucessivas fontes de configuração (ambiente, arquivo
único, diretório) sobre a árvore de settings corrente.

Política de merge:
    - mapa + mapa         → merge recursivo por chave
    - lista + lista       → concatenação (base, depois incoming) sem duplicatas,
                            preservando a primeira ocorrência
    - qualquer outro caso → o valor de incoming substitui o da base

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - Subárvores não tocadas são compartilhadas (copy-on-write)

Invariantes:
    - Chaves presentes apenas na base são preservadas
    - Novas chaves aparecem na ordem de iteração de incoming
    - Conflitos de tipo nunca são erro: incoming sempre vence

Limites explícitos:
    - Não carrega arquivos de configuração
    - Não valida semântica de domínio
    - Não realiza coerção de tipos
"""

from collections.abc import Mapping
from copy import deepcopy
from typing import Any, Dict, List, Sequence

from .errors import SettingsTypeError


def is_sequence(value: Any) -> bool:
    """Sequências ordenadas de settings (listas/tuplas, nunca strings)."""
    return isinstance(value, (list, tuple))


def same_value(left: Any, right: Any) -> bool:
    """
    Igualdade estrutural entre dois valores de settings.

    Mapas e sequências são comparados recursivamente. Escalares só são
    iguais quando possuem o mesmo tipo, de modo que `1`, `1.0` e `True`
    são valores distintos.
    """
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if len(left) != len(right):
            return False
        for key, value in left.items():
            if key not in right or not same_value(value, right[key]):
                return False
        return True
    if is_sequence(left) and is_sequence(right):
        return len(left) == len(right) and all(
            same_value(a, b) for a, b in zip(left, right)
        )
    if type(left) is not type(right):
        return False
    return left == right


def _unique(items: Sequence[Any]) -> List[Any]:
    result: List[Any] = []
    for item in items:
        if not any(same_value(item, seen) for seen in result):
            result.append(item)
    return result


def deep_merge(base: Mapping, incoming: Mapping) -> Dict[str, Any]:
    """
    Realiza o deep-merge de uma árvore incoming sobre uma árvore base.

    Esta função produz uma nova árvore resultante sem mutar nenhum dos
    inputs. Os níveis tocados pelo merge são sempre novos dicionários;
    os valores vindos de incoming são copiados.

    Args:
        base (Mapping): Árvore corrente de settings.
        incoming (Mapping): Árvore recém-carregada a ser aplicada.

    Returns:
        Dict[str, Any]: Nova árvore resultante do deep-merge.

    Raises:
        SettingsTypeError: Se algum dos argumentos raiz não for um mapa.
    """

    if not isinstance(base, Mapping) or not isinstance(incoming, Mapping):
        raise SettingsTypeError(
            f"deep_merge requires mappings at the root, got: "
            f"{type(base).__name__} vs {type(incoming).__name__}"
        )

    result: Dict[str, Any] = dict(base)

    for key, incoming_value in incoming.items():
        base_value = result.get(key)

        # mapa -> merge recursivo
        if isinstance(base_value, Mapping) and isinstance(incoming_value, Mapping):
            result[key] = deep_merge(base_value, incoming_value)
            continue

        # lista -> concatenação sem duplicatas
        if is_sequence(base_value) and is_sequence(incoming_value):
            result[key] = _unique(deepcopy(list(base_value) + list(incoming_value)))
            continue

        # ausente, escalar ou conflito de tipo -> incoming vence
        result[key] = deepcopy(incoming_value)

    return result
