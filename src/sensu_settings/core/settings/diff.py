# src/sensu_settings/core/settings/diff.py
"""
Deep-diff entre duas árvores de settings.

Usado apenas para observabilidade: após aplicar um novo arquivo, o loader
compara a árvore anterior com a resultante e registra um único warning
descrevendo exatamente o que o arquivo alterou.

Formato do resultado:
    - chaves iguais nos dois lados são omitidas
    - mapa + mapa → sub-diff recursivo (mesmo que vazio)
    - qualquer outro caso → tupla `(antes, depois)`; um lado ausente é
      representado pelo sentinel `MISSING`
"""

from collections.abc import Mapping
from typing import Any, Dict, List

from .errors import SettingsTypeError
from .merge import same_value


class _Missing:
    """Sentinel para o lado ausente de um par do diff."""

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def deep_diff(before: Mapping, after: Mapping) -> Dict[str, Any]:
    """
    Compara duas árvores e retorna apenas os caminhos que diferem.

    A ordem das chaves no resultado segue a união "before, depois after".

    Args:
        before (Mapping): Árvore anterior.
        after (Mapping): Árvore posterior.

    Returns:
        Dict[str, Any]: Árvore de diferenças com pares `(antes, depois)`.

    Raises:
        SettingsTypeError: Se algum dos argumentos não for um mapa.
    """
    if not isinstance(before, Mapping) or not isinstance(after, Mapping):
        raise SettingsTypeError(
            f"deep_diff requires mappings, got: "
            f"{type(before).__name__} vs {type(after).__name__}"
        )

    keys: List[Any] = list(before.keys())
    keys.extend(key for key in after.keys() if key not in before)

    diff: Dict[str, Any] = {}
    for key in keys:
        old = before[key] if key in before else MISSING
        new = after[key] if key in after else MISSING
        if old is not MISSING and new is not MISSING and same_value(old, new):
            continue
        if isinstance(old, Mapping) and isinstance(new, Mapping):
            diff[key] = deep_diff(old, new)
        else:
            diff[key] = (old, new)
    return diff
