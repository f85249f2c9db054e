# src/sensu_settings/core/settings/environment.py
"""
Variáveis de ambiente reconhecidas pelo loader de settings.

Entradas:
    - RABBITMQ_URL                  → settings["rabbitmq"]
    - REDIS_URL (legado REDISTOGO_URL) → settings["redis"]
    - API_PORT (genérico PORT)      → settings["api"]["port"] (inteiro)

Saída:
    - SENSU_CONFIG_FILES → lista de arquivos carregados, separada por ":"

O ambiente é injetado no loader como um `MutableMapping[str, str]`
(por padrão `os.environ`), de modo que testes possam usar um dict comum.
"""

from __future__ import annotations

import os
import re
from typing import MutableMapping, Optional

Environ = MutableMapping[str, str]

RABBITMQ_URL = "RABBITMQ_URL"
REDIS_URL = "REDIS_URL"
REDIS_URL_LEGACY = "REDISTOGO_URL"
API_PORT = "API_PORT"
API_PORT_FALLBACK = "PORT"

CONFIG_FILES = "SENSU_CONFIG_FILES"
CONFIG_FILES_DELIMITER = ":"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def default_environ() -> Environ:
    return os.environ


def with_fallback(environ: Environ, primary: str, fallback: str) -> Optional[str]:
    """
    Lê `primary`, recorrendo a `fallback` quando ausente.

    Quando o fallback é usado, o valor é gravado de volta em `primary`,
    para que processos filhos herdem o nome canônico.
    """
    value = environ.get(primary)
    if value is None:
        value = environ.get(fallback)
        if value is not None:
            environ[primary] = value
    return value


def coerce_port(text: str) -> int:
    """
    Converte o prefixo inteiro de `text`; sem dígitos iniciais retorna 0.

    Exemplos: "4567" → 4567, "80abc" → 80, "abc" → 0.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return int(match.group(1))
