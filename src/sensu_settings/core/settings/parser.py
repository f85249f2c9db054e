# src/sensu_settings/core/settings/parser.py
"""Parser de documentos estruturados de settings (JSON/YAML).

Notas:
- JSON é o formato canônico; é a única extensão descoberta em diretórios.
- YAML é aceito para um arquivo de configuração informado explicitamente.
- O formato é inferido pela extensão; extensões desconhecidas são lidas como JSON.
- Todas as chaves são canonicalizadas (strings) durante o parse, para que
  merge e diff comparem chaves de forma uniforme.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .errors import DocumentParseError
from .indifferent import canonical_key

JSON_EXTENSION = ".json"
YAML_EXTENSIONS = {".yml", ".yaml"}


def format_for(path: Union[str, Path]) -> str:
    """Retorna "yaml" para .yml/.yaml e "json" para qualquer outra extensão."""
    if Path(path).suffix.lower() in YAML_EXTENSIONS:
        return "yaml"
    return "json"


def _reject_constant(name: str) -> Any:
    # NaN, Infinity e -Infinity não são JSON válido
    raise ValueError(f"invalid JSON constant: {name}")


def _symbolize(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {canonical_key(k): _symbolize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_symbolize(v) for v in value]
    return value


def parse_document(raw: Union[str, bytes], *, fmt: str = "json") -> Dict[str, Any]:
    """Parseia um documento e retorna um mapa com chaves canônicas.

    Args:
        raw: conteúdo do documento.
        fmt: "json" ou "yaml".

    Raises:
        DocumentParseError: se o conteúdo for malformado ou a raiz não for um mapa.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DocumentParseError(f"document is not valid utf-8: {e}") from e

    try:
        if fmt == "yaml":
            data = yaml.safe_load(raw)
            if data is None:
                # YAML vazio -> {}
                data = {}
        elif fmt == "json":
            data = json.loads(raw, parse_constant=_reject_constant)
        else:
            raise DocumentParseError(f"unsupported document format: {fmt}")
    except DocumentParseError:
        raise
    except (ValueError, yaml.YAMLError) as e:
        raise DocumentParseError(str(e) or f"failed to parse {fmt} document") from e

    if not isinstance(data, Mapping):
        raise DocumentParseError(
            f"document root must be a mapping, got: {type(data).__name__}"
        )

    return _symbolize(data)
