# tests/conftest.py
"""
Fixtures compartilhados para testes do Sensu Settings.

Este módulo define fixtures reutilizáveis que fornecem:
- um ambiente falso (dict) no lugar de `os.environ`
- um loader isolado, com ambiente e nome de programa controlados
- um helper para escrever documentos de configuração em `tmp_path`

Decisões arquiteturais:
    - Nenhum teste lê ou escreve o ambiente real do processo
    - Imports do core são realizados de forma lazy para melhorar
      a clareza de erros durante falhas

Invariantes:
    - Cada teste recebe seu próprio ambiente e seu próprio loader
    - Arquivos são sempre criados dentro de `tmp_path`

Limites explícitos:
    - Não substitui testes de integração com o ambiente real
    - Não contém lógica de domínio
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest


@pytest.fixture
def fake_environ() -> Dict[str, str]:
    """
    Fixture que fornece um ambiente vazio e isolado.

    Returns:
        dict: Mapa mutável usado pelo loader no lugar de `os.environ`.
    """
    return {}


@pytest.fixture
def loader(fake_environ):
    """
    Fixture que fornece um SettingsLoader isolado do processo.

    O nome de programa é fixo (`sensu-client`) para que `validate()`
    derive sempre o mesmo serviço.
    """
    from sensu_settings.core.settings.loader import SettingsLoader

    return SettingsLoader(environ=fake_environ, program_name="/opt/sensu/bin/sensu-client")


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """
    Fixture factory que escreve um documento de configuração em `tmp_path`.

    Aceita um dict (serializado como JSON) ou uma string crua, útil para
    documentos malformados.

    Returns:
        Callable: função `(relative_path, content) -> Path`.
    """

    def _write(relative: str, content: Any) -> Path:
        target = tmp_path / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            target.write_text(content, encoding="utf-8")
        else:
            target.write_text(json.dumps(content), encoding="utf-8")
        return target

    return _write
