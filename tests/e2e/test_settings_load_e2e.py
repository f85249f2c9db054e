# tests/e2e/test_settings_load_e2e.py
"""
Teste ponta a ponta do loader contra o ambiente real do processo.

Diferente dos testes unitários, aqui o loader usa `os.environ` e
`sys.argv[0]` (via monkeypatch), como faria um serviço em produção:
- variáveis de ambiente reconhecidas entram na árvore
- arquivo designado e diretório são mesclados em camadas
- SENSU_CONFIG_FILES é exportado para processos filhos
- o nome do serviço é derivado do executável

Limites explícitos:
    - Não valida regras específicas de serviço
"""

import json
import os
import sys
from pathlib import Path

import pytest

try:
    from sensu_settings import SettingsLoader
except Exception as e:  # noqa: BLE001
    SettingsLoader = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"Missing sensu_settings package. Import error: {_IMPORT_ERR}")


def _write(path: Path, data: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_full_load_against_process_environment(tmp_path: Path, monkeypatch):
    """
    Verifica uma carga completa com ambiente, arquivo e diretório.

    Invariantes:
        - Ordem de precedência: ambiente < arquivo < diretório
        - Listas são acumuladas entre fontes, sem duplicatas
        - SENSU_CONFIG_FILES lista os arquivos carregados, na ordem
    """
    _require_imports()
    for name in ("RABBITMQ_URL", "REDIS_URL", "REDISTOGO_URL", "API_PORT", "PORT", "SENSU_CONFIG_FILES"):
        # setenv registra o estado original; delenv deixa a variável ausente
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("RABBITMQ_URL", "amqp://guest@localhost")
    monkeypatch.setenv("PORT", "4567")
    monkeypatch.setattr(sys, "argv", ["/opt/sensu/bin/sensu-api"])

    config = _write(tmp_path / "config.json", {
        "api": {"bind": "127.0.0.1"},
        "checks": {"cpu": {"command": "check-cpu", "subscribers": ["linux"]}},
    })
    first = _write(tmp_path / "conf.d" / "10-checks.json", {
        "checks": {"cpu": {"subscribers": ["linux", "web"], "interval": 30}},
    })
    second = _write(tmp_path / "conf.d" / "20-api.json", {"api": {"port": 8080}})

    loader = SettingsLoader()
    settings = loader.load(config_file=str(config), config_dir=str(tmp_path / "conf.d"))

    assert settings["rabbitmq"] == "amqp://guest@localhost"
    assert settings["api"] == {"port": 8080, "bind": "127.0.0.1"}
    assert settings["checks"]["cpu"]["subscribers"] == ["linux", "web"]
    assert loader.checks() == [
        {"command": "check-cpu", "subscribers": ["linux", "web"], "interval": 30, "name": "cpu"},
    ]
    assert os.environ["API_PORT"] == "4567"
    assert os.environ["SENSU_CONFIG_FILES"] == ":".join([str(config), str(first), str(second)])
    assert [w.message for w in loader.warnings].count("config file applied changes") == 2
    assert loader.validate() == []
