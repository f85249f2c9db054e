# tests/core/settings/test_environment.py
"""
Testes dos utilitários de ambiente (fallback de variáveis e coerção de porta).
"""

import pytest

try:
    from sensu_settings.core.settings.environment import coerce_port, with_fallback
except Exception as e:  # noqa: BLE001
    coerce_port = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing environment module. Implement:\n"
            "- src/sensu_settings/core/settings/environment.py\n"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.mark.parametrize(
    "text, expected",
    [
        ("4567", 4567),
        (" 8080", 8080),
        ("80abc", 80),
        ("-1", -1),
        ("+22", 22),
        ("abc", 0),
        ("", 0),
    ],
)
def test_coerce_port(text, expected):
    """
    Verifica a coerção do prefixo inteiro; texto sem dígitos vira 0.
    """
    _require_imports()
    assert coerce_port(text) == expected


def test_with_fallback_prefers_primary():
    _require_imports()
    environ = {"REDIS_URL": "redis://primary", "REDISTOGO_URL": "redis://legacy"}
    assert with_fallback(environ, "REDIS_URL", "REDISTOGO_URL") == "redis://primary"
    assert environ["REDIS_URL"] == "redis://primary"


def test_with_fallback_writes_back_primary():
    """
    Verifica que o valor de fallback é exportado sob o nome canônico.

    Processos filhos herdam `REDIS_URL` mesmo quando apenas
    `REDISTOGO_URL` foi definido.
    """
    _require_imports()
    environ = {"REDISTOGO_URL": "redis://legacy"}
    assert with_fallback(environ, "REDIS_URL", "REDISTOGO_URL") == "redis://legacy"
    assert environ["REDIS_URL"] == "redis://legacy"


def test_with_fallback_absent():
    _require_imports()
    environ = {}
    assert with_fallback(environ, "API_PORT", "PORT") is None
    assert environ == {}
