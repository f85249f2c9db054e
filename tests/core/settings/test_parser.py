# tests/core/settings/test_parser.py
"""
Testes do parser de documentos estruturados (JSON/YAML).

Os testes asseguram que:
- JSON e YAML válidos produzem mapas com chaves canônicas
- conteúdo malformado levanta `DocumentParseError`
- raízes que não são mapas levantam `DocumentParseError`
- o formato é inferido pela extensão (desconhecida → JSON)
"""

import pytest

try:
    from sensu_settings.core.settings.errors import DocumentParseError
    from sensu_settings.core.settings.parser import format_for, parse_document
except Exception as e:  # noqa: BLE001
    parse_document = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing parser module. Implement:\n"
            "- src/sensu_settings/core/settings/parser.py (parse_document, format_for)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_parse_json_bytes():
    _require_imports()
    raw = b'{"checks": {"cpu": {"command": "check-cpu.rb", "interval": 60}}}'
    assert parse_document(raw) == {"checks": {"cpu": {"command": "check-cpu.rb", "interval": 60}}}


def test_parse_yaml_canonicalizes_keys():
    """
    Verifica que chaves não textuais do YAML são canonicalizadas.

    Inclui mapas dentro de sequências, para que merge e diff comparem
    chaves de forma uniforme.
    """
    _require_imports()
    raw = "api:\n  port: 4567\n1: one\nitems:\n  - 2: two\n"
    assert parse_document(raw, fmt="yaml") == {
        "api": {"port": 4567},
        "1": "one",
        "items": [{"2": "two"}],
    }


def test_parse_empty_yaml_is_empty_mapping():
    _require_imports()
    assert parse_document("", fmt="yaml") == {}


@pytest.mark.parametrize(
    "raw, fmt",
    [
        ("{not json", "json"),
        ("", "json"),
        ("[1, 2, 3]", "json"),
        ('"just a string"', "json"),
        ("- a\n- b\n", "yaml"),
        ("key: [unclosed", "yaml"),
        (b"\xff\xfe\x00", "json"),
        ('{"interval": NaN}', "json"),
        ('{"interval": Infinity}', "json"),
        ('{"interval": -Infinity}', "json"),
    ],
)
def test_malformed_or_non_mapping_raises(raw, fmt):
    _require_imports()
    with pytest.raises(DocumentParseError):
        parse_document(raw, fmt=fmt)


def test_unsupported_format_raises():
    _require_imports()
    with pytest.raises(DocumentParseError):
        parse_document("{}", fmt="toml")


def test_format_for_extension():
    _require_imports()
    assert format_for("/etc/sensu/config.json") == "json"
    assert format_for("/etc/sensu/config.YML") == "yaml"
    assert format_for("/etc/sensu/config.yaml") == "yaml"
    assert format_for("/etc/sensu/config") == "json"
