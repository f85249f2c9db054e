# src/sensu_settings/__init__.py
"""
Sensu Settings — carregamento e merge em camadas de settings de serviço.

Este pacote raiz define o namespace público do Sensu Settings, responsável
por reunir a configuração de um serviço (ambiente, arquivo, diretório) em
uma única árvore consultável e auditável.

Arquitetura em alto nível:
    - core.settings.loader      → orquestração das fontes e estado do loader
    - core.settings.merge       → deep-merge com regras fixas de conflito
    - core.settings.diff        → deep-diff usado na trilha de auditoria
    - core.settings.indifferent → acesso indiferente a chaves
    - core.settings.categories  → checks, filters, mutators e handlers

Limites explícitos:
    - Não observa mudanças de configuração em tempo real
    - Não suporta fontes remotas
    - Não impõe schema (responsabilidade do Validator)
"""
from .core.settings.audit import SettingsWarning, WarningLog
from .core.settings.categories import Category
from .core.settings.diff import MISSING, deep_diff
from .core.settings.errors import (
    DocumentParseError,
    SettingsError,
    SettingsTypeError,
    UnknownCategoryError,
)
from .core.settings.indifferent import IndifferentDict, make_indifferent
from .core.settings.loader import FileLoadResult, SettingsLoader
from .core.settings.merge import deep_merge
from .core.settings.validator import StructuralValidator, Validator

__all__ = [
    "Category",
    "DocumentParseError",
    "FileLoadResult",
    "IndifferentDict",
    "MISSING",
    "SettingsError",
    "SettingsLoader",
    "SettingsTypeError",
    "SettingsWarning",
    "StructuralValidator",
    "UnknownCategoryError",
    "Validator",
    "WarningLog",
    "deep_diff",
    "deep_merge",
    "make_indifferent",
]
