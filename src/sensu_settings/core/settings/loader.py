# src/sensu_settings/core/settings/loader.py
"""
Loader canônico de settings do Sensu Settings.

Este módulo é responsável por carregar e mesclar a configuração de um
serviço a partir de múltiplas fontes, produzindo uma única árvore de
settings consultável.

A configuração é resolvida a partir de (nesta ordem):
    - variáveis de ambiente reconhecidas
    - um arquivo de configuração designado (opcional)
    - todos os arquivos `.json` de um diretório, recursivamente (opcional)

Responsabilidades do módulo:
    - Sequenciar as fontes e aplicar cada uma via deep-merge
    - Registrar, para cada arquivo após o primeiro, o diff que ele aplicou
    - Manter a lista de arquivos carregados e exportá-la ao ambiente
    - Publicar a árvore final com acesso indiferente a chaves
    - Delegar a validação ao Validator injetado

Princípios fundamentais:
    - Problemas em arquivos nunca interrompem a carga: viram warnings
    - A árvore é substituída por inteiro a cada merge, nunca mutada no lugar
    - O ambiente é injetado (padrão `os.environ`), nunca acessado diretamente

Invariantes:
    - As quatro categorias existem sempre e são sempre mapas
    - Um arquivo entra em `loaded_files` apenas após parse e merge bem-sucedidos
    - O warning log é append-only

Limites explícitos:
    - Não observa mudanças em arquivos
    - Não suporta fontes remotas
    - Não impõe schema (responsabilidade do Validator)
    - Não é thread-safe; chamadores concorrentes devem serializar o acesso
"""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Hashable, List, Optional, Tuple, Union

from . import environment as env
from .audit import SettingsWarning, WarningLog
from .categories import (
    Category,
    CategoryLike,
    default_settings,
    definition_exists,
    list_definitions,
)
from .diff import deep_diff
from .errors import DocumentParseError
from .indifferent import IndifferentDict, make_indifferent
from .merge import deep_merge
from .parser import JSON_EXTENSION, format_for, parse_document
from .validator import Failure, StructuralValidator, Validator, service_name

PathLike = Union[str, Path]

_BACKSLASH_SEPARATOR = re.compile(r"\\(?=\S)")


@dataclass(frozen=True)
class FileLoadResult:
    """
    Resultado da carga de um único arquivo.

    - path: caminho como informado ao loader
    - loaded: True se o arquivo foi parseado e mesclado na árvore
    - warnings: warnings registrados durante esta carga
    """

    path: str
    loaded: bool
    warnings: Tuple[SettingsWarning, ...] = ()


class SettingsLoader:
    """
    Loader de settings com merge em camadas e trilha de auditoria.

    Uso típico:

        loader = SettingsLoader()
        settings = loader.load(config_file="/etc/sensu/config.json",
                               config_dir="/etc/sensu/conf.d")
        failures = loader.validate()

    Args:
        environ: mapa de variáveis de ambiente (padrão `os.environ`).
        validator: implementação de `Validator` (padrão `StructuralValidator`).
        program_name: nome do executável usado para derivar o serviço
            (padrão `sys.argv[0]`).
    """

    def __init__(
        self,
        *,
        environ: Optional[env.Environ] = None,
        validator: Optional[Validator] = None,
        program_name: Optional[str] = None,
    ) -> None:
        self._environ = environ if environ is not None else env.default_environ()
        self._validator = validator if validator is not None else StructuralValidator()
        self._program_name = program_name
        self._warnings = WarningLog()
        self._settings: Dict[str, Any] = default_settings()
        self._indifferent = False
        self._loaded_files: List[str] = []

    # -----------------------------
    # Estado (somente leitura)
    # -----------------------------
    @property
    def warnings(self) -> Tuple[SettingsWarning, ...]:
        return self._warnings.records

    @property
    def warning_log(self) -> WarningLog:
        return self._warnings

    @property
    def loaded_files(self) -> Tuple[str, ...]:
        return tuple(self._loaded_files)

    @property
    def indifferent(self) -> bool:
        return self._indifferent

    # -----------------------------
    # Acesso à árvore
    # -----------------------------
    def to_hash(self) -> IndifferentDict:
        """Retorna a árvore com acesso indiferente, convertendo-a se necessário."""
        if not self._indifferent:
            self._settings = make_indifferent(self._settings)
            self._indifferent = True
        return self._settings  # type: ignore[return-value]

    def __getitem__(self, key: Hashable) -> Any:
        return self.to_hash()[key]

    def _replace(self, settings: Dict[str, Any]) -> None:
        self._settings = settings
        self._indifferent = False

    # -----------------------------
    # Fontes
    # -----------------------------
    def load_env(self) -> None:
        """
        Carrega settings a partir das variáveis de ambiente reconhecidas.

        RABBITMQ_URL, REDIS_URL (ou REDISTOGO_URL), API_PORT (ou PORT).
        Cada valor presente gera um warning registrando o override.
        """
        overrides: Dict[str, Any] = {}

        rabbitmq = self._environ.get(env.RABBITMQ_URL)
        if rabbitmq is not None:
            overrides["rabbitmq"] = rabbitmq

        redis = env.with_fallback(self._environ, env.REDIS_URL, env.REDIS_URL_LEGACY)
        if redis is not None:
            overrides["redis"] = redis

        api_port = env.with_fallback(self._environ, env.API_PORT, env.API_PORT_FALLBACK)
        if api_port is not None:
            overrides["api"] = {"port": env.coerce_port(api_port)}

        settings = deep_merge(self._settings, overrides)

        if "rabbitmq" in overrides:
            self._warnings.warn(settings["rabbitmq"], "using rabbitmq url environment variable")
        if "redis" in overrides:
            self._warnings.warn(settings["redis"], "using redis url environment variable")
        if "api" in overrides:
            self._warnings.warn(settings["api"], "using api port environment variable")

        self._replace(settings)

    def load_file(self, path: PathLike) -> FileLoadResult:
        """
        Carrega um arquivo de configuração e o mescla na árvore corrente.

        Falhas são sempre suaves: arquivo ausente, ilegível, malformado ou
        com categorias inválidas gera warnings e é ignorado, sem alterar a
        árvore nem `loaded_files`.

        A partir do segundo arquivo carregado, o diff entre a árvore anterior
        e a resultante é registrado como um único warning.

        Args:
            path: caminho do arquivo (.json, ou .yml/.yaml).

        Returns:
            FileLoadResult: indica se o arquivo foi carregado e os warnings
            registrados durante a carga.
        """
        file = str(path)
        mark = len(self._warnings)
        loaded = self._load_file(file)
        return FileLoadResult(
            path=file,
            loaded=loaded,
            warnings=self._warnings.records[mark:],
        )

    def _ignore(self, file: str, message: str) -> bool:
        self._warnings.warn(file, message)
        self._warnings.warn(file, "ignoring config file")
        return False

    def _load_file(self, file: str) -> bool:
        candidate = Path(file)
        if not (candidate.is_file() and os.access(candidate, os.R_OK)):
            return self._ignore(file, "config file does not exist or is not readable")

        self._warnings.warn(file, "loading config file")
        fmt = format_for(candidate)
        try:
            contents = candidate.read_bytes()
        except OSError:
            return self._ignore(file, "config file does not exist or is not readable")

        try:
            config = parse_document(contents, fmt=fmt)
        except DocumentParseError:
            return self._ignore(file, f"config file must be valid {fmt}")

        if any(
            category.value in config and not isinstance(config[category.value], Mapping)
            for category in Category
        ):
            return self._ignore(file, "config file categories must be mappings")

        merged = deep_merge(self._settings, config)
        if self._loaded_files:
            changes = deep_diff(self._settings, merged)
            self._warnings.warn(changes, "config file applied changes")
        self._replace(merged)
        self._loaded_files.append(file)
        return True

    def load_directory(self, directory: PathLike) -> List[FileLoadResult]:
        """
        Carrega todos os arquivos `.json` de um diretório, recursivamente.

        Os caminhos descobertos são ordenados para que a ordem de merge seja
        determinística. Separadores `\\` são normalizados para `/`.
        Arquivos e diretórios ocultos (iniciados por `.`) são ignorados.
        """
        self._warnings.warn(str(directory), "loading config files from directory")
        path = _BACKSLASH_SEPARATOR.sub("/", str(directory))
        root = Path(path)
        files = sorted(
            str(p)
            for p in root.glob(f"**/*{JSON_EXTENSION}")
            if not any(part.startswith(".") for part in p.relative_to(root).parts)
        )
        return [self.load_file(file) for file in files]

    def set_env(self) -> None:
        """Exporta SENSU_CONFIG_FILES, a lista de arquivos carregados separada por ":"."""
        self._environ[env.CONFIG_FILES] = env.CONFIG_FILES_DELIMITER.join(self._loaded_files)

    def load(
        self,
        *,
        config_file: Optional[PathLike] = None,
        config_dir: Optional[PathLike] = None,
    ) -> IndifferentDict:
        """
        Carrega ambiente, arquivo e diretório, e exporta os arquivos carregados.

        Mesmo que todas as fontes falhem, a árvore retornada é utilizável
        (no mínimo as quatro categorias vazias). Para detectar problemas,
        inspecione `warnings` ou chame `validate()`.

        Returns:
            IndifferentDict: árvore final com acesso indiferente.
        """
        self.load_env()
        if config_file is not None:
            self.load_file(config_file)
        if config_dir is not None:
            self.load_directory(config_dir)
        self.set_env()
        return self.to_hash()

    def validate(self) -> List[Failure]:
        """
        Valida os settings carregados com o Validator injetado.

        O serviço é derivado do nome do executável: o token após o último
        hífen do basename (ex.: `sensu-server` → `server`).

        Returns:
            List[Failure]: falhas de validação (vazia quando válido).
        """
        program = self._program_name if self._program_name is not None else sys.argv[0]
        return list(self._validator.run(self._settings, service_name(program)))

    # -----------------------------
    # Categorias
    # -----------------------------
    def definitions(self, category: CategoryLike) -> List[Dict[str, Any]]:
        return list_definitions(self._settings, category)

    def definition_exists(self, category: CategoryLike, name: Hashable) -> bool:
        return definition_exists(self._settings, category, name)

    def checks(self) -> List[Dict[str, Any]]:
        return self.definitions(Category.CHECKS)

    def filters(self) -> List[Dict[str, Any]]:
        return self.definitions(Category.FILTERS)

    def mutators(self) -> List[Dict[str, Any]]:
        return self.definitions(Category.MUTATORS)

    def handlers(self) -> List[Dict[str, Any]]:
        return self.definitions(Category.HANDLERS)

    def check_exists(self, name: Hashable) -> bool:
        return self.definition_exists(Category.CHECKS, name)

    def filter_exists(self, name: Hashable) -> bool:
        return self.definition_exists(Category.FILTERS, name)

    def mutator_exists(self, name: Hashable) -> bool:
        return self.definition_exists(Category.MUTATORS, name)

    def handler_exists(self, name: Hashable) -> bool:
        return self.definition_exists(Category.HANDLERS, name)
