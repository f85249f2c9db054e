# src/sensu_settings/core/settings/audit.py
"""
Warning Log — trilha de auditoria do loader de settings.

Cada operação de carga (ambiente, arquivo, diretório, merge/diff) registra
aqui o que fez, na ordem em que fez. O log é apenas informativo: nenhum
fluxo de controle depende do seu conteúdo.

Invariantes:
    - Registros são imutáveis depois de adicionados
    - O log é append-only e nunca é truncado durante a vida do loader
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Tuple


@dataclass(frozen=True)
class SettingsWarning:
    """Registro `(subject, message)`: o valor sob suspeita e a mensagem."""

    subject: Any
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"object": self.subject, "message": self.message}


class WarningLog:
    """Sequência ordenada e append-only de `SettingsWarning`."""

    def __init__(self) -> None:
        self._records: List[SettingsWarning] = []

    def warn(self, subject: Any, message: str) -> SettingsWarning:
        record = SettingsWarning(subject=subject, message=message)
        self._records.append(record)
        return record

    @property
    def records(self) -> Tuple[SettingsWarning, ...]:
        return tuple(self._records)

    def messages(self) -> List[str]:
        return [record.message for record in self._records]

    def to_list(self) -> List[Dict[str, Any]]:
        return [record.to_dict() for record in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SettingsWarning]:
        return iter(tuple(self._records))

    def __getitem__(self, index: int) -> SettingsWarning:
        return self._records[index]
