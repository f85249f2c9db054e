# src/sensu_settings/core/settings/errors.py
"""
Exceções canônicas da camada de settings do Sensu Settings.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o parsing de documentos, o deep-merge e o acesso por categoria.

Apenas erros de uso (bugs do chamador) são levantados para fora do core.
Problemas em arquivos de configuração (ausentes, ilegíveis, malformados)
são sempre absorvidos pelo loader e registrados como warnings.

Invariantes:
    - Todas as exceções de settings herdam de `SettingsError`
    - `DocumentParseError` nunca escapa de `SettingsLoader.load`

Limites explícitos:
    - Não representa falhas de validação (essas são retornadas pelo Validator)
    - Não realiza fallback ou recovery
"""


class SettingsError(Exception):
    """
    Exceção base para erros da camada de settings.

    Esta hierarquia permite:
        - captura genérica de erros de settings
        - distinção clara entre erro de uso e conteúdo malformado
    """


class UnknownCategoryError(SettingsError, KeyError):
    """
    Exceção levantada quando uma categoria inexistente é solicitada.

    Categorias reconhecidas: checks, filters, mutators, handlers.

    Decisões arquiteturais:
        - Solicitar uma categoria desconhecida é bug do chamador
        - A falha é imediata (fail-fast), nunca um warning
    """

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown category"


class SettingsTypeError(SettingsError, TypeError):
    """
    Exceção levantada quando merge ou diff recebem raízes que não são mapas.

    Exemplo de uso incorreto:
        - deep_merge({"checks": {}}, ["not", "a", "mapping"])
    """


class DocumentParseError(SettingsError, ValueError):
    """
    Falha ao parsear um documento estruturado (JSON/YAML).

    Também levantada quando o documento é sintaticamente válido, mas a
    raiz não é um mapa chave-valor.
    """
