# src/sensu_settings/core/settings/__init__.py
"""
Camada de settings do Sensu Settings.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar, comparar e expor a configuração de um serviço.

Responsabilidades do pacote:
    - Leitura de variáveis de ambiente reconhecidas
    - Parsing de documentos JSON (e YAML para o arquivo designado)
    - Resolução da árvore final via deep-merge em camadas
    - Registro do diff aplicado por cada arquivo (warning log)
    - Acesso indiferente a chaves e acesso por categoria

Princípios fundamentais:
    - Conteúdo malformado nunca interrompe a carga: vira warning
    - Erros de uso (ex.: categoria desconhecida) falham imediatamente
    - A mesma sequência de fontes sempre produz a mesma árvore

Limites explícitos:
    - Não valida semântica de domínio (responsabilidade do Validator)
    - Não observa arquivos nem suporta fontes remotas
"""
