# src/analyzer_config/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Analyzer Config.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento de arquivos, a construção do projeto e a resolução de
configuração por analyzer, por arquivo e global.

As exceções aqui definidas representam **falhas determinísticas de
autoria de configuração ou de uso da API**, e não falhas transitórias.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Nenhuma exceção é recuperada internamente
    - Mensagens de erro nomeiam o analyzer, o path ou o arquivo envolvido

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Falhas de resolução também herdam de `LookupError`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra eventos
"""

from __future__ import annotations


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Todas as exceções levantadas durante carregamento, construção do
    projeto e resolução de configuração herdam desta classe, permitindo
    captura genérica por parte do chamador.
    """


# ---------------------------------------------------------------------------
# Resolução
# ---------------------------------------------------------------------------

class ConfigResolutionError(ConfigError, LookupError):
    """Base das falhas de resolução (analyzer, path ou arquivo inexistente)."""


class UnknownAnalyzerError(ConfigResolutionError):
    """
    Exceção levantada quando o analyzer solicitado não possui nenhuma
    entrada no mapa de configuração do projeto.

    Decisões arquiteturais:
        - A checagem ocorre no parse do config path, antes de qualquer walk
        - Vale para os três pontos de entrada, inclusive `get_path_config`
    """

    def __init__(self, analyzer: str):
        self.analyzer = analyzer
        super().__init__(f'The analyzer "{analyzer}" does not exist.')


class NoPerFileConfigError(ConfigResolutionError):
    """
    Exceção levantada quando o analyzer existe, mas não declara seção
    `config` de configuração por arquivo.

    Diferente de "nenhum override casou": indica que o analyzer não
    suporta configuração por arquivo e que `get_global_config` deveria
    ter sido utilizado.
    """

    def __init__(self, analyzer: str):
        self.analyzer = analyzer
        super().__init__(
            f'The analyzer "{analyzer}" has no per-file configuration. '
            f"Did you want to use get_global_config() instead?"
        )


class MissingConfigPathError(ConfigResolutionError):
    """
    Exceção levantada quando os segmentos de um config path não resolvem
    completamente contra a subárvore selecionada.

    Atributos:
        config_path: path completo solicitado pelo chamador
        walked_path: maior prefixo percorrido com sucesso (ex.: ".a.b")
    """

    def __init__(self, config_path: str, walked_path: str):
        self.config_path = config_path
        self.walked_path = walked_path
        super().__init__(
            f'There is no config at path "{config_path}"; walked path: "{walked_path}".'
        )


class UnknownFileError(ConfigResolutionError):
    """Arquivo solicitado não pertence ao conjunto de arquivos do projeto."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f'The file "{path}" does not exist.')


# ---------------------------------------------------------------------------
# Construção do projeto
# ---------------------------------------------------------------------------

class InvalidProjectConfigError(ConfigError):
    """
    Exceção levantada quando a forma estrutural de uma entrada de analyzer
    impede a construção dos registros de override.

    Exemplos:
        - `path_configs` não é uma lista
        - um override não declara `paths` ou `config`

    Limites explícitos:
        - Não valida valores de settings dos analyzers
    """


# ---------------------------------------------------------------------------
# Carregamento de arquivos
# ---------------------------------------------------------------------------

class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - Não há tentativa de inferir ou criar defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz do arquivo de configuração não é um dicionário."""


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"php_analyzer": {"enabled": true}}
        - override: {"php_analyzer": "off"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """
