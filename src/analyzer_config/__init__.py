# src/analyzer_config/__init__.py
"""
Analyzer Config: resolução hierárquica de configuração de analyzers.

Responde "qual é o valor efetivo do setting P do analyzer A para o
arquivo F", combinando a configuração global de cada analyzer com uma
lista ordenada de overrides por padrão de path (first-match-wins).

Arquitetura em alto nível:
    - core.config  → parse de config paths, walk de árvores, loader e merge
    - core.project → arquivos, overrides por path e o container `Project`
    - core.events  → event log estruturado de carga e construção

Limites explícitos:
    - Não valida settings de analyzers (schema é responsabilidade externa)
    - Não executa analyzers nem lê conteúdo de arquivos
"""

from .core.config.errors import (
    ConfigError,
    ConfigResolutionError,
    UnknownAnalyzerError,
    NoPerFileConfigError,
    MissingConfigPathError,
    UnknownFileError,
    InvalidProjectConfigError,
)
from .core.config.loader import load_config
from .core.events import EventLog
from .core.project import File, Project

__all__ = [
    "ConfigError",
    "ConfigResolutionError",
    "UnknownAnalyzerError",
    "NoPerFileConfigError",
    "MissingConfigPathError",
    "UnknownFileError",
    "InvalidProjectConfigError",
    "EventLog",
    "File",
    "Project",
    "load_config",
]
