# src/analyzer_config/core/config/__init__.py
"""
Camada de configuração do Analyzer Config.

Responsabilidades do pacote:
    - Parse de config paths pontuados (`paths`)
    - Cópia e navegação de árvores de configuração (`tree`)
    - Carregamento de arquivos defaults + local (`loader`, `merge`)
    - Hierarquia de exceções tipadas (`errors`)

Limites explícitos:
    - Não seleciona overrides por arquivo (ver `core.project`)
    - Não valida semântica de settings
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigResolutionError,
    UnknownAnalyzerError,
    NoPerFileConfigError,
    MissingConfigPathError,
    UnknownFileError,
    InvalidProjectConfigError,
    DefaultsNotFoundError,
    UnsupportedConfigFormatError,
    InvalidConfigRootTypeError,
    ConfigTypeConflictError,
)
from .loader import load_config  # noqa: F401
from .merge import deep_merge  # noqa: F401
from .paths import ConfigPath, parse_config_path, split_config_path  # noqa: F401
from .tree import copy_tree, walk_config  # noqa: F401
