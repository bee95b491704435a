# src/analyzer_config/core/project/analyzer.py
"""
Registros de configuração por analyzer.

Cada entrada do mapa de configuração do projeto é materializada em um
`AnalyzerConfig` que mantém uma cópia privada da entrada:

    php_analyzer:
      enabled: true             # settings globais (get_global_config)
      config:                   # settings por arquivo (defaults)
        severity: medium
      path_configs:             # overrides, first-match-wins
        - paths: ["tests/*"]
          config:
            severity: low

Decisões arquiteturais:
    - `patterns` é aceito como alias de `paths`; um glob isolado vale como lista
    - `config: null` em um override equivale a uma subárvore vazia
    - `config: null` ou `path_configs: null` no analyzer equivalem a ausência
    - Entradas que não são mapas (ex.: `some_tool: true`) só servem a lookups globais

Limites explícitos:
    - Verifica apenas a forma necessária para montar os overrides
    - Não valida valores de settings
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ..config.errors import InvalidProjectConfigError
from ..config.tree import copy_tree


CONFIG_KEY = "config"
PATH_CONFIGS_KEY = "path_configs"
PATTERNS_KEYS = ("paths", "patterns")


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise InvalidProjectConfigError(msg)


@dataclass
class PathOverride:
    """Conjunto de globs + subárvore que substitui a config do analyzer."""

    patterns: Tuple[str, ...]
    config: Any


@dataclass
class AnalyzerConfig:
    """Configuração de um analyzer; as árvores são cópias privadas do projeto."""

    name: str
    entry: Any
    config: Optional[Any] = None
    path_configs: Optional[Tuple[PathOverride, ...]] = None

    @property
    def has_file_config(self) -> bool:
        return self.config is not None

    @property
    def has_path_configs(self) -> bool:
        return self.path_configs is not None


def _build_override(analyzer: str, index: int, raw: Any) -> PathOverride:
    where = f"{analyzer}.{PATH_CONFIGS_KEY}[{index}]"
    _expect(isinstance(raw, Mapping), f"{where} must be a mapping")

    present = [key for key in PATTERNS_KEYS if key in raw]
    _expect(bool(present), f"{where} must declare 'paths'")
    _expect(len(present) == 1, f"{where} must not declare both 'paths' and 'patterns'")

    patterns = raw[present[0]]
    if isinstance(patterns, str):
        patterns = [patterns]
    _expect(
        isinstance(patterns, (list, tuple, set, frozenset)) and len(patterns) > 0,
        f"{where}.{present[0]} must be a non-empty list of glob strings",
    )
    _expect(
        all(isinstance(p, str) and p for p in patterns),
        f"{where}.{present[0]} must contain only non-empty strings",
    )

    _expect(CONFIG_KEY in raw, f"{where} must declare 'config'")
    config = raw[CONFIG_KEY]
    if config is None:
        config = {}

    return PathOverride(patterns=tuple(patterns), config=config)


def build_analyzer_config(name: str, entry: Any) -> AnalyzerConfig:
    """
    Materializa a entrada bruta de um analyzer em um `AnalyzerConfig`.

    A entrada é copiada por inteiro (`entry`, chaves normalizadas para str),
    e as subárvores `config` e `path_configs` são extraídas da cópia, de modo
    que os três pontos de entrada consultam exatamente os mesmos objetos.
    O `Project` nunca devolve esses objetos diretamente: cada resolução
    retorna uma cópia.

    Raises:
        InvalidProjectConfigError: se `path_configs` tiver forma inválida ou
            se a entrada tiver chaves que não sejam str/int.
    """
    _expect(isinstance(name, str) and bool(name), "analyzer names must be non-empty strings")

    owned = copy_tree(entry, name)
    if not isinstance(owned, Mapping):
        return AnalyzerConfig(name=name, entry=owned)

    config = owned.get(CONFIG_KEY)

    path_configs = None
    raw_overrides = owned.get(PATH_CONFIGS_KEY)
    if raw_overrides is not None:
        _expect(
            isinstance(raw_overrides, (list, tuple)),
            f"{name}.{PATH_CONFIGS_KEY} must be a list",
        )
        path_configs = tuple(
            _build_override(name, i, raw) for i, raw in enumerate(raw_overrides)
        )

    return AnalyzerConfig(name=name, entry=owned, config=config, path_configs=path_configs)
