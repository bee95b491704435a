# src/analyzer_config/core/config/paths.py
"""
Parser de config paths pontuados.

Um config path identifica o analyzer e a cadeia de chaves aninhadas
dentro da sua configuração:

    "php_analyzer.severity"        -> ("php_analyzer", ("severity",))
    "php_analyzer.fixes.psr2.level" -> ("php_analyzer", ("fixes", "psr2", "level"))
    "php_analyzer"                 -> ("php_analyzer", ())

Invariantes:
    - O primeiro segmento é sempre o nome do analyzer
    - A ordem dos segmentos é preservada
    - `segments` pode ser vazio (lookup do analyzer inteiro)

Limites explícitos:
    - Não percorre árvores de configuração
    - Não consulta overrides por path
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from .errors import UnknownAnalyzerError


@dataclass(frozen=True)
class ConfigPath:
    """Config path decomposto em analyzer + segmentos de chave."""

    analyzer: str
    segments: Tuple[str, ...]
    raw: str

    def walked(self, count: int) -> str:
        """Renderiza os primeiros `count` segmentos no formato de diagnóstico (".a.b")."""
        return "." + ".".join(self.segments[:count])


def split_config_path(config_path: str) -> ConfigPath:
    """Divide o path em `.` sem verificar a existência do analyzer."""
    if not isinstance(config_path, str):
        raise TypeError(
            f"config path deve ser str, recebido: {type(config_path).__name__}"
        )

    analyzer, *segments = config_path.split(".")
    return ConfigPath(analyzer=analyzer, segments=tuple(segments), raw=config_path)


def parse_config_path(config_path: str, config: Mapping[str, Any]) -> ConfigPath:
    """
    Faz o parse de um config path contra o mapa de configuração do projeto.

    Args:
        config_path: path pontuado, ex.: "php_analyzer.severity".
        config: mapa analyzer -> entrada de configuração.

    Returns:
        ConfigPath: analyzer, segmentos e path original.

    Raises:
        UnknownAnalyzerError: se o analyzer não possui entrada em `config`.
    """
    parsed = split_config_path(config_path)
    if parsed.analyzer not in config:
        raise UnknownAnalyzerError(parsed.analyzer)
    return parsed
