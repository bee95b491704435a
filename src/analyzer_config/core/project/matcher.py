# src/analyzer_config/core/project/matcher.py
"""
Matching de globs e seleção de path overrides.

Semântica dos padrões (shell-style, via `fnmatch.fnmatchcase`):
    - `*` casa qualquer sequência, inclusive "/"
    - `?` casa um caractere
    - `[...]` classes de caracteres
    - o matching é case-sensitive

Política de seleção:
    - Overrides são avaliados na ordem de declaração
    - Dentro de um override, basta um padrão casar (OR lógico)
    - O primeiro override que casa vence (first-match-wins, não "o mais específico")
    - Nenhum override casando não é erro: retorna None
"""

from __future__ import annotations

import fnmatch
from typing import TYPE_CHECKING, Any, Iterable, Optional, Sequence

from .file import normalize_path

if TYPE_CHECKING:
    from .analyzer import PathOverride


def matches(file_path: str, patterns: Iterable[str]) -> bool:
    """Retorna True se `file_path` casar com pelo menos um dos padrões."""
    path = normalize_path(file_path)
    for pattern in patterns:
        if fnmatch.fnmatchcase(path, normalize_path(pattern)):
            return True
    return False


def select_override(overrides: Sequence["PathOverride"], file_path: str) -> Optional[Any]:
    """
    Seleciona a subárvore do primeiro override cujo conjunto de padrões
    casa com `file_path`.

    Args:
        overrides: overrides do analyzer, em ordem de declaração.
        file_path: path normalizado do arquivo.

    Returns:
        A `config` do primeiro override que casa, ou None.
    """
    for override in overrides:
        if matches(file_path, override.patterns):
            return override.config
    return None
