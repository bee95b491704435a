# src/analyzer_config/core/project/file.py
"""
Referência de arquivo do projeto e normalização de paths.

O resolver não lê conteúdo de arquivos: um `File` é apenas um path
normalizado, usado como chave no projeto e como entrada do matcher
de overrides.

Normalização:
    - separadores "\\" viram "/"
    - prefixos "./" são removidos
    - barras repetidas são colapsadas
"""

from __future__ import annotations

import re
from dataclasses import dataclass


_REPEATED_SLASHES = re.compile(r"/{2,}")


def normalize_path(path: str) -> str:
    """Normaliza separadores e prefixos de um path relativo ao projeto."""
    if not isinstance(path, str):
        raise TypeError(f"path deve ser str, recebido: {type(path).__name__}")

    normalized = _REPEATED_SLASHES.sub("/", path.replace("\\", "/"))
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized


@dataclass(frozen=True)
class File:
    """Arquivo do projeto, identificado pelo path normalizado."""

    path: str

    def __post_init__(self) -> None:
        normalized = normalize_path(self.path)
        if not normalized:
            raise ValueError("file path must be a non-empty string")
        object.__setattr__(self, "path", normalized)

    def __str__(self) -> str:
        return self.path
