# src/analyzer_config/core/project/__init__.py
"""
Projeto: arquivos, overrides por path e resolução de configuração.

API pública exposta:
    - File, normalize_path           → referência de arquivo
    - matches, select_override       → glob matching, first-match-wins
    - PathOverride, AnalyzerConfig   → registros por analyzer
    - Project                        → container + entry points de resolução
"""

from .file import File, normalize_path
from .matcher import matches, select_override
from .analyzer import AnalyzerConfig, PathOverride, build_analyzer_config
from .project import Project

__all__ = [
    "File",
    "normalize_path",
    "matches",
    "select_override",
    "AnalyzerConfig",
    "PathOverride",
    "build_analyzer_config",
    "Project",
]
