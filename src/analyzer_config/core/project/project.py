# src/analyzer_config/core/project/project.py
"""
Project: arquivos do projeto + resolução de configuração por analyzer.

Este módulo define o `Project`, o container que responde:

    "qual é o valor efetivo da configuração do analyzer A, no path P,
     para o arquivo F?"

Pontos de entrada de resolução:
    - get_path_config(file, path, default) → override por path ou default
    - get_file_config(file, path)          → override por path ou config base
    - get_global_config(path)              → entrada do analyzer, sem arquivo

Fluxo comum:
    1. parse do config path (analyzer desconhecido → UnknownAnalyzerError)
    2. seleção opcional do override (first-match-wins)
    3. walk dos segmentos restantes (ausência → MissingConfigPathError)

Decisões arquiteturais:
    - A configuração é copiada na construção (cópia profunda privada)
    - Valores resolvidos são devolvidos como cópias (dict/list comuns)
    - Os entry points de resolução são leituras puras: sem eventos, sem cache
    - Erros nunca são convertidos em default dentro do resolver,
      exceto "analyzer sem path_configs" / "nenhum override casou"
      em `get_path_config`

Invariantes:
    - Chamadas repetidas com os mesmos argumentos retornam valores iguais
    - Mutar o mapa passado ao construtor não afeta o projeto
    - Mutar um valor retornado não afeta o projeto nem chamadas seguintes

Limites explícitos:
    - Não lê conteúdo de arquivos
    - Não valida settings de analyzers
"""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Optional, Union

from ..config.errors import UnknownAnalyzerError, UnknownFileError, NoPerFileConfigError
from ..config.loader import load_config
from ..config.paths import parse_config_path
from ..config.tree import walk_config
from ..events import EventLog, emit
from .analyzer import AnalyzerConfig, build_analyzer_config
from .file import File, normalize_path
from .matcher import select_override


FileRef = Union[File, str]


def _file_path(file: FileRef) -> str:
    if isinstance(file, File):
        return file.path
    return normalize_path(file)


class Project:
    """
    Container de arquivos e configuração de analyzers de um projeto.

    Args:
        files: arquivos do projeto (`File` ou paths).
        config: mapa analyzer -> entrada de configuração, já carregado.
        events: destino opcional de eventos de construção.

    Raises:
        InvalidProjectConfigError: se algum `path_configs` tiver forma inválida.
    """

    def __init__(
        self,
        files: Iterable[FileRef],
        config: Mapping[str, Any],
        *,
        events: Optional[EventLog] = None,
    ) -> None:
        if not isinstance(config, Mapping):
            raise TypeError(
                f"project config deve ser um mapa, recebido: {type(config).__name__}"
            )

        self._files: Dict[str, File] = {}
        for f in files:
            ref = f if isinstance(f, File) else File(f)
            self._files[ref.path] = ref

        self._analyzers: Dict[str, AnalyzerConfig] = {
            name: build_analyzer_config(name, entry) for name, entry in config.items()
        }

        emit(
            events,
            source="project",
            level="INFO",
            message="project.created",
            files=len(self._files),
            analyzers=list(self._analyzers),
        )

    @classmethod
    def from_files(
        cls,
        *,
        defaults_path: str,
        local_path: Optional[str] = None,
        files: Iterable[FileRef] = (),
        events: Optional[EventLog] = None,
    ) -> "Project":
        """Constrói o projeto a partir de arquivos de configuração (YAML/JSON)."""
        config = load_config(defaults_path=defaults_path, local_path=local_path, events=events)
        return cls(files, config, events=events)

    # -----------------------------
    # Arquivos
    # -----------------------------
    def has_file(self, path: str) -> bool:
        return normalize_path(path) in self._files

    def get_file(self, path: str) -> File:
        normalized = normalize_path(path)
        if normalized not in self._files:
            raise UnknownFileError(path)
        return self._files[normalized]

    def get_files(self) -> Mapping[str, File]:
        return MappingProxyType(self._files)

    # -----------------------------
    # Analyzers
    # -----------------------------
    def has_analyzer(self, name: str) -> bool:
        return name in self._analyzers

    def get_analyzer(self, name: str) -> AnalyzerConfig:
        if name not in self._analyzers:
            raise UnknownAnalyzerError(name)
        return self._analyzers[name]

    def analyzer_names(self) -> List[str]:
        return list(self._analyzers)

    # -----------------------------
    # Resolução
    # -----------------------------
    def get_path_config(self, file: FileRef, config_path: str, default: Any = None) -> Any:
        """
        Retorna um setting específico de path, ou `default` quando não há
        override por path aplicável ao arquivo.

        `default` é devolvido por identidade (sem cópia). Um override que
        casa mas não contém o sub-path solicitado é erro de autoria de
        configuração e propaga `MissingConfigPathError`.

        Raises:
            UnknownAnalyzerError: se o analyzer não existir.
            MissingConfigPathError: se o override selecionado não resolver o path.
        """
        parsed = parse_config_path(config_path, self._analyzers)
        analyzer = self._analyzers[parsed.analyzer]

        if not analyzer.has_path_configs:
            return default

        override = select_override(analyzer.path_configs, _file_path(file))
        if override is None:
            return default

        return deepcopy(walk_config(override, parsed.segments, config_path))

    def get_file_config(self, file: FileRef, config_path: str) -> Any:
        """
        Retorna um setting por arquivo: primeiro o override por path que
        casar com o arquivo, senão a seção `config` do analyzer.

        Raises:
            UnknownAnalyzerError: se o analyzer não existir.
            NoPerFileConfigError: se o analyzer não declarar `config`.
            MissingConfigPathError: se o path não resolver na subárvore escolhida.
        """
        parsed = parse_config_path(config_path, self._analyzers)
        analyzer = self._analyzers[parsed.analyzer]

        if not analyzer.has_file_config:
            raise NoPerFileConfigError(parsed.analyzer)

        tree = None
        if analyzer.has_path_configs:
            tree = select_override(analyzer.path_configs, _file_path(file))
        if tree is None:
            tree = analyzer.config

        return deepcopy(walk_config(tree, parsed.segments, config_path))

    def get_global_config(self, config_path: str) -> Any:
        """Retorna um setting global, percorrendo a entrada inteira do analyzer."""
        parsed = parse_config_path(config_path, self._analyzers)
        entry = self._analyzers[parsed.analyzer].entry
        return deepcopy(walk_config(entry, parsed.segments, config_path))

    def __repr__(self) -> str:
        return f"Project(files={len(self._files)}, analyzers={list(self._analyzers)!r})"
