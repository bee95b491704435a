# src/analyzer_config/core/config/loader.py
"""
Loader da configuração de projeto (analyzers + path overrides).

A configuração é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional)

O resultado é o mapa bruto analyzer -> entrada, no formato:

    php_analyzer:
      config:
        severity: medium
      path_configs:
        - paths: ["tests/*"]
          config:
            severity: low

Responsabilidades do módulo:
    - Carregar arquivos YAML ou JSON
    - Validar o tipo raiz (dict)
    - Aplicar o arquivo local sobre os defaults via `deep_merge`

Limites explícitos:
    - Não valida settings de analyzers nem aplica schema
    - Não constrói o Project (ver `Project.from_files`)
    - Não normaliza chaves; o Project copia a árvore na construção
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from ..events import EventLog, emit
from .merge import deep_merge
from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


_YAML_SUFFIXES = {".yaml", ".yml"}
_JSON_SUFFIXES = {".json"}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida o tipo raiz.

    Decisões arquiteturais:
        - Arquivos vazios são interpretados como dicionários vazios
        - O formato é determinado pela extensão, nunca pelo conteúdo

    Args:
        path (Path): Caminho para o arquivo de configuração.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de defaults não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in _YAML_SUFFIXES:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix in _JSON_SUFFIXES:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
    events: Optional[EventLog] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração de projeto.

    Política de resolução:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional e ignorado quando não existe
        - Quando presente, o local tem prioridade (deep-merge)

    Args:
        defaults_path (str): Caminho para o arquivo de configuração base.
        local_path (Optional[str]): Caminho opcional para overrides locais.
        events (Optional[EventLog]): Destino opcional dos eventos de carga.

    Returns:
        Dict[str, Any]: Mapa analyzer -> entrada de configuração.

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """
    defaults_file = Path(defaults_path)
    effective = _load_file(defaults_file)
    emit(
        events,
        source="config.loader",
        level="INFO",
        message="config.loaded",
        path=str(defaults_file),
        analyzers=sorted(map(str, effective)),
    )

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            local = _load_file(local_file)
            effective = deep_merge(effective, local)
            emit(
                events,
                source="config.loader",
                level="INFO",
                message="config.local_merged",
                path=str(local_file),
                analyzers=sorted(map(str, local)),
            )
        else:
            emit(
                events,
                source="config.loader",
                level="DEBUG",
                message="config.local_missing",
                path=str(local_file),
            )

    return effective
