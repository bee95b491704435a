# src/analyzer_config/core/config/merge.py
"""
Deep-merge da configuração local sobre os defaults do projeto.

Política de merge:
    - dict + dict → merge recursivo por chave
    - list        → sobrescrita total (inclui `path_configs`: a ordem de
                    first-match-wins vem inteira de uma única fonte)
    - escalar     → sobrescrita direta
    - conflito de tipos → ConfigTypeConflictError

Invariantes:
    - Nenhum input é mutado
    - Chaves não sobrescritas são preservadas
    - Conflitos interrompem o merge sem resultado parcial
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any], _prefix: str = "") -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois mapas de configuração.

    Decisões arquiteturais:
        - Listas nunca são mescladas elemento a elemento; concatenar listas
          de overrides alteraria silenciosamente qual override casa primeiro
        - `None` no override conta como tipo próprio (conflito com não-None)
        - A mensagem de conflito nomeia a chave completa (ex.: "php_analyzer.config")

    Args:
        base (Dict[str, Any]): Configuração base (defaults).
        override (Dict[str, Any]): Overrides locais.

    Returns:
        Dict[str, Any]: Novo dicionário resultante.

    Raises:
        ConfigTypeConflictError: Se a mesma chave tiver tipos incompatíveis.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        key_path = f"{_prefix}.{key}" if _prefix else str(key)

        if key not in result:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]

        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value, key_path)
            continue

        if isinstance(base_value, list) and isinstance(override_value, list):
            result[key] = deepcopy(override_value)
            continue

        # bool é subclasse de int, por isso a comparação é por tipo exato
        if type(base_value) is not type(override_value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key_path}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}"
            )

        result[key] = deepcopy(override_value)

    return result
