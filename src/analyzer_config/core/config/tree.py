# src/analyzer_config/core/config/tree.py
"""
Árvores de configuração: cópia privada e navegação por segmentos.

Uma ConfigTree é um mapa aninhado de chaves string para escalares,
listas ou outras ConfigTrees. Este módulo oferece:

    - `copy_tree`: cópia profunda da árvore, com chaves normalizadas para str
    - `walk_config`: descida chave a chave até o valor solicitado

Política de cópia:
    - dict, list, tuple e set são recriados recursivamente (mesmo tipo)
    - chaves int viram str ("1"), já que segmentos de config path são strings
    - chaves de outros tipos (bool, float, None) são rejeitadas
    - escalares são copiados via `deepcopy`

Política de navegação:
    - Segmentos vazios retornam a própria árvore
    - Chave ausente → MissingConfigPathError
    - Valor não-mapa com segmentos restantes → MissingConfigPathError
    - Nenhum default é aplicado aqui; default é responsabilidade do chamador

Invariantes:
    - A cópia não compartilha containers mutáveis com o input
    - O walker nunca muta a árvore

Limites explícitos:
    - Não faz parse de config paths
    - Não seleciona overrides por arquivo
"""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from typing import Any, Dict, Sequence

from .errors import InvalidProjectConfigError, MissingConfigPathError


def _normalize_key(key: Any, where: str) -> str:
    if isinstance(key, str):
        return key
    # bool é subclasse de int: `true:` em YAML não vira "True" nem "1"
    if isinstance(key, int) and not isinstance(key, bool):
        return str(key)
    raise InvalidProjectConfigError(
        f"{where or '<root>'}: chave de configuração inválida {key!r} "
        f"({type(key).__name__}); use strings ou inteiros"
    )


def copy_tree(value: Any, _where: str = "") -> Any:
    """
    Produz uma cópia profunda de uma árvore de configuração, pronta para
    ser navegada por segmentos de config path.

    Decisões arquiteturais:
        - Chaves inteiras (ex.: `1: low` em YAML) são convertidas para "1",
          para que `x.levels.1` resolva
        - Uma conversão que colida com uma chave str existente é erro

    Args:
        value (Any): Árvore ou valor bruto, tipicamente vindo do loader.

    Returns:
        Any: Estrutura equivalente, sem containers compartilhados com o input.

    Raises:
        InvalidProjectConfigError: Se houver chave de tipo não suportado ou
            colisão após a normalização.
    """
    if isinstance(value, Mapping):
        out: Dict[str, Any] = {}
        for key, child in value.items():
            name = _normalize_key(key, _where)
            child_where = f"{_where}.{name}" if _where else name
            if name in out:
                raise InvalidProjectConfigError(
                    f"{child_where}: chave duplicada após normalização para str"
                )
            out[name] = copy_tree(child, child_where)
        return out

    if isinstance(value, (list, tuple, set, frozenset)):
        return type(value)(copy_tree(child, _where) for child in value)

    return deepcopy(value)


def walk_config(tree: Any, segments: Sequence[str], full_path: str) -> Any:
    """
    Desce na árvore de configuração seguindo `segments`, um nível por vez.

    Decisões arquiteturais:
        - Lookup de segmento sobre um valor que não é mapa é ausência por
          definição (escalares e listas não são indexados)
        - O erro carrega o path completo e o prefixo percorrido com sucesso,
          no formato ".a.b" ("." quando nada foi percorrido)

    Args:
        tree (Any): Raiz da árvore (override, config base ou entrada global).
        segments (Sequence[str]): Chaves a consumir, em ordem.
        full_path (str): Config path original, usado apenas em diagnósticos.

    Returns:
        Any: Escalar ou subárvore alcançado após consumir todos os segmentos.

    Raises:
        MissingConfigPathError: se algum segmento não existir.
    """
    current = tree
    for depth, segment in enumerate(segments):
        if not isinstance(current, Mapping) or segment not in current:
            walked = "." + ".".join(segments[:depth])
            raise MissingConfigPathError(full_path, walked)

        current = current[segment]

    return current
