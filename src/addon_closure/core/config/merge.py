# src/addon_closure/core/config/merge.py
"""
Deep-merge de configuração do Addon Closure.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total
    - escalar → sobrescrita direta
    - conflito de tipos → ConfigTypeConflictError

Usado para compor `DEFAULT_CONFIG` ← arquivo de defaults ← overrides locais
sem mutar nenhuma das camadas.
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any], *, _path: str = "") -> Dict[str, Any]:
    """
    Combina `base` e `override` em um novo dicionário.

    Decisões arquiteturais:
        - Nenhum input é mutado (cópias profundas)
        - `None` no override é tratado como escalar e sobrescreve
        - O caminho pontilhado da chave em conflito é reportado no erro

    Args:
        base (Dict[str, Any]): Camada base (ex.: defaults).
        override (Dict[str, Any]): Camada de maior precedência.

    Returns:
        Dict[str, Any]: Nova configuração resultante.

    Raises:
        ConfigTypeConflictError: Se a mesma chave possuir tipos incompatíveis.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    merged: Dict[str, Any] = deepcopy(base)

    for key, incoming in override.items():
        where = f"{_path}.{key}" if _path else str(key)

        if key not in merged:
            merged[key] = deepcopy(incoming)
            continue

        current = merged[key]

        if isinstance(current, dict) and isinstance(incoming, dict):
            merged[key] = deep_merge(current, incoming, _path=where)
            continue

        if isinstance(incoming, list) or incoming is None or current is None:
            merged[key] = deepcopy(incoming)
            continue

        if isinstance(current, dict) or isinstance(incoming, dict) or type(current) is not type(incoming):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{where}': "
                f"{type(current).__name__} vs {type(incoming).__name__}"
            )

        merged[key] = deepcopy(incoming)

    return merged
