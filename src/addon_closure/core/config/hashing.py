# src/addon_closure/core/config/hashing.py
"""
Hash canônico da configuração efetiva.

O hash identifica a configuração usada em uma verificação e é gravado em
`CheckContext.meta["config_hash"]`, permitindo correlacionar resultados de
validação com a política (install kind, required policy, strict mode)
que os produziu.

Política (v1): JSON canônico (chaves ordenadas, separadores compactos,
UTF-8) + SHA-256 em hexadecimal.
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera o hash SHA-256 da configuração.

    Invariantes:
        - Configurações estruturalmente iguais produzem o mesmo hash
        - A ordem original das chaves não influencia o resultado
        - O retorno tem sempre 64 caracteres hexadecimais

    Raises:
        TypeError: Se `config` não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical = json.dumps(config, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
