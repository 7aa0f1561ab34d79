"""
Parser de referências entre configs.

Formato aceito (exato):

    ref:/configs/<configID>/<outputs|inputs>/<fieldName>

Qualquer outra string não é referência: `parse_reference` devolve `None`
e o chamador trata o valor como literal, nunca como erro.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

REFERENCE_PREFIX = "ref:"

_REFERENCE_RE = re.compile(r"ref:/configs/([^/\s]+)/(outputs|inputs)/([^/\s]+)")


class ReferenceKind(str, Enum):
    OUTPUTS = "outputs"
    INPUTS = "inputs"


@dataclass(frozen=True)
class Reference:
    config_id: str
    kind: ReferenceKind
    field_name: str
    raw: str


def parse_reference(raw: str) -> Optional[Reference]:
    if not isinstance(raw, str):
        return None
    m = _REFERENCE_RE.fullmatch(raw)
    if m is None:
        return None
    return Reference(config_id=m.group(1), kind=ReferenceKind(m.group(2)), field_name=m.group(3), raw=raw)
