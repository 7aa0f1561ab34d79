# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de configuração.

Os testes asseguram que:
- dicionários são mesclados recursivamente
- listas e escalares são sobrescritos
- conflitos de tipo são rejeitados com o caminho da chave
- objetos de entrada não são mutados

Limites explícitos:
    - Não valida carregamento de arquivos
    - Não valida schema de settings
"""

import pytest

try:
    from addon_closure.core.config.merge import deep_merge
    from addon_closure.core.config.errors import ConfigTypeConflictError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    ConfigTypeConflictError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config merge modules. Implement:\n"
            "- src/addon_closure/core/config/merge.py (deep_merge)\n"
            "- src/addon_closure/core/config/errors.py (ConfigTypeConflictError)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_merge_nested_override_keeps_siblings():
    """
    Override de uma chave aninhada preserva as chaves irmãs e não muta entradas.

    Invariantes:
        - `resolution.install_kind` permanece do base
        - `base` e `override` saem intactos
    """
    _require_imports()
    base = {"resolution": {"install_kind": "terraform", "required_policy": "force_enable"}}
    override = {"resolution": {"required_policy": "error"}}

    out = deep_merge(base, override)

    assert out == {"resolution": {"install_kind": "terraform", "required_policy": "error"}}
    assert base == {"resolution": {"install_kind": "terraform", "required_policy": "force_enable"}}
    assert override == {"resolution": {"required_policy": "error"}}


def test_merge_list_is_replaced_not_concatenated():
    _require_imports()
    out = deep_merge({"tags": ["a", "b"]}, {"tags": ["c"]})
    assert out == {"tags": ["c"]}


def test_merge_new_keys_are_added():
    _require_imports()
    out = deep_merge({"detection": {"strict_mode": True}}, {"meta": {"owner": "qa"}})
    assert out == {"detection": {"strict_mode": True}, "meta": {"owner": "qa"}}


def test_merge_none_overrides_scalar():
    _require_imports()
    out = deep_merge({"a": 1}, {"a": None})
    assert out == {"a": None}


def test_merge_type_conflict_reports_dotted_path():
    """
    Dict sobrescrito por escalar é conflito estrutural e o erro nomeia a chave.
    """
    _require_imports()
    base = {"resolution": {"install_kind": {"name": "terraform"}}}
    override = {"resolution": {"install_kind": "terraform"}}

    with pytest.raises(ConfigTypeConflictError) as ei:
        deep_merge(base, override)

    assert "resolution.install_kind" in str(ei.value)


def test_merge_scalar_type_mismatch_raises():
    _require_imports()
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"detection": {"strict_mode": True}}, {"detection": {"strict_mode": "yes"}})
