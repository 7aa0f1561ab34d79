# tests/core/config/test_config_loader.py
"""
Testes do carregador de configuração (load_config / load_settings).

Os testes asseguram que:
- sem arquivos, a configuração efetiva é `DEFAULT_CONFIG`
- defaults informado e ausente é erro
- local ausente é ignorado
- local tem precedência sobre defaults
- formatos e raízes inválidos são rejeitados
- valores fora do domínio das settings são rejeitados

Limites explícitos:
    - Não valida hashing
"""

import json

import pytest

try:
    from addon_closure.core.config import (
        DEFAULT_CONFIG,
        ClosureSettings,
        DefaultsNotFoundError,
        InvalidConfigRootTypeError,
        InvalidSettingsError,
        RequiredPolicy,
        UnsupportedConfigFormatError,
        load_config,
        load_settings,
    )
except Exception as e:  # noqa: BLE001
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config loader modules. Implement:\n"
            "- src/addon_closure/core/config/loader.py (load_config, load_settings)\n"
            "- src/addon_closure/core/config/settings.py (DEFAULT_CONFIG, ClosureSettings)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_load_config_without_files_returns_builtin_defaults():
    _require_imports()
    assert load_config() == DEFAULT_CONFIG


def test_load_config_missing_defaults_path_raises(tmp_path):
    _require_imports()
    with pytest.raises(DefaultsNotFoundError):
        load_config(defaults_path=str(tmp_path / "missing.yaml"))


def test_load_config_local_overrides_defaults(tmp_path):
    """
    Camadas: DEFAULT_CONFIG ← defaults.yaml ← local.json.

    Invariantes:
        - Chave definida só no defaults sobrevive
        - Chave definida no local vence
    """
    _require_imports()
    defaults = tmp_path / "closure.defaults.yaml"
    defaults.write_text("resolution:\n  install_kind: terraform\ndetection:\n  strict_mode: true\n", encoding="utf-8")
    local = tmp_path / "closure.local.json"
    local.write_text(json.dumps({"detection": {"strict_mode": False}}), encoding="utf-8")

    cfg = load_config(defaults_path=str(defaults), local_path=str(local))

    assert cfg["resolution"]["install_kind"] == "terraform"
    assert cfg["resolution"]["required_policy"] == "force_enable"
    assert cfg["detection"]["strict_mode"] is False


def test_load_config_missing_local_is_ignored(tmp_path):
    _require_imports()
    cfg = load_config(local_path=str(tmp_path / "closure.local.yaml"))
    assert cfg == DEFAULT_CONFIG


def test_load_config_empty_yaml_is_empty_layer(tmp_path):
    _require_imports()
    defaults = tmp_path / "empty.yml"
    defaults.write_text("", encoding="utf-8")
    assert load_config(defaults_path=str(defaults)) == DEFAULT_CONFIG


def test_load_config_unsupported_format(tmp_path):
    _require_imports()
    p = tmp_path / "closure.toml"
    p.write_text("x = 1", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(p))


def test_load_config_root_must_be_mapping(tmp_path):
    _require_imports()
    p = tmp_path / "closure.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(p))


def test_load_config_rejects_unknown_required_policy(tmp_path):
    _require_imports()
    p = tmp_path / "closure.yaml"
    p.write_text("resolution:\n  required_policy: ignore\n", encoding="utf-8")
    with pytest.raises(InvalidSettingsError):
        load_config(defaults_path=str(p))


def test_load_settings_materializes_typed_settings(tmp_path):
    _require_imports()
    p = tmp_path / "closure.yaml"
    p.write_text("resolution:\n  required_policy: error\n", encoding="utf-8")

    settings = load_settings(defaults_path=str(p))

    assert isinstance(settings, ClosureSettings)
    assert settings.required_policy is RequiredPolicy.ERROR
    assert settings.install_kind == "terraform"
    assert settings.strict_mode is True
    assert ClosureSettings.from_config(settings.to_dict()) == settings


def test_settings_from_config_rejects_non_bool_strict_mode():
    _require_imports()
    with pytest.raises(InvalidSettingsError):
        ClosureSettings.from_config({"detection": {"strict_mode": "yes"}})
