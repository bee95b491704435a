# tests/core/config/test_loader.py
"""
Testes do carregador de configuração de projeto (load_config).

Os testes asseguram que:
- o arquivo defaults é obrigatório
- o arquivo local é opcional e, quando presente, sobrescreve via deep-merge
- listas (incluindo `path_configs`) são sobrescritas integralmente
- formatos não suportados e raízes inválidas são rejeitados
- eventos de carga são registrados quando um EventLog é fornecido

Limites explícitos:
    - Não valida resolução de settings (ver testes de Project)
"""

import json
from pathlib import Path

import pytest

try:
    from analyzer_config.core.config.loader import load_config
    from analyzer_config.core.config.errors import (
        DefaultsNotFoundError,
        InvalidConfigRootTypeError,
        UnsupportedConfigFormatError,
        ConfigTypeConflictError,
    )
    from analyzer_config.core.events import EventLog
except Exception as e:  # noqa: BLE001
    load_config = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader de configuração e suas exceções tipadas estejam disponíveis.

    Falha imediatamente, com mensagem explícita, quando os módulos
    `loader`, `errors` ou `events` não podem ser importados.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/analyzer_config/core/config/loader.py (load_config)\n"
            "- src/analyzer_config/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_missing_defaults_raises(tmp_path: Path):
    _require_imports()
    with pytest.raises(DefaultsNotFoundError):
        load_config(defaults_path=str(tmp_path / "defaults.yaml"))


def test_load_defaults_only(tmp_path: Path, project_like_config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults))
    assert out["php_analyzer"]["config"] == {"severity": "medium"}
    assert out["php_analyzer"]["path_configs"][0]["paths"] == ["tests/*"]
    assert out["css_analyzer"]["enabled"] is False


def test_missing_local_is_ok(tmp_path: Path, project_like_config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")

    events = EventLog()
    out = load_config(
        defaults_path=str(defaults),
        local_path=str(tmp_path / "local.yaml"),
        events=events,
    )
    assert out["css_analyzer"]["enabled"] is False
    assert [e["message"] for e in events.events] == ["config.loaded", "config.local_missing"]


def test_load_defaults_and_local(
    tmp_path: Path, project_like_config_defaults_yaml, project_like_config_local_yaml
):
    """
    Verifica o merge defaults + local.

    O override local substitui a lista `path_configs` inteira (sem
    concatenação) e preserva as chaves não sobrescritas.
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")
    local.write_text(project_like_config_local_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(local))
    assert out["css_analyzer"]["enabled"] is True
    assert out["php_analyzer"]["enabled"] is True
    assert out["php_analyzer"]["config"] == {"severity": "medium"}
    assert out["php_analyzer"]["path_configs"] == [
        {"paths": ["legacy/*"], "config": {"severity": "ignore"}}
    ]


def test_load_json_defaults(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.json"
    defaults.write_text(
        json.dumps({"x": {"config": {"a": {"b": 1}}}}),
        encoding="utf-8",
    )

    assert load_config(defaults_path=str(defaults)) == {"x": {"config": {"a": {"b": 1}}}}


def test_empty_yaml_is_empty_config(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("", encoding="utf-8")

    assert load_config(defaults_path=str(defaults)) == {}


def test_invalid_root_type_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- just\n- a\n- list\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(defaults))


def test_unsupported_extension_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.toml"
    defaults.write_text("[php_analyzer]\nenabled = true\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(defaults))


def test_local_type_conflict_raises(tmp_path: Path, project_like_config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")
    local.write_text("php_analyzer:\n  config: off\n", encoding="utf-8")

    with pytest.raises(ConfigTypeConflictError):
        load_config(defaults_path=str(defaults), local_path=str(local))


def test_events_record_loaded_analyzers(
    tmp_path: Path, project_like_config_defaults_yaml, project_like_config_local_yaml
):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")
    local.write_text(project_like_config_local_yaml, encoding="utf-8")

    events = EventLog()
    load_config(defaults_path=str(defaults), local_path=str(local), events=events)

    loaded, merged = events.events
    assert loaded["message"] == "config.loaded"
    assert loaded["analyzers"] == ["css_analyzer", "php_analyzer"]
    assert loaded["path"] == str(defaults)
    assert merged["message"] == "config.local_merged"
    assert merged["source"] == "config.loader"
    assert merged["level"] == "INFO"
