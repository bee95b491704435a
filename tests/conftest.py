# tests/conftest.py
"""
Fixtures compartilhados para testes do Analyzer Config.

Este módulo define fixtures reutilizáveis que fornecem:
- mapas de configuração de analyzers já carregados
- conteúdos YAML de defaults e overrides locais
- projetos construídos sobre esses mapas

Decisões arquiteturais:
    - Fixtures de configuração são dicionários puros (sem I/O)
    - Conteúdos YAML são fornecidos como string; os testes de loader
      gravam esses conteúdos em `tmp_path`
    - Imports do core são realizados de forma lazy para melhorar a
      clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture depende de variáveis de ambiente
    - Dados retornados são determinísticos e isolados por teste
"""

import pytest


# =====================================================
# Configuração de analyzers (mapas já carregados)
# =====================================================

@pytest.fixture
def analyzers_config() -> dict:
    """
    Fixture que fornece um mapa de configuração semelhante ao uso real.

    Cobre os formatos de entrada suportados:
        - `php_analyzer`: config por arquivo + overrides (first-match-wins)
        - `x`: config por arquivo sem overrides
        - `css_analyzer`: apenas settings globais (sem `config`)
        - `js_analyzer`: overrides sem config base
        - `sensiolabs_security_checker`: entrada escalar

    Returns:
        dict: Mapa analyzer -> entrada de configuração.
    """
    return {
        "php_analyzer": {
            "enabled": True,
            "extensions": ["php"],
            "config": {
                "severity": "medium",
                "checks": {"unused_variables": True, "max_depth": 4},
            },
            "path_configs": [
                {
                    "paths": ["tests/*"],
                    "config": {"severity": "low"},
                },
                {
                    "paths": ["*"],
                    "config": {
                        "severity": "high",
                        "checks": {"unused_variables": False},
                    },
                },
            ],
        },
        "x": {
            "config": {"a": {"b": 1}},
        },
        "css_analyzer": {
            "enabled": False,
            "filter": {"paths": ["assets/*"]},
        },
        "js_analyzer": {
            "path_configs": [
                {"paths": ["lib/*.js", "vendor/*.js"], "config": {"strict": False}},
            ],
        },
        "sensiolabs_security_checker": True,
    }


@pytest.fixture
def project_files() -> list:
    return ["src/Foo.php", "tests/Foo.php", "lib/app.js", "assets/site.css"]


@pytest.fixture
def project(analyzers_config, project_files):
    """Projeto construído sobre `analyzers_config` e `project_files`."""
    from analyzer_config.core.project import Project

    return Project(project_files, analyzers_config)


# =====================================================
# Loader fixtures (conteúdos YAML)
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    Fixture que fornece um YAML de defaults semelhante a um `config.defaults.yaml`.

    Usado por:
        - Testes do loader de config
        - Testes de construção do Project a partir de arquivos

    Returns:
        str: Conteúdo YAML representando a configuração base.
    """
    return """\
php_analyzer:
  enabled: true
  config:
    severity: medium
  path_configs:
    - paths: ["tests/*"]
      config:
        severity: low
css_analyzer:
  enabled: false
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """YAML de override local: troca a lista de overrides e habilita o css_analyzer."""
    return """\
php_analyzer:
  path_configs:
    - paths: ["legacy/*"]
      config:
        severity: ignore
css_analyzer:
  enabled: true
"""
