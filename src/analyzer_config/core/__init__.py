# src/analyzer_config/core/__init__.py
"""
Core do Analyzer Config.

Componentes principais:
    - config  → config paths, cópia de árvores, walker, loader e deep-merge
    - project → referências de arquivo, matcher de overrides e `Project`
    - events  → event log estruturado (carga de config e construção de projeto)

Princípios fundamentais:
    - Resolução é leitura pura sobre uma cópia privada da configuração
    - Falhas são exceções tipadas, nunca defaults silenciosos
"""
