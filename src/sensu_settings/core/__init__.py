# src/sensu_settings/core/__init__.py
"""
Core do Sensu Settings.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada (ambiente e validador são injetados)
    - livre de efeitos colaterais além do ambiente exportado

Componentes principais:
    - settings → merge, diff, acesso indiferente, categorias e loader
"""
