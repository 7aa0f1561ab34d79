# src/addon_closure/core/__init__.py
"""
Core do Addon Closure.

Este pacote contém a implementação canônica do motor de grafo e validação
de dependências, reunindo as responsabilidades de resolução, comparação e
diagnóstico do fechamento de um addon.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de dependências de rede, UI ou serviços externos
    - orientado a contratos explícitos

Componentes principais:
    - identity    → identidade (offering, versão, flavor) de uma unidade implantável
    - addon       → árvore de configuração do addon e seus overrides
    - catalog     → contrato do gateway de metadados e gateway estático
    - graph       → resolução recursiva do grafo esperado
    - validation  → diff esperado vs. implantado
    - references  → parsing de referências e detecção de ciclos
    - config      → resolução de configuração (merge, validação estrutural, hashing)

Princípios fundamentais:
    - Nenhuma decisão silenciosa: toda política de habilitação é explícita e testada
    - Achados de validação nunca são exceções
    - Falhas de resolução abortam o build inteiro

Este pacote existe como a fonte de verdade operacional do Addon Closure.
"""
