"""
Core do schema-checker.

Execução genérica de grafos de Tasks, independente do warehouse.

Componentes:
    - config     → carregamento, merge e hashing de configuração
    - pipeline   → contratos de Task, resultados, contexto e grafo
    - engine     → planejamento (Kahn) e execução sequencial fail-soft
    - errors     → ErrorPayload e catálogo de códigos estáveis
    - exceptions → exceções tipadas mapeáveis para ErrorPayload

Limites explícitos:
    - Não conhece entry types nem schemas de tabela
    - Não importa clientes de warehouse
"""
