"""
Core do examplegen.

Componentes principais:
    - config        → resolução de configuração (merge, validação, hashing)
    - catalog       → carregamento e validação do catálogo de recursos
    - examples      → transformação, resolução de referências e escrita
    - traceability  → relatório de geração e Event Log
    - context       → contexto do run (config, log estruturado, warnings)
    - exceptions    → exceções fatais tipadas
    - errors        → payload canônico de erro

Princípios fundamentais:
    - A saída é determinística e independente da ordem de registro
    - Falhas estruturais são fatais para o run inteiro
    - Referências não resolvíveis são mantidas literais e registradas
"""
