"""
Rastreabilidade de runs do examplegen.

Componentes:
    - report → GenerationReport e Event Log persistido em JSON
"""
