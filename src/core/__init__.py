"""
Core Domain Layer - O Hexágono.

Este pacote contém a lógica de negócio pura do Ponto Inteligente,
sem dependências de frameworks.
Características:
- Zero dependências externas (Django, bcrypt, etc.)
- 100% testável sem banco de dados
- Agnóstico a infraestrutura
"""
