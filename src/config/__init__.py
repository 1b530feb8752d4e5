"""
Configuração do projeto Ponto Inteligente.

Módulos:
- settings: Configurações Django
- urls: Rotas principais
- wsgi: WSGI application
- container: Dependency Injection Container
"""
