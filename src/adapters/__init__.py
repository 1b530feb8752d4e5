"""
Adapters - Implementações de infraestrutura dos Ports do Core.

- security: Hash de senhas (bcrypt)
- django_app: Persistência (Django ORM) e API JSON
"""
