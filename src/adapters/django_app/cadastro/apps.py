"""
Configuração do Django App para o Cadastro.
"""

from django.apps import AppConfig


class CadastroConfig(AppConfig):
    """Configuração do app Cadastro (empresas e funcionários)."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.cadastro'
    label = 'cadastro'
    verbose_name = 'Cadastro de Empresas'
