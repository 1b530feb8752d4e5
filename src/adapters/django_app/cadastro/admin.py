"""
Django Admin para empresas e funcionários.
"""

from django.contrib import admin

from .models import EmpresaModel, FuncionarioModel


class FuncionarioInline(admin.TabularInline):
    model = FuncionarioModel
    extra = 0
    fields = ['nome', 'email', 'cpf', 'perfil']
    readonly_fields = ['nome', 'email', 'cpf', 'perfil']
    can_delete = False
    show_change_link = True


@admin.register(EmpresaModel)
class EmpresaAdmin(admin.ModelAdmin):
    """Admin para EmpresaModel."""

    list_display = ['razao_social', 'cnpj', 'data_criacao']
    search_fields = ['razao_social', 'cnpj']
    readonly_fields = ['data_criacao', 'data_atualizacao']
    inlines = [FuncionarioInline]


@admin.register(FuncionarioModel)
class FuncionarioAdmin(admin.ModelAdmin):
    """Admin para FuncionarioModel. A senha (hash) nunca é exibida."""

    list_display = ['nome', 'email', 'cpf', 'perfil', 'empresa']
    list_filter = ['perfil']
    search_fields = ['nome', 'email', 'cpf', 'empresa__cnpj']
    exclude = ['senha']
    readonly_fields = ['data_criacao', 'data_atualizacao']
    list_select_related = ['empresa']
