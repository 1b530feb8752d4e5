"""
Django Models para o cadastro de Empresas e Funcionários.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/empresas e src/core/funcionarios.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Lógica de negócio fica nas Entities e Use Cases do Core
- Models são mapeados para/de Entities via Mappers
- Constraints de unicidade (CNPJ, CPF, email) são a garantia final
  contra cadastros concorrentes

Relacionamentos:
- EmpresaModel 1 ──── N FuncionarioModel
"""

from django.db import models
from django.utils import timezone


class PerfilChoices(models.TextChoices):
    """Choices para perfil de funcionário (espelha PerfilEnum do Core)."""
    ROLE_ADMIN = 'ROLE_ADMIN', 'Administrador'
    ROLE_USUARIO = 'ROLE_USUARIO', 'Usuário'


class EmpresaModel(models.Model):
    """
    Model Django para persistência de Empresas.

    Fields:
        id: Auto-incrementing PK
        cnpj: CNPJ (único)
        razao_social: Razão social
        data_criacao: Timestamp de criação
        data_atualizacao: Timestamp de última atualização
    """

    id = models.BigAutoField(primary_key=True)

    cnpj = models.CharField(
        max_length=18,
        unique=True,
        help_text="CNPJ da empresa"
    )

    razao_social = models.CharField(
        max_length=200,
        help_text="Razão social"
    )

    data_criacao = models.DateTimeField(
        default=timezone.now,
        help_text="Data/hora de criação"
    )

    data_atualizacao = models.DateTimeField(
        auto_now=True,
        help_text="Data/hora da última atualização"
    )

    class Meta:
        db_table = 'empresa'
        verbose_name = 'Empresa'
        verbose_name_plural = 'Empresas'
        ordering = ['razao_social']

    def __str__(self):
        return f"{self.razao_social} ({self.cnpj})"


class FuncionarioModel(models.Model):
    """
    Model Django para persistência de Funcionários.

    Fields:
        id: Auto-incrementing PK
        nome: Nome completo
        email: Email (único)
        cpf: CPF (único)
        senha: Hash BCrypt da senha
        perfil: Perfil de acesso (choices)
        valor_hora / qtd_horas_trabalho_dia / qtd_horas_almoco: Jornada (opcionais)
        empresa: Empresa dona do funcionário
        data_criacao / data_atualizacao: Timestamps
    """

    id = models.BigAutoField(primary_key=True)

    nome = models.CharField(
        max_length=200,
        help_text="Nome completo"
    )

    email = models.CharField(
        max_length=200,
        unique=True,
        help_text="Email (login)"
    )

    cpf = models.CharField(
        max_length=14,
        unique=True,
        help_text="CPF do funcionário"
    )

    senha = models.CharField(
        max_length=255,
        help_text="Hash da senha"
    )

    perfil = models.CharField(
        max_length=20,
        choices=PerfilChoices.choices,
        default=PerfilChoices.ROLE_USUARIO,
        help_text="Perfil de acesso"
    )

    valor_hora = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        help_text="Valor da hora trabalhada"
    )

    qtd_horas_trabalho_dia = models.FloatField(
        null=True,
        blank=True,
        help_text="Horas de trabalho por dia"
    )

    qtd_horas_almoco = models.FloatField(
        null=True,
        blank=True,
        help_text="Horas de almoço por dia"
    )

    empresa = models.ForeignKey(
        EmpresaModel,
        on_delete=models.CASCADE,
        related_name='funcionarios',
        help_text="Empresa do funcionário"
    )

    data_criacao = models.DateTimeField(
        default=timezone.now,
        help_text="Data/hora de criação"
    )

    data_atualizacao = models.DateTimeField(
        auto_now=True,
        help_text="Data/hora da última atualização"
    )

    class Meta:
        db_table = 'funcionario'
        verbose_name = 'Funcionário'
        verbose_name_plural = 'Funcionários'
        ordering = ['nome']

    def __str__(self):
        return f"{self.nome} <{self.email}>"
